import dataclasses as dc

from lazylink.chain import Node
from lazylink.errors import InvalidCursorError


@dc.dataclass(eq=False)
class Cursor:
    """A position in a LazyList: a node, or None for the end cursor.

    Cursors don't own anything.  Erasing the node a cursor points at, or
    moving the list it belongs to, invalidates it, after which any use
    raises InvalidCursorError.
    """
    node: Node | None
    owner: 'LazyList' = dc.field(repr=False, compare=False)

    @property
    def at_end(self):
        return self.node is None

    @property
    def valid(self):
        return self.node is None or self.node.chain is self.owner.chain

    def _check(self, action):
        if self.node is None:
            raise InvalidCursorError.at_end(self, action=action)
        if self.node.chain is not self.owner.chain:
            raise InvalidCursorError.invalidated(self)

    @property
    def value(self):
        self._check('dereference')
        return self.node.value

    @value.setter
    def value(self, value):
        self._check('assign through')
        self.node.value = value

    def advance(self):
        self._check('advance')
        # Stepping off the materialized prefix generates the next node
        if self.node.next is None:
            self.owner.resume()
        self.node = self.node.next
        return self

    def __add__(self, count):
        if not isinstance(count, int):
            return NotImplemented
        if count < 0:
            raise ValueError('Cursors only move forward')

        cursor = self.copy()
        for _ in range(count):
            if cursor.at_end:
                break
            cursor.advance()
        return cursor

    def copy(self):
        return Cursor(self.node, self.owner)

    def __eq__(self, other):
        if not isinstance(other, Cursor):
            return NotImplemented
        return self.node is other.node and (
            self.node is not None or self.owner is other.owner
        )
