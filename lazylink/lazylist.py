import functools

from lazylink.chain import NodeChain
from lazylink.cursor import Cursor
from lazylink.generator import GeneratorSlot
from lazylink.errors import InvalidCursorError, ForeignNodeError, NotCopyableError


def lazy_list(func):
    """Decorate a generator function so that calling it returns a LazyList.

        @lazy_list
        def tens():
            for i in range(10):
                yield i * 10
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        return LazyList(func(*args, **kwargs))
    return wrapper


class LazyList:
    """A linked list whose tail is produced on demand by a generator.

    Values are pulled from the generator only when a cursor walks off the
    last materialized node (or begin() is called on an empty list), and
    are then kept as ordinary nodes that can be edited, erased and
    indexed.  size(), len() and indexing only ever see the materialized
    prefix.

    find() and iteration keep generating until they are satisfied, so an
    unmatched find() on an infinite generator never returns.
    """

    def __init__(self, iterable=()):
        self.chain = NodeChain()
        self._slot = GeneratorSlot(iterable)

    # generator utilities

    @property
    def done(self):
        return self._slot.finished

    @property
    def result(self):
        """Return value of the generator, once it has finished."""
        return self._slot.result

    def resume(self):
        if self.done:
            return
        self.chain.insert_back(self._slot.current)
        self._slot.step()

    def exhaust(self, limit=None):
        size = self.size()
        while not self.done and (limit is None or size < limit):
            self.resume()
            size += 1
        return size

    def close(self):
        self._slot.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    # list utilities

    def push_front(self, value):
        self.chain.insert_front(value)

    def push_back(self, value):
        self.chain.insert_back(value)

    def emplace_front(self, factory, /, *args, **kwargs):
        return self.chain.insert_front(factory(*args, **kwargs)).value

    def emplace_back(self, factory, /, *args, **kwargs):
        return self.chain.insert_back(factory(*args, **kwargs)).value

    def find(self, value):
        cursor = self.begin()
        while not cursor.at_end:
            if cursor.value == value:
                break
            cursor.advance()
        return cursor

    def index(self, index):
        return self[index]

    def __getitem__(self, index):
        if not isinstance(index, int):
            raise TypeError('LazyList indices must be integers')
        return self.chain.at(index).value

    def __setitem__(self, index, value):
        if not isinstance(index, int):
            raise TypeError('LazyList indices must be integers')
        self.chain.at(index).value = value

    def erase(self, first, last=None):
        if last is None:
            self._remove(first)
            return

        self._check_owned(first)
        self._check_owned(last)
        if not self.chain.precedes(first.node, last.node):
            self._remove(first)
            return

        node = first.node
        while node is not last.node:
            next_node = node.next
            self.chain.remove(node)
            node = next_node

    def clear(self):
        self.chain.clear()

    def size(self):
        return self.chain.size()

    def __len__(self):
        return self.chain.size()

    def __bool__(self):
        # Pending values count, even though len() does not see them
        return self.chain.head is not None or not self.done

    def materialized(self):
        """Iterate over the values that have already been generated."""
        for node in self.chain:
            yield node.value

    # iterator utilities

    def begin(self):
        if self.chain.head is None:
            self.resume()
        return Cursor(self.chain.head, self)

    def end(self):
        return Cursor(None, self)

    def __iter__(self):
        cursor = self.begin()
        while not cursor.at_end:
            yield cursor.value
            cursor.advance()

    # ownership

    def move(self):
        """Transfer the nodes and the generator to a new LazyList.

        This list is left empty and done.  Cursors into this list are not
        carried over and become invalid.
        """
        moved = LazyList.__new__(type(self))
        moved.chain, moved._slot = self.chain, self._slot
        self.chain = NodeChain()
        self._slot = GeneratorSlot.finished_slot()
        return moved

    def __copy__(self):
        raise NotCopyableError('A suspended generator cannot be copied')

    def __deepcopy__(self, memo):
        raise NotCopyableError('A suspended generator cannot be copied')

    def __repr__(self):
        values = [repr(value) for value in self.materialized()]
        if not self.done:
            values.append('...')
        return f'LazyList([{", ".join(values)}])'

    def _check_owned(self, cursor):
        if cursor.owner is not self:
            raise ForeignNodeError('Cursor belongs to a different list', cursor)
        if not cursor.valid:
            raise InvalidCursorError.invalidated(cursor)

    def _remove(self, cursor):
        self._check_owned(cursor)
        if cursor.at_end:
            raise InvalidCursorError.at_end(cursor, action='erase')
        self.chain.remove(cursor.node)
