from lazylink.errors import OutOfRangeError, ForeignNodeError


class Node:
    __slots__ = 'value', 'next', 'chain'
    __match_args__ = 'value', 'next'

    def __init__(self, value, next=None, chain=None):
        self.value = value
        self.next = next
        self.chain = chain

    @property
    def alive(self):
        return self.chain is not None

    def __repr__(self):
        if self.next is None:
            return f'Node({self.value!r})'
        return f'Node({self.value!r}, ...)'


class NodeChain:
    """Singly linked chain of Nodes, owning every node reachable from head.

    Only the head is stored.  Appending walks to the last node and size()
    walks the whole chain; there is no cached tail or count to keep in
    sync with erasure.
    """
    __slots__ = 'head',

    def __init__(self, values=()):
        self.head = None
        for value in values:
            self.insert_back(value)

    def insert_front(self, value):
        node = Node(value, self.head, self)
        self.head = node
        return node

    def insert_back(self, value):
        last = self.last()
        if last is None:
            return self.insert_front(value)

        node = Node(value, None, self)
        last.next = node
        return node

    def last(self):
        node = self.head
        if node is None:
            return None
        while node.next is not None:
            node = node.next
        return node

    def find(self, value):
        for node in self:
            if node.value == value:
                return node
        return None

    def at(self, index):
        size = self.size()
        if not 0 <= index < size:
            raise OutOfRangeError.index(index=index, size=size)

        node = self.head
        for _ in range(index):
            node = node.next
        return node

    def remove(self, node):
        if node is None or node.chain is not self:
            raise ForeignNodeError('Node does not belong to this list', node)

        prev = None
        current = self.head
        while current is not node:
            if current is None:
                # Claims to be ours but isn't linked, so the chain is broken
                raise ForeignNodeError('Node is not linked into this list', node)
            prev, current = current, current.next

        if prev is None:
            self.head = node.next
        else:
            prev.next = node.next
        self._release(node)

    def precedes(self, first, last):
        # None is the position past the last node
        if first is None or first is last:
            return False
        node = first.next
        while node is not None:
            if node is last:
                return True
            node = node.next
        return last is None

    def clear(self):
        nodes = self._iter(self.head)
        self.head = None
        for node in nodes:
            self._release(node)

    def size(self):
        count = 0
        for _ in self:
            count += 1
        return count

    # Indirectly implemented as a static method so that a suspended
    # iteration doesn't keep the chain alive through self.  The successor
    # is read before yielding, so the yielded node may be released.
    @staticmethod
    def _iter(node):
        while node is not None:
            next_node = node.next
            yield node
            node = next_node

    def __iter__(self):
        return self._iter(self.head)

    def __len__(self):
        return self.size()

    def __repr__(self):
        return f'NodeChain([{", ".join(repr(node.value) for node in self)}])'

    @staticmethod
    def _release(node):
        node.next = None
        node.chain = None
