from lazylink.chain import Node, NodeChain
from lazylink.errors import OutOfRangeError, ForeignNodeError

from pytest import raises


def values(chain):
    return [node.value for node in chain]

def test_insert():
    chain = NodeChain()
    assert chain.head is None
    assert chain.last() is None
    assert chain.size() == 0

    chain.insert_back(2)
    chain.insert_front(1)
    chain.insert_back(3)
    assert values(chain) == [1, 2, 3]
    assert chain.last().value == 3
    assert chain.size() == len(chain) == 3

def test_nodes_belong_to_chain():
    chain = NodeChain([1, 2])
    assert all(node.chain is chain for node in chain)
    assert all(node.alive for node in chain)

def test_find():
    chain = NodeChain([5, 6, 5])
    assert chain.find(5) is chain.head
    assert chain.find(6) is chain.head.next
    assert chain.find(7) is None
    assert NodeChain().find(5) is None

def test_at():
    chain = NodeChain('abc')
    assert chain.at(0).value == 'a'
    assert chain.at(2).value == 'c'
    with raises(OutOfRangeError): chain.at(3)
    with raises(OutOfRangeError): chain.at(-1)
    with raises(IndexError): NodeChain().at(0)

def test_remove():
    chain = NodeChain([1, 2, 3, 4])
    middle = chain.at(1)
    chain.remove(middle)
    assert values(chain) == [1, 3, 4]
    assert not middle.alive
    assert middle.next is None

    chain.remove(chain.head)
    assert values(chain) == [3, 4]
    chain.remove(chain.last())
    assert values(chain) == [3]
    chain.remove(chain.head)
    assert chain.head is None

def test_remove_foreign():
    chain = NodeChain([1, 2])
    other = NodeChain([1, 2])
    with raises(ForeignNodeError): chain.remove(other.head)
    with raises(ForeignNodeError): chain.remove(Node(1))
    with raises(ForeignNodeError): chain.remove(None)

    node = chain.head
    chain.remove(node)
    with raises(ForeignNodeError): chain.remove(node)
    assert values(chain) == [2]
    assert values(other) == [1, 2]

def test_precedes():
    chain = NodeChain('abc')
    a, b, c = chain
    assert chain.precedes(a, c)
    assert chain.precedes(a, b)
    assert not chain.precedes(c, a)
    assert not chain.precedes(b, b)
    assert chain.precedes(c, None)
    assert not chain.precedes(None, a)
    assert not chain.precedes(None, None)

def test_clear():
    chain = NodeChain(range(5))
    nodes = list(chain)
    chain.clear()
    assert chain.head is None
    assert chain.size() == 0
    assert not any(node.alive for node in nodes)
    assert all(node.next is None for node in nodes)

def test_repr():
    assert repr(NodeChain([1, 'a'])) == "NodeChain([1, 'a'])"
    assert repr(Node(1)) == 'Node(1)'
