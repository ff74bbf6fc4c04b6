from toomanylists.second import Node, Stack


def _stack(*values):
    stack = Stack()
    for value in values:
        stack.push(value)
    return stack


def test_basics():
    stack = _stack(1, 2, 3)
    assert [stack.pop() for _ in range(4)] == [3, 2, 1, None]

    for value in (4, 5, 6):
        stack.push(value)
    assert [stack.pop() for _ in range(4)] == [6, 5, 4, None]


def test_clear_empties_stack():
    stack = _stack(*range(1, 7))
    stack.clear()
    assert (len(stack), stack.pop(), list(stack)) == (0, None, [])


def test_pop_node():
    stack = _stack(1, 2, 3, 4)
    node = stack.pop_node()
    assert isinstance(node, Node)
    assert (node.elem, node.next) == (4, None)
    assert list(stack) == [3, 2, 1]


def test_pop_node_empty():
    assert Stack().pop_node() is None


def test_peek():
    stack = Stack()
    assert (stack.peek(), stack.peek_node()) == (None, None)
    stack = _stack(1, 2, 3, 4)
    assert stack.peek() == 4
    assert stack.peek_node().elem == 4

    stack.peek_node().elem = 5
    assert stack.peek() == 5
    assert stack.pop() == 5


def test_drain():
    stack = _stack(1, 2, 3)
    assert list(stack.drain()) == [3, 2, 1]
    assert len(stack) == 0


def test_iter():
    stack = _stack(1, 2, 3)
    it = iter(stack)
    assert [next(it, None) for _ in range(4)] == [3, 2, 1, None]
    assert list(stack) == [3, 2, 1]


def test_nodes_allow_mutation():
    stack = _stack(1, 2, 3)
    it = stack.nodes()
    assert [next(it).elem, next(it).elem] == [3, 2]

    next(it).elem += 10

    assert list(stack.drain()) == [3, 2, 11]


def test_len_and_repr():
    stack = _stack("a", "b")
    assert len(stack) == 2
    assert repr(stack) == "Stack(['b', 'a'])"