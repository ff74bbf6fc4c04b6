# toomanylists

A small library of linked data structures, each built from nodes:

- `toomanylists.first.IntStack` is a singly linked stack of 32-bit signed integers.
- `toomanylists.second.Stack` is a singly linked stack of any values. It supports
  peeking, iteration over values and over nodes, and draining.
- `toomanylists.third.PersistentList` is an immutable list. Its versions share
  their tails.
- `toomanylists.fourth.Deque` is a doubly linked deque. It supports pushes, pops,
  peeks and replacements at both ends, and has a `Drain` that empties it from
  either end.

Popping or peeking an empty structure returns `None`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

### Integer stack

```python
from toomanylists.first import IntStack

stack = IntStack()
stack.push(1)
stack.push(2)
stack.pop()        # 2
node = stack.pop_node()
node.elem          # 1
node.next          # None: the node comes back detached
stack.pop()        # None
```

`push` accepts only integers that fit in 32 bits:

- A non-integer, including `bool`, raises `TypeError`.
- An integer out of range raises `OverflowError`.

`clear` removes the nodes from the top down and prints `Dropping <n>` for each
one. The stack also clears itself this way when it is garbage collected.

### Generic stack

```python
from toomanylists.second import Stack

stack = Stack()
stack.push(1)
stack.push(2)
stack.push(3)

len(stack)         # 3
stack.peek()       # 3
list(stack)        # [3, 2, 1]

for node in stack.nodes():
    node.elem *= 10   # change values in place
list(stack)        # [30, 20, 10]

stack.peek_node().elem = 5
stack.pop()        # 5
stack.pop_node()   # the node that held 20, detached from the rest
list(stack.drain())  # [10]; the stack is now empty
stack.pop()        # None
```

`clear` empties the stack without returning anything.

### Persistent list

```python
from toomanylists.third import PersistentList

base = PersistentList().prepend(1).prepend(2)
longer = base.prepend(3)

longer.head()          # 3
list(longer)           # [3, 2, 1]
list(longer.tail())    # [2, 1]
list(base)             # [2, 1], unchanged
PersistentList().tail().head()  # None
```

An empty `PersistentList` is false in a boolean context.

### Deque

```python
from toomanylists.fourth import Deque

deque = Deque()
deque.push_front(1)
deque.push_front(2)
deque.push_back(0)

deque.peek_front()     # 2
deque.peek_back()      # 0
deque.set_back(10)
list(deque)            # [2, 1, 10]
len(deque)             # 3

drain = deque.drain()
next(drain)            # 2
drain.next_back()      # 10
list(drain)            # [1]
len(deque)             # 0
```

`set_front` and `set_back` raise `IndexError` on an empty deque. `clear` removes
every element.