# stlkit

Small, dependency-free container and concurrency building blocks for Python 3.10 and later.

## Contents

Containers:

- `stlkit.linked`: `Deque` (doubly linked, iterable forwards and with `reversed()`), `SimpleList` (singly linked) and `Stack` (iterates from top to bottom). Popping from, or reading the ends of, an empty container raises `IndexError`.
- `stlkit.ordered`: `SimpleMap`, an unbalanced binary-search-tree map whose iteration yields `(key, value)` pairs in key order. `find` returns `None` for a missing key, and inserting a key that is already present keeps the old value. `SimpleSet` keeps unique values in sorted order.
- `stlkit.hashed`: `SimpleUnorderedMap` and `SimpleUnorderedSet`, separate-chaining hash tables with ten buckets. `SimpleUnorderedMap.insert` replaces the value of an existing key, `get` raises `KeyError` for a missing key, and `erase` ignores missing keys.
- `stlkit.vectors`:
  - `MyVector`, a growable array whose capacity starts at zero and doubles when full, with `insert`, `erase`, `front`, `back`, `clear` and `copy`.
  - `SimpleVector`, which starts with a reserved capacity (10 by default) and has `reserve`.
  - `MyArray`, a fixed-capacity array whose `push_back` returns `False` and stores nothing once it is full.
- `stlkit.dynarray`: `DynamicArray`, an integer array with `filled`, `moved_from` (which leaves the source empty), `copy`, `assign` and `render`. `SharedValue` shows the difference between a shallow copy, which shares storage, and a deep copy, which does not.

Numbers:

- `stlkit.complexnum`: `Complex`, with `+`, `==`, `increment` and `post_increment`, `assign`, and `Complex.parse("3 4")`. `str()` gives text such as `3+i`, `3+5i`, `3-i`, `3-4i` or `3`. `format_number` formats a float with `%g`.

Concurrency:

- `stlkit.concurrency`:
  - `SharedCounter` and `run_counters(num_threads, increments)`.
  - `ProducerConsumer`, a bounded buffer with `produce(count)` and `consume(count)`.
  - `ThreadPool`, whose `submit` returns a `concurrent.futures.Future` and raises `RuntimeError` after `shutdown`.
  - `TaskScheduler`, with `submit` and `submit_with_dependency`.
  - `lock_all(*locks)`, a context manager that takes several locks without deadlock.
  - `quick_sort(values)`, which returns a new sorted list.
- `stlkit.workqueue`:
  - `ThreadSafeQueue`, with `push`, `try_pop`, `wait_and_pop` and `empty`.
  - `PollingPool`, whose `close` stops the workers without running tasks still queued.
  - `Singleton`, whose `get_instance(value)` creates one instance per class and ignores the value on later calls.

## Installation

```
pip install .
```

## Examples

```python
from stlkit.linked import Deque

deq = Deque()
deq.push_back(1)
deq.push_back(2)
deq.push_front(0)
assert deq.front() == 0 and deq.back() == 2
deq.pop_front()
deq.pop_back()
assert list(deq) == [1]
```

Removing from an empty container raises `IndexError`:

```python
from stlkit.linked import Stack

stack = Stack()
stack.push(1)
stack.pop()
stack.pop()  # raises IndexError
```

Ordered and hashed maps:

```python
from stlkit.ordered import SimpleMap
from stlkit.hashed import SimpleUnorderedMap

tree = SimpleMap()
tree.insert(10, "ten")
tree.insert(20, "twenty")
tree.insert(5, "five")
assert [key for key, _ in tree] == [5, 10, 20]
assert tree.find(20) == "twenty"

table = SimpleUnorderedMap()
table.insert(2, "two")
assert table.get(2) == "two"
table.erase(2)
assert 2 not in table
```

A thread pool used as a context manager:

```python
from stlkit.concurrency import ThreadPool

with ThreadPool(4) as pool:
    total = pool.submit(lambda a, b: a + b, 3, 7)
    assert total.result() == 10
```

## What it does not do

stlkit is a library only. It has no command-line program, and its containers keep everything in memory.

## Running the tests

```
pip install ".[test]"
pytest
```