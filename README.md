# stdext

Small helpers that build common containers and value wrappers in one call.
The package also has console input and output helpers, call helpers and a
path joiner. It is a library only and has no command-line program.

## Installation

```
pip install stdext
```

## Collections

`stdext.collections` returns built-in or `sortedcontainers` types wherever
one fits.

```python
from stdext.collections import (
    hash_map, b_tree_map, hash_set, b_tree_set,
    binary_heap, linked_list, vector, vector_deque, string,
)

scores = hash_map(("a", 1), ("b", 2))           # dict; later keys overwrite earlier ones
scores["a"]                                     # 1

ordered = b_tree_map(("b", "b"), ("a", "a"))    # SortedDict, keys kept in order
tags = b_tree_set("b", "a")                     # SortedSet
seen = hash_set(1, 2, 3)                        # set

items = vector(1, 2, 3)                         # [1, 2, 3]
queue = vector_deque(1, 2, 3)                   # deque([1, 2, 3])
chain = linked_list(1, 2, 3)                    # deque, items appended in order
greeting = string("Hello")                      # "Hello"; string() gives ""
```

`binary_heap(...)` returns a `BinaryHeap`, a max-heap:

```python
heap = binary_heap(5, 3, 8, 1)
heap.peek()              # 8, the greatest item, left in place
heap.push(10)
heap.pop()               # 10
len(heap)                # 4
heap.into_sorted_vec()   # [1, 3, 5, 8]
```

`pop()` and `peek()` on an empty heap raise `IndexError`.

## Holders and cells

`stdext.cells` provides:

- `arc(value)`, `rc(value)` and `boxed(value)`. Each returns a frozen
  `Shared` holder. Its `.value` is the wrapped value, and two holders are
  equal when their values are equal.
- `cell(value)`. It returns a `Cell` with `get()`, `set(value)` and
  `replace(value)`. `replace` returns the previous value.
- `refcell(value)`. It returns a `RefCell` whose borrows are checked at run
  time.

```python
from stdext.cells import arc, cell, refcell

arc(1) == arc(1)       # True
arc(1).value           # 1

counter = cell(5)
counter.set(10)
counter.get()          # 10

slot = refcell(5)
slot.replace(10)       # returns 5
with slot.borrow() as shared:
    shared.value       # 10
with slot.borrow_mut() as exclusive:
    exclusive.value = 20
```

Any number of shared borrows may be active at once, or one exclusive borrow
alone. The following raise `BorrowError`:

- starting a borrow that conflicts with an active one;
- calling `replace` while any borrow is active;
- assigning through a shared borrow;
- using a borrow after it has been released.

A borrow is released when its `with` block ends or when `release()` is
called on it.

## Locks

`stdext.sync` wraps a value in a thread-safe lock. Every lock method returns
a `LockGuard`. Its `.value` reads the wrapped value and, on a writable guard,
assigns it. The guard releases the lock when its `with` block ends or when
`release()` is called on it.

```python
from stdext.sync import mutex, rw_lock

m = mutex(5)
with m.lock() as guard:
    guard.value        # 5
    guard.value = 6

lock = rw_lock(5)
with lock.write() as guard:
    guard.value = 10
with lock.read() as guard:
    guard.value        # 10
```

`RwLock.read()` lets many readers in at once. `RwLock.write()` waits until
no reader or writer holds the lock.

The following raise errors:

- assigning through a read guard raises `AttributeError`;
- using a guard after release raises `RuntimeError`.

## Console

```python
from stdext.console import cin, cin_parse, cin_parse_list, cout, endl, cout_endl

line = cin()                       # one line from stdin, newline kept; "" at end of input

cin_parse_list("1 2 3", int)       # [1, 2, 3]
cin_parse_list("1 x 3", int)       # [1, 3]; tokens that do not parse are skipped
cin_parse("12", int)               # 12
cin_parse("abc", int)              # 0, the value of int()

cout("Name: {}, Age: {}", "Alice", 30)   # str.format, written and flushed
endl()                                   # writes "\n" and flushes
cout_endl("done")                        # formatted text, then a newline
```

Parsing is strict:

- text with surrounding whitespace does not parse;
- `bool` accepts only `"true"` and `"false"`;
- `str` takes the text as it is.

## Calling functions

```python
from stdext.execute import execute, execute_async

execute(sum, [1, 2, 3])                                                    # 6
execute(lambda data, offset: sum(x + offset for x in data), [1, 2, 3], 10)  # 36

async def shifted(data, offset):
    return sum(x + offset for x in data)

# inside a coroutine:
# await execute_async(shifted, [1, 2, 3], 1)   -> 9
```

## Paths

```python
from stdext.paths import join_paths

join_paths("/home/", "/user/", "/documents", "file.txt")
# "/home/user/documents/file.txt"
join_paths("C:/", "/Program Files", "App")
# "C:/Program Files/App"
```

`join_paths` makes these changes:

- it strips trailing `/` and `\` from the base;
- it strips leading `/` and `\` from each segment;
- it joins the parts with a single `/`;
- it turns every backslash into `/`.

At least one segment after the base is required. Calling it without one
raises `TypeError`.

## Running the tests

```
pip install -e ".[test]"
pytest
```