# cielcontainers

Container utilities with explicit capacity rules, a thread-safe
reference-counting control block and a non-owning observer handle.

## Contents

- `cielcontainers.inplace_base`: `InplaceVectorBase`, a sequence whose
  capacity is fixed when it is created, and `CapacityError`, which is raised
  by any operation that would grow it past that capacity. It provides
  `filled`, `at`, `front`, `back`, `resize`, `assign`, `assign_fill`,
  `push_back`, `try_push_back` (returns `False` when full instead of
  raising), `pop_back` and `clear`.
- `cielcontainers.inplace_vector`: `InplaceVector` adds positional
  `insert`, `emplace`, `insert_fill`, `insert_range`, `append_range`,
  `erase`, `erase_range` and `swap`. `try_append_range` appends as much as
  fits and returns an iterator over the rest. The module also has the free
  functions `erase` and `erase_if`, which return the number of elements removed.
- `cielcontainers.vector_base`: `VectorBase`, a growable sequence that
  tracks a capacity. A full vector grows to twice its capacity, or to exactly
  what is needed if that is larger. Requests beyond `max_size()` raise
  `LengthError`.
- `cielcontainers.vector`: `Vector` adds `resize`, positional insertion and
  erasure, and `swap`. Its `str()` lists the elements and the spare
  capacity. The module has its own `erase` and `erase_if`.
- `cielcontainers.control_block`: `ControlBlock` keeps the strong and weak
  counts for one managed object. When the strong count reaches zero it
  calls the optional deleter with the object and drops its reference to it.
- `cielcontainers.observer_ptr`: `ObserverPtr` and `make_observer`. An
  observer watches an object without owning it and compares, orders and
  hashes by object identity.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from cielcontainers.inplace_base import CapacityError
from cielcontainers.inplace_vector import InplaceVector, erase_if

v = InplaceVector(8, [0, 1, 2, 3, 4])
v.insert(1, 5)                  # [0, 5, 1, 2, 3, 4]
v.insert_fill(len(v), 2, 9)     # now full: 8 elements
erase_if(v, lambda x: x == 9)   # returns 2
try:
    v.insert_range(0, range(10))
except CapacityError:
    pass                        # v is unchanged
```

```python
from cielcontainers.vector import Vector

v = Vector(range(3))
v.push_back(3)
print(v)                        # Vector: [ 0, 1, 2, 3, __2__ ]
```

```python
from cielcontainers.control_block import ControlBlock

closed = []
block = ControlBlock([1, 2], closed.append)
block.weak_add_ref()
block.shared_release()          # deleter runs: closed == [[1, 2]]
assert block.managed() is None
assert not block.increment_if_not_zero()
block.weak_release()            # the block is finished
```

```python
from cielcontainers.observer_ptr import make_observer

obj = object()
o = make_observer(obj)
assert o.get() is obj
assert o.release() is obj and not o
```

## What this package does not do

There are no shared or weak ownership handle classes. `ControlBlock` does
the counting that such handles would rely on, but callers must call
`shared_add_ref`, `shared_release`, `weak_add_ref` and `weak_release`
themselves.