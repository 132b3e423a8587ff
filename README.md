# algolab

A small collection of classic algorithms and data structures in plain Python,
with no dependencies beyond the standard library.

- **Sorting** (`algolab.sort`): `bubble_sort`, `selection_sort`, `merge_sort`
  (stable), `quick_sort` (last element as pivot) and `heap_sort`. All of them sort a
  mutable sequence in place and return `None`. `generate_random_numbers(num, minimum, maximum)`
  builds test data. Integer bounds give integers in `[minimum, maximum]`. Float bounds
  give floats in `[minimum, maximum)`. It raises `TypeError` for bounds that are not
  numbers, and `ValueError` for a negative count or for `minimum > maximum`.
- **Iterative quicksort** (`algolab.sort_iterative.quick_sort`): picks a
  median-of-three pivot and uses an explicit work stack in place of recursion.
- **Introsort** (`algolab.introsort.intro_sort`): starts as quicksort and switches to
  heapsort when the recursion gets too deep. Ranges of up to 17 elements are finished
  with insertion sort. `insertion_sort(arr, low, high)` sorts the inclusive sub-range
  `arr[low..high]`.
- **HashSet** (`algolab.hashset.HashSet`): a separately chained hash set guarded by a
  lock. Its bucket count grows through a fixed table of primes, starting at 11, once
  the number of keys exceeds `capacity() * load_factor`. The default load factor is 0.7.
  The default hasher is `thomas_wang_hash`, which accepts integers only and raises
  `TypeError` for anything else. Pass `hasher=` to store other keys.
- **Vector** (`algolab.vector.Vector`): a growable sequence with an explicit capacity
  (default 1741) and a growth policy from `CapacityMethod`:
  - `DOUBLE` doubles the capacity when the vector is full.
  - `LOG` adds `log2(capacity)` to it.

  It also provides `average` and `median`.

## Installation

```
pip install .
```

## Usage

```python
from algolab.sort import merge_sort, generate_random_numbers
from algolab.introsort import intro_sort

data = generate_random_numbers(1000, 1, 10000)
merge_sort(data)
assert data == sorted(data)

words = ["banana", "kiwi", "apple"]
intro_sort(words)
print(words)  # ['apple', 'banana', 'kiwi']
```

```python
from algolab.hashset import HashSet

numbers = HashSet()
numbers.insert(10)      # True
numbers.insert(10)      # False, already present
print(10 in numbers)    # True
numbers.remove(10)      # True
print(len(numbers), numbers.capacity(), numbers.load_factor())

names = HashSet(hasher=hash)   # any hashable keys with a custom hasher
names.insert("anna")
print(list(names))             # iterate over a snapshot of the keys
names.display()                # print each bucket's chain to stdout
names.clear()                  # empty it and return to 11 buckets
```

The hash set logs its inserts, lookups and removals at DEBUG level through the
`algolab.hashset` logger.

```python
from algolab.vector import Vector, CapacityMethod

values = Vector(2, CapacityMethod.DOUBLE)
for value in (1.0, 2.0, 3.0, 4.0):
    values.push_back(value)
print(values.front(), values.back())      # 1.0 4.0
print(values.average(), values.median())  # 2.5 2.5
values.shrink_to_fit()
print(values.capacity())                  # 4
```

`Vector` supports the following operations:

- Indexing and assignment.
- `len`, iteration and `copy.copy`.
- `pop_back`, `erase(index)`, `clear`, `swap(other)` and `reserve(new_capacity)`.
- `emplace_back(factory, *args, **kwargs)`, which builds the element, appends it and
  returns it.

It raises these errors:

- `IndexError` from `front`, `back`, indexing or `erase` when the index or element is
  missing.
- `ValueError` from `average` and `median` when the vector is empty.
- `OverflowError` if the capacity would exceed 2**32 - 1.

## What this package does not do

It is a library only. It has no command-line program and no benchmarking or
reporting tools.

## Running the tests

```
pip install ".[test]"
pytest
```