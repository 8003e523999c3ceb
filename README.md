# compactdict

A small hash table laid out the way compact dictionaries are:

- a **sparse index array** (twice as many slots as entries) holding small
  integers, each slot only as wide as the entry count needs (1, 2, 4 or 8 bytes),
- a **dense entry array** holding the key/value pairs,
- open addressing with perturbed probing (`PERTURB_SHIFT = 5`),
- a free list of deleted entry slots that later inserts reuse.

The package also contains the pieces the table is made from: the DJBX33A
string hash, a doubly linked list of integers that tracks its middle node,
and an in-place quicksort ordered by a key function.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The table

```python
from compactdict.table import Table, TableFullError
from compactdict.djbx33a import djbx33a

table = Table(8, 0.75, djbx33a)   # these are also the defaults: Table()
table.update("alpha", 1)
table.update("beta", 2)
table.update("alpha", 10)         # replaces the value, keeps the entry's place

table.get("alpha")                # 10
"beta" in table                   # True
len(table)                        # 2
list(table)                       # ["alpha", "beta"]
list(table.items())               # [("alpha", 10), ("beta", 2)]

table.delete("alpha")
table.get("alpha")                # raises KeyError
table.resize()                    # doubles capacity in place
```

- `get` and `delete` raise `KeyError` for a missing key.
- Iteration and `items()` follow the dense entry array. A deleted entry's
  slot is reused by the next insert, so after deletions that order is not
  always insertion order; `resize()` reinserts the live entries sorted by the
  order in which each key was first stored.
- `hash_function` may be any callable returning an integer for a key; keys
  are compared with `==`. The default, `djbx33a`, takes `str` or `bytes`.

## Limits

The table does not grow on its own. It holds at most `length` entries; once
every entry slot is in use, `update` with a new key raises `TableFullError`,
and the caller must call `resize()` first. `load_factor` is stored on the
table but nothing acts on it. Nothing is saved to disk.

## The building blocks

```python
from compactdict.djbx33a import djbx33a
from compactdict.linked_list import IntLinkedList
from compactdict.quicksort import quicksort
from compactdict.util import next_power_of_2, size_index, index_width, IndexType

djbx33a("")                 # 0 for the empty key
# keys longer than 10 bytes are hashed by their length alone

next_power_of_2(100)        # 128
size_index(200)             # 1
index_width(200)            # 2 bytes per index slot
IndexType.UNUSED            # -1, marks a never-used index slot

items = IntLinkedList([1, 2, 3, 4])
items.push(0)
items.append(5)
items.center()              # 2, the value at index ceil(len / 2) - 1
items[-1]                   # 5
list(reversed(items))       # [5, 4, 3, 2, 1, 0]
items.insert_at(9, 2)       # insert before index 2
items.remove_at(2)          # 9
items.pop()                 # 0, from the front
items.remove_tail()         # 5, from the back
items.format_lines()        # ["Node 0 : 1", "Node 1 : 2", ...]

data = [5, 3, 9, 1]
quicksort(data, lambda x: x, 0, len(data) - 1)   # end index is inclusive
data                        # [1, 3, 5, 9]
```

`compactdict.entry` holds `Entry` (a key, a value and an insertion counter),
`EntryManager` (the fixed-size dense array) and `entry_order`, the sort key
that puts entries back in insertion order.