# userindexbench

Measures how long it takes to index and look up user records with three
kinds of structure:

- `ClosedHashTable` (`userindexbench.closed_hash`): open addressing with
  linear probing. Removed entries leave tombstones, which later searches
  probe past and later insertions reuse. An insertion into a full table
  raises `TableFullError`.
- `OpenHashTable` (`userindexbench.open_hash`): separate chaining, with one
  bucket array for ids and another for screen names. A user inserted by id
  is found only by id, and a user inserted by screen name only by screen name.
- `BinarySearchTree` (`userindexbench.bst`): an unbalanced tree ordered by a
  key function. `id_tree()` orders by user id and `screen_name_tree()` by
  screen name. Equal keys go to the right. Iterating over a tree yields the
  users in key order, and `len()` gives the number of users in it.

Both hash tables get `int(num_elements / 0.6) + 1` slots (exposed as
`capacity`). They hash their keys with the x64 128-bit MurmurHash3 from
`userindexbench.murmur`, with one seed for ids and another for screen names.
That module also provides `murmurhash3_x86_32` and `murmurhash3_x86_128`.
Each of these functions accepts `str` (encoded as UTF-8) or bytes.

Records are `User` dataclasses (`userindexbench.users`). `parse_line` builds
one from a line of the users CSV export and raises `ValueError` when the line
is malformed.

## Installation

```
pip install .
```

## Running the experiments

```
userindexbench
```

The command reads `data.csv` from the working directory. The first line of
the file is a header, and it is skipped. Every line after it is parsed with
`parse_line`. The command then writes two files:

- `resultados_insercion.csv` has one row for each repetition and each sample
  size. A row holds the time in microseconds that each structure took to
  insert the first *n* users, once keyed by id and once keyed by screen name.
  It also holds estimated sizes in bytes: the user list itself, the slot
  array of each hash table, and the tree nodes.
- `resultados_busqueda.csv` has one row per repetition. A row holds the
  times in microseconds for 100 successful lookups and for 100 failed
  lookups in each structure, once by id and once by screen name. The
  successful lookups use users picked at random from the first 10000.
  The failed lookups use the ids 0–99 and the names `NoExiste@0` to
  `NoExiste@99`.

Options:

| Option | Default | Meaning |
| --- | --- | --- |
| `--data PATH` | `data.csv` | input file |
| `--insertion-output PATH` | `resultados_insercion.csv` | insertion results |
| `--search-output PATH` | `resultados_busqueda.csv` | search results |
| `--repetitions N` | `50` | runs of each experiment |
| `--sizes N [N ...]` | `1000 5000 10000 15000 20000 30000` | insertion sample sizes |
| `--seed N` | random | seed for choosing the users to search for |

A sample size larger than the number of loaded users raises `ValueError`.

The same runs are available from Python as `load_users`,
`run_insertion_experiments` and `run_search_experiments` in
`userindexbench.experiment`. The two `run_` functions write their CSV rows
to any text stream.

## Using the structures directly

```python
from userindexbench.users import parse_line
from userindexbench.closed_hash import ClosedHashTable
from userindexbench.open_hash import OpenHashTable
from userindexbench.bst import id_tree

users = [parse_line(line) for line in lines]

table = OpenHashTable(len(users))
for user in users:
    table.insert_by_screen_name(user)
table.find_by_screen_name(users[0].screen_name)

closed = ClosedHashTable(len(users))
for user in users:
    closed.insert_by_id(user)
closed.remove_by_id(users[0].id)

tree = id_tree()
for user in users:
    tree.insert(user)
tree.find(users[0].id)
tree.remove(users[0].id)
```

Here `lines` is the list of record lines from the data file, without the
header.

A lookup returns the matching `User`, or `None` if there is no match. A
removal returns `True` if it found an entry to remove.

## Tests

```
pip install .[test]
pytest
```