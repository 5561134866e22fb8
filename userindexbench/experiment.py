"""Timing and memory experiments comparing hash tables and search trees."""

from __future__ import annotations

import argparse
import random
import struct
import sys
import time
from dataclasses import fields
from typing import Callable, Iterable, Optional, Sequence, TextIO

from userindexbench.bst import id_tree, screen_name_tree
from userindexbench.closed_hash import ClosedHashTable
from userindexbench.open_hash import OpenHashTable
from userindexbench.users import User, parse_line

DEFAULT_SIZES = (1000, 5000, 10000, 15000, 20000, 30000)
DEFAULT_REPETITIONS = 50
SEARCH_TABLE_SIZE = 40000
SEARCH_POOL = 10000
SEARCH_COUNT = 100
MISSING_COUNT = 100

INSERTION_HEADER = (
    "Cantidad,t_HC_ID,t_HC_SN,t_HA_ID,t_HA_SN,t_BST_ID,t_BTS_SN,"
    "s_Vec,s_HC_ID,s_HC_SN,s_HA_ID,s_HA_SN,s_BST_ID,s_BTS_SN"
)
SEARCH_HEADER = (
    "HC_ID_si(us),HC_SN_si(us),HA_ID_si(us),HA_SN_si(us),BST_ID_si(us),BST_SN_si(us)"
    ",HC_ID_no(us),HC_SN_no(us),HA_ID_no(us),HA_SN_no(us),BST_ID_no(us),BST_SN_no(us)"
)

_REFERENCE_SIZE = struct.calcsize("P")
_BUCKET_SIZE = sys.getsizeof([])
_NODE_SIZE = sys.getsizeof(object()) + 3 * _REFERENCE_SIZE
_TEXT_FIELDS = tuple(f.name for f in fields(User) if f.type in ("str", str))


def users_size(users: Sequence[User]) -> int:
    """Estimate the bytes held by a list of users and their text fields."""
    total = sys.getsizeof(users)
    for user in users:
        total += sys.getsizeof(user)
        total += sum(sys.getsizeof(getattr(user, name)) for name in _TEXT_FIELDS)
    return total


def random_indices(total: int, count: int, rng: Optional[random.Random] = None) -> list[int]:
    """Return *count* indices drawn uniformly from range(total), with repeats."""
    if total <= 0:
        raise ValueError("total must be positive")
    rng = rng if rng is not None else random.Random()
    return [rng.randint(0, total - 1) for _ in range(count)]


def load_users(path) -> list[User]:
    """Read every user from a CSV file, skipping its header line."""
    with open(path, encoding="utf-8", newline="") as handle:
        next(handle, None)
        return [parse_line(line.rstrip("\n")) for line in handle]


def _time_us(action: Callable, items: Iterable) -> int:
    start = time.perf_counter_ns()
    for item in items:
        action(item)
    return (time.perf_counter_ns() - start) // 1000


def run_insertion_experiments(
    users: Sequence[User],
    out: TextIO,
    repetitions: int = DEFAULT_REPETITIONS,
    sizes: Sequence[int] = DEFAULT_SIZES,
) -> None:
    """Time insertions into every structure and write one CSV row per size and run."""
    for size in sizes:
        if not 0 <= size <= len(users):
            raise ValueError(f"size {size} outside 0..{len(users)}")
    out.write(INSERTION_HEADER + "\n")
    for _ in range(repetitions):
        for size in sizes:
            data = list(users[:size])

            closed_id = ClosedHashTable(size)
            closed_sn = ClosedHashTable(size)
            open_id = OpenHashTable(size)
            open_sn = OpenHashTable(size)
            tree_id = id_tree()
            tree_sn = screen_name_tree()

            times = [
                _time_us(closed_id.insert_by_id, data),
                _time_us(closed_sn.insert_by_screen_name, data),
                _time_us(open_id.insert_by_id, data),
                _time_us(open_sn.insert_by_screen_name, data),
                _time_us(tree_id.insert, data),
                _time_us(tree_sn.insert, data),
            ]
            memory = [
                users_size(data),
                closed_id.capacity * _REFERENCE_SIZE,
                closed_sn.capacity * _REFERENCE_SIZE,
                open_id.capacity * _BUCKET_SIZE,
                open_sn.capacity * _BUCKET_SIZE,
                size * _NODE_SIZE,
                size * _NODE_SIZE,
            ]
            out.write(",".join(str(value) for value in [size, *times, *memory]) + "\n")


def run_search_experiments(
    users: Sequence[User],
    out: TextIO,
    repetitions: int = DEFAULT_REPETITIONS,
    rng: Optional[random.Random] = None,
) -> None:
    """Time successful and failed searches and write one CSV row per run."""
    if not users:
        raise ValueError("no users to search")
    table_size = max(SEARCH_TABLE_SIZE, len(users))
    closed_id = ClosedHashTable(table_size)
    closed_sn = ClosedHashTable(table_size)
    open_id = OpenHashTable(table_size)
    open_sn = OpenHashTable(table_size)
    tree_id = id_tree()
    tree_sn = screen_name_tree()

    for user in users:
        closed_id.insert_by_id(user)
        closed_sn.insert_by_screen_name(user)
        open_id.insert_by_id(user)
        open_sn.insert_by_screen_name(user)
        tree_id.insert(user)
        tree_sn.insert(user)

    indices = random_indices(min(SEARCH_POOL, len(users)), SEARCH_COUNT, rng)
    present_ids = [users[i].id for i in indices]
    present_names = [users[i].screen_name for i in indices]
    missing_ids = list(range(MISSING_COUNT))
    missing_names = [f"NoExiste@{i}" for i in range(MISSING_COUNT)]

    searches = [
        (closed_id.find_by_id, present_ids),
        (closed_sn.find_by_screen_name, present_names),
        (open_id.find_by_id, present_ids),
        (open_sn.find_by_screen_name, present_names),
        (tree_id.find, present_ids),
        (tree_sn.find, present_names),
        (closed_id.find_by_id, missing_ids),
        (closed_sn.find_by_screen_name, missing_names),
        (open_id.find_by_id, missing_ids),
        (open_sn.find_by_screen_name, missing_names),
        (tree_id.find, missing_ids),
        (tree_sn.find, missing_names),
    ]

    out.write(SEARCH_HEADER + "\n")
    for _ in range(repetitions):
        row = [_time_us(action, keys) for action, keys in searches]
        out.write(",".join(str(value) for value in row) + "\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the users and run both experiments, writing their CSV results."""
    parser = argparse.ArgumentParser(
        description="Compare insertion and search times of hash tables and trees."
    )
    parser.add_argument("--data", default="data.csv")
    parser.add_argument("--insertion-output", default="resultados_insercion.csv")
    parser.add_argument("--search-output", default="resultados_busqueda.csv")
    parser.add_argument("--repetitions", type=int, default=DEFAULT_REPETITIONS)
    parser.add_argument("--sizes", type=int, nargs="+", default=list(DEFAULT_SIZES))
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    print("loading users...")
    users = load_users(args.data)
    print("...users loaded")

    print("running insertion experiments...")
    with open(args.insertion_output, "w", encoding="utf-8", newline="") as out:
        run_insertion_experiments(users, out, args.repetitions, args.sizes)
    print("...insertion experiments finished")

    print("running search experiments...")
    with open(args.search_output, "w", encoding="utf-8", newline="") as out:
        run_search_experiments(users, out, args.repetitions, random.Random(args.seed))
    print("...search experiments finished")

    print("done")
    return 0


if __name__ == "__main__":
    sys.exit(main())