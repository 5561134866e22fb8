import io
import random

import pytest

from userindexbench.experiment import (
    INSERTION_HEADER,
    SEARCH_HEADER,
    load_users,
    main,
    random_indices,
    run_insertion_experiments,
    run_search_experiments,
    users_size,
)
from userindexbench.users import User


def _line(user_id):
    text = (
        f'{user_id},""user{user_id}"",[""tag""],avatar.png,10,20,en,'
        f'1600000000,""{user_id + 500}"",[""1""]'
    )
    return f'"{text}"'


def _write_data(path, count):
    lines = ["header"] + [_line(i) for i in range(1, count + 1)]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


def _users(count):
    return [User(id=i, screen_name=f"user{i}") for i in range(1, count + 1)]


def test_users_size_grows_with_users():
    assert users_size(_users(10)) > users_size(_users(5)) > users_size([])


def test_users_size_grows_with_text():
    short = [User(id=1, screen_name="a")]
    long = [User(id=1, screen_name="a" * 200)]
    assert users_size(long) > users_size(short)


def test_random_indices_in_range():
    indices = random_indices(10, 200, random.Random(1))
    assert len(indices) == 200
    assert all(0 <= i < 10 for i in indices)


def test_random_indices_reproducible():
    first = random_indices(1000, 50, random.Random(7))
    second = random_indices(1000, 50, random.Random(7))
    assert len(first) == 50
    assert all(0 <= i < 1000 for i in first)
    assert len(set(first)) > 1
    assert first == second


def test_random_indices_rejects_empty_range():
    with pytest.raises(ValueError):
        random_indices(0, 5)


def test_load_users(tmp_path):
    path = tmp_path / "data.csv"
    _write_data(path, 3)
    users = load_users(path)
    assert [u.id for u in users] == [1, 2, 3]
    assert users[1].screen_name == "user2"
    assert users[2].tweet_id == 503


def test_insertion_output_shape():
    out = io.StringIO()
    run_insertion_experiments(_users(20), out, repetitions=2, sizes=(5, 10))
    lines = out.getvalue().splitlines()
    assert lines[0] == INSERTION_HEADER
    rows = [line.split(",") for line in lines[1:]]
    assert [row[0] for row in rows] == ["5", "10", "5", "10"]
    assert all(len(row) == 14 for row in rows)
    assert all(int(value) >= 0 for row in rows for value in row)


def test_insertion_memory_grows_with_size():
    out = io.StringIO()
    run_insertion_experiments(_users(20), out, repetitions=1, sizes=(5, 20))
    small, large = (line.split(",") for line in out.getvalue().splitlines()[1:])
    assert all(int(b) > int(a) for a, b in zip(small[7:], large[7:]))


def test_insertion_rejects_size_beyond_data():
    with pytest.raises(ValueError):
        run_insertion_experiments(_users(3), io.StringIO(), repetitions=1, sizes=(4,))


def test_search_output_shape():
    out = io.StringIO()
    run_search_experiments(_users(30), out, repetitions=3, rng=random.Random(2))
    lines = out.getvalue().splitlines()
    assert lines[0] == SEARCH_HEADER
    rows = [line.split(",") for line in lines[1:]]
    assert len(rows) == 3
    assert all(len(row) == 12 for row in rows)
    assert all(int(value) >= 0 for row in rows for value in row)


def test_search_rejects_no_users():
    with pytest.raises(ValueError):
        run_search_experiments([], io.StringIO(), repetitions=1)


def test_main_writes_both_files(tmp_path):
    data = tmp_path / "data.csv"
    insertion = tmp_path / "insertion.csv"
    search = tmp_path / "search.csv"
    _write_data(data, 12)
    code = main(
        [
            "--data", str(data),
            "--insertion-output", str(insertion),
            "--search-output", str(search),
            "--repetitions", "2",
            "--sizes", "4", "12",
            "--seed", "3",
        ]
    )
    assert code == 0
    insertion_lines = insertion.read_text(encoding="utf-8").splitlines()
    search_lines = search.read_text(encoding="utf-8").splitlines()
    assert insertion_lines[0] == INSERTION_HEADER
    assert len(insertion_lines) == 1 + 2 * 2
    assert search_lines[0] == SEARCH_HEADER
    assert len(search_lines) == 1 + 2