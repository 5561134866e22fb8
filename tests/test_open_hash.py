import pytest

from userindexbench.open_hash import OpenHashTable
from userindexbench.users import User


def _users(count):
    return [User(id=1000 + i, screen_name=f"user{i}") for i in range(count)]


def test_capacity_follows_load_factor():
    assert OpenHashTable(10).capacity == 17


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        OpenHashTable(-1)


def test_find_by_id_returns_inserted_users():
    users = _users(50)
    table = OpenHashTable(len(users))
    for user in users:
        table.insert_by_id(user)
    for user in users:
        assert table.find_by_id(user.id) is user
    assert table.find_by_id(5) is None


def test_find_by_screen_name_returns_inserted_users():
    users = _users(50)
    table = OpenHashTable(len(users))
    for user in users:
        table.insert_by_screen_name(user)
    for user in users:
        assert table.find_by_screen_name(user.screen_name) is user
    assert table.find_by_screen_name("NoExiste@0") is None


def test_chaining_holds_more_users_than_buckets():
    users = _users(40)
    table = OpenHashTable(1)
    for user in users:
        table.insert_by_id(user)
        table.insert_by_screen_name(user)
    assert all(table.find_by_id(u.id) is u for u in users)
    assert all(table.find_by_screen_name(u.screen_name) is u for u in users)


def test_key_kinds_are_separate():
    user = User(id=7, screen_name="seven")
    table = OpenHashTable(4)
    table.insert_by_id(user)
    assert table.find_by_screen_name("seven") is None
    assert table.remove_by_screen_name("seven") is False
    assert table.find_by_id(7) is user


def test_remove_by_id():
    users = _users(10)
    table = OpenHashTable(10)
    for user in users:
        table.insert_by_id(user)
    assert table.remove_by_id(users[3].id) is True
    assert table.find_by_id(users[3].id) is None
    assert table.remove_by_id(users[3].id) is False
    assert all(table.find_by_id(u.id) is u for u in users if u is not users[3])


def test_remove_by_screen_name():
    users = _users(10)
    table = OpenHashTable(10)
    for user in users:
        table.insert_by_screen_name(user)
    assert table.remove_by_screen_name("user4") is True
    assert table.find_by_screen_name("user4") is None
    assert table.remove_by_screen_name("user4") is False
    assert table.find_by_screen_name("user5") is users[5]


def test_duplicates_found_in_insertion_order():
    first = User(id=1, screen_name="twin")
    second = User(id=1, screen_name="twin")
    table = OpenHashTable(2)
    table.insert_by_id(first)
    table.insert_by_id(second)
    assert table.find_by_id(1) is first
    assert table.remove_by_id(1) is True
    assert table.find_by_id(1) is second