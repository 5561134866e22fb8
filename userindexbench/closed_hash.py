"""Closed hash table (open addressing, linear probing) of users."""

from __future__ import annotations

from typing import Callable, Iterator, Optional

from userindexbench.murmur import murmurhash3_x64_128
from userindexbench.users import User

ID_SEED = 0x9747B28C
SCREEN_NAME_SEED = 0x5BD1E995
LOAD_FACTOR = 0.6

_MASK64 = 0xFFFFFFFFFFFFFFFF
_TOMBSTONE = object()


class TableFullError(RuntimeError):
    """Raised when no free slot is left for an insertion."""


class ClosedHashTable:
    """Linear-probing hash table holding users, indexed by id or by screen name.

    Deleted slots become tombstones: searches probe past them, insertions reuse them.
    """

    def __init__(self, num_elements: int) -> None:
        if num_elements < 0:
            raise ValueError("num_elements must not be negative")
        self._capacity = int(num_elements / LOAD_FACTOR) + 1
        self._slots: list = [None] * self._capacity

    @property
    def capacity(self) -> int:
        """Number of slots in the table."""
        return self._capacity

    def _probe(self, key: str, seed: int) -> Iterator[int]:
        base = murmurhash3_x64_128(key, seed)[0]
        for attempt in range(self._capacity):
            yield ((base + attempt) & _MASK64) % self._capacity

    def _insert(self, key: str, seed: int, user: User) -> None:
        for index in self._probe(key, seed):
            slot = self._slots[index]
            if slot is None or slot is _TOMBSTONE:
                self._slots[index] = user
                return
        raise TableFullError(f"no free slot for key {key!r}")

    def _find(
        self, key: str, seed: int, matches: Callable[[User], bool]
    ) -> Optional[User]:
        for index in self._probe(key, seed):
            slot = self._slots[index]
            if slot is None:
                return None
            if slot is not _TOMBSTONE and matches(slot):
                return slot
        return None

    def _remove(self, key: str, seed: int, matches: Callable[[User], bool]) -> bool:
        for index in self._probe(key, seed):
            slot = self._slots[index]
            if slot is not None and slot is not _TOMBSTONE and matches(slot):
                self._slots[index] = _TOMBSTONE
                return True
        return False

    def insert_by_id(self, user: User) -> None:
        """Insert *user* keyed by its id; raise TableFullError if no slot is free."""
        self._insert(str(user.id), ID_SEED, user)

    def insert_by_screen_name(self, user: User) -> None:
        """Insert *user* keyed by its screen name; raise TableFullError if full."""
        self._insert(user.screen_name, SCREEN_NAME_SEED, user)

    def find_by_id(self, user_id: int) -> Optional[User]:
        """Return the user with *user_id*, or None."""
        return self._find(str(user_id), ID_SEED, lambda u: u.id == user_id)

    def find_by_screen_name(self, name: str) -> Optional[User]:
        """Return the user with screen name *name*, or None."""
        return self._find(name, SCREEN_NAME_SEED, lambda u: u.screen_name == name)

    def remove_by_id(self, user_id: int) -> bool:
        """Remove one user with *user_id*; return whether one was found."""
        return self._remove(str(user_id), ID_SEED, lambda u: u.id == user_id)

    def remove_by_screen_name(self, name: str) -> bool:
        """Remove one user with screen name *name*; return whether one was found."""
        return self._remove(name, SCREEN_NAME_SEED, lambda u: u.screen_name == name)