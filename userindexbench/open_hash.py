"""Open hash table (separate chaining) of users."""

from __future__ import annotations

from typing import Callable, Optional

from userindexbench.closed_hash import ID_SEED, LOAD_FACTOR, SCREEN_NAME_SEED
from userindexbench.murmur import murmurhash3_x64_128
from userindexbench.users import User


class OpenHashTable:
    """Chained hash table holding users, with one bucket array per key kind.

    Users inserted by id are only found by id, and users inserted by screen
    name are only found by screen name.
    """

    def __init__(self, num_elements: int) -> None:
        if num_elements < 0:
            raise ValueError("num_elements must not be negative")
        self._capacity = int(num_elements / LOAD_FACTOR) + 1
        self._by_id: list[list[User]] = [[] for _ in range(self._capacity)]
        self._by_screen_name: list[list[User]] = [[] for _ in range(self._capacity)]

    @property
    def capacity(self) -> int:
        """Number of buckets in each bucket array."""
        return self._capacity

    def _bucket(self, buckets: list[list[User]], key: str, seed: int) -> list[User]:
        return buckets[murmurhash3_x64_128(key, seed)[0] % self._capacity]

    @staticmethod
    def _remove_from(bucket: list[User], matches: Callable[[User], bool]) -> bool:
        for position, user in enumerate(bucket):
            if matches(user):
                del bucket[position]
                return True
        return False

    def insert_by_id(self, user: User) -> None:
        """Add *user* to the bucket chosen by its id."""
        self._bucket(self._by_id, str(user.id), ID_SEED).append(user)

    def insert_by_screen_name(self, user: User) -> None:
        """Add *user* to the bucket chosen by its screen name."""
        self._bucket(self._by_screen_name, user.screen_name, SCREEN_NAME_SEED).append(
            user
        )

    def find_by_id(self, user_id: int) -> Optional[User]:
        """Return the first user inserted with *user_id*, or None."""
        bucket = self._bucket(self._by_id, str(user_id), ID_SEED)
        return next((user for user in bucket if user.id == user_id), None)

    def find_by_screen_name(self, name: str) -> Optional[User]:
        """Return the first user inserted with screen name *name*, or None."""
        bucket = self._bucket(self._by_screen_name, name, SCREEN_NAME_SEED)
        return next((user for user in bucket if user.screen_name == name), None)

    def remove_by_id(self, user_id: int) -> bool:
        """Remove one user with *user_id*; return whether one was found."""
        bucket = self._bucket(self._by_id, str(user_id), ID_SEED)
        return self._remove_from(bucket, lambda user: user.id == user_id)

    def remove_by_screen_name(self, name: str) -> bool:
        """Remove one user with screen name *name*; return whether one was found."""
        bucket = self._bucket(self._by_screen_name, name, SCREEN_NAME_SEED)
        return self._remove_from(bucket, lambda user: user.screen_name == name)