"""Unbalanced binary search trees of users, ordered by a key function."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

from userindexbench.users import User

KeyFunc = Callable[[User], Any]


class _Node:
    __slots__ = ("user", "left", "right")

    def __init__(self, user: User) -> None:
        self.user = user
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None


class BinarySearchTree:
    """Plain binary search tree; equal keys go to the right subtree."""

    def __init__(self, key: KeyFunc) -> None:
        self._key = key
        self._root: Optional[_Node] = None
        self._size = 0

    def insert(self, user: User) -> None:
        """Add *user* to the tree."""
        node = _Node(user)
        self._size += 1
        if self._root is None:
            self._root = node
            return
        key = self._key(user)
        current = self._root
        while True:
            if key < self._key(current.user):
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def find(self, key: Any) -> Optional[User]:
        """Return the first user met whose key equals *key*, or None."""
        current = self._root
        while current is not None:
            current_key = self._key(current.user)
            if key == current_key:
                return current.user
            current = current.left if key < current_key else current.right
        return None

    def remove(self, key: Any) -> bool:
        """Remove one user whose key equals *key*; return whether one was found."""
        parent: Optional[_Node] = None
        current = self._root
        while current is not None:
            current_key = self._key(current.user)
            if key == current_key:
                break
            parent = current
            current = current.left if key < current_key else current.right
        if current is None:
            return False

        if current.left is not None and current.right is not None:
            successor_parent = current
            successor = current.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            current.user = successor.user
            if successor_parent is current:
                successor_parent.right = successor.right
            else:
                successor_parent.left = successor.right
        else:
            child = current.left if current.left is not None else current.right
            if parent is None:
                self._root = child
            elif parent.left is current:
                parent.left = child
            else:
                parent.right = child

        self._size -= 1
        return True

    def __iter__(self) -> Iterator[User]:
        """Yield the users in key order (in-order traversal)."""
        stack: list[_Node] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            node = stack.pop()
            yield node.user
            current = node.right

    def __len__(self) -> int:
        return self._size


def id_tree() -> BinarySearchTree:
    """Return an empty tree ordered by user id."""
    return BinarySearchTree(lambda user: user.id)


def screen_name_tree() -> BinarySearchTree:
    """Return an empty tree ordered by screen name."""
    return BinarySearchTree(lambda user: user.screen_name)