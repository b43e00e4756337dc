"""Canonical group handles used to partition a column's projects."""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from typing import Any


class Group:
    """
    Identity-bearing wrapper around a group key.

    Groups are compared and hashed by identity; the registry guarantees that
    equal keys always map to the same instance.
    """

    __slots__ = ("name",)

    def __init__(self, name: Hashable) -> None:
        self.name = name

    def __str__(self) -> str:
        return str(self.name)

    def __repr__(self) -> str:
        return f"Group({self.name!r})"


class GroupRegistry:
    """
    Intern table for groups.

    Not safe for concurrent mutation: callers drive interning from a single
    thread while the board is being built.
    """

    def __init__(self) -> None:
        self._groups: dict[Hashable, Group] = {}

    def intern(self, key: Any) -> Group:
        """
        Return the canonical group for ``key``.

        Args:
            key: Any hashable value, or an existing Group (returned as-is)

        Returns:
            The same Group instance for every equal key
        """
        if isinstance(key, Group):
            return key
        group = self._groups.get(key)
        if group is None:
            group = self._groups[key] = Group(key)
        return group

    def __contains__(self, key: Any) -> bool:
        return key in self._groups

    def __len__(self) -> int:
        return len(self._groups)

    def __iter__(self) -> Iterator[Group]:
        return iter(self._groups.values())


# Global instance accessor
_groups = GroupRegistry()


def get_group_registry() -> GroupRegistry:
    """Get the process-wide group registry."""
    return _groups


def intern_group(key: Any) -> Group:
    """Intern ``key`` in the process-wide group registry."""
    return _groups.intern(key)
