"""Errors raised by the board core."""

from __future__ import annotations

from typing import Any


class BoardError(Exception):
    """Base class for every error raised by the board core."""


class InvalidPropertyError(BoardError, ValueError):
    """Raised when resolving, clearing or setting an unknown property name."""

    def __init__(self, name: Any, allowed: tuple[str, ...] = ()) -> None:
        self.name = name
        self.allowed = allowed
        message = f"Unrecognised property {name!r}"
        if allowed:
            message += f": allowed values are {', '.join(allowed)}"
        super().__init__(message)


class InvalidSortCallableError(BoardError, TypeError):
    """Raised when a sort callable takes neither one nor two arguments."""

    def __init__(self, name: str, arity: int) -> None:
        self.name = name
        self.arity = arity
        super().__init__(
            f"{name} has an arity of {arity}, must take either 1 or 2 arguments."
        )


class UngroupedColumnError(BoardError, RuntimeError):
    """Raised when grouped views are requested from a column with no group_by."""

    def __init__(self, column: str) -> None:
        self.column = column
        super().__init__(
            f"Attempted to return grouped projects from column {column}, "
            "but no group_by method defined."
        )
