"""
Block properties: per-instance callable settings with an explicit inherit marker.

A block property holds one of three tagged states:

- ``UNSET``: nothing configured (``None`` was assigned), meaning "disabled".
- ``INHERIT``: defer to the global fallback of the same name.
- ``CONCRETE``: a user-supplied callable.

Reading the attribute returns whatever was last assigned (``None``, the
``INHERIT`` sentinel, or the callable). Resolution against the global
fallbacks is done by :meth:`omniboard.board.column.Column.resolve`.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from functools import cmp_to_key
from typing import Any, Final, TypeVar

from .errors import InvalidSortCallableError

T = TypeVar("T")

INHERITED_PROPERTIES: Final[tuple[str, ...]] = (
    "sort",
    "mark_when",
    "dim_when",
    "icon",
    "group_by",
    "sort_groups",
)
BLOCK_PROPERTIES: Final[tuple[str, ...]] = ("conditions", *INHERITED_PROPERTIES)
SORT_PROPERTIES: Final[tuple[str, ...]] = ("sort", "sort_groups")


class Inherit(Enum):
    """Marker type for the inherit sentinel."""

    INHERIT = "inherit"

    def __repr__(self) -> str:
        return "INHERIT"


INHERIT: Final = Inherit.INHERIT


class SlotKind(str, Enum):
    """Tag of a block property value."""

    UNSET = "unset"
    INHERIT = "inherit"
    CONCRETE = "concrete"


class SortKind(str, Enum):
    """How a sort callable is applied."""

    KEY = "key"
    COMPARATOR = "comparator"
    INVALID = "invalid"


def callable_arity(func: Callable[..., Any]) -> int:
    """
    Count the required positional parameters of ``func``.

    Returns -1 for callables taking ``*args``. Callables whose signature cannot
    be introspected (some builtins), or whose positional parameters all have
    defaults, are treated as taking one argument.
    """
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return 1

    required = optional = 0
    for param in signature.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return -1
        if param.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            if param.default is inspect.Parameter.empty:
                required += 1
            else:
                optional += 1
    # A callable with only optional positionals can still be used as a key
    if required == 0 and optional:
        return 1
    return required


@dataclass(frozen=True, slots=True)
class SortStrategy:
    """A sort callable classified once, when it is configured."""

    kind: SortKind
    func: Callable[..., Any]
    arity: int
    name: str = "sort"

    @classmethod
    def from_callable(cls, func: Callable[..., Any], name: str = "sort") -> SortStrategy:
        arity = callable_arity(func)
        if arity == 1:
            kind = SortKind.KEY
        elif arity == 2:
            kind = SortKind.COMPARATOR
        else:
            kind = SortKind.INVALID
        return cls(kind=kind, func=func, arity=arity, name=name)

    def sort(self, items: Iterable[T]) -> list[T]:
        """
        Return a new, stably sorted list of ``items``.

        Raises:
            InvalidSortCallableError: If the callable takes neither 1 nor 2 arguments
        """
        if self.kind is SortKind.KEY:
            return sorted(items, key=self.func)
        if self.kind is SortKind.COMPARATOR:
            return sorted(items, key=cmp_to_key(self.func))
        raise InvalidSortCallableError(self.name, self.arity)


@dataclass(frozen=True, slots=True)
class Slot:
    """Tagged value stored behind a block property."""

    kind: SlotKind
    value: Callable[..., Any] | None = None
    strategy: SortStrategy | None = None

    @property
    def raw(self) -> Callable[..., Any] | Inherit | None:
        """The value as it was assigned."""
        if self.kind is SlotKind.INHERIT:
            return INHERIT
        return self.value

    @property
    def is_set(self) -> bool:
        return self.kind is SlotKind.CONCRETE


UNSET_SLOT: Final = Slot(SlotKind.UNSET)
INHERIT_SLOT: Final = Slot(SlotKind.INHERIT)


class BlockProperty:
    """
    Descriptor storing a tagged :class:`Slot` per instance.

    Args:
        inheritable: Whether ``INHERIT`` may be assigned
        sortable: Whether concrete values are sort callables, classified into a
            :class:`SortStrategy` on assignment
    """

    def __init__(self, *, inheritable: bool = True, sortable: bool = False) -> None:
        self.inheritable = inheritable
        self.sortable = sortable
        self.name = ""
        self._attr = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self._attr = f"_{name}_slot"

    def __get__(self, obj: Any, objtype: type | None = None) -> Any:
        if obj is None:
            return self
        return self.slot(obj).raw

    def __set__(self, obj: Any, value: Any) -> None:
        setattr(obj, self._attr, self.make_slot(value))

    def slot(self, obj: Any) -> Slot:
        """Return the tagged value currently held by ``obj``."""
        return getattr(obj, self._attr, UNSET_SLOT)

    def make_slot(self, value: Any) -> Slot:
        if value is INHERIT:
            if not self.inheritable:
                raise ValueError(f"{self.name} cannot be set to INHERIT")
            return INHERIT_SLOT
        if value is None:
            return UNSET_SLOT
        if not callable(value):
            raise TypeError(
                f"{self.name} must be a callable, None or INHERIT, got {value!r}"
            )
        strategy = SortStrategy.from_callable(value, self.name) if self.sortable else None
        return Slot(SlotKind.CONCRETE, value, strategy)
