"""Per-column decorated view of a raw project record."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .group import Group

if TYPE_CHECKING:
    from .column import Column


@dataclass(eq=False)
class ProjectWrapper:
    """
    Wraps one project for exactly one column.

    The classification fields are filled in by :meth:`Column.add` when the
    project is ingested and are not recomputed afterwards. Attributes not
    defined here are read from the wrapped project, so sort callables can use
    project fields directly.
    """

    project: Any
    column: Column | None = field(default=None, repr=False)
    group: Group | None = None
    marked: bool = False
    dimmed: bool = False
    icon: Any = None

    def __getattr__(self, name: str) -> Any:
        # Only reached for names missing on the wrapper itself
        if name == "project":
            raise AttributeError(name)
        return getattr(self.project, name)

    def __str__(self) -> str:
        return str(self.project)

    def to_dict(self) -> dict[str, Any]:
        """Convert the wrapper to a dictionary for serialization."""
        return {
            "name": str(self),
            "group": self.group.name if self.group is not None else None,
            "marked": self.marked,
            "dimmed": self.dimmed,
            "icon": self.icon,
        }
