"""
Board columns.

Each column is either grouped, when its effective ``group_by`` (its own or the
global fallback) is set, or ungrouped. Projects enter a column through
:meth:`Column.add`, which filters, wraps and classifies them.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from enum import Enum
from typing import Any, ClassVar

from loguru import logger

from .errors import InvalidPropertyError, UngroupedColumnError
from .group import Group
from .properties import (
    BLOCK_PROPERTIES,
    INHERIT,
    INHERITED_PROPERTIES,
    BlockProperty,
    Slot,
    SlotKind,
)
from .registry import ColumnRegistry, get_column_registry
from .wrapper import ProjectWrapper


class DisplayMode(str, Enum):
    """How much of each project a column shows."""

    COMPACT = "compact"
    FULL = "full"


def _as_list(projects: Any) -> list[Any]:
    """Normalise a lone project or a collection of projects into a list."""
    # Strings and mappings are records in their own right, not collections
    if isinstance(projects, (str, bytes, Mapping)):
        return [projects]
    if isinstance(projects, Iterable):
        return list(projects)
    return [projects]


class Column:
    """
    A named, independently configured partition of the board.

    Args:
        name: Display name of the column
        setup: Optional callable invoked with the new column, after ``settings``
            are applied and before the column is registered
        registry: Registry to join; defaults to the process-wide one
        **settings: Initial values for any of :attr:`SETTINGS`
    """

    # Admission predicate; applies only to this column, never inherited
    conditions = BlockProperty(inheritable=False)

    sort = BlockProperty(sortable=True)
    mark_when = BlockProperty()
    dim_when = BlockProperty()
    icon = BlockProperty()

    group_by = BlockProperty()
    sort_groups = BlockProperty(sortable=True)

    INHERITED_PROPERTIES: ClassVar[tuple[str, ...]] = INHERITED_PROPERTIES
    SETTINGS: ClassVar[tuple[str, ...]] = (
        "order",
        "width",
        "display",
        "filter_button",
        "columns",
        *BLOCK_PROPERTIES,
    )

    def __init__(
        self,
        name: str,
        setup: Callable[[Column], Any] | None = None,
        *,
        registry: ColumnRegistry | None = None,
        **settings: Any,
    ) -> None:
        self.name = name
        self.registry = registry if registry is not None else get_column_registry()

        # Order in the board; lower numbers are further left
        self.order: int = 0
        # Relative width of the column
        self.width: float = 1
        # Projects shown per row
        self.columns: int = 1
        self.display = DisplayMode.FULL
        # Whether to offer a button hiding dimmed projects
        self.filter_button: bool = False

        for prop in INHERITED_PROPERTIES:
            setattr(self, prop, INHERIT)

        self._projects: list[ProjectWrapper] = []
        self._grouped_projects: dict[Group | None, list[ProjectWrapper]] | None = None

        self.configure(setup, **settings)
        self.registry.register(self)

    @property
    def display(self) -> DisplayMode:
        return self._display

    @display.setter
    def display(self, value: DisplayMode | str) -> None:
        self._display = DisplayMode(value)

    def configure(
        self, setup: Callable[[Column], Any] | None = None, **settings: Any
    ) -> Column:
        """
        Apply keyword settings, then call ``setup`` with this column.

        Raises:
            InvalidPropertyError: If a keyword is not a known setting
        """
        for name, value in settings.items():
            if name not in self.SETTINGS:
                raise InvalidPropertyError(name, self.SETTINGS)
            setattr(self, name, value)
        if setup is not None:
            setup(self)
        return self

    # ------------------------------------------------------------------
    # Property resolution

    def _resolve_slot(self, name: str) -> Slot:
        if name not in INHERITED_PROPERTIES:
            raise InvalidPropertyError(name, INHERITED_PROPERTIES)
        slot = getattr(type(self), name).slot(self)
        if slot.kind is SlotKind.INHERIT:
            return self.registry.config.slot(name)
        return slot

    def resolve(self, name: str) -> Callable[..., Any] | None:
        """
        Return the effective value of an inheritable property.

        A column value of ``INHERIT`` yields the global fallback of the same
        name; anything else (including ``None``) is returned as-is.

        Raises:
            InvalidPropertyError: If ``name`` is not an inheritable property
        """
        return self._resolve_slot(name).value

    # ------------------------------------------------------------------
    # Classification

    def group_for(self, project: Any) -> Group | None:
        """Return the group a project falls into, or None if ungrouped."""
        group_by = self.resolve("group_by")
        if group_by is None:
            return None
        return self.registry.groups.intern(group_by(project))

    def should_mark(self, project: Any) -> bool:
        mark_when = self.resolve("mark_when")
        if mark_when is None:
            return False
        return bool(mark_when(project))

    def should_dim(self, project: Any) -> bool:
        dim_when = self.resolve("dim_when")
        if dim_when is None:
            return False
        return bool(dim_when(project))

    def icon_for(self, project: Any) -> Any:
        icon = self.resolve("icon")
        if icon is None:
            return None
        return icon(project)

    # ------------------------------------------------------------------
    # Ingestion

    def add(self, projects: Any) -> None:
        """
        Add one project or a collection of projects to the column.

        Projects must pass this column's ``conditions`` and the global
        ``conditions``, where set. Admitted projects are wrapped and tagged
        with their group, marked and dimmed flags, and icon.

        Not re-entrant: callers must not add to the same column concurrently.
        """
        self._grouped_projects = None

        items = _as_list(projects)
        received = len(items)

        conditions = self.conditions
        if conditions is not None:
            items = [project for project in items if conditions(project)]
        after_column = len(items)

        global_conditions = self.registry.config.conditions
        if global_conditions is not None:
            items = [project for project in items if global_conditions(project)]

        wrappers = [ProjectWrapper(project, column=self) for project in items]
        for wrapper in wrappers:
            wrapper.group = self.group_for(wrapper.project)
            wrapper.marked = self.should_mark(wrapper.project)
            wrapper.dimmed = self.should_dim(wrapper.project)
            wrapper.icon = self.icon_for(wrapper.project)

        self._projects.extend(wrappers)
        logger.debug(
            f"Column {self.name!r}: received {received}, "
            f"rejected {received - after_column} by column conditions, "
            f"{after_column - len(wrappers)} by global conditions, "
            f"admitted {len(wrappers)}"
        )

    # ------------------------------------------------------------------
    # Queries

    def projects(self, group: Any = None) -> list[ProjectWrapper]:
        """
        Return the column's projects, sorted by the effective ``sort``.

        Args:
            group: Optional group (or raw group key) to restrict the result to

        Returns:
            A new list; without a sort callable, projects are ordered by their
            string form

        Raises:
            UngroupedColumnError: If ``group`` is given and the column is ungrouped
            InvalidSortCallableError: If the sort callable has an unsupported arity
        """
        if group is None:
            items = self._projects
        else:
            items = self._partition().get(self.registry.groups.intern(group), [])

        strategy = self._resolve_slot("sort").strategy
        if strategy is None:
            return sorted(items, key=str)
        return strategy.sort(items)

    def can_be_grouped(self) -> bool:
        """Return True if the column or the global configuration sets group_by."""
        return self.resolve("group_by") is not None

    def groups(self) -> list[Any]:
        """
        Return the distinct group names, sorted by the effective ``sort_groups``.

        Without a group sort callable, names are ordered lexically.

        Raises:
            UngroupedColumnError: If the column cannot be grouped
            InvalidSortCallableError: If the sort callable has an unsupported arity
        """
        # Projects ingested before group_by was set have no group and are skipped
        names = [group.name for group in self._partition() if group is not None]

        strategy = self._resolve_slot("sort_groups").strategy
        if strategy is None:
            return sorted(names, key=str)
        return strategy.sort(names)

    def grouped_projects(self) -> dict[Group | None, list[ProjectWrapper]]:
        """
        Return the column's projects partitioned by group. Unsorted.

        Returns a copy of the partition, which is cached until the next
        :meth:`add`. Projects ingested before ``group_by`` was set are listed
        under ``None``.

        Raises:
            UngroupedColumnError: If the column cannot be grouped
        """
        return {group: list(wrappers) for group, wrappers in self._partition().items()}

    def _partition(self) -> dict[Group | None, list[ProjectWrapper]]:
        if not self.can_be_grouped():
            raise UngroupedColumnError(self.name)
        if self._grouped_projects is None:
            partition: dict[Group | None, list[ProjectWrapper]] = {}
            for wrapper in self._projects:
                partition.setdefault(wrapper.group, []).append(wrapper)
            self._grouped_projects = partition
            logger.debug(f"Column {self.name!r}: grouped into {len(partition)} groups")
        return self._grouped_projects

    def to_dict(self) -> dict[str, Any]:
        """Convert the column and its sorted projects to a dictionary."""
        data: dict[str, Any] = {
            "name": self.name,
            "order": self.order,
            "width": self.width,
            "display": self.display.value,
            "filter_button": self.filter_button,
            "columns": self.columns,
            "total": len(self._projects),
        }
        if self.can_be_grouped():
            data["groups"] = [
                {
                    "name": name,
                    "projects": [
                        wrapper.to_dict()
                        for wrapper in self.projects(self.registry.groups.intern(name))
                    ],
                }
                for name in self.groups()
            ]
        else:
            data["projects"] = [wrapper.to_dict() for wrapper in self.projects()]
        return data

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Column({self.name!r}, order={self.order})"
