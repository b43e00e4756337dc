"""Process-wide column list and the global fallback configuration."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from operator import attrgetter
from typing import TYPE_CHECKING, Any, ClassVar, Final

from loguru import logger

from .errors import InvalidPropertyError
from .group import GroupRegistry, get_group_registry
from .properties import BLOCK_PROPERTIES, BlockProperty, Slot

if TYPE_CHECKING:
    from .column import Column

DEFAULT_FONT: Final[str] = "Helvetica, Arial, sans-serif"


class BoardConfig:
    """
    Global configuration shared by every column of a registry.

    Holds the two font settings and the global version of every block
    property. The global ``conditions`` predicate is applied to every column
    on top of the column's own; the remaining block properties are fallbacks
    used by columns whose own value is ``INHERIT``. Global values are either a
    callable or unset, never ``INHERIT``.
    """

    conditions = BlockProperty(inheritable=False)
    sort = BlockProperty(inheritable=False, sortable=True)
    mark_when = BlockProperty(inheritable=False)
    dim_when = BlockProperty(inheritable=False)
    group_by = BlockProperty(inheritable=False)
    sort_groups = BlockProperty(inheritable=False, sortable=True)
    icon = BlockProperty(inheritable=False)

    SETTINGS: ClassVar[tuple[str, ...]] = ("heading_font", "body_font", *BLOCK_PROPERTIES)

    def __init__(self) -> None:
        self.heading_font = DEFAULT_FONT
        self.body_font = DEFAULT_FONT

    def configure(
        self, setup: Callable[[BoardConfig], Any] | None = None, **settings: Any
    ) -> BoardConfig:
        """
        Apply keyword settings, then call ``setup`` with this configuration.

        Raises:
            InvalidPropertyError: If a keyword is not a known setting
        """
        for name, value in settings.items():
            if name not in self.SETTINGS:
                raise InvalidPropertyError(name, self.SETTINGS)
            setattr(self, name, value)
            logger.debug(f"Global {name} set to {value!r}")
        if setup is not None:
            setup(self)
        return self

    def clear(self, name: str) -> None:
        """
        Reset one global block property to unset.

        Raises:
            InvalidPropertyError: If ``name`` is not a block property
        """
        if name not in BLOCK_PROPERTIES:
            raise InvalidPropertyError(name, BLOCK_PROPERTIES)
        setattr(self, name, None)
        logger.debug(f"Global {name} cleared")

    def reset(self) -> None:
        """Restore default fonts and clear every block property."""
        self.heading_font = DEFAULT_FONT
        self.body_font = DEFAULT_FONT
        for name in BLOCK_PROPERTIES:
            setattr(self, name, None)

    def slot(self, name: str) -> Slot:
        """Return the tagged value of the block property ``name``."""
        if name not in BLOCK_PROPERTIES:
            raise InvalidPropertyError(name, BLOCK_PROPERTIES)
        return getattr(type(self), name).slot(self)


class ColumnRegistry:
    """
    Ordered collection of every column plus the configuration they share.

    Columns are kept sorted by ``order`` (stable for equal orders). The
    registry is not synchronised: build columns, ingest projects and query
    from a single thread.
    """

    def __init__(
        self,
        config: BoardConfig | None = None,
        groups: GroupRegistry | None = None,
    ) -> None:
        self.config = config if config is not None else BoardConfig()
        self.groups = groups if groups is not None else get_group_registry()
        self._columns: list[Column] = []

    @property
    def columns(self) -> list[Column]:
        """Registered columns, lowest ``order`` first."""
        return list(self._columns)

    def register(self, column: Column) -> None:
        """Add a column and re-sort the registry by ``order``."""
        self._columns.append(column)
        self._columns.sort(key=attrgetter("order"))
        logger.debug(f"Registered column {column.name!r} with order {column.order}")

    def configure(
        self, setup: Callable[[BoardConfig], Any] | None = None, **settings: Any
    ) -> BoardConfig:
        """Apply global configuration; see :meth:`BoardConfig.configure`."""
        return self.config.configure(setup, **settings)

    def clear_config(self, name: str) -> None:
        """Clear one global block property; see :meth:`BoardConfig.clear`."""
        self.config.clear(name)

    def clear(self) -> None:
        """Forget every registered column."""
        self._columns.clear()

    def __iter__(self) -> Iterator[Column]:
        return iter(self.columns)

    def __len__(self) -> int:
        return len(self._columns)


# Global instance accessor
_registry = ColumnRegistry()


def get_column_registry() -> ColumnRegistry:
    """Get the process-wide column registry."""
    return _registry
