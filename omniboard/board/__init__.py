"""Board core: columns, groups and property resolution."""

from .column import Column, DisplayMode
from .errors import (
    BoardError,
    InvalidPropertyError,
    InvalidSortCallableError,
    UngroupedColumnError,
)
from .group import Group, GroupRegistry, get_group_registry, intern_group
from .properties import INHERIT, INHERITED_PROPERTIES
from .registry import BoardConfig, ColumnRegistry, get_column_registry
from .summary import board_summary
from .wrapper import ProjectWrapper

__all__ = [
    "INHERIT",
    "INHERITED_PROPERTIES",
    "BoardConfig",
    "BoardError",
    "Column",
    "ColumnRegistry",
    "DisplayMode",
    "Group",
    "GroupRegistry",
    "InvalidPropertyError",
    "InvalidSortCallableError",
    "ProjectWrapper",
    "UngroupedColumnError",
    "board_summary",
    "get_column_registry",
    "get_group_registry",
    "intern_group",
]
