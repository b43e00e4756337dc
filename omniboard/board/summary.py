"""Serializable snapshot of a board for the rendering layer."""

from __future__ import annotations

from typing import Any

from .registry import ColumnRegistry, get_column_registry


def board_summary(registry: ColumnRegistry | None = None) -> dict[str, Any]:
    """
    Get a summary of every column in the registry.

    Args:
        registry: Registry to summarise; defaults to the process-wide one

    Returns:
        Fonts plus one entry per column, in board order
    """
    registry = registry if registry is not None else get_column_registry()
    return {
        "heading_font": registry.config.heading_font,
        "body_font": registry.config.body_font,
        "columns": [column.to_dict() for column in registry],
    }
