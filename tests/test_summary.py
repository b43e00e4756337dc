"""Tests for the board summary."""

from omniboard.board import Column, ColumnRegistry, GroupRegistry, board_summary


def test_board_summary():
    """The summary lists fonts and columns in board order."""
    registry = ColumnRegistry(groups=GroupRegistry())
    registry.configure(
        heading_font="Futura",
        conditions=lambda p: not p.startswith("_"),
    )
    later = Column("Later", registry=registry, order=2)
    now = Column("Now", registry=registry, order=1, group_by=lambda p: p[0])
    for column in (later, now):
        column.add(["_skip", "beta", "alpha", "bravo"])

    summary = board_summary(registry)
    assert summary["heading_font"] == "Futura"
    assert [c["name"] for c in summary["columns"]] == ["Now", "Later"]

    grouped, flat = summary["columns"]
    assert grouped["total"] == 3
    assert [g["name"] for g in grouped["groups"]] == ["a", "b"]
    assert [p["name"] for p in grouped["groups"][1]["projects"]] == ["beta", "bravo"]
    assert [p["name"] for p in flat["projects"]] == ["alpha", "beta", "bravo"]


def test_board_summary_empty_registry():
    """An empty registry summarises to no columns."""
    summary = board_summary(ColumnRegistry())
    assert summary["columns"] == []
    assert summary["body_font"] == "Helvetica, Arial, sans-serif"
