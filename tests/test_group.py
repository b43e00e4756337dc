"""Tests for group interning."""

from omniboard.board import Group, GroupRegistry, get_group_registry, intern_group


def test_intern_returns_same_instance():
    """Equal keys intern to the identical group."""
    groups = GroupRegistry()
    first = groups.intern("x")
    second = groups.intern("x")
    assert first is second
    assert first.name == "x"


def test_intern_distinct_keys():
    """Different keys produce different groups."""
    groups = GroupRegistry()
    assert groups.intern("a") is not groups.intern("b")
    assert len(groups) == 2
    assert "a" in groups
    assert "c" not in groups


def test_intern_accepts_group():
    """Interning a group hands back the same group."""
    groups = GroupRegistry()
    group = groups.intern("a")
    assert groups.intern(group) is group
    assert len(groups) == 1


def test_intern_non_string_keys():
    """Any hashable value can be a group key."""
    groups = GroupRegistry()
    assert groups.intern(1) is groups.intern(1)
    assert groups.intern(("a", 1)) is groups.intern(("a", 1))
    assert groups.intern(None) is groups.intern(None)


def test_group_string_form():
    """Groups print as their key."""
    assert str(Group("Errands")) == "Errands"
    assert repr(Group("Errands")) == "Group('Errands')"


def test_process_wide_registry():
    """The module-level helper uses the shared registry."""
    group = intern_group("shared-key")
    assert intern_group("shared-key") is group
    assert get_group_registry().intern("shared-key") is group
