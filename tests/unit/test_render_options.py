"""Tests for :mod:`navmenu.renderer.options`."""

from __future__ import annotations

import pytest

from navmenu.renderer import COMPRESSED_EXTRA, RenderOptions


def test_defaults() -> None:
    options = RenderOptions()

    assert options.depth is None
    assert options.matching_depth is None
    assert options.current_class == "current"
    assert options.ancestor_class == "current-ancestor"
    assert options.first_class == "first"
    assert options.last_class == "last"
    assert options.leaf_class == ""
    assert options.branch_class == ""
    assert options.current_as_link is True
    assert options.allow_safe_labels is False
    assert options.clear_matcher is True
    assert options.extras == {}
    assert options.compressed is False


def test_apply_rejects_unknown_options() -> None:
    """Given a misspelt option When applying overrides Then a ValueError names it."""

    with pytest.raises(ValueError, match="dpeth"):
        RenderOptions().apply(dpeth=2)


def test_copy_is_independent() -> None:
    original = RenderOptions(depth=2).add_extra("theme", "dark")

    duplicate = original.copy().sub_depth().add_extra("theme", "light")

    assert original.depth == 2
    assert original.extra("theme") == "dark"
    assert duplicate.depth == 1
    assert duplicate.extra("theme") == "light"


def test_sub_depth_always_decrements() -> None:
    options = RenderOptions(depth=0)

    options.sub_depth()

    assert options.depth == -1
    assert options.is_stop()
    assert RenderOptions().sub_depth().depth is None


def test_sub_matching_depth_stops_at_zero() -> None:
    options = RenderOptions(matching_depth=1)

    options.sub_matching_depth().sub_matching_depth()

    assert options.matching_depth == 0
    assert RenderOptions().sub_matching_depth().matching_depth is None


@pytest.mark.parametrize(("depth", "expected"), [(None, False), (2, False), (1, False), (0, True), (-1, True)])
def test_is_stop(depth, expected) -> None:
    assert RenderOptions(depth=depth).is_stop() is expected


def test_compressed_extra_and_as_dict() -> None:
    options = RenderOptions().apply(extras={COMPRESSED_EXTRA: True}, depth=1)

    payload = options.as_dict()

    assert options.compressed is True
    assert payload["depth"] == 1
    assert payload["extras"] == {COMPRESSED_EXTRA: True}
    payload["extras"]["other"] = 1
    assert "other" not in options.extras
