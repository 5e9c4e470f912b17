"""Shared pytest fixtures for the navmenu test-suite."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Dict, List

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from navmenu import (
    CoreMatcher,
    Item,
    URLVoter,
    Vote,
    Voter,
    new_item,
    with_child,
    with_label,
    with_position,
    with_uri,
)


class RecordingVoter(Voter):
    """Voter returning a configurable vote and counting its calls."""

    def __init__(self, vote: Vote = Vote.ABSTAIN) -> None:
        self.vote = vote
        self.calls: List[str] = []

    def match_item(self, context: Dict[str, Any], item: Item) -> Vote:
        self.calls.append(item.name)
        return self.vote


@pytest.fixture
def sample_menu() -> Item:
    """Return the home/blog/about tree ordered by position."""

    root = new_item(
        "root",
        with_child(new_item("home", with_label("Home"), with_uri("/"))),
        with_child(new_item("about", with_label("About"), with_uri("/about"), with_position(2))),
        with_child(
            new_item(
                "blog",
                with_label("Blog"),
                with_uri("/blog"),
                with_position(1),
                with_child(
                    new_item("article1", with_label("Article 1"), with_uri("/blog/article-test-1"))
                ),
            )
        ),
    )
    root.reorder_children()
    return root


@pytest.fixture
def article_context() -> Dict[str, Any]:
    """Return a request context pointing at the first blog article."""

    return {"url": "http://localhost/blog/article-test-1"}


@pytest.fixture
def url_matcher() -> CoreMatcher:
    """Return a matcher resolving the current item from the request URL."""

    return CoreMatcher(URLVoter())


@pytest.fixture
def recording_voter() -> RecordingVoter:
    return RecordingVoter()

