"""Current/ancestor matching with a per-render-pass cache."""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from collections.abc import Mapping
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional, Tuple

from .item import Item
from .tracing import log_event
from .voters import Vote, Voter

_LOGGER = logging.getLogger("navmenu.matcher")


class Matcher(ABC):
    """Decide whether items are current or ancestors of a current item."""

    @abstractmethod
    def is_current(self, context: Mapping[str, Any], item: Item) -> bool:
        raise NotImplementedError

    @abstractmethod
    def is_ancestor(
        self, context: Mapping[str, Any], item: Item, depth: Optional[int] = None
    ) -> bool:
        raise NotImplementedError

    @abstractmethod
    def clear(self) -> None:
        """Forget every cached decision."""

        raise NotImplementedError


class _ReadWriteLock:
    """Many concurrent readers or a single writer."""

    def __init__(self) -> None:
        self._condition = threading.Condition(threading.Lock())
        self._readers = 0
        self._writing = False

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._condition:
            while self._writing:
                self._condition.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._condition:
                self._readers -= 1
                if self._readers == 0:
                    self._condition.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._condition:
            while self._writing or self._readers:
                self._condition.wait()
            self._writing = True
        try:
            yield
        finally:
            with self._condition:
                self._writing = False
                self._condition.notify_all()


class CoreMatcher(Matcher):
    """Matcher backed by an ordered chain of voters and an identity cache.

    Cached answers are sticky until :meth:`clear`; renderers clear the
    matcher between render passes. Two threads missing the cache for the
    same item may both run the voters and store the same answer.
    """

    def __init__(self, *voters: Voter) -> None:
        self._voters: Tuple[Voter, ...] = voters
        self._cache: Dict[Item, bool] = {}
        self._lock = _ReadWriteLock()

    @property
    def voters(self) -> Tuple[Voter, ...]:
        return self._voters

    def is_current(self, context: Mapping[str, Any], item: Item) -> bool:
        if item.current is not None:
            return item.current

        with self._lock.read():
            cached = self._cache.get(item)
        if cached is not None:
            return cached

        current = self._vote(context, item)
        log_event(
            _LOGGER,
            logging.DEBUG,
            "menu.matcher.cache_miss",
            item=item.name,
            uri=item.uri,
            current=current,
        )

        with self._lock.write():
            self._cache[item] = current
        return current

    def is_ancestor(
        self, context: Mapping[str, Any], item: Item, depth: Optional[int] = None
    ) -> bool:
        """Whether a descendant of ``item`` is current.

        ``depth`` bounds the whole search, not each branch: every recursive
        step spends one unit, so once earlier siblings have consumed the
        budget later subtrees are no longer inspected. ``None`` searches the
        full subtree.
        """

        found, _ = self._search_ancestor(context, item, depth)
        return found

    def _search_ancestor(
        self, context: Mapping[str, Any], item: Item, remaining: Optional[int]
    ) -> Tuple[bool, Optional[int]]:
        if remaining is not None:
            if remaining <= 0:
                return False, remaining
            remaining -= 1

        for child in item.children:
            if self.is_current(context, child):
                return True, remaining
            found, remaining = self._search_ancestor(context, child, remaining)
            if found:
                return True, remaining
        return False, remaining

    def clear(self) -> None:
        with self._lock.write():
            size = len(self._cache)
            self._cache = {}
        log_event(_LOGGER, logging.DEBUG, "menu.matcher.clear", entries=size)

    def _vote(self, context: Mapping[str, Any], item: Item) -> bool:
        for voter in self._voters:
            vote = voter.match_item(context, item)
            if vote is not Vote.ABSTAIN:
                return vote is Vote.YES
        return False


__all__ = ["CoreMatcher", "Matcher"]
