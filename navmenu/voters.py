"""Voters decide whether a single item matches the current request."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlsplit

from .errors import UnsupportedDataError
from .item import Item

URL_CONTEXT_KEY = "url"


class Vote(enum.Enum):
    """Outcome of a single voter."""

    YES = "yes"
    NO = "no"
    ABSTAIN = "abstain"


class Voter(ABC):
    """A predicate contributing to the current-item decision.

    Voters that cannot tell should return :attr:`Vote.ABSTAIN` to let the
    next voter decide.
    """

    @abstractmethod
    def match_item(self, context: Mapping[str, Any], item: Item) -> Vote:
        raise NotImplementedError


class URLVoter(Voter):
    """Match items whose URI equals the request path stored in the context.

    The context must be a mapping; ``context["url"]`` may be a URL string or
    any object with a ``path`` attribute (``urllib.parse`` results, ``httpx``
    or Starlette URLs). A missing URL abstains.
    """

    def __init__(self, key: str = URL_CONTEXT_KEY) -> None:
        self._key = key

    def match_item(self, context: Mapping[str, Any], item: Item) -> Vote:
        path = self._request_path(context)
        if path is not None and path == item.uri:
            return Vote.YES
        return Vote.ABSTAIN

    def _request_path(self, context: Mapping[str, Any]) -> str | None:
        if not isinstance(context, Mapping):
            raise UnsupportedDataError(
                f"expected a mapping request context, got {type(context).__name__}"
            )
        url = context.get(self._key)
        if url is None:
            return None
        if isinstance(url, str):
            return urlsplit(url).path
        path = getattr(url, "path", None)
        if isinstance(path, str):
            return path
        raise UnsupportedDataError(
            f"unsupported {self._key!r} context value of type {type(url).__name__}"
        )


__all__ = ["URL_CONTEXT_KEY", "URLVoter", "Vote", "Voter"]
