"""Error types raised by the menu tree, loaders and voters."""

from __future__ import annotations


class MenuError(RuntimeError):
    """Base class for every error raised by :mod:`navmenu`."""


class ItemBelongsToAnotherMenuError(MenuError):
    """Raised when attaching an item that already has a parent."""

    def __init__(self, item_name: str | None = None) -> None:
        message = (
            "cannot add menu item as child, it already belongs to another menu "
            "(e.g. has a parent)"
        )
        if item_name:
            message = f"{message}: {item_name!r}"
        super().__init__(message)
        self.item_name = item_name


class UnsupportedDataError(MenuError, TypeError):
    """Raised when a loader or voter receives data it cannot handle."""


__all__ = ["ItemBelongsToAnotherMenuError", "MenuError", "UnsupportedDataError"]
