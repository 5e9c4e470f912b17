"""Render options: class names, depth budgets and rendering switches."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

COMPRESSED_EXTRA = "compressed"
TEMPLATE_EXTRA = "template"


@dataclass
class RenderOptions:
    """Configuration for one render pass.

    ``depth`` is the number of child levels still allowed to render and
    ``matching_depth`` the budget handed to the ancestor search; ``None``
    means unlimited for both. Renderers never mutate a caller's instance:
    every recursion level works on its own :meth:`copy`.
    """

    depth: Optional[int] = None
    matching_depth: Optional[int] = None
    current_class: str = "current"
    ancestor_class: str = "current-ancestor"
    first_class: str = "first"
    last_class: str = "last"
    leaf_class: str = ""
    branch_class: str = ""
    current_as_link: bool = True
    allow_safe_labels: bool = False
    clear_matcher: bool = True
    extras: Dict[str, Any] = field(default_factory=dict)

    def copy(self) -> "RenderOptions":
        return dataclasses.replace(self, extras=dict(self.extras))

    def apply(self, **overrides: Any) -> "RenderOptions":
        """Set the given fields in place and return ``self``.

        Unknown option names raise :class:`ValueError`.
        """

        known = {item.name for item in dataclasses.fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ValueError(f"Unsupported render option(s): {', '.join(unknown)}")

        for name, value in overrides.items():
            if name == "extras":
                value = dict(value or {})
            setattr(self, name, value)
        return self

    def sub_depth(self) -> "RenderOptions":
        if self.depth is not None:
            self.depth -= 1
        return self

    def sub_matching_depth(self) -> "RenderOptions":
        if self.matching_depth is not None and self.matching_depth > 0:
            self.matching_depth -= 1
        return self

    def is_stop(self) -> bool:
        """Whether the depth budget is exhausted."""

        return self.depth is not None and self.depth <= 0

    def extra(self, name: str, default: Any = None) -> Any:
        return self.extras.get(name, default)

    def add_extra(self, name: str, value: Any) -> "RenderOptions":
        self.extras[name] = value
        return self

    @property
    def compressed(self) -> bool:
        return bool(self.extra(COMPRESSED_EXTRA, False))

    def as_dict(self) -> Dict[str, Any]:
        values = {item.name: getattr(self, item.name) for item in dataclasses.fields(self)}
        values["extras"] = dict(self.extras)
        return values


__all__ = ["COMPRESSED_EXTRA", "RenderOptions", "TEMPLATE_EXTRA"]
