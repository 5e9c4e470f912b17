"""Renderer configuration loaded from JSON and ``NAVMENU_*`` environment variables."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from .renderer.options import COMPRESSED_EXTRA, TEMPLATE_EXTRA, RenderOptions
from .tracing import log_event

_LOGGER = logging.getLogger("navmenu.config")
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_DEFAULT_CONFIG_PATH = _PROJECT_ROOT / "configs" / "navmenu.json"

_ENV_PREFIX = "NAVMENU_"
_ENV_FIELDS = {
    "DEPTH": "depth",
    "MATCHING_DEPTH": "matching_depth",
    "COMPRESSED": "compressed",
    "CURRENT_CLASS": "current_class",
    "ANCESTOR_CLASS": "ancestor_class",
}
_DEFAULTS = RenderOptions()


class RendererConfig(BaseModel):
    """Default render options for an application."""

    depth: Optional[int] = Field(default=None, description="Child levels to render, unlimited when unset")
    matching_depth: Optional[int] = Field(
        default=None, description="Budget of the ancestor search, unlimited when unset"
    )
    current_class: str = Field(default=_DEFAULTS.current_class)
    ancestor_class: str = Field(default=_DEFAULTS.ancestor_class)
    first_class: str = Field(default=_DEFAULTS.first_class)
    last_class: str = Field(default=_DEFAULTS.last_class)
    leaf_class: str = Field(default=_DEFAULTS.leaf_class)
    branch_class: str = Field(default=_DEFAULTS.branch_class)
    current_as_link: bool = Field(default=_DEFAULTS.current_as_link)
    allow_safe_labels: bool = Field(default=_DEFAULTS.allow_safe_labels)
    clear_matcher: bool = Field(default=_DEFAULTS.clear_matcher)
    compressed: bool = Field(default=False, description="Render without indentation and newlines")
    template: Optional[str] = Field(default=None, description="Template used by the template renderer")

    @field_validator("depth", "matching_depth", mode="before")
    @classmethod
    def _normalise_depth(cls, value: Any) -> Optional[int]:
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        depth = int(value)
        if depth < 0:
            raise ValueError("Depth budgets must be zero or positive")
        return depth

    @field_validator(
        "current_class",
        "ancestor_class",
        "first_class",
        "last_class",
        "leaf_class",
        "branch_class",
        mode="before",
    )
    @classmethod
    def _normalise_class(cls, value: Optional[str]) -> str:
        return " ".join((value or "").split())

    @classmethod
    def load(cls, path: Path | None = None) -> "RendererConfig":
        """Load configuration from disk and environment overrides."""

        config_path = path or _DEFAULT_CONFIG_PATH
        data: Dict[str, Any] = {}

        if config_path.exists():
            try:
                data = json.loads(config_path.read_text(encoding="utf-8"))
            except json.JSONDecodeError as exc:
                log_event(
                    _LOGGER,
                    logging.WARNING,
                    "menu.config.decode_failed",
                    path=str(config_path),
                    error=str(exc),
                )
                data = {}

        for suffix, name in _ENV_FIELDS.items():
            value = os.environ.get(f"{_ENV_PREFIX}{suffix}")
            if value is not None:
                data[name] = value

        known = set(cls.model_fields)
        return cls(**{key: value for key, value in data.items() if key in known})

    def to_overrides(self) -> Dict[str, Any]:
        """Return keyword overrides accepted by the renderers."""

        overrides = self.model_dump(exclude={"compressed", "template"})
        extras: Dict[str, Any] = {COMPRESSED_EXTRA: self.compressed}
        if self.template:
            extras[TEMPLATE_EXTRA] = self.template
        overrides["extras"] = extras
        return overrides


def load_renderer_config(path: Path | None = None) -> RendererConfig:
    """Helper to load the renderer configuration."""

    return RendererConfig.load(path)


__all__ = ["RendererConfig", "load_renderer_config"]
