"""Command line demo: build a sample menu and render it for a request URL."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from .config import load_renderer_config
from .item import Item, new_item
from .logging_config import configure_logging
from .matcher import CoreMatcher
from .options import with_child, with_label, with_position, with_uri
from .renderer import JinjaTheme, ListRenderer, Renderer, TemplateRenderer
from .renderer.options import COMPRESSED_EXTRA
from .tracing import trace
from .voters import URL_CONTEXT_KEY, URLVoter

_LOGGER = logging.getLogger("navmenu.cli")


def build_sample_menu() -> Item:
    """Return the demo tree: home, blog (with one article) and about."""

    root = new_item(
        "root",
        with_child(new_item("home", with_label("Home"), with_uri("/"))),
        with_child(
            new_item("about", with_label("About"), with_uri("/about"), with_position(2))
        ),
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


def _non_negative(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid depth '{value}'") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError(f"Depth must be zero or positive, got {parsed}")
    return parsed


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render the navmenu demo tree")
    parser.add_argument(
        "--url",
        default="http://localhost/blog/article-test-1",
        help="Request URL used to find the current item.",
    )
    parser.add_argument(
        "--renderer",
        choices=("list", "template", "both"),
        default="both",
        help="Which renderer to run (default: both).",
    )
    parser.add_argument("--depth", type=_non_negative, help="Limit the rendered child levels.")
    parser.add_argument(
        "--matching-depth",
        type=_non_negative,
        help="Limit the ancestor search budget.",
    )
    parser.add_argument("--compressed", action="store_true", help="Render without whitespace.")
    parser.add_argument("--config", type=Path, help="Path to a renderer JSON config.")
    parser.add_argument("--log-level", default="WARNING", help="Python logging level (default: WARNING)")
    return parser.parse_args(argv)


def _overrides(args: argparse.Namespace) -> Dict[str, Any]:
    overrides = load_renderer_config(args.config).to_overrides()
    if args.depth is not None:
        overrides["depth"] = args.depth
    if args.matching_depth is not None:
        overrides["matching_depth"] = args.matching_depth
    if args.compressed:
        overrides["extras"][COMPRESSED_EXTRA] = True
    return overrides


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = parse_args(argv)
    configure_logging(level=args.log_level)

    overrides = _overrides(args)
    context = {URL_CONTEXT_KEY: args.url}
    menu = build_sample_menu()
    matcher = CoreMatcher(URLVoter())

    renderers: List[Renderer] = []
    if args.renderer in ("template", "both"):
        renderers.append(TemplateRenderer(JinjaTheme(), matcher))
    if args.renderer in ("list", "both"):
        renderers.append(ListRenderer(matcher))

    with trace("menu.demo", logger=_LOGGER, url=args.url, renderer=args.renderer):
        for renderer in renderers:
            sys.stdout.write(renderer.render(context, menu, **overrides))
            sys.stdout.write("\n")
    return 0


__all__ = ["build_sample_menu", "main", "parse_args"]
