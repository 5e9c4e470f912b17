"""Tests for :mod:`navmenu.renderer.template`."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

import pytest
from bs4 import BeautifulSoup

from navmenu import CoreMatcher, Item, URLVoter, new_item, with_label, with_safe_label, with_uri
from navmenu.renderer import (
    COMPRESSED_EXTRA,
    MENU_TEMPLATE,
    TEMPLATE_EXTRA,
    JinjaTheme,
    ListRenderer,
    TemplateRenderer,
    Theme,
)


class RecordingTheme(Theme):
    def __init__(self, output: str = "<nav/>") -> None:
        self.output = output
        self.calls: List[Dict[str, Any]] = []

    def html(self, context, template: str, data: Dict[str, Any]) -> str:
        self.calls.append({"context": context, "template": template, "data": data})
        return self.output


class FailingTheme(Theme):
    def html(self, context, template: str, data: Dict[str, Any]) -> str:
        raise RuntimeError("template exploded")


class SpyMatcher(CoreMatcher):
    def __init__(self) -> None:
        super().__init__(URLVoter())
        self.clear_calls = 0

    def clear(self) -> None:
        self.clear_calls += 1
        super().clear()


def _top_items(markup: str):
    soup = BeautifulSoup(markup, "lxml")
    return soup, soup.find("ul").find_all("li", recursive=False)


def test_theme_receives_payload(sample_menu: Item, article_context: Dict[str, Any]) -> None:
    """Given a theme When rendering Then it gets the context, tree, options and helpers."""

    theme = RecordingTheme()
    matcher = SpyMatcher()
    renderer = TemplateRenderer(theme, matcher, depth=2)

    assert renderer.render(article_context, sample_menu, current_class="on") == "<nav/>"

    call = theme.calls[0]
    data = call["data"]
    assert call["template"] == MENU_TEMPLATE
    assert call["context"] is article_context
    assert data["ctx"] is article_context
    assert data["item"] is sample_menu
    assert data["matcher"] is matcher
    assert data["options"].depth == 2
    assert data["options"].current_class == "on"
    assert data["classes"](["a", "", "b"]) == "a b"
    assert str(data["attributes"]({"id": "x"})) == ' id="x"'
    assert matcher.clear_calls == 1


def test_template_extra_selects_template(sample_menu: Item) -> None:
    theme = RecordingTheme()

    TemplateRenderer(theme, CoreMatcher()).render({}, sample_menu, extras={TEMPLATE_EXTRA: "menu/other.jinja"})

    assert theme.calls[0]["template"] == "menu/other.jinja"


def test_matcher_is_cleared_when_theme_fails(sample_menu: Item) -> None:
    matcher = SpyMatcher()

    with pytest.raises(RuntimeError, match="template exploded"):
        TemplateRenderer(FailingTheme(), matcher).render({}, sample_menu)

    assert matcher.clear_calls == 1


def test_jinja_theme_renders_classes(
    sample_menu: Item, article_context: Dict[str, Any], url_matcher: CoreMatcher
) -> None:
    """Given the bundled template When rendering the sample tree Then state classes match the list renderer."""

    markup = TemplateRenderer(JinjaTheme(), url_matcher).render(article_context, sample_menu)

    soup, items = _top_items(markup)
    assert [li.a.get_text(strip=True) for li in items] == ["Home", "Blog", "About"]
    assert items[0]["class"] == ["first"]
    assert items[1]["class"] == ["current-ancestor"]
    assert items[2]["class"] == ["last"]

    nested = items[1].find("ul")
    assert nested["class"] == ["menu-level-1"]
    article = nested.find("li")
    assert article["class"] == ["current", "first", "last"]
    assert article.a["href"] == "/blog/article-test-1"


def test_jinja_theme_honours_depth_budgets(
    sample_menu: Item, article_context: Dict[str, Any], url_matcher: CoreMatcher
) -> None:
    renderer = TemplateRenderer(JinjaTheme(), url_matcher)

    assert renderer.render(article_context, sample_menu, depth=0).strip() == ""

    shallow = renderer.render(article_context, sample_menu, depth=1)
    assert "article-test-1" not in shallow

    _, items = _top_items(renderer.render(article_context, sample_menu, matching_depth=1))
    assert not items[1].has_attr("class")


def test_jinja_theme_escapes_labels_and_renders_spans(url_matcher: CoreMatcher) -> None:
    root = new_item("root")
    root.add_child("unsafe", with_label("<script>x</script>"), with_uri("/x"))
    root.add_child("trusted", with_label("<em>Hi</em>"), with_safe_label())

    escaped = TemplateRenderer(JinjaTheme(), url_matcher).render({}, root)
    trusted = TemplateRenderer(JinjaTheme(), url_matcher, allow_safe_labels=True).render({}, root)

    assert "<script>" not in escaped
    assert "&lt;script&gt;" in escaped
    assert "&lt;em&gt;Hi&lt;/em&gt;" in escaped
    assert "<span><em>Hi</em></span>" in trusted


def test_jinja_theme_current_as_link_disabled(
    sample_menu: Item, article_context: Dict[str, Any], url_matcher: CoreMatcher
) -> None:
    markup = TemplateRenderer(JinjaTheme(), url_matcher, current_as_link=False).render(
        article_context, sample_menu
    )

    soup = BeautifulSoup(markup, "lxml")
    current = soup.find("li", class_="current")
    assert current.a is None
    assert current.span.get_text(strip=True) == "Article 1"


def test_jinja_theme_custom_template_dir(tmp_path: Path, sample_menu: Item) -> None:
    """Given a custom template directory When selecting a template Then it renders with the payload."""

    template_dir = tmp_path / "templates"
    template_dir.mkdir()
    (template_dir / "names.jinja").write_text(
        "{% for child in item.children %}{{ child.label }};{% endfor %}", encoding="utf-8"
    )

    renderer = TemplateRenderer(JinjaTheme(template_dir), CoreMatcher())
    rendered = renderer.render({}, sample_menu, extras={TEMPLATE_EXTRA: "names.jinja"})

    assert rendered == "Home;Blog;About;"


def test_bundled_template_matches_list_renderer_text(
    sample_menu: Item, article_context: Dict[str, Any]
) -> None:
    """Given the sample tree When rendered by the template and the list renderer Then the text is identical."""

    matcher = CoreMatcher(URLVoter())
    templated = TemplateRenderer(JinjaTheme(), matcher)
    listed = ListRenderer(matcher)

    indented = templated.render(article_context, sample_menu)
    compressed = templated.render(article_context, sample_menu, extras={COMPRESSED_EXTRA: True})

    assert indented == listed.render(article_context, sample_menu)
    assert "\n\n" not in indented
    assert all(line.strip() for line in indented.splitlines())
    assert compressed == listed.render(article_context, sample_menu, extras={COMPRESSED_EXTRA: True})
    assert "\n" not in compressed
