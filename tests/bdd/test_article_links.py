"""Behaviour tests for article link preparation.

These pytest-bdd scenarios, driven by ``features/article_links.feature``, run
small articles through ``prepare_article`` and check that nested image links,
relative HTML anchors, and malformed links come out the way the published site
expects. Rendered anchors are inspected with BeautifulSoup.

Usage
-----
Run ``pytest tests/bdd/test_article_links.py -v`` after installing the dev
dependencies (``uv sync --group dev``). No network access is required.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, scenarios, then, when

from folio_pages.article import PreparedArticle, prepare_article

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "article_links.feature"
)
scenarios(FEATURE_FILE)

ARTICLES_URL = "https://nick.af/articles"


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _prepared_text(scenario_state: dict[str, object]) -> str:
    return typ.cast("PreparedArticle", scenario_state["prepared"]).markdown


@given("an article containing an image nested in a link")
def given_nested_image(scenario_state: dict[str, object]) -> None:
    """Stub an article whose only link wraps an image."""
    scenario_state["markdown"] = (
        "[![Diagram](./images/diagram.png)](./guides/setup.mdx)\n"
    )
    scenario_state["source_path"] = "articles/welcome.md"


@given("an article with a relative HTML anchor")
def given_relative_anchor(scenario_state: dict[str, object]) -> None:
    """Stub an article linking to a sibling section with raw HTML."""
    scenario_state["markdown"] = (
        '<p>Browse <a class="link" href="../projects/index.html">projects</a>.</p>\n'
    )
    scenario_state["source_path"] = "articles/2024/welcome.md"


@given("an article with an empty link label")
def given_empty_label(scenario_state: dict[str, object]) -> None:
    """Stub an article containing a link without a label."""
    scenario_state["markdown"] = "Nothing to see [](./hidden.md) here.\n"
    scenario_state["source_path"] = "articles/welcome.md"


@when("the article is prepared for publishing")
def when_prepared(scenario_state: dict[str, object]) -> None:
    """Prepare the stubbed article with the site's articles URL."""
    scenario_state["prepared"] = prepare_article(
        typ.cast("str", scenario_state["markdown"]),
        articles_url=ARTICLES_URL,
        source_path=typ.cast("str", scenario_state["source_path"]),
    )


@then("the image source points at the articles URL")
def then_image_rewritten(scenario_state: dict[str, object]) -> None:
    """Verify the nested image target was rewritten."""
    text = _prepared_text(scenario_state)
    assert f"[Diagram]({ARTICLES_URL}/./images/diagram.png)" in text


@then("the outer link points at the articles URL without its extension")
def then_outer_link_rewritten(scenario_state: dict[str, object]) -> None:
    """Verify the wrapping link target was rewritten and lost its extension."""
    text = _prepared_text(scenario_state)
    assert text.rstrip("\n").endswith(f"]({ARTICLES_URL}/./guides/setup)")
    assert ".mdx" not in text


@then("the image keeps its image marker")
def then_image_marker_kept(scenario_state: dict[str, object]) -> None:
    """Verify the nested image is still an image after rewriting."""
    assert _prepared_text(scenario_state).startswith("[![Diagram](")


@then("the anchor href is resolved against the article path")
def then_anchor_resolved(scenario_state: dict[str, object]) -> None:
    """Verify the raw anchor now uses the resolved site path."""
    soup = BeautifulSoup(_prepared_text(scenario_state), "html.parser")
    anchor = soup.find("a")
    assert anchor is not None
    assert anchor["href"] == "articles/projects/index"
    assert anchor["class"] == ["link"]


@then("the article text is unchanged")
def then_unchanged(scenario_state: dict[str, object]) -> None:
    """Verify malformed links fall back to the original text."""
    assert _prepared_text(scenario_state) == scenario_state["markdown"]
