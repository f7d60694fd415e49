"""Behaviour tests for listing pagination.

These pytest-bdd scenarios, driven by ``features/listing_pagination.feature``,
prove that listing pages always get a usable pagination descriptor: route
parameters that cannot be parsed fall back to the first page, later pages
select later items, and empty listings report zero pages without failing.

Usage
-----
Run ``pytest tests/bdd/test_listing_pagination.py -v`` after installing the
dev dependencies (``uv sync --group dev``).
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from folio_pages.pagination import PaginationDescriptor, compute_pagination

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "listing_pagination.feature"
)
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _pagination(scenario_state: dict[str, object]) -> PaginationDescriptor:
    return typ.cast("PaginationDescriptor", scenario_state["pagination"])


@given(parsers.parse("a listing of {count:d} items shown {per_page:d} per page"))
def given_listing(count: int, per_page: int, scenario_state: dict[str, object]) -> None:
    """Record the listing size and page size for the scenario."""
    scenario_state["items"] = list(range(count))
    scenario_state["per_page"] = per_page


@when(parsers.parse('page "{requested}" is requested'))
def when_page_requested(requested: str, scenario_state: dict[str, object]) -> None:
    """Compute pagination for the raw route parameter."""
    items = typ.cast("list[int]", scenario_state["items"])
    scenario_state["pagination"] = compute_pagination(
        len(items),
        requested,
        "/articles",
        per_page=typ.cast("int", scenario_state["per_page"]),
    )


@then(parsers.parse("the current page is {expected:d}"))
def then_current_page(expected: int, scenario_state: dict[str, object]) -> None:
    """Verify the resolved page number."""
    actual = _pagination(scenario_state).current_page
    assert actual == expected, f"expected page {expected}, got {actual}"


@then(parsers.parse("items {start:d} to {end:d} are selected"))
def then_items_selected(
    start: int, end: int, scenario_state: dict[str, object]
) -> None:
    """Verify the slice bounds and the items they select."""
    pagination = _pagination(scenario_state)
    assert (pagination.slice_start, pagination.slice_end) == (start, end)
    items = typ.cast("list[int]", scenario_state["items"])
    assert items[pagination.as_slice()] == items[start:end]


@then("there is no next page")
def then_no_next_page(scenario_state: dict[str, object]) -> None:
    """Verify the last page has no successor."""
    assert _pagination(scenario_state).next_page is None


@then(parsers.parse("the listing has {expected:d} pages"))
def then_total_pages(expected: int, scenario_state: dict[str, object]) -> None:
    """Verify the total page count."""
    assert _pagination(scenario_state).total_pages == expected
