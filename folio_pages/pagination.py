"""Pagination math for article and project listings.

:func:`compute_pagination` turns a total item count and a requested page
(often a raw route parameter) into an immutable :class:`PaginationDescriptor`.
Listing pages use the descriptor's slice bounds to cut their own item lists and
its href helpers to render previous/next navigation. Bad input never raises:
unparseable or out-of-range pages fall back to the first page.

Examples
--------
>>> from folio_pages.pagination import compute_pagination
>>> pagination = compute_pagination(25, "3", per_page=10)
>>> (pagination.total_pages, pagination.slice_start, pagination.slice_end)
(3, 20, 30)
>>> list(range(25))[pagination.as_slice()]
[20, 21, 22, 23, 24]
"""

from __future__ import annotations

import dataclasses as dc
import math
import re

from ._constants import DEFAULT_HREF_TEMPLATE, DEFAULT_PER_PAGE

_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)", re.ASCII)


@dc.dataclass(frozen=True, slots=True)
class PaginationDescriptor:
    """Resolved pagination state for a single listing request.

    Attributes
    ----------
    total_count : int
        Number of items being paginated.
    current_page : int
        One-based page being displayed.
    per_page : int
        Number of items shown on each page.
    total_pages : int
        Number of pages needed for ``total_count`` items.
    base_href : str
        Route prefix substituted for ``{{baseHref}}`` in ``href_template``.
    href_template : str
        Template used to build page links; ``{{id}}`` is the page number.
    slice_start : int
        Inclusive start index of the current page's items.
    slice_end : int
        Exclusive end index of the current page's items.
    """

    total_count: int
    current_page: int
    per_page: int
    total_pages: int
    base_href: str
    href_template: str
    slice_start: int
    slice_end: int

    @property
    def previous_page(self) -> int | None:
        """Return the page before the current one, or None on the first page."""
        return self.current_page - 1 if self.current_page > 1 else None

    @property
    def next_page(self) -> int | None:
        """Return the page after the current one, or None on the last page."""
        if self.current_page < self.total_pages:
            return self.current_page + 1
        return None

    def as_slice(self) -> slice:
        """Return the slice selecting the current page's items."""
        return slice(self.slice_start, self.slice_end)

    def href_for(self, page: int) -> str:
        """Render ``href_template`` for ``page``.

        Examples
        --------
        >>> compute_pagination(20, base_href="/articles").href_for(2)
        '/articles/browse/2'
        """
        return self.href_template.replace("{{baseHref}}", self.base_href).replace(
            "{{id}}", str(page)
        )


def _normalize_page(requested_page: str | float | None) -> int:
    """Coerce a requested page into a page number of at least 1."""
    match requested_page:
        case str() as text:
            # leading integer prefix, the way route parameters were parsed
            parsed = _LEADING_INTEGER.match(text or "1")
            page = int(parsed.group(1)) if parsed else 0
        case bool():
            page = 0
        case int() as number:
            page = number
        case float() as number if math.isfinite(number):
            page = int(number)
        case _:
            page = 0
    return max(page, 1)


def compute_pagination(
    total_count: int = 0,
    requested_page: str | int | None = 1,
    base_href: str = "",
    href_template: str = DEFAULT_HREF_TEMPLATE,
    per_page: int = DEFAULT_PER_PAGE,
) -> PaginationDescriptor:
    """Compute the parameters used to paginate a listing.

    Parameters
    ----------
    total_count : int, optional
        Total number of items to paginate. Negative values count as zero.
    requested_page : str or int, optional
        Page to display, typically straight from a route parameter. Strings
        are parsed by their leading integer; anything unparseable, missing,
        or below 1 becomes page 1.
    base_href : str, optional
        Base ``href`` used when creating routes.
    href_template : str, optional
        Template used for page links, defaulting to
        ``"{{baseHref}}/browse/{{id}}"``.
    per_page : int, optional
        Number of items per page. Values below 1 fall back to the default
        page size of 9.

    Returns
    -------
    PaginationDescriptor
        Descriptor whose ``slice_start``/``slice_end`` select the requested
        page from an externally held, ordered item list.
    """
    page = _normalize_page(requested_page)
    count = max(total_count, 0)
    size = per_page if per_page >= 1 else DEFAULT_PER_PAGE
    start = 0 if page <= 1 else (page - 1) * size
    return PaginationDescriptor(
        total_count=count,
        current_page=page,
        per_page=size,
        total_pages=-(-count // size),
        base_href=base_href,
        href_template=href_template,
        slice_start=start,
        slice_end=start + size,
    )


__all__ = ["PaginationDescriptor", "compute_pagination"]
