"""Typed dataclasses describing folio site configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from folio_pages._constants import (
    DEFAULT_ARTICLES_URL,
    DEFAULT_HREF_TEMPLATE,
    DEFAULT_PER_PAGE,
)


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class SiteConfig:
    """Site-wide settings for article preparation and listing pagination.

    Attributes
    ----------
    articles_url : str
        Absolute URL prefix that markdown links are rewritten onto.
    base_href : str
        Route prefix substituted into ``href_template`` for listing pages.
    href_template : str
        Template used to build pagination links.
    per_page : int
        Number of items shown on each listing page.
    anchor_before_heading : bool
        Forwarded to heading anchoring; currently has no effect on placement.
    output_dir : Path
        Directory where prepared articles are written.
    """

    articles_url: str = DEFAULT_ARTICLES_URL
    base_href: str = ""
    href_template: str = DEFAULT_HREF_TEMPLATE
    per_page: int = DEFAULT_PER_PAGE
    anchor_before_heading: bool = False
    output_dir: Path = Path("public")


__all__ = ["SiteConfig", "SiteConfigError"]
