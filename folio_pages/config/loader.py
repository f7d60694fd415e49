"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from folio_pages._constants import (
    DEFAULT_ARTICLES_URL,
    DEFAULT_HREF_TEMPLATE,
    DEFAULT_PER_PAGE,
)

from .helpers import _coerce_bool, _normalize_url, _optional_str, _positive_int
from .models import SiteConfig, SiteConfigError


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing site-wide article settings.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration; keys missing from the ``site`` block take their
        defaults.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If the ``site`` block is not a mapping or holds invalid values (for
        example, a ``per_page`` below 1).
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from folio_pages.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.per_page  # doctest: +SKIP
    9
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    site = raw.get("site") or {}
    if not isinstance(site, dict):
        msg = "The 'site' block must be a mapping."
        raise SiteConfigError(msg)
    return _build_site_config(site)


def _build_site_config(payload: typ.Mapping[str, typ.Any]) -> SiteConfig:
    """Build a SiteConfig from the ``site`` mapping, applying defaults."""
    output_dir = _optional_str(payload.get("output_dir"))
    return SiteConfig(
        articles_url=_normalize_url(payload.get("articles_url"), DEFAULT_ARTICLES_URL),
        base_href=_normalize_url(payload.get("base_href"), ""),
        href_template=_optional_str(payload.get("href_template"))
        or DEFAULT_HREF_TEMPLATE,
        per_page=_positive_int("per_page", payload.get("per_page"), DEFAULT_PER_PAGE),
        anchor_before_heading=_coerce_bool(
            "anchor_before_heading",
            payload.get("anchor_before_heading"),
            default=False,
        ),
        output_dir=Path(output_dir) if output_dir else Path("public"),
    )


__all__ = ["load_site_config"]
