"""Cyclopts CLI entrypoint for preparing folio articles and listing pages.

The ``folio`` console script defined here exposes the article text transforms:
printing an article's table of contents, writing a publish-ready copy of an
article with anchored headings and rewritten links, slugifying labels, and
computing pagination for listing pages. Site-wide settings come from
``config/site.yaml`` and every option can also be supplied through a
``FOLIO_``-prefixed environment variable.

Examples
--------
Prepare a single article into the configured output directory:

>>> from folio_pages.cli import app
>>> app(["prepare", "articles/hello-world.md"])  # doctest: +SKIP

Inspect the third page of a 25-item listing:

>>> app(["paginate", "--count", "25", "--page", "3"])  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import json
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .article import ArticleProcessor
from .config import SiteConfig, load_site_config
from .markdown_text import extract_headings, slugify
from .pagination import compute_pagination

DEFAULT_CONFIG = Path("config/site.yaml")

app = App(name="folio", config=cyclopts.config.Env("FOLIO_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _load_config(path: Path) -> SiteConfig:
    """Load ``path``, using built-in defaults when the default file is absent."""
    if path == DEFAULT_CONFIG and not path.exists():
        return SiteConfig()
    return load_site_config(path)


@app.command(help="Print the table of contents for a markdown article.")
def toc(
    path: typ.Annotated[Path, Parameter(help="Markdown article to scan")],
) -> None:
    """Print a nested bullet list linking to each heading of ``path``.

    Parameters
    ----------
    path : Path
        Markdown file whose level 1-4 headings are listed.

    Returns
    -------
    None
        Writes one ``- [text](#slug)`` line per heading, indented by level, or
        ``no headings found`` when the article has none.
    """
    headings = extract_headings(path.read_text(encoding="utf-8"))
    if headings is None:
        print("no headings found")
        return
    for heading in headings:
        indent = "  " * (heading.level - 1)
        print(f"{indent}- [{heading.text}](#{heading.slug})")


@app.command(help="Write a publish-ready copy of a markdown article.")
def prepare(
    path: typ.Annotated[Path, Parameter(help="Markdown article to prepare")],
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="FOLIO_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="FOLIO_OUTPUT_DIR"),
    ] = None,
) -> None:
    """Anchor headings and rewrite links in ``path``, then write the result.

    Parameters
    ----------
    path : Path
        Markdown article to prepare.
    config : Path, optional
        Path to the ``site.yaml`` configuration file; built-in defaults apply
        when the default file does not exist.
    output_dir : Path or None, optional
        Override for the configured output directory.

    Returns
    -------
    None
        Writes the prepared article and prints its path.
    """
    site_config = _load_config(config)
    written = ArticleProcessor(site_config, output_dir=output_dir).run(path)
    print(f"wrote {_format_path(written)}")


@app.command(help="Print the URL slug for a label.")
def slug(text: typ.Annotated[str, Parameter(help="Label to slugify")]) -> None:
    """Print ``text`` converted with :func:`~folio_pages.markdown_text.slugify`."""
    print(slugify(text))


@app.command(help="Compute pagination for a listing page.")
def paginate(
    *,
    count: typ.Annotated[int, Parameter(help="Total number of items")] = 0,
    page: typ.Annotated[str, Parameter(help="Requested page")] = "1",
    per_page: typ.Annotated[
        int | None, Parameter(help="Override the configured page size")
    ] = None,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="FOLIO_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Print the pagination descriptor for ``page`` as JSON.

    Parameters
    ----------
    count : int, optional
        Total number of items in the listing.
    page : str, optional
        Requested page exactly as it would arrive from a route parameter;
        unparseable values fall back to page 1.
    per_page : int or None, optional
        Page size; defaults to the configured ``per_page``.
    config : Path, optional
        Path to the ``site.yaml`` configuration file.

    Returns
    -------
    None
        Prints the descriptor fields plus ``previous_href`` and ``next_href``
        (``null`` at either edge of the listing).
    """
    site_config = _load_config(config)
    pagination = compute_pagination(
        count,
        page,
        site_config.base_href,
        site_config.href_template,
        per_page if per_page is not None else site_config.per_page,
    )
    payload: dict[str, typ.Any] = dc.asdict(pagination)
    previous_page, next_page = pagination.previous_page, pagination.next_page
    payload["previous_href"] = (
        pagination.href_for(previous_page) if previous_page else None
    )
    payload["next_href"] = pagination.href_for(next_page) if next_page else None
    print(json.dumps(payload, indent=2))


def main() -> None:
    """Invoke the Cyclopts application that powers the `folio` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
