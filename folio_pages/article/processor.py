"""High-level orchestration for preparing markdown articles.

This module chains the transforms from :mod:`folio_pages.markdown_text` in the
order the site's article pages need them: collect the table of contents, point
markdown links at the published articles URL, resolve raw HTML links against
the article's own path, and finally anchor every heading.
:class:`ArticleProcessor` wraps the same preparation around file reads and
writes for the ``folio prepare`` command.

Example
-------
>>> from pathlib import Path
>>> from folio_pages.config import SiteConfig
>>> from folio_pages.article import ArticleProcessor
>>> processor = ArticleProcessor(SiteConfig(output_dir=Path("public")))
>>> processor.run(Path("articles/hello-world.md"))  # doctest: +SKIP
PosixPath('public/hello-world.md')
"""

from __future__ import annotations

import typing as typ

from folio_pages.markdown_text import (
    absolutize_relative_links,
    extract_headings,
    linkify_headings,
    rewrite_article_links,
)

from .models import PreparedArticle

if typ.TYPE_CHECKING:
    from pathlib import Path

    from folio_pages.config import SiteConfig


def prepare_article(
    markdown: str,
    *,
    articles_url: str,
    source_path: str = "",
    anchor_before_heading: bool = False,
) -> PreparedArticle:
    """Apply every publishing transform to an article's markdown.

    Parameters
    ----------
    markdown : str
        Raw article source.
    articles_url : str
        Prefix that markdown link targets are rewritten onto.
    source_path : str, optional
        Site path of the article, used as the base for relative HTML links.
    anchor_before_heading : bool, optional
        Forwarded to :func:`~folio_pages.markdown_text.linkify_headings`.

    Returns
    -------
    PreparedArticle
        Transformed markdown plus headings collected before anchoring.
    """
    headings = extract_headings(markdown)
    text = rewrite_article_links(markdown, articles_url)
    text = absolutize_relative_links(text, source_path)
    # anchoring last keeps the ``[#](#slug)`` self-links out of the rewrite
    text = linkify_headings(text, anchor_before_heading)
    return PreparedArticle(markdown=text, headings=headings)


class ArticleProcessor:
    """Read article markdown from disk and write the prepared version."""

    def __init__(self, config: SiteConfig, *, output_dir: Path | None = None) -> None:
        """Initialize the processor with site settings.

        Parameters
        ----------
        config : SiteConfig
            Site configuration providing the articles URL and heading options.
        output_dir : Path, optional
            Override for the output directory; defaults to ``config.output_dir``.
        """
        self.config = config
        self.output_dir = output_dir or config.output_dir

    def prepare(self, markdown: str, source_path: str = "") -> PreparedArticle:
        """Prepare ``markdown`` using the configured site settings."""
        return prepare_article(
            markdown,
            articles_url=self.config.articles_url,
            source_path=source_path,
            anchor_before_heading=self.config.anchor_before_heading,
        )

    def run(self, source: Path) -> Path:
        """Prepare the article at ``source`` and write it to the output directory.

        Returns
        -------
        Path
            Location of the written article, named after ``source``.

        Raises
        ------
        ValueError
            If ``source`` already sits in the output directory, since writing
            would overwrite it.

        Notes
        -----
        Creates the output directory when needed and always terminates the
        written file with a newline. Filesystem errors propagate.
        """
        markdown = source.read_text(encoding="utf-8")
        prepared = self.prepare(markdown, source.as_posix())
        output_path = self.output_dir / source.name
        if output_path.resolve() == source.resolve():
            msg = f"Refusing to overwrite source article '{source}'."
            raise ValueError(msg)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        text = prepared.markdown
        if not text.endswith("\n"):
            text += "\n"
        output_path.write_text(text, encoding="utf-8")
        return output_path


__all__ = ["ArticleProcessor", "prepare_article"]
