"""Python-Markdown integration for article preparation."""

from __future__ import annotations

import typing as typ

from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor

from .processor import prepare_article

if typ.TYPE_CHECKING:
    from markdown import Markdown
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any


class ArticleTextExtension(Extension):
    """Anchor headings and rewrite links before markdown is converted.

    Insert this extension into a ``markdown.Markdown`` instance so the article
    source is prepared exactly as :func:`prepare_article` would prepare it:
    headings gain ``id`` anchors and self-links, markdown links point at the
    published articles URL, and relative HTML links resolve against the
    article path.
    """

    def __init__(
        self,
        articles_url: str,
        source_path: str = "",
        *,
        anchor_before_heading: bool = False,
    ) -> None:
        super().__init__()
        self.articles_url = articles_url
        self.source_path = source_path
        self.anchor_before_heading = anchor_before_heading

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the article preprocessor on the Markdown instance."""
        processor = ArticleTextPreprocessor(
            md,
            self.articles_url,
            self.source_path,
            anchor_before_heading=self.anchor_before_heading,
        )
        # ahead of html_block (20) so raw anchors are still plain text
        md.preprocessors.register(processor, "folio_article_text", 25)


class ArticleTextPreprocessor(Preprocessor):
    """Run article preparation over the raw markdown lines."""

    def __init__(
        self,
        md: Markdown,
        articles_url: str,
        source_path: str,
        *,
        anchor_before_heading: bool,
    ) -> None:
        super().__init__(md)
        self.articles_url = articles_url
        self.source_path = source_path
        self.anchor_before_heading = anchor_before_heading

    def run(self, lines: list[str]) -> list[str]:
        """Return the prepared article split back into lines."""
        prepared = prepare_article(
            "\n".join(lines),
            articles_url=self.articles_url,
            source_path=self.source_path,
            anchor_before_heading=self.anchor_before_heading,
        )
        return prepared.markdown.split("\n")


__all__ = ["ArticleTextExtension", "ArticleTextPreprocessor"]
