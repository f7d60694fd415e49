"""Shared dataclasses used by the article preparation pipeline."""

from __future__ import annotations

import dataclasses as dc

from folio_pages.markdown_text import HeadingEntry


@dc.dataclass(slots=True)
class PreparedArticle:
    """Markdown ready for publishing together with its table of contents.

    Attributes
    ----------
    markdown : str
        Article source with anchored headings and rewritten links.
    headings : list[HeadingEntry] or None
        Table-of-contents entries collected from the original source, or
        ``None`` when the article has no headings.
    """

    markdown: str
    headings: list[HeadingEntry] | None


__all__ = ["PreparedArticle"]
