r"""Post-process markdown articles before they are published.

This module holds the text transforms applied to every article: building
URL-safe slugs, collecting a table of contents from ATX headings, anchoring
those headings, and rewriting markdown and HTML links so they resolve on the
live site. Every function is pure and total: malformed input is returned
unchanged rather than raising, so a botched transform degrades to the source
text instead of breaking a page.

Example
-------
>>> from folio_pages.markdown_text import extract_headings, slugify
>>> slugify("Hello, World!")
'hello-world'
>>> extract_headings("# Intro\nBody\n## Next steps")[1].slug
'next-steps'
"""

from __future__ import annotations

import dataclasses as dc
import re
import unicodedata

# `[^\r\n]` and the lookahead keep a CRLF carriage return out of the label
REGEX_MARKDOWN_HEADINGS = re.compile(r"^(#{1,4}) ([^\r\n]*)?(?=\r|$)", re.MULTILINE)
# Greedy label: an image nested in a link (``[![alt](img)](url)``) is captured
# whole and needs a second pass to rewrite the inner target.
REGEX_MARKDOWN_LINKS = re.compile(r"\[([^\r\n]*)\]\(([^\r\n]*?)\)")
REGEX_HTML_RELATIVE_URLS = re.compile(
    r"<(?:a|img)\s+(?:[^>]*?\s+)?(?:href|src)=(\"|')([/.][^\r\n]*?)\1", re.IGNORECASE
)
REGEX_FILE_EXTENSIONS = re.compile(r"\.mdx?|\.html?", re.IGNORECASE)

MAX_LINK_NESTING = 8

_COMBINING_MARKS = re.compile("[\u0300-\u036f]")
_WHITESPACE_RUNS = re.compile(r"\s+")
_NON_SLUG_CHARS = re.compile(r"[^\w-]+", re.ASCII)
_HYPHEN_RUNS = re.compile(r"--+")


@dc.dataclass(frozen=True, slots=True)
class HeadingEntry:
    """Table-of-contents entry for a single markdown heading.

    Attributes
    ----------
    level : int
        Number of ``#`` characters in the heading marker (1 to 4).
    text : str
        Heading label with any embedded markdown links removed.
    slug : str
        Anchor identifier derived from ``text`` via :func:`slugify`.
    """

    level: int
    text: str
    slug: str


def slugify(text: str) -> str:
    """Normalize human-readable text into a lowercase, hyphenated slug.

    Accented characters are decomposed and their diacritics dropped, the
    result is lowercased and trimmed, whitespace runs become single hyphens,
    and anything outside ASCII word characters and hyphens is removed.

    Parameters
    ----------
    text : str
        Arbitrary label, typically a heading or title.

    Returns
    -------
    str
        The slug; empty when ``text`` contains no usable characters.

    Examples
    --------
    >>> slugify("  Crème   brûlée ")
    'creme-brulee'
    """
    decomposed = unicodedata.normalize("NFD", str(text))
    stripped = _COMBINING_MARKS.sub("", decomposed).lower().strip()
    hyphenated = _WHITESPACE_RUNS.sub("-", stripped)
    return _HYPHEN_RUNS.sub("-", _NON_SLUG_CHARS.sub("", hyphenated))


def _heading_entry(line: str) -> HeadingEntry:
    """Build a heading entry from a matched heading line."""
    # drop links already in the heading, e.g. the trailing ``[#](#slug)`` anchor
    cleaned = REGEX_MARKDOWN_LINKS.sub("", line).strip()
    parsed = REGEX_MARKDOWN_HEADINGS.match(cleaned)
    if parsed is None:
        # only the marker survived the cleanup (``# [link](url)``)
        marker = cleaned[: len(cleaned) - len(cleaned.lstrip("#"))]
        label = ""
    else:
        marker = parsed.group(1)
        label = parsed.group(2) or ""
    return HeadingEntry(level=len(marker), text=label, slug=slugify(label))


def extract_headings(markdown: str) -> list[HeadingEntry] | None:
    """Collect level 1-4 ATX headings for a table of contents.

    Parameters
    ----------
    markdown : str
        Raw markdown source.

    Returns
    -------
    list[HeadingEntry] or None
        One entry per heading in document order, or ``None`` when the source
        contains no heading lines at all. Identical labels share a slug.
    """
    matches = list(REGEX_MARKDOWN_HEADINGS.finditer(markdown))
    if not matches:
        return None
    return [_heading_entry(match.group(0)) for match in matches]


def linkify_headings(
    markdown: str,
    anchor_before_heading: bool = False,  # noqa: ARG001, FBT001, FBT002
) -> str:
    """Anchor every heading and append a self-link to it.

    Each heading line is replaced with an ``<a id="slug" />`` line followed by
    the original heading and a trailing ``[#](#slug)`` link. Links inside the
    label are left out of the slug, so it matches the ``extract_headings`` entry
    for the same line.

    Parameters
    ----------
    markdown : str
        Raw markdown source.
    anchor_before_heading : bool, optional
        Accepted for compatibility with existing callers. The anchor is
        always emitted above the heading, whatever the value.

    Returns
    -------
    str
        Markdown with anchored headings; other lines are untouched.
    """

    def _anchor(match: re.Match[str]) -> str:
        marker = match.group(1)
        label = match.group(2) or ""
        # same slug as the table of contents entry for this heading
        slug = _heading_entry(match.group(0)).slug
        return f'<a id="{slug}" />\n{marker} {label} [#](#{slug})'

    return REGEX_MARKDOWN_HEADINGS.sub(_anchor, markdown)


def strip_file_extensions(url: str) -> str:
    """Remove every ``.md``, ``.mdx``, ``.htm`` and ``.html`` from ``url``."""
    return REGEX_FILE_EXTENSIONS.sub("", url)


def _rewrite_links(markdown: str, base_url: str, depth: int) -> str:
    """Rewrite markdown links, descending into image labels up to ``depth``."""

    def _replace(match: re.Match[str]) -> str:
        label, url = match.group(1), match.group(2)
        if not label or not url:
            return match.group(0)
        if label.startswith("!") and depth > 0:
            label = "!" + _rewrite_links(label[1:], base_url, depth - 1)
        return f"[{label}]({base_url}/{strip_file_extensions(url)})"

    return REGEX_MARKDOWN_LINKS.sub(_replace, markdown)


def rewrite_article_links(markdown: str, base_url: str) -> str:
    """Point every inline markdown link at the published articles URL.

    Parameters
    ----------
    markdown : str
        Raw markdown source.
    base_url : str
        Prefix joined to each link target with a single ``/``.

    Returns
    -------
    str
        Markdown where each ``[label](url)`` becomes
        ``[label](<base_url>/<url>)`` with file extensions removed. Matches
        with an empty label or url are left as they were. Images nested in a
        link label are rewritten as well and keep their ``!`` marker.

    Examples
    --------
    >>> rewrite_article_links("[text](./post.md)", "https://nick.af/articles")
    '[text](https://nick.af/articles/./post)'
    """
    return _rewrite_links(markdown, base_url, MAX_LINK_NESTING)


def absolutize_relative_links(markdown: str, base: str) -> str:
    """Resolve relative ``<a href>`` and ``<img src>`` values against ``base``.

    Parameters
    ----------
    markdown : str
        Markdown (or HTML) containing raw anchor and image tags.
    base : str
        Path of the current document; its last segment is treated as the
        file name and ignored during resolution.

    Returns
    -------
    str
        Source text where each attribute value starting with ``/`` or ``.``
        has its file extension removed and is resolved with
        :func:`resolve_path`. Only the attribute value is replaced.
    """

    def _replace(match: re.Match[str]) -> str:
        starter, url = match.group(1), match.group(2)
        whole = match.group(0)
        if not starter or not url:
            return whole
        resolved = resolve_path(base, strip_file_extensions(url))
        offset = match.start(0)
        return (
            whole[: match.start(2) - offset]
            + resolved
            + whole[match.end(2) - offset :]
        )

    return REGEX_HTML_RELATIVE_URLS.sub(_replace, markdown)


def resolve_path(base: str, relative: str) -> str:
    """Join ``relative`` onto the directory of ``base`` using ``/`` segments.

    The last segment of ``base`` is dropped as a file name. When ``relative``
    is rooted and repeats the last remaining base directory, that repeated
    segment is skipped. ``.`` and empty segments are ignored, ``..`` pops a
    segment (a no-op once nothing is left) and anything else is appended.
    No filesystem access is performed.

    Examples
    --------
    >>> resolve_path("a/b/c", "../d")
    'a/d'
    >>> resolve_path("/articles/post", "/articles/img.png")
    '/articles/img.png'
    """
    segments = base.split("/")
    parts = relative.split("/")
    segments.pop()

    if len(parts) > 1 and parts[0] == "" and segments and segments[-1] == parts[1]:
        del parts[1]

    for part in parts:
        if part in (".", ""):
            continue
        if part == "..":
            if segments:
                segments.pop()
        else:
            segments.append(part)
    return "/".join(segments)


__all__ = [
    "MAX_LINK_NESTING",
    "REGEX_FILE_EXTENSIONS",
    "REGEX_HTML_RELATIVE_URLS",
    "REGEX_MARKDOWN_HEADINGS",
    "REGEX_MARKDOWN_LINKS",
    "HeadingEntry",
    "absolutize_relative_links",
    "extract_headings",
    "linkify_headings",
    "resolve_path",
    "rewrite_article_links",
    "slugify",
    "strip_file_extensions",
]
