"""Utility helpers shared by the folio configuration loader."""

from __future__ import annotations

from .models import SiteConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _normalize_url(value: object | None, default: str) -> str:
    """Return ``value`` without trailing slashes, or ``default`` when empty."""
    text = _optional_str(value)
    if text is None:
        return default
    return text.rstrip("/")


def _positive_int(key: str, value: object | None, default: int) -> int:
    """Validate that ``value`` is a positive integer, falling back to ``default``."""
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"'{key}' must be an integer, got {value!r}."
        raise SiteConfigError(msg)
    if value < 1:
        msg = f"'{key}' must be at least 1, got {value}."
        raise SiteConfigError(msg)
    return value


def _coerce_bool(key: str, value: object | None, *, default: bool) -> bool:
    """Validate a boolean flag, falling back to ``default`` when unset."""
    match value:
        case None:
            return default
        case bool():
            return value
        case _:
            msg = f"'{key}' must be true or false, got {value!r}."
            raise SiteConfigError(msg)


__all__ = [
    "_coerce_bool",
    "_normalize_url",
    "_optional_str",
    "_positive_int",
]
