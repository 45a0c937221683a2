"""Link canonicalisation helpers."""

from __future__ import annotations

_SCHEMES = ("http://", "https://")


def ensure_absolute_url(raw: str) -> str | None:
    """Return *raw* as an absolute http(s) URL, or ``None`` if it cannot be formatted.

    Scheme-less input gets ``https://`` prepended. This is a syntactic
    transform only; the host is never validated or resolved.
    """
    try:
        if raw.startswith(_SCHEMES):
            return raw
        return "https://" + raw
    except (AttributeError, TypeError):
        return None
