"""Whitespace trimming matching JavaScript's ``String.prototype.trim``."""

from __future__ import annotations

# ECMAScript WhiteSpace and LineTerminator code points; str.strip() keeps U+FEFF
TRIM_CHARS = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def trim(text: str) -> str:
    return text.strip(TRIM_CHARS)
