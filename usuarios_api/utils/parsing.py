"""Permissive parsing helpers for path parameters."""

from __future__ import annotations

import re

# Whitespace and line terminators skipped by parseInt (Zs category plus TAB, VT, FF, BOM, LF, CR, LS, PS).
_JS_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
_HEX_PREFIX = re.compile(r"^([+-]?)0[xX]([0-9a-fA-F]+)")
_DECIMAL_PREFIX = re.compile(r"^[+-]?[0-9]+")


def parse_int_prefix(raw: str) -> int | None:
    """Read an integer from the start of ``raw`` the way ``parseInt`` does.

    Leading whitespace is skipped, a ``0x`` prefix switches to hexadecimal and
    trailing garbage is ignored, so ``"12abc"`` is 12. Only ASCII digits
    count. Returns None when no digits lead the string.
    """
    text = raw.lstrip(_JS_WHITESPACE)
    hex_match = _HEX_PREFIX.match(text)
    if hex_match:
        sign, digits = hex_match.groups()
        value = int(digits, 16)
        return -value if sign == "-" else value
    decimal_match = _DECIMAL_PREFIX.match(text)
    if decimal_match is None:
        return None
    return int(decimal_match.group(0))
