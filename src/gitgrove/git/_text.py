"""Text helpers shared by the parsers."""

from __future__ import annotations

from typing import List

# str.strip() also treats the 0x1C-0x1F separators as whitespace.
_WHITESPACE = (
    " \t\n\r\x0b\x0c\x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def split_lines(text: str) -> List[str]:
    """Split git output on LF only, dropping one trailing CR per line."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def strip_ws(text: str) -> str:
    """Trim surrounding whitespace without touching control separators."""
    return text.strip(_WHITESPACE)
