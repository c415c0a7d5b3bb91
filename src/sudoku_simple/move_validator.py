"""
Input parsing helpers for the player's replies.

Two kinds of line are read each turn:
- coordinates: "row col", two whitespace-separated integers 1-9 (e.g. "5 2").
- number: a single integer 1-9.

Parsed results are returned zero-based with ok/reason, never raised.
"""
from __future__ import annotations

from typing import TypedDict

MIN_VALUE = 1
MAX_VALUE = 9


class ParsedInput(TypedDict, total=False):
    ok: bool
    row: int
    col: int
    num: int
    reason: str


def _to_digit(token: str) -> int | None:
    """Return token as an int in 1..9, or None. Only ASCII digits with an optional sign count."""
    if not (token.isascii() and token.lstrip("+-").isdigit()):
        return None
    try:
        value = int(token)
    except ValueError:
        return None
    if MIN_VALUE <= value <= MAX_VALUE:
        return value
    return None


def parse_coordinates(raw_text: str | None) -> ParsedInput:
    """Parse "row col" (1-based) into a zero-based cell."""
    tokens = (raw_text or "").split()
    if len(tokens) != 2:
        return {"ok": False, "reason": "invalid_input"}
    row, col = _to_digit(tokens[0]), _to_digit(tokens[1])
    if row is None or col is None:
        return {"ok": False, "reason": "invalid_input"}
    return {"ok": True, "row": row - 1, "col": col - 1}


def parse_number(raw_text: str | None) -> ParsedInput:
    num = _to_digit((raw_text or "").strip())
    if num is None:
        return {"ok": False, "reason": "invalid_number"}
    return {"ok": True, "num": num}


__all__ = [
    "parse_coordinates",
    "parse_number",
    "ParsedInput",
]
