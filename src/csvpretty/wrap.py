"""Cell text wrapping.

Splits a cell value into display lines no wider than a column budget. Embedded
newlines always force a break; what happens inside each physical line depends
on the wrap mode:

* ``word`` -- greedy whitespace-delimited word wrap, long words hard-broken
* ``char`` -- break between grapheme clusters, whitespace kept verbatim
* ``none`` -- no wrapping (column widths are sized to content instead)
"""

from __future__ import annotations

from typing import Literal

from csvpretty.errors import InvalidArgument
from csvpretty.width import clusters, display_width

WrapMode = Literal["word", "char", "none"]

WRAP_MODES: tuple[WrapMode, ...] = ("word", "char", "none")


def parse_wrap_mode(value: str) -> WrapMode:
    """Validate *value* as a wrap mode (case-insensitive)."""
    mode = value.strip().lower()
    for candidate in WRAP_MODES:
        if mode == candidate:
            return candidate
    raise InvalidArgument(
        f"invalid wrap mode {value!r} (expected one of: {', '.join(WRAP_MODES)})"
    )


def split_lines(text: str) -> list[str]:
    """Split *text* on ``\\n``, ``\\r\\n`` and lone ``\\r``."""
    return text.replace("\r\n", "\n").replace("\r", "\n").split("\n")


def wrap(text: str, budget: int, mode: WrapMode) -> list[str]:
    """Wrap *text* into lines of at most *budget* display columns.

    A budget below 1 is treated as 1. Empty text yields ``[""]`` so that the
    cell still occupies one line.
    """
    budget = max(budget, 1)
    lines: list[str] = []

    for physical_line in split_lines(text):
        if mode == "none":
            lines.append(physical_line)
        elif mode == "char":
            lines.extend(_wrap_chars(physical_line, budget))
        else:
            lines.extend(_wrap_words(physical_line, budget))

    return lines


def _wrap_words(line: str, budget: int) -> list[str]:
    """Greedy word wrap of a single physical line."""
    result: list[str] = []
    current = ""
    current_width = 0

    for token in line.split():
        token_width = display_width(token)

        if current and current_width + 1 + token_width <= budget:
            current += " " + token
            current_width += 1 + token_width
            continue

        if current:
            result.append(current)

        if token_width <= budget:
            current = token
            current_width = token_width
            continue

        # Too long for any line: hard-break it, keep the tail open.
        chunks = _wrap_chars(token, budget)
        result.extend(chunks[:-1])
        current = chunks[-1]
        current_width = display_width(current)

    if current or not result:
        result.append(current)

    return result


def _wrap_chars(line: str, budget: int) -> list[str]:
    """Break a single physical line between grapheme clusters.

    A cluster wider than *budget* is placed alone on its own line.
    """
    result: list[str] = []
    current: list[str] = []
    current_width = 0

    for g, w in clusters(line):
        if current and w and current_width + w > budget:
            result.append("".join(current))
            current = []
            current_width = 0
        current.append(g)
        current_width += w

    result.append("".join(current))
    return result
