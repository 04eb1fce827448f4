"""Display width measurement for terminal cells.

Measures how many terminal columns a string occupies, grapheme cluster by
grapheme cluster: combining marks and control characters take no columns,
East Asian wide / fullwidth characters and emoji sequences take two.
Escape sequences are kept whole and take no columns, both here and in the
wrapper, which walks the same clusters.
"""

from __future__ import annotations

import re
import unicodedata
from functools import lru_cache
from typing import Iterator

import grapheme
import wcwidth as _wcwidth

# CSI (SGR and friends), OSC 8 hyperlinks, APC
_ESCAPE_RE = re.compile(
    r"\x1b\[[0-9;?]*[ -/]*[@-~]"
    r"|\x1b\]8;[^\x07\x1b]*(?:\x07|\x1b\\)"
    r"|\x1b_[^\x07\x1b]*(?:\x07|\x1b\\)"
)

TAB_WIDTH = 3

_ZERO_WIDTH_CATEGORIES = frozenset({"Cc", "Cf", "Mn", "Me", "Mc"})

# Code points that turn a multi-codepoint cluster into a wide emoji.
_EMOJI_SEQUENCE_RANGES = (
    (0xFE0F, 0xFE0F),    # VS16, emoji presentation
    (0x200D, 0x200D),    # ZWJ
    (0x1F3FB, 0x1F3FF),  # skin tone modifiers
    (0x1F1E6, 0x1F1FF),  # regional indicators
)


def strip_ansi(text: str) -> str:
    """Remove CSI, OSC 8 and APC escape sequences from *text*."""
    return _ESCAPE_RE.sub("", text)


def graphemes(text: str) -> list[str]:
    """Split *text* into grapheme clusters."""
    return list(grapheme.graphemes(text))


def _is_emoji_sequence(cluster: str) -> bool:
    if len(cluster) < 2:
        return False
    for ch in cluster:
        cp = ord(ch)
        if any(lo <= cp <= hi for lo, hi in _EMOJI_SEQUENCE_RANGES):
            return True
    base = ord(cluster[0])
    return base >= 0x1F000 or 0x2600 <= base <= 0x27BF


@lru_cache(maxsize=4096)
def grapheme_width(cluster: str) -> int:
    """Return the terminal display width of a single grapheme cluster.

    Tabs are :data:`TAB_WIDTH` wide. Emoji sequences are 2. Clusters that
    start with a control, format or combining character are 0. Anything else
    is as wide as its base character according to wcwidth.
    """
    if not cluster:
        return 0
    if cluster == "\t":
        return TAB_WIDTH
    if _is_emoji_sequence(cluster):
        return 2

    base = cluster[0]
    if unicodedata.category(base) in _ZERO_WIDTH_CATEGORIES:
        return 0
    return max(_wcwidth.wcwidth(base), 0)


def clusters(text: str) -> Iterator[tuple[str, int]]:
    """Yield ``(cluster, width)`` for every unit of *text*.

    A unit is either a whole escape sequence (width 0) or a grapheme cluster.
    """
    pos = 0
    for match in _ESCAPE_RE.finditer(text):
        for g in grapheme.graphemes(text[pos : match.start()]):
            yield g, grapheme_width(g)
        yield match.group(), 0
        pos = match.end()
    for g in grapheme.graphemes(text[pos:]):
        yield g, grapheme_width(g)


@lru_cache(maxsize=512)
def _measure(text: str) -> int:
    return sum(w for _, w in clusters(text))


def display_width(text: str) -> int:
    """Calculate the number of terminal columns *text* occupies.

    *text* must be a single line; split multi-line cell values first.
    """
    if not text:
        return 0
    if text.isascii() and text.isprintable():
        return len(text)
    return _measure(text)


def max_cluster_width(text: str) -> int:
    """Width of the widest single cluster in *text* (0 for empty text).

    No line of a cell wrapped to a narrower budget can avoid overflowing.
    """
    if not text:
        return 0
    if text.isascii():
        return 1
    return max((w for _, w in clusters(text)), default=0)
