"""Column colour palettes.

Columns cycle through a five-colour palette (orange, cyan, purple, pink,
yellow). The light palette holds darker variants of the same hues for
contrast on light backgrounds.
"""

from __future__ import annotations

import os
from typing import Callable, Literal, Mapping

Rgb = tuple[int, int, int]
Palette = tuple[Rgb, ...]
ThemeMode = Literal["dark", "light"]

_RESET = "\x1b[0m"
_BOLD = "\x1b[1m"

DARK_PALETTE: Palette = (
    (253, 151, 31),   # orange
    (102, 217, 239),  # cyan
    (190, 132, 255),  # purple
    (249, 38, 114),   # pink
    (230, 219, 116),  # yellow
)

LIGHT_PALETTE: Palette = (
    (207, 112, 0),
    (0, 137, 179),
    (104, 77, 153),
    (249, 0, 90),
    (153, 143, 47),
)


def color_for(column_index: int, palette: Palette) -> Rgb:
    """Return the palette entry for a column, cycling through the palette."""
    return palette[column_index % len(palette)]


def palette_for(theme: ThemeMode) -> Palette:
    return LIGHT_PALETTE if theme == "light" else DARK_PALETTE


def theme_for_background(rgb: Rgb) -> ThemeMode:
    """Light when the background's relative luminance is above one half."""
    r, g, b = rgb
    luminance = (0.2126 * r + 0.7152 * g + 0.0722 * b) / 255
    return "light" if luminance > 0.5 else "dark"


def detect_theme(
    environ: Mapping[str, str] | None = None,
    query: Callable[[], Rgb | None] | None = None,
) -> ThemeMode:
    """Guess whether the terminal has a dark or light background.

    ``CSVPRETTY_THEME`` (``dark`` / ``light``) wins. Next comes the background
    field of ``COLORFGBG`` (``fg;bg`` as set by rxvt, Konsole and others):
    colours 7 and 15 are light, other numbers dark. Otherwise *query* is
    asked for the actual background colour. Anything else means dark.
    """
    env = os.environ if environ is None else environ

    override = env.get("CSVPRETTY_THEME", "").strip().lower()
    if override in ("dark", "light"):
        return override  # type: ignore[return-value]

    colorfgbg = env.get("COLORFGBG", "")
    if colorfgbg:
        bg = colorfgbg.split(";")[-1]
        if bg in ("7", "15"):
            return "light"
        if bg.isdigit():
            return "dark"

    if query is not None:
        background = query()
        if background is not None:
            return theme_for_background(background)

    return "dark"


def colorize(text: str, rgb: Rgb, bold: bool = False) -> str:
    """Wrap *text* in a 24-bit foreground colour (and optional bold)."""
    if not text:
        return text
    r, g, b = rgb
    prefix = f"{_BOLD if bold else ''}\x1b[38;2;{r};{g};{b}m"
    return f"{prefix}{text}{_RESET}"
