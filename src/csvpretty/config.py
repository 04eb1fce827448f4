"""Run settings resolved from command-line flags and the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Callable, Mapping, TextIO

from csvpretty.terminal import query_background, supports_color, terminal_width
from csvpretty.theme import Rgb, ThemeMode, detect_theme
from csvpretty.wrap import WrapMode


@dataclass
class Settings:
    """Everything a single rendering run needs to know."""

    wrap_mode: WrapMode = "word"
    show_line_numbers: bool = False
    color: bool = False
    terminal_width: int = 80
    theme: ThemeMode = "dark"
    log_level: int = logging.WARNING

    @classmethod
    def resolve(
        cls,
        wrap_mode: WrapMode,
        line_numbers: bool,
        no_color: bool,
        stdout: TextIO,
        environ: Mapping[str, str] | None = None,
        background_query: Callable[[], Rgb | None] = query_background,
    ) -> Settings:
        """Combine CLI flags with ``NO_COLOR``, ``COLUMNS``, ``TERM``,
        ``CSVPRETTY_THEME``, ``COLORFGBG`` and ``CSVPRETTY_LOG_LEVEL``.

        *background_query* is only asked for the terminal background when
        colours are on and the environment does not settle the theme.
        """
        env = os.environ if environ is None else environ

        color = not no_color and not env.get("NO_COLOR") and supports_color(stdout, env)

        return cls(
            wrap_mode=wrap_mode,
            show_line_numbers=line_numbers,
            color=color,
            terminal_width=terminal_width(stdout, env),
            theme=detect_theme(env, background_query) if color else "dark",
            log_level=_log_level(env.get("CSVPRETTY_LOG_LEVEL", "")),
        )


def _log_level(value: str) -> int:
    level = logging.getLevelName(value.strip().upper()) if value.strip() else None
    return level if isinstance(level, int) else logging.WARNING
