"""Terminal capability detection for the output stream."""

from __future__ import annotations

import logging
import os
import re
import select
import termios
import time
import tty
from typing import Mapping, TextIO

from csvpretty.theme import Rgb

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 80

# OSC 11 asks for the background colour; DA1 follows it because every
# terminal answers DA1, so its reply marks the end of the wait.
_BACKGROUND_QUERY = b"\x1b]11;?\x1b\\\x1b[c"
_DA1_REPLY_RE = re.compile(rb"\x1b\[\?[0-9;]*c")
_BACKGROUND_REPLY_RE = re.compile(
    r"\]11;rgba?:([0-9a-fA-F]{1,4})/([0-9a-fA-F]{1,4})/([0-9a-fA-F]{1,4})"
)


def terminal_width(stream: TextIO, environ: Mapping[str, str] | None = None) -> int:
    """Return the column count available on *stream*.

    A positive integer ``COLUMNS`` environment variable wins; otherwise the
    size of the terminal behind *stream* is queried. When *stream* is not a
    terminal (piped or redirected output) :data:`DEFAULT_WIDTH` is used.
    """
    env = os.environ if environ is None else environ

    columns = env.get("COLUMNS", "").strip()
    if columns.isdigit() and int(columns) > 0:
        return int(columns)

    try:
        width = os.get_terminal_size(stream.fileno()).columns
    except (AttributeError, ValueError, OSError):
        return DEFAULT_WIDTH
    return width if width > 0 else DEFAULT_WIDTH


def supports_color(stream: TextIO, environ: Mapping[str, str] | None = None) -> bool:
    """Return ``True`` if *stream* is a terminal that understands SGR codes."""
    env = os.environ if environ is None else environ
    if env.get("TERM") == "dumb":
        return False
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


# ---------------------------------------------------------------------------
# Background colour query
# ---------------------------------------------------------------------------


def parse_background_reply(reply: str) -> Rgb | None:
    """Extract an 8-bit RGB triple from an OSC 11 reply.

    Terminals answer with 1 to 4 hex digits per channel
    (``rgb:ffff/ffff/ffff``); each channel is scaled to 0-255.
    """
    match = _BACKGROUND_REPLY_RE.search(reply)
    if match is None:
        return None
    r, g, b = (int(h, 16) * 255 // (16 ** len(h) - 1) for h in match.groups())
    return r, g, b


def _read_reply(fd: int, timeout: float) -> bytes:
    deadline = time.monotonic() + timeout
    data = b""
    while not _DA1_REPLY_RE.search(data):
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            break
        ready, _, _ = select.select([fd], [], [], remaining)
        if not ready:
            break
        chunk = os.read(fd, 256)
        if not chunk:
            break
        data += chunk
    return data


def query_background(
    tty_path: str = "/dev/tty",
    timeout: float = 0.1,
) -> Rgb | None:
    """Ask the controlling terminal for its background colour.

    Standard input usually carries the CSV, so the query goes through
    *tty_path*. Returns ``None`` when there is no terminal, it does not
    answer within *timeout* seconds, or it does not support OSC 11.
    """
    try:
        fd = os.open(tty_path, os.O_RDWR | os.O_NOCTTY)
    except OSError:
        return None

    try:
        saved_attrs = termios.tcgetattr(fd)
    except termios.error:
        os.close(fd)
        return None

    try:
        tty.setraw(fd)
        os.write(fd, _BACKGROUND_QUERY)
        reply = _read_reply(fd, timeout)
    except OSError as e:
        logger.debug("background colour query failed: %s", e)
        return None
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved_attrs)
        os.close(fd)

    background = parse_background_reply(reply.decode("ascii", errors="replace"))
    logger.debug("terminal background: %s", background)
    return background
