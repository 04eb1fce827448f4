"""Table layout: turns a header and rows into bordered terminal lines.

Output shape (with line numbers)::

    ─────────────────────
         name  │ comment
    ───┬───────┬─────────
    1  │ Alice │ hello
       │       │ world
    ───┴───────┴─────────

Cells are wrapped to their allocated column width and every physical line of
a row is padded so that columns stay aligned, using display width rather
than character counts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TextIO

from csvpretty.allocate import allocate, overhead
from csvpretty.errors import EmptyInput
from csvpretty.reader import pad_row
from csvpretty.terminal import DEFAULT_WIDTH
from csvpretty.theme import Palette, color_for, colorize
from csvpretty.width import TAB_WIDTH, display_width, max_cluster_width
from csvpretty.wrap import WrapMode, split_lines, wrap

logger = logging.getLogger(__name__)

_HORIZONTAL = "─"
_VERTICAL = "│"
_DOWN_JOINT = "┬"
_UP_JOINT = "┴"


# ---------------------------------------------------------------------------
# Table
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Table:
    """A fully buffered table plus its display settings.

    Rows are padded (or cut) to the header length on construction. A
    ``palette`` of ``None`` disables colours.
    """

    header: list[str]
    rows: list[list[str]] = field(default_factory=list)
    wrap_mode: WrapMode = "word"
    show_line_numbers: bool = False
    palette: Palette | None = None
    terminal_width: int = DEFAULT_WIDTH

    def __post_init__(self) -> None:
        if not self.header:
            raise EmptyInput("table has no columns")
        n = len(self.header)
        object.__setattr__(self, "rows", [pad_row(list(row), n) for row in self.rows])

    @property
    def column_count(self) -> int:
        return len(self.header)


# ---------------------------------------------------------------------------
# Measurement
# ---------------------------------------------------------------------------


def _prepare_cell(text: str) -> str:
    return text.replace("\t", " " * TAB_WIDTH)


def cell_width(text: str) -> int:
    """Widest physical line of a (possibly multi-line) cell."""
    return max(display_width(line) for line in split_lines(text))


def column_content_widths(header: list[str], rows: list[list[str]]) -> list[int]:
    """Max display width per column over the header and every row."""
    widths = [cell_width(cell) for cell in header]
    for row in rows:
        for col, cell in enumerate(row):
            w = cell_width(cell)
            if w > widths[col]:
                widths[col] = w
    return widths


def column_min_widths(header: list[str], rows: list[list[str]]) -> list[int]:
    """Widest single glyph per column; a column narrower than this misaligns."""
    widths = [max_cluster_width(cell) for cell in header]
    for row in rows:
        for col, cell in enumerate(row):
            w = max_cluster_width(cell)
            if w > widths[col]:
                widths[col] = w
    return widths


def gutter_width(table: Table) -> int:
    """Digits needed for the largest row number, 0 without line numbers."""
    if not table.show_line_numbers:
        return 0
    return max(len(str(len(table.rows))), 1)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def render(table: Table) -> list[str]:
    """Render *table* to a list of output lines (without newlines)."""
    header = [_prepare_cell(cell) for cell in table.header]
    rows = [[_prepare_cell(cell) for cell in row] for row in table.rows]
    gutter = gutter_width(table)

    budget: int | None = None
    if table.wrap_mode != "none":
        budget = table.terminal_width - overhead(table.column_count, gutter)

    widths = allocate(
        column_content_widths(header, rows),
        table.wrap_mode,
        budget,
        min_widths=column_min_widths(header, rows),
    )
    logger.debug(
        "rendering %d row(s) in %s mode, terminal width %d",
        len(rows),
        table.wrap_mode,
        table.terminal_width,
    )

    lines: list[str] = [top_border(widths, gutter)]
    lines.extend(_render_row(header, widths, gutter, table, row_number=None))
    lines.append(joint_border(widths, gutter, _DOWN_JOINT))
    for row_number, row in enumerate(rows, start=1):
        lines.extend(_render_row(row, widths, gutter, table, row_number=row_number))
    lines.append(joint_border(widths, gutter, _UP_JOINT))
    return lines


def render_to(table: Table, stream: TextIO) -> None:
    """Write the rendered table to *stream*, one line at a time."""
    for line in render(table):
        stream.write(line + "\n")


def top_border(widths: list[int], gutter: int) -> str:
    total = overhead(len(widths), gutter) + sum(widths) - 1
    return _HORIZONTAL * total


def joint_border(widths: list[int], gutter: int, joint: str) -> str:
    """Horizontal rule with *joint* where the column separators fall."""
    parts: list[str] = []
    if gutter:
        parts.append(_HORIZONTAL * (gutter + 2) + joint)
    parts.append(joint.join(_HORIZONTAL * (w + 2) for w in widths))
    return "".join(parts)


def _render_row(
    cells: list[str],
    widths: list[int],
    gutter: int,
    table: Table,
    row_number: int | None,
) -> list[str]:
    """Render one header or data row, possibly spanning several lines."""
    wrapped = [wrap(cell, width, table.wrap_mode) for cell, width in zip(cells, widths)]
    height = max(len(cell_lines) for cell_lines in wrapped)
    is_header = row_number is None

    row_lines: list[str] = []
    for line_idx in range(height):
        parts: list[str] = []

        if gutter:
            if is_header:
                parts.append(" " * (gutter + 3))
            elif line_idx == 0:
                parts.append(f"{row_number:>{gutter}}  {_VERTICAL}")
            else:
                parts.append(f"{' ' * gutter}  {_VERTICAL}")

        cell_parts: list[str] = []
        for col, cell_lines in enumerate(wrapped):
            text = cell_lines[line_idx] if line_idx < len(cell_lines) else ""
            padding = " " * max(0, widths[col] - display_width(text))
            if table.palette is not None:
                text = colorize(text, color_for(col, table.palette), bold=is_header)
            cell_parts.append(f" {text}{padding}")

        parts.append(f" {_VERTICAL}".join(cell_parts))
        row_lines.append("".join(parts))

    return row_lines
