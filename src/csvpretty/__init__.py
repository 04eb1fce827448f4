"""csvpretty: render CSV as an aligned, box-drawn terminal table."""

__version__ = "0.1.0"

# Column width allocation
from csvpretty.allocate import allocate, overhead, proportional_shares

# Errors
from csvpretty.errors import (
    CsvParseError,
    CsvprettyError,
    EmptyInput,
    InputError,
    InvalidArgument,
)

# Table layout
from csvpretty.layout import Table, render, render_to

# CSV ingestion
from csvpretty.reader import pad_row, parse_csv, read_input

# Colour palettes
from csvpretty.theme import DARK_PALETTE, LIGHT_PALETTE, color_for, detect_theme, palette_for

# Display width
from csvpretty.width import display_width

# Wrapping
from csvpretty.wrap import WRAP_MODES, WrapMode, parse_wrap_mode, wrap

__all__ = [
    "__version__",
    # Column width allocation
    "allocate",
    "overhead",
    "proportional_shares",
    # Errors
    "CsvParseError",
    "CsvprettyError",
    "EmptyInput",
    "InputError",
    "InvalidArgument",
    # Table layout
    "Table",
    "render",
    "render_to",
    # CSV ingestion
    "pad_row",
    "parse_csv",
    "read_input",
    # Colour palettes
    "DARK_PALETTE",
    "LIGHT_PALETTE",
    "color_for",
    "detect_theme",
    "palette_for",
    # Display width
    "display_width",
    # Wrapping
    "WRAP_MODES",
    "WrapMode",
    "parse_wrap_mode",
    "wrap",
]
