"""CLI entry point for csvpretty. Uses Click for argument parsing."""

from __future__ import annotations

import logging
import os
import sys

import click

from csvpretty import __version__
from csvpretty.config import Settings
from csvpretty.errors import CsvprettyError, InvalidArgument
from csvpretty.layout import Table, render_to
from csvpretty.reader import parse_csv, read_input
from csvpretty.theme import palette_for
from csvpretty.wrap import WRAP_MODES, WrapMode, parse_wrap_mode

logger = logging.getLogger(__name__)


def _wrap_mode(ctx: click.Context, param: click.Parameter, value: str) -> WrapMode:
    try:
        return parse_wrap_mode(value)
    except InvalidArgument as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param) from e


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--wrap",
    default="word",
    metavar=f"[{'|'.join(WRAP_MODES)}]",
    callback=_wrap_mode,
    show_default=True,
    help="Text wrapping mode",
)
@click.option("-n", "--line-numbers", is_flag=True, help="Show line numbers")
@click.option("--no-color", is_flag=True, help="Disable column colors")
@click.version_option(__version__, prog_name="csvpretty")
def main(wrap: WrapMode, line_numbers: bool, no_color: bool) -> None:
    """Format CSV input from stdin into a table."""
    stdout = sys.stdout
    settings = Settings.resolve(wrap, line_numbers, no_color, stdout)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logger.debug("settings: %s", settings)

    try:
        header, rows = parse_csv(read_input(sys.stdin.buffer))
        table = Table(
            header=header,
            rows=rows,
            wrap_mode=settings.wrap_mode,
            show_line_numbers=settings.show_line_numbers,
            palette=palette_for(settings.theme) if settings.color else None,
            terminal_width=settings.terminal_width,
        )
        render_to(table, stdout)
        stdout.flush()
    except CsvprettyError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(e.exit_code)
    except BrokenPipeError:
        # Reader went away (e.g. piped into head); silence the flush at exit.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(1)


if __name__ == "__main__":
    main()
