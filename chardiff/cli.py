from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from chardiff import render
from chardiff.char_difference import DifferenceType
from chardiff.setup_logging import setup_logging
from chardiff.text_differencer import TextDifferencer

log = logging.getLogger(__name__)

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 120,
}

DEFAULT_MAX_CELLS = 25_000_000

EXIT_SAME = 0
EXIT_DIFFERENT = 1


class MatrixTooLarge(click.ClickException):
    exit_code = 2


class UnreadableInput(click.FileError):
    exit_code = 2


def read_side(name: str, text: Optional[str], path: Optional[Path]) -> str:
    if text is not None and path is not None:
        raise click.UsageError(
            f"{name.upper()} and --{name}-file are mutually exclusive."
        )

    if path is None:
        if text is None:
            raise click.UsageError(f"Missing {name.upper()} or --{name}-file.")
        log.debug(f"{name} taken from the command line")
        return text

    log.debug(f"{name} read from {path}")
    try:
        return path.read_bytes().decode("utf-8")
    except UnicodeDecodeError as e:
        raise UnreadableInput(str(path), hint="not valid UTF-8") from e
    except OSError as e:
        raise UnreadableInput(str(path), hint=e.strerror or str(e)) from e


@click.command(context_settings=CONTEXT_SETTINGS)
@click.argument("first", required=False)
@click.argument("second", required=False)
@click.option(
    "-a",
    "--first-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read the first (before) text from a file.",
)
@click.option(
    "-b",
    "--second-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read the second (after) text from a file.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["inline", "listing"]),
    default="inline",
    show_default=True,
    help="Render runs inline or list one character per line.",
)
@click.option(
    "--color/--no-color",
    default=None,
    help="Colour inline output (default: when stdout is a terminal).",
)
@click.option(
    "--max-cells",
    type=click.IntRange(min=0),
    default=DEFAULT_MAX_CELLS,
    show_default=True,
    help="Refuse inputs whose comparison table exceeds this many cells; 0 disables.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    envvar="CHARDIFF_LOG_LEVEL",
    show_default=True,
)
@click.option("--log-file", type=click.Path(dir_okay=False, path_type=Path))
@click.pass_context
def cli(
    ctx: click.Context,
    first: Optional[str],
    second: Optional[str],
    first_file: Optional[Path],
    second_file: Optional[Path],
    output_format: str,
    color: Optional[bool],
    max_cells: int,
    log_level: str,
    log_file: Optional[Path],
) -> None:
    """Show the character-level differences between FIRST and SECOND."""
    setup_logging(level=log_level, log_file=log_file)

    # a lone positional belongs to SECOND when FIRST comes from a file
    if first_file is not None and second is None and second_file is None:
        first, second = None, first

    before = read_side("first", first, first_file)
    after = read_side("second", second, second_file)

    bounds = TextDifferencer.boundaries(before, after)
    log.debug(f"comparison table needs {bounds.cells} cells (limit {max_cells})")
    if max_cells and bounds.cells > max_cells:
        raise MatrixTooLarge(
            f"comparison needs {bounds.cells} table cells, more than --max-cells "
            f"{max_cells}"
        )

    differences = TextDifferencer.diff(before, after)

    if output_format == "listing":
        output = render.listing(differences)
    else:
        if color is None:
            color = sys.stdout.isatty()
        output = render.inline(differences, color=color)

    if output:
        click.echo(output, nl=not output.endswith("\n"), color=color)

    changed = any(d.type is not DifferenceType.NO_CHANGE for d in differences)
    ctx.exit(EXIT_DIFFERENT if changed else EXIT_SAME)
