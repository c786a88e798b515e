"""
Command-line interface for encoji.
"""

import logging
import sys
from typing import Optional, Tuple

import click

from . import __version__
from .config import ConfigError, MissingPayloadError, SmugglerConfig
from .core import Smuggler

STATUS_OK = 0
MISSING_INPUT_ERROR = 1
TOO_MANY_INPUTS_ERROR = 2
MISSING_TEXT_TO_ENCODE_ERROR = 3
EXECUTION_ERROR = 4

logger = logging.getLogger("encoji.cli")


def main():
    """Main CLI entry point."""
    cli()


def _setup_logging(verbose: bool) -> None:
    # Root stays at WARNING; only the encoji logger follows --verbose
    logging.basicConfig(
        level=logging.WARNING,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    app_logger = logging.getLogger("encoji")
    app_logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def _usage(ctx: click.Context) -> None:
    click.echo(ctx.get_help(), err=True)


@click.command(options_metavar="[--encode TEXT | --encodefile PATH | --decode]")
@click.option("--encode", "-e", "encode_text", default=None, help="Smuggle data within provided text.")
@click.option(
    "--encodefile",
    "-f",
    "encode_file",
    default=None,
    type=click.Path(dir_okay=False),
    help="Smuggle data from file within provided text.",
)
@click.option("--decode", "-d", is_flag=True, help="Decode smuggled data.")
@click.option("--version", "show_version", is_flag=True, help="Print version.")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging.")
@click.argument("args", nargs=-1)
@click.pass_context
def cli(
    ctx,
    encode_text: Optional[str],
    encode_file: Optional[str],
    decode: bool,
    show_version: bool,
    verbose: bool,
    args: Tuple[str, ...],
):
    """Encode/decode text using unicode variation selectors.

    Lines are read from ARGS (joined with spaces) or from stdin when no
    ARGS are given. Each output line is written to stdout.
    """
    _setup_logging(verbose)

    given = sum([encode_text is not None, encode_file is not None, decode, show_version])
    if given == 0:
        _usage(ctx)
        sys.exit(MISSING_INPUT_ERROR)
    if given > 1:
        click.echo("Error: too many flags provided", err=True)
        _usage(ctx)
        sys.exit(TOO_MANY_INPUTS_ERROR)

    if show_version:
        click.echo(f"{ctx.info_name} version {__version__}")
        sys.exit(STATUS_OK)

    try:
        config = SmugglerConfig.from_flags(
            encode_text=encode_text,
            encode_file=encode_file,
            decode=decode,
            args=args,
        )
    except MissingPayloadError as e:
        click.echo(f"Error: {e}", err=True)
        _usage(ctx)
        sys.exit(MISSING_TEXT_TO_ENCODE_ERROR)
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXECUTION_ERROR)

    smuggler = Smuggler(
        config,
        stdin=click.get_binary_stream("stdin"),
        stdout=click.get_binary_stream("stdout"),
    )
    try:
        count = smuggler.run()
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXECUTION_ERROR)

    logger.debug(f"Finished after {count} lines")
    sys.exit(STATUS_OK)


if __name__ == "__main__":
    main()
