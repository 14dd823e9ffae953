"""ztags CLI entry point."""

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import Config
from .errors import SourceReadError, ZtagsError
from .logging import init_logger
from .tags import KIND_NAMES, generate_tags

console = Console(stderr=True)

USAGE = "Usage: ztags FILE"


@click.command()
@click.argument("path", required=False)
@click.option("--output", "-o", default=None, help="Write tags to this file ('-' for stdout)")
@click.option("--debug", "-d", is_flag=True, help="Enable debug mode")
@click.option("--list-kinds", is_flag=True, help="List the tag kinds and exit")
@click.version_option(version=__version__)
def main(path, output, debug, list_kinds):
    """Generate extended ctags for a single Zig source file."""
    if list_kinds:
        for kind, name in KIND_NAMES.items():
            click.echo(f"{kind}  {name}")
        return

    if not path:
        console.print(USAGE, markup=False, highlight=False)
        return

    config = Config.load()
    if output:
        config.output = output
    if debug:
        config.debug = True

    errors = config.validate()
    if errors:
        for error in errors:
            console.print(f"[red]Error: {escape(error)}[/]")
        sys.exit(1)

    logger = init_logger(config.debug, config.log_dir)
    logger.log_run_start(path, config.output)

    try:
        source = read_source(path)
        with click.open_file(config.output, "w", encoding="utf-8") as out:
            count = generate_tags(source, path, out)
    except (ZtagsError, OSError) as e:
        logger.log_error(str(e))
        console.print(f"[red]Error: {escape(str(e))}[/]")
        sys.exit(1)

    logger.log_run_end(path, count)
    if config.debug:
        console.print(f"[dim]{count} tags from {escape(path)}[/]")
        console.print(f"[dim]Logs: {logger.log_path}[/]")


def read_source(path: str) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise SourceReadError(f"Cannot read '{path}': {e.strerror or e}") from e


if __name__ == "__main__":
    main()
