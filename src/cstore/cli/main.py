# topmark:header:start
#
#   project      : CStore
#   file         : main.py
#   file_relpath : src/cstore/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click CLI for inspecting and converting store files.

Commands:
    - ``show``: print a store's record, rendered in an output format.
    - ``convert``: copy a store into another store of a different format.
    - ``remove``: delete a store's backing file.
    - ``version``: print the installed CStore version.

Formats are always given explicitly; the CLI never guesses a format from a
file name.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from cstore.cli.errors import translate_errors
from cstore.constants import CSTORE_VERSION
from cstore.formats import Format
from cstore.logging import get_logger, resolve_env_log_level, setup_logging
from cstore.manager import Manager
from cstore.serializers import render
from cstore.store import new_cstore

if TYPE_CHECKING:
    from cstore.store import CStore

logger = get_logger(__name__)


class FormatParam(click.ParamType):
    """Click parameter type that parses a `Format` via `Format.parse`."""

    name = "format"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Format:
        fmt: Format | None = Format.parse(value)
        if fmt is None:
            self.fail(
                f"{value!r} is not one of {', '.join(Format.keys())}.",
                param,
                ctx,
            )
        return fmt


FORMAT = FormatParam()

base_dir_argument = click.argument(
    "base_dir",
    type=click.Path(file_okay=False, path_type=Path),
)


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    help="CStore CLI",
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Entry point for the CStore CLI."""
    ctx.ensure_object(dict)
    # Configure internal logging via env:
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)


@cli.command(name="show", help="Print the record stored in BASE_DIR/NAME.")
@base_dir_argument
@click.argument("name")
@click.option("--format", "fmt", type=FORMAT, required=True, help="Format of the store file.")
@click.option(
    "--output-format",
    "output_fmt",
    type=FORMAT,
    default=Format.JSON.value,
    show_default=True,
    help="Format used to print the record.",
)
def show_command(base_dir: Path, name: str, fmt: Format, output_fmt: Format) -> None:
    """Load a store and print its record."""
    cs: CStore = new_cstore(name, base_dir / name, fmt)
    record: dict[str, Any] = {}
    with translate_errors():
        cs.get_without_validate(record)
        text: str = render(output_fmt, record, path=cs.file_path)
    click.echo(text, nl=not text.endswith("\n"))


@cli.command(name="convert", help="Copy BASE_DIR/SRC into BASE_DIR/DST in another format.")
@base_dir_argument
@click.argument("src")
@click.argument("dst")
@click.option("--from", "src_fmt", type=FORMAT, required=True, help="Format of SRC.")
@click.option("--to", "dst_fmt", type=FORMAT, required=True, help="Format of DST.")
def convert_command(base_dir: Path, src: str, dst: str, src_fmt: Format, dst_fmt: Format) -> None:
    """Load SRC and store its record as DST."""
    with translate_errors():
        manager = Manager("cli", base_dir)
        source: CStore = manager.new(src, src_fmt)
        target: CStore = manager.new(dst, dst_fmt)
        record: dict[str, Any] = {}
        source.get_without_validate(record)
        target.save_without_validate(record)
    logger.info("Converted %s (%s) to %s (%s)", source.file_path, src_fmt, target.file_path, dst_fmt)
    click.echo(str(target.file_path))


@cli.command(name="remove", help="Delete the file of store BASE_DIR/NAME.")
@base_dir_argument
@click.argument("name")
@click.option("--format", "fmt", type=FORMAT, required=True, help="Format of the store file.")
def remove_command(base_dir: Path, name: str, fmt: Format) -> None:
    """Delete a store's backing file."""
    cs: CStore = new_cstore(name, base_dir / name, fmt)
    with translate_errors():
        cs.remove()
    logger.info("Removed %s", cs.file_path)


@cli.command(name="version", help="Show the current version of CStore.")
def version_command() -> None:
    """Print the installed CStore version."""
    click.echo(CSTORE_VERSION)


if __name__ == "__main__":
    cli()
