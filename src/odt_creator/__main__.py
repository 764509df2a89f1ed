"""CLI entry point for odt-creator."""

import logging
import sys
from datetime import date
from pathlib import Path

import click

from .adapters.odf import OdtArchiveWriter
from .adapters.platform import SubprocessLauncher, default_candidates
from .config import Settings, load_settings
from .domain.dates import folder_name, resolve
from .domain.services import DocumentService

logger = logging.getLogger(__name__)

USAGE_ERROR_EXIT_CODE = 1
PROMPT = "Enter the filename for the ODT document (without extension): "

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    # Bare arguments are accepted and ignored; unknown options still fail
    "allow_extra_args": True,
}

EXAMPLES = """\b
Examples:
  odt-creator               # Creates folder for next month's first Wednesday
  odt-creator -m 9          # Creates folder for September's first Wednesday
  odt-creator --month 12    # Creates folder for December's first Wednesday
"""


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


class ShellCommand(click.Command):
    """Command reporting usage errors with the full help and exit status 1."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        # "-" and "--" are options to the user, never positional markers
        for arg in args:
            if arg in ("-", "--"):
                raise click.NoSuchOption(arg, ctx=ctx)
        return super().parse_args(ctx, args)

    def make_context(self, info_name, args, parent=None, **extra):
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as e:
            click.echo(f"Error: {e.format_message()}", err=True)
            if e.ctx is not None:
                click.echo(e.ctx.get_help(), err=True)
            raise click.exceptions.Exit(USAGE_ERROR_EXIT_CODE) from e


def build_service(settings: Settings) -> DocumentService:
    """Wire up adapters from settings."""
    commands = settings.launcher.commands or default_candidates()
    return DocumentService(
        writer=OdtArchiveWriter(creation_date=settings.document.creation_date),
        launcher=SubprocessLauncher(commands),
        output_root=settings.paths.output_root,
        extension=settings.document.extension,
    )


def read_filename() -> str:
    """Prompt for a filename and return it stripped; empty on end of input."""
    click.echo(PROMPT, nl=False)
    line = sys.stdin.readline()
    return line.strip()


@click.command(cls=ShellCommand, context_settings=CONTEXT_SETTINGS, epilog=EXAMPLES)
@click.option(
    "-m",
    "--month",
    type=click.IntRange(1, 12),
    metavar="MONTH",
    help="Month (1-12) for which to create the folder. Defaults to next month.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "-c",
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Config file path",
)
def cli(month: int | None, verbose: bool, config: Path | None) -> None:
    """Create a folder named after the first Wednesday of a month and an
    empty ODT document inside it."""
    setup_logging(verbose)
    settings = load_settings(config)
    service = build_service(settings)

    target = resolve(month, date.today())
    click.echo(f"Creating folder: {folder_name(target)}")

    try:
        folder = service.prepare_folder(target)
    except OSError as e:
        raise click.ClickException(f"Could not create folder: {e}") from e

    filename = read_filename()
    if not filename:
        click.echo("Error: Filename cannot be empty", err=True)
        return

    try:
        result = service.create(folder, filename)
    except OSError as e:
        raise click.ClickException(f"Could not create document: {e}") from e

    click.echo(f"Created ODT document: {result.output_path}")

    if result.launched:
        click.echo("Opening document with default application...")
    else:
        click.echo("Warning: Could not open document automatically", err=True)
        click.echo(f"Please open the file manually: {result.output_path}", err=True)


if __name__ == "__main__":
    cli()
