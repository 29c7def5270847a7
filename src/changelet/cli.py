"""changelet CLI: version bumps and changelogs from per-change files."""

from pathlib import Path

import typer

from changelet import __version__

from .commands import check, compile_changelog_cmd, compute_bump_level, init, new
from .constants import CHANGES_DIR
from .logging import configure_logging
from .output import OutputContext, set_output_context


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"changelet {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="changelet",
    help="Compute version bumps and compile changelogs from per-change files",
    no_args_is_help=True,
)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v, -vv)",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress non-error output",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in JSON format for automation",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    changes_dir: Path = typer.Option(
        Path(CHANGES_DIR),
        "--dir",
        "-d",
        help="Directory holding the change files",
    ),
) -> None:
    """changelet - one file per change, one changelog per release."""
    console = configure_logging(
        verbosity=verbose,
        quiet=quiet,
        no_color=no_color,
    )
    set_output_context(
        OutputContext(console=console, json_mode=json_output, changes_dir=changes_dir)
    )


app.command()(init)
app.command()(new)
app.command()(check)
app.command("compute-bump-level")(compute_bump_level)
app.command("compile-changelog")(compile_changelog_cmd)
