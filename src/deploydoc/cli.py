"""deploydoc CLI: run the shell steps embedded in a markdown document."""

import typer
from rich.console import Console

from deploydoc import __version__

from .commands import check, init, plan, run
from .logging import configure_logging
from .output import OutputContext, set_output_context


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"deploydoc {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="deploydoc",
    help="Documentation-driven deployment testing",
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
        help="Only show warnings and errors in the log",
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
) -> None:
    """deploydoc - run markdown deployment documents as tests."""
    configure_logging(
        verbosity=verbose,
        quiet=quiet,
        no_color=no_color,
        json_mode=json_output,
    )
    console = Console(no_color=no_color, highlight=not no_color)
    set_output_context(OutputContext(console=console, json_mode=json_output))


app.command()(init)
app.command()(plan)
app.command()(check)
app.command()(run)
