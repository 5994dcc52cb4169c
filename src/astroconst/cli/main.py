# src/astroconst/cli/main.py
from pathlib import Path
from typing import Optional

import typer

from astroconst.cli.constants import constants_app
from astroconst.core.logging import configure_console, logger, setup_logfile

app = typer.Typer(
    help="astroconst: physical and astronomical constants CLI",
    context_settings={"help_option_names": ["-h", "--help"]},
    no_args_is_help=True,
)

# Add sub-commands
app.add_typer(constants_app, name="constants")


def _version_callback(value: bool):
    if value:
        from astroconst.core.version import __version__
        typer.echo(f"astroconst version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Also write logs to this file"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
):
    """
    astroconst: one canonical table of physical and astronomical constants.

    Use 'astroconst COMMAND --help' to see options for specific commands.
    """
    logger.enable("astroconst")
    configure_console("DEBUG" if verbose else None)
    if log_file is not None:
        sink_id = setup_logfile(str(log_file), level="DEBUG" if verbose else "INFO")
        # File sink lives for this invocation only
        ctx.call_on_close(lambda: logger.remove(sink_id))


if __name__ == "__main__":
    app()
