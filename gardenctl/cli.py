import logging
import sys
from typing import Optional

import typer

from gardenctl.commands import config
from gardenctl.logging import setup_logging

app = typer.Typer()

# Global debug flag
debug_mode = False

# Add all command groups
app.add_typer(config.app, name="config")


# Global options callback
@app.callback()
def main_callback(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug logging"),
    config_file: Optional[str] = typer.Option(
        None, "--config", envvar="GCTL_CONFIG", help="Path to the gardenctl configuration file"
    ),
):
    """gardenctl - manage Garden clusters and targets."""
    global debug_mode
    debug_mode = debug
    logger = setup_logging(debug)
    if debug:
        logger.debug("Debug mode enabled")
    ctx.obj = {"config_file": config_file}


def main():
    try:
        app()
    except Exception as e:
        logger = logging.getLogger("gardenctl")
        if debug_mode:
            logger.exception(f"Unhandled exception: {e}")
        else:
            logger.error(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
