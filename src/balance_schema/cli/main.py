import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from balance_schema.config import load_config
from balance_schema.exceptions import InvalidConfigException
from balance_schema.toolkit.logging import setup_logging

from .cli_config import CliConfig
from .commands.schema import schema_ns
from .commands.validate import validate

app = typer.Typer()


def validate_config_file_path(config: Optional[Path]) -> Optional[Path]:
    if config is not None:
        if not config.is_file():
            raise typer.BadParameter(f"'{config.absolute()}' does not exist")

    return config


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        help="Path to a YAML configuration file. Defaults are used if not specified.",
        callback=validate_config_file_path,
    ),
    verbose: bool = typer.Option(False, help="Show more information."),
):
    """
    Validates balance query responses and exports their JSON schemas.
    """

    try:
        app_config = load_config(str(config) if config is not None else None)
    except InvalidConfigException as e:
        raise typer.BadParameter(str(e), param_hint="--config")

    loglevel = logging.DEBUG if verbose else app_config.logging.level.value
    setup_logging(
        loglevel=loglevel,
        filename=app_config.logging.filename.value,
        max_log_file_size=app_config.logging.max_log_file_size.value,
        # Keep stdout for the output of the commands.
        stream=sys.stderr,
    )

    ctx.obj = CliConfig(config_file_path=config, config=app_config, verbose=verbose)


app.command()(validate)
app.add_typer(schema_ns, name="schema", help="Export and display JSON schemas.")


if __name__ == "__main__":
    app()
