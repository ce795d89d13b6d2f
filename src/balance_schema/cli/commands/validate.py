import logging
from pathlib import Path
from typing import Optional, cast

import typer

from balance_schema.cli.cli_config import CliConfig
from balance_schema.exceptions import ParseError, UnknownSchema
from balance_schema.schemas.registry import get_schema
from balance_schema.validator import SchemaValidator

logger = logging.getLogger(__name__)


def validate(
    ctx: typer.Context,
    file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, help="JSON document to validate."
    ),
    schema: Optional[str] = typer.Option(
        None, help="Name of the schema to validate against."
    ),
):
    """
    Validates a JSON document. Exits with code 1 if the document does not match
    the schema and with code 2 if it is not valid JSON.
    """
    cli_config = cast(CliConfig, ctx.obj)
    schema_name = schema or cli_config.config.validation.default_schema.value

    try:
        validator = SchemaValidator(get_schema(schema_name))
    except UnknownSchema as e:
        raise typer.BadParameter(str(e), param_hint="--schema")

    logger.debug("Validating %s with %s", file, validator)

    try:
        result = validator.validate_json(file.read_bytes())
    except ParseError as e:
        typer.echo(f"{file}: {e}", err=True)
        raise typer.Exit(code=2)

    if not result:
        for violation in result.violations:
            typer.echo(str(violation), err=True)
        raise typer.Exit(code=1)

    typer.echo("OK")
