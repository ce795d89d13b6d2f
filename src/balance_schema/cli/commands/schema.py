from pathlib import Path
from typing import Optional, cast

import typer

import balance_schema.toolkit.json as balance_json
from balance_schema.cli.cli_config import CliConfig
from balance_schema.exceptions import UnknownSchema
from balance_schema.schemas.export import export_all, schema_for
from balance_schema.schemas.registry import SCHEMAS, get_schema

schema_ns = typer.Typer()


@schema_ns.command()
def export(
    ctx: typer.Context,
    output_dir: Optional[Path] = typer.Option(
        None,
        help="Destination folder. Defaults to the validation.schema_dir configuration value.",
        file_okay=False,
    ),
):
    """
    Writes the JSON schema of every known schema, one file per schema.
    """
    cli_config = cast(CliConfig, ctx.obj)
    out_dir = output_dir or Path(cli_config.config.validation.schema_dir.value)

    for path in export_all(out_dir):
        typer.echo(f"Created {path}")


@schema_ns.command()
def show(
    name: str = typer.Argument(
        ..., help=f"One of: {', '.join(SCHEMAS)}."
    ),
):
    """
    Prints the JSON schema of one schema.
    """
    try:
        model = get_schema(name)
    except UnknownSchema as e:
        raise typer.BadParameter(str(e), param_hint="NAME")

    typer.echo(balance_json.dumps(schema_for(model), indent=True).decode())
