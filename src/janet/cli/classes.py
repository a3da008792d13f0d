"""janet classes — list the natural classes of a feature matrix."""

from __future__ import annotations

import json
import sys

import click

from janet.classes import generate_natural_classes
from janet.errors import MalformedInputError
from janet.inventory import read_feature_matrix


@click.command()
@click.argument("feature_matrix", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--format", "-f",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format. Default: text.",
)
def classes_cmd(feature_matrix: str, output_format: str) -> None:
    """Print every non-redundant natural class of FEATURE_MATRIX."""
    try:
        inventory = read_feature_matrix(feature_matrix)
        classes = generate_natural_classes(inventory)
    except (MalformedInputError, ValueError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if output_format == "json":
        data = {
            "segments": list(inventory.segments),
            "features": list(inventory.features),
            "classes": [nc.to_dict() for nc in classes],
            "total": len(classes),
        }
        click.echo(json.dumps(data, ensure_ascii=False, indent=2))
    else:
        for nc in classes:
            click.echo(str(nc))
        click.echo(f"Total: {len(classes)} natural classes")
