"""janet similarity — segment similarity table for a feature matrix."""

from __future__ import annotations

import sys

import click

from janet.errors import MalformedInputError
from janet.inventory import read_feature_matrix
from janet.similarity import SimilarityMatrix, write_similarity_table


@click.command()
@click.argument("feature_matrix", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output", "-o",
    "output_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the table to this file instead of stdout.",
)
@click.option(
    "--precision", "-p",
    type=click.IntRange(min=0),
    default=3,
    help="Decimal places to round similarities to. Default: 3.",
)
@click.option(
    "--no-gap",
    is_flag=True,
    default=False,
    help="Omit the rows pairing segments with the gap symbol.",
)
def similarity_cmd(
    feature_matrix: str,
    output_file: str | None,
    precision: int,
    no_gap: bool,
) -> None:
    """Compute natural-class similarity for every segment pair.

    \b
    Examples:
        janet similarity features.tsv
        janet similarity features.tsv -o segment_similarity.tsv
    """
    try:
        inventory = read_feature_matrix(feature_matrix)
        matrix = SimilarityMatrix.from_inventory(inventory)
    except (MalformedInputError, ValueError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    rows = list(matrix.rows(precision=precision, include_gap=not no_gap))
    if output_file:
        count = write_similarity_table(rows, output_file)
        click.echo(f"Wrote {count} rows to {output_file}")
        return

    click.echo("segment1\tsegment2\tsimilarity")
    for seg1, seg2, sim in rows:
        click.echo(f"{seg1}\t{seg2}\t{sim}")
