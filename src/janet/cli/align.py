"""janet align — show the alignment of two words."""

from __future__ import annotations

import json
import sys

import click

from janet.align import WordAligner
from janet.errors import MalformedInputError
from janet.inventory import GAP_SYMBOL, read_feature_matrix
from janet.lexicon import validate_words
from janet.similarity import DistanceLookup, SimilarityMatrix


@click.command()
@click.argument("word1")
@click.argument("word2")
@click.option(
    "--features", "-f",
    "feature_matrix",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Feature matrix TSV defining the segments.",
)
@click.option(
    "--gap-penalty", "-g",
    type=float,
    default=1.0,
    help="Cost of each insertion or deletion. Default: 1.0.",
)
@click.option(
    "--precision", "-p",
    type=click.IntRange(min=0),
    default=3,
    help="Decimal places similarities are rounded to. Default: 3.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format. Default: text.",
)
def align_cmd(
    word1: str,
    word2: str,
    feature_matrix: str,
    gap_penalty: float,
    precision: int,
    output_format: str,
) -> None:
    """Align WORD1 with WORD2 and print the phonological distance.

    \b
    Examples:
        janet align pata bada --features features.tsv
        janet align pata bada -f features.tsv --format json
    """
    try:
        inventory = read_feature_matrix(feature_matrix)
        validate_words([word1, word2], inventory)
        matrix = SimilarityMatrix.from_inventory(inventory)
        lookup = DistanceLookup.from_matrix(matrix, precision=precision)
        alignment = WordAligner(lookup, gap_penalty=gap_penalty).align(word1, word2)
    except (MalformedInputError, ValueError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if output_format == "json":
        data = alignment.to_dict()
        for key in ("segment1", "segment2"):
            data[key] = ["-" if s == GAP_SYMBOL else s for s in data[key]]
        click.echo(json.dumps(data, ensure_ascii=False, indent=2))
    else:
        click.echo(alignment.render())
        click.echo(" ".join(f"{c:.3f}" for c in alignment.costs))
        click.echo(f"Distance: {alignment.distance:.3f}")
