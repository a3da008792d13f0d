"""janet run — feature matrix + word list to a word distance table."""

from __future__ import annotations

import sys

import click

from janet.errors import MalformedInputError
from janet.pipeline import run_pipeline


@click.command()
@click.argument("feature_matrix", type=click.Path(exists=True, dir_okay=False))
@click.argument("word_list", type=click.Path(exists=True, dir_okay=False))
@click.argument("output", required=False, type=click.Path())
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
    help="Decimal places kept in the similarity table. Default: 3.",
)
@click.option(
    "--similarity-output", "-s",
    type=click.Path(dir_okay=False),
    default=None,
    help="Where to write the segment similarity table. "
    "Default: segment_similarity.tsv next to the distance table.",
)
def run_cmd(
    feature_matrix: str,
    word_list: str,
    output: str | None,
    gap_penalty: float,
    precision: int,
    similarity_output: str | None,
) -> None:
    """Compute pairwise phonological distances between words.

    OUTPUT may be a directory (word_distances.tsv.gz is written there) or
    a file path. Default: out/word_distances.tsv.gz.

    \b
    Examples:
        janet run features.tsv words.tsv
        janet run features.tsv words.tsv results/
        janet run features.tsv words.tsv dists.tsv.gz --gap-penalty 0.8
    """
    click.echo("Validating inputs and computing distances...")
    try:
        result = run_pipeline(
            feature_matrix,
            word_list,
            output=output,
            gap_penalty=gap_penalty,
            precision=precision,
            similarity_path=similarity_output,
        )
    except (MalformedInputError, ValueError, OSError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(
        f"Feature matrix OK: {result.segment_count} segments, "
        f"{result.feature_count} features, {result.class_count} natural classes"
    )
    click.echo(f"Word list OK: {result.word_count} words, {result.pair_count} pairs")
    click.echo()
    click.echo("Output files:")
    click.echo(f"  {result.similarity_path}")
    click.echo(f"  {result.distance_path}")
