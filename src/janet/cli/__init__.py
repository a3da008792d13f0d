"""Command-line interface for janet."""

import logging

import click

from janet.cli.align import align_cmd
from janet.cli.classes import classes_cmd
from janet.cli.run import run_cmd
from janet.cli.similarity import similarity_cmd


@click.group()
@click.version_option()
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Log progress to stderr.",
)
def main(verbose: bool) -> None:
    """janet: phonological distances between words from segment features."""
    if verbose:
        logging.basicConfig(
            level=logging.INFO,
            format="%(levelname)s %(name)s: %(message)s",
        )


main.add_command(run_cmd, name="run")
main.add_command(classes_cmd, name="classes")
main.add_command(similarity_cmd, name="similarity")
main.add_command(align_cmd, name="align")
