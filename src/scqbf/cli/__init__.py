"""Command-line interface for scqbf."""

import logging

import click

from scqbf import __version__
from scqbf.cli.batch import batch_cmd
from scqbf.cli.solve import solve_cmd


@click.group()
@click.version_option(version=__version__, prog_name="scqbf")
@click.option("--verbose", "-v", is_flag=True, help="Log search progress to stderr.")
def main(verbose: bool) -> None:
    """scqbf: GRASP local search for Set-Covering Quadratic Binary Functions."""
    if verbose:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )


main.add_command(solve_cmd, name="solve")
main.add_command(batch_cmd, name="batch")
