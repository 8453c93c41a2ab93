"""scqbf batch — run the standard configurations over many instances."""

from __future__ import annotations

import sys

import click

from scqbf.batch import DEFAULT_CONFIGS, discover_instances, run_batch


@click.command()
@click.argument("source", type=click.Path(exists=True))
@click.argument("output", type=click.Path(dir_okay=False))
@click.option(
    "--minutes",
    type=float,
    default=30.0,
    help="Wall-clock budget per run, in minutes. Default: 30.",
)
@click.option("--seed", type=int, default=42, help="Seed for every run. Default: 42.")
@click.option(
    "--max-iterations", "-n",
    type=int,
    default=None,
    help="Optional cap on construct/improve cycles per run.",
)
def batch_cmd(
    source: str,
    output: str,
    minutes: float,
    seed: int,
    max_iterations: int | None,
) -> None:
    """Run every instance in SOURCE under the standard configurations.

    SOURCE is a directory of instance files or a manifest listing one
    path per line (# starts a comment). One CSV row per run is written
    to OUTPUT.

    \b
    Examples:
        scqbf batch instances/ results.csv --minutes 30
        scqbf batch manifest.txt results.csv --minutes 0.5 --seed 7
    """
    try:
        instances = discover_instances(source)
    except FileNotFoundError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if not instances:
        click.echo("Error: No instance files found.", err=True)
        sys.exit(1)

    def _report(row: dict) -> None:
        click.echo(
            f"OK: {row['instance']} | {row['config']} | f={row['best_f']:.6f} | "
            f"best@{round(row['time_to_best_s'])}s (it {row['best_iter']}) | "
            f"t={round(row['time_s'])}s"
        )

    try:
        run_batch(
            instances,
            DEFAULT_CONFIGS,
            output,
            time_limit=minutes * 60.0,
            seed=seed,
            max_iterations=max_iterations,
            on_row=_report,
        )
    except (ValueError, FileNotFoundError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Results saved to: {output}")
