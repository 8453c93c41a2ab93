"""scqbf solve — run GRASP on a single instance file."""

from __future__ import annotations

import json
import sys

import click

from scqbf.search import solve


def _parse_alphas(value: str | None) -> tuple[float, ...] | None:
    if value is None:
        return None
    try:
        return tuple(float(tok) for tok in value.split(",") if tok.strip())
    except ValueError:
        raise click.BadParameter(
            f"expected comma-separated numbers, got {value!r}",
            param_hint="--alphas",
        ) from None


@click.command()
@click.argument("instance_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--alpha", "-a",
    type=float,
    default=0.2,
    help="Randomization parameter in [0, 1]. Default: 0.2.",
)
@click.option(
    "--mode", "-m",
    "construction",
    type=click.Choice(["standard", "sampled", "reactive"]),
    default="standard",
    help="Construction mode. Default: standard.",
)
@click.option(
    "--ls",
    "local_search",
    type=click.Choice(["first-improving", "best-improving"]),
    default="first-improving",
    help="Local search strategy. Default: first-improving.",
)
@click.option(
    "--sample-size", "-p",
    type=int,
    default=64,
    help="Candidate sample size (sampled mode). Default: 64.",
)
@click.option(
    "--alphas",
    default=None,
    help="Comma-separated alpha values (reactive mode). Default: 0.1,0.2,0.3,0.4,0.5.",
)
@click.option(
    "--block-size",
    type=int,
    default=20,
    help="Cycles between reactive probability updates. Default: 20.",
)
@click.option(
    "--max-iterations", "-n",
    type=int,
    default=None,
    help="Maximum construct/improve cycles.",
)
@click.option(
    "--time-limit", "-t",
    type=float,
    default=60.0,
    help="Wall-clock budget in seconds. Default: 60.",
)
@click.option("--seed", type=int, default=None, help="Random seed.")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format. Default: text.",
)
def solve_cmd(
    instance_file: str,
    alpha: float,
    construction: str,
    local_search: str,
    sample_size: int,
    alphas: str | None,
    block_size: int,
    max_iterations: int | None,
    time_limit: float,
    seed: int | None,
    output_format: str,
) -> None:
    """Solve one SC-QBF instance and report the best objective found.

    \b
    Examples:
        scqbf solve instances/n25.txt --time-limit 10
        scqbf solve n100.txt --mode reactive --alphas 0.1,0.3,0.5 --seed 7
        scqbf solve n100.txt --ls best-improving -n 50 --format json
    """
    kwargs = {
        "alpha": alpha,
        "construction": construction,
        "local_search": local_search,
        "sample_size": sample_size,
        "block_size": block_size,
        "max_iterations": max_iterations,
        "time_limit": time_limit,
        "seed": seed,
    }
    reactive_alphas = _parse_alphas(alphas)
    if reactive_alphas is not None:
        kwargs["reactive_alphas"] = reactive_alphas

    try:
        result = solve(instance_file, **kwargs)
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if output_format == "json":
        data = {
            "selected_indices": result.selected_indices,
            "objective": result.objective,
            "feasible": result.feasible,
            "construction": result.construction,
            "local_search": result.local_search,
            "elapsed_seconds": result.elapsed_seconds,
            "time_to_best": result.time_to_best,
            "iterations": result.iterations,
            "best_iteration": result.best_iteration,
            "stop_reason": result.stop_reason,
            "metadata": result.metadata,
        }
        click.echo(json.dumps(data, indent=2))
    else:
        click.echo(f"Best objective: {result.objective:.6f}")
        click.echo(f"Selected: {result.num_selected} of {result.metadata['n']}")
        click.echo(
            f"Mode: {result.construction} / {result.local_search}"
        )
        click.echo(
            f"Iterations: {result.iterations} (best at {result.best_iteration})"
        )
        click.echo(
            f"Time: {result.elapsed_seconds:.2f}s (best at {result.time_to_best:.2f}s)"
        )
        click.echo(f"Stopped: {result.stop_reason}")
