"""
Command-line interface for percolation threshold estimation.

    percolation-stats 50 100
    percolation-stats 100 50 --seed 7 --jobs 4
"""

import click
import numpy as np

from .logger import setup_logging
from .monte_carlo_model import PercolationStats

POSITIVE_INT = click.IntRange(min=1)


@click.command()
@click.version_option(package_name="percolation-sim")
@click.argument('n', type=POSITIVE_INT)
@click.argument('trials', type=POSITIVE_INT)
@click.option('--seed', type=int, default=None, help='Seed for the random generator')
@click.option('--jobs', '-j', 'n_jobs', default=1, type=int,
              help='Number of joblib workers running trials (-1 for all cores)')
@click.option('--verbose', '-v', is_flag=True, help='Log trial progress')
def cli(n, trials, seed, n_jobs, verbose):
    """Estimate the percolation threshold of an N-by-N grid over TRIALS experiments."""
    setup_logging(verbose)
    if n_jobs == 0:
        raise click.BadParameter('must not be 0', param_hint="'--jobs'")

    stats = PercolationStats(n, trials, rng=np.random.default_rng(seed), n_jobs=n_jobs)
    summary = stats.summary()

    click.echo(f"mean = {summary.mean}")
    click.echo(f"stddev = {summary.stddev}")
    click.echo(f"95% confidence interval = [{summary.confidence_lo}, {summary.confidence_hi}]")
