from __future__ import annotations

import logging
import operator
from dataclasses import dataclass
from typing import Optional

import numpy as np
from joblib import Parallel, delayed

from .data_collector import Z_95, DataCollector
from .grid import Percolation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MonteCarloSummary:
    """Threshold statistics over repeated percolation trials."""
    mean: float
    stddev: float
    confidence_lo: float
    confidence_hi: float


def run_trial(n: int, random_generator: np.random.Generator) -> float:
    """Open uniformly random sites of a fresh n-by-n grid until it percolates.

    Sites are sampled with replacement; picking an already open site is a
    no-op. Returns the fraction of sites open when percolation first occurs.
    """
    percolation = Percolation(n)
    integers = random_generator.integers
    while not percolation.percolates():
        percolation.open(int(integers(1, n + 1)), int(integers(1, n + 1)))
    return percolation.open_fraction


class PercolationStats:
    """Estimate the site percolation threshold of an n-by-n grid.

    All trials run in the constructor; the resulting fractions are read-only
    and every statistic is computed from them on demand.
    """

    def __init__(self, n: int, trials: int, rng: Optional[np.random.Generator] = None, n_jobs: int = 1):
        """Run ``trials`` independent experiments on n-by-n grids.

        If rng is not provided, a new NumPy default RNG is created. With
        ``n_jobs`` other than 1 the trials are spread over joblib workers,
        each trial drawing from its own child generator of ``rng``.
        """
        n = operator.index(n)
        trials = operator.index(trials)
        if n <= 0 or trials <= 0:
            raise ValueError(f"n and trials must be positive, got n={n}, trials={trials}")

        self.n = n
        self.trials = trials
        self.n_jobs = int(n_jobs)
        self.random_generator = rng if rng is not None else np.random.default_rng()
        self._fractions = self._run().convert_to_array()

    def _run(self) -> DataCollector:
        logger.info("Running %d trial(s) on a %dx%d grid (n_jobs=%d)", self.trials, self.n, self.n, self.n_jobs)
        collector = DataCollector()
        if self.n_jobs == 1:
            for trial in range(self.trials):
                fraction = run_trial(self.n, self.random_generator)
                logger.debug("Trial %d percolated at %.6f", trial, fraction)
                collector.add_fraction(fraction)
        else:
            generators = self.random_generator.spawn(self.trials)
            fractions = Parallel(n_jobs=self.n_jobs, prefer="processes")(
                delayed(run_trial)(self.n, generator) for generator in generators
            )
            for fraction in fractions:
                collector.add_fraction(fraction)
        logger.info("Finished %d trial(s)", len(collector))
        return collector

    @property
    def fractions(self) -> np.ndarray:
        """Per-trial threshold fractions, in trial order."""
        return self._fractions

    def mean(self) -> float:
        """Sample mean of the percolation threshold."""
        return DataCollector.sample_mean(self._fractions)

    def stddev(self) -> float:
        """Sample standard deviation of the percolation threshold; NaN for one trial."""
        return DataCollector.sample_stddev(self._fractions)

    def confidence_lo(self) -> float:
        """Low endpoint of the 95% confidence interval."""
        return DataCollector.confidence_interval(self._fractions, Z_95)[0]

    def confidence_hi(self) -> float:
        """High endpoint of the 95% confidence interval."""
        return DataCollector.confidence_interval(self._fractions, Z_95)[1]

    def summary(self) -> MonteCarloSummary:
        lo, hi = DataCollector.confidence_interval(self._fractions, Z_95)
        return MonteCarloSummary(mean=self.mean(), stddev=self.stddev(), confidence_lo=lo, confidence_hi=hi)
