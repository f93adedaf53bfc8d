from __future__ import annotations

import numpy as np

# z-score of a two-sided 95% normal confidence interval
Z_95 = 1.96


class DataCollector:
    """Collect per-trial percolation thresholds

    Each threshold is the fraction of sites open at the moment the grid first
    percolated, so values are comparable across grid sizes
    """

    def __init__(self):
        self.fractions: list[float] = []

    def __len__(self) -> int:
        return len(self.fractions)

    def add_fraction(self, fraction: float) -> None:
        self.fractions.append(float(fraction))

    def convert_to_array(self) -> np.ndarray:
        """Return collected fractions as a read-only NumPy array"""
        fractions = np.asarray(self.fractions, dtype=float).copy()
        fractions.setflags(write=False)
        return fractions

    @staticmethod
    def _as_samples(samples: np.ndarray) -> np.ndarray:
        sample_array = np.asarray(samples, dtype=float)
        if sample_array.ndim != 1:
            raise ValueError("samples must be a 1D array")
        if sample_array.size == 0:
            raise ValueError("need at least 1 sample")
        return sample_array

    @staticmethod
    def sample_mean(samples: np.ndarray) -> float:
        return float(DataCollector._as_samples(samples).mean())

    @staticmethod
    def sample_stddev(samples: np.ndarray) -> float:
        """Sample standard deviation (n - 1 denominator); NaN for a single sample"""
        sample_array = DataCollector._as_samples(samples)
        if sample_array.size < 2:
            return float("nan")
        return float(sample_array.std(ddof=1))

    @staticmethod
    def confidence_interval(samples: np.ndarray, z: float = Z_95) -> tuple[float, float]:
        """Normal-approximation confidence interval for the mean

        Returns (lower, upper)
        """
        sample_array = DataCollector._as_samples(samples)
        sample_mean = DataCollector.sample_mean(sample_array)
        standard_error = DataCollector.sample_stddev(sample_array) / float(np.sqrt(sample_array.size))
        half_width = z * standard_error
        return sample_mean - half_width, sample_mean + half_width
