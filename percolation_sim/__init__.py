from .data_collector import Z_95, DataCollector
from .grid import Percolation
from .monte_carlo_model import MonteCarloSummary, PercolationStats, run_trial
from .union_find import UnionFind

__all__ = [
    "DataCollector",
    "MonteCarloSummary",
    "Percolation",
    "PercolationStats",
    "UnionFind",
    "Z_95",
    "run_trial",
]
