# shiftboard/analytics - Derived coverage and fairness statistics
from .coverage import CoverageStats, compute_coverage, coverage_to_dataframe, fairness_to_dataframe

__all__ = ["CoverageStats", "compute_coverage", "coverage_to_dataframe", "fairness_to_dataframe"]
