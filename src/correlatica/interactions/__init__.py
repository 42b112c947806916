"""
Facade for linear correlation measures.

This subpackage provides top-level access to the functions used to measure
and describe the linear association of a point dataset.

Functions available at the top level include:
- compute_correlation: Pearson correlation coefficient of a dataset
- describe_strength, describe_direction: qualitative labels of r
- summarize_correlation: r with its rounded value and labels
- linear_fit: least squares slope and intercept
"""

from correlatica.interactions.correlation_metrics import CorrelationMetrics as cm

compute_correlation = cm.pearson
describe_strength = cm.describe_strength
describe_direction = cm.describe_direction
summarize_correlation = cm.summarize
linear_fit = cm.linear_fit

__all__ = [
    "compute_correlation",
    "describe_strength",
    "describe_direction",
    "summarize_correlation",
    "linear_fit",
]
