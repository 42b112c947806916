"""
Summary statistics of point datasets.

Anscombe's quartet exists to show that very different datasets can share
the same summary statistics. This module computes those statistics for a
single dataset and lays them side by side for the four reference datasets.

Functions
---------
get_summary(points, round_digits=None, verbose=False)
    Count, means, sample variances, Pearson r and regression line of a
    dataset.
compare_reference_datasets(round_digits=2, verbose=False)
    ``get_summary`` for each Anscombe dataset, one row per dataset.

Examples
--------
>>> from correlatica.summary import compare_reference_datasets
>>> compare_reference_datasets(round_digits=2)
      n  mean_x  mean_y  var_x  var_y     r  slope  intercept
A  11.0     9.0     7.5   11.0   4.13  0.82    0.5        3.0
B  11.0     9.0     7.5   11.0   4.13  0.82    0.5        3.0
C  11.0     9.0     7.5   11.0   4.12  0.82    0.5        3.0
D  11.0     9.0     7.5   11.0   4.12  0.82    0.5        3.0
"""

import logging
import warnings
from typing import Sequence

import pandas as pd

from correlatica._utils import (
    convert_dataframe,
    read_config,
    validate_unique_ids,
    verbose_context,
)
from correlatica.datasets import REFERENCE_KEYS, get_reference_dataset
from correlatica.interactions import compute_correlation, linear_fit
from correlatica.types import Point

logger = logging.getLogger(__name__)

SUMMARY_FIELDS = ["n", "mean_x", "mean_y", "var_x", "var_y", "r", "slope", "intercept"]


def get_summary(
    points: Sequence[Point],
    round_digits: int | None = None,
    verbose: bool = False,
) -> pd.Series:
    """
    Compute summary statistics of a dataset.

    Parameters
    ----------
    points : Sequence[Point]
        The dataset. Point ids must be unique.
    round_digits : int, optional
        If given, every statistic is rounded to this many decimals.
    verbose : bool, default=False
        If True, computation steps are logged at INFO level.

    Returns
    -------
    pandas.Series
        Float statistics indexed by ``n``, ``mean_x``, ``mean_y``,
        ``var_x``, ``var_y`` (sample variances, ``ddof=1``), ``r``,
        ``slope`` and ``intercept``.

    Raises
    ------
    ValueError
        If two points share an id.

    Warns
    -----
    UserWarning
        If the dataset is empty. All statistics are ``0.0`` in that case.

    Notes
    -----
    - Variances of fewer than two points are reported as ``0.0``.
    - ``r`` follows :func:`correlatica.interactions.compute_correlation`
      and the regression line follows
      :func:`correlatica.interactions.linear_fit`, including their
      degenerate-data conventions.
    """
    with verbose_context(logger, verbose):
        validate_unique_ids(
            (p.id for p in points),
            err_msg=read_config("messages")["errors"]["duplicate_point_ids_f"],
        )
        df = convert_dataframe(points)
        logger.info("Summary started for %d points.", df.shape[0])
        if df.empty:
            warnings.warn(
                read_config("messages")["warns"]["empty_dataset_f"].format(
                    "get_summary"
                )
            )
            return pd.Series(0.0, index=SUMMARY_FIELDS, dtype=float)
        n = df.shape[0]
        slope, intercept = linear_fit(points)
        summary = pd.Series(
            {
                "n": float(n),
                "mean_x": df["x"].mean(),
                "mean_y": df["y"].mean(),
                "var_x": df["x"].var(ddof=1) if n > 1 else 0.0,
                "var_y": df["y"].var(ddof=1) if n > 1 else 0.0,
                "r": compute_correlation(points),
                "slope": slope,
                "intercept": intercept,
            },
            dtype=float,
        )
        if round_digits is not None:
            summary = summary.round(round_digits)
        logger.info("Summary computed: r=%.4f.", summary["r"])
    return summary


def compare_reference_datasets(
    round_digits: int | None = 2, verbose: bool = False
) -> pd.DataFrame:
    """
    Summary statistics of the four Anscombe datasets side by side.

    Parameters
    ----------
    round_digits : int or None, default=2
        Decimals to round to; None keeps full precision.
    verbose : bool, default=False
        If True, computation steps are logged at INFO level.

    Returns
    -------
    pandas.DataFrame
        One row per dataset (index ``'A'`` to ``'D'``), one column per
        statistic of :func:`get_summary`.
    """
    with verbose_context(logger, verbose):
        rows = {}
        for key in REFERENCE_KEYS:
            logger.info("Summarising reference dataset '%s'.", key)
            rows[key] = get_summary(
                get_reference_dataset(key), round_digits=round_digits
            )
        table = pd.DataFrame(rows).T
    return table[SUMMARY_FIELDS]
