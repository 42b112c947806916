"""
Linear correlation measures for point datasets.

This module provides the statistical building blocks behind the live
correlation readout: the Pearson product-moment correlation coefficient of a
set of points, the qualitative labels used to describe it and the ordinary
least squares line through the points. The functions are implemented as
static methods of the ``CorrelationMetrics`` class and are re-exported as
plain functions by the :mod:`correlatica.interactions` facade.

Main class
----------
CorrelationMetrics
    A utility class containing static methods for computing linear
    correlation measures on sequences of :class:`correlatica.types.Point`.
"""

import logging
from numbers import Number
from typing import Sequence, Tuple

import numpy as np

from correlatica._utils import convert_numpy, read_config
from correlatica.types import CorrelationSummary, Point

logger = logging.getLogger(__name__)


class CorrelationMetrics:
    """
    Collection of linear correlation measures.

    All methods are pure functions of their input: they never modify the
    points they receive and never raise on numerically degenerate data.

    Methods
    -------
    pearson(points)
        Compute the Pearson correlation coefficient of a point set.
    describe_strength(r)
        Qualitative magnitude label of a correlation coefficient.
    describe_direction(r)
        Sign label of a correlation coefficient.
    summarize(points)
        Compute r together with its rounded value and labels.
    linear_fit(points)
        Slope and intercept of the least squares line through the points.

    Examples
    --------
    >>> from correlatica.types import Point
    >>> from correlatica.interactions.correlation_metrics import CorrelationMetrics as cm
    >>> pts = [Point(str(i), i, 2 * i + 1) for i in range(5)]
    >>> cm.pearson(pts)
    1.0
    """

    @staticmethod
    def pearson(points: Sequence[Point]) -> float:
        """
        Compute the Pearson product-moment correlation coefficient.

        With ``dx = x - mean(x)`` and ``dy = y - mean(y)``:

        .. math::

            r = \\frac{\\sum dx \\cdot dy}{\\sqrt{\\sum dx^2 \\cdot \\sum dy^2}}

        Parameters
        ----------
        points : Sequence[Point]
            The dataset. Order does not matter.

        Returns
        -------
        float
            Correlation coefficient in ``[-1, 1]``.

        Notes
        -----
        - Fewer than two points yield exactly ``0.0``.
        - If all x values or all y values are identical the coefficient is
          undefined and exactly ``0.0`` is returned instead of NaN.
        - Infinite or NaN coordinates yield exactly ``0.0``. Finite
          coordinates of any magnitude are supported.
        - The result is clipped to ``[-1, 1]`` to absorb rounding overshoot
          on perfectly collinear data.
        """
        x, y = convert_numpy(points)
        n = x.size
        if n < 2:
            logger.debug("Correlation of %d point(s) is undefined, returning 0.", n)
            return 0.0
        if not (np.all(np.isfinite(x)) and np.all(np.isfinite(y))):
            logger.debug("Non-finite coordinates, returning 0.")
            return 0.0
        if np.all(x == x[0]) or np.all(y == y[0]):
            logger.debug("Zero variance in x or y, returning 0.")
            return 0.0
        # r is invariant to per-axis scaling; unit-scaled axes cannot overflow
        x = x / np.max(np.abs(x))
        y = y / np.max(np.abs(y))
        dx = x - x.mean()
        dy = y - y.mean()
        denominator = np.sqrt(np.sum(dx * dx)) * np.sqrt(np.sum(dy * dy))
        if denominator == 0:
            return 0.0
        r = np.sum(dx * dy) / denominator
        return float(np.clip(r, -1.0, 1.0))

    @staticmethod
    def describe_strength(r: Number) -> str:
        """
        Qualitative magnitude of a correlation coefficient.

        Returns ``'strong'`` if ``|r| > 0.7``, ``'moderate'`` if ``|r| > 0.3``
        and ``'weak'`` otherwise. The thresholds come from the ``thresholds``
        section of the settings config.
        """
        thresholds = read_config("settings")["thresholds"]
        magnitude = abs(r)
        if magnitude > thresholds["strong"]:
            return "strong"
        if magnitude > thresholds["moderate"]:
            return "moderate"
        return "weak"

    @staticmethod
    def describe_direction(r: Number) -> str:
        """Return ``'positive'``, ``'negative'`` or ``'none'`` for the sign of `r`."""
        if r > 0:
            return "positive"
        if r < 0:
            return "negative"
        return "none"

    @staticmethod
    def summarize(points: Sequence[Point]) -> CorrelationSummary:
        """
        Compute the derived display values of a dataset.

        Parameters
        ----------
        points : Sequence[Point]
            The dataset.

        Returns
        -------
        CorrelationSummary
            Pearson r, r rounded to the configured display digits, and the
            strength and direction labels of r.
        """
        r = CorrelationMetrics.pearson(points)
        digits = read_config("settings")["display_digits"]
        return CorrelationSummary(
            r=r,
            r_rounded=round(r, digits),
            strength=CorrelationMetrics.describe_strength(r),
            direction=CorrelationMetrics.describe_direction(r),
        )

    @staticmethod
    def linear_fit(points: Sequence[Point]) -> Tuple[float, float]:
        """
        Fit ``y = slope * x + intercept`` by ordinary least squares.

        Parameters
        ----------
        points : Sequence[Point]
            The dataset.

        Returns
        -------
        tuple[float, float]
            ``(slope, intercept)``.

        Notes
        -----
        When the slope is undefined (fewer than two points or all x values
        identical) the fit degrades to the horizontal line through the mean
        of y: ``(0.0, mean(y))``, or ``(0.0, 0.0)`` for an empty dataset.
        """
        x, y = convert_numpy(points)
        if y.size == 0:
            return 0.0, 0.0
        if x.size < 2 or np.all(x == x[0]):
            return 0.0, float(y.mean())
        dx = x - x.mean()
        slope = np.sum(dx * (y - y.mean())) / np.sum(dx * dx)
        intercept = y.mean() - slope * x.mean()
        return float(slope), float(intercept)
