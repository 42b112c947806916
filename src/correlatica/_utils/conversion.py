"""
Conversion utilities for point collections and user-facing keys.

This module provides low-level conversion functions that turn a dataset (a
sequence of :class:`correlatica.types.Point`) into the array and tabular
structures the numerical code works with, and that normalise the spelling
of string keys before they are looked up.

Methods
-------
convert_numpy(points)
    Convert a sequence of points to a pair of float NumPy arrays ``(x, y)``.
convert_dataframe(points)
    Convert a sequence of points to a pandas DataFrame indexed by point id.
convert_key(key)
    Normalise a string key for case- and separator-insensitive lookup.

Notes
-----
- All conversion functions return new objects and never modify their input.
- Any object exposing ``x`` and ``y`` attributes (and ``id`` for
  ``convert_dataframe``) is accepted as a point.

Examples
--------
>>> from correlatica.types import Point
>>> from correlatica._utils import convert_dataframe

>>> convert_dataframe([Point("a", 1, 2.5), Point("b", 2, 3.0)])
      x    y
id
a   1.0  2.5
b   2.0  3.0
"""

import re
from typing import Sequence, Tuple

import numpy as np
import pandas as pd


def convert_numpy(points: Sequence) -> Tuple[np.ndarray, np.ndarray]:
    """
    Convert a sequence of points to a pair of float NumPy arrays.

    Parameters
    ----------
    points : Sequence[Point]
        Points to convert. The order of the input is preserved.

    Returns
    -------
    tuple[numpy.ndarray, numpy.ndarray]
        ``(x, y)`` arrays of dtype ``float64`` and equal length. Both are
        empty for an empty input.
    """
    x = np.fromiter((p.x for p in points), dtype=np.float64)
    y = np.fromiter((p.y for p in points), dtype=np.float64)
    return x, y


def convert_dataframe(points: Sequence) -> pd.DataFrame:
    """
    Convert a sequence of points to a pandas DataFrame.

    Parameters
    ----------
    points : Sequence[Point]
        Points to convert.

    Returns
    -------
    pandas.DataFrame
        DataFrame with float columns ``x`` and ``y`` and an index named
        ``id`` holding the point ids, in input order.
    """
    x, y = convert_numpy(points)
    index = pd.Index([p.id for p in points], name="id", dtype=object)
    return pd.DataFrame({"x": x, "y": y}, index=index)


def convert_key(key: str) -> str:
    """
    Normalise a string key for lookup.

    Letters are lower-cased, surrounding whitespace is stripped and every
    run of spaces, hyphens and underscores collapses to a single underscore,
    so ``"Anscombe A"``, ``"anscombe-a"`` and ``"ANSCOMBE_A"`` all map to
    ``"anscombe_a"``.

    Parameters
    ----------
    key : str
        Key to normalise.

    Returns
    -------
    str
        Normalised key.
    """
    return re.sub(r"[\s_\-]+", "_", key.strip().lower())
