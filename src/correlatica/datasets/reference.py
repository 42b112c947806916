"""
Anscombe's quartet reference datasets.

Four 11-point datasets published by F. J. Anscombe (1973) with nearly
identical means, variances, correlation (r ≈ 0.816) and regression line
(y ≈ 3 + 0.5x), but very different shapes:

- A: a noisy linear relationship;
- B: a clean nonlinear (curved) relationship;
- C: a tight linear relationship with one high-leverage outlier;
- D: a vertical cluster at x = 8 whose correlation comes from one point.

The coordinates are kept at their published precision and in their
published order.
"""

from types import MappingProxyType
from typing import List

from correlatica._utils import read_config, validate_string_flag
from correlatica.types import Point

REFERENCE_KEYS = ("A", "B", "C", "D")

ANSCOMBE_QUARTET = MappingProxyType(
    {
        "A": (
            (10, 8.04), (8, 6.95), (13, 7.58), (9, 8.81), (11, 8.33), (14, 9.96),
            (6, 7.24), (4, 4.26), (12, 10.84), (7, 4.82), (5, 5.68),
        ),
        "B": (
            (10, 9.14), (8, 8.14), (13, 8.74), (9, 8.77), (11, 9.26), (14, 8.1),
            (6, 6.13), (4, 3.1), (12, 9.13), (7, 7.26), (5, 4.74),
        ),
        "C": (
            (10, 7.46), (8, 6.77), (13, 12.74), (9, 7.11), (11, 7.81), (14, 8.84),
            (6, 6.08), (4, 5.39), (12, 8.15), (7, 6.42), (5, 5.73),
        ),
        "D": (
            (8, 6.58), (8, 5.76), (8, 7.71), (8, 8.84), (8, 8.47), (8, 7.04),
            (8, 5.25), (19, 12.5), (8, 5.56), (8, 7.91), (8, 6.89),
        ),
    }
)


def get_reference_dataset(which: str) -> List[Point]:
    """
    Load one of the four Anscombe quartet datasets.

    Parameters
    ----------
    which : {'A', 'B', 'C', 'D'}
        Dataset to load, case-insensitive.

    Returns
    -------
    list[Point]
        Eleven fresh ``Point`` objects with ids ``'{which}-{index}'``
        (0-based, e.g. ``'A-7'``). Ids and coordinates are identical on
        every call.

    Raises
    ------
    ValueError
        If `which` is not one of the four dataset keys.

    Examples
    --------
    >>> from correlatica.datasets import get_reference_dataset
    >>> get_reference_dataset("d")[7]
    Point(id='D-7', x=19.0, y=12.5)
    """
    key = which.strip().upper() if isinstance(which, str) else which
    validate_string_flag(
        key,
        REFERENCE_KEYS,
        err_msg=read_config("messages")["errors"]["unsupported_reference_f"].format(
            which, REFERENCE_KEYS
        ),
    )
    return [
        Point(id=f"{key}-{i}", x=float(x), y=float(y))
        for i, (x, y) in enumerate(ANSCOMBE_QUARTET[key])
    ]
