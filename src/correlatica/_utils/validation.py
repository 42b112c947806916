"""
Input validation utilities.

This module provides functions for validating user-facing arguments across
the framework: supported flag values, numeric ranges, the sign of a
synthetic relationship and the uniqueness of point ids. Every validator
raises ``ValueError`` with a caller-provided message and returns ``None``
otherwise.

Methods
-------
validate_string_flag(arg, supported_values, err_msg)
    Validate that a string flag is among a set of supported values.
validate_in_range(value, lower, upper, err_msg)
    Validate that a number lies within a closed interval.
validate_sign(sign, err_msg)
    Validate that a value is either +1 or -1.
validate_unique_ids(ids, err_msg)
    Validate that a sequence of identifiers has no duplicates.

Examples
--------
>>> import correlatica._utils as utils

>>> utils.validate_in_range(1.2, 0, 1,
...                         err_msg="'correlation_target' must lie within [0, 1]")
Traceback (most recent call last):
    ...
ValueError: 'correlation_target' must lie within [0, 1]
"""

from collections import Counter
from numbers import Number
from typing import Hashable, Iterable


def validate_string_flag(
    arg: str, supported_values: Iterable[str], err_msg: str
) -> None:
    """
    Validate a string flag against a set of supported values.

    Parameters
    ----------
    arg : str
        The string flag to validate.
    supported_values : Iterable[str]
        An iterable containing all supported flag values. Can be
        a list, tuple, set, or any iterable type supporting the
        `in` operator.
    err_msg : str
        The error message used in the raised ``ValueError`` if validation fails.

    Raises
    ------
    ValueError
        If `arg` is not found in `supported_values`.

    Examples
    --------
    >>> validate_string_flag("A", {"A", "B", "C"}, "Dataset 'A' is not supported")
    >>> validate_string_flag("E", {"A", "B", "C"}, "Dataset 'E' is not supported")
    Traceback (most recent call last):
        ...
    ValueError: Dataset 'E' is not supported
    """
    if arg not in supported_values:
        raise ValueError(err_msg)


def validate_in_range(
    value: Number, lower: Number, upper: Number, err_msg: str
) -> None:
    """
    Validate that a number lies within the closed interval ``[lower, upper]``.

    Parameters
    ----------
    value : Number
        The value to check. Non-numeric values (including ``bool``) and NaN
        fail the check.
    lower, upper : Number
        Inclusive bounds of the interval.
    err_msg : str
        The error message used in the raised ``ValueError`` if validation fails.

    Raises
    ------
    ValueError
        If `value` is not a number or lies outside ``[lower, upper]``.
    """
    if (
        isinstance(value, bool)
        or not isinstance(value, Number)
        or not lower <= value <= upper
    ):
        raise ValueError(err_msg)


def validate_sign(sign: Number, err_msg: str) -> None:
    """
    Validate that `sign` is either ``+1`` or ``-1``.

    Parameters
    ----------
    sign : Number
        The value to check. ``1.0`` and ``-1.0`` are accepted as well.
    err_msg : str
        The error message used in the raised ``ValueError`` if validation fails.

    Raises
    ------
    ValueError
        If `sign` is anything other than ``+1`` or ``-1``.
    """
    if isinstance(sign, bool) or sign not in (1, -1):
        raise ValueError(err_msg)


def validate_unique_ids(ids: Iterable[Hashable], err_msg: str) -> None:
    """
    Validate that a sequence of identifiers contains no duplicates.

    Parameters
    ----------
    ids : Iterable[Hashable]
        Identifiers to check, e.g. the ids of the points in a dataset.
    err_msg : str
        Error message used in the raised ``ValueError``. It may contain one
        ``{}`` placeholder which receives the sorted list of duplicated ids.

    Raises
    ------
    ValueError
        If at least one identifier occurs more than once.

    Examples
    --------
    >>> validate_unique_ids(["A-0", "A-1"], "duplicated: {}")
    >>> validate_unique_ids(["A-0", "A-0"], "duplicated: {}")
    Traceback (most recent call last):
        ...
    ValueError: duplicated: ['A-0']
    """
    duplicated = sorted(
        str(key) for key, count in Counter(ids).items() if count > 1
    )
    if duplicated:
        raise ValueError(err_msg.format(duplicated))
