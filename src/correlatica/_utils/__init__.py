"""
Internal utilities for the Correlatica framework.

This module provides low-level utilities for data conversion, validation,
configuration reading and logging helpers. These are internal APIs and may
change without notice.

Methods
-------
convert_numpy(points)
    Convert a sequence of points to a pair of float NumPy arrays ``(x, y)``.
convert_dataframe(points)
    Convert a sequence of points to a pandas DataFrame indexed by point id.
convert_key(key)
    Normalise a string key for case- and separator-insensitive lookup.
validate_string_flag(arg, supported_values, err_msg)
    Validate a string flag against a set of supported values.
validate_in_range(value, lower, upper, err_msg)
    Validate that a number lies within a closed interval.
validate_sign(sign, err_msg)
    Validate that a value is either +1 or -1.
validate_unique_ids(ids, err_msg)
    Validate that a sequence of identifiers has no duplicates.
temp_log_level(logger, level)
    Temporarily sets the logging level of a logger within a context.
verbose_context(logger, verbose)
    Enable INFO logging on a logger for the duration of a context.
read_config(name)
    Read and cache JSON configuration files.

Notes
-----
- These utilities are for internal framework use only
- Use public APIs from main modules for stable functionality
"""

from .conversion import convert_dataframe, convert_key, convert_numpy
from .helpers import temp_log_level, verbose_context
from .readers import read_config
from .validation import (
    validate_in_range,
    validate_sign,
    validate_string_flag,
    validate_unique_ids,
)

__all__ = [
    "convert_numpy",
    "convert_dataframe",
    "convert_key",
    "validate_string_flag",
    "validate_in_range",
    "validate_sign",
    "validate_unique_ids",
    "temp_log_level",
    "verbose_context",
    "read_config",
]
