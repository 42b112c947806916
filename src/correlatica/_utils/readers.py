"""
Configuration reading utilities.

This module provides utilities for reading the JSON configuration files
bundled with the framework. All functions include caching so the same file
is read from disk only once per process.

Methods
-------
read_config
    Read and cache JSON configuration files from the framework's config directory.

Examples
--------
>>> from correlatica._utils import read_config

>>> read_config("settings")["thresholds"]
{'strong': 0.7, 'moderate': 0.3}
"""

import json
import pathlib
from functools import lru_cache


@lru_cache(maxsize=2)
def read_config(name) -> dict:
    """
    Read and cache JSON configuration files.

    This function reads JSON files from the framework's `config/` directory
    and caches the results to avoid repeated file system access.

    Parameters
    ----------
    name : str
        The name of the configuration file (without .json extension).
        File is located at `config/{name}.json` relative to the package root.

    Returns
    -------
    dict
        The parsed JSON content of the configuration file.

    Raises
    ------
    FileNotFoundError
        If the requested configuration file does not exist.

    Notes
    -----
    - The cache size is set to 2 because Correlatica currently uses 2
      configuration files: ``messages`` and ``settings``.
    - The returned dict is shared between callers and must not be mutated.
    """
    path = pathlib.Path(__file__).resolve().parent.parent / f"config/{name}.json"
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
