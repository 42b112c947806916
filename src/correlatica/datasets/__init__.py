"""
Facade for dataset generation.

Functions available at the top level include:
- generate_linear: synthetic linear data with a targeted correlation
- get_reference_dataset: one of the four Anscombe quartet datasets

Constants:
- ANSCOMBE_QUARTET: read-only mapping of the raw quartet coordinates
- REFERENCE_KEYS: the quartet dataset keys ('A', 'B', 'C', 'D')
"""

from .generators import generate_linear
from .reference import ANSCOMBE_QUARTET, REFERENCE_KEYS, get_reference_dataset

__all__ = [
    "generate_linear",
    "get_reference_dataset",
    "ANSCOMBE_QUARTET",
    "REFERENCE_KEYS",
]
