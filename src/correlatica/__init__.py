"""
Correlatica — the computational core of an interactive correlation explorer.

Features include:
- Pearson correlation with qualitative interpretation
- Synthetic linear datasets with a targeted correlation
- Anscombe's quartet reference datasets
- Interactive session state with draggable points
- Summary statistics of datasets
"""
import logging

from .explorer import InteractionController
from .types import CorrelationSummary, Point, Preset, is_linear_preset

__version__ = "0.1.0"

__all__ = [
    "InteractionController",
    "CorrelationSummary",
    "Point",
    "Preset",
    "is_linear_preset",
]

logger = logging.getLogger("correlatica")
if not logger.hasHandlers():
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(handler)
logger.setLevel(logging.WARNING)
