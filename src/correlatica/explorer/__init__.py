"""
Facade for the interactive explorer state.

Classes available at the top level include:
- InteractionController: owns the preset, slider value and dataset of a
  session and applies preset, slider, regenerate and drag events
"""

from .controller import InteractionController

__all__ = ["InteractionController"]
