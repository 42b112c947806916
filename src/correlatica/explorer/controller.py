"""
Interactive session state for the correlation explorer.

This module holds the one piece of mutable state in Correlatica: the active
preset, the correlation target set with the slider and the current dataset.
The presentation layer drives it through four entry points and reads back
the dataset, the derived correlation summary and whether the slider should
be shown.

Classes
-------
InteractionController
    Owns the session state and applies preset, slider, regenerate and drag
    events to it.

Notes
-----
All handlers are synchronous and finish their mutation before returning,
so a stream of drag events is applied strictly in arrival order. The
derived summary is computed on every read and is never stale.

Examples
--------
>>> from correlatica.explorer import InteractionController
>>> ctrl = InteractionController(preset="Anscombe A")
>>> ctrl.summary.explanation
'r = 0.82 => strong positive correlation'
>>> ctrl.show_target_control
False
>>> ctrl.drag_point("A-7", 100, 100)
True
>>> ctrl.summary.r > 0.9
True
"""

import dataclasses
import logging
from numbers import Number
from typing import List

import numpy as np

from correlatica._utils import read_config, validate_in_range, validate_string_flag
from correlatica.datasets import generate_linear, get_reference_dataset
from correlatica.interactions import compute_correlation, summarize_correlation
from correlatica.types import (
    CorrelationSummary,
    LinearKind,
    NoCorrelationKind,
    Point,
    Preset,
    is_linear_preset,
)

logger = logging.getLogger(__name__)


class InteractionController:
    """
    Session state of the correlation explorer.

    Parameters
    ----------
    preset : Preset or str, default=Preset.POSITIVE_LINEAR
        Initial preset. Strings are resolved with :meth:`Preset.from_key`.
    correlation_target : Number, optional
        Initial slider value within ``[0, 1]``. Defaults to the
        ``default_correlation_target`` setting (0.8).
    random_state : int, numpy.random.Generator or None, default=None
        Seed or generator shared by every synthetic generation of this
        session. A seeded session replays the same sequence of datasets.
    clamp : bool, default=False
        If True, dragged coordinates are clipped into the visual domain
        (``[0, 20]`` on both axes by default).

    Attributes
    ----------
    preset : Preset
        Active preset.
    correlation_target : float
        Current slider value.
    points : list[Point]
        Copy of the current dataset.
    summary : CorrelationSummary
        Derived display values of the current dataset.
    r : float
        Pearson correlation of the current dataset.
    show_target_control : bool
        Whether the correlation target slider applies to the active preset.

    Raises
    ------
    ValueError
        If `preset` is unknown or `correlation_target` lies outside ``[0, 1]``.
    """

    _actions = (
        "select_preset",
        "set_correlation_target",
        "request_regenerate",
        "drag_point",
    )

    def __init__(
        self,
        preset: Preset | str = Preset.POSITIVE_LINEAR,
        correlation_target: Number | None = None,
        random_state: int | np.random.Generator | None = None,
        clamp: bool = False,
    ):
        settings = read_config("settings")
        if correlation_target is None:
            correlation_target = settings["default_correlation_target"]
        self._validate_target(correlation_target)
        self._preset = Preset.from_key(preset)
        self._correlation_target = float(correlation_target)
        self._rng = np.random.default_rng(random_state)
        self._clamp = clamp
        self._domain = tuple(settings["domain"])
        self._points = self._load()

    @property
    def preset(self) -> Preset:
        return self._preset

    @property
    def correlation_target(self) -> float:
        return self._correlation_target

    @property
    def points(self) -> List[Point]:
        return list(self._points)

    @property
    def summary(self) -> CorrelationSummary:
        return summarize_correlation(self._points)

    @property
    def r(self) -> float:
        return compute_correlation(self._points)

    @property
    def show_target_control(self) -> bool:
        return is_linear_preset(self._preset)

    def select_preset(self, key: Preset | str) -> None:
        """
        Switch to another preset and load its dataset.

        Linear presets generate with the current correlation target,
        ``NO_CORRELATION`` always generates with a target of zero and the
        Anscombe presets load their fixed dataset.
        """
        self._preset = Preset.from_key(key)
        logger.debug("Preset changed to '%s'.", self._preset.label)
        self._points = self._load()

    def set_correlation_target(self, value: Number) -> None:
        """
        Update the slider value and regenerate the synthetic dataset.

        While an Anscombe preset is active the call has no effect: neither
        the stored target nor the dataset change.

        Raises
        ------
        ValueError
            If `value` lies outside ``[0, 1]``.
        """
        self._validate_target(value)
        if not is_linear_preset(self._preset):
            logger.debug(
                "Correlation target ignored for reference preset '%s'.",
                self._preset.label,
            )
            return
        self._correlation_target = float(value)
        self._points = self._load()

    def request_regenerate(self) -> None:
        """
        Reload the dataset of the active preset.

        Synthetic presets draw new random data; reference presets reload
        their fixed coordinates, discarding any drag edits.
        """
        logger.debug("Regenerating dataset for '%s'.", self._preset.label)
        self._points = self._load()

    def drag_point(self, point_id: str, x: Number, y: Number) -> bool:
        """
        Move one point of the current dataset.

        Parameters
        ----------
        point_id : str
            Id of the point to move.
        x, y : Number
            New coordinates. Clipped into the visual domain if the controller
            was created with ``clamp=True``.

        Returns
        -------
        bool
            True if a point was moved, False if no point has `point_id`
            (the dataset is left untouched).
        """
        if self._clamp:
            lower, upper = self._domain
            x = min(max(x, lower), upper)
            y = min(max(y, lower), upper)
        for i, point in enumerate(self._points):
            if point.id == point_id:
                self._points[i] = dataclasses.replace(point, x=float(x), y=float(y))
                return True
        logger.debug("Drag ignored, no point with id '%s'.", point_id)
        return False

    def dispatch(self, action: str, *args, **kwargs):
        """
        Route a named action to its handler.

        Parameters
        ----------
        action : {'select_preset', 'set_correlation_target',
                  'request_regenerate', 'drag_point'}
            Handler name.
        *args, **kwargs
            Arguments forwarded to the handler.

        Returns
        -------
        Any
            Whatever the handler returns.

        Raises
        ------
        ValueError
            If `action` is not a supported handler name.

        Examples
        --------
        >>> ctrl = InteractionController(preset="ANSCOMBE_B")
        >>> ctrl.dispatch("drag_point", "B-0", 1.0, 1.0)
        True
        """
        validate_string_flag(
            action,
            self._actions,
            err_msg=read_config("messages")["errors"]["unsupported_action_f"].format(
                action, self._actions
            ),
        )
        return getattr(self, action)(*args, **kwargs)

    def _load(self) -> List[Point]:
        kind = self._preset.kind
        if isinstance(kind, LinearKind):
            return generate_linear(
                self._correlation_target, kind.sign, random_state=self._rng
            )
        if isinstance(kind, NoCorrelationKind):
            return generate_linear(0.0, 1, random_state=self._rng)
        return get_reference_dataset(kind.which)

    @staticmethod
    def _validate_target(value: Number) -> None:
        validate_in_range(
            value,
            0,
            1,
            err_msg=read_config("messages")["errors"]["value_out_of_range_f"].format(
                "correlation_target", 0, 1, value
            ),
        )
