"""
Core types used throughout the Correlatica framework.

This module defines the small set of value objects the rest of the framework
passes around: the draggable data point, the dataset presets a user can pick
and the tagged kinds that decide how each preset produces its data, and the
derived correlation summary shown next to the scatter plot.

Classes
-------
Point
    Immutable data point with a stable id and ``x``/``y`` coordinates.
LinearKind, NoCorrelationKind, ReferenceKind
    Tagged preset kinds. Every preset maps to exactly one of them, so
    generation logic dispatches on the kind and never on preset labels.
Preset
    Enumeration of the seven selectable dataset presets.
CorrelationSummary
    Derived display values for a dataset: Pearson r, its rounded value and
    the qualitative strength and direction labels.

Functions
---------
is_linear_preset(preset)
    Whether a preset is one of the synthetic linear variants (and therefore
    exposes the correlation target control).

Examples
--------
>>> from correlatica.types import Preset, is_linear_preset
>>> Preset.from_key("anscombe b").kind
ReferenceKind(which='B')
>>> is_linear_preset(Preset.NO_CORRELATION)
True
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from correlatica._utils import convert_key, read_config


@dataclass(frozen=True)
class Point:
    """
    A single point of a dataset.

    Parameters
    ----------
    id : str
        Opaque identifier, unique within its dataset and stable across drag
        mutations.
    x : float
        Horizontal coordinate.
    y : float
        Vertical coordinate.

    Notes
    -----
    Points are immutable. Moving a point means replacing it with a new
    ``Point`` carrying the same id, e.g. via ``dataclasses.replace``.
    """

    id: str
    x: float
    y: float


@dataclass(frozen=True)
class LinearKind:
    """Synthetic linear data with the given slope sign (+1 or -1)."""

    sign: int


@dataclass(frozen=True)
class NoCorrelationKind:
    """Synthetic linear data with the correlation target forced to zero."""


@dataclass(frozen=True)
class ReferenceKind:
    """One of the fixed Anscombe quartet datasets ('A', 'B', 'C' or 'D')."""

    which: str


PresetKind = Union[LinearKind, NoCorrelationKind, ReferenceKind]


class Preset(Enum):
    """
    Selectable dataset presets.

    The value of each member is its human readable label. The generation
    path of a preset is described by :attr:`kind`.

    Examples
    --------
    >>> Preset.NEGATIVE_LINEAR.kind
    LinearKind(sign=-1)
    >>> Preset.from_key("Negative linear") is Preset.NEGATIVE_LINEAR
    True
    """

    POSITIVE_LINEAR = "Positive linear"
    NEGATIVE_LINEAR = "Negative linear"
    NO_CORRELATION = "No correlation"
    ANSCOMBE_A = "Anscombe A"
    ANSCOMBE_B = "Anscombe B"
    ANSCOMBE_C = "Anscombe C"
    ANSCOMBE_D = "Anscombe D"

    @property
    def label(self) -> str:
        """Human readable name of the preset."""
        return self.value

    @property
    def kind(self) -> PresetKind:
        """Tagged kind describing how the preset produces its dataset."""
        return _PRESET_KINDS[self]

    @classmethod
    def from_key(cls, key: Union["Preset", str]) -> "Preset":
        """
        Resolve a preset from a member, its name or its label.

        String keys are matched case-insensitively and spaces, hyphens and
        underscores are interchangeable, so ``"ANSCOMBE_A"``, ``"Anscombe A"``
        and ``"anscombe-a"`` all resolve to :attr:`ANSCOMBE_A`.

        Parameters
        ----------
        key : Preset or str
            The preset or its textual key.

        Returns
        -------
        Preset
            The matching member.

        Raises
        ------
        ValueError
            If `key` does not name any preset.
        """
        if isinstance(key, cls):
            return key
        if isinstance(key, str):
            lookup = {}
            for member in cls:
                lookup[convert_key(member.name)] = member
                lookup[convert_key(member.value)] = member
            preset = lookup.get(convert_key(key))
            if preset is not None:
                return preset
        raise ValueError(
            read_config("messages")["errors"]["unsupported_preset_f"].format(
                key, [member.value for member in cls]
            )
        )


_PRESET_KINDS = {
    Preset.POSITIVE_LINEAR: LinearKind(sign=1),
    Preset.NEGATIVE_LINEAR: LinearKind(sign=-1),
    Preset.NO_CORRELATION: NoCorrelationKind(),
    Preset.ANSCOMBE_A: ReferenceKind(which="A"),
    Preset.ANSCOMBE_B: ReferenceKind(which="B"),
    Preset.ANSCOMBE_C: ReferenceKind(which="C"),
    Preset.ANSCOMBE_D: ReferenceKind(which="D"),
}


def is_linear_preset(preset: Preset) -> bool:
    """Return True if `preset` generates synthetic linear data."""
    return isinstance(preset.kind, (LinearKind, NoCorrelationKind))


@dataclass(frozen=True)
class CorrelationSummary:
    """
    Derived display values for a dataset.

    Parameters
    ----------
    r : float
        Pearson correlation coefficient, in ``[-1, 1]``.
    r_rounded : float
        `r` rounded to the configured number of display digits.
    strength : {'strong', 'moderate', 'weak'}
        Qualitative magnitude of `r`.
    direction : {'positive', 'negative', 'none'}
        Sign of `r`.

    Examples
    --------
    >>> s = CorrelationSummary(r=0.8164, r_rounded=0.82,
    ...                        strength="strong", direction="positive")
    >>> s.explanation
    'r = 0.82 => strong positive correlation'
    """

    r: float
    r_rounded: float
    strength: str
    direction: str

    @property
    def formatted(self) -> str:
        """`r` as fixed-point text with the configured number of digits."""
        digits = read_config("settings")["display_digits"]
        return f"{self.r:.{digits}f}"

    @property
    def explanation(self) -> str:
        """One-line interpretation, e.g. ``'r = 0.82 => strong positive correlation'``."""
        return read_config("messages")["explanation_f"].format(
            self.formatted, self.strength, self.direction
        )
