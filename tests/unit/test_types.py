import dataclasses

import pytest

from correlatica.types import (
    Point, Preset, LinearKind, NoCorrelationKind, ReferenceKind,
    CorrelationSummary, is_linear_preset)

# tests for types.Point

def test_point_is_immutable():
    point = Point("A-0", 10.0, 8.04)
    with pytest.raises(dataclasses.FrozenInstanceError):
        point.x = 3.0
    moved = dataclasses.replace(point, x=3.0)
    assert moved.id == point.id
    assert (point.x, moved.x) == (10.0, 3.0)

# tests for types.Preset

@pytest.mark.parametrize("preset, kind", [
    (Preset.POSITIVE_LINEAR, LinearKind(sign=1)),
    (Preset.NEGATIVE_LINEAR, LinearKind(sign=-1)),
    (Preset.NO_CORRELATION, NoCorrelationKind()),
    (Preset.ANSCOMBE_A, ReferenceKind(which="A")),
    (Preset.ANSCOMBE_B, ReferenceKind(which="B")),
    (Preset.ANSCOMBE_C, ReferenceKind(which="C")),
    (Preset.ANSCOMBE_D, ReferenceKind(which="D")),
])
def test_preset_kind(preset, kind):
    assert preset.kind == kind

def test_preset_has_seven_members():
    assert len(Preset) == 7

@pytest.mark.parametrize("key, expected", [
    (Preset.ANSCOMBE_C, Preset.ANSCOMBE_C),
    ("ANSCOMBE_C", Preset.ANSCOMBE_C),
    ("Anscombe C", Preset.ANSCOMBE_C),
    ("anscombe-c", Preset.ANSCOMBE_C),
    ("Positive linear", Preset.POSITIVE_LINEAR),
    ("no_correlation", Preset.NO_CORRELATION),
    (" NEGATIVE LINEAR ", Preset.NEGATIVE_LINEAR),
])
def test_preset_from_key(key, expected):
    assert Preset.from_key(key) is expected

@pytest.mark.parametrize("key", ["Anscombe E", "linear", "", None, 3])
def test_preset_from_key_unsupported(key):
    with pytest.raises(ValueError, match="Unsupported preset"):
        Preset.from_key(key)

# tests for types.is_linear_preset

@pytest.mark.parametrize("preset, expected", [
    (Preset.POSITIVE_LINEAR, True),
    (Preset.NEGATIVE_LINEAR, True),
    (Preset.NO_CORRELATION, True),
    (Preset.ANSCOMBE_A, False),
    (Preset.ANSCOMBE_B, False),
    (Preset.ANSCOMBE_C, False),
    (Preset.ANSCOMBE_D, False),
])
def test_is_linear_preset(preset, expected):
    assert is_linear_preset(preset) is expected

# tests for types.CorrelationSummary

@pytest.mark.parametrize("r, strength, direction, expected", [
    (0.8164, "strong", "positive", "r = 0.82 => strong positive correlation"),
    (-0.456, "moderate", "negative", "r = -0.46 => moderate negative correlation"),
    (0.0, "weak", "none", "r = 0.00 => weak none correlation"),
])
def test_correlation_summary_explanation(r, strength, direction, expected):
    summary = CorrelationSummary(r=r, r_rounded=round(r, 2),
                                 strength=strength, direction=direction)
    assert summary.explanation == expected
    assert summary.formatted == expected.split()[2]
