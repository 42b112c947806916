import pytest
import numpy as np

from correlatica import InteractionController, Preset
from correlatica.datasets import REFERENCE_KEYS, get_reference_dataset
from correlatica.interactions import compute_correlation

ANSCOMBE_PRESETS = {
    "A": Preset.ANSCOMBE_A,
    "B": Preset.ANSCOMBE_B,
    "C": Preset.ANSCOMBE_C,
    "D": Preset.ANSCOMBE_D,
}

# end-to-end scenarios for the correlation explorer

def test_no_correlation_session():
    ctrl = InteractionController(random_state=0)
    ctrl.select_preset("No correlation")
    points = ctrl.points
    assert len(points) == 20
    assert [p.x for p in points] == [float(i) for i in range(1, 21)]
    assert ctrl.show_target_control

    strong = 0
    for _ in range(200):
        ctrl.request_regenerate()
        if abs(ctrl.r) > 0.7:
            strong += 1
    assert strong <= 2

def test_anscombe_quartet_shares_correlation():
    ctrl = InteractionController()
    readings = {}
    for which, preset in ANSCOMBE_PRESETS.items():
        ctrl.select_preset(preset)
        assert len(ctrl.points) == 11
        readings[which] = ctrl.summary
    values = [s.r for s in readings.values()]
    assert max(values) - min(values) < 0.01
    assert all(s.explanation == "r = 0.82 => strong positive correlation"
               for s in readings.values())

def test_drag_outlier_isolated_to_one_dataset():
    baselines = {k: compute_correlation(get_reference_dataset(k)) for k in REFERENCE_KEYS}
    ctrl = InteractionController(preset=Preset.ANSCOMBE_A)
    assert ctrl.r == pytest.approx(0.816, abs=0.005)

    assert ctrl.drag_point("A-7", 100, 100)
    assert abs(ctrl.r - baselines["A"]) > 0.1

    for which in "BCD":
        assert compute_correlation(get_reference_dataset(which)) == baselines[which]
        other = InteractionController(preset=ANSCOMBE_PRESETS[which])
        assert other.r == baselines[which]
    assert compute_correlation(get_reference_dataset("A")) == baselines["A"]

def test_regenerate_reference_is_bit_identical():
    ctrl = InteractionController(preset="Anscombe B")
    ctrl.request_regenerate()
    first = [(p.x, p.y) for p in ctrl.points]
    ctrl.request_regenerate()
    second = [(p.x, p.y) for p in ctrl.points]
    assert first == second

def test_slider_sweep_orders_correlation():
    """Higher targets give tighter positive clouds on average."""
    ctrl = InteractionController(random_state=99)
    means = []
    for target in (0.0, 0.25, 0.5, 0.75, 1.0):
        ctrl.set_correlation_target(target)
        rs = []
        for _ in range(50):
            ctrl.request_regenerate()
            rs.append(ctrl.r)
        means.append(np.mean(rs))
    assert means == sorted(means)
    assert means[-1] > 0.95

def test_negative_preset_flips_direction():
    ctrl = InteractionController(preset="Negative linear", correlation_target=1.0,
                                 random_state=4)
    assert ctrl.summary.direction == "negative"
    assert ctrl.summary.strength == "strong"
    ctrl.select_preset("Positive linear")
    assert ctrl.summary.direction == "positive"

def test_hidden_slider_has_no_effect_then_applies():
    ctrl = InteractionController(preset="Anscombe D", correlation_target=0.5)
    ctrl.set_correlation_target(1.0)
    assert ctrl.points == get_reference_dataset("D")
    ctrl.select_preset("Positive linear")
    assert ctrl.correlation_target == 0.5
