import math

import numpy as np
import pytest

from terrain_frames.errors import InvalidArgument
from terrain_frames.math.transitions import easing_weights, generate_transition, progress
from terrain_frames.models.transition import Easing, TransitionSpec


def test_one_way_linear_sweep():
    assert generate_transition(0, 100, 5, one_way=True, easing=Easing.LINEAR) == [0.0, 25.0, 50.0, 75.0, 100.0]


def test_one_way_cosine_midpoint_is_unchanged():
    values = generate_transition(0, 100, 3, one_way=True, easing=Easing.COSINE)
    assert values == pytest.approx([0.0, 50.0, 100.0])


def test_one_way_cosine_eases_at_both_ends():
    values = generate_transition(0.0, 1.0, 21, one_way=True, easing="cosine")
    deltas = np.diff(values)
    assert deltas[0] < deltas[10]
    assert deltas[-1] < deltas[10]
    assert math.isclose(deltas[0], deltas[-1], rel_tol=1e-9)
    assert np.all(deltas > 0)


def test_round_trip_linear_is_triangular():
    assert generate_transition(0, 100, 5, one_way=False, easing=Easing.LINEAR) == [0.0, 50.0, 100.0, 50.0, 0.0]


def test_round_trip_cosine_returns_to_start():
    values = generate_transition(0, 100, 5, one_way=False, easing=Easing.COSINE)
    assert values == pytest.approx([0.0, 50.0, 100.0, 50.0, 0.0], abs=1e-9)


@pytest.mark.parametrize("easing", list(Easing))
@pytest.mark.parametrize("steps", [3, 9, 31, 181])
def test_round_trip_peaks_in_the_middle(easing, steps):
    values = generate_transition(-20.0, 45.0, steps, one_way=False, easing=easing)
    assert len(values) == steps
    assert values[0] == -20.0
    assert int(np.argmin(np.abs(np.asarray(values) - 45.0))) == steps // 2


@pytest.mark.parametrize("easing", list(Easing))
@pytest.mark.parametrize("one_way", [True, False])
def test_constant_transition(easing, one_way):
    assert generate_transition(5, 5, 10, one_way=one_way, easing=easing) == [5.0] * 10


@pytest.mark.parametrize("one_way", [True, False])
def test_single_step_yields_start(one_way):
    assert generate_transition(3.0, 9.0, 1, one_way=one_way) == [3.0]


def test_descending_transition():
    assert generate_transition(10, 0, 3, one_way=True, easing="lin") == [10.0, 5.0, 0.0]


@pytest.mark.parametrize("steps", [0, -4, 2.5, True])
def test_invalid_steps_are_rejected(steps):
    with pytest.raises(InvalidArgument):
        generate_transition(0, 1, steps)


def test_non_finite_endpoints_are_rejected():
    with pytest.raises(InvalidArgument):
        generate_transition(0, math.inf, 5)
    with pytest.raises(InvalidArgument):
        generate_transition(math.nan, 1, 5)


def test_overflowing_range_is_rejected():
    with pytest.raises(InvalidArgument):
        generate_transition(1e308, -1e308, 3, one_way=True, easing="linear")


def test_unknown_easing_is_rejected():
    with pytest.raises(InvalidArgument):
        generate_transition(0, 1, 5, easing="quadratic")


def test_easing_aliases():
    assert Easing.parse("cos") is Easing.COSINE
    assert Easing.parse("LIN") is Easing.LINEAR
    assert Easing.parse(Easing.LINEAR) is Easing.LINEAR


def test_progress_and_weights():
    p = progress(5)
    assert p.tolist() == [0.0, 0.25, 0.5, 0.75, 1.0]
    weights = easing_weights(p, Easing.COSINE, one_way=True)
    assert weights[0] == 0.0 and weights[-1] == 1.0
    assert weights[2] == pytest.approx(0.5)


def test_transition_spec_values():
    transition = TransitionSpec(start=0.0, end=90.0, steps=4, one_way=True, easing=Easing.LINEAR)
    assert transition.values() == pytest.approx([0.0, 30.0, 60.0, 90.0])
