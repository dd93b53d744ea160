import logging
import math

import numpy as np
import pytest

from modechoice.model import (
    MaximumSelector,
    MultinomialLogitSelector,
    Nest,
    NestedTourCandidate,
    RandomSelector,
    TripCandidate,
)
from modechoice.model.selectors import MultinomialLogitSelectorFactory


class FixedDraw:
    """A random source that always draws the same value."""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def logit(*utilities, **kwargs):
    selector = MultinomialLogitSelector(**kwargs)
    for n, u in enumerate(utilities):
        selector.add_candidate(TripCandidate(u, f"mode{n}"))
    return selector


@pytest.mark.parametrize("draw", [0.0, 0.5, 0.999999])
def test_empty(draw):
    assert MultinomialLogitSelector().select(FixedDraw(draw)) is None
    assert MaximumSelector().select(FixedDraw(draw)) is None
    assert RandomSelector().select(FixedDraw(draw)) is None


@pytest.mark.parametrize("draw", [0.0, 0.5, 0.999999])
def test_single_candidate(draw):
    selector = logit(-3.5)
    assert selector.select(FixedDraw(draw)).mode == "mode0"


def test_cumulative_density():
    # probabilities are 1/4 and 3/4
    selector = logit(0.0, math.log(3.0))
    assert selector.select(FixedDraw(0.2)).mode == "mode0"
    assert selector.select(FixedDraw(0.3)).mode == "mode1"
    assert selector.select(FixedDraw(0.0)).mode == "mode0"
    assert selector.select(FixedDraw(0.999)).mode == "mode1"


def test_insertion_order_kept():
    selector = logit(1.0, 1.0, 1.0)
    selector.add_candidate(selector.candidates[0])
    assert len(selector) == 4
    assert [c.mode for c in selector.candidates] == ["mode0", "mode1", "mode2", "mode0"]


def test_choice_frequencies():
    selector = logit(0.0, math.log(2.0), math.log(7.0))
    rng = np.random.default_rng(42)
    n = 20000
    counts = {"mode0": 0, "mode1": 0, "mode2": 0}
    for _ in range(n):
        counts[selector.select(rng).mode] += 1
    assert counts["mode0"] / n == pytest.approx(0.1, abs=0.01)
    assert counts["mode1"] / n == pytest.approx(0.2, abs=0.01)
    assert counts["mode2"] / n == pytest.approx(0.7, abs=0.01)


def test_clamping(caplog):
    selector = logit(1.0e6, 700.0, 5000.0)
    with caplog.at_level(logging.WARNING, logger="modechoice.selectors"):
        # all three saturate at the maximum, so the choice is uniform
        assert selector.select(FixedDraw(0.1)).mode == "mode0"
        assert selector.select(FixedDraw(0.5)).mode == "mode1"
        assert selector.select(FixedDraw(0.9)).mode == "mode2"
    warnings = [r for r in caplog.records if "larger than" in r.getMessage()]
    assert len(warnings) == 6


def test_clamping_to_custom_maximum():
    selector = logit(50.0, 10.0, maximum_utility=10.0)
    assert selector.select(FixedDraw(0.49)).mode == "mode0"
    assert selector.select(FixedDraw(0.51)).mode == "mode1"


def test_filtering():
    selector = logit(-1000.0, 0.0, -700.0)
    for draw in [0.0, 0.3, 0.7, 0.999999]:
        assert selector.select(FixedDraw(draw)).mode == "mode1"


def test_filtering_custom_minimum():
    selector = logit(-20.0, -5.0, minimum_utility=10.0)
    assert selector.select(FixedDraw(0.0)).mode == "mode1"


def test_all_filtered(caplog):
    selector = logit(-800.0, -900.0)
    with caplog.at_level(logging.WARNING, logger="modechoice.selectors"):
        assert selector.select(FixedDraw(0.0)) is None
    assert any(
        "at or below -700.000000" in r.getMessage() for r in caplog.records
    )


def test_factory_makes_fresh_selectors():
    factory = MultinomialLogitSelectorFactory(maximum_utility=100.0, minimum_utility=50.0)
    first = factory.create_selector()
    first.add_candidate(TripCandidate(1.0, "car"))
    second = factory.create_selector()
    assert len(second) == 0
    assert second.maximum_utility == 100.0
    assert second.minimum_utility == 50.0


def test_nested_candidates_are_selected_flat():
    car_nest = Nest("car")
    selector = MultinomialLogitSelector()
    selector.add_candidate(NestedTourCandidate(-1.0, [TripCandidate(-1.0, "car")], car_nest))
    selected = selector.select(FixedDraw(0.5))
    assert selected.nest is car_nest
    assert selected.modes == ["car"]


def test_maximum():
    selector = MaximumSelector()
    for n, u in enumerate([1.0, 3.0, -2.0, 3.0]):
        selector.add_candidate(TripCandidate(u, f"mode{n}"))
    assert selector.select(FixedDraw(0.0)).mode == "mode1"
    assert selector.select(None).mode == "mode1"


@pytest.mark.parametrize("draw, expected", [(0.0, "mode0"), (0.5, "mode1"), (0.99, "mode2")])
def test_random(draw, expected):
    selector = RandomSelector()
    for n, u in enumerate([100.0, -100.0, 0.0]):
        selector.add_candidate(TripCandidate(u, f"mode{n}"))
    assert selector.select(FixedDraw(draw)).mode == expected


def test_many_saturated_candidates():
    # the sum of exp(700) over this many candidates exceeds the float range
    selector = logit(*[700.0] * 20000)
    assert selector.select(FixedDraw(0.0)).mode == "mode0"
    assert selector.select(FixedDraw(0.10001)).mode == "mode2000"
    assert selector.select(FixedDraw(0.50001)).mode == "mode10000"
    assert selector.select(FixedDraw(0.90001)).mode == "mode18000"
