#! /usr/bin/env python3

import math

import numpy as np

import pytest

from . import errors
from . import labeller


def test_reference_labels():
    l = labeller.Labeller(loose=True)

    label = l.search(-98, 18, 2)
    assert label.max == 20
    assert label.min == -100
    assert label.step == 60

    label = l.search(-25, 200, 3)
    assert label.max == 200
    assert label.min == -50
    assert label.step == 50

def test_label_properties():
    rng = np.random.RandomState(1)
    n = 100
    aa = rng.uniform(-1000, 1000, size=n)
    bb = aa + 10**rng.uniform(-3, 3, size=n)
    mm = rng.randint(2, 11, size=n)
    for loose in [False, True]:
        l = labeller.Labeller(loose=loose)
        for a, b, m in zip(aa, bb, mm):
            label = l.search(a, b, m)
            assert label.step > 0
            assert label.min <= label.max
            k = round((label.max - label.min) / label.step) + 1
            assert k >= 2
            assert label.min + label.step * (k - 1) == label.max
            if loose:
                assert label.min <= a and label.max >= b, \
                    "%r does not cover [%f, %f]" % (label, a, b)

def test_deterministic():
    l = labeller.Labeller()
    config = (l.preferred_multipliers, l.base, l.criterion_weights,
              l.tolerance, l.loose)
    first = l.search(0.123, 1.234, 5)
    second = l.search(0.123, 1.234, 5)
    assert first == second
    assert labeller.Labeller().search(0.123, 1.234, 5) == first
    assert (l.preferred_multipliers, l.base, l.criterion_weights,
            l.tolerance, l.loose) == config

def test_pruning_does_not_change_result():
    cases = [
        (-98, 18, 2),
        (-25, 200, 3),
        (0.01, 4.99, 5),
        (0, 3.14159265, 4),
        (1, 999, 5),
        (-0.3, 4.5, 3),
        (17.3, 17.8, 4),
    ]
    for loose in [False, True]:
        l = labeller.Labeller(loose=loose, max_iterations=6)
        for a, b, m in cases:
            pruned = l.search(a, b, m)
            exhaustive = l.search(a, b, m, prune=False)
            assert pruned == exhaustive, f"{a}, {b}, {m}, loose={loose}"

def test_zero_width_range():
    l = labeller.Labeller(loose=True)
    for x in [0, 5, -5, 0.003, 1234.5]:
        label = l.search(x, x, 3)
        assert label.step > 0
        assert label.min <= x <= label.max
        assert label.min < label.max

def test_invalid_arguments():
    l = labeller.Labeller()
    with pytest.raises(ValueError):
        l.search(1, 0, 3)
    with pytest.raises(ValueError):
        l.search(0, math.nan, 3)
    with pytest.raises(ValueError):
        l.search(-math.inf, 0, 3)
    with pytest.raises(ValueError):
        l.search(0, 1, 1)
    with pytest.raises(ValueError):
        l.search(0, 1, 2.5)

def test_unlabelled_range():
    l = labeller.Labeller(loose=True)
    # any covering label would end beyond the largest float
    with pytest.raises(errors.NoLabelFound):
        l.search(-1.79e308, 1.79e308, 5)

def test_large_and_small_ranges():
    l = labeller.Labeller(loose=True)
    for e in [100, 150, 156, 200, 300]:
        label = l.search(0, 3.7 * 10.0**e, 5)
        assert label.min == 0
        assert label.max == pytest.approx(4 * 10.0**e)
        assert label.step == pytest.approx(10.0**e)
    for e in [-100, -150, -200, -300]:
        label = l.search(0, 3.7 * 10.0**e, 5)
        assert label.min == 0
        assert label.max == pytest.approx(4 * 10.0**e)

    label = l.search(-1e155, 1e155, 5)
    assert label.min == pytest.approx(-1e155)
    assert label.max == pytest.approx(1e155)

    label = labeller.Labeller().search(-1e308, 1e308, 5)
    assert label.min == pytest.approx(-1e308)
    assert label.max == pytest.approx(1e308)

def _check_label_or_error(l, a, b, m):
    try:
        label = l.search(a, b, m)
    except errors.LabelSearchError:
        return
    assert math.isfinite(label.min) and math.isfinite(label.max)
    assert 0 < label.step < math.inf
    assert label.min <= label.max
    if l.loose:
        assert label.min <= a and label.max >= b, \
            "%r does not cover [%g, %g]" % (label, a, b)

def test_extreme_magnitudes():
    rng = np.random.RandomState(3)
    for loose in [False, True]:
        l = labeller.Labeller(loose=loose)
        for e in range(-300, 301, 25):
            width = 10.0**e * rng.uniform(1, 10)
            for a in [0, -width, 10**rng.uniform(-3, 3) * width]:
                _check_label_or_error(l, a, a + width, rng.randint(2, 8))
        for a, b in [(-1.7e308, 1.7e308), (-1.79e308, 0), (0, 5e-324),
                     (1e300, 1.0000001e300), (-1e-300, 1e-300)]:
            _check_label_or_error(l, a, b, 5)

def test_extreme_zero_width():
    for loose in [False, True]:
        l = labeller.Labeller(loose=loose)
        for x in [1.7e308, -1.7e308, 9e307, 5e307, 1e-300, -5e-324]:
            _check_label_or_error(l, x, x, 3)
        label = l.search(5e307, 5e307, 3)
        assert label.step > 0
        label = l.search(1e-300, 1e-300, 3)
        assert label.min <= 1e-300 <= label.max or not loose

def test_invalid_configuration():
    with pytest.raises(ValueError):
        labeller.Labeller(preferred_multipliers=[])
    with pytest.raises(ValueError):
        labeller.Labeller(preferred_multipliers=[1, -2])
    with pytest.raises(ValueError):
        labeller.Labeller(base=1)
    with pytest.raises(ValueError):
        labeller.Labeller(criterion_weights=[1, 1, 1])
    with pytest.raises(ValueError):
        labeller.Labeller(tolerance=0)
    with pytest.raises(ValueError):
        labeller.Labeller(max_iterations=0)

def test_simplicity():
    l = labeller.Labeller()
    # earlier multipliers are simpler
    for i in range(1, len(l.preferred_multipliers)):
        assert l._simplicity_max(i, 1) > l._simplicity_max(i+1, 1)
    for j in range(1, 10):
        assert l._simplicity_max(1, j) >= l._simplicity_max(1, j+1)

    # bonus for a tick at the origin
    assert l._v(-10, 10, 5) == 1
    assert l._v(-12, 8, 5) == 0
    assert l._v(10, 20, 5) == 0
    assert (l._simplicity(1, 1, -10, 10, 5)
            == pytest.approx(l._simplicity(1, 1, 10, 20, 5) + 1))
    assert l._simplicity(1, 1, -10, 10, 5) == l._simplicity_max(1, 1)

    single = labeller.Labeller(preferred_multipliers=[1])
    assert single._simplicity_max(1, 1) == 1
    assert single._simplicity(1, 2, 1, 3, 1) == -1

def test_floored_mod():
    mod = labeller.Labeller._floored_mod
    assert mod(7, 5) == 2
    assert mod(-7, 5) == 3
    assert mod(-10, 5) == 0

def test_coverage():
    l = labeller.Labeller()
    assert l._coverage(0, 10, 0, 10) == 1
    assert l._coverage(0, 10, -1, 11) == pytest.approx(0)
    assert l._coverage_max(0, 10, 5) == 1
    assert l._coverage_max(0, 10, 12) == pytest.approx(0)
    for lmin in np.linspace(-2, 0, 11):
        assert l._coverage(0, 10, lmin, lmin+12) <= l._coverage_max(0, 10, 12)

def test_density():
    l = labeller.Labeller()
    assert l._density(3, 3, 0, 10, 0, 10) == 1
    assert l._density(5, 3, 0, 10, 0, 10) == pytest.approx(0)
    assert l._density_max(2, 3) == 1
    assert l._density_max(3, 3) == 1
    assert l._density_max(5, 3) == pytest.approx(0)
    for k in range(3, 10):
        assert l._density(k, 3, 0, 10, -1, 11) <= l._density_max(k, 3) + 1e-12

def test_legibility():
    l = labeller.Labeller()
    assert l._legibility(0, 1, 0.1) == 1
    assert l._legibility(-1e6, 1e6, 1e5) == 1

def test_other_base():
    l = labeller.Labeller(preferred_multipliers=[1], base=2, loose=True)
    label = l.search(0, 100, 5)
    assert label.min <= 0 and label.max >= 100
    e = math.log2(label.step)
    assert e == round(e)

def test_multiplier_order():
    # the same ticks score higher if their multiplier is preferred
    l1 = labeller.Labeller(preferred_multipliers=[1, 5, 2, 2.5, 4, 3])
    l2 = labeller.Labeller(preferred_multipliers=[3, 4, 2.5, 2, 5, 1])
    label1 = l1.search(0, 90, 4)
    label2 = l2.search(0, 90, 4)
    assert label1.min == label2.min == 0
    assert label1.step == label2.step == 30
    assert label2.score > label1.score
