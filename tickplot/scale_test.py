#! /usr/bin/env python3

import logging

import numpy as np

import pytest

from . import labeller
from . import scale


def test_linear_ticks():
    l = scale.Linear()

    ranges = [
        (0.01, 4.99),
        (-0.01, 5.01),
        (0.01, 5.01),
        (0, 1),
        (-1, 1),
        (0, 3.14159265),
        (-98, 18),
        (1, 999),
    ]

    for a, b in ranges:
        for n in range(2, 10):
            lim, ticks, labels = l.ticks(a, b, n)
            assert len(ticks) >= 2
            assert len(labels) == len(ticks)
            assert lim[0] <= a < b <= lim[1]
            assert lim[0] == ticks[0] and lim[1] == ticks[-1]
            d = ticks[1] - ticks[0]
            assert d > 0
            for i in range(1, len(ticks)):
                assert ticks[i] - ticks[i-1] == pytest.approx(d)

def test_reference_ticks():
    l = scale.Linear()
    lim, ticks, labels = l.ticks(-98, 18, 2)
    assert lim == (-100, 20)
    assert ticks == [-100, -40, 20]
    assert labels == ["-100", "-40", "20"]

    lim, ticks, labels = l.ticks(-25, 200, 3)
    assert lim == (-50, 200)
    assert labels == ["-50", "0", "50", "100", "150", "200"]

def test_ticks_inside():
    l = scale.Linear()
    rng = np.random.RandomState(2)
    n = 50
    aa = rng.uniform(0, 1, size=n)
    bb = aa + 10**rng.uniform(-3, 2, size=n)
    for a, b in zip(aa, bb):
        lim, ticks, labels = l.ticks_inside(a, b, 5)
        assert lim == (a, b)
        assert len(labels) == len(ticks)
        d = b - a
        for x in ticks:
            assert a - 1e-6*d <= x <= b + 1e-6*d

def test_tight_labeller():
    l = scale.Linear(labeller=labeller.Labeller(loose=False))
    for a, b in [(0.01, 4.99), (-98, 18), (3, 17)]:
        lim, ticks, _ = l.ticks(a, b, 4)
        assert lim[0] <= min(a, ticks[0])
        assert lim[1] >= max(b, ticks[-1])

def test_extreme_ranges(caplog):
    l = scale.Linear()
    with caplog.at_level(logging.WARNING, logger="tickplot.scale"):
        for a, b in [(0, 1e200), (-1e155, 1e155), (0, 1e-200)]:
            lim, ticks, labels = l.ticks(a, b, 5)
            assert lim[0] <= a < b <= lim[1]
            assert len(ticks) >= 2
            assert len(labels) == len(ticks)
    assert "raw axis range" not in caplog.text

def test_fallback(caplog):
    l = scale.Linear()
    with caplog.at_level(logging.WARNING, logger="tickplot.scale"):
        lim, ticks, labels = l.ticks(-1.79e308, 1.79e308, 5)
    assert lim == (-1.79e308, 1.79e308)
    assert ticks == [-1.79e308, 1.79e308]
    assert labels == ["-1.79e+308", "1.79e+308"]
    assert "raw axis range" in caplog.text

def test_labels():
    l = scale.Linear()
    assert l._labels([0, 0.5, 1]) == ["0.0", "0.5", "1.0"]
    assert l._labels([0.25, 0.5]) == ["0.25", "0.50"]
    assert l._labels([-0.0, 1]) == ["0", "1"]
    assert l._labels([0.1 * 3]) == ["0.3"]
    assert l._labels([]) == []

    l = scale.Linear(pad_labels=True)
    assert l._labels([-100, 0, 100]) == ["-100", "   0", " 100"]
