# labeller.py - search for "nice" axis ranges and tick steps
# Copyright (C) 2014-2019 Jochen Voss <voss@seehuhn.de>
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.

"""The Labeller class
------------------

This module implements the extended Wilkinson algorithm for choosing
axis ranges and tick steps, as described in

    J. Talbot, S. Lin and P. Hanrahan: An Extension of Wilkinson's
    Algorithm for Positioning Tick Labels on Axes.  IEEE Transactions
    on Visualization and Computer Graphics, 16(6), 2010.

Candidate labellings are scored by four criteria (simplicity,
coverage, density and legibility) and the search uses upper bounds on
the scores to abandon branches early.

"""

import collections
import math

from . import errors


Label = collections.namedtuple('Label', ['min', 'max', 'step', 'score'])
Label.__doc__ = """An axis labelling found by :py:meth:`Labeller.search`.

The ticks are located at ``min``, ``min + step``, ..., ``max``.  The
field ``score`` gives the quality score of the labelling; larger
values are better.

"""

# Start value for the best score.  All candidates which can win score
# higher than this.
_SENTINEL_SCORE = -2.0

# Data ranges with half-width outside this interval are rescaled
# before the search.
_SAFE_MIN = 1e-100
_SAFE_MAX = 1e100


class Labeller:

    """Search engine for human-friendly axis labellings.

    Args:
        preferred_multipliers (sequence of numbers): the "round" numbers
            used to build tick steps, most preferred first.  The order
            of this list matters.
        base (number): the base used to scale the multipliers to the
            magnitude of the data.
        criterion_weights (sequence of 4 numbers): weights for the
            simplicity, coverage, density and legibility scores, in
            this order.
        tolerance (number): tolerance used when checking whether the
            origin is one of the tick positions.
        loose (bool): if true, only labellings which cover the complete
            data range are considered.
        max_iterations (int): upper limit for the number of iterations
            of each of the unbounded search loops.

    Apart from ``loose``, the configuration must not be changed after
    the object has been created.

    """

    def __init__(self, preferred_multipliers=(1, 5, 2, 2.5, 4, 3), base=10,
                 criterion_weights=(0.25, 0.2, 0.5, 0.05), tolerance=1e-10,
                 loose=False, *, max_iterations=10000):
        q = tuple(float(qi) for qi in preferred_multipliers)
        if not q:
            raise ValueError("need at least one preferred multiplier")
        if not all(qi > 0 for qi in q):
            raise ValueError(f"invalid preferred multipliers {q!r}")
        base = float(base)
        if not base > 1:
            raise ValueError(f"invalid base {base!r}, must be > 1")
        w = tuple(float(wi) for wi in criterion_weights)
        if len(w) != 4:
            tmpl = "need 4 criterion weights, got %d"
            raise ValueError(tmpl % len(w))
        tolerance = float(tolerance)
        if not tolerance > 0:
            raise ValueError(f"invalid tolerance {tolerance!r}")
        if max_iterations < 1:
            raise ValueError(f"invalid iteration limit {max_iterations!r}")

        self.preferred_multipliers = q
        self.base = base
        self.criterion_weights = w
        self.tolerance = tolerance
        self.max_iterations = int(max_iterations)
        self.loose = bool(loose)

    def __repr__(self):
        return (f'<Labeller q={list(self.preferred_multipliers)} '
                f'base={self.base:g} loose={self.loose}>')

    def search(self, data_min, data_max, target_tick_count, *, prune=True):
        """Find the best labelling for the data range [data_min, data_max].

        Args:
            data_min (number): the smallest data value to show.
            data_max (number): the largest data value to show.
            target_tick_count (int): the desired number of ticks,
                at least 2.
            prune (bool): whether to use score bounds to cut the
                search short.  Switching this off does not change
                the result, it only makes the search slower.

        Returns:
            The :py:class:`Label` with the highest score.  If both
            ends of the data range coincide, the range is widened to
            one unit of the order of magnitude of the value on each
            side.  Very large and very small ranges are searched after
            rescaling by a power of the base, so the label values of
            such ranges are exact only up to floating point rounding.

        Raises:
            ValueError: the arguments are not a valid data range or
                tick count.
            errors.NoLabelFound: no labelling could be found, for
                example because the best label for a range close to
                the largest float overflows, or its step underflows.

        """
        dmin, dmax, m = self._check_args(data_min, data_max,
                                         target_tick_count)
        e = self._exponent(dmin, dmax)
        try:
            smin = self._rescale(dmin, -e)
            smax = self._rescale(dmax, -e)
            if smin == smax:
                smin, smax = self._widen(smin)

            c = 0.1 * (smax - smin)
            if not (0 < c * c < math.inf):
                msg = f"cannot label data range [{dmin!r}, {dmax!r}]"
                raise errors.NoLabelFound(msg)

            best = self._search(smin, smax, m, prune)
            if best is not None and e != 0:
                lmin = self._rescale(best.min, e)
                lmax = self._rescale(best.max, e)
                if self.loose:
                    # undo rounding errors from the rescaling
                    lmin = min(lmin, dmin)
                    lmax = max(lmax, dmax)
                best = Label(lmin, lmax, self._rescale(best.step, e),
                             best.score)
        except OverflowError as exc:
            msg = f"cannot label data range [{dmin!r}, {dmax!r}]"
            raise errors.NoLabelFound(msg) from exc

        if best is None:
            msg = f"no labelling found for [{dmin!r}, {dmax!r}]"
            raise errors.NoLabelFound(msg)
        if not (math.isfinite(best.min) and math.isfinite(best.max)
                and 0 < best.step < math.inf):
            msg = f"labelling for [{dmin!r}, {dmax!r}] is out of range"
            raise errors.NoLabelFound(msg)
        return best

    def _search(self, dmin, dmax, m, prune):
        best = None
        best_score = _SENTINEL_SCORE
        limit = self.max_iterations
        for j in range(1, limit + 1):
            for i, q in enumerate(self.preferred_multipliers, start=1):
                sm = self._simplicity_max(i, j)
                # larger values of j only make things worse
                if prune and self._w(sm, 1, 1, 1) < best_score:
                    return best

                for k in range(2, limit + 2):
                    dm = self._density_max(k, m)
                    if prune and self._w(sm, 1, dm, 1) < best_score:
                        break

                    delta = (dmax - dmin) / (k + 1) / (j * q)
                    z0 = math.ceil(self._log_b(delta))
                    for z in range(z0, z0 + limit):
                        try:
                            step = j * q * self.base**z
                        except OverflowError:
                            break
                        if step == 0:
                            continue
                        if step == math.inf:
                            break

                        cm = self._coverage_max(dmin, dmax, step * (k - 1))
                        if prune and self._w(sm, cm, dm, 1) < best_score:
                            break

                        min_start = math.floor(dmax / step - (k - 1) * j)
                        max_start = math.ceil(dmin / step) * j
                        for start in range(min_start, max_start + 1):
                            lmin = start * step / j
                            lmax = lmin + step * (k - 1)
                            c = self._coverage(dmin, dmax, lmin, lmax)
                            s = self._simplicity(i, j, lmin, lmax, step)
                            d = self._density(k, m, dmin, dmax, lmin, lmax)
                            l = self._legibility(lmin, lmax, step)
                            score = self._w(s, c, d, l)

                            if score > best_score and (
                                    not self.loose
                                    or (lmin <= dmin and lmax >= dmax)):
                                best = Label(lmin, lmax, step, score)
                                best_score = score
        return best

    @staticmethod
    def _check_args(data_min, data_max, target_tick_count):
        dmin = float(data_min)
        dmax = float(data_max)
        if not (math.isfinite(dmin) and math.isfinite(dmax)):
            raise ValueError(f"invalid data range [{dmin!r}, {dmax!r}]")
        if dmin > dmax:
            raise ValueError(f"invalid data range: {dmin!r} > {dmax!r}")
        m = int(target_tick_count)
        if m != target_tick_count or m < 2:
            tmpl = "invalid tick count %r, need an integer >= 2"
            raise ValueError(tmpl % (target_tick_count,))
        return dmin, dmax, m

    def _exponent(self, dmin, dmax):
        """Find the power of the base used to bring the data range to
        a safe magnitude.

        Ranges much larger or smaller than 1 are divided by
        ``base**e`` before searching, so that the squared ranges used
        in the coverage score neither overflow nor underflow.  For
        ranges of moderate size, 0 is returned.

        """
        half = dmax / 2 - dmin / 2
        if half == 0:
            # the range will be widened by about |x| on each side
            half = abs(dmin)
        if half == 0 or _SAFE_MIN < half < _SAFE_MAX:
            return 0
        return math.floor(self._log_b(half))

    def _rescale(self, x, e):
        # two factors, so that base**e can be out of range for large |e|
        e1 = e // 2
        return x * self.base**e1 * self.base**(e - e1)

    def _widen(self, x):
        # Only called after rescaling, so that |x| is of moderate size
        # and the bounds cannot overflow.
        if x == 0:
            return -1.0, 1.0
        h = self.base**math.floor(self._log_b(abs(x)))
        return x - h, x + h

    def _w(self, s, c, d, l):
        w = self.criterion_weights
        return w[0] * s + w[1] * c + w[2] * d + w[3] * l

    def _log_b(self, a):
        return math.log(a) / math.log(self.base)

    @staticmethod
    def _floored_mod(a, n):
        return a - n * math.floor(a / n)

    def _v(self, lmin, lmax, step):
        """Check whether the origin is one of the ticks."""
        if (self._floored_mod(lmin, step) < self.tolerance
                and lmin <= 0 and lmax >= 0):
            return 1.0
        return 0.0

    def _simplicity(self, i, j, lmin, lmax, step):
        n = len(self.preferred_multipliers)
        v = self._v(lmin, lmax, step)
        if n > 1:
            return 1.0 - i / (n - 1) - j + v
        return 1.0 - j + v

    def _simplicity_max(self, i, j):
        n = len(self.preferred_multipliers)
        if n > 1:
            return 1.0 - i / (n - 1) - j + 1.0
        return 1.0 - j + 1.0

    @staticmethod
    def _coverage(dmin, dmax, lmin, lmax):
        a = dmax - lmax
        b = dmin - lmin
        c = 0.1 * (dmax - dmin)
        return 1.0 - 0.5 * ((a * a + b * b) / (c * c))

    @staticmethod
    def _coverage_max(dmin, dmax, span):
        data_range = dmax - dmin
        if span > data_range:
            half = (span - data_range) / 2
            r = 0.1 * data_range
            return 1.0 - half * half / (r * r)
        return 1.0

    @staticmethod
    def _density(k, m, dmin, dmax, lmin, lmax):
        r = (k - 1) / (lmax - lmin)
        rt = (m - 1) / (max(lmax, dmax) - min(lmin, dmin))
        return 2.0 - max(r / rt, rt / r)

    @staticmethod
    def _density_max(k, m):
        if k >= m:
            return 2.0 - (k - 1) / (m - 1)
        return 1.0

    @staticmethod
    def _legibility(lmin, lmax, step):
        # TODO(voss): score label overlap and number format
        return 1.0
