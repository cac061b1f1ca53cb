#! /usr/bin/env python3
# scale.py - code to generate axis ticks and labels
# Copyright (C) 2019 Jochen Voss <voss@seehuhn.de>
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

import logging

from . import errors
from . import labeller as labmod


_FUDGE = 1e-6

_log = logging.getLogger(__name__)


class Linear:

    """Tick positions and tick labels for a linear axis.

    The tick positions are chosen using a :py:class:`labeller.Labeller`,
    which is reused for all axes handled by this object.

    Args:
        loose (bool): whether the axis range must contain the complete
            data range.
        labeller (Labeller, optional): the label search engine to use.
            If this is given, `loose` is ignored.
        pad_labels (bool): whether to right-align the tick labels to a
            common width.

    """

    def __init__(self, *, loose=True, labeller=None, pad_labels=False):
        if labeller is None:
            labeller = labmod.Labeller(loose=loose)
        self.labeller = labeller
        self.pad_labels = pad_labels

    def ticks(self, a, b, tick_count):
        """Get axis limits and ticks covering the interval [a, b].

        Returns:
            A tuple ``(lim, ticks, labels)``, where `lim` is the axis
            range, `ticks` is the list of tick positions and `labels`
            are the corresponding tick labels.

        """
        try:
            label = self.labeller.search(a, b, tick_count)
        except errors.LabelSearchError as e:
            _log.warning("using raw axis range [%g, %g]: %s", a, b, e)
            return self._fallback(a, b)

        ticks = _label_ticks(label)
        lim = (min(label.min, a), max(label.max, b))
        return lim, ticks, self._labels(ticks)

    def ticks_inside(self, a, b, tick_count):
        """Get ticks for an axis with the fixed range [a, b].

        Returns:
            A tuple ``(lim, ticks, labels)`` as for :py:meth:`ticks`,
            where ``lim == (a, b)`` and all ticks lie inside `lim`.

        """
        try:
            label = self.labeller.search(a, b, tick_count)
        except errors.LabelSearchError as e:
            _log.warning("no ticks for axis range [%g, %g]: %s", a, b, e)
            return self._fallback(a, b)

        eps = label.step * _FUDGE
        ticks = [x for x in _label_ticks(label) if a - eps <= x <= b + eps]
        return (a, b), ticks, self._labels(ticks)

    def _fallback(self, a, b):
        ticks = [a, b] if a < b else [a]
        return (a, b), ticks, self._labels(ticks)

    def _labels(self, ticks):
        if not ticks:
            return []
        ll = ["%g" % x for x in ticks]
        if all("e" not in l for l in ll) and any("." in l for l in ll):
            parts = []
            for l in ll:
                s = l.split(".")
                if len(s) < 2:
                    s = (s[0], '0')
                parts.append(s)
            max_digits = max(len(b) for _, b in parts)
            ll = []
            for a, b in parts:
                b = b.ljust(max_digits, '0')
                ll.append(a + '.' + b)
        # "-0" is not a useful label
        ll = ["0" + l[2:] if l.startswith("-0") and float(l) == 0 else l
              for l in ll]
        if self.pad_labels:
            max_len = max(len(l) for l in ll)
            ll = [l.rjust(max_len) for l in ll]
        return ll


def _label_ticks(label):
    n = int(round((label.max - label.min) / label.step))
    return [label.min + i * label.step for i in range(n + 1)]
