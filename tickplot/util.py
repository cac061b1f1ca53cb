# util.py - auxiliary functions for TickPlot
# Copyright (C) 2014 Jochen Voss <voss@seehuhn.de>
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

import re

import numpy as np

# inches per unit
UNITS = {
    'in': 1,
    'cm': 1 / 2.54,
    'mm': 1 / 25.4,
    'bp': 1 / 72,
    'pt': 1 / 72.27,
}

_DIM = re.compile(r'''^\s*
    ([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)   # value
    \s*([a-z]*|%)\s*$                              # unit
''', re.X)

_BOOL = {
    'true': True, 'yes': True, 'on': True, '1': True,
    'false': False, 'no': False, 'off': False, '0': False,
}


def convert_dim(dim, res, parent_length=None):
    """Convert dimensions to device coordinates.

    Args:
        dim: The dimension, either as a number (device units) or a
            string like "1cm", "3.5pt" or "12px".
        res: The device resolution in units/inch.
        parent_length: The length of the surrounding element in device
            units.  If this is set, relative lengths (e.g. "50%") are
            allowed.

    Returns:
        How many device units correspond to `dim`.

    """
    if isinstance(dim, (int, float)):
        return float(dim)
    m = _DIM.match(str(dim))
    if m is None:
        raise ValueError(f"invalid dimension {dim!r}")
    value, unit = float(m.group(1)), m.group(2)

    if unit in ('', 'px'):
        return value
    if unit == '%':
        if parent_length is None:
            raise ValueError(f"relative length {dim!r} in invalid context")
        return value * parent_length / 100
    if unit not in UNITS:
        raise ValueError(f"unknown unit in dimension {dim!r}")
    return value * UNITS[unit] * res

def box_sides(padding, res):
    """Convert a padding value to device units for the four sides of a
    box, in the order top, right, bottom, left.

    As in CSS, a single value applies to all sides, and a pair gives
    the vertical and the horizontal padding.

    """
    if isinstance(padding, (str, int, float)):
        padding = [padding]
    sides = [convert_dim(p, res) for p in padding]
    if len(sides) in (1, 2):
        sides = sides * (4 // len(sides))
    if len(sides) != 4:
        raise ValueError(f"invalid padding {padding!r}")
    return sides

def parse_dash_pattern(dash, res):
    if not dash or dash == "none":
        return []
    return [convert_dim(l, res) for l in dash.split(",")]

def parse_bool(val):
    if not isinstance(val, str):
        return bool(val)
    try:
        return _BOOL[val.strip().lower()]
    except KeyError:
        raise ValueError(f"invalid boolean value {val!r}") from None


def _check_coords(x, y):
    x = np.array(x, dtype=float, ndmin=1)
    if y is None:
        if x.ndim == 1:
            return np.arange(1, len(x) + 1, dtype=float), x
        if x.ndim == 2 and x.shape[1] == 2:
            return x[:, 0], x[:, 1]
        raise ValueError(f"x has wrong shape {x.shape}")

    y = np.array(y, dtype=float, ndmin=1)
    for name, v in [('x', x), ('y', y)]:
        if v.ndim != 1:
            raise ValueError(f"{name} has wrong shape {v.shape}")
    if len(x) != len(y):
        tmpl = "x and y have incompatible length: %d != %d"
        raise ValueError(tmpl % (len(x), len(y)))
    return x, y

def _check_coord_pair(x, y):
    if y is None:
        x, y = x
    return float(x), float(y)

def _finite_values(arg):
    if isinstance(arg, str):
        raise TypeError(f"invalid data range {arg!r}")
    try:
        values = np.asarray(arg, dtype=float).ravel()
    except (TypeError, ValueError):
        # ragged nested sequences need to be taken apart
        try:
            parts = [_finite_values(a) for a in arg]
        except TypeError:
            raise TypeError(f"invalid data range {arg!r}") from None
        values = np.concatenate(parts) if parts else np.empty(0)
    return values[np.isfinite(values)]

def data_range(*args):
    """Get the smallest interval containing all finite values in `args`.

    The arguments can be numbers, arrays or (nested) sequences of
    numbers; ``None`` arguments are ignored.

    """
    lower = np.inf
    upper = -np.inf
    for arg in args:
        if arg is None:
            continue
        values = _finite_values(arg)
        if values.size:
            lower = min(lower, values.min())
            upper = max(upper, values.max())
    if lower > upper:
        raise ValueError("no data range specified")
    return float(lower), float(upper)
