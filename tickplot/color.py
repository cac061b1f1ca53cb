# color.py - parse color names and values and provide color palettes
# Copyright (C) 2014-2018 Jochen Voss <voss@seehuhn.de>
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

"""Colors
------

Colors are represented as tuples ``(r, g, b, a)`` of floats in the
range [0, 1].  The function :py:func:`get` converts the color
values used in style parameters into this form.

"""

import re

NAMES = {
    'black': (0, 0, 0),
    'blue': (0, 0, 255),
    'brown': (165, 42, 42),
    'cyan': (0, 255, 255),
    'gray': (128, 128, 128),
    'green': (0, 128, 0),
    'grey': (128, 128, 128),
    'lightgray': (211, 211, 211),
    'lime': (0, 255, 0),
    'magenta': (255, 0, 255),
    'maroon': (128, 0, 0),
    'navy': (0, 0, 128),
    'olive': (128, 128, 0),
    'orange': (255, 165, 0),
    'pink': (255, 192, 203),
    'purple': (128, 0, 128),
    'red': (255, 0, 0),
    'silver': (192, 192, 192),
    'teal': (0, 128, 128),
    'white': (255, 255, 255),
    'yellow': (255, 255, 0),
}

PALETTES = {
    'default': ['#1F77B4', '#FF7F0E', '#2CA02C', '#D62728', '#9467BD',
                '#8C564B', '#E377C2', '#7F7F7F', '#BCBD22', '#17BECF'],
    'dark': ['#1B9E77', '#D95F02', '#7570B3', '#E7298A', '#66A61E',
             '#E6AB02', '#A6761D', '#666666'],
    'gray': ['#000', '#555', '#888', '#AAA'],
}

_HEX_RE = re.compile(r'^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$')
_FN_RE = re.compile(r'^(rgba?)\(([^)]*)\)$')


def get(col):
    """Convert a color value to an RGBA tuple.

    Args:
        col: One of the following: a hex string like ``"#123"``,
            ``"#112233"`` or ``"#11223344"``, a color name like
            ``"red"``, a CSS-style function like ``"rgb(255, 0, 0)"``
            or ``"rgba(255, 0, 0, .5)"``, the string
            ``"transparent"``, or a sequence of three or four numbers
            in the range [0, 1].

    Returns:
        A tuple ``(r, g, b, a)`` of floats in the range [0, 1].

    """
    if not isinstance(col, str):
        try:
            vals = [float(x) for x in col]
        except TypeError:
            raise TypeError(f"invalid color {col!r}")
        if len(vals) == 3:
            vals.append(1.0)
        if len(vals) != 4 or not all(0 <= x <= 1 for x in vals):
            raise ValueError(f"invalid color {col!r}")
        return tuple(vals)

    spec = col.strip()
    if spec.lower() == 'transparent':
        return (0.0, 0.0, 0.0, 0.0)

    m = _HEX_RE.match(spec)
    if m:
        digits = m.group(1)
        if len(digits) == 3:
            digits = ''.join(c+c for c in digits)
        vals = [int(digits[i:i+2], 16) / 255 for i in range(0, len(digits), 2)]
        if len(vals) == 3:
            vals.append(1.0)
        return tuple(vals)

    m = _FN_RE.match(spec)
    if m:
        fn, args = m.groups()
        try:
            vals = [float(x) for x in args.split(',')]
        except ValueError:
            raise ValueError(f"invalid color {col!r}")
        if len(vals) != len(fn):
            raise ValueError(f"invalid color {col!r}")
        rgb = [x / 255 for x in vals[:3]]
        a = vals[3] if fn == 'rgba' else 1.0
        return tuple(rgb + [a])

    rgb = NAMES.get(spec.lower())
    if rgb is not None:
        r, g, b = rgb
        return (r / 255, g / 255, b / 255, 1.0)

    raise ValueError(f"invalid color {col!r}")

def palette(name):
    """Get a list of colors for successive data series.

    `name` is either the name of a predefined palette (see
    `PALETTES`), or a comma-separated list of color names and hex
    colors.

    """
    if not isinstance(name, str):
        return [get(col) for col in name]
    cols = PALETTES.get(name)
    if cols is None:
        cols = [c for c in name.split(',') if c.strip()]
    if not cols:
        raise ValueError(f"invalid palette {name!r}")
    return [get(col) for col in cols]
