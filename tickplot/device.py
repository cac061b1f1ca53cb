# device.py - handle TickPlot graphics devices
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

"""The Device class
----------------

The `Device` class keeps track of graphics parameters and provides
support for drawing text.

"""

import contextlib

import cairocffi as cairo

from . import color
from . import errors
from . import param
from . import util


def _auto_color(value):
    # 'auto' leaves the choice of color to the caller
    if value == 'auto':
        return None
    return color.get(value)


class Device:

    """A graphics device to draw a plot on.

    This class is only used as a base class for :py:class:`Canvas` and
    :py:class:`axes.Axes`.  The ``Device`` class itself is not normally
    instantiated.

    This class keeps track of the resolution and dimensions of the
    drawing area, and of the graphical style parameters.

    """

    def __init__(self, ctx, rect, *, res, style=None, parent=None):
        if parent is None:
            style = param.update(param.ROOT, style)
        else:
            style = param.update(style, parent_style=parent.style)
        self.style = style

        if ctx is not None:
            ctx.set_line_join(cairo.LINE_JOIN_ROUND)
            ctx.set_line_cap(cairo.LINE_CAP_ROUND)
        self.ctx = ctx

        self.res = res
        """Device resolution, *i.e.* the number of coordinate units per inch
        (read only).

        """

        self.rect = rect
        """The extent of the drawing area, in device coordinates (Read only).

        The four values `x, y, w, h = rect` represent the horizontal
        and vertical position of the drawing area on the page, and the
        width and hight of the drawing area, respectively.

        """

    def get_param(self, key, style=None):
        """Get the value of graphics parameter ``key``.

        If the optional argument ``style`` is given, it must be a
        dictionary, mapping parameter names to values; in this case,
        values in ``style`` override values set in the Canvas object.

        Args:
            key (string): the graphics parameter name to query.
            style (dict): graphics parameter values to override the
                canvas settings.

        Returns:
            The value converted according to the parameter type:
            dimensions in device units, colors as RGBA tuples (or
            ``None`` for automatically chosen colors), palettes as
            lists of RGBA tuples, and booleans, integers, numbers and
            strings as the corresponding Python types.

        """
        style = param.check_keys(style)
        return self._get_param(key, style)

    def _get_param(self, key, style):
        key, value = self._resolve(key, style)
        kind = param.DEFAULT[key][0]
        convert = self._converters().get(kind)
        if convert is None:
            raise NotImplementedError("parameter type '%s'" % kind)
        return convert(value)

    def _resolve(self, key, style):
        """Follow "$name" references until a literal value is found."""
        seen = [key]
        while True:
            value = style.get(key)
            if value is None:
                value = self.style.get(key)
            if value is None:
                msg = f"invalid style parameter '{key}'"
                raise errors.InvalidParameterName(msg)
            if not (isinstance(value, str) and value.startswith('$')):
                return key, value
            key = value[1:]
            if key in seen:
                msg = ' -> '.join(seen + [key])
                raise errors.WrongUsage("infinite parameter loop: " + msg)
            seen.append(key)

    def _converters(self):
        res = self.res
        return {
            'width': lambda v: util.convert_dim(v, res, self.rect[2]),
            'height': lambda v: util.convert_dim(v, res, self.rect[3]),
            'dim': lambda v: util.convert_dim(v, res),
            'col': _auto_color,
            'cols': color.palette,
            'bool': util.parse_bool,
            'int': int,
            'num': float,
            'dash': lambda v: util.parse_dash_pattern(v, res),
            'str': str,
        }

    def get_margin_rect(self, *, style=None):
        """Return the rectangle `[x, y, w, h]` defined by the margin graphics
        parameters, in device coordinates.

        """
        style = param.check_keys(style)
        return self._get_margin_rect(style)

    def _get_margin_rect(self, style):
        bottom, left, top, right = [
            self._get_param('margin_' + pos, style)
            for pos in ('bottom', 'left', 'top', 'right')]
        x, y, w, h = self.rect
        w -= left + right
        h -= bottom + top
        if w < 0 or h < 0:
            raise ValueError("not enough space, margins too large")
        return [x + left, y + bottom, w, h]

    @contextlib.contextmanager
    def _font(self, font_size, ctx=None):
        ctx = ctx or self.ctx
        ctx.save()
        # device coordinates have the y-axis pointing upwards
        ctx.set_font_matrix(cairo.Matrix(font_size, 0, 0, -font_size, 0, 0))
        try:
            yield ctx
        finally:
            ctx.restore()

    def text_width(self, text, font_size):
        """Returns the widths of the text bounding box."""
        with self._font(font_size) as ctx:
            return ctx.text_extents(text)[2]

    def font_height(self, font_size):
        """Returns the line height (ascent plus descent) of the font."""
        with self._font(font_size) as ctx:
            ascent, descent, _, _, _ = ctx.font_extents()
        return ascent + descent

    def _draw_text(self, x, y, text, font_size, *, col=None, bg_col=None,
                   horizontal_align="start", vertical_align="baseline",
                   rotate=0, padding=("1pt", "3pt"), ctx=None):
        p_top, p_right, p_bottom, p_left = util.box_sides(padding, self.res)

        with self._font(font_size, ctx) as ctx:
            x_bearing, y_bearing, width, height, x_advance, _ = \
                ctx.text_extents(text)
            h_offsets = {
                "start": 0,
                "end": -x_advance,
                "left": -x_bearing,
                "right": -x_bearing - width,
                "center": -x_bearing - .5 * width,
            }
            x_offs = h_offsets.get(horizontal_align)
            if x_offs is None:
                x_offs = util.convert_dim(horizontal_align, self.res, width)

            ascent, descent, line_height, _, _ = ctx.font_extents()
            v_offsets = {
                "baseline": 0,
                "top": -ascent,
                "bottom": descent,
                "center": (descent - ascent) / 2,
            }
            y_offs = v_offsets.get(vertical_align)
            if y_offs is None:
                y_offs = util.convert_dim(vertical_align, self.res,
                                          line_height)

            if bg_col is not None and bg_col[3] > 0:
                ctx.save()
                ctx.set_source_rgba(*bg_col)
                ctx.move_to(x, y)
                ctx.rotate(rotate)
                ctx.rel_move_to(x_bearing + x_offs - p_left,
                                y_bearing + y_offs - p_bottom)
                ctx.rel_line_to(width + p_left + p_right, 0)
                ctx.rel_line_to(0, height + p_bottom + p_top)
                ctx.rel_line_to(-width - p_right - p_left, 0)
                ctx.close_path()
                ctx.fill()
                ctx.restore()

            if col:
                ctx.set_source_rgba(*col)
            ctx.move_to(x, y)
            ctx.rotate(rotate)
            ctx.rel_move_to(x_offs, y_offs)
            ctx.show_text(text)
