# axes.py - handle coordinate axes
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

"""The Axes class
--------------

The `Axes` class implements the drawing operations for data series
(lines, points and bars) and allows to transform between device and
data coordinates.

"""

import numpy as np
import scipy.optimize as opt

import cairocffi as cairo

from . import device
from . import param
from . import util


class Axes(device.Device):

    """A coordinate system on a canvas.

    This class implements coordinate systems on a canvas and,
    optionally, can draw boxes, tick marks, tick labels, axis labels
    and a legend.

    Args:

        parent    The canvas these axes should be drawn on.
        rect      The position of the axes on the parent canvas.
        x_lim     The horizontal range of data coordinates spanned.
        y_lim     The vertical range of data coordinates spanned.

    """

    def __init__(self, parent, rect, x_lim, y_lim, *, style=None):
        # allocate a new drawing context for the viewport
        parent_ctx = parent.ctx
        surface = parent_ctx.get_target()
        ctx = cairo.Context(surface)
        ctx.set_matrix(parent_ctx.get_matrix())
        ctx.rectangle(*rect)
        ctx.clip()

        super().__init__(ctx, rect, res=parent.res, parent=parent, style=style)

        self.parent_ctx = parent_ctx
        self.x_range = x_lim
        self.y_range = y_lim

        # The horizontal scale and offset are determined by the
        # following two equations:
        #     x_lim[0] * x_scale + x_offset = x
        #     x_lim[1] * x_scale + x_offset = x + w
        x_scale = self.rect[2] / (x_lim[1] - x_lim[0])
        x_offset = self.rect[0] - x_lim[0] * x_scale
        # The vertical coordinates are similar:
        y_scale = self.rect[3] / (y_lim[1] - y_lim[0])
        y_offset = self.rect[1] - y_lim[0] * y_scale
        self.offset = (x_offset, y_offset)
        self.scale = (x_scale, y_scale)

        self.legend_entries = []
        """The named data series drawn so far, as tuples
        ``(name, kind, col, size)`` (read only)."""

        self._series_count = 0

    def decorate(self, *, style=None):
        style = param.check_keys(style)

        col = self._get_param('axis_border_col', style)
        border = self._get_param('axis_border_lw', style)

        ctx = self.parent_ctx
        if border > 0 and col[3] > 0:
            ctx.save()
            ctx.rectangle(*self.rect)
            ctx.set_line_width(border)
            ctx.set_source_rgba(*col)
            ctx.set_line_join(cairo.LINE_JOIN_MITER)
            ctx.stroke()
            ctx.restore()

    def _draw_ticks(self, values, labels, where, style):
        tick_width = self._get_param('axis_tick_width', style)
        tick_length = self._get_param('axis_tick_length', style)
        tick_font_size = self._get_param('tick_font_size', style)
        tick_label_col = self._get_param('tick_font_col', style)
        tick_line_col = self._get_param('axis_tick_col', style)
        x_label_dist = self._get_param('tick_label_dist_x', style)
        y_label_dist = self._get_param('tick_label_dist_y', style)

        w_tab = {
            'b': (False, False, self.rect[1]),
            'l': (True, False, self.rect[0]),
            'r': (True, True, self.rect[0] + self.rect[2]),
            't': (False, True, self.rect[1] + self.rect[3]),
        }
        vertical, rev, pos = w_tab[where]

        if vertical:
            base = np.array([pos, self.offset[1]])
            delta = np.array([0, self.scale[1]])
            d_tick = np.array([tick_length, 0])
            h_align = "left" if rev else "right"
            v_align = "center"
            q = 1 + y_label_dist / tick_length
        else:
            base = np.array([self.offset[0], pos])
            delta = np.array([self.scale[0], 0])
            d_tick = np.array([0, tick_length])
            h_align = "center"
            v_align = "bottom" if rev else "top"
            q = 1 + x_label_dist / tick_length
        if rev:
            d_tick = -d_tick

        adjust = np.zeros(len(values))
        if labels and not vertical and len(values) > 1:
            xx = [(base + val * delta)[0] for val in values]
            ww = np.array([self.text_width(lab, tick_font_size)
                           for lab in labels])
            sep = self.text_width("m", tick_font_size)
            qq = _shift_labels(self.rect[0], xx, self.rect[0]+self.rect[2],
                               ww, sep)
            adjust = (qq - .5) * ww

        ctx = self.parent_ctx
        ctx.save()
        ctx.set_line_cap(cairo.LINE_CAP_BUTT)
        ctx.set_line_width(tick_width)
        ctx.set_source_rgba(*tick_line_col)
        for val in values:
            mid = base + val * delta
            ctx.move_to(*(mid + d_tick))
            ctx.line_to(*(mid - d_tick))
        ctx.stroke()
        if labels:
            for val, lab, adj in zip(values, labels, adjust):
                xt, yt = base + val * delta - q*d_tick
                self._draw_text(xt - adj, yt, lab, tick_font_size,
                                horizontal_align=h_align,
                                vertical_align=v_align,
                                col=tick_label_col, ctx=ctx)
        ctx.restore()

    def _draw_axis_label(self, text, where, style):
        dx = self._get_param('axis_label_dist_x', style)
        dy = self._get_param('axis_label_dist_y', style)
        label_font_size = self._get_param('axis_label_size', style)
        label_font_col = self._get_param('axis_label_col', style)

        rect = self.rect
        w_tab = {
            'b': (rect[0] + rect[2]/2, rect[1] - dx,
                  "top", 0),
            't': (rect[0] + rect[2]/2, rect[1] + rect[3] + dx,
                  "bottom", 0),
            'l': (rect[0] - dy, rect[1] + rect[3]/2,
                  "bottom", np.pi/2),
            'r': (rect[0] + rect[2] + dy, rect[1] + rect[3]/2,
                  "top", np.pi/2),
        }
        x, y, align, rot = w_tab[where]

        # use the parent context to avoid clipping
        self._draw_text(x, y, text, label_font_size, col=label_font_col,
                        horizontal_align="center", vertical_align=align,
                        rotate=rot, ctx=self.parent_ctx)

    def data_to_dev_x(self, x_data):
        return self.offset[0] + x_data * self.scale[0]

    def data_to_dev_y(self, y_data):
        return self.offset[1] + y_data * self.scale[1]

    def _series_col(self, key, style):
        """Get the color for a new data series.

        If the parameter `key` is set to "auto", the next color from
        the palette is used.

        """
        col = self._get_param(key, style)
        if col is None:
            palette = self._get_param('plot_palette', style)
            col = palette[self._series_count % len(palette)]
        self._series_count += 1
        return col

    def draw_lines(self, x, y=None, *, name=None, style=None):
        """Draw polygonal line segments.

        The given vertices are connected by a chain of line segments.
        Vertices where at least one of the coordinates is ``nan`` are
        ignored and the line is interupted where such vertices occur.

        Args:
            x (array with ``shape=(n,)`` or ``shape=(n,2)``): The
                vertex coordinates of the line segments.  If `y` is
                given, `x` must be one-dimensional and the vertices
                are ``(x[0], y[0])``, ..., ``(x[n-1], y[n-1])``.
                Otherwise, `x` must be two-dimensional with two
                columns and the vertices are ``x[0,:]``, ...,
                ``x[n-1,:]``.
            y (array with ``shape=(n,)``, optional): See the
                description of `x`.
            name (str, optional): the name of the series, shown in
                the legend.
            style (dict): graphics parameter values to override the
                canvas settings, setting the line thickness and color.

        """
        style = param.check_keys(style)
        lw = self._get_param('plot_lw', style)
        col = self._series_col('plot_col', style)

        x, y = util._check_coords(x, y)
        x = self.data_to_dev_x(x)
        y = self.data_to_dev_y(y)

        self.ctx.save()
        self.ctx.set_line_width(lw)
        self.ctx.set_source_rgba(*col)
        nan = np.logical_or(np.isnan(x), np.isnan(y)).nonzero()[0]
        nan = [-1] + list(nan) + [len(x)]
        for j in range(1, len(nan)):
            i0 = nan[j-1] + 1
            i1 = nan[j]
            if i0 >= i1:
                continue
            self.ctx.move_to(x[i0], y[i0])
            if i1 == i0+1:
                # only one vertex, so draw a point instead of a line
                self.ctx.line_to(x[i0], y[i0])
                continue
            for i in range(i0+1, i1):
                self.ctx.line_to(x[i], y[i])
        self.ctx.stroke()
        self.ctx.restore()

        if name:
            self.legend_entries.append((name, 'line', col, lw))

    def draw_points(self, x, y=None, *, name=None, style=None):
        """Draw markers at the given positions.

        Args:
            x (array with ``shape=(n,)`` or ``shape=(n,2)``): The
                marker positions.  If `y` is given, `x` must be
                one-dimensional and the markers are placed at
                ``(x[0], y[0])``, ..., ``(x[n-1], y[n-1])``.  A
                two-dimensional `x` with two columns gives the
                positions ``x[i,:]`` directly, and a one-dimensional
                `x` without `y` is plotted against ``1, ..., n``.
                Points with a ``nan`` coordinate are skipped.
            y (array with ``shape=(n,)``, optional): See the
                description of `x`.
            name (str, optional): the name of the series, shown in
                the legend.
            style (dict): graphics parameter values to override the
                canvas settings, setting the marker size, shape and
                color.

        """
        style = param.check_keys(style)
        size = self._get_param('plot_point_size', style)
        col = self._series_col('plot_point_col', style)
        separate = self._get_param('plot_point_separate', style)
        marker = self._get_param('plot_point_style', style)
        if marker not in ('dot', 'cross'):
            raise ValueError(f"invalid point style {marker!r}")

        x, y = util._check_coords(x, y)
        x = self.data_to_dev_x(x)
        y = self.data_to_dev_y(y)
        keep = np.logical_not(np.logical_or(np.isnan(x), np.isnan(y)))

        self.ctx.save()
        self.ctx.set_source_rgba(*col)
        for xi, yi in zip(x[keep], y[keep]):
            _marker_path(self.ctx, marker, xi, yi, size)
            if separate:
                _stroke_marker(self.ctx, marker, size)
        if not separate:
            _stroke_marker(self.ctx, marker, size)
        self.ctx.restore()

        if name:
            self.legend_entries.append((name, marker, col, size))

    def draw_bars(self, x, y=None, *, name=None, style=None):
        """Draw vertical bars from the horizontal axis to the given values.

        Args:
            x (array with ``shape=(n,)``): the centres of the bars.
                If `y` is not given, `x` gives the bar heights instead
                and the bars are placed at ``1, ..., n``.
            y (array with ``shape=(n,)``, optional): the bar heights.
            name (str, optional): the name of the series, shown in
                the legend.
            style (dict): graphics parameter values to override the
                canvas settings, setting the bar width and colors.

        """
        style = param.check_keys(style)
        width = self._get_param('bar_width', style)
        fc = self._series_col('bar_col', style)
        lc = self._get_param('bar_line_col', style)
        lw = self._get_param('bar_lw', style)

        x, y = util._check_coords(x, y)
        x0 = self.data_to_dev_x(x - .5*width)
        x1 = self.data_to_dev_x(x + .5*width)
        y0 = self.data_to_dev_y(0)
        y1 = self.data_to_dev_y(y)

        self.ctx.save()
        for i in range(len(x)):
            if np.isnan(x[i]) or np.isnan(y[i]):
                continue
            self.ctx.rectangle(x0[i], y0, x1[i] - x0[i], y1[i] - y0)
        self.ctx.set_source_rgba(*fc)
        if lw > 0 and lc is not None and lc[3] > 0:
            self.ctx.fill_preserve()
            max_lw = .25 * np.nanmin(x1 - x0) if len(x) else lw
            self.ctx.set_line_width(min(lw, max_lw))
            self.ctx.set_source_rgba(*lc)
            self.ctx.stroke()
        else:
            self.ctx.fill()
        self.ctx.restore()

        if name:
            self.legend_entries.append((name, 'bar', fc, lw))

    def draw_affine(self, *, x=None, y=None, a=None, b=None, style=None):
        """Draw a straight line.

        Args:
            x (number): if `x` is not ``None``, draw a vertical line at
                horizontal position `x` (in data coordinates).
            y (number): if `y` is not ``None``, draw a horizontal line at
                vertical position `y` (in data coordinates).
            a (number): if `a` and `b` are not ``None``, draw the
                affine function :math:`a + bx` (in data coordinates).
            b (number): see `a`.
            style (dict): graphics parameter values to override the
                canvas settings, setting the line thickness and color.

        """
        style = param.check_keys(style)
        lw = self._get_param('affine_lw', style)
        col = self._get_param('affine_line_col', style)
        dash = self._get_param('line_dash', style)

        left = self.rect[0]
        right = self.rect[0] + self.rect[2]
        if x is not None:
            if y is not None or a is not None or b is not None:
                raise ValueError("x cannot be combined with y, a or b")
            x = self.data_to_dev_x(float(x))
            p0 = (x, self.rect[1])
            p1 = (x, self.rect[1] + self.rect[3])
        else:
            if y is not None:
                if a is not None or b is not None:
                    raise ValueError("y cannot be combined with a or b")
                a, b = float(y), 0.0
            elif a is None or b is None:
                raise ValueError("need either x, y, or both a and b")
            else:
                a, b = float(a), float(b)
            x0 = (left - self.offset[0]) / self.scale[0]
            x1 = (right - self.offset[0]) / self.scale[0]
            p0 = (left, self.data_to_dev_y(a + b * x0))
            p1 = (right, self.data_to_dev_y(a + b * x1))

        self.ctx.save()
        self.ctx.set_line_width(lw)
        self.ctx.set_source_rgba(*col)
        self.ctx.set_dash(dash)
        self.ctx.move_to(*p0)
        self.ctx.line_to(*p1)
        self.ctx.stroke()
        self.ctx.restore()

    def draw_text(self, text, x, y=None, *, horizontal_align="start",
                  vertical_align="baseline", rotate=0, rotate_deg=None,
                  padding=("1pt", "3pt"), style=None):
        """Add text to a canvas.

        Args:
            text (str): The text to add to the canvas.
            x: Horizontal position of the text in data coordinates.
            y: Vertical position of the text in data coordinates.
            horizontal_align ("start", "end", "left", "right", "center" or dimension):
                Specifies which part of the text to horizontally align
                at the given `x` coordinate.
            vertical_align ("baseline", "top", "bottom", "center" or dimension):
                Specifies which part of the text to vertically align
                at the given `y` coordinate.
            rotate: rotation angle in radians.
            rotate_deg: rotation angle in degrees, overrides `rotate`.
            padding: space around the text which is covered by the
                text background color.  One value for all sides, a
                pair (vertical, horizontal), or four values (top,
                right, bottom, left).
            style (dict): graphics parameters for the text.

        """
        style = param.check_keys(style)
        font_size = self._get_param('text_font_size', style)
        col = self._get_param('text_col', style)
        bg = self._get_param('text_bg', style)

        x, y = util._check_coord_pair(x, y)

        if rotate_deg is not None:
            rotate = float(rotate_deg) / 180 * np.pi

        self._draw_text(self.data_to_dev_x(x), self.data_to_dev_y(y),
                        text, font_size, col=col, bg_col=bg,
                        horizontal_align=horizontal_align,
                        vertical_align=vertical_align, rotate=rotate,
                        padding=padding)

    def draw_legend(self, entries=None, *, style=None):
        """Draw a legend box listing the named data series.

        Args:
            entries (list, optional): tuples ``(name, kind, col, size)``
                where `kind` is one of "line", "dot", "cross" or "bar".
                By default, the entries recorded by the ``draw_*``
                methods are used.
            style (dict): graphics parameter values to override the
                canvas settings.

        """
        style = param.check_keys(style)
        if entries is None:
            entries = self.legend_entries
        if not entries:
            return

        pos = self._get_param('legend_pos', style)
        if len(pos) != 2 or pos[0] not in 'tb' or pos[1] not in 'lr':
            raise ValueError(f"invalid legend position {pos!r}")
        font_size = self._get_param('legend_font_size', style)
        pad = self._get_param('legend_padding', style)
        swatch = self._get_param('legend_swatch_length', style)
        bg = self._get_param('legend_bg', style)
        border_col = self._get_param('legend_border_col', style)
        border_lw = self._get_param('legend_border_lw', style)
        text_col = self._get_param('text_col', style)

        row_height = 1.2 * self.font_height(font_size)
        text_width = max(self.text_width(name, font_size)
                         for name, _, _, _ in entries)
        w = 3*pad + swatch + text_width
        h = 2*pad + len(entries) * row_height

        x0, y0, aw, ah = self.rect
        x = x0 + aw - w - pad if pos[1] == 'r' else x0 + pad
        y = y0 + ah - h - pad if pos[0] == 't' else y0 + pad

        ctx = self.parent_ctx
        ctx.save()
        ctx.rectangle(x, y, w, h)
        if bg is not None and bg[3] > 0:
            ctx.set_source_rgba(*bg)
            ctx.fill_preserve()
        if border_lw > 0 and border_col is not None:
            ctx.set_line_width(border_lw)
            ctx.set_source_rgba(*border_col)
            ctx.stroke()
        ctx.new_path()

        for i, (name, kind, col, size) in enumerate(entries):
            y_mid = y + h - pad - (i + .5) * row_height
            x_mid = x + pad + swatch / 2
            ctx.set_source_rgba(*col)
            if kind == 'line':
                ctx.set_line_width(size)
                ctx.move_to(x + pad, y_mid)
                ctx.line_to(x + pad + swatch, y_mid)
                ctx.stroke()
            elif kind == 'bar':
                side = .6 * row_height
                ctx.rectangle(x_mid - side/2, y_mid - side/2, side, side)
                ctx.fill()
            else:
                _marker_path(ctx, kind, x_mid, y_mid, size)
                _stroke_marker(ctx, kind, size)
            self._draw_text(x + 2*pad + swatch, y_mid, name, font_size,
                            col=text_col, vertical_align="center", ctx=ctx)
        ctx.restore()


def _marker_path(ctx, marker, x, y, size):
    if marker == 'cross':
        ctx.move_to(x - size, y)
        ctx.line_to(x + size, y)
        ctx.move_to(x, y - size)
        ctx.line_to(x, y + size)
    else:
        # a zero-length segment with round caps is drawn as a dot
        ctx.move_to(x, y)
        ctx.close_path()

def _stroke_marker(ctx, marker, size):
    ctx.set_line_width(size / 3 if marker == 'cross' else size)
    ctx.stroke()

def _shift_labels(left, xx, right, ww, sep=10):
    xx = np.array(xx)
    ww = np.array(ww)

    def loss(qq):
        l = xx - qq*ww
        r = xx + (1-qq)*ww
        a = np.sum(np.square(np.maximum(r[:-1] - l[1:] + sep, 0)))
        b = np.sum(np.square(np.maximum([left - l[0], r[-1] - right], 0)))
        c = np.sum(np.square(qq - .5))
        return a + .1*b + .01*c

    n = len(xx)
    res = opt.minimize(loss, [.5]*n, bounds=[(0, 1)]*n, method='L-BFGS-B')
    return res.x
