# canvas.py - implementation of the Canvas class
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

"""The Canvas class
----------------

The canvas class implements the high-level plot types supported by
the TickPlot package.  Axis ranges and tick marks are chosen by the
label search in :py:mod:`tickplot.labeller`.

"""

import logging

import cairocffi as cairo

from . import axes
from . import device
from . import param
from . import scale
from . import util


_log = logging.getLogger(__name__)


class Canvas(device.Device):
    """Representation of a page which a plot can be drawn on.

    Canvas objects are normally created using the
    :py:func:`tickplot.Plot` function.  The methods of this class
    implement the various high-level plot types.

    """

    def __init__(self, ctx, rect, *, res, style=None, parent=None):
        """Create a new canvas object.

        Args:
            ctx (Cairo drawing context): The Cairo context used to draw
                the figure.

            rect (list of length 4): The extent of the drawing area, in
               device coordinates.  The four values `x, y, w, h = rect`
               represent the horizontal and vertical position of the
               drawing area on the page, and the width and hight of the
               drawing area, respectively.

            res (number): Resolution of the device, *i.e.* the number of
                device coordinate units per inch.

            style (dict, optional): Graphics parameters to override the
               default values.

            parent (Device, optional): used internally, for graphics
               parameters with value `"inherit"`.

        """
        super().__init__(ctx, rect, res=res, style=style, parent=parent)

        # draw the background, if any
        r, g, b, a = self._get_param("bg_col", {})
        if a > 0 and ctx is not None:
            ctx.save()
            ctx.set_source_rgba(r, g, b, a)
            ctx.rectangle(*self.rect)
            ctx.fill()
            ctx.restore()

        pad = [self._get_param('padding_' + pos, {})
               for pos in ('bottom', 'left', 'top', 'right')]
        self.rect = [self.rect[0] + pad[1], self.rect[1] + pad[0],
                     self.rect[2] - pad[1] - pad[3],
                     self.rect[3] - pad[0] - pad[2]]

        self._scales = parent._scales if parent else {}
        self._on_close = []
        if parent:
            parent._on_close.append(self.close)

    data_range = staticmethod(util.data_range)

    def __str__(self):
        tmpl = "<Canvas %.0fx%.0f%+.0f%+.0f>"
        x, y, w, h = self.rect
        return tmpl % (w, h, x, y)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        """Call the ``close()`` method of the canvas."""
        self.close()

    def close(self):
        """Finish the plot by drawing any outstanding overlays.

        This must be called once drawing is completed, either
        explicitly or by using the canvase as a context handler.

        After the plot is closed, nothing can be added any more.

        """
        while self._on_close:
            fn = self._on_close.pop()
            fn()

    def plot(self, x, y=None, *, rect=None, x_extra=None, y_extra=None,
             x_lim=None, y_lim=None, aspect=None, x_lab=None, y_lab=None,
             name=None, style=None):
        """Draw a line plot.

        Args:
            x (array with ``shape=(n,)`` or ``shape=(n,2)``): The
                vertex coordinates of the lines.  If `y` is
                given, `x` must be one-dimensional and the vertices
                are ``(x[0], y[0])``, ..., ``(x[n-1], y[n-1])``.
                Otherwise, `x` must be two-dimensional with two
                columns and the vertices are ``x[0, :]``, ...,
                ``x[n-1, :]``.
            y (array with ``shape=(n,)``, optional): See the
                description of `x`.
            rect (list of length 4, optional): the area for the axes
                box, in device coordinates.  By default the margin
                parameters are used.
            x_extra: additional values the horizontal axis must cover.
            y_extra: additional values the vertical axis must cover.
            x_lim (tuple): a pair of numbers, specifying the lower and upper
                coordinate range for the horizontal axis.
            y_lim (tuple): a pair of numbers, specifying the lower and upper
                coordinate range for the vertical axis.
            aspect (number): The aspect ratio of the axes area; 1
                makes circles shown as circles, values >=1 turn
                circles into ellipses wider than high, and values <=1
                turn circles into ellipses higher than wide.
            x_lab (str): the axis label for the horizontal axis.
            y_lab (str): the axis label for the vertical axis.
            name (str): the name of the line, shown in the legend.
            style (dict): graphics parameter values to override the
                canvas settings, setting the line thickness and color.

        """
        style = param.check_keys(style)
        x, y = util._check_coords(x, y)

        x_range = self.data_range(x, x_extra)
        y_range = self.data_range(y, y_extra)
        rect = rect or self._get_margin_rect(style)
        ax = self._add_axes(rect, x_range, y_range, x_lim, y_lim,
                            aspect, style, x_lab=x_lab, y_lab=y_lab)
        ax.draw_lines(x, y, name=name, style=style)
        return ax

    def scatter_plot(self, x, y=None, *, rect=None, x_extra=None,
                     y_extra=None, x_lim=None, y_lim=None, aspect=None,
                     x_lab=None, y_lab=None, name=None, style=None):
        """Draw a scatter plot.

        The arguments are the same as for :py:meth:`plot`.  The
        marker shape is set by the ``plot_point_style`` parameter,
        either "dot" or "cross".

        """
        style = param.check_keys(style)
        x, y = util._check_coords(x, y)

        x_range = self.data_range(x, x_extra)
        y_range = self.data_range(y, y_extra)
        rect = rect or self._get_margin_rect(style)
        ax = self._add_axes(rect, x_range, y_range, x_lim, y_lim, aspect,
                            style, x_lab=x_lab, y_lab=y_lab)
        ax.draw_points(x, y, name=name, style=style)
        return ax

    def bar_plot(self, x, y=None, *, rect=None, x_extra=None, y_extra=None,
                 x_lim=None, y_lim=None, aspect=None, x_lab=None,
                 y_lab=None, name=None, style=None):
        """Draw a bar chart.

        Each bar extends from 0 to the corresponding value.

        Args:
            x (array with ``shape=(n,)``): the bar positions.  If `y`
                is omitted, `x` gives the bar heights and the bars are
                placed at ``1, ..., n``.
            y (array with ``shape=(n,)``, optional): the bar heights.

        The remaining arguments are the same as for :py:meth:`plot`.

        """
        style = param.check_keys(style)
        x, y = util._check_coords(x, y)
        width = self._get_param('bar_width', style)

        x_range = self.data_range(x - .5*width, x + .5*width, x_extra)
        y_range = self.data_range(y, 0, y_extra)
        rect = rect or self._get_margin_rect(style)
        ax = self._add_axes(rect, x_range, y_range, x_lim, y_lim, aspect,
                            style, x_lab=x_lab, y_lab=y_lab)
        ax.draw_bars(x, y, name=name, style=style)
        return ax

    def axes(self, *, x_range=None, y_range=None, x_lim=None, y_lim=None,
             aspect=None, rect=None, x_lab=None, y_lab=None, style=None):
        """Draw a set of coordinate axes and return a new Axes object
        representing the data area inside the axes.

        Args:
            x_range (tuple): The horizontal coordinate range to cover.
                The actual axis range may be larger than this.
            y_range (tuple): The vertical coordinate range to cover.
                The actual axis range chosen may be larger than this.
            x_lim (tuple): The exact coordinate range for the
                horizontal axis.
            y_lim (tuple): The exact coordinate range for the vertical
                axis.
            aspect (number): The aspect ratio of the axes; a value of 1
                displays mathematical circles visually as circles, values >1
                show circles as ellipses wider than high, and values <1 show
                circles as ellipses higher than wide.
            rect (list of length 4, optional): the area for the axes
                box, in device coordinates.
            x_lab (str): the axis label for the horizontal axis.
            y_lab (str): the axis label for the vertical axis.
            style (dict): graphics parameter values to override the
                canvas settings, setting the line thickness and color.
                The parameters in `style` are also used as the default
                parameters for the context representing the axes area.

        """
        style = param.check_keys(style)
        if x_range is not None:
            x_range = self.data_range(x_range)
        if y_range is not None:
            y_range = self.data_range(y_range)
        rect = rect or self._get_margin_rect(style)
        ax = self._add_axes(rect, x_range, y_range, x_lim, y_lim, aspect,
                            style, x_lab=x_lab, y_lab=y_lab)
        return ax

    def subplot(self, cols, rows, idx=None, *, style=None):
        """Split the current canvas into a ``cols``-times-``rows`` grid and
        return the sub-canvas corresponding to column ``idx % cols``
        and row ``idx // cols`` (where both row and column counts
        start with 0).

        Args:
            cols (int): Number of columns.
            rows (int): Number of rows.
            idx (int): The position of the returned viewport in the grid.
                If this is omitted, the position following the previous
                call with the same grid is used.
            style (dict): graphics parameter values to override the
                canvas settings.

        """
        if rows <= 0 or cols <= 0:
            raise ValueError('invalid %d by %d arrangement' % (cols, rows))
        style = param.check_keys(style)

        if idx is None:
            last = getattr(self, '_last_subplot', None)
            if last is not None and last[:2] == (cols, rows):
                idx = (last[2] + 1) % (cols * rows)
            else:
                idx = 0
        if not 0 <= idx < cols * rows:
            tmpl = 'invalid index %d, not in range 0, ... %d'
            raise ValueError(tmpl % (idx, cols*rows-1))
        self._last_subplot = (cols, rows, idx)
        # row 0 is at the top of the canvas
        i = rows - 1 - idx // cols
        j = idx % cols

        dw = self.rect[2] / cols
        dh = self.rect[3] / rows
        x0 = int(self.rect[0] + j*dw + .5)
        x1 = int(self.rect[0] + (j+1)*dw + .5)
        y0 = int(self.rect[1] + i*dh + .5)
        y1 = int(self.rect[1] + (i+1)*dh + .5)
        rect = [x0, y0, x1 - x0, y1 - y0]

        # allocate a new drawing context for the viewport
        surface = self.ctx.get_target()
        ctx = cairo.Context(surface)
        ctx.set_matrix(self.ctx.get_matrix())
        ctx.rectangle(*rect)
        ctx.clip()

        return Canvas(ctx, rect, res=self.res, style=style, parent=self)

    def _scale(self, loose):
        s = self._scales.get(loose)
        if s is None:
            s = scale.Linear(loose=loose)
            self._scales[loose] = s
        return s

    def _add_axes(self, rect, x_range, y_range, x_lim, y_lim,
                  aspect, style, *, x_lab=None, y_lab=None):
        if x_range is None and x_lim is None:
            raise ValueError("need to specify either x_range or x_lim")
        if y_range is None and y_lim is None:
            raise ValueError("need to specify either y_range or y_lim")

        _, _, w, h = rect
        if w <= 0 or h <= 0:
            raise ValueError("not enough space for the axes")

        s = self._scale(self._get_param('axis_loose', style))
        count_x = self._get_param('axis_tick_count_x', style)
        count_y = self._get_param('axis_tick_count_y', style)

        x_axis = _fit_axis(s, x_range, x_lim, count_x)
        y_axis = _fit_axis(s, y_range, y_lim, count_y)
        if aspect is not None:
            aspect = float(aspect)
            if aspect <= 0:
                raise ValueError(f"invalid aspect ratio {aspect}")
            dx = x_axis[0][1] - x_axis[0][0]
            dy = y_axis[0][1] - y_axis[0][0]
            # the scales must satisfy (w/dx) / (h/dy) == aspect
            if dx * h * aspect < w * dy:
                x_lim = _widen(x_axis[0], w * dy / (h * aspect))
                x_axis = s.ticks_inside(*x_lim, count_x)
            else:
                y_lim = _widen(y_axis[0], aspect * h * dx / w)
                y_axis = s.ticks_inside(*y_lim, count_y)
        _log.debug("axes x=%s y=%s", x_axis[0], y_axis[0])

        ax = axes.Axes(self, rect, x_axis[0], y_axis[0], style=style)
        if self._get_param('axis_origin_lines', style):
            if x_axis[0][0] < 0 < x_axis[0][1]:
                ax.draw_affine(x=0)
            if y_axis[0][0] < 0 < y_axis[0][1]:
                ax.draw_affine(y=0)

        style = style.copy()
        def decorate():
            ticks = self._get_param('axis_ticks', style)
            labels = self._get_param('axis_labels', style)

            ax.decorate()
            for pos in 'btlr':
                if pos not in ticks.lower():
                    continue
                _, values, tick_labels = x_axis if pos in 'bt' else y_axis
                if pos.upper() not in ticks:
                    tick_labels = None
                ax._draw_ticks(values, tick_labels, pos, style)

            for pos in 'btlr':
                text = x_lab if pos in 'bt' else y_lab
                if text and pos in labels:
                    ax._draw_axis_label(text, pos, style)

            ax.draw_legend()

        self._on_close.append(decorate)

        return ax


def _fit_axis(s, data_range, lim, tick_count):
    if lim is None:
        return s.ticks(*data_range, tick_count)
    a, b = float(lim[0]), float(lim[1])
    if not a < b:
        raise ValueError(f"invalid axis limits {lim!r}")
    return s.ticks_inside(a, b, tick_count)

def _widen(lim, length):
    mid = .5 * (lim[0] + lim[1])
    return mid - .5*length, mid + .5*length
