#! /usr/bin/env python3

import logging

import numpy as np

import pytest

from . import canvas
from . import color
from . import errors
from . import labeller
from . import param
from . import plot
from . import util


def test_canvas_param():
    res = 100
    lw = '17pt'
    c1 = canvas.Canvas(None, [0, 0, 200, 400], res=res, parent=None,
                       style={'padding': '0pt',
                              'margin_left': '10%',
                              'margin_top': '20%',
                              'margin_bottom': '$margin_right',
                              'axis_tick_count': 3,
                              'lw': lw})

    # parameter type 'width'
    assert c1.get_param('margin_left') == pytest.approx(0.1*200)

    # parameter type 'height'
    assert c1.get_param('margin_top') == pytest.approx(0.2*400)
    assert c1.get_param('margin_bottom') == c1.get_param('margin_right')

    # parameter type 'dim'
    key = 'font_size'
    assert c1.get_param(key) == util.convert_dim(param.DEFAULT[key][1], res)

    # parameter type 'col'
    key = 'fg_col'
    assert c1.get_param(key) == color.get(param.ROOT[key])

    # parameter types 'int' and 'cols'
    assert c1.get_param('axis_tick_count_y') == 3
    assert c1.get_param('plot_palette') == color.palette('default')

    # variables
    key = 'plot_lw'             # default value is '$lw'
    assert c1.get_param(key) == pytest.approx(util.convert_dim(lw, res))

    # inherited values
    c2 = canvas.Canvas(None, [50, 100, 100, 200], res=res, parent=c1)
    assert c2.get_param('axis_tick_count') == 3
    assert c2.get_param('axis_loose') is True

    # invalid parameter names
    with pytest.raises(errors.InvalidParameterName):
        # mis-spelled 'font_size'
        canvas.Canvas(None, [50, 100, 100, 200], res=res, parent=c1,
                      style={'font.size': '10px'})
    with pytest.raises(errors.InvalidParameterName):
        c1.get_param('font.size')
    with pytest.raises(errors.InvalidParameterName):
        c1.get_param('font_size', style={'font.size': '10px'})

def test_data_range():
    data_range = canvas.Canvas.data_range

    assert data_range(3, 1, 4, 1, 5) == (1, 5)
    assert data_range([1, (2, 3)], None, np.arange(7, 10)) == (1, 9)
    assert data_range(np.inf, -np.inf, 2, np.nan) == (2, 2)
    with pytest.raises(ValueError):
        data_range()
    with pytest.raises(TypeError):
        data_range("fish")

def test_axes():
    with plot.Plot('/dev/null', '3in', '5in') as pl:
        with pytest.raises(ValueError):
            # need {x,y}_range or {x,y}_lim
            pl.axes()
        with pytest.raises(ValueError):
            pl.axes(x_lim=[1, 0], y_lim=[0, 1])

        # try axes with limits but no data range
        ax = pl.axes(x_lim=[0, 1], y_lim=[0, 1])
        assert ax.x_range == (0, 1)
        assert ax.y_range == (0, 1)

def test_axis_ranges():
    style = {'axis_tick_count': 2, 'axis_tick_count_y': 3}
    with plot.Plot('/dev/null', '4in', '3in', style=style) as pl:
        ax = pl.plot([-98, 18], [-25, 200])
        assert ax.x_range == (-100, 20)
        assert ax.y_range == (-50, 200)

        ax = pl.plot([-98, 18], [-25, 200], y_lim=(-30, 210))
        assert ax.x_range == (-100, 20)
        assert ax.y_range == (-30, 210)

def test_tight_axes():
    with plot.Plot('/dev/null', '4in', '3in',
                   style={'axis_loose': False}) as pl:
        x = np.linspace(0.01, 4.99, 20)
        ax = pl.scatter_plot(x, np.sin(x))
        assert ax.x_range[0] <= 0.01 and ax.x_range[1] >= 4.99

def test_plot_aspect():
    for asp in [.5, 1, 2]:
        with plot.Plot('/dev/null', '3in', '5in') as pl:
            ax = pl.plot([1, 2, 4], [1, -1, 1], aspect=asp)
            assert ax.scale[0]/ax.scale[1] == pytest.approx(asp)
            assert ax.x_range[0] <= 1 and ax.x_range[1] >= 4
            assert ax.y_range[0] <= -1 and ax.y_range[1] >= 1

def test_axes_aspect():
    for asp in [.5, 1, 2]:
        with plot.Plot('/dev/null', '3in', '5in') as pl:
            ax = pl.axes(x_range=[0, 1], y_range=[0, 2], aspect=asp)
            assert ax.scale[0]/ax.scale[1] == pytest.approx(asp)
    with plot.Plot('/dev/null', '3in', '5in') as pl:
        with pytest.raises(ValueError):
            pl.axes(x_range=[0, 1], y_range=[0, 2], aspect=0)

def test_bar_plot():
    with plot.Plot('/dev/null', '4in', '3in') as pl:
        ax = pl.bar_plot([3, 5, 4], name="counts")
        assert ax.x_range[0] <= 0.6 and ax.x_range[1] >= 3.4
        assert ax.y_range[0] <= 0 and ax.y_range[1] >= 5
        assert ax.legend_entries[0][:2] == ("counts", "bar")

        ax = pl.bar_plot([10, 20], [-2, -1], style={'bar_width': 4})
        assert ax.x_range[0] <= 8 and ax.x_range[1] >= 22
        assert ax.y_range[1] >= 0

def test_legend_and_origin_lines():
    style = {'axis_origin_lines': True, 'legend_pos': 'bl'}
    with plot.Plot('/dev/null', '4in', '3in', style=style) as pl:
        x = np.linspace(-1, 1, 21)
        ax = pl.plot(x, x**3, name="cubic")
        ax.draw_points(x, x, name="identity")
        assert [e[0] for e in ax.legend_entries] == ["cubic", "identity"]

def test_fallback(caplog, monkeypatch):
    def fail(self, data_min, data_max, target_tick_count, **kwargs):
        raise errors.NoLabelFound("no labelling")
    monkeypatch.setattr(labeller.Labeller, "search", fail)

    with caplog.at_level(logging.WARNING, logger="tickplot.scale"):
        with plot.Plot('/dev/null', '4in', '3in') as pl:
            ax = pl.plot([0, 3], [1, 2])
            assert ax.x_range == (0, 3)
            assert ax.y_range == (1, 2)
    assert "raw axis range" in caplog.text

def test_subplot():
    flat = {'padding': 0}
    with plot.Plot('/dev/null', 400, 300, style=flat) as pl:
        c0 = pl.subplot(2, 2, style=flat)
        assert c0.rect[:2] == [0, 150]
        c1 = pl.subplot(2, 2, style=flat)
        assert c1.rect[:2] == [200, 150]
        c3 = pl.subplot(2, 2, 3, style=flat)
        assert c3.rect[:2] == [200, 0]
        c0 = pl.subplot(2, 2, style=flat)
        assert c0.rect[:2] == [0, 150]

        c0.plot([1, 2, 3])
        with pytest.raises(ValueError):
            pl.subplot(2, 2, 4)
        with pytest.raises(ValueError):
            pl.subplot(0, 2)
