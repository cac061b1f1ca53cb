#! /usr/bin/env python3

import itertools

import numpy as np

import tickplot

plot_no = itertools.count(1)


def line_plot():
    fig = yield ("line", "5in", "3in")
    t = np.linspace(0, 2*np.pi, 200)
    ax = fig.plot(t, np.sin(t), name="sin", x_lab="t")
    ax.draw_lines(t, np.cos(t), name="cos")


def scatter_plot():
    fig = yield ("scatter", "5in", "5in")
    fig.scatter_plot(np.random.rand(1000),
                     np.random.rand(1000),
                     aspect=1)


def cross_plot():
    fig = yield ("cross", "5in", "3in")
    x = np.random.randn(50)
    fig.scatter_plot(x, x + .3*np.random.randn(50), name="samples",
                     style={'plot_point_style': 'cross',
                            'plot_point_size': '3pt'})


def bar_plot():
    fig = yield ("bar", "5in", "3in")
    fig.bar_plot([-98, -40, 18, 7], name="balance",
                 style={'axis_origin_lines': True})


def narrow_range_plot():
    fig = yield ("narrow", "5in", "3in")
    x = np.linspace(17.3, 17.8, 11)
    fig.plot(x, 1e-4 * x**2, style={'axis_tick_count': 3})

plot_fns = [fn for name, fn in globals().items() if name.endswith('_plot')]
for fn in plot_fns:
    for ext in ['pdf', 'svg', 'png']:
        fnx = fn()
        name, width, height = next(fnx)
        plot_name = "test-%03d-%s.%s" % (next(plot_no), name, ext)
        with tickplot.Plot(plot_name, width, height) as fig:
            try:
                fnx.send(fig)
            except StopIteration:
                pass
