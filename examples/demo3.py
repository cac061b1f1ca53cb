#! /usr/bin/env python3

import numpy as np

from tickplot import Plot

years = np.arange(2012, 2020)
rain = np.array([812, 655, 703, 930, 588, 770, 645, 702])
with Plot('demo3.pdf', '6in', '4in') as pl:
    ax = pl.bar_plot(years, rain, name="rainfall",
                     x_lab="year", y_lab="rain [mm]",
                     style={'legend_pos': 'tl'})
    ax.draw_affine(y=rain.mean(), style={'line_dash': '3pt,2pt'})
