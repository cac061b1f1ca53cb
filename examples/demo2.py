#! /usr/bin/env python3

import numpy as np

from tickplot import Plot

dashed = dict(line_dash='1.5pt')
with Plot('demo2.pdf', '4in', '8in') as pl:
    t = np.linspace(0, 2*np.pi, 200)
    for i in range(4):
        panel = pl.subplot(1, 4, i)
        ax = panel.plot(t, (i+1) * np.sin((4-i)*t),
                        style={'axis_tick_count_y': 3})
        ax.draw_affine(y=0, style=dashed)
        ax.draw_affine(x=np.pi, style=dashed)
