# __init__.py - package directory file for TickPlot
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

"""Plots with Well-Chosen Axis Ticks
=================================

:copyright: 2014, Jochen Voss
:license: GPL version 3 or newer, see LICENSE for more details

Quick Start
-----------

The main entry point for the TickPlot package is the
:py:class:`tickplot.plot.Plot()` class which creates a new figure.  The
name :py:func:`tickplot.Plot()` can be used as a shorthand for
:py:class:`tickplot.plot.Plot()`.

Axis ranges and tick marks are chosen by the extended Wilkinson label
search, which is available on its own as
:py:class:`tickplot.Labeller`::

    >>> from tickplot import Labeller
    >>> Labeller(loose=True).search(-98, 18, 2)
    Label(min=-100.0, max=20.0, step=60.0, score=...)

Modules
-------

The TickPlot package is composed of the following main modules:

* :py:mod:`tickplot.plot`
* :py:mod:`tickplot.canvas`
* :py:mod:`tickplot.axes`
* :py:mod:`tickplot.labeller`
* :py:mod:`tickplot.scale`
* :py:mod:`tickplot.param`

"""

__title__ = 'tickplot'
__version__ = '0.3'
__author__ = 'Jochen Voss'
__license__ = 'GPLv3+'
__copyright__ = 'Copyright (c) 2014-2018 Jochen Voss'

from .labeller import Label, Labeller
from .plot import Plot
