# errors.py - exception classes for TickPlot
# Copyright (C) 2014-2019 Jochen Voss <voss@seehuhn.de>
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

class TickPlotError(Exception):

    def __init__(self, msg):
        super().__init__(msg)
        self.msg = msg

    def __str__(self):
        return self.msg


class WrongUsage(TickPlotError):

    pass


class InvalidParameterName(WrongUsage):

    pass


class LabelSearchError(TickPlotError):

    """The axis label search could not produce a usable label.

    Callers are expected to recover from this, normally by using the
    raw data range for the axis.

    """

    pass


class NoLabelFound(LabelSearchError):

    pass
