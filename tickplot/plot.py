# plot.py - implementation of the Plot class
# Copyright (C) 2014 Jochen Voss <voss@seehuhn.de>
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

"""
The Plot Class
--------------

A :py:class:`Plot` is the top-level canvas of a figure.  It owns the
Cairo surface and writes the figure to its file when it is closed.
"""

import logging
import os.path

import cairocffi as cairo

from . import canvas, util, param


_log = logging.getLogger(__name__)

# paper sizes, as (width, height)
_PAPER = {
    "A4": ("210mm", "297mm"),
    "A4r": ("297mm", "210mm"),
}


def _eps_surface(file_name, w, h):
    surface = cairo.PSSurface(file_name, w, h)
    surface.set_eps(True)
    return surface

def _png_surface(file_name, w, h):
    return cairo.ImageSurface(cairo.FORMAT_RGB24, w, h)

def _null_surface(file_name, w, h):
    return cairo.RecordingSurface(cairo.CONTENT_COLOR, (0, 0, w, h))

# surface constructors by file type; None draws without output
_SURFACES = {
    'pdf': cairo.PDFSurface,
    'ps': cairo.PSSurface,
    'eps': _eps_surface,
    'svg': cairo.SVGSurface,
    'png': _png_surface,
    None: _null_surface,
}


def _file_type(file_name):
    if file_name == "/dev/null":
        return None
    ext = os.path.splitext(file_name)[1][1:].lower()
    if not ext:
        raise ValueError(f"file name {file_name!r} lacks an extension")
    if ext not in _SURFACES:
        raise ValueError(f"unsupported file type {ext!r}")
    return ext


class Plot(canvas.Canvas):

    """A file containing a single figure.

    Args:
        file_name (string): The name of the file the figure will be
            stored in.  Any previously existing file with this name
            will be overwritten.  The file name extension determines
            the file type.  Available file types are `.pdf`, `.ps`,
            `.eps`, `.svg` and `.png`.  The name "/dev/null" draws the
            figure without writing any output.
        width: The figure width.  This can either be a number to give
            the width in device units (pixels), or a string including a
            length unit like "10cm".  The values "A4" and "A4r" select
            A4 paper in portrait and landscape orientation, with 15mm
            of padding.
        height: The figure height, in the same format as `width`.  If
            this is omitted, the figure is square.
        res (number, optional): The device resolution in pixels per
            inch.  Defaults to 100 for PNG files and to 72 otherwise.
        style (dict, optional): Default plot graphics values for the
            figure.

    """

    def __init__(self, file_name, width, height=None, *, res=None, style=None):
        file_type = _file_type(file_name)
        if height is None and width in _PAPER:
            width, height = _PAPER[width]
            style = param.merge(dict(padding="15mm"), style)
        elif height is None:
            height = width

        if res is None:
            res = 100 if file_type == 'png' else 72
        w = int(util.convert_dim(width, res) + 0.5)
        h = int(util.convert_dim(height, res) + 0.5)
        if w <= 0 or h <= 0:
            raise ValueError(f"invalid plot size {width!r} x {height!r}")

        # Vector formats measure the page in PostScript points, raster
        # images in pixels.
        q = (res if file_type == 'png' else 72) / res
        surface = _SURFACES[file_type](file_name, int(w * q + .5),
                                       int(h * q + .5))
        ctx = cairo.Context(surface)
        # device coordinates have the origin in the bottom left corner
        ctx.scale(q, -q)
        ctx.translate(0, -h)

        super().__init__(ctx, [0, 0, w, h], res=res, style=style)
        self.surface = surface

        self.file_name = file_name
        """The output file name, as given in the ``file_name`` argument of the
        ``plot.Plot`` constructor (read only)."""

        self.file_type = file_type

    def __str__(self):
        _, _, w, h = self.rect
        res = self.res
        return f'<tickplot.Plot {w/res:g}in x {h/res:g}in {self.file_name!r}>'

    def close(self):
        """Draw the pending axis decorations and write the figure to the
        file.  The ``Plot`` object cannot be used any more after this
        call; closing it again has no effect.

        """
        if self.surface is None:
            return
        super().close()
        surface, self.surface = self.surface, None
        if self.file_type == 'png':
            surface.write_to_png(self.file_name)
        else:
            surface.finish()
        if self.file_type is not None:
            _log.debug("wrote %s", self.file_name)
