# setup.py - distutils/setuptools configuration for the TickPlot package
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

"""distutils/setuptools configuration for the TickPlot package"""

import os.path
import re

from setuptools import setup

# read the version without importing the package and its dependencies
with open(os.path.join(os.path.dirname(__file__), 'tickplot', '__init__.py')) as fd:
    version = re.search(r"^__version__ = '([^']*)'", fd.read(), re.M).group(1)

setup(
    name='TickPlot',
    version=version,
    packages=['tickplot'],

    install_requires=['cairocffi', 'numpy', 'scipy'],
    extras_require={
        'test': ['pytest'],
    },

    # metadata for upload to PyPI
    author='Jochen Voss',
    author_email='voss@seehuhn.de',
    description='plots with axis ticks chosen by the extended Wilkinson algorithm',
    keywords='cairo graphics plotting axis labels ticks',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: GNU General Public License v3 or later' +
        ' (GPLv3+)',
        'Programming Language :: Python :: 3',
        'Topic :: Multimedia :: Graphics',
        'Topic :: Scientific/Engineering :: Visualization',
    ]
)
