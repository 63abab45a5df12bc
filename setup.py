#!/usr/bin/env python3

# The MIT License (MIT)
# Copyright (c) 2022 by the xcube team and contributors
#
# Permission is hereby granted, free of charge, to any person obtaining a
# copy of this software and associated documentation files (the "Software"),
# to deal in the Software without restriction, including without limitation
# the rights to use, copy, modify, merge, publish, distribute, sublicense,
# and/or sell copies of the Software, and to permit persons to whom the
# Software is furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING
# FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER
# DEALINGS IN THE SOFTWARE.

import os

from setuptools import setup, find_packages


requirements = [
    "click>=8.0",
    "fsspec>=2021.6",
    "jsonschema>=3.2",
    "numpy>=1.16",
    "pyproj>=3.0",
    "pyyaml>=5.4",
    "shapely>=2.1",
]

test_requirements = [
    "pytest",
]

packages = find_packages(exclude=["test", "test.*"])

# Same effect as "from geolayer import version", but avoids importing geolayer:
version = None
with open('geolayer/version.py') as f:
    exec(f.read())

# noinspection PyTypeChecker
setup(
    name=os.getenv("GEOLAYER_PYPI_NAME", "geolayer"),
    version=version,
    description=('geolayer provides map layers that store geometries in one '
                 'coordinate reference system and present them in another.'),
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    license='MIT',
    author='xcube Development Team',
    packages=packages,
    entry_points={
        'console_scripts': [
            # geolayer's CLI
            'geolayer = geolayer.cli.main:main',
        ],
    },
    install_requires=requirements,
    extras_require={
        'test': test_requirements,
    },
    python_requires='>=3.9',
    # these classifiers will be shown in the left panel on PyPI
    # they to not interfer with pip install and are meta data for the user
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Science/Research',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Software Development',
        'Topic :: Scientific/Engineering :: GIS',
        'Typing :: Typed',
        'Operating System :: Microsoft :: Windows',
        'Operating System :: POSIX',
        'Operating System :: Unix',
        'Operating System :: MacOS',
    ]
)
