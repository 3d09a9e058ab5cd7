#!/usr/bin/env python

# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# -*- encoding: utf-8 -*-

from glob import glob
from os.path import basename
from os.path import splitext

from setuptools import find_packages
from setuptools import setup


setup(
    name="sdlbridge",
    version="0.0.0",
    license="GPL-3.0-or-later",
    description="SDL2 input events, translated for a GUI core",
    long_description="Converts PySDL2 events into a canonical, DPI-independent input event model.",
    author="Rose Davidson",
    author_email="rose@metaclassical.com",
    packages=find_packages("src"),
    package_dir={"": "src"},
    py_modules=[splitext(basename(path))[0] for path in glob("src/*.py")],
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        # complete classifier list: http://pypi.python.org/pypi?%3Aaction=list_classifiers
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: Implementation :: CPython",
        "Topic :: Software Development :: User Interfaces",
    ],
    keywords=["sdl2", "input", "events", "gui"],
    python_requires=">=3.10",
    install_requires=[
        "cattrs>=22.1.0",
        "msgspec",
        "PySDL2>=0.9.16",
        "pysdl2-dll",
        "trio>=0.20.0",
        "trio-util>=0.7.0",
    ],
    extras_require={
        "test": ["pytest>=6.2.4", "pytest-trio>=0.8.0"],
    },
    entry_points={
        "console_scripts": [
            "sdlbridge-events = sdlbridge.scripts:print_sdl_events",
        ],
    },
)
