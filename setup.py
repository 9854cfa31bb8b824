#!/usr/bin/env python3

from setuptools import setup

setup(
    name="topocontainers",
    python_requires=">= 3.9",
    install_requires=['toml', 'ruamel.yaml'],

    # http://setuptools.readthedocs.io/en/latest/setuptools.html#declaring-extras-optional-features-with-their-own-dependencies
    extras_require={
        'color': ['coloredlogs'],
    },
    version="1.0",
    description="Sort container contents according to ordering constraints",
    license="http://www.gnu.org/licenses/gpl-3.0.html",
    packages=["topocontainers", "topocontainers.utils", "topocontainers.cmd"],
    scripts=['topo']
)
