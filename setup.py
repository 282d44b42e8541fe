#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

JSONDELTA_PATH = HERE / "jsondelta"


def get_version(path):
    with open(path) as f:
        return re.search(r'^__version__ = "([^"]+)"', f.read(), re.M).group(1)


VERSION = get_version(JSONDELTA_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name='jsondelta',
      version=VERSION,
      description='Minimal trees of changed values between two json-like values',
      long_description=LONG_DESCRIPTION,
      long_description_content_type='text/markdown',
      license='BSD-3-Clause',
      packages=find_packages(include=['jsondelta', 'jsondelta.*']),
      python_requires='>=3.8',
      install_requires=[
          'colorama',
          'traitlets>=5',
      ],
      extras_require={
          'test': [
              'pytest>=6.0',
              'pytest-timeout',
          ],
      },
      entry_points={
          'console_scripts': [
              'jsondelta = jsondelta.jsondeltaapp:main',
          ],
      },
    )
