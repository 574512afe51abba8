#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

JPATCH_PATH = HERE / "jpatch"


def get_version(path):
    with open(path) as f:
        return re.search(r'^__version__ = "([^"]+)"', f.read(), re.M).group(1)


VERSION = get_version(JPATCH_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name='jpatch',
      version=VERSION,
      description='Apply RFC 6902 JSON Patches to JSON and YAML documents',
      long_description=LONG_DESCRIPTION,
      long_description_content_type='text/markdown',
      license='BSD',
      python_requires='>=3.7',
      packages=find_packages(include=['jpatch', 'jpatch.*']),
      package_data={
          'jpatch.tests': ['files/*'],
      },
      install_requires=[
          'colorama',
          'jupyter_core',
          'PyYAML>=5.1',
          'traitlets>=5',
      ],
      extras_require={
          'test': [
              'pytest>=6.0',
          ],
      },
      entry_points={
          'console_scripts': [
              'jpatch = jpatch.jpatchapp:main',
          ],
      },
      classifiers=[
          'License :: OSI Approved :: BSD License',
          'Programming Language :: Python :: 3',
      ],
    )
