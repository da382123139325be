#!/usr/bin/env python
# encoding: utf-8

import os
import runpy

from setuptools import setup

here = os.path.dirname(os.path.abspath(__file__))
package = runpy.run_path(os.path.join(here, 'plisthelper', 'about.py'))

with open(os.path.join(here, 'plisthelper', '__init__.py')) as init_file:
    long_description = init_file.read().split('"""')[1]

setup(
      name = 'plisthelper',
      version = package['__version__'],
      packages = package['__packages__'],
      author = package['__author__'],
      description = package['__description__'],
      license = package['__license__'],
      long_description = long_description,
      platforms = package['__platforms__'],
      classifiers = package['__classifiers__'],
      install_requires = package['__install_requires__'],
      extras_require = package['__extras_require__'],
      python_requires = '>=3.7',
)
