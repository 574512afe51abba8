# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

# Read by setup.py with a regular expression, keep it a plain string
__version__ = "0.1.0"
