# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import sys

from .jpatchapp import main


if __name__ == "__main__":
    # This is triggered by "python -m jpatch <args>"
    sys.exit(main())
