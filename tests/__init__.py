#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Put the repository root on the import path for running `pytest`
without installing the package.

see copyright/license https://github.com/senzing-garage/sz-semantics/README.md
"""

import pathlib
import sys

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parent.parent))
