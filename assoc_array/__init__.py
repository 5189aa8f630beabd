#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Package definitions.

see copyright/license https://github.com/senzing-garage/sz-semantics/README.md
"""

from .assoc import AssociativeArray  # noqa: F401

from .error import KeyNotFoundError  # noqa: F401

from .pair import KVPair  # noqa: F401

from .util import SlotStore  # noqa: F401
