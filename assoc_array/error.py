#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Errors raised by the associative array.

see copyright/license https://github.com/senzing-garage/sz-semantics/README.md
"""

import typing


class KeyNotFoundError (KeyError):
    """
A requested key has no matching occupied slot, or the key was `None`.
    """

    def __init__ (
        self,
        key: typing.Any,
        ) -> None:
        super().__init__(key)
        self.key: typing.Any = key


    def __str__ (
        self,
        ) -> str:
        return f"key not found: {self.key!r}"
