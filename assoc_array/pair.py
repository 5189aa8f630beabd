#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
The key/value record held in each occupied slot.

see copyright/license https://github.com/senzing-garage/sz-semantics/README.md
"""

import typing


K = typing.TypeVar("K")
V = typing.TypeVar("V")


class KVPair (typing.Generic[K, V]):
    """
One key/value pair, owned by exactly one slot of one container.
    """
    __slots__ = ( "key", "value", )


    def __init__ (
        self,
        key: K,
        value: V,
        ) -> None:
        self.key: K = key
        self.value: V = value


    def copy (
        self,
        ) -> "KVPair[K, V]":
        """
Shallow copy: a new pair that references the same key and value.
        """
        return KVPair(self.key, self.value)


    def __eq__ (
        self,
        other: object,
        ) -> bool:
        if not isinstance(other, KVPair):
            return NotImplemented

        return self.key == other.key and self.value == other.value


    def __str__ (
        self,
        ) -> str:
        return f"{self.key}: {self.value}"


    def __repr__ (
        self,
        ) -> str:
        return f"KVPair({self.key!r}, {self.value!r})"
