#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Allocate the backing sequence of slots.

see copyright/license https://github.com/senzing-garage/sz-semantics/README.md
"""


class SlotStore:  # pylint: disable=R0903
    """
Allocate a backing sequence of empty slots, aka a Python `list` of
`None` values -- which a given use case can override to use an
alternative sequence type if needed.
    """

    def allocate (
        self,
        capacity: int,
        ) -> list:
        """
Override if you want to use an alternative to the Python built-in
`list` data structure.
        """
        return [ None ] * capacity
