#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
A basic associative array: key/value pairs stored in a sequence of
slots, with lookup by equality comparison rather than hashing.

see copyright/license https://github.com/senzing-garage/sz-semantics/README.md
"""

import logging
import typing

from .error import KeyNotFoundError
from .pair import KVPair
from .util import SlotStore


K = typing.TypeVar("K")
V = typing.TypeVar("V")


class AssociativeArray (typing.Generic[K, V]):
    """
Store key/value pairs and permit you to look up values by key.

Keys are compared with `==` in a linear scan, so they need not be
hashable. A `None` key is never stored.
    """
    DEFAULT_CAPACITY: int = 16


    def __init__ (
        self,
        *,
        slot_store: SlotStore = SlotStore(),
        ) -> None:
        """
Constructor.

Override `SlotStore` to replace the Python built-in `list` used as the
backing sequence of slots.
        """
        self.logger: logging.Logger = logging.getLogger(__name__)
        self.slot_store: SlotStore = slot_store

        self.pairs: list[ KVPair[K, V] | None ] = self.slot_store.allocate(self.DEFAULT_CAPACITY)
        self.count: int = 0


    @property
    def capacity (
        self,
        ) -> int:
        """
Number of slots currently allocated.
        """
        return len(self.pairs)


    ######################################################################
    ## public operations

    def set (
        self,
        key: K,
        value: V,
        *,
        debug: bool = False,
        ) -> None:
        """
Associate `value` with `key`, so that future calls to `get(key)` will
return `value`. A `None` key is ignored.
        """
        if key is None:
            if debug:
                self.logger.debug("ignored set() on a None key")

            return

        index: int | None = self._locate(key)

        if index is not None:
            pair: KVPair[K, V] = self.pairs[index]  # type: ignore
            pair.value = value

            if debug:
                log_msg: str = f"update: {key!r} at slot {index}"
                self.logger.debug(log_msg)

            return

        i: int = 0

        # the scan grows the sequence upon reaching its last slot,
        # so it always ends at an empty slot
        while i < len(self.pairs):
            if i == len(self.pairs) - 1:
                self.expand()

            if self.pairs[i] is None:
                self.pairs[i] = KVPair(key, value)
                self.count += 1

                if debug:
                    log_msg = f"insert: {key!r} at slot {i}"
                    self.logger.debug(log_msg)

                return

            i += 1


    def get (
        self,
        key: K,
        ) -> V:
        """
Get the value associated with `key`.

Raises `KeyNotFoundError` when the key does not appear in the
associative array, or is `None`.
        """
        index: int = self.find(key)
        return self.pairs[index].value  # type: ignore


    def has_key (
        self,
        key: K,
        ) -> bool:
        """
Determine whether `key` appears in the associative array.
        """
        return self._locate(key) is not None


    def remove (
        self,
        key: K,
        *,
        debug: bool = False,
        ) -> None:
        """
Remove the key/value pair associated with `key`. Future calls to
`get(key)` will raise an error. If the key does not appear in the
associative array, this does nothing.
        """
        index: int | None = self._locate(key)

        if index is None:
            return

        self.pairs[index] = None
        self.count -= 1

        if debug:
            log_msg: str = f"remove: {key!r} from slot {index}"
            self.logger.debug(log_msg)


    def size (
        self,
        ) -> int:
        """
Determine how many key/value pairs are in the associative array.
        """
        return self.count


    def clone (
        self,
        ) -> "AssociativeArray[K, V]":
        """
Create a copy of this associative array, with the same capacity and
a new pair in each occupied slot. Keys and values themselves are
shared by reference, not deep-copied.
        """
        dup: AssociativeArray[K, V] = AssociativeArray(slot_store = self.slot_store)

        while dup.capacity < self.capacity:
            dup.expand()

        for i, pair in enumerate(self.pairs):
            if pair is not None:
                dup.pairs[i] = pair.copy()

        dup.count = self.count
        return dup


    def format (
        self,
        ) -> str:
        """
Render as `{ k1: v1, k2: v2 }` in slot order, which after removals
need not match insertion order.
        """
        if self.count == 0:
            return "{}"

        items: list[ str ] = [
            str(pair)
            for pair in self.pairs
            if pair is not None
        ]

        return "{ " + ", ".join(items) + " }"


    def find (
        self,
        key: K,
        ) -> int:
        """
Find the index of the first slot that contains `key`.

Raises `KeyNotFoundError` if there is no such slot.
        """
        index: int | None = self._locate(key)

        if index is None:
            raise KeyNotFoundError(key)

        return index


    def expand (
        self,
        ) -> None:
        """
Double the capacity of the backing sequence, keeping every existing
slot in its position.
        """
        old_capacity: int = len(self.pairs)
        self.pairs.extend(self.slot_store.allocate(old_capacity))

        log_msg: str = f"expand: {old_capacity} => {len(self.pairs)} slots"
        self.logger.debug(log_msg)


    def _locate (
        self,
        key: K,
        ) -> int | None:
        """
Linear scan for the slot holding `key`, returning its index or `None`.
        """
        if key is None:
            return None

        for i, pair in enumerate(self.pairs):
            if pair is not None and pair.key == key:
                return i

        return None


    ######################################################################
    ## Python protocols

    # not iterable, not even through the `__getitem__(0), __getitem__(1), ...` fallback
    __iter__ = None  # type: ignore


    def __len__ (
        self,
        ) -> int:
        return self.size()


    def __contains__ (
        self,
        key: object,
        ) -> bool:
        return self.has_key(key)  # type: ignore


    def __getitem__ (
        self,
        key: K,
        ) -> V:
        return self.get(key)


    def __setitem__ (
        self,
        key: K,
        value: V,
        ) -> None:
        self.set(key, value)


    def __delitem__ (
        self,
        key: K,
        ) -> None:
        self.remove(key)


    def __copy__ (
        self,
        ) -> "AssociativeArray[K, V]":
        return self.clone()


    def __str__ (
        self,
        ) -> str:
        return self.format()


    def __repr__ (
        self,
        ) -> str:
        return f"AssociativeArray({self.format()})"
