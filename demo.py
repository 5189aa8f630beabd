#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Example using `assoc_array` to count words from a text file.

see copyright/license https://github.com/senzing-garage/sz-semantics/README.md
"""

import logging
import pathlib
import sys

from assoc_array import AssociativeArray, KeyNotFoundError


if __name__ == "__main__":
    logger: logging.Logger = logging.getLogger(__name__)
    logging.basicConfig(level = logging.WARNING) # DEBUG

    if len(sys.argv) < 2:
        print("needs a file path specified as a CLI argument")
        sys.exit(-1)

    counts: AssociativeArray[str, int] = AssociativeArray()

    ## tally each word in the text, from the CLI argument
    text_path: pathlib.Path = pathlib.Path(sys.argv[1])

    with open(text_path, "r", encoding = "utf-8") as fp:
        for line in fp:
            for word in line.lower().split():
                if counts.has_key(word):
                    counts.set(word, counts.get(word) + 1)
                else:
                    counts.set(word, 1)

    print(f"   ###  {counts.size()} DISTINCT WORDS, {counts.capacity} SLOTS:")
    print(counts.format())

    ## drop the words seen only once, in a copy
    common: AssociativeArray[str, int] = counts.clone()

    for pair in counts.pairs:
        if pair is not None and pair.value == 1:
            common.remove(pair.key)

    print("\n\n")
    print(f"   ###  {common.size()} REPEATED WORDS:")
    print(common.format())

    try:
        common.get("")
    except KeyNotFoundError as ex:
        print("\n\n")
        print(f"   ###  LOOKUP FAILED: {ex}")
