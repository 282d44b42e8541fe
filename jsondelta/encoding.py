# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json

__all__ = ["encode", "dumps"]


def dumps(tree, indent=None):
    """Serialize a tree to canonical json text.

    Object keys are sorted at every level so the output is reproducible.
    Compact separators are used unless an indent is given.
    """
    if indent is None:
        separators = (",", ":")
    else:
        separators = (",", ": ")
    return json.dumps(tree, sort_keys=True, indent=indent, separators=separators,
                      ensure_ascii=False, allow_nan=False)


def encode(tree, indent=None):
    "Serialize a tree to canonical utf-8 encoded json."
    return dumps(tree, indent=indent).encode("utf-8")
