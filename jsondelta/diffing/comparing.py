# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..tree import Kind, kind_of, all_keys

__all__ = ["deep_equal", "scalar_equal"]


def scalar_equal(a, b):
    """Compare two scalar tree values by representation.

    The kinds have to match, so "1" != 1 and True != 1,
    but numbers compare by value regardless of int/float.
    """
    return kind_of(a) == kind_of(b) and a == b


def deep_equal(a, b):
    "Structural equality of two json tree values."
    ka = kind_of(a)
    kb = kind_of(b)

    # One is an object, the other is not, must be a change
    if (ka == Kind.OBJECT) != (kb == Kind.OBJECT):
        return False

    if ka == Kind.OBJECT:
        # A key missing on one side compares as null
        for key in all_keys(a, b):
            if not deep_equal(a.get(key), b.get(key)):
                return False
        return True

    # One is an array, the other is not, must be a change
    if (ka == Kind.ARRAY) != (kb == Kind.ARRAY):
        return False

    if ka == Kind.ARRAY:
        if len(a) != len(b):
            return False
        return all(deep_equal(x, y) for x, y in zip(a, b))

    return scalar_equal(a, b)
