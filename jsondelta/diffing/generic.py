# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..redact import redact
from ..tree import Kind, kind_of, all_keys

from .comparing import deep_equal
from .config import DiffConfig

__all__ = ["diff_dicts"]


def _format_change(old_value, new_value, path, config):
    "Strip ignored keys from both values and hand them to the formatter."
    return config.formatter(
        redact(old_value, path, config.ignore),
        redact(new_value, path, config.ignore))


def diff_dicts(a, b, path=(), config=None):
    """Compute the diff of two json objects.

    Returns an object with an entry for each key where a and b differ.
    Nested objects are diffed recursively and only show up in the
    result if some key below them changed. Any other changed value,
    arrays included, is passed through the configured formatter and
    reported as a whole. Keys at ignored paths are left out entirely.

    Keys missing on one side are compared as null.
    """
    if config is None:
        config = DiffConfig()

    if kind_of(a) != Kind.OBJECT or kind_of(b) != Kind.OBJECT:
        raise TypeError('Arguments to diff_dicts need to be dicts, got %r and %r' % (a, b))

    path = tuple(path)
    result = {}

    for key in all_keys(a, b):
        subpath = path + (key,)
        if config.is_ignored(subpath):
            continue

        avalue = a.get(key)
        bvalue = b.get(key)
        a_is_object = kind_of(avalue) == Kind.OBJECT
        b_is_object = kind_of(bvalue) == Kind.OBJECT

        if a_is_object and b_is_object:
            # Both are objects, only keep subkeys with changes
            dd = diff_dicts(avalue, bvalue, path=subpath, config=config)
            if dd:
                result[key] = dd
        elif a_is_object or b_is_object:
            # One is an object, the other is not, must be a change
            result[key] = _format_change(avalue, bvalue, subpath, config)
        elif not deep_equal(avalue, bvalue):
            # We don't dive into arrays, the entire array is shown as changed
            result[key] = _format_change(avalue, bvalue, subpath, config)

    return result
