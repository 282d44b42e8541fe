# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .tree import Kind, kind_of

__all__ = ["redact"]


def redact(value, path, ignore):
    """Return a copy of value without any of the ignored keys below path.

    Used when a value is reported wholesale, so that ignored fields
    nested inside it do not leak into the output. The elements of an
    array are redacted at the path of the array itself, as they carry
    no path segment of their own.

    The input value is never modified.
    """
    kind = kind_of(value)
    if kind == Kind.OBJECT:
        path = tuple(path)
        result = {}
        for key, child in value.items():
            subpath = path + (key,)
            if ignore.is_ignored(subpath):
                continue
            result[key] = redact(child, subpath, ignore)
        return result
    elif kind == Kind.ARRAY:
        return [redact(item, path, ignore) for item in value]
    else:
        return value
