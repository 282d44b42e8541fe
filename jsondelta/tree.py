# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""The json tree model shared by all diffing components.

Tree values are plain json-compatible Python values. Every place that
needs to branch on the shape of a value does so through `kind_of`,
which maps a value onto exactly one of the `Kind` constants.
"""


class Kind:
    "Collection of valid tree value kinds."
    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def kind_of(value):
    """Return the `Kind` of a tree value.

    Raises a TypeError for values that are not part of the tree model.
    Normalize arbitrary values with `jsondelta.normalize` first.
    """
    if value is None:
        return Kind.NULL
    # bool is a subclass of int, so it has to be checked first
    if isinstance(value, bool):
        return Kind.BOOL
    if isinstance(value, (int, float)):
        return Kind.NUMBER
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, list):
        return Kind.ARRAY
    if isinstance(value, dict):
        return Kind.OBJECT
    raise TypeError("Not a json tree value: %r" % (value,))


def all_keys(a, b):
    "Return the union of the keys of two objects, without duplicates."
    keys = list(a)
    keys.extend(k for k in b if k not in a)
    return keys


def split_path(path):
    "Split a path on the form '/foo/bar' into ['foo','bar']."
    return [x for x in path.strip("/").split("/") if x]


def join_path(*args):
    "Join a path on the form ['foo','bar'] into '/foo/bar'."
    if len(args) == 1 and isinstance(args[0], (list, tuple)):
        args = args[0]
    args = [str(a) for a in args if a not in ["", "/"]]
    ret = "/".join(args)
    return ret if ret.startswith("/") else "/" + ret


def as_path(path):
    """Convert a path given as a string or sequence of segments to a tuple.

    Strings starting with '/' are split on '/', other strings on '.'.
    The empty string and '/' both denote the root path.
    """
    if isinstance(path, str):
        if path.startswith("/"):
            return tuple(split_path(path))
        return tuple(x for x in path.split(".") if x)
    if isinstance(path, (list, tuple)):
        for segment in path:
            if not isinstance(segment, str):
                raise TypeError(
                    "Path segments need to be strings, got %r in %r" % (segment, path))
        return tuple(path)
    raise TypeError("Invalid path: %r" % (path,))
