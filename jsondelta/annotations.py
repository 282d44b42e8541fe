# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Ignore paths declared on dataclass fields.

A field created with `ignored_field` is never shown in a diff,
neither at its own level nor inside values reported as a whole:

    @dataclass
    class User:
        name: str
        password: str = ignored_field(default="")

    ignored_paths(User) == [("password",)]
"""

import collections.abc
import dataclasses
import types
import typing

from . import log

__all__ = ["METADATA_KEY", "IGNORE_MARKER", "ignored_field", "is_ignored_field",
           "ignored_paths"]


METADATA_KEY = "jsondelta"
IGNORE_MARKER = "-"

# Recursion limit for nested (and possibly self-referencing) dataclass types
DEFAULT_MAX_DEPTH = 10

_union_origins = (typing.Union, getattr(types, "UnionType", typing.Union))

_element_origins = (
    list, tuple, set, frozenset,
    collections.abc.Sequence, collections.abc.MutableSequence,
    collections.abc.Set, collections.abc.Iterable,
)


def ignored_field(**kwargs):
    "Create a dataclass field that is excluded from diffs."
    metadata = dict(kwargs.pop('metadata', None) or {})
    metadata[METADATA_KEY] = IGNORE_MARKER
    return dataclasses.field(metadata=metadata, **kwargs)


def is_ignored_field(f):
    return f.metadata.get(METADATA_KEY) == IGNORE_MARKER


def base_type(tp):
    """Unwrap Optional and container annotations to the element type.

    Returns None for mapping annotations and for unions of several
    non-None types, as those have no single type to descend into.
    """
    while True:
        origin = typing.get_origin(tp)
        args = [a for a in typing.get_args(tp) if a is not Ellipsis]
        if origin in _union_origins:
            args = [a for a in args if a is not type(None)]
            if len(args) != 1:
                return None
            tp = args[0]
        elif origin in _element_origins and args:
            if len(set(args)) != 1:
                return None
            tp = args[0]
        elif origin is not None:
            # Mappings and other generics
            return None
        else:
            return tp


def _field_types(cls):
    try:
        return typing.get_type_hints(cls)
    except (NameError, TypeError):
        log.debug('Could not resolve type hints of %s', cls.__name__)
        return {}


def ignored_paths(cls, base=(), max_depth=DEFAULT_MAX_DEPTH):
    """Collect the paths of all fields marked with `ignored_field`.

    Descends into fields whose type is a dataclass, also when wrapped
    in Optional or a sequence type, at most max_depth levels deep.
    """
    paths = []
    if max_depth == 0:
        return paths
    if not (isinstance(cls, type) and dataclasses.is_dataclass(cls)):
        return paths

    hints = _field_types(cls)
    for f in dataclasses.fields(cls):
        fpath = tuple(base) + (f.name,)
        if is_ignored_field(f):
            paths.append(fpath)

        child = base_type(hints.get(f.name, f.type))
        if isinstance(child, type) and dataclasses.is_dataclass(child):
            paths.extend(ignored_paths(child, fpath, max_depth - 1))

    return paths
