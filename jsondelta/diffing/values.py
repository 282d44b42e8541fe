# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Diffing of arbitrary values.

Both values are first normalized to json trees, then compared with
`diff_dicts`. The result is a tree holding only the changed keys,
returned as is by `diff_tree` or as canonical json by the others.
"""

from .. import log
from ..annotations import ignored_paths
from ..encoding import encode
from ..errors import InvalidRootShapeError
from ..formatters import default_format, both_as_pair
from ..ignores import IgnoreSet
from ..normalize import normalize
from ..tree import Kind, kind_of

from .config import DiffConfig
from .generic import diff_dicts

__all__ = ["diff", "diff_old_new", "diff_format", "diff_tree"]


def collect_ignores(old_value, new_value, ignore=None):
    """Merge explicit ignore paths with those declared on the value types."""
    ignores = IgnoreSet.coerce(ignore)
    types = []
    for value in (old_value, new_value):
        if type(value) not in types:
            types.append(type(value))
    for t in types:
        declared = ignored_paths(t)
        if declared:
            ignores = ignores.union(declared)
    return ignores


def _normalize_root(value, name):
    tree = normalize(value)
    if kind_of(tree) != Kind.OBJECT:
        raise InvalidRootShapeError(
            'Can only diff values that convert to json objects, '
            'but the %s value converted to %s' % (name, kind_of(tree)))
    return tree


def diff_tree(old_value, new_value, formatter=default_format, ignore=None):
    """Compute the tree of changes between two values.

    Both values need to convert to json objects (dicts, dataclasses,
    mappings, named tuples). Raises NormalizationError for values
    that cannot be converted and InvalidRootShapeError for values
    that do not convert to an object.
    """
    config = DiffConfig(
        ignore=collect_ignores(old_value, new_value, ignore),
        formatter=formatter,
    )
    a = _normalize_root(old_value, 'old')
    b = _normalize_root(new_value, 'new')
    if config.ignore:
        log.debug('Diffing with %d ignored path(s): %r', len(config.ignore), config.ignore)
    return diff_dicts(a, b, config=config)


def diff_format(old_value, new_value, formatter, ignore=None, indent=None):
    """Compare old_value with new_value and return json of the changed values.

    The formatter decides how each changed value is represented.
    """
    d = diff_tree(old_value, new_value, formatter=formatter, ignore=ignore)
    # Custom formatters may return any convertible value
    return encode(normalize(d), indent=indent)


def diff(old_value, new_value, ignore=None, indent=None):
    "Compare old_value with new_value and return json of the new values."
    return diff_format(old_value, new_value, default_format, ignore=ignore, indent=indent)


def diff_old_new(old_value, new_value, ignore=None, indent=None):
    "Compare old_value with new_value and return json of {'Old': ..., 'New': ...} pairs."
    return diff_format(old_value, new_value, both_as_pair, ignore=ignore, indent=indent)
