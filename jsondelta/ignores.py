# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .tree import as_path, join_path

__all__ = ["IgnoreSet"]


class IgnoreSet(object):
    """Set of paths to exclude from a diff.

    Matching is exact: a path is ignored only if it is equal to one
    of the entries, never because an ancestor or descendant is.
    Paths can be given as sequences of key segments, or as strings
    on the form '/foo/bar' or 'foo.bar'.
    """

    def __init__(self, paths=()):
        self._paths = frozenset(as_path(p) for p in paths)

    @classmethod
    def coerce(cls, ignore):
        "Return `ignore` as an IgnoreSet, building one if needed."
        if ignore is None:
            return cls()
        if isinstance(ignore, cls):
            return ignore
        return cls(ignore)

    def is_ignored(self, path):
        return tuple(path) in self._paths

    __contains__ = is_ignored

    def union(self, other):
        return IgnoreSet(self._paths | IgnoreSet.coerce(other)._paths)

    def __len__(self):
        return len(self._paths)

    def __iter__(self):
        return iter(sorted(self._paths))

    def __bool__(self):
        return bool(self._paths)

    def __eq__(self, other):
        if not isinstance(other, IgnoreSet):
            return NotImplemented
        return self._paths == other._paths

    def __hash__(self):
        return hash(self._paths)

    def __repr__(self):
        return "IgnoreSet([%s])" % ", ".join(repr(join_path(p)) for p in self)
