# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .annotations import ignored_field, ignored_paths
from .diffing import diff, diff_old_new, diff_format, diff_tree, diff_dicts, DiffConfig
from .errors import JsonDeltaError, NormalizationError, InvalidRootShapeError
from .formatters import new_only, old_only, both_as_pair, default_format
from .ignores import IgnoreSet
from .normalize import normalize


__all__ = [
    "__version__",
    "diff", "diff_old_new", "diff_format", "diff_tree",
    "diff_dicts", "DiffConfig", "IgnoreSet",
    "new_only", "old_only", "both_as_pair", "default_format",
    "ignored_field", "ignored_paths", "normalize",
    "JsonDeltaError", "NormalizationError", "InvalidRootShapeError",
    ]
