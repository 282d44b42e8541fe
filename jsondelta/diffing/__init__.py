# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .comparing import deep_equal
from .config import DiffConfig
from .generic import diff_dicts
from .values import diff, diff_old_new, diff_format, diff_tree

__all__ = ["diff", "diff_old_new", "diff_format", "diff_tree",
           "diff_dicts", "deep_equal", "DiffConfig"]
