# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..formatters import default_format
from ..ignores import IgnoreSet


class DiffConfig:
    """Set of ignores/formatter/other configs to pass around"""

    def __init__(self, *, ignore=None, formatter=None):
        if formatter is None:
            formatter = default_format
        if not callable(formatter):
            raise TypeError('formatter needs to be callable, got %r' % (formatter,))

        self.ignore = IgnoreSet.coerce(ignore)
        self.formatter = formatter

    def is_ignored(self, path):
        return self.ignore.is_ignored(path)
