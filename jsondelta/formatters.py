# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Formatters control how a changed value is represented in a diff.

A formatter is called once for every divergence with the old and the
new value (already stripped of ignored keys) and returns the value
to store in the diff. E.g. to show only the new value, the formatter
returns new_value. Formatters must not modify their arguments.
"""

__all__ = ["new_only", "old_only", "both_as_pair", "default_format",
           "formatters", "get_formatter"]


def new_only(old_value, new_value):
    "Show what the value became."
    return new_value


def old_only(old_value, new_value):
    "Show what the value was."
    return old_value


def both_as_pair(old_value, new_value):
    "Show both values as {'Old': old_value, 'New': new_value}."
    return {
        "Old": old_value,
        "New": new_value,
    }


default_format = new_only


# Formatters that can be selected by name from the command line and config
formatters = {
    "new": new_only,
    "old": old_only,
    "both": both_as_pair,
}


def get_formatter(name):
    try:
        return formatters[name]
    except KeyError:
        raise ValueError('Unknown formatter %r. Valid values are %r.' % (
            name, sorted(formatters)))
