# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import pprint
import sys

import colorama

from .diffing import diff_tree
from .tree import join_path


# Indentation offset in pretty-print
IND = "  "

# Max line width used some placed in pretty-print
MAXWIDTH = 78


ColoredConstants = namedtuple('ColoredConstants', (
    'REMOVE',
    'ADD',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        REMOVE = '{color}-  '.format(color=colorama.Fore.RED),
        ADD    = '{color}+  '.format(color=colorama.Fore.GREEN),
        INFO   = '{color}## '.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        RESET  = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        REMOVE = '-  ',
        ADD    = '+  ',
        INFO   = '## ',
        RESET  = '',
    )
}


class PrettyPrintConfig:
    def __init__(
            self,
            out=sys.stdout,
            use_color=True,
            show_old=True,
            show_new=True,
            ):
        self.out = out
        self.use_color = use_color
        self.show_old = show_old
        self.show_new = show_new

    @property
    def REMOVE(self):
        return col_const[self.use_color].REMOVE

    @property
    def ADD(self):
        return col_const[self.use_color].ADD

    @property
    def INFO(self):
        return col_const[self.use_color].INFO

    @property
    def RESET(self):
        return col_const[self.use_color].RESET


DefaultConfig = PrettyPrintConfig()


# Which sides of a change to show for each named output format
_format_sides = {
    'new': (False, True),
    'old': (True, False),
    'both': (True, True),
}


def config_for_format(name, **kwargs):
    "Create a PrettyPrintConfig showing the sides of a change named by format."
    show_old, show_new = _format_sides[name]
    return PrettyPrintConfig(show_old=show_old, show_new=show_new, **kwargs)


def format_value(v):
    "Format simple value for printing."
    if not isinstance(v, str):
        # Not a string, defer to pprint
        vstr = pprint.pformat(v)
    else:
        vstr = v
    return vstr


def pretty_print_value(value, prefix="", config=DefaultConfig):
    """Print a possibly complex value with all lines prefixed.

    Calls out to generic formatters based on value
    type for dicts, lists, and multiline strings.
    Uses format_value for simple values.
    """
    if isinstance(value, dict) and value:
        pretty_print_dict(value, (), prefix, config)
    elif isinstance(value, list) and value:
        pretty_print_list(value, prefix, config)
    else:
        pretty_print_multiline(format_value(value), prefix, config)


def pretty_print_key(k, prefix, config):
    config.out.write("%s%s:\n" % (prefix, k))


def pretty_print_key_value(k, v, prefix, config):
    config.out.write("%s%s: %s\n" % (prefix, k, v))


def pretty_print_diff_action(msg, path, config):
    config.out.write("%s%s %s:%s\n" % (config.INFO, msg, path, config.RESET))


def pretty_print_item(k, v, prefix="", config=DefaultConfig):
    if isinstance(v, dict):
        pretty_print_key(k, prefix, config)
        pretty_print_dict(v, (), prefix+IND, config)
    elif isinstance(v, list):
        pretty_print_key(k, prefix, config)
        pretty_print_list(v, prefix+IND, config)
    else:
        vstr = format_value(v)
        if "\n" in vstr:
            # Multiline strings
            pretty_print_key(k, prefix, config)
            for line in vstr.splitlines(False):
                config.out.write("%s%s\n" % (prefix+IND, line))
        else:
            # Singleline strings
            pretty_print_key_value(k, vstr, prefix, config)


def pretty_print_multiline(text, prefix="", config=DefaultConfig):
    assert isinstance(text, str), 'expected string argument'

    # Preprend prefix to lines, letting lines keep their own newlines
    lines = text.splitlines(True)
    for line in lines:
        config.out.write(prefix + line)

    # If the final line doesn't have a newline,
    # make sure we still start a new line
    if not text.endswith("\n"):
        config.out.write("\n")


def pretty_print_list(li, prefix="", config=DefaultConfig):
    listr = pprint.pformat(li)
    if len(listr) < MAXWIDTH - len(prefix) and "\\n" not in listr:
        config.out.write("%s%s\n" % (prefix, listr))
    else:
        for k, v in enumerate(li):
            pretty_print_item("item[%d]" % k, v, prefix, config)


def pretty_print_dict(d, exclude_keys=(), prefix="", config=DefaultConfig):
    """Pretty-print a dict without wrapper keys

    Instead of {'key': 'value'}, do

        key: value
        key:
          long
          value

    """
    for k in sorted(set(d) - set(exclude_keys)):
        v = d[k]
        pretty_print_item(k, v, prefix, config)


class Change(namedtuple('Change', ('old', 'new'))):
    """A changed value recorded while diffing for pretty-printing."""


def iter_changes(tree, path=()):
    "Yield (path, change) for every recorded change in tree, sorted by path."
    for key in sorted(tree):
        value = tree[key]
        subpath = path + (key,)
        if isinstance(value, Change):
            yield subpath, value
        else:
            yield from iter_changes(value, subpath)


def collect_changes(old_value, new_value, ignore=None):
    """Diff two values, keeping the old and new value of every change."""
    tree = diff_tree(old_value, new_value, formatter=Change, ignore=ignore)
    return list(iter_changes(tree))


def pretty_print_change(path, change, config=DefaultConfig):
    if change.old is None:
        action = "added"
    elif change.new is None:
        action = "removed"
    else:
        action = "replaced"
    pretty_print_diff_action(action, join_path(path), config)
    if config.show_old and change.old is not None:
        pretty_print_value(change.old, config.REMOVE, config)
        config.out.write(config.RESET)
    if config.show_new and change.new is not None:
        pretty_print_value(change.new, config.ADD, config)
        config.out.write(config.RESET)


def pretty_print_diff(afn, bfn, old_value, new_value, ignore=None, config=DefaultConfig):
    """Pretty-print the changes between two values loaded from afn and bfn."""
    changes = collect_changes(old_value, new_value, ignore=ignore)
    if not changes:
        return
    config.out.write("%sjsondelta %s %s%s\n" % (config.INFO, afn, bfn, config.RESET))
    config.out.write("%s--- %s%s\n" % (config.REMOVE, afn, config.RESET))
    config.out.write("%s+++ %s%s\n" % (config.ADD, bfn, config.RESET))
    for path, change in changes:
        pretty_print_change(path, change, config)
