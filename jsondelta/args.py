# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import logging
import sys

from ._version import __version__
from .config import (
    get_defaults_for_argparse, build_config, entrypoint_configurables,
)
from .formatters import formatters
from .log import init_logging, set_jsondelta_log_level


class ConfigBackedParser(argparse.ArgumentParser):

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(' ')[0]
        try:
            defs = get_defaults_for_argparse(entrypoint)
            self.set_defaults(**defs)
        except ValueError:
            pass
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    def __init__(self, option_strings, dest, default=None, **kwargs):
        # __call__ is not called if option not given:
        level = getattr(logging, default or 'INFO')
        init_logging(level=level)
        set_jsondelta_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        level = getattr(logging, values)
        set_jsondelta_log_level(level, True)


def modify_config_for_print(config):
    output = {}
    for k, v in config.items():
        if isinstance(v, dict):
            output[k] = modify_config_for_print(v)
            if not output[k]:
                output[k] = '{}'
        elif v is None:
            output[k] = '<unset>'
        else:
            output[k] = json.dumps(v)
    return output


class ConfigHelpAction(argparse.Action):
    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        from .prettyprint import pretty_print_dict, PrettyPrintConfig

        header = entrypoint_configurables[parser.prog].__name__
        config = build_config(parser.prog, True)
        pretty_print_dict(
            {
                header: modify_config_for_print(config),
            },
            config=PrettyPrintConfig(out=sys.stderr, use_color=False)
        )
        sys.exit(1)


class AppendIgnoreAction(argparse.Action):
    """Action appending to the list of ignored paths.

    Works on a copy, so the configured default list is extended
    rather than modified in place.
    """

    def __call__(self, parser, namespace, values, option_string=None):
        current = list(getattr(namespace, self.dest, None) or [])
        current.append(values)
        setattr(namespace, self.dest, current)


def add_generic_args(parser):
    """Adds a set of arguments common to all jsondelta commands.
    """
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--config',
        help="list the valid config keys and their current effective values",
        action=ConfigHelpAction,
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        help="set the log level by name.",
        action=LogLevelAction,
    )


def add_diff_args(parser):
    """Adds a set of arguments for commands that perform diffs.
    """
    parser.add_argument(
        '-f', '--format',
        default='new',
        choices=sorted(formatters),
        help="how to show changed values: the new value (default), "
             "the old value, or both as {\"Old\": ..., \"New\": ...}.")
    parser.add_argument(
        '-i', '--ignore',
        default=[],
        metavar='PATH',
        action=AppendIgnoreAction,
        help="leave the value at PATH out of the diff. "
             "PATH is on the form /a/b or a.b. Can be repeated.")


def add_output_args(parser):
    """Adds a set of arguments controlling how a diff is written.
    """
    parser.add_argument(
        '--out',
        default=None,
        help="if supplied, the diff is written to this file, "
             "without colors when --pretty is given. "
             "Otherwise it is printed to the terminal.")
    parser.add_argument(
        '--indent',
        default=None,
        type=int,
        help="indent the json output by this many spaces. "
             "Not used with --pretty.")
    parser.add_argument(
        '--pretty',
        action='store_true', default=False,
        help="print a human readable listing of the changes instead of json.")
    parser.add_argument(
        '--no-color',
        dest='color',
        action='store_false',
        help="do not use colors in pretty printed output.")


def prettyprint_config_from_args(args, **kwargs):
    """Create a PrettyPrintConfig for the format and color flags in args.

    Keyword arguments are passed on, and take precedence over args.
    """
    from .prettyprint import config_for_format

    kwargs.setdefault('use_color', getattr(args, 'color', True))
    return config_for_format(getattr(args, 'format', 'new'), **kwargs)
