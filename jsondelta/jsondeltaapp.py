# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import os
import sys

from .args import (
    add_generic_args, add_diff_args, add_output_args, ConfigBackedParser,
    prettyprint_config_from_args,
    )
from .diffing import diff_format
from .errors import JsonDeltaError
from .formatters import get_formatter
from .log import error
from .prettyprint import pretty_print_diff
from .utils import EXPLICIT_MISSING_FILE, read_json, setup_std_streams


_description = "Compute the changed values between two json documents."


def main_diff(args):
    """Main handler of jsondelta CLI"""
    base = args.base
    remote = args.remote
    output = getattr(args, 'out', None)

    # Check that if args are filenames they either exist, or are
    # explicitly marked as missing (added/removed):
    for fn in (base, remote):
        if (isinstance(fn, str) and not os.path.exists(fn) and
                fn != EXPLICIT_MISSING_FILE):
            print("Missing file {}".format(fn))
            return 1

    try:
        a = read_json(base, on_null='empty')
        b = read_json(remote, on_null='empty')
    except ValueError as e:
        error("Could not read json from %s and %s: %s", base, remote, e)
        return 2

    try:
        if args.pretty:
            _pretty_print(args, a, b, output)
            return 0

        d = diff_format(a, b, get_formatter(args.format),
                        ignore=args.ignore, indent=args.indent)
    except JsonDeltaError as e:
        error("Could not diff %s and %s: %s", base, remote, e)
        return 2

    # Output as JSON to file, or print to stdout:
    if output:
        with open(output, "wb") as df:
            df.write(d)
            df.write(b"\n")
    else:
        print(d.decode("utf-8"))

    return 0


def _pretty_print(args, a, b, output):
    if output:
        # No escape codes in files
        with io.open(output, "w", encoding="utf-8") as df:
            config = prettyprint_config_from_args(args, out=df, use_color=False)
            pretty_print_diff(args.base, args.remote, a, b,
                              ignore=args.ignore, config=config)
        return

    # This printer is to keep the unit tests passing,
    # some tests capture output with capsys which doesn't
    # pick up on sys.stdout.write()
    class Printer:
        def write(self, text):
            print(text, end="")
    config = prettyprint_config_from_args(args, out=Printer())
    pretty_print_diff(args.base, args.remote, a, b,
                      ignore=args.ignore, config=config)


def _build_arg_parser(prog="jsondelta"):
    """Creates an argument parser for the jsondelta command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_diff_args(parser)
    add_output_args(parser)

    parser.add_argument(
        "base", help="the base (old) json filename.")
    parser.add_argument(
        "remote", help="the remote (new) json filename.")

    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())
