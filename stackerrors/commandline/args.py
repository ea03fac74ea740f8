from argparse import ArgumentParser
from typing import List, Optional

import argcomplete

from . import subcommands


def parse(argv: Optional[List[str]] = None):
    parser = ArgumentParser(
        description="Inspect Go panic output with stackerrors.",
    )

    subparsers = parser.add_subparsers(metavar="action")

    parse_cmd = subparsers.add_parser(
        "parse",
        description="Parse the output of a Go program that panicked.",
        help="Parse Go panic output",
    )
    parse_cmd.add_argument(
        "file",
        type=str,
        default=None,
        nargs="?",
        help="File containing the panic output. Reads standard input if omitted",
    )
    parse_cmd.add_argument(
        "--trace-only",
        action="store_true",
        help="Only print the stack, without the panic message",
    )
    parse_cmd.add_argument(
        "--config",
        type=str,
        metavar="YAML",
        help="Load settings from a YAML file",
    )
    parse_cmd.add_argument(
        "--verbose", action="store_true", help="Show lines skipped while parsing"
    )
    parse_cmd.set_defaults(func=subcommands.parse)

    argcomplete.autocomplete(parser)
    args = parser.parse_args(argv)

    if "func" not in args:
        parser.print_help()
        exit(1)

    args.func(args)


def main():
    parse()
