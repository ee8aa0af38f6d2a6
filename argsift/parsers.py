# Argsift Token Classifier — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides the argparse parser for the `python -m argsift` inspection CLI.

The CLI classifies the tokens given after `--` and prints the result, which is
handy for checking how a command line will be split before wiring a
`TokenParser` into an application.
"""
from argparse import ArgumentParser, Namespace
from typing import Sequence

from argsift import __version__
from argsift.utils import LOG_MODES


def get_root_parser(
    prog: str | None = "argsift",
    description: str | None = "Classify command-line tokens into positionals, flags and parameters.",
    epilog: str | None = "Example: argsift --mode param -p out -- build -v --out dist",
) -> ArgumentParser:
    """
    Construct the ArgumentParser for the inspection CLI.

    Notes:
        ```
        --mode MODE          : ParseMode names joined by '|' or ',' (default: prefer_flag).
        -p / --param NAME    : Register NAME as a parameter (repeatable).
        --json               : Print the result as JSON instead of a table.
        --log-mode MODE      : "cli" or "json" log output.
        -v / --verbose       : Enable debug logging.
        --version            : Print the Argsift version.
        tokens               : The tokens to classify, after `--`.
        ```
    """
    parser = ArgumentParser(prog=prog, description=description, epilog=epilog)
    parser.add_argument(
        "--mode",
        default="prefer_flag",
        help="ParseMode names joined by '|' or ',' (e.g. 'param|multiflag').",
    )
    parser.add_argument(
        "-p",
        "--param",
        action="append",
        default=[],
        metavar="NAME",
        help="Register NAME as a parameter that always takes a value.",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print the result as JSON."
    )
    parser.add_argument(
        "--log-mode",
        choices=LOG_MODES,
        default=None,
        help="Log output format (default: $ARGSIFT_LOG_MODE or 'cli').",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "tokens",
        nargs="*",
        help="Tokens to classify. Put them after '--' so they are not read as options here.",
    )
    return parser


def parse_cli_args(args: Sequence[str] | None = None) -> Namespace:
    return get_root_parser().parse_args(args)
