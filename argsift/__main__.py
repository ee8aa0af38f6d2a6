"""
Argsift Token Classifier

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import sys
from typing import Sequence

from rich.markup import escape

from argsift.console import console
from argsift.exceptions import ArgsiftError
from argsift.logger import logger
from argsift.parser import TokenParser
from argsift.parsers import parse_cli_args
from argsift.render import build_result_table, to_dict
from argsift.utils import setup_logging


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_cli_args(argv)
    setup_logging(
        mode=args.log_mode,
        console_log_level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    parser = TokenParser(params=args.param)
    try:
        parser.parse(args.tokens, args.mode)
    except (ArgsiftError, ValueError) as error:
        logger.debug("Classification failed: %s", error)
        console.print(f"[bold red]error:[/] {escape(str(error))}")
        return 2

    if args.json:
        console.print_json(data=to_dict(parser))
    else:
        console.print(build_result_table(parser, title=f"mode: {parser.mode}"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
