# Argsift Token Classifier — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Rich and JSON views of a classified `TokenParser`.

Functions:
- build_result_table(parser): Returns a `rich.Table` listing every classified token.
- to_dict(parser): Returns a JSON-serializable summary of the containers.
"""
from typing import Any

from rich import box
from rich.markup import escape
from rich.table import Table

from argsift.parser.token_parser import TokenParser


def build_result_table(parser: TokenParser, title: str | None = None) -> Table:
    """Table of positionals, flags and parameters, one row per entry."""
    table = Table(title=title, box=box.SIMPLE)
    table.add_column("Kind", style="bold")
    table.add_column("Name")
    table.add_column("Value")

    for index, value in enumerate(parser.positionals):
        table.add_row("positional", str(index), escape(value))
    for name, count in parser.flags.items():
        table.add_row("flag", escape(name), f"x{count}" if count > 1 else "")
    for name, value in parser.params.items():
        table.add_row("param", escape(name), escape(value))

    return table


def to_dict(parser: TokenParser) -> dict[str, Any]:
    return {
        "mode": str(parser.mode),
        "registered": list(parser.registry),
        "positionals": list(parser.positionals),
        "flags": dict(parser.flags),
        "params": dict(parser.params),
    }
