# Argsift Token Classifier — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for Argsift output."""
from rich.console import Console

console = Console(highlight=False)
