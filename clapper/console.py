# Clapper Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for Clapper command-line programs."""
from rich.console import Console
from rich.theme import Theme

CLAPPER_THEME = Theme(
    {
        "clapper.command": "bold cyan",
        "clapper.name": "bold",
        "clapper.value": "green",
        "clapper.default": "dim",
        "clapper.error": "bold red",
    }
)

console = Console(theme=CLAPPER_THEME)
