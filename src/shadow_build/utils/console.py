"""Console utility functions for formatting and output."""

from typing import Any, Mapping, Optional

import click
from colorama import Fore, Style, init
from rich.console import Console
from rich.table import Table
from rich.text import Text

init(autoreset=True)


# Status symbols for consistent iconography
STATUS_SYMBOLS = {
    'success': '✨',
    'info': '💡',
    'warning': '⚠️',
    'error': '❌',
    'check': '✅',
    'list': '📋',
}


def _get_console() -> Optional[Any]:
    """Get Rich console instance bound to the current stdout."""
    try:
        return Console()
    except Exception:
        return None


def _rich_echo(message: str, color: str = "white", bold: bool = False, symbol: str = None):
    """Echo message with Rich formatting or colorama fallback."""
    if symbol and symbol in STATUS_SYMBOLS:
        message = f"{STATUS_SYMBOLS[symbol]} {message}"

    console = _get_console()
    if console:
        style_str = f"bold {color}" if bold else color
        # Messages may contain paths or values with square brackets
        console.print(message, style=style_str, markup=False, highlight=False)
        return

    color_map = {
        'red': Fore.RED,
        'green': Fore.GREEN,
        'yellow': Fore.YELLOW,
        'blue': Fore.BLUE,
        'cyan': Fore.CYAN,
        'white': Fore.WHITE,
    }
    color_code = color_map.get(color, Fore.WHITE)
    style_code = Style.BRIGHT if bold else ""
    click.echo(f"{color_code}{style_code}{message}{Style.RESET_ALL}")


def _rich_success(message: str, symbol: str = None):
    """Display success message with green color and bold styling."""
    _rich_echo(message, color="green", symbol=symbol, bold=True)


def _rich_error(message: str, symbol: str = None):
    """Display error message with red color."""
    _rich_echo(message, color="red", symbol=symbol)


def _rich_warning(message: str, symbol: str = None):
    """Display warning message with yellow color."""
    _rich_echo(message, color="yellow", symbol=symbol)


def _rich_info(message: str, symbol: str = None):
    """Display info message with blue color."""
    _rich_echo(message, color="blue", symbol=symbol)


def _create_facts_table(store: Mapping[str, Any], title: str = "Build facts") -> Table:
    """Create a Rich table listing constant name, value and description."""
    table = Table(title=f"{STATUS_SYMBOLS['list']} {title}", show_header=True, header_style="bold cyan")
    table.add_column("Constant", style="bold white", no_wrap=True)
    table.add_column("Value", style="cyan")
    table.add_column("Description", style="white")

    for name, val in store.items():
        value = val.rendered
        if not value and val.v:
            value = "(optional, emitted empty)"
        # Long values such as lock files would swamp the table
        first_line = value.splitlines()[0] if value else ""
        # Collected values are data, never markup
        table.add_row(Text(name.upper()), Text(first_line), Text(val.desc))

    return table
