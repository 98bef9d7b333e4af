"""CLI output utilities and formatting."""

from colorama import Fore, Style

# ASCII art banner for the help screen
BANNER = f"""
{Fore.YELLOW}╔════════════════════════════════════════════════╗{Style.RESET_ALL}
{Fore.YELLOW}║{Style.RESET_ALL}   {Fore.CYAN}{Style.BRIGHT}objdumper{Style.RESET_ALL}                                    {Fore.YELLOW}║{Style.RESET_ALL}
{Fore.YELLOW}║{Style.RESET_ALL}   {Fore.WHITE}Dump git objects, inflate zlib streams{Style.RESET_ALL}       {Fore.YELLOW}║{Style.RESET_ALL}
{Fore.YELLOW}╚════════════════════════════════════════════════╝{Style.RESET_ALL}
"""

_color_enabled = True


def set_color(enabled: bool) -> None:
    """Turn coloured message formatting on or off."""
    global _color_enabled
    _color_enabled = enabled


def _paint(color: str, glyph: str, message: str) -> str:
    if not _color_enabled:
        return f"{glyph} {message}"
    return f"{color}{glyph} {message}{Style.RESET_ALL}"


def success(message: str) -> str:
    """Format success message in green."""
    return _paint(Fore.GREEN, "✓", message)


def info(message: str) -> str:
    """Format info message in cyan."""
    return _paint(Fore.CYAN, "→", message)


def warning(message: str) -> str:
    """Format warning message in yellow."""
    return _paint(Fore.YELLOW, "⚠", message)


def error(message: str) -> str:
    """Format error message in red."""
    return _paint(Fore.RED, "✗", message)
