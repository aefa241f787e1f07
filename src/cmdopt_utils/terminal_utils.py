import sys
from typing import Optional
from termcolor import colored


def terminal_color(value: str,
                   color: Optional[str] = None,
                   bold: bool = False,
                   underline: bool = False,
                   nocolor: bool = False) -> str:
    if nocolor is True:
        return value
    attributes = []
    if bold is True:
        attributes.append("bold")
    if underline is True:
        attributes.append("underline")
    if isinstance(color, str) and color:
        return colored(value, color.lower(), attrs=attributes)
    return colored(value, attrs=attributes)


def print_error(message: str, nocolor: bool = False) -> None:
    print(terminal_color(f"ERROR: {message}", "red", nocolor=nocolor), file=sys.stderr)
