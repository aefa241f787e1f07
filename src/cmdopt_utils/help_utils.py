from __future__ import annotations
import textwrap
from typing import List, Optional
from cmdopt_utils.option import Option
from cmdopt_utils.option_registry import OptionRegistry
from cmdopt_utils.syntax import Syntax


class HelpFormat:

    def __init__(self,
                 line_width: int = 80,
                 group_indent: int = 0,
                 option_indent: int = 2,
                 description_indent: int = 30,
                 description_continuation_indent: int = 30) -> None:
        self.line_width = max(line_width, 10) if isinstance(line_width, int) else 80
        self.group_indent = max(group_indent, 0) if isinstance(group_indent, int) else 0
        self.option_indent = max(option_indent, 0) if isinstance(option_indent, int) else 2
        self.description_indent = max(description_indent, 0) if isinstance(description_indent, int) else 30
        self.description_continuation_indent = (max(description_continuation_indent, 0)
                                                if isinstance(description_continuation_indent, int) else 30)


def wrap_text(text: str, width: int, indent: int = 0, first_line_indent: Optional[int] = None) -> str:
    if first_line_indent is None:
        first_line_indent = indent
    lines = textwrap.wrap(text, width=width,
                          initial_indent=" " * first_line_indent, subsequent_indent=" " * indent,
                          break_long_words=True, break_on_hyphens=False)
    return "\n".join(lines)


def format_option_usage(option: Option, syntax: Optional[Syntax] = None, indent: int = 0) -> str:
    """
    Returns the usage text for the given option, e.g. "-p, --pattern=PATTERN" or, for an option
    with only a long name and an optional argument, "    --tag[=TAG]" (padded to line up with
    options which do have a short name).
    """
    if not isinstance(syntax, Syntax):
        syntax = Syntax()
    usage = " " * indent
    if option.short_name:
        usage += syntax.short_prefix + option.short_name
        if option.long_name:
            usage += ", "
    else:
        usage += " " * (len(syntax.short_prefix) + 3)
    if option.long_name:
        usage += syntax.long_prefix + option.long_name
    if option.argument_name:
        if option.argument_required:
            usage += syntax.equals + option.argument_name
        else:
            usage += f"[{syntax.equals}{option.argument_name}]"
    return usage


def format_help(registry: OptionRegistry,
                syntax: Optional[Syntax] = None,
                help_format: Optional[HelpFormat] = None) -> str:
    """
    Returns the help text for all of the options in the given registry, grouped by group
    label (ungrouped options have no label line), with descriptions lined up in a column.
    """
    if not isinstance(help_format, HelpFormat):
        help_format = HelpFormat()
    width = help_format.line_width
    groups = []
    for group in registry.groups():
        if not (options := registry.group_options(group)):
            continue
        lines: List[str] = []
        if group:
            lines.append(wrap_text(group, width, help_format.group_indent))
        for option in options:
            usage = format_option_usage(option, syntax, help_format.option_indent)
            spacing = help_format.description_indent - len(usage)
            if spacing <= 1:
                lines.append(wrap_text(usage, width, len(usage) - len(usage.lstrip()), 0))
                if option.description:
                    lines.append(wrap_text(option.description, width,
                                           help_format.description_continuation_indent,
                                           help_format.description_indent))
            elif option.description:
                lines.append(wrap_text(usage + " " * spacing + option.description, width,
                                       help_format.description_continuation_indent, 0))
            else:
                lines.append(usage.rstrip())
        groups.append("\n".join(lines))
    return "\n\n".join(groups)
