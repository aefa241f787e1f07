from __future__ import annotations
import json
import logging
import sys
from typing import List, Optional
import yaml
from cmdopt_utils.errors import OptionError, ParseError, SyntaxConfigError
from cmdopt_utils.help_utils import HelpFormat, format_help
from cmdopt_utils.option import ArgumentType
from cmdopt_utils.option_registry import OptionRegistry
from cmdopt_utils.parser import OptionParser
from cmdopt_utils.print_tree import print_tree
from cmdopt_utils.syntax import Syntax
from cmdopt_utils.terminal_utils import print_error
from cmdopt_utils.version_utils import get_version

FORMATS = ["tree", "json", "yaml"]


def main(argv: Optional[List[str]] = None) -> None:

    # Parses the given command-line tokens (or command-line string) according to the option
    # schema (and optional custom syntax) defined in the given YAML/JSON file(s), and prints
    # the result; or prints the help text for the schema. Uses our own parser for its own options.

    parser = create_parser()
    nocolor = "--nocolor" in (argv if isinstance(argv, list) else sys.argv)
    try:
        parsed = parser.parse(["cmdopt"] + argv if isinstance(argv, list) else sys.argv)
    except ParseError as e:
        _error(str(e), usage=True, nocolor=nocolor)
    args = parsed.values
    tokens = parsed.operands[1:]

    if args.help:
        _usage(parser)
        sys.exit(0)
    if args.version:
        print(f"cmdopt-utils: {get_version()}")
        sys.exit(0)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    if not args.schema:
        _error("Missing --schema option.", usage=True, nocolor=args.nocolor)
    if args.format not in FORMATS:
        _error(f"Unknown format: {args.format} (expected one of: {', '.join(FORMATS)})", nocolor=args.nocolor)

    try:
        registry = OptionRegistry.load(args.schema)
        syntax = Syntax.load(args.syntax) if args.syntax else Syntax()
        if args.tolerant:
            syntax = syntax.copy(allow_unknown_options=True, allow_bad_arguments=True)
    except (OptionError, SyntaxConfigError) as e:
        _error(str(e), nocolor=args.nocolor)
    except Exception as e:
        _error(f"Cannot load file: {e}", nocolor=args.nocolor)

    schema_parser = OptionParser(registry, syntax)

    if args.help_text:
        print(format_help(registry, syntax, HelpFormat(line_width=args.width)))
        sys.exit(0)

    try:
        if args.line is not None:
            result = schema_parser.parse_command_line(args.line, program=not args.no_program)
        else:
            result = schema_parser.parse(tokens, program=not args.no_program)
    except ParseError as e:
        _error(str(e), nocolor=args.nocolor)

    if args.format == "json":
        print(json.dumps(result.to_dict(), indent=4))
    elif args.format == "yaml":
        print(yaml.dump(result.to_dict(), sort_keys=False), end="")
    else:
        print_tree(result.to_dict())


def create_parser() -> OptionParser:
    parser = OptionParser()
    parser.add_option("schema", "s", "YAML or JSON file defining the options to parse", "FILE")
    parser.add_option("syntax", None, "YAML or JSON file defining a custom command-line syntax", "FILE")
    parser.add_option("line", "l", "parse this single command-line string rather than TOKENS", "COMMAND-LINE")
    parser.add_option("format", "f", f"output format: {', '.join(FORMATS)} (default: tree)", "FORMAT",
                      default="tree")
    parser.add_option("help-text", None, "print the help text for the options in the schema")
    parser.add_option("width", "w", "line width for the help text (default: 80)", "N",
                      argument_type=ArgumentType.UNSIGNED, default=80)
    parser.add_option("no-program", None, "do not treat the first token as the program name")
    parser.add_option("tolerant", None, "treat unknown options and bad arguments as operands")
    parser.add_option("debug", None, "debug logging")
    parser.add_option("nocolor", None, "no color output")
    parser.add_option("version", None, "print the version of this package")
    parser.add_option("help", "h", "print this usage")
    return parser


def _error(message: str, usage: bool = False, status: int = 1, nocolor: bool = False) -> None:
    print_error(message, nocolor=nocolor)
    if usage:
        _usage(create_parser(), file=sys.stderr)
    sys.exit(status)


def _usage(parser: OptionParser, file=None) -> None:
    print("USAGE: cmdopt --schema FILE [OPTIONS] [--] TOKENS...", file=file or sys.stdout)
    print("OPTIONS:", file=file or sys.stdout)
    print(format_help(parser.registry, parser.syntax), file=file or sys.stdout)


if __name__ == "__main__":
    main()
    sys.exit(0)
