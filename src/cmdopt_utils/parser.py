from __future__ import annotations
from enum import Enum
import logging
import sys
from typing import Any, List, Optional, Tuple
from cmdopt_utils.argument_binder import bind_presence, convert_argument, write_value
from cmdopt_utils.errors import (
    ArgumentTypeError, MissingArgumentError, OptionSyntaxError,
    UnexpectedArgumentError, UnknownOptionError
)
from cmdopt_utils.option import Option
from cmdopt_utils.option_registry import OptionRegistry
from cmdopt_utils.parse_result import ParsedEntry, ParseResult
from cmdopt_utils.split_utils import split_command_line
from cmdopt_utils.syntax import Syntax

logger = logging.getLogger(__name__)


class TokenKind(Enum):
    NO_ARG = "no_arg"
    ARG_REQUIRED = "arg_required"
    ARG_OPTIONAL = "arg_optional"
    END_OF_OPTIONS = "end_of_options"
    NON_OPTION = "non_option"


class OptionParser:
    """
    Parses command-line arguments according to the options defined in an OptionRegistry and the
    (customizable) command-line Syntax. Usage, for example:

      parser = OptionParser()
      parser.add_option("verbose", "v", "verbose output")
      parser.add_option("size", "s", "block size", argument_name="SIZE", argument_type=ArgumentType.UNSIGNED)
      result = parser.parse(["prog", "-vs", "512", "file.txt"])
      result.values.verbose -> True
      result.values.size -> 512
      result.operands -> ["prog", "file.txt"]

    The parser itself keeps no state between parse calls; each call produces a new ParseResult.
    """

    def __init__(self, registry: Optional[OptionRegistry] = None, syntax: Optional[Syntax] = None) -> None:
        self._registry = registry if isinstance(registry, OptionRegistry) else OptionRegistry()
        self._syntax = syntax if isinstance(syntax, Syntax) else Syntax()

    @property
    def registry(self) -> OptionRegistry:
        return self._registry

    @property
    def syntax(self) -> Syntax:
        return self._syntax

    @syntax.setter
    def syntax(self, value: Syntax) -> None:
        if isinstance(value, Syntax):
            self._syntax = value

    def add_option(self, long_name: Optional[str] = None, short_name: Optional[str] = None,
                   description: Optional[str] = None, argument_name: Optional[str] = None,
                   argument_required: bool = True, argument_type: Any = None,
                   group: Optional[str] = None, **kwargs) -> Option:
        return self._registry.add(long_name=long_name, short_name=short_name, description=description,
                                  argument_name=argument_name, argument_required=argument_required,
                                  argument_type=argument_type, group=group, **kwargs)

    def parse(self, argv: Optional[List[str]] = None, program: bool = True) -> ParseResult:
        """
        Parses the given list of command-line arguments (default sys.argv) and returns a ParseResult.
        If program is True (default) then the first item is taken to be the program name; it goes
        into the operands of the result but is otherwise not parsed. Raises a ParseError (subclass)
        on the first invalid argument, unless the syntax tolerates it.
        """
        if argv is None:
            argv = sys.argv
        tokens = [str(token) for token in argv]
        result = ParseResult(registry=self._registry)
        for option in self._registry:
            setattr(result.values, option.property_name, option.default)
        argi = 0 ; argn = len(tokens) ; ended = False  # noqa
        if (program is True) and (argn > 0):
            result.set_program(tokens[0])
            argi = 1
        while argi < argn:
            token = tokens[argi] ; argi += 1  # noqa
            if ended:
                # Everything after the end-of-options marker is an operand, whatever it looks like.
                result.add_operand(token)
                continue
            try:
                kind, entries = self.parse_token(token)
            except (UnknownOptionError, ArgumentTypeError) as e:
                self._tolerate(e, token)
                result.add_operand(token)
                continue
            if kind == TokenKind.END_OF_OPTIONS:
                ended = True
                continue
            elif kind == TokenKind.NON_OPTION:
                result.add_operand(token)
                continue
            elif kind in (TokenKind.ARG_REQUIRED, TokenKind.ARG_OPTIONAL):
                argument = tokens[argi] if argi < argn else None
                if ((argument is None) or self._syntax.is_end_of_options(argument) or
                    self._syntax.looks_like_option(argument)):  # noqa
                    if kind == TokenKind.ARG_REQUIRED:
                        specifier = entries[-1].original_without_argument
                        message = f"option '{specifier}' requires an argument"
                        if token != specifier:
                            message += f" (in '{token}')"
                        raise MissingArgumentError(message, "cmdopt_utils.parser.OptionParser.parse", specifier)
                else:
                    try:
                        self._set_argument(entries[-1], argument)
                    except ArgumentTypeError as e:
                        self._tolerate(e, token)
                        result.add_operand(token)
                        result.add_operand(argument)
                        argi += 1
                        continue
                    argi += 1
            self._commit(result, entries)
        return result

    def parse_command_line(self, command_line: str, program: bool = True) -> ParseResult:
        """
        Like parse but with the given single command-line string, which is first split into
        tokens using the delimiter, quote, and escape characters of the syntax.
        """
        return self.parse(split_command_line(command_line,
                                             delimiters=self._syntax.delimiters,
                                             quotes=self._syntax.quotes,
                                             escape=self._syntax.escape), program=program)

    def parse_token(self, token: str) -> Tuple[TokenKind, List[ParsedEntry]]:
        """
        Classifies the given single command-line token and returns its kind along with the option
        entries read from it (with any inline argument already converted to its typed value).
        For kind ARG_REQUIRED or ARG_OPTIONAL the last returned entry is an option which still
        needs its argument; it is up to the caller to decide whether the next token is used for it.
        Nothing is written to any result here.
        """
        syntax = self._syntax
        if syntax.is_end_of_options(token):
            logger.debug("End of options: %s", token)
            return TokenKind.END_OF_OPTIONS, []

        if (index := token.find(syntax.equals)) >= 0:
            specifier = token[:index]
            argument = token[index + len(syntax.equals):]
            assignment_found = True
            if specifier in (syntax.short_prefix, syntax.long_prefix):
                # Bad syntax like -= or --=
                specifier += syntax.equals
                raise OptionSyntaxError(f"invalid option: '{specifier}'",
                                        "cmdopt_utils.parser.OptionParser.parse_token", specifier)
        else:
            specifier = token
            argument = ""
            assignment_found = False

        if syntax.is_long_option(specifier):
            return self._parse_long_option(token, specifier, argument, assignment_found)
        elif syntax.is_short_option_group(specifier):
            return self._parse_short_option_group(specifier[len(syntax.short_prefix):], argument, assignment_found)

        logger.debug("Operand: %s", token)
        return TokenKind.NON_OPTION, []

    def _parse_long_option(self, token: str, specifier: str,
                           argument: str, assignment_found: bool) -> Tuple[TokenKind, List[ParsedEntry]]:
        long_name = specifier[len(self._syntax.long_prefix):]
        if not (option := self._registry.lookup_long(long_name)):
            raise UnknownOptionError(f"invalid option: '{specifier}'",
                                     "cmdopt_utils.parser.OptionParser.parse_token", specifier)
        entry = self._create_entry(option, token, specifier)
        if option.takes_argument:
            if assignment_found:
                self._set_argument(entry, argument, inline=True)
                kind = TokenKind.NO_ARG
            else:
                kind = TokenKind.ARG_REQUIRED if option.argument_required else TokenKind.ARG_OPTIONAL
        elif assignment_found:
            raise UnexpectedArgumentError(f"option '{specifier}' does not accept arguments",
                                          "cmdopt_utils.parser.OptionParser.parse_token", specifier)
        else:
            kind = TokenKind.NO_ARG
        logger.debug("Long option: %s (%s)", specifier, kind.value)
        return kind, [entry]

    def _parse_short_option_group(self, short_names: str,
                                  argument: str, assignment_found: bool) -> Tuple[TokenKind, List[ParsedEntry]]:
        syntax = self._syntax
        entries = []
        kind = TokenKind.NO_ARG
        for position, short_name in enumerate(short_names):
            specifier = syntax.short_prefix + short_name
            if not (option := self._registry.lookup_short(short_name)):
                raise UnknownOptionError(f"invalid option: '{specifier}'",
                                         "cmdopt_utils.parser.OptionParser._parse_short_option_group", specifier)
            entry = self._create_entry(option, specifier, specifier)
            entries.append(entry)
            last = (position + 1) == len(short_names)
            if option.takes_argument:
                if not last:
                    # The rest of the group is the argument (including any assignment as-is).
                    group_argument = short_names[position + 1:]
                    if assignment_found:
                        group_argument += syntax.equals + argument
                    entry.original_text += group_argument
                    self._set_argument(entry, group_argument, inline=True)
                    kind = TokenKind.NO_ARG
                elif assignment_found:
                    entry.original_text += syntax.equals + argument
                    self._set_argument(entry, argument, inline=True)
                    kind = TokenKind.NO_ARG
                else:
                    kind = TokenKind.ARG_REQUIRED if option.argument_required else TokenKind.ARG_OPTIONAL
                break
            if last and assignment_found:
                raise UnexpectedArgumentError(f"option '{specifier}' does not accept arguments",
                                              "cmdopt_utils.parser.OptionParser._parse_short_option_group",
                                              specifier)
        logger.debug("Short option group: %s%s (%s)", syntax.short_prefix, short_names, kind.value)
        return kind, entries

    def _create_entry(self, option: Option, original_text: str, specifier: str) -> ParsedEntry:
        return ParsedEntry(original_text=original_text,
                           is_option=True,
                           long_name=option.long_name,
                           short_name=option.short_name,
                           original_without_argument=specifier,
                           option_index=self._registry.index(option))

    def _set_argument(self, entry: ParsedEntry, argument: str, inline: bool = False) -> None:
        option = self._registry.at(entry.option_index)
        entry.value = convert_argument(option, argument, entry.original_without_argument)
        entry.argument = argument
        if not inline:
            entry.original_text += f" {argument}"

    def _commit(self, result: ParseResult, entries: List[ParsedEntry]) -> None:
        for entry in entries:
            result.append(entry)
            option = self._registry.at(entry.option_index)
            if entry.value is not None:
                write_value(result.values, option, entry.value)
            else:
                bind_presence(result.values, option)

    def _tolerate(self, e: Exception, token: str) -> None:
        if isinstance(e, UnknownOptionError) and self._syntax.allow_unknown_options:
            logger.warning("Treating unknown option as operand: %s", token)
            return
        if isinstance(e, ArgumentTypeError) and self._syntax.allow_bad_arguments:
            logger.warning("Treating option with bad argument as operand: %s (%s)", token, e)
            return
        raise e
