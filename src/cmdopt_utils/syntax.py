from __future__ import annotations
from typing import Optional
from cmdopt_utils.errors import SyntaxConfigError
from cmdopt_utils.file_utils import load_config_file
from cmdopt_utils.type_utils import to_bool


class Syntax:
    """
    The customizable command-line syntax used by the parser: the short and long option prefixes,
    the (inline argument) assignment separator, the end-of-options marker, and the delimiter, quote,
    and escape characters used when splitting a single command-line string into tokens. Also the
    tolerance flags which (when set) cause unknown options and/or bad option arguments to be treated
    as plain operands rather than raising errors. Validated eagerly on construction.
    """

    SHORT_PREFIX = "-"
    LONG_PREFIX = "--"
    EQUALS = "="
    END_OF_OPTIONS = "--"
    DELIMITERS = " \t\n\r\f\v"
    QUOTES = "\"'"
    ESCAPE = "\\"

    def __init__(self,
                 short_prefix: Optional[str] = None,
                 long_prefix: Optional[str] = None,
                 equals: Optional[str] = None,
                 end_of_options: Optional[str] = None,
                 delimiters: Optional[str] = None,
                 quotes: Optional[str] = None,
                 escape: Optional[str] = None,
                 allow_unknown_options: bool = False,
                 allow_bad_arguments: bool = False) -> None:
        self._short_prefix = Syntax._value("short_prefix", short_prefix, Syntax.SHORT_PREFIX)
        self._long_prefix = Syntax._value("long_prefix", long_prefix, Syntax.LONG_PREFIX)
        self._equals = Syntax._value("equals", equals, Syntax.EQUALS)
        self._end_of_options = Syntax._value("end_of_options", end_of_options, Syntax.END_OF_OPTIONS)
        self._delimiters = Syntax._value("delimiters", delimiters, Syntax.DELIMITERS)
        self._quotes = quotes if isinstance(quotes, str) else Syntax.QUOTES
        self._escape = Syntax._value("escape", escape, Syntax.ESCAPE)
        self._allow_unknown_options = allow_unknown_options is True
        self._allow_bad_arguments = allow_bad_arguments is True
        self._validate()

    @staticmethod
    def _value(name: str, value: Optional[str], default: str) -> str:
        if value is None:
            return default
        if not (isinstance(value, str) and value):
            raise SyntaxConfigError(f"Syntax value must be a non-empty string: {name}")
        return value

    def _validate(self) -> None:
        if self._short_prefix == self._long_prefix:
            raise SyntaxConfigError(f"Short and long option prefixes must differ: {self._short_prefix}")
        if self._equals in (self._short_prefix, self._long_prefix):
            raise SyntaxConfigError(f"Assignment separator must differ from option prefixes: {self._equals}")
        if len(self._escape) != 1:
            raise SyntaxConfigError(f"Escape must be a single character: {self._escape}")
        if (self._escape in self._delimiters) or (self._escape in self._quotes):
            raise SyntaxConfigError(f"Escape character must not be a delimiter or quote: {self._escape}")
        if any(quote in self._delimiters for quote in self._quotes):
            raise SyntaxConfigError(f"Quote characters must not be delimiters: {self._quotes}")

    @property
    def short_prefix(self) -> str:
        return self._short_prefix

    @property
    def long_prefix(self) -> str:
        return self._long_prefix

    @property
    def equals(self) -> str:
        return self._equals

    @property
    def end_of_options(self) -> str:
        return self._end_of_options

    @property
    def delimiters(self) -> str:
        return self._delimiters

    @property
    def quotes(self) -> str:
        return self._quotes

    @property
    def escape(self) -> str:
        return self._escape

    @property
    def allow_unknown_options(self) -> bool:
        return self._allow_unknown_options

    @property
    def allow_bad_arguments(self) -> bool:
        return self._allow_bad_arguments

    def is_end_of_options(self, token: str) -> bool:
        return token == self._end_of_options

    def is_long_option(self, specifier: str) -> bool:
        return specifier.startswith(self._long_prefix) and (len(specifier) > len(self._long_prefix))

    def is_short_option_group(self, specifier: str) -> bool:
        return specifier.startswith(self._short_prefix) and (len(specifier) > len(self._short_prefix))

    def looks_like_option(self, token: str) -> bool:
        return self.is_long_option(token) or self.is_short_option_group(token)

    def copy(self, **kwargs) -> Syntax:
        values = self.to_dict()
        values.update({key: value for key, value in kwargs.items() if value is not None})
        return Syntax(**values)

    def to_dict(self) -> dict:
        return {
            "short_prefix": self._short_prefix,
            "long_prefix": self._long_prefix,
            "equals": self._equals,
            "end_of_options": self._end_of_options,
            "delimiters": self._delimiters,
            "quotes": self._quotes,
            "escape": self._escape,
            "allow_unknown_options": self._allow_unknown_options,
            "allow_bad_arguments": self._allow_bad_arguments
        }

    @staticmethod
    def from_dict(data: dict) -> Syntax:
        if not isinstance(data, dict):
            return Syntax()
        if isinstance(syntax := data.get("syntax"), dict):
            data = syntax
        values = {}
        for name in ("short_prefix", "long_prefix", "equals", "end_of_options", "delimiters", "quotes", "escape"):
            if (value := data.get(name)) is not None:
                values[name] = str(value)
        for name in ("allow_unknown_options", "allow_bad_arguments"):
            if (value := data.get(name)) is not None:
                values[name] = to_bool(value)
        return Syntax(**values)

    @staticmethod
    def load(file: str) -> Syntax:
        return Syntax.from_dict(load_config_file(file))

    def __eq__(self, other) -> bool:
        return isinstance(other, Syntax) and (self.to_dict() == other.to_dict())

    def __hash__(self) -> int:
        return hash(tuple(self.to_dict().items()))
