from typing import Optional


class ParseError(Exception):
    """
    Base for all errors raised while parsing command-line arguments. Carries the
    human-readable message, the name of the function which detected the problem,
    and the exact (offending) token text as it appeared on the command-line.
    """
    def __init__(self, message: str, function: Optional[str] = None, token: Optional[str] = None) -> None:
        super().__init__(message)
        self._message = message if isinstance(message, str) else ""
        self._function = function if isinstance(function, str) else ""
        self._token = token if isinstance(token, str) else ""

    @property
    def message(self) -> str:
        return self._message

    @property
    def function(self) -> str:
        return self._function

    @property
    def token(self) -> str:
        return self._token

    def __str__(self) -> str:
        return self._message


class UnknownOptionError(ParseError):
    pass


class UnexpectedArgumentError(ParseError):
    pass


class MissingArgumentError(ParseError):
    pass


class ArgumentTypeError(ParseError):
    pass


class OptionSyntaxError(ParseError):
    pass


class OptionError(Exception):
    pass


class OptionDefinitionError(OptionError):
    pass


class DuplicateOptionError(OptionError):
    pass


class SyntaxConfigError(Exception):
    pass
