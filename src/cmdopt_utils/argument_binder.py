from __future__ import annotations
import logging
import math
from typing import Any, Optional
from cmdopt_utils.errors import ArgumentTypeError
from cmdopt_utils.option import ArgumentType, Option
from cmdopt_utils.type_utils import INTEGER_MAX, INTEGER_MIN, UNSIGNED_MAX, scan_float, scan_integer

logger = logging.getLogger(__name__)

_FUNCTION_NAME = "cmdopt_utils.argument_binder.bind_argument"


class ArgumentValue:
    """
    A typed option argument value; the type is one of ArgumentType and the value is the
    correspondingly typed (int, float, str, or bool) Python value.
    """

    def __init__(self, type: ArgumentType, value: Any) -> None:
        self._type = type
        self._value = value

    @property
    def type(self) -> ArgumentType:
        return self._type

    @property
    def value(self) -> Any:
        return self._value

    def __eq__(self, other) -> bool:
        if not isinstance(other, ArgumentValue) or (self._type != other._type):
            return False
        if (self._type == ArgumentType.FLOAT) and math.isnan(self._value) and math.isnan(other._value):
            return True
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((self._type, self._value))

    def __repr__(self) -> str:
        return f"ArgumentValue({self._type.value}, {self._value!r})"


class Values:
    """
    Namespace of typed option values as set by parsing; one attribute per registered option,
    named by its property name (e.g. values.line_numbers for option --line-numbers).
    Holds no public methods, so any option property name is usable; see values_to_dict.
    """

    def __getattr__(self, name: str) -> Any:
        raise AttributeError(f"Property for option not found: {name}")

    def __eq__(self, other) -> bool:
        return isinstance(other, Values) and (vars(self) == vars(other))

    def __repr__(self) -> str:
        return f"Values({values_to_dict(self)})"


def values_to_dict(values: Values) -> dict:
    return dict(sorted(vars(values).items()))


def convert_argument(option: Option, argument: str, specifier: Optional[str] = None) -> ArgumentValue:
    """
    Converts the given raw argument string to the argument type of the given option and returns
    it as an ArgumentValue. Raises ArgumentTypeError if the argument is not of the right form or
    is out of range; the message includes the given specifier, i.e. the option as it was written
    on the command-line, e.g. --size or -s.
    """
    if not isinstance(specifier, str) or not specifier:
        specifier = option.name
    argument = argument if isinstance(argument, str) else ""
    argument_type = option.argument_type
    if argument_type in (ArgumentType.INTEGER, ArgumentType.UNSIGNED):
        value, length = scan_integer(argument)
        if (value is None) or (length != len(argument)):
            raise ArgumentTypeError(f"argument for option '{specifier}' must be an integer",
                                    _FUNCTION_NAME, specifier)
        if argument_type == ArgumentType.UNSIGNED:
            if value < 0:
                raise ArgumentTypeError(f"argument for option '{specifier}' must not be negative",
                                        _FUNCTION_NAME, specifier)
            if value > UNSIGNED_MAX:
                raise ArgumentTypeError(f"argument for option '{specifier}' is out of range",
                                        _FUNCTION_NAME, specifier)
        elif (value < INTEGER_MIN) or (value > INTEGER_MAX):
            raise ArgumentTypeError(f"argument for option '{specifier}' is out of range",
                                    _FUNCTION_NAME, specifier)
        return ArgumentValue(argument_type, value)
    elif argument_type == ArgumentType.FLOAT:
        value, length = scan_float(argument)
        if (value is None) or (length != len(argument)):
            raise ArgumentTypeError(f"argument for option '{specifier}' must be a number",
                                    _FUNCTION_NAME, specifier)
        if math.isinf(value) and ("inf" not in argument.lower()):
            raise ArgumentTypeError(f"argument for option '{specifier}' is out of range",
                                    _FUNCTION_NAME, specifier)
        return ArgumentValue(argument_type, value)
    elif argument_type == ArgumentType.BOOLEAN:
        return ArgumentValue(argument_type, True)
    return ArgumentValue(ArgumentType.STRING, argument)


def bind_argument(values: Values, option: Option, argument: str,
                  specifier: Optional[str] = None) -> ArgumentValue:
    """
    Converts the given argument for the given option (see convert_argument) and writes
    the typed value to the given values namespace and to the option destination (if any).
    """
    argument_value = convert_argument(option, argument, specifier)
    write_value(values, option, argument_value)
    return argument_value


def bind_presence(values: Values, option: Option) -> None:
    if option.argument_type == ArgumentType.BOOLEAN:
        write_value(values, option, ArgumentValue(ArgumentType.BOOLEAN, True))


def write_value(values: Values, option: Option, argument_value: ArgumentValue) -> None:
    logger.debug("Binding option %s: %r", option.name, argument_value)
    setattr(values, option.property_name, argument_value.value)
    if option.destination:
        option.destination(argument_value.value)
