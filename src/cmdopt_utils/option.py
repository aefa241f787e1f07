from __future__ import annotations
from enum import Enum
from typing import Any, Callable, Optional
from cmdopt_utils.errors import OptionDefinitionError


class ArgumentType(Enum):

    STRING = "string"
    INTEGER = "integer"
    UNSIGNED = "unsigned"
    FLOAT = "float"
    BOOLEAN = "boolean"

    @staticmethod
    def from_value(value: Any) -> ArgumentType:
        if isinstance(value, ArgumentType):
            return value
        if value in (None, ""):
            return ArgumentType.STRING
        if value is str: return ArgumentType.STRING  # noqa
        elif value is int: return ArgumentType.INTEGER  # noqa
        elif value is float: return ArgumentType.FLOAT  # noqa
        elif value is bool: return ArgumentType.BOOLEAN  # noqa
        if isinstance(value, str):
            value = value.strip().lower()
            for argument_type in ArgumentType:
                if value == argument_type.value:
                    return argument_type
            if value in ("int", "signed"):
                return ArgumentType.INTEGER
            elif value in ("uint", "unsigned-integer"):
                return ArgumentType.UNSIGNED
            elif value in ("double", "number"):
                return ArgumentType.FLOAT
            elif value in ("str", "text"):
                return ArgumentType.STRING
            elif value in ("bool", "flag"):
                return ArgumentType.BOOLEAN
        raise OptionDefinitionError(f"Unknown option argument type: {value}")


class Option:
    """
    Describes one recognized command-line option: its short name (a single character)
    and/or long name, whether it takes an argument (a non-empty argument name) and if so
    whether that argument is required and what type it is converted to; plus a description
    and group label used for help output. An option declared without an argument name is
    always a boolean presence flag. The short and long names are fixed at construction.
    """

    def __init__(self,
                 long_name: Optional[str] = None,
                 short_name: Optional[str] = None,
                 description: Optional[str] = None,
                 argument_name: Optional[str] = None,
                 argument_required: bool = True,
                 argument_type: Any = None,
                 group: Optional[str] = None,
                 default: Any = None,
                 destination: Optional[Callable] = None) -> None:
        long_name = long_name.strip() if isinstance(long_name, str) else ""
        short_name = short_name if isinstance(short_name, str) and short_name else None
        if not (long_name or short_name):
            raise OptionDefinitionError("Option must have a short name or a long name.")
        if short_name is not None and ((len(short_name) != 1) or short_name.isspace()):
            raise OptionDefinitionError(f"Option short name must be a single character: {short_name!r}")
        if long_name and any(char.isspace() for char in long_name):
            raise OptionDefinitionError(f"Option long name must not contain whitespace: {long_name!r}")
        self._long_name = long_name
        self._short_name = short_name
        self._description = description if isinstance(description, str) else ""
        self._argument_name = argument_name.strip() if isinstance(argument_name, str) else ""
        self._argument_required = (argument_required is not False) if self._argument_name else False
        if self._argument_name:
            self._argument_type = ArgumentType.from_value(argument_type)
            if self._argument_type == ArgumentType.BOOLEAN:
                raise OptionDefinitionError(f"Option with an argument cannot be boolean: {self.name}")
        else:
            self._argument_type = ArgumentType.BOOLEAN
        self._group = group if isinstance(group, str) else ""
        self._default = default
        self._destination = destination if callable(destination) else None

    @property
    def long_name(self) -> str:
        return self._long_name

    @property
    def short_name(self) -> Optional[str]:
        return self._short_name

    @property
    def name(self) -> str:
        return self._long_name or self._short_name

    @property
    def property_name(self) -> str:
        return self._long_name.replace("-", "_") if self._long_name else self._short_name

    @property
    def description(self) -> str:
        return self._description

    @property
    def argument_name(self) -> str:
        return self._argument_name

    @property
    def takes_argument(self) -> bool:
        return bool(self._argument_name)

    @property
    def argument_required(self) -> bool:
        return self._argument_required

    @property
    def argument_type(self) -> ArgumentType:
        return self._argument_type

    @property
    def group(self) -> str:
        return self._group

    @property
    def default(self) -> Any:
        if (self._default is None) and (self._argument_type == ArgumentType.BOOLEAN):
            return False
        return self._default

    @property
    def destination(self) -> Optional[Callable]:
        return self._destination

    def __repr__(self) -> str:
        names = ", ".join(name for name in (self._short_name, self._long_name) if name)
        return f"Option({names})"
