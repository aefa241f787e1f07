from __future__ import annotations
from typing import Iterator, List, Optional
from cmdopt_utils.argument_binder import ArgumentValue, Values, values_to_dict
from cmdopt_utils.option import Option
from cmdopt_utils.option_registry import OptionRegistry


class ParsedEntry:
    """
    One item read from the command-line: either a (recognized) option, or a plain non-option
    operand. For an option, the original_text is the option as written (including any argument),
    original_without_argument is just the option specifier (e.g. -p or --pattern), the argument
    is the raw argument string (empty if none), value its typed value, and option_index its
    index into the OptionRegistry storage (see ParseResult.option).
    """

    def __init__(self,
                 original_text: str = "",
                 is_option: bool = False,
                 long_name: str = "",
                 short_name: Optional[str] = None,
                 argument: str = "",
                 original_without_argument: str = "",
                 option_index: Optional[int] = None,
                 value: Optional[ArgumentValue] = None) -> None:
        self.original_text = original_text
        self.is_option = is_option is True
        self.long_name = long_name or ""
        self.short_name = short_name or None
        self.argument = argument or ""
        self.original_without_argument = original_without_argument or ""
        self.option_index = option_index
        self.value = value

    @property
    def name(self) -> str:
        return self.long_name or self.short_name or ""

    def to_dict(self) -> dict:
        if not self.is_option:
            return {"operand": self.original_text}
        result = {"option": self.original_without_argument, "original": self.original_text}
        if self.long_name:
            result["long_name"] = self.long_name
        if self.short_name:
            result["short_name"] = self.short_name
        if self.argument or (self.value is not None):
            result["argument"] = self.argument
        if self.value is not None:
            result["value"] = self.value.value
        return result

    def __eq__(self, other) -> bool:
        return isinstance(other, ParsedEntry) and (vars(self) == vars(other))

    def __repr__(self) -> str:
        if self.is_option:
            return f"ParsedEntry({self.original_text!r}, option={self.name!r}, argument={self.argument!r})"
        return f"ParsedEntry({self.original_text!r})"


class ParseResult:
    """
    The result of parsing a command-line: the ordered (as encountered on the command-line) list
    of parsed entries (options and operands), the list of operands (the program name, if any,
    followed by every non-option token), and the namespace of typed option values.
    Entries are only ever appended (or all cleared); never individually removed.
    """

    def __init__(self, entries: Optional[List[ParsedEntry]] = None,
                 registry: Optional[OptionRegistry] = None) -> None:
        self._entries = []
        self._operands = []
        self._program = None
        self._values = Values()
        self._registry = registry
        if isinstance(entries, (list, tuple)):
            for entry in entries:
                self.append(entry)

    @property
    def entries(self) -> List[ParsedEntry]:
        return self._entries

    @property
    def operands(self) -> List[str]:
        return self._operands

    @property
    def program(self) -> Optional[str]:
        return self._program

    @property
    def values(self) -> Values:
        return self._values

    @property
    def empty(self) -> bool:
        return not self._entries

    def append(self, entry: ParsedEntry) -> None:
        self._entries.append(entry)

    def add_operand(self, operand: str, entry: bool = True) -> None:
        self._operands.append(operand)
        if entry is True:
            self._entries.append(ParsedEntry(original_text=operand, is_option=False))

    def set_program(self, program: str) -> None:
        self._program = program
        self._operands.insert(0, program)

    def at(self, index: int) -> ParsedEntry:
        if not (isinstance(index, int) and (0 <= index < len(self._entries))):
            raise IndexError(f"Parse result index out of range: {index}")
        return self._entries[index]

    def clear(self) -> None:
        self._entries.clear()
        self._operands.clear()
        self._program = None
        self._values = Values()

    def options(self) -> List[ParsedEntry]:
        return [entry for entry in self._entries if entry.is_option]

    def find(self, name: str) -> Optional[ParsedEntry]:
        """
        Returns the first option entry with the given short name (if a single character)
        or long name; returns None if there is no such entry.
        """
        if isinstance(name, str) and name:
            for entry in self._entries:
                if entry.is_option:
                    if ((len(name) == 1) and (entry.short_name == name)) or (entry.long_name == name):
                        return entry
        return None

    def option(self, entry: ParsedEntry) -> Optional[Option]:
        if self._registry is not None and isinstance(entry, ParsedEntry) and (entry.option_index is not None):
            return self._registry.at(entry.option_index)
        return None

    def to_dict(self) -> dict:
        return {
            "program": self._program,
            "entries": [entry.to_dict() for entry in self._entries],
            "operands": list(self._operands),
            "values": values_to_dict(self._values)
        }

    def __getitem__(self, index: int) -> ParsedEntry:
        return self._entries[index]

    def __iter__(self) -> Iterator[ParsedEntry]:
        return iter(self._entries)

    def __reversed__(self) -> Iterator[ParsedEntry]:
        return reversed(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other) -> bool:
        return (isinstance(other, ParseResult) and (self._entries == other._entries) and
                (self._operands == other._operands) and (self._program == other._program) and
                (self._values == other._values))
