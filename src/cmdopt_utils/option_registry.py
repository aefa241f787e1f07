from __future__ import annotations
from typing import Any, Iterator, List, Optional, Union
from cmdopt_utils.errors import DuplicateOptionError, OptionDefinitionError
from cmdopt_utils.file_utils import load_config_file
from cmdopt_utils.option import Option
from cmdopt_utils.type_utils import to_bool


class OptionRegistry:
    """
    Ordered collection of Option definitions. Options are stored in registration order and an
    option's index into this storage never changes (parsed entries refer to options by this index).
    Options are also grouped by their group label, for help output; the order of groups and of the
    options within each group may be (re)sorted without affecting the storage indices. Registering
    an option whose short or long name, or whose property name (the attribute of its value in
    the parse result values), is already registered is rejected (DuplicateOptionError).
    """

    def __init__(self, options: Optional[List[Option]] = None) -> None:
        self._options = []
        self._long_names = {}
        self._short_names = {}
        self._property_names = {}
        self._groups = {}
        if isinstance(options, (list, tuple)):
            for option in options:
                self.register(option)

    def register(self, option: Option) -> Option:
        if not isinstance(option, Option):
            raise OptionDefinitionError(f"Cannot register non-option: {option!r}")
        if option.long_name and (option.long_name in self._long_names):
            raise DuplicateOptionError(f"Option already registered: {option.long_name}")
        if option.short_name and (option.short_name in self._short_names):
            raise DuplicateOptionError(f"Option already registered: {option.short_name}")
        if option.property_name in self._property_names:
            existing_option = self._options[self._property_names[option.property_name]]
            raise DuplicateOptionError(f"Option property name {option.property_name} of {option.name}"
                                       f" already used by option: {existing_option.name}")
        index = len(self._options)
        self._options.append(option)
        if option.long_name:
            self._long_names[option.long_name] = index
        if option.short_name:
            self._short_names[option.short_name] = index
        self._property_names[option.property_name] = index
        self.group(option.group).append(index)
        return option

    def add(self, long_name: Optional[str] = None,
            short_name: Optional[str] = None,
            description: Optional[str] = None,
            argument_name: Optional[str] = None,
            argument_required: bool = True,
            argument_type: Any = None,
            group: Optional[str] = None, **kwargs) -> Option:
        return self.register(Option(long_name=long_name, short_name=short_name, description=description,
                                    argument_name=argument_name, argument_required=argument_required,
                                    argument_type=argument_type, group=group, **kwargs))

    def group(self, name: Optional[str] = None) -> List[int]:
        if not isinstance(name, str):
            name = ""
        if (indices := self._groups.get(name)) is None:
            self._groups[name] = indices = []
        return indices

    def groups(self) -> List[str]:
        return list(self._groups.keys())

    def group_options(self, name: Optional[str] = None) -> List[Option]:
        return [self._options[index] for index in self._groups.get(name if isinstance(name, str) else "", [])]

    def lookup(self, name: str) -> Optional[Option]:
        if isinstance(name, str) and name:
            if len(name) == 1 and (option := self.lookup_short(name)):
                return option
            return self.lookup_long(name)
        return None

    def lookup_long(self, long_name: str) -> Optional[Option]:
        if (index := self._long_names.get(long_name)) is not None:
            return self._options[index]
        return None

    def lookup_short(self, short_name: str) -> Optional[Option]:
        if (index := self._short_names.get(short_name)) is not None:
            return self._options[index]
        return None

    def at(self, index: int) -> Option:
        return self._options[index]

    def index(self, option: Union[Option, str]) -> Optional[int]:
        if isinstance(option, str):
            option = self.lookup(option)
        for index, registered_option in enumerate(self._options):
            if registered_option is option:
                return index
        return None

    def sort_groups(self) -> None:
        self._groups = {name: self._groups[name] for name in sorted(self._groups.keys())}

    def sort_options(self) -> None:
        for indices in self._groups.values():
            indices.sort(key=lambda index: (self._options[index].long_name or self._options[index].short_name))

    def __contains__(self, name: Union[Option, str]) -> bool:
        if isinstance(name, Option):
            return self.index(name) is not None
        return self.lookup(name) is not None

    def __iter__(self) -> Iterator[Option]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    @staticmethod
    def from_dict(data: dict) -> OptionRegistry:
        """
        Creates an OptionRegistry from a dictionary of the form (e.g. as read from a YAML file):
          options:
            - long: pattern
              short: p
              argument: PATTERN
              required: true
              type: string
              description: start at first occurrence of PATTERN
              group: Searching
        """
        registry = OptionRegistry()
        if isinstance(data, dict) and isinstance(options := data.get("options"), list):
            for item in options:
                if not isinstance(item, dict):
                    raise OptionDefinitionError(f"Invalid option definition: {item!r}")
                registry.add(long_name=item.get("long"),
                             short_name=str(short) if (short := item.get("short")) is not None else None,
                             description=item.get("description"),
                             argument_name=item.get("argument"),
                             argument_required=to_bool(item.get("required", True)),
                             argument_type=item.get("type"),
                             group=item.get("group"),
                             default=item.get("default"))
        return registry

    @staticmethod
    def load(file: str) -> OptionRegistry:
        return OptionRegistry.from_dict(load_config_file(file))
