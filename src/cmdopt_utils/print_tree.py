from typing import Callable, Optional


def print_tree(data: dict,
               indent: Optional[int] = None,
               annotator: Optional[Callable] = None,
               printf: Optional[Callable] = None) -> None:
    """
    Pretty prints the given dictionary as a tree. Handles dictionaries containing primitive
    values, other dictionaries, or lists (of primitive values or dictionaries) recursively;
    list items are shown by index. E.g. the to_dict() of a ParseResult.
    """
    if not callable(annotator):
        annotator = None
    if not callable(printf):
        printf = print
    output = (lambda value: printf(f"{' ' * indent}{value}")) if isinstance(indent, int) and indent > 0 else printf
    def traverse(data: dict, indent: str = "", first: bool = False, path: str = ""):  # noqa
        nonlocal output
        space = "    " if not first else "  "
        for index, key in enumerate(keys := list(data.keys())):
            last = (index == len(keys) - 1)
            corner = "▷ " if first else ("└── " if last else "├── ")
            key_path = f"{path}/{key}" if path else str(key)
            value = data[key]
            if isinstance(value, list):
                value = {f"[{item_index}]": item for item_index, item in enumerate(value)} if value else "[]"
            if isinstance(value, dict):
                output(indent + corner + str(key))
                inner_indent = indent + (space if last else f"{' ' if first else '│'}{space[1:]}")
                traverse(value, indent=inner_indent, path=key_path)
            else:
                annotation = annotator(key_path) if annotator else ""
                output(indent + corner + f"{key}: {value}{f' {annotation}' if annotation else ''}")
    traverse(data, first=True)
