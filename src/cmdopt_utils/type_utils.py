import re
from typing import Any, Optional, Tuple

INTEGER_MIN = -(2 ** 31)
INTEGER_MAX = (2 ** 31) - 1
UNSIGNED_MAX = (2 ** 32) - 1

_integer_pattern = re.compile(r"\s*[+-]?[0-9]+")
_float_pattern = re.compile(r"\s*[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
                            re.IGNORECASE)


def scan_integer(value: str) -> Tuple[Optional[int], int]:
    """
    Scans a base-10 integer from the start of the given string, allowing leading whitespace
    and a sign. Returns a tuple of the integer value and the number of characters consumed;
    the value is None and the consumed length zero if no integer could be read at all.
    """
    if isinstance(value, str) and (match := _integer_pattern.match(value)):
        return int(match.group(0)), match.end()
    return None, 0


def scan_float(value: str) -> Tuple[Optional[float], int]:
    """
    Like scan_integer but for a decimal floating point number (with optional exponent,
    or inf/infinity/nan).
    """
    if isinstance(value, str) and (match := _float_pattern.match(value)):
        return float(match.group(0)), match.end()
    return None, 0


def to_bool(value: Any) -> bool:
    return value if isinstance(value, bool) else ((value.strip().lower() in ("true", "yes", "1"))
                                                  if isinstance(value, str) else False)
