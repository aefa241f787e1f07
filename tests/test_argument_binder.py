import math
import pytest
from cmdopt_utils.argument_binder import (
    ArgumentValue, Values, bind_argument, bind_presence, convert_argument, values_to_dict
)
from cmdopt_utils.errors import ArgumentTypeError
from cmdopt_utils.option import ArgumentType, Option
from cmdopt_utils.type_utils import scan_float, scan_integer, to_bool


def test_scan_integer():
    assert scan_integer("123") == (123, 3)
    assert scan_integer("-42abc") == (-42, 3)
    assert scan_integer("+7") == (7, 2)
    assert scan_integer(" 5") == (5, 2)
    assert scan_integer("abc") == (None, 0)
    assert scan_integer("") == (None, 0)
    assert scan_integer("-") == (None, 0)
    assert scan_integer(None) == (None, 0)


def test_scan_float():
    assert scan_float("1.5") == (1.5, 3)
    assert scan_float("1.5e3x") == (1500.0, 5)
    assert scan_float(".25") == (0.25, 3)
    assert scan_float("-2.") == (-2.0, 3)
    assert scan_float("1e") == (1.0, 1)
    assert scan_float("inf") == (math.inf, 3)
    assert math.isnan(scan_float("NaN")[0])
    assert scan_float("x1") == (None, 0)


def test_to_bool():
    assert to_bool(True) is True
    assert to_bool(" Yes ") is True
    assert to_bool("1") is True
    assert to_bool("false") is False
    assert to_bool(1) is False
    assert to_bool(None) is False


def test_convert_integer():
    option = Option("count", "c", argument_name="N", argument_type=ArgumentType.INTEGER)
    assert convert_argument(option, "-12", "--count") == ArgumentValue(ArgumentType.INTEGER, -12)
    assert convert_argument(option, "2147483647").value == 2147483647
    assert convert_argument(option, "-2147483648").value == -2147483648
    with pytest.raises(ArgumentTypeError) as e:
        convert_argument(option, "2147483648", "--count")
    assert str(e.value) == "argument for option '--count' is out of range"
    with pytest.raises(ArgumentTypeError) as e:
        convert_argument(option, "12abc", "-c")
    assert str(e.value) == "argument for option '-c' must be an integer"
    assert e.value.token == "-c"
    with pytest.raises(ArgumentTypeError) as e:
        convert_argument(option, "")
    assert str(e.value) == "argument for option 'count' must be an integer"


def test_convert_unsigned():
    option = Option("size", argument_name="SIZE", argument_type=ArgumentType.UNSIGNED)
    assert convert_argument(option, "0").value == 0
    assert convert_argument(option, "4294967295").value == 4294967295
    with pytest.raises(ArgumentTypeError) as e:
        convert_argument(option, "-5", "--size")
    assert str(e.value) == "argument for option '--size' must not be negative"
    with pytest.raises(ArgumentTypeError) as e:
        convert_argument(option, "-99999999999", "--size")
    assert str(e.value) == "argument for option '--size' must not be negative"
    with pytest.raises(ArgumentTypeError) as e:
        convert_argument(option, "4294967296", "--size")
    assert str(e.value) == "argument for option '--size' is out of range"
    with pytest.raises(ArgumentTypeError) as e:
        convert_argument(option, "abc", "--size")
    assert str(e.value) == "argument for option '--size' must be an integer"


def test_convert_float():
    option = Option("ratio", argument_name="RATIO", argument_type=ArgumentType.FLOAT)
    assert convert_argument(option, "2.5").value == 2.5
    assert convert_argument(option, "-1e-3").value == -0.001
    assert convert_argument(option, "inf").value == math.inf
    assert convert_argument(option, "nan") == ArgumentValue(ArgumentType.FLOAT, math.nan)
    with pytest.raises(ArgumentTypeError) as e:
        convert_argument(option, "2.5x", "--ratio")
    assert str(e.value) == "argument for option '--ratio' must be a number"
    with pytest.raises(ArgumentTypeError) as e:
        convert_argument(option, "1e999", "--ratio")
    assert str(e.value) == "argument for option '--ratio' is out of range"


def test_convert_string():
    option = Option("name", argument_name="NAME")
    assert convert_argument(option, "") == ArgumentValue(ArgumentType.STRING, "")
    assert convert_argument(option, " spaced = text ").value == " spaced = text "


def test_bind_argument_and_presence():
    written = []
    values = Values()
    option = Option("level", "l", argument_name="N", argument_type=int, destination=written.append)
    flag = Option("quiet", "q")
    assert bind_argument(values, option, "3", "-l") == ArgumentValue(ArgumentType.INTEGER, 3)
    bind_presence(values, flag)
    bind_presence(values, option)
    assert values.level == 3
    assert values.quiet is True
    assert written == [3]
    assert values_to_dict(values) == {"level": 3, "quiet": True}
    with pytest.raises(ArgumentTypeError):
        bind_argument(values, option, "x", "-l")
    assert values.level == 3
    assert written == [3]


def test_values_with_method_like_option_names():
    values = Values()
    bind_presence(values, Option("to-dict"))
    bind_argument(values, Option("repr", argument_name="TEXT"), "text")
    assert values.to_dict is True
    assert values_to_dict(values) == {"repr": "text", "to_dict": True}
    assert repr(values) == "Values({'repr': 'text', 'to_dict': True})"
