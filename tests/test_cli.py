import io
import json
import os
import pytest
import yaml
from cmdopt_utils.cli import main
from cmdopt_utils.print_tree import print_tree

SCHEMA = """
options:
  - long: verbose
    short: v
    description: verbose mode
  - long: size
    short: s
    argument: SIZE
    type: unsigned
    description: scale sizes by SIZE
  - long: tag
    argument: TAG
    required: false
    group: Tagging
"""


def _create_schema(tmp_path) -> str:
    file = os.path.join(tmp_path, "schema.yaml")
    with io.open(file, "w") as f:
        f.write(SCHEMA)
    return file


def test_cli_json(tmp_path, capsys):
    schema = _create_schema(tmp_path)
    main(["-s", schema, "--format", "json", "--nocolor", "--", "prog", "-v", "--size=10", "file"])
    output = json.loads(capsys.readouterr().out)
    assert output["program"] == "prog"
    assert output["operands"] == ["prog", "file"]
    assert output["values"] == {"size": 10, "tag": None, "verbose": True}
    assert output["entries"] == [
        {"option": "-v", "original": "-v", "long_name": "verbose", "short_name": "v"},
        {"option": "--size", "original": "--size=10", "long_name": "size", "short_name": "s",
         "argument": "10", "value": 10},
        {"operand": "file"}
    ]


def test_cli_yaml_line(tmp_path, capsys):
    schema = _create_schema(tmp_path)
    main(["--schema", schema, "--format=yaml", "--no-program", "--line=-vs 5 'two words'"])
    output = yaml.safe_load(capsys.readouterr().out)
    assert output["program"] is None
    assert output["operands"] == ["two words"]
    assert output["values"]["size"] == 5
    assert output["entries"][1]["original"] == "-s 5"


def test_cli_tree(tmp_path, capsys):
    schema = _create_schema(tmp_path)
    main(["-s", schema, "--", "prog", "--tag"])
    output = capsys.readouterr().out.split("\n")
    assert output[0] == "▷ program: prog"
    assert "▷ entries" in output
    assert "  └── [0]" in output
    assert "      └── long_name: tag" in output


def test_cli_parse_error(tmp_path, capsys):
    schema = _create_schema(tmp_path)
    with pytest.raises(SystemExit) as e:
        main(["-s", schema, "--nocolor", "--", "prog", "-x"])
    assert e.value.code == 1
    assert capsys.readouterr().err.strip() == "ERROR: invalid option: '-x'"
    with pytest.raises(SystemExit) as e:
        main(["-s", schema, "--nocolor", "--", "prog", "--size=-1"])
    assert e.value.code == 1
    assert capsys.readouterr().err.strip() == "ERROR: argument for option '--size' must not be negative"


def test_cli_tolerant(tmp_path, capsys):
    schema = _create_schema(tmp_path)
    main(["-s", schema, "--tolerant", "--format", "json", "--", "prog", "-x", "--size", "big"])
    output = json.loads(capsys.readouterr().out)
    assert output["operands"] == ["prog", "-x", "--size", "big"]
    assert output["values"]["size"] is None


def test_cli_missing_schema(capsys):
    with pytest.raises(SystemExit) as e:
        main(["--nocolor"])
    assert e.value.code == 1
    err = capsys.readouterr().err
    assert err.startswith("ERROR: Missing --schema option.")
    assert "USAGE: cmdopt" in err
    with pytest.raises(SystemExit) as e:
        main(["--nocolor", "--bogus"])
    assert e.value.code == 1
    assert capsys.readouterr().err.startswith("ERROR: invalid option: '--bogus'")


def test_cli_help_text(tmp_path, capsys):
    schema = _create_schema(tmp_path)
    with pytest.raises(SystemExit) as e:
        main(["-s", schema, "--help-text"])
    assert e.value.code == 0
    assert capsys.readouterr().out.split("\n")[:5] == [
        f"{'  -v, --verbose':<30}verbose mode",
        f"{'  -s, --size=SIZE':<30}scale sizes by SIZE",
        "",
        "Tagging",
        "      --tag[=TAG]"
    ]


def test_print_tree():
    lines = []
    print_tree({"program": "prog", "operands": [], "values": {"verbose": True, "size": 10}}, printf=lines.append)
    assert lines == [
        "▷ program: prog",
        "▷ operands: []",
        "▷ values",
        "  ├── verbose: True",
        "  └── size: 10"
    ]
    lines = []
    print_tree({"values": {"size": 10}}, indent=2, annotator=lambda path: f"({path})", printf=lines.append)
    assert lines == ["  ▷ values", "    └── size: 10 (values/size)"]
