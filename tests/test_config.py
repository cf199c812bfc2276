import pytest

from clapper.config import loader
from clapper.exceptions import SchemaError

YAML_CONFIG = """
commands:
  - name: ""
    args:
      - name: output
    flags:
      - {name: force, short: f, boolean: true}
      - {name: dir, default: /var/users}
  - name: info
    args:
      - {name: category, default: manager}
      - {name: username}
      - {name: "subjects..."}
    flags:
      - {name: verbose, short: v, boolean: true}
      - {name: version, short: V, default: "1.0.1"}
      - {name: no-clean, boolean: true}
  - name: ghost
"""

TOML_CONFIG = """
[[commands]]
name = ""

[[commands.args]]
name = "output"

[[commands.flags]]
name = "force"
short = "f"
boolean = true

[[commands]]
name = "info"

[[commands.args]]
name = "subjects..."
"""


def test_load_yaml(tmp_path):
    config_file = tmp_path / "clapper.yaml"
    config_file.write_text(YAML_CONFIG)

    registry = loader(config_file)

    assert set(registry) == {"", "info", "ghost"}
    assert registry[""].flags["dir"].default_value == "/var/users"
    assert registry["info"].flags["clean"].is_inverted is True
    assert registry["info"].args["subjects"].is_variadic is True

    result = registry.parse(["info", "student", "thatisuday", "math", "art", "--no-clean"])
    assert result.args["subjects"].value == "math,art"
    assert result.flags["clean"].value == "false"


def test_load_toml(tmp_path):
    config_file = tmp_path / "clapper.toml"
    config_file.write_text(TOML_CONFIG)

    registry = loader(str(config_file))

    result = registry.parse(["report.txt", "-f"])
    assert result.name == ""
    assert result.args["output"].value == "report.txt"
    assert result.flags["force"].value == "true"
    assert registry["info"].arg_names == ("subjects",)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        loader(tmp_path / "missing.yaml")


def test_unsupported_suffix(tmp_path):
    config_file = tmp_path / "clapper.json"
    config_file.write_text("{}")
    with pytest.raises(ValueError):
        loader(config_file)


def test_non_mapping_content(tmp_path):
    config_file = tmp_path / "clapper.yaml"
    config_file.write_text("- just\n- a list\n")
    with pytest.raises(ValueError):
        loader(config_file)


def test_invalid_schema(tmp_path):
    config_file = tmp_path / "clapper.yaml"
    config_file.write_text("commands:\n  - name: info\n    flags:\n      - {name: --verbose}\n")
    with pytest.raises(SchemaError):
        loader(config_file)


def test_variadic_not_last(tmp_path):
    config_file = tmp_path / "clapper.yaml"
    config_file.write_text(
        "commands:\n  - name: rm\n    args:\n      - {name: files...}\n      - {name: dest}\n"
    )
    with pytest.raises(SchemaError):
        loader(config_file)


def test_invalid_path_type():
    with pytest.raises(TypeError):
        loader(42)  # type: ignore[arg-type]
