import pytest

from clapper.parser import Registry


@pytest.fixture
def registry():
    registry = Registry()
    info, _ = registry.register("info")
    info.add_arg("category", "manager")
    info.add_arg("username", "")
    info.add_arg("subjects...", "")
    info.add_flag("verbose", "v", True, "")
    info.add_flag("version", "V", False, "1.0.1")
    info.add_flag("output", "o", False, "./")
    info.add_flag("no-clean", "", True, "")
    return registry


@pytest.mark.parametrize(
    "tokens",
    [
        [
            "info", "student", "thatisuday", "-V", "-v", "--output", "./opt/dir",
            "--no-clean", "math", "science", "physics",
        ],
        [
            "info", "student", "--version", "--no-clean", "thatisuday", "--output",
            "./opt/dir", "math", "science", "--verbose", "physics",
        ],
    ],
)
def test_variadic_argument_values(registry, tokens):
    result = registry.parse(tokens)
    assert result.args["category"].value == "student"
    assert result.args["username"].value == "thatisuday"
    assert result.args["subjects"].value == "math,science,physics"
    assert result.args["subjects"].as_list() == ["math", "science", "physics"]
    assert result.flags["version"].value == ""
    assert result.flags["output"].value == "./opt/dir"
    assert result.flags["verbose"].value == "true"
    assert result.flags["clean"].value == "false"


def test_variadic_single_value(registry):
    result = registry.parse(["info", "student", "thatisuday", "math"])
    assert result.args["subjects"].value == "math"


def test_only_variadic_argument_collects_everything():
    registry = Registry()
    command, _ = registry.register("rm")
    command.add_arg("files...")
    result = registry.parse(["rm", "a", "b", "c"])
    assert result.args["files"].value == "a,b,c"


def test_root_variadic_argument():
    registry = Registry()
    root, _ = registry.register("")
    root.add_arg("paths...")
    result = registry.parse(["src", "tests"])
    assert result.name == ""
    assert result.args["paths"].as_list() == ["src", "tests"]


def test_arguments_fill_in_registration_order():
    registry = Registry()
    command, _ = registry.register("mv")
    command.add_arg("source")
    command.add_arg("target")
    result = registry.parse(["mv", "a.txt", "-", "b.txt"])
    assert result.args["source"].value == "a.txt"
    assert result.args["target"].value == "-"


def test_empty_tokens_are_skipped(registry):
    result = registry.parse(["info", "", "student", ""])
    assert result.args["category"].value == "student"
    assert result.args["subjects"].value == ""


def test_positional_with_equals_is_not_split(registry):
    result = registry.parse(["info", "key=value"])
    assert result.args["category"].value == "key=value"
