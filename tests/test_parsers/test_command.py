import pytest

from clapper.exceptions import SchemaError
from clapper.parser import Arg, Command, Flag, Registry


def test_register_root_and_subcommand():
    registry = Registry()
    root, existed = registry.register("")
    assert existed is False
    assert root.is_root
    info, existed = registry.register("info")
    assert existed is False
    assert info.name == "info"
    assert not info.is_root
    assert registry.root is root
    assert set(registry) == {"", "info"}
    assert len(registry) == 2


def test_register_is_idempotent():
    registry = Registry()
    first, _ = registry.register("info")
    second, existed = registry.register("  info  ")
    assert existed is True
    assert second is first
    assert len(registry) == 1


def test_registry_without_root():
    registry = Registry()
    registry.register("ghost")
    assert registry.root is None
    assert "ghost" in registry
    assert "" not in registry


def test_add_arg_keeps_registration_order():
    command = Command("info")
    command.add_arg("category", "manager")
    command.add_arg("username")
    assert command.arg_names == ("category", "username")
    assert command.args["category"] == Arg("category", False, "manager")


def test_add_arg_variadic():
    command = Command("info")
    arg, existed = command.add_arg("subjects...", "")
    assert existed is False
    assert arg.name == "subjects"
    assert arg.is_variadic is True
    assert command.arg_names == ("subjects",)


def test_add_arg_is_idempotent():
    command = Command()
    first, _ = command.add_arg("output", "a")
    second, existed = command.add_arg(" output ", "b")
    assert existed is True
    assert second is first
    assert second.default_value == "a"


def test_add_arg_after_variadic_raises():
    command = Command("info")
    command.add_arg("subjects...")
    with pytest.raises(SchemaError):
        command.add_arg("username")


def test_add_arg_variadic_reregistration_is_noop():
    command = Command("info")
    command.add_arg("subjects...")
    arg, existed = command.add_arg("subjects...")
    assert existed is True
    assert arg.is_variadic


def test_add_flag_boolean_forces_false_default():
    command = Command()
    flag, existed = command.add_flag("force", "f", True, "yes")
    assert existed is False
    assert flag == Flag("force", "f", True, False, "false")


def test_add_flag_non_boolean_keeps_default():
    command = Command()
    flag, _ = command.add_flag("dir", "", False, " /var/users ")
    assert flag.default_value == "/var/users"
    assert flag.is_boolean is False
    assert flag.short_name == ""


def test_add_flag_inverted():
    command = Command("info")
    flag, _ = command.add_flag("no-clean", "c", True, "")
    assert flag.name == "clean"
    assert flag.is_inverted is True
    assert flag.is_boolean is True
    assert flag.short_name == ""
    assert flag.default_value == "true"
    assert command.get_flag("clean") is flag
    assert command.get_flag("no-clean") is None
    assert command.get_flag_by_short("c") is None


def test_add_flag_non_boolean_no_prefix_is_not_inverted():
    command = Command()
    flag, _ = command.add_flag("no-cache", "", False, "x")
    assert flag.name == "no-cache"
    assert flag.is_inverted is False
    assert flag.default_value == "x"


def test_add_flag_truncates_short_name():
    command = Command()
    flag, _ = command.add_flag("verbose", "vv", True)
    assert flag.short_name == "v"
    assert command.get_flag_by_short("v") is flag


def test_add_flag_is_idempotent():
    command = Command()
    first, _ = command.add_flag("version", "V", False, "1.0.1")
    second, existed = command.add_flag("version", "x", True, "2.0.0")
    assert existed is True
    assert second is first
    assert command.get_flag_by_short("x") is None


def test_add_flag_short_name_collision_raises():
    command = Command()
    command.add_flag("verbose", "v", True)
    with pytest.raises(SchemaError):
        command.add_flag("version", "v", False)


def test_schema_views_are_read_only():
    command = Command()
    command.add_flag("verbose", "v", True)
    command.add_arg("output")
    with pytest.raises(TypeError):
        command.flags["other"] = Flag("other")  # type: ignore[index]
    with pytest.raises(TypeError):
        command.args["other"] = Arg("other")  # type: ignore[index]


def test_flag_text():
    command = Command()
    clean, _ = command.add_flag("no-clean", "", True)
    verbose, _ = command.add_flag("verbose", "v", True)
    assert clean.get_flag_text() == "--no-clean"
    assert verbose.get_flag_text() == "--verbose"
    assert clean.presence_value == "false"
    assert verbose.presence_value == "true"


def test_positional_text():
    command = Command("info")
    category, _ = command.add_arg("category", "manager")
    subjects, _ = command.add_arg("subjects...")
    assert category.get_positional_text() == "category"
    assert subjects.get_positional_text() == "subjects..."


def test_get_arg():
    command = Command("info")
    category, _ = command.add_arg("category", "manager")
    assert command.get_arg("category") is category
    assert command.get_arg("missing") is None


@pytest.mark.parametrize("name", ["", "   ", "no-"])
def test_add_flag_empty_name_raises(name):
    command = Command("info")
    with pytest.raises(SchemaError):
        command.add_flag(name, "", True)
    assert command.flags == {}


@pytest.mark.parametrize("name", ["", "  ", "...", " ... "])
def test_add_arg_empty_name_raises(name):
    command = Command("info")
    with pytest.raises(SchemaError):
        command.add_arg(name)
    assert command.arg_names == ()
