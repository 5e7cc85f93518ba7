import threading

import pytest

from argdeck import CLIBuilder, Err, Ok, one_of, range_of
from argdeck.exceptions import (
    ArityError,
    ConfigurationError,
    ConversionError,
    ValidationError,
)
from argdeck.parser import WarningKind


def build_example():
    builder = CLIBuilder()
    builder.add_option("o", alias="option")
    builder.add_value("r", float, range_of(0.0, 1.0), dest="range", default=0.0)
    builder.add_value("f", int, one_of({1, 3, 5}), alias="oneof", default=0)
    return builder


def test_end_to_end_success(caplog):
    parsed = build_example().parse(["prog", "-o", "-r", "0.5", "-f", "3"]).unwrap()
    result = parsed.run().unwrap()
    assert result["o"] is True
    assert result["range"] == 0.5
    assert result["f"] == 3
    assert parsed.warnings == ()
    assert result.warnings == ()
    assert "WARNING" not in caplog.text


def test_end_to_end_aliases_and_long_flags():
    parsed = build_example().parse(["prog", "--option", "--oneof", "5"]).unwrap()
    result = parsed.run().unwrap()
    assert result["o"] is True
    assert result["f"] == 5
    assert result["range"] == 0.0


def test_defaults_when_flags_absent():
    result = build_example().parse(["prog"]).unwrap().run().unwrap()
    assert result.values == {"o": False, "range": 0.0, "f": 0}


def test_results_exposed_through_options_manager():
    parsed = build_example().parse(["prog", "-r", "0.25"]).unwrap()
    get_range = parsed.options.get_value_getter("range")
    assert get_range() is None
    parsed.run().unwrap()
    assert get_range() == 0.25
    assert parsed.options.get("o") is False


def test_validation_failure_stops_run():
    calls = []
    builder = CLIBuilder()
    builder.add_value("r", float, range_of(0.0, 1.0), priority=5)
    builder.add_command("p", lambda values: calls.append(values), priority=-1)
    parsed = builder.parse(["prog", "-p", "x", "-r", "5.0"]).unwrap()
    result = parsed.run()
    assert isinstance(result, Err)
    assert isinstance(result.error, ValidationError)
    assert result.error.raw == "5.0"
    assert calls == []
    with pytest.raises(ValidationError):
        result.unwrap()


def test_conversion_failure_is_err():
    parsed = build_example().parse(["prog", "-f", "three"]).unwrap()
    result = parsed.run()
    assert result.is_err()
    assert isinstance(result.error, ConversionError)
    assert result.error.target_type is int


def test_missing_value_is_arity_err():
    result = build_example().parse(["prog", "-r"])
    assert isinstance(result, Err)
    assert isinstance(result.error, ArityError)
    assert result.error.expected == 1
    assert result.error.supplied == 0


def test_surplus_values_warn():
    parsed = build_example().parse(["prog", "-f", "1", "2"]).unwrap()
    assert [warning.kind for warning in parsed.warnings] == [WarningKind.ARITY]
    assert parsed.run().unwrap()["f"] == 1


def test_unrecognized_option_is_skipped(caplog):
    calls = []
    builder = CLIBuilder()
    builder.add_command("p", lambda values: calls.append(values))
    parsed = builder.parse(["prog", "-z", "x"]).unwrap()
    assert [warning.kind for warning in parsed.warnings] == [
        WarningKind.UNRECOGNIZED,
        WarningKind.DISCARDED,
    ]
    assert "Unrecognized option 'z'." in caplog.text
    assert "Discarded arguments 'x'" in caplog.text
    assert isinstance(parsed.run(), Ok)
    assert calls == []


def test_combined_short_flags():
    builder = CLIBuilder()
    for name in "abc":
        builder.add_option(name)
    parsed = builder.parse(["prog", "-abc", "ignored"]).unwrap()
    assert [warning.kind for warning in parsed.warnings] == [WarningKind.DISCARDED]
    result = parsed.run().unwrap()
    assert result.values == {"a": True, "b": True, "c": True}


def test_priority_order_is_respected():
    order = []
    builder = CLIBuilder()
    builder.add_command("late", lambda _: order.append("late"), priority=-1)
    builder.add_command("early", lambda _: order.append("early"), priority=10)
    parsed = builder.parse(["prog", "--late", "--early"]).unwrap()
    parsed.run().unwrap()
    assert order == ["early", "late"]


def test_command_receives_values_and_stores_result():
    builder = CLIBuilder()
    builder.add_command("p", lambda values: " ".join(values), alias="print")
    result = builder.parse(["prog", "--print", "a", "b"]).unwrap().run().unwrap()
    assert result["p"] == "a b"


def test_repeated_flag_last_value_wins():
    result = build_example().parse(["prog", "-f", "1", "-f", "5"]).unwrap().run()
    assert result.unwrap()["f"] == 5


def test_run_twice_reexecutes_tasks():
    calls = []
    builder = CLIBuilder()
    builder.add_command("p", lambda values: calls.append(values))
    parsed = builder.parse(["prog", "-p", "a"]).unwrap()
    parsed.run().unwrap()
    parsed.run().unwrap()
    assert calls == [["a"], ["a"]]


def test_program_values_are_ignored():
    calls = []
    builder = CLIBuilder()
    builder.add_command("p", lambda values: calls.append(values))
    parsed = builder.parse(["prog", "stray", "-p"]).unwrap()
    assert parsed.warnings == ()
    assert parsed.program == "prog"
    assert parsed.run().unwrap().values == {"p": None}
    assert calls == [[]]


def test_registration_after_parse_is_rejected():
    builder = build_example()
    builder.parse(["prog"])
    with pytest.raises(ConfigurationError):
        builder.add_option("x")
    with pytest.raises(ConfigurationError):
        builder.add_value("y")
    with pytest.raises(ConfigurationError):
        builder.add_command("z", lambda _: None)
    with pytest.raises(ConfigurationError):
        builder.parse(["prog"])


def test_duplicate_registration_is_rejected():
    builder = build_example()
    with pytest.raises(ConfigurationError):
        builder.add_option("o")
    with pytest.raises(ConfigurationError):
        builder.add_option("x", alias="oneof")
    with pytest.raises(ConfigurationError):
        builder.add_command("option", lambda _: None)


def test_names_with_dashes_are_normalized():
    builder = CLIBuilder()
    builder.add_option("-v", alias="--verbose")
    result = builder.parse(["prog", "--verbose"]).unwrap().run().unwrap()
    assert result["v"] is True


@pytest.mark.parametrize("arity", [-1, 1.5, True])
def test_invalid_arity_is_rejected(arity):
    with pytest.raises(ConfigurationError):
        CLIBuilder().add_command("x", lambda _: None, arity)


def test_invalid_names_are_rejected():
    builder = CLIBuilder()
    with pytest.raises(ConfigurationError):
        builder.add_option("")
    with pytest.raises(ConfigurationError):
        builder.add_option("--")


def test_empty_argv_is_err():
    result = CLIBuilder().parse([])
    assert isinstance(result.error, ConfigurationError)


def test_parse_defaults_to_sys_argv(monkeypatch):
    monkeypatch.setattr("sys.argv", ["tool", "-o"])
    result = build_example().parse().unwrap().run().unwrap()
    assert result["o"] is True


def test_handler_exceptions_propagate():
    def boom(_):
        raise RuntimeError("boom")

    builder = CLIBuilder()
    builder.add_command("x", boom)
    parsed = builder.parse(["prog", "-x"]).unwrap()
    with pytest.raises(RuntimeError, match="boom"):
        parsed.run()


def test_render_help(capsys):
    builder = CLIBuilder(program="tool", description="Example tool")
    builder.add_option("o", alias="option", help="Enable the option.")
    builder.add_value("r", float, help="A ratio.")
    builder.render_help()
    out = capsys.readouterr().out
    assert "usage: tool [options]" in out
    assert "Example tool" in out
    assert "--option" in out
    assert " -o " in out
    assert "Enable the option." in out
    assert "A ratio." in out


def test_render_help_shows_markup_characters_literally(capsys):
    builder = CLIBuilder(program="tool", description="Deploys [staging] builds")
    builder.add_value("m", help="One of [a|b].")
    builder.render_help()
    out = capsys.readouterr().out
    assert "usage: tool [options]" in out
    assert "Deploys [staging] builds" in out
    assert "One of [a|b]." in out


def test_invocation_name_matching_alias_has_no_effect():
    calls = []
    builder = CLIBuilder()
    builder.add_command("d", lambda values: calls.append(values), alias="deploy")
    builder.add_option("x")
    parsed = builder.parse(["deploy", "-x"]).unwrap()
    result = parsed.run().unwrap()
    assert calls == []
    assert [task.name for task in parsed.tasks] == ["x"]
    assert result.values == {"d": None, "x": True}


@pytest.mark.parametrize("argv", [["tool"], ["tool", "3"]])
def test_invocation_name_matching_binding_has_no_effect(argv):
    builder = CLIBuilder()
    builder.add_value("tool", int, default=7)
    parsed = builder.parse(argv).unwrap()
    assert parsed.tasks == ()
    assert parsed.warnings == ()
    assert parsed.run().unwrap()["tool"] == 7


def test_defaults_are_reported_as_given():
    lock = threading.Lock()
    builder = CLIBuilder()
    builder.add_value("out", str, default=lock)
    result = builder.parse(["prog"]).unwrap().run().unwrap()
    assert result["out"] is lock
