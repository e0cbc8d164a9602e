"""
Unit tests for the validation entry points.
"""
import pytest

from input_validator import (
    ArgumentError, ConfigurationError, InvalidRule, collect_errors, get_default_renderer,
    set_default_renderer, validate_inputs,
)


def test_required_scenario_reports_only_empty_field(make_field):
    field_a, field_b = make_field("a", ""), make_field("b", "filled")
    errors = collect_errors({"input": [field_a, field_b], "rule": "required"})
    assert len(errors) == 1
    assert errors[0].field.handle is field_a
    assert errors[0].message == "Required field!"


def test_two_failing_rules_on_one_field(make_field):
    field = make_field("age", "abc")
    errors = collect_errors({"input": field, "rule": [{"rule": "number"}, {"rule": "even"}]})
    assert [e.message for e in errors] == ["Numeric field!", "Value must be even!"]
    assert errors[0].field.handle is errors[1].field.handle is field


@pytest.mark.parametrize("descriptor", [None, [], {}])
def test_empty_descriptor_raises(descriptor):
    with pytest.raises(ArgumentError):
        validate_inputs(descriptor)


def test_success_clears_renderer(make_field, renderer):
    ok = validate_inputs({"input": make_field("a", "x"), "rule": "required"}, True, renderer)
    assert ok is True
    assert renderer.cleared == 1
    assert renderer.rendered == []


def test_failure_renders_full_list_once(make_field, renderer):
    a, b = make_field("a", ""), make_field("b", "")
    ok = validate_inputs({"input": [a, b], "rule": "required"}, renderer=renderer)
    assert ok is False
    assert renderer.cleared == 0
    assert len(renderer.rendered) == 1
    assert [e.field.handle for e in renderer.rendered[0]] == [a, b]


def test_handle_errors_false_leaves_renderer_alone(make_field, renderer):
    assert validate_inputs({"input": make_field("a", ""), "rule": "required"}, False, renderer) is False
    assert validate_inputs({"input": make_field("a", "x"), "rule": "required"}, False, renderer) is True
    assert renderer.cleared == 0
    assert renderer.rendered == []


def test_force_error_handling_ignores_explicit_false(monkeypatch, make_field, renderer):
    monkeypatch.setenv("INPUT_VALIDATOR_FORCE_ERROR_HANDLING", "true")
    assert validate_inputs({"input": make_field("a", ""), "rule": "required"}, False, renderer) is False
    assert len(renderer.rendered) == 1


def test_unknown_rule_aborts_before_later_tasks(make_field, counting_field, renderer):
    descriptor = [
        {"input": make_field("a", ""), "rule": "required"},
        {"input": make_field("b", "x"), "rule": "foo"},
        {"input": counting_field, "rule": "required"},
    ]
    with pytest.raises(InvalidRule):
        validate_inputs(descriptor, renderer=renderer)
    assert counting_field.reads == 0
    assert renderer.cleared == 0
    assert renderer.rendered == []


def test_non_numeric_threshold_aborts(make_field, renderer):
    with pytest.raises(ConfigurationError):
        validate_inputs({"input": make_field("a", "5"), "rule": "maxvalue", "value": "abc"}, renderer=renderer)
    assert renderer.rendered == []


def test_default_renderer_used_when_none_given(make_field, renderer):
    previous = get_default_renderer()
    set_default_renderer(renderer)
    try:
        validate_inputs({"input": make_field("a", ""), "rule": "required"})
    finally:
        set_default_renderer(previous)
    assert len(renderer.rendered) == 1


def test_log_renderer_is_default(make_field):
    from input_validator import LogRenderer
    assert isinstance(get_default_renderer(), LogRenderer)
    assert validate_inputs({"input": make_field("a", ""), "rule": "required"}) is False


def test_non_string_rule_kinds_raise_invalid_rule(make_field):
    with pytest.raises(InvalidRule):
        collect_errors({"input": make_field("a", "x"), "rule": [{"rule": 5}]})
    with pytest.raises(InvalidRule):
        collect_errors({"input": make_field("a", "x"), "rule": [{"rule": None}]})


def test_validation_writes_nothing_to_stdout(make_field, capsys):
    validate_inputs({"input": make_field("a", ""), "rule": ["required", "number"]}, False)
    validate_inputs({"input": make_field("b", "x"), "rule": "required"})
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""
