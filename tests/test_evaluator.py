import pytest

from jsonlogic_lab.harness import canonical_json, complexity_score, evaluate, pretty_json
from jsonlogic_lab.scenarios.definitions import (
    COMPLEX_DATA_ACCESS_RULE,
    COMPLEX_LOGIC_RULE,
    NESTED_LOGIC_RULE,
)


def test_equality_against_empty_data():
    assert evaluate({"==": [1, 1]}, {}) is True


def test_variable_comparison():
    assert evaluate({">=": [{"var": "temp"}, 20]}, {"temp": 25}) is True
    assert evaluate({">=": [{"var": "temp"}, 20]}, {"temp": 15}) is False


def test_nested_and():
    assert evaluate(NESTED_LOGIC_RULE, {"temp": 25}) is True
    assert evaluate(NESTED_LOGIC_RULE, {"temp": 35}) is False


@pytest.mark.parametrize("temp,label", [(35, "hot"), (25, "warm"), (5, "cold")])
def test_branching_labels(temp, label):
    assert evaluate(COMPLEX_LOGIC_RULE, {"temp": temp}) == label


def test_dotted_variable_paths():
    data = {"main": {"temp": 25}, "secondary": {"temp": 22}}
    assert evaluate(COMPLEX_DATA_ACCESS_RULE, data) is True


def test_canonical_json_is_compact_and_keeps_key_order():
    assert canonical_json({"==": [1, 1]}) == '{"==":[1,1]}'
    assert canonical_json({"b": 1, "a": 2}) == '{"b":1,"a":2}'
    assert canonical_json("é") == '"é"'


def test_complexity_score_is_canonical_length():
    assert complexity_score({"==": [1, 1]}) == 12
    rule = {">=": [{"var": "temp"}, 20]}
    assert complexity_score(rule) == len('{">=":[{"var":"temp"},20]}')


def test_pretty_json_indents():
    assert pretty_json({"a": [1]}) == '{\n  "a": [\n    1\n  ]\n}'
