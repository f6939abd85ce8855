import logging

import pytest

from jexp import evaluate
from jexp.types.errors import UndefinedSymbol
from jexp.types.undefined import Undefined

# -----------------------------------------------------
# Shape classification
# -----------------------------------------------------

def test_self_evaluating_literals():
    assert evaluate(1) == 1
    assert evaluate(3.14) == 3.14
    assert evaluate(None) is None
    assert evaluate(True) is True
    assert evaluate(False) is False
    assert evaluate(Undefined) is Undefined

def test_symbol_lookup(frame):
    assert evaluate("x", [frame]) == 42
    assert evaluate("y", frame) == 100
    with pytest.raises(UndefinedSymbol):
        evaluate("z", frame)

def test_sequence_is_evaluated_element_wise(frame):
    assert evaluate(["x", 1, [2, "y"]], frame) == [42, 1, [2, 100]]
    assert evaluate([]) == []

def test_tuple_evaluates_to_list(frame):
    assert evaluate(("x", 1), frame) == [42, 1]

def test_sequence_elements_are_never_a_form():
    # each element is a form, the list around them is not
    assert evaluate([{"$": "a"}, {"plus": [1, 2]}]) == ["a", 3]

def test_standard_bindings_resolve_as_symbols():
    plus = evaluate("plus")
    assert callable(plus)
    assert plus(1, 2) == 3

# -----------------------------------------------------
# Host frames
# -----------------------------------------------------

def test_frames_are_nearest_first():
    assert evaluate("x", [{"x": 1}, {"x": 2}]) == 1
    assert evaluate("x", [{"y": 1}, {"x": 2}]) == 2

def test_host_frame_shadows_standard_binding():
    assert evaluate({"plus": [1, 2]}, {"plus": lambda *args: "host"}) == "host"

def test_host_function_gets_evaluated_arguments(frame):
    expr = {"concat": [{"get": ["user", {"$": "name"}]}, {"$": "!"}]}
    assert evaluate(expr, frame) == "Ada!"

def test_host_macro_by_sigil_name():
    def twice(form, e):
        return {"plus": [e, e]}

    assert evaluate({"$twice": {"mult": [2, 3]}}, {"$twice": twice}) == 12

def test_host_frame_is_not_modified(frame):
    before = dict(frame)
    evaluate({"let": {"x": 1}, "in": "x"}, frame)
    assert frame == before

# -----------------------------------------------------
# End-to-end scenarios
# -----------------------------------------------------

def test_let_with_plus():
    expr = {
        "let": {"one": 1, "two": 2},
        "in": {"plus": ["one", "two"]},
    }
    assert evaluate(expr) == 3

def test_let_with_lambda():
    expr = {
        "let": {
            "times10": {"lambda": "a", "body": {"mult": ["a", 10]}},
            "two": 2,
            "twoTimesTen": {"times10": "two"},
        },
        "in": ["two", "twoTimesTen"],
    }
    assert evaluate(expr) == [2, 20]

def test_let_with_quote():
    expr = {
        "let": {
            "one": 1,
            "two": 2,
            "onePlusTwo": {"plus": ["one", "two"]},
            "quotedOnePlusTwo": {"$": {"plus": ["one", "two"]}},
        },
        "in": ["one", "two", "onePlusTwo", "quotedOnePlusTwo"],
    }
    assert evaluate(expr) == [1, 2, 3, {"plus": ["one", "two"]}]

def test_let_with_quasiquote():
    expr = {
        "let": {
            "someThings": {"$": [
                {"name": "banana", "type": "fruits"},
                {"name": "teapot", "type": "dishes"},
                {"name": "Sun", "type": "stars"},
            ]},
            "expressions": {"_$": {
                "1 + 1": {"$_": {"plus": [1, 1]}},
                "(1 + 2) * 3": {"$_": {"mult": [{"plus": [1, 2]}, 3]}},
                "10 % 3": {"$_": {"mod": [10, 3]}},
            }},
        },
        "in": ["someThings", "expressions"],
    }
    assert evaluate(expr) == [
        [{"name": "banana", "type": "fruits"},
         {"name": "teapot", "type": "dishes"},
         {"name": "Sun", "type": "stars"}],
        {"1 + 1": 2, "(1 + 2) * 3": 9, "10 % 3": 1},
    ]


def test_evaluation_logs_debug_records(caplog):
    caplog.set_level(logging.DEBUG, logger="jexp")
    assert evaluate({"let": {"x": 2}, "in": {"plus": ["x", 1]}}) == 3
    messages = [r.getMessage() for r in caplog.records if r.name == "jexp.evaluation.evaluator"]
    assert "special form let_form" in messages
    assert "call plus (function) with 2 operand(s)" in messages
    assert all(r.levelno == logging.DEBUG for r in caplog.records)
