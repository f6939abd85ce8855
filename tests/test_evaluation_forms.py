import pytest

from jexp import evaluate
from jexp.types.closure import Closure
from jexp.types.errors import MalformedForm, NotCallable, UndefinedSymbol
from jexp.types.undefined import Undefined


FACT = {
    "lambda": "n",
    "body": {"cond": [
        {"if": {"lte": ["n", 1]}, "then": 1},
        {"else": {"mult": ["n", {"fact": {"minus": ["n", 1]}}]}},
    ]},
}

# -----------------------------------------------------
# let
# -----------------------------------------------------

def test_let_recursive_lambda():
    assert evaluate({"let": {"fact": FACT}, "in": {"fact": 5}}) == 120


def test_let_bindings_see_earlier_siblings():
    expr = {"let": {"a": 1, "b": {"plus": ["a", 1]}, "c": {"plus": ["b", 1]}}, "in": "c"}
    assert evaluate(expr) == 3


def test_let_forward_reference_through_lambda():
    # `f` refers to `g`, which is bound later; the call happens after both exist
    expr = {
        "let": {
            "f": {"lambda": "x", "body": {"g": "x"}},
            "g": {"lambda": "x", "body": {"mult": ["x", 2]}},
        },
        "in": {"f": 4},
    }
    assert evaluate(expr) == 8


def test_let_bindings_do_not_leak():
    expr = {"let": {"a": {"let": {"hidden": 1}, "in": "hidden"}}, "in": "hidden"}
    with pytest.raises(UndefinedSymbol):
        evaluate(expr)


def test_let_requires_in():
    with pytest.raises(MalformedForm):
        evaluate({"let": {"a": 1}})


def test_let_bindings_must_be_mapping():
    with pytest.raises(MalformedForm):
        evaluate({"let": [1, 2], "in": 1})


def test_empty_let():
    assert evaluate({"let": {}, "in": 5}) == 5


def test_shadowing_restored_after_inner_let():
    expr = {"let": {"x": 1}, "in": [{"let": {"x": 2}, "in": "x"}, "x"]}
    assert evaluate(expr) == [2, 1]


def test_lambda_parameter_shadows_outer():
    expr = {"let": {"x": 1, "f": {"lambda": "x", "body": "x"}}, "in": [{"f": 5}, "x"]}
    assert evaluate(expr) == [5, 1]

# -----------------------------------------------------
# lambda
# -----------------------------------------------------

def test_lambda_is_lexically_scoped():
    expr = {
        "let": {"x": 1, "getx": {"lambda": [], "body": "x"}},
        "in": {"let": {"x": 2}, "in": {"getx": []}},
    }
    assert evaluate(expr) == 1


def test_lambda_with_several_parameters():
    expr = {"apply": {"lambda": ["a", "b"], "body": {"minus": ["a", "b"]}}, "args": [10, 3]}
    assert evaluate(expr) == 7


def test_missing_arguments_are_undefined():
    expr = {"apply": {"lambda": ["a", "b"], "body": "b"}, "args": [1]}
    assert evaluate(expr) is Undefined


def test_extra_arguments_are_ignored():
    expr = {"apply": {"lambda": "a", "body": "a"}, "args": [1, 2, 3]}
    assert evaluate(expr) == 1


def test_lambda_requires_body():
    with pytest.raises(MalformedForm):
        evaluate({"lambda": "x"})


def test_lambda_parameter_names_must_be_text():
    with pytest.raises(MalformedForm):
        evaluate({"lambda": [1], "body": 1})


def test_closure_is_callable_from_host():
    f = evaluate({"lambda": ["a", "b"], "body": {"plus": ["a", "b"]}})
    assert isinstance(f, Closure)
    assert f.params == ["a", "b"]
    assert f(2, 3) == 5


def test_closure_returned_from_closure():
    adder = evaluate({"lambda": "n", "body": {"lambda": "m", "body": {"plus": ["n", "m"]}}})
    assert adder(10)(5) == 15


def test_closure_body_is_not_evaluated_at_creation():
    f = evaluate({"lambda": "x", "body": "not_bound_yet"})
    with pytest.raises(UndefinedSymbol):
        f(1)

# -----------------------------------------------------
# cond
# -----------------------------------------------------

def test_cond_first_truthy_clause():
    expr = {"cond": [
        {"if": False, "then": 1},
        {"if": {"gt": [2, 1]}, "then": 2},
        {"if": True, "then": 3},
    ]}
    assert evaluate(expr) == 2


def test_cond_else_returns_immediately():
    expr = {"cond": [{"if": False, "then": "nope"}, {"else": 2}, {"if": True, "then": 3}]}
    assert evaluate(expr) == 2


def test_cond_does_not_evaluate_other_branches():
    expr = {"cond": [{"if": True, "then": 1}, {"else": "unbound"}]}
    assert evaluate(expr) == 1


@pytest.mark.parametrize("test", [0, {"$": ""}, None, False, [], {"$": {}}, Undefined])
def test_cond_falsy_values(test):
    expr = {"cond": [{"if": test, "then": 1}, {"else": 2}]}
    assert evaluate(expr) == 2


def test_cond_without_match_is_undefined():
    assert evaluate({"cond": [{"if": False, "then": 1}]}) is Undefined
    assert evaluate({"cond": []}) is Undefined


def test_strict_cond_raises():
    with pytest.raises(MalformedForm):
        evaluate({"cond": [{"if": False, "then": 1}]}, strict_cond=True)


def test_strict_cond_from_environment_variable(monkeypatch):
    monkeypatch.setenv("JEXP_STRICT_COND", "yes")
    with pytest.raises(MalformedForm):
        evaluate({"cond": [{"if": 0, "then": 1}]})
    assert evaluate({"cond": [{"if": 0, "then": 1}]}, strict_cond=False) is Undefined


def test_strict_cond_reaches_closure_bodies():
    expr = {"apply": {"lambda": [], "body": {"cond": []}}, "args": []}
    with pytest.raises(MalformedForm):
        evaluate(expr, strict_cond=True)


def test_cond_shape_errors():
    with pytest.raises(MalformedForm):
        evaluate({"cond": {"if": True, "then": 1}})
    with pytest.raises(MalformedForm):
        evaluate({"cond": [1]})
    with pytest.raises(MalformedForm):
        evaluate({"cond": [{"then": 1}]})

# -----------------------------------------------------
# apply
# -----------------------------------------------------

def test_apply_builtin_by_symbol():
    assert evaluate({"apply": "plus", "args": [1, 2, 3]}) == 6


def test_apply_single_argument_is_promoted():
    assert evaluate({"apply": "minus", "args": 5}) == -5


def test_apply_arguments_are_evaluated():
    expr = {"let": {"a": 2}, "in": {"apply": "mult", "args": ["a", {"plus": ["a", 1]}]}}
    assert evaluate(expr) == 6


def test_apply_requires_args():
    with pytest.raises(MalformedForm):
        evaluate({"apply": "plus"})


def test_apply_non_callable():
    with pytest.raises(NotCallable):
        evaluate({"let": {"n": 1}, "in": {"apply": "n", "args": []}})


def test_apply_refuses_macros():
    with pytest.raises(NotCallable):
        evaluate({"apply": "$get", "args": [{"$": "a.b"}]})
