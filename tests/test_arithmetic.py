import math

import pytest

from caretcalc.parser import Success, tokenize_and_parse
from caretcalc.runtime import evaluate


def eval_code(code: str) -> float:
    outcome = tokenize_and_parse(code)
    assert isinstance(outcome, Success), outcome
    return evaluate(outcome.tree)


@pytest.mark.parametrize(
    "code, expected_ret_val",
    [
        pytest.param("1", 1.0),
        pytest.param("1.0", 1.0),
        pytest.param("-1", -1.0),
        pytest.param("1+2", 3.0),
        pytest.param("(1+2)", 3.0),
        pytest.param("-(1+2)", -3.0),
        pytest.param("(((1)))", 1.0),
        pytest.param("1 * 4 + 5", 9.0),
        pytest.param("1 + 4 * 5", 21.0),
        pytest.param("10 / 5 / 2 / 2", 0.5),
        pytest.param("10 - 5 - 2", 3.0),
        pytest.param("6 / 2 * 3", 9.0),
        pytest.param("10 + 2 * (5 + 3 - 1)", 24.0),
        pytest.param("1--1", 2.0),
        pytest.param("1+1+1", 3.0),
        pytest.param("-5 + 5", 0.0),
        pytest.param("5^2", 25.0),
        pytest.param("9^0.5", 3.0),
        pytest.param("-5^2", -25.0),
        pytest.param("6^2+1", 37.0),
        pytest.param("2*10^2", 200.0),
        pytest.param("2^2/2", 2.0),
        pytest.param("2^-1", 0.5),
        pytest.param("1 + 5*3^2", 46.0, id="precedence"),
        pytest.param("2^3^2", 512.0, id="pow-right-assoc"),
        pytest.param("-2^2", -4.0, id="neg-binds-around-pow"),
        pytest.param("(1+5)*3", 18.0, id="parens"),
        pytest.param("(1+0.25)*0.25", 0.3125),
        pytest.param("2 * (5 + 1)", 12.0),
        pytest.param("4 * \n5 + 2", 22.0, id="continuation-line"),
        pytest.param("\t3\n*\n2 ", 6.0),
    ],
)
def test_eval_arithmetic(code: str, expected_ret_val: float) -> None:
    assert eval_code(code) == expected_ret_val


@pytest.mark.parametrize(
    "code, expected_ret_val",
    [
        pytest.param("1 / 0", math.inf),
        pytest.param("-1 / 0", -math.inf),
        pytest.param("1 / -0", -math.inf),
        pytest.param("10 ^ 400", math.inf),
        pytest.param("-10 ^ 401", -math.inf),
        pytest.param("(0 - 10) ^ 401", -math.inf),
        pytest.param("0 ^ -1", math.inf),
    ],
)
def test_eval_infinities(code: str, expected_ret_val: float) -> None:
    assert eval_code(code) == expected_ret_val


@pytest.mark.parametrize("code", ["0 / 0", "(0 - 8) ^ 0.5", "1 / 0 - 1 / 0"])
def test_eval_nan(code: str) -> None:
    assert math.isnan(eval_code(code))


def test_evaluate_does_not_mutate_tree() -> None:
    outcome = tokenize_and_parse("2 * (3 + 4)")
    assert isinstance(outcome, Success)
    assert evaluate(outcome.tree) == evaluate(outcome.tree) == 14.0


@pytest.mark.parametrize(
    "code, expected_ret_val",
    [
        pytest.param("+".join(["1"] * 5000), 5000.0, id="long-sum"),
        pytest.param("*".join(["1"] * 5000), 1.0, id="long-product"),
        pytest.param("-".join(["2"] * 5000), -9996.0, id="long-difference"),
    ],
)
def test_eval_long_chains(code: str, expected_ret_val: float) -> None:
    assert eval_code(code) == expected_ret_val
