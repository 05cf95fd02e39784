import math
from typing import Callable

from caretcalc.parser import BinaryOperation, BinaryOperator, Expression, Literal, Negation


def evaluate(expression: Expression) -> float:
    """Post-order walk with an explicit stack, no recursion"""
    results: list[float] = []
    pending: list[tuple[Expression, bool]] = [(expression, False)]
    while pending:
        node, operands_done = pending.pop()
        if isinstance(node, Literal):
            results.append(node.value)
        elif isinstance(node, Negation):
            if operands_done:
                results.append(-results.pop())
            else:
                pending += [(node, True), (node.operand, False)]
        elif isinstance(node, BinaryOperation):
            if operands_done:
                right_res = results.pop()
                left_res = results.pop()
                results.append(binary_operation_impls[node.operator](left_res, right_res))
            else:
                # left is popped first, so its result lands below the right one
                pending += [(node, True), (node.right, False), (node.left, False)]
        else:
            raise RuntimeError(f"Unexpected expression type: {node}")
    return results.pop()


def _div(a: float, b: float) -> float:
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _pow(a: float, b: float) -> float:
    """IEEE-754 ``pow``: overflow gives inf and complex results give nan"""
    try:
        result = a**b
    except OverflowError:
        # |a| > 1 here; the sign only survives for odd integral exponents
        odd_exponent = b.is_integer() and math.fmod(b, 2.0) != 0.0
        return -math.inf if a < 0 and odd_exponent else math.inf
    except ZeroDivisionError:
        # 0 raised to a negative power
        odd_exponent = b.is_integer() and math.fmod(b, 2.0) != 0.0
        return math.copysign(math.inf, a) if odd_exponent else math.inf
    if isinstance(result, complex):
        return math.nan
    return result


binary_operation_impls: dict[BinaryOperator, Callable[[float, float], float]] = {
    BinaryOperator.ADD: lambda a, b: a + b,
    BinaryOperator.SUB: lambda a, b: a - b,
    BinaryOperator.MUL: lambda a, b: a * b,
    BinaryOperator.DIV: _div,
    BinaryOperator.POW: _pow,
}
