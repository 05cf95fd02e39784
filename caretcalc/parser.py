"""Recursive descent parser for the calculator grammar

    E -> T (('+' | '-') T)*
    T -> F (('*' | '/') F)*
    F -> P ('^' F)?
    P -> Number | '(' E ')' | '-' F

Running out of tokens where the grammar still expects some is not an error: the
parse is ``Incomplete`` and the caller may retry with more input appended.
"""

import enum
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from caretcalc.errors import ErrorKind, PositionedError, Span, TokenizerError
from caretcalc.tokenizer import Token, TokenType, tokenize
from caretcalc.utils import PrintableEnum


class BinaryOperator(PrintableEnum):
    ADD = enum.auto()
    SUB = enum.auto()
    MUL = enum.auto()
    DIV = enum.auto()
    POW = enum.auto()


@dataclass(frozen=True)
class Literal:
    value: float


@dataclass(frozen=True)
class BinaryOperation:
    operator: BinaryOperator
    left: "Expression"
    right: "Expression"


@dataclass(frozen=True)
class Negation:
    operand: "Expression"


Expression = Literal | BinaryOperation | Negation


@dataclass(frozen=True)
class Success:
    tree: Expression

    def __str__(self) -> str:
        # the default repr recurses through the whole tree
        return "Success"


@dataclass(frozen=True)
class Incomplete:
    pass


@dataclass(frozen=True)
class Failure:
    error: PositionedError


ParseOutcome = Success | Incomplete | Failure


ADDITIVE_OPERATORS = {
    TokenType.PLUS: BinaryOperator.ADD,
    TokenType.MINUS: BinaryOperator.SUB,
}

MULTIPLICATIVE_OPERATORS = {
    TokenType.STAR: BinaryOperator.MUL,
    TokenType.SLASH: BinaryOperator.DIV,
}


class _NeedMoreInput(Exception):
    pass


@dataclass
class ParserError(Exception):
    error: PositionedError


class TokenCursor:
    """One-token lookahead over a (possibly lazy) token stream"""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens: Iterator[Token] = iter(tokens)
        self._peeked: Optional[Token] = None
        self._exhausted = False
        self.last_span = Span(0, 0)

    def peek(self) -> Optional[Token]:
        if self._peeked is None and not self._exhausted:
            try:
                self._peeked = next(self._tokens)
            except StopIteration:
                self._exhausted = True
        return self._peeked

    def next(self) -> Optional[Token]:
        token = self.peek()
        self._peeked = None
        if token is not None:
            self.last_span = token.span
        return token


def parse(tokens: Iterable[Token]) -> ParseOutcome:
    cursor = TokenCursor(tokens)
    try:
        expression = _consume_expression(cursor)
        leftover = cursor.next()
        if leftover is not None:
            raise ParserError(PositionedError(ErrorKind.UNEXPECTED_TOKEN, leftover.span))
    except _NeedMoreInput:
        return Incomplete()
    except (TokenizerError, ParserError) as e:
        return Failure(e.error)
    except RecursionError:
        # brackets or unary minus nested past the interpreter stack
        return Failure(PositionedError(ErrorKind.NESTED_TOO_DEEPLY, cursor.last_span))
    return Success(expression)


def tokenize_and_parse(code: str) -> ParseOutcome:
    return parse(tokenize(code))


def _consume_expression(cursor: TokenCursor) -> Expression:
    result = _consume_term(cursor)
    while (token := cursor.peek()) is not None and token.type in ADDITIVE_OPERATORS:
        cursor.next()
        result = BinaryOperation(ADDITIVE_OPERATORS[token.type], result, _consume_term(cursor))
    return result


def _consume_term(cursor: TokenCursor) -> Expression:
    result = _consume_factor(cursor)
    while (token := cursor.peek()) is not None and token.type in MULTIPLICATIVE_OPERATORS:
        cursor.next()
        result = BinaryOperation(MULTIPLICATIVE_OPERATORS[token.type], result, _consume_factor(cursor))
    return result


def _consume_factor(cursor: TokenCursor) -> Expression:
    base = _consume_primary(cursor)
    token = cursor.peek()
    if token is None or token.type is not TokenType.CARET:
        return base
    cursor.next()
    # right recursion makes "^" right-associative
    return BinaryOperation(BinaryOperator.POW, base, _consume_factor(cursor))


def _consume_primary(cursor: TokenCursor) -> Expression:
    token = cursor.next()
    if token is None:
        raise _NeedMoreInput()
    elif token.type is TokenType.NUMBER:
        return Literal(token.value)
    elif token.type is TokenType.BRACKET_OPEN:
        inner = _consume_expression(cursor)
        closing = cursor.next()
        if closing is None:
            raise _NeedMoreInput()
        if closing.type is not TokenType.BRACKET_CLOSE:
            raise ParserError(PositionedError(ErrorKind.UNEXPECTED_TOKEN, closing.span))
        return inner
    elif token.type is TokenType.MINUS:
        # "-" takes a whole factor, so -2^2 is -(2^2)
        return Negation(_consume_factor(cursor))
    else:
        raise ParserError(PositionedError(ErrorKind.UNEXPECTED_TOKEN, token.span))
