import enum
import re
from dataclasses import dataclass
from typing import Iterator

from caretcalc.errors import ErrorKind, PositionedError, Span, TokenizerError
from caretcalc.utils import PrintableEnum


class TokenType(PrintableEnum):
    NUMBER = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    STAR = enum.auto()
    SLASH = enum.auto()
    CARET = enum.auto()
    BRACKET_OPEN = enum.auto()
    BRACKET_CLOSE = enum.auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    lexeme: str
    span: Span

    @property
    def value(self) -> float:
        if self.type is not TokenType.NUMBER:
            raise ValueError(f"{self.type} token has no numeric value")
        return float(self.lexeme)

    def __str__(self) -> str:
        return f"<{self.type}>{self.lexeme}"


# a trailing "." is left for the main loop, where it is an unknown symbol
NUMBER_PATTERN = re.compile(r"[0-9]+(\.[0-9]+)?")


SINGLE_CHAR_TOKENS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "^": TokenType.CARET,
    "(": TokenType.BRACKET_OPEN,
    ")": TokenType.BRACKET_CLOSE,
}


def tokenize(code: str) -> Iterator[Token]:
    """Lazily split ``code`` into tokens.

    Whitespace is skipped. The first character that belongs to no token raises
    ``TokenizerError`` with an ``UNKNOWN_SYMBOL`` error spanning that character,
    but only once the consumer has pulled every token before it.
    """
    i = 0
    while i < len(code):
        number_match = NUMBER_PATTERN.match(code, i)
        if number_match is not None:
            yield Token(type=TokenType.NUMBER, lexeme=number_match.group(), span=Span(i, number_match.end()))
            i = number_match.end()
            continue

        if code[i] in SINGLE_CHAR_TOKENS:
            yield Token(type=SINGLE_CHAR_TOKENS[code[i]], lexeme=code[i], span=Span.at(i))
        elif code[i].isspace():
            pass
        else:
            raise TokenizerError(PositionedError(ErrorKind.UNKNOWN_SYMBOL, Span.at(i)))
        i += 1

