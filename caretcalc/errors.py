import enum
from dataclasses import dataclass
from typing import NamedTuple

from caretcalc.utils import PrintableEnum


class Span(NamedTuple):
    """Half-open ``[start, end)`` range of character offsets into the input"""

    start: int
    end: int

    @classmethod
    def at(cls, idx: int) -> "Span":
        return cls(idx, idx + 1)


class ErrorKind(PrintableEnum):
    UNEXPECTED_TOKEN = enum.auto()
    UNKNOWN_SYMBOL = enum.auto()
    UNEXPECTED_END_OF_INPUT = enum.auto()
    NESTED_TOO_DEEPLY = enum.auto()

    @property
    def message(self) -> str:
        return {
            ErrorKind.UNEXPECTED_TOKEN: "not expected here",
            ErrorKind.UNKNOWN_SYMBOL: "unknown symbol",
            ErrorKind.UNEXPECTED_END_OF_INPUT: "unexpected end of input",
            ErrorKind.NESTED_TOO_DEEPLY: "nested too deeply",
        }[self]


@dataclass(frozen=True)
class PositionedError:
    kind: ErrorKind
    span: Span

    def __str__(self) -> str:
        return f"{self.kind.message} at {self.span.start}"


@dataclass
class TokenizerError(Exception):
    error: PositionedError

    def __str__(self) -> str:
        return f"[Tokenizer error] {self.error}"
