import argparse
import logging
import math
import sys
from decimal import Decimal
from typing import Iterator, Optional, TextIO

from caretcalc import __version__
from caretcalc.diagnostics import render
from caretcalc.errors import ErrorKind, PositionedError, Span
from caretcalc.parser import Failure, Incomplete, Success, parse
from caretcalc.runtime import evaluate
from caretcalc.tokenizer import Token, tokenize

try:
    import readline  # noqa: F401  line editing and history for input()
except ModuleNotFoundError:
    pass

logger = logging.getLogger(__name__)

PROMPT = ">>> "
CONTINUATION_PROMPT = "... "

YELLOW = "\033[33m"
RESET = "\033[0m"


def format_number(x: float) -> str:
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "inf" if x > 0 else "-inf"
    if x.is_integer():
        return ("-" if math.copysign(1.0, x) < 0 and x == 0 else "") + str(int(x))
    return format(Decimal(repr(x)), "f")


def _logged(tokens: Iterator[Token]) -> Iterator[Token]:
    for token in tokens:
        logger.debug("Token %s at %d", token, token.span.start)
        yield token


class Session:
    """Accumulates physical lines into one logical input and evaluates it"""

    def __init__(self, color: bool = False) -> None:
        self.color = color
        self.buffer: Optional[str] = None
        self.failures = 0

    @property
    def prompt(self) -> str:
        return PROMPT if self.buffer is None else CONTINUATION_PROMPT

    def feed(self, line: str) -> Optional[str]:
        """Returns text to print, or None if more input is needed"""
        if self.buffer is None and not line.strip():
            return None
        code = line if self.buffer is None else self.buffer + "\n" + line
        outcome = parse(_logged(tokenize(code)))
        logger.debug("Parsed %r: %s", code, outcome)

        if isinstance(outcome, Incomplete):
            self.buffer = code
            return None

        self.buffer = None
        if isinstance(outcome, Success):
            return format_number(evaluate(outcome.tree))
        elif isinstance(outcome, Failure):
            self.failures += 1
            return render(code, outcome.error, color=self.color)
        else:
            raise RuntimeError(f"Unexpected parse outcome: {outcome}")

    def finish(self) -> Optional[str]:
        """Ends the session, reporting input left incomplete"""
        if self.buffer is None:
            return None
        code, self.buffer = self.buffer, None
        self.failures += 1
        # point just past the last thing typed, not at trailing blank lines
        end = len(code.rstrip())
        error = PositionedError(ErrorKind.UNEXPECTED_END_OF_INPUT, Span(end, end))
        return render(code, error, color=self.color)

    def reset(self) -> None:
        self.buffer = None


def run_interactive(session: Session, quiet: bool) -> int:
    if not quiet:
        print(f"caretcalc {__version__}")
        print("Evaluate math expressions using + - * / ^ ()")
    while True:
        prompt = session.prompt
        if session.color:
            prompt = f"{YELLOW}{prompt}{RESET}"
        try:
            line = input(prompt)
        except KeyboardInterrupt:
            print()
            session.reset()
            continue
        except EOFError:
            print()
            output = session.finish()
            if output is not None:
                print(output)
            return 0
        output = session.feed(line)
        if output is not None:
            print(output)


def run_batch(session: Session, stream: TextIO) -> int:
    for line in stream:
        output = session.feed(line.rstrip("\r\n"))
        if output is not None:
            print(output)
    output = session.finish()
    if output is not None:
        print(output)
    return 1 if session.failures else 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="caretcalc", description="Evaluate math expressions using + - * / ^ ()")
    parser.add_argument("-q", "--quiet", action="store_true", help="don't print initial banner")
    parser.add_argument("--no-color", action="store_true", help="don't colorize prompts and error carets")
    parser.add_argument("-d", "--debug", action="store_true", help="log tokens and parse outcomes to stderr")
    parser.add_argument("-v", "--version", action="version", version=f"caretcalc {__version__}")
    args = parser.parse_args(argv)

    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("caretcalc").setLevel(logging.DEBUG if args.debug else logging.WARNING)

    if sys.stdin.isatty():
        session = Session(color=not args.no_color and sys.stdout.isatty())
        return run_interactive(session, quiet=args.quiet)
    else:
        return run_batch(Session(), sys.stdin)


if __name__ == "__main__":
    sys.exit(main())
