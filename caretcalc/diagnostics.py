from caretcalc.errors import PositionedError
from caretcalc.utils import line_bounds

INDENT = 2

RED = "\033[31m"
RESET = "\033[0m"


def render(code: str, error: PositionedError, color: bool = False) -> str:
    """Two-line caret diagram pointing at the first character of the error.

    For multi-line input only the physical line the error starts on is shown.
    """
    offset = min(max(error.span.start, 0), len(code))
    line_start, line_end = line_bounds(code, offset)
    caret = f"{RED}^{RESET}" if color else "^"
    return "\n".join(
        [
            "",
            " " * INDENT + code[line_start:line_end],
            " " * (INDENT + offset - line_start) + caret + " " + error.kind.message,
        ]
    )
