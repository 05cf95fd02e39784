import enum


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


def line_bounds(code: str, offset: int) -> tuple[int, int]:
    """Start and end offsets of the physical line containing ``offset``"""
    line_start = code.rfind("\n", 0, offset) + 1
    line_end = code.find("\n", offset)
    if line_end == -1:
        line_end = len(code)
    return line_start, line_end
