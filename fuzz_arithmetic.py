import math
import random
import re
import string
import warnings

from caretcalc.parser import Success, tokenize_and_parse
from caretcalc.runtime import evaluate

warnings.filterwarnings("ignore")


def eval_py(code: str) -> float | str:
    try:
        return eval(code.replace("^", "**"))
    except Exception as e:
        return str(e)


def eval_my(code: str) -> float | str:
    outcome = tokenize_and_parse(code)
    if isinstance(outcome, Success):
        return evaluate(outcome.tree)
    return str(outcome)


if __name__ == "__main__":
    alphabet = string.digits + ".()+-*/^ "

    def generate(length: int) -> str:
        return "".join(random.choices(alphabet, k=length))

    while True:
        code = generate(10)

        if re.findall(r"\*\s*\*|/\s*/", code):
            continue  # python's ** and // operators

        if code.count("^") > 1:
            continue  # python evaluates towers like 9^9^9 on big ints

        if re.findall(r"(^|[^0-9])\.|\.($|[^0-9])", code):
            continue  # python accepts "1." and ".5"

        if re.findall(r"(^|[-+*/^(])\s*\+", code):
            continue  # unary plus

        res_py = eval_py(code)
        res_my = eval_my(code)
        if isinstance(res_py, (int, float)) and isinstance(res_my, float) and math.isclose(res_my, float(res_py)):
            continue
        if isinstance(res_py, complex) and isinstance(res_my, float) and math.isnan(res_my):
            continue
        if isinstance(res_py, str) and isinstance(res_my, str):
            continue
        if isinstance(res_py, str) and isinstance(res_my, float) and not math.isfinite(res_my):
            continue  # ZeroDivisionError and OverflowError are inf/nan here
        if isinstance(res_py, str) and res_py.startswith("leading zeros in decimal integer literals are not permitted"):
            continue
        print(f"{code!r}\npy: {res_py}\nmy: {res_my}\n\n")
