from caretcalc.diagnostics import render
from caretcalc.errors import TokenizerError
from caretcalc.parser import Failure, Success, tokenize_and_parse
from caretcalc.runtime import evaluate
from caretcalc.tokenizer import tokenize

for code in [
    "5",
    "-1",
    "1 + 1",
    "-1 + 1",
    "1 + -1",
    "4 + 6 * 3",
    "(4 + 6)",
    "(4+6) * 3",
    "1 + 5*3^2",
    "2^3^2",
    "-2^2",
    "7/6/2000",
    "1 / 0",
    "4 * \n5 + 2",
    "(1 + 2",
    "5 ** 2",
    "5 & 2",
    "(1 + 2]",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    try:
        print(f"tokens: {' '.join(str(t) for t in tokenize(code))}")
    except TokenizerError as e:
        print(e)

    outcome = tokenize_and_parse(code)
    if isinstance(outcome, Success):
        print(f"ast: {outcome.tree}")
        print(f"result: {evaluate(outcome.tree)}")
    elif isinstance(outcome, Failure):
        print(render(code, outcome.error))
    else:
        print(f"outcome: {outcome}")
