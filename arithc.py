import sys

from arith.evaluator import evaluate
from arith.parser    import Parser
from arith.reporter  import Error, Reporter
from arith.tools     import Tools

def main(argv = None, stdin = None, stdout = None):
    """
    usage:
    python3 arithc.py [<filename>]

    reads one expression from <filename> (standard input if absent or '-'),
    prints its fully parenthesized form and then its value
    """
    stdout = stdout or sys.stdout

    # preliminary objects
    reporter    = Reporter()
    tools       = Tools(reporter)
    parser      = Parser(reporter)

    # parse args
    reporter.checkpoint("args")
    inname = tools.parseargs(argv)

    # stream to ast
    reporter.checkpoint("parse")
    stream = tools.open_input(inname, stdin)
    try:
        expr = parser.parse(stream)
    finally:
        if inname is not None:
            stream.close()

    print(expr.pprint(), file=stdout)

    # ast to value, division by zero ends the run like any other failure
    reporter.checkpoint("eval")
    result = evaluate(expr)
    if isinstance(result, Error):
        reporter.crash(str(result))

    try:
        text = str(result)
    except ValueError as e:
        reporter.crash(f"cannot print result: {e}")

    print(text, file=stdout)

    reporter.checkpoint("end")


if __name__ == "__main__":
    main()
