from .ast       import BinaryExpression, Expression, IntegerLiteral
from .lexer     import TokenKind
from .reporter  import DivisionByZero, Error

### EVALUATOR ###

# evaluate()    -> int | Error()
# children are evaluated left then right, the first Error() is passed
# back up untouched and the right subtree is skipped
# the walk keeps its own stack, trees can be as deep as the input is long

def divide(left, right):
    """
    integer division truncating toward zero
    """
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient

def apply(expr, x, y):
    match expr.operator:
        case TokenKind.ADD:
            return x + y
        case TokenKind.SUB:
            return x - y
        case TokenKind.MUL:
            return x * y
        case TokenKind.DIV:
            if y == 0:
                return DivisionByZero(this = expr.pprint())
            return divide(x, y)
        case _:
            return Error(f"unknown operator {{{expr.operator}}}",
                         this = expr.pprint())

def evaluate(expr: Expression):
    values  = []
    stack   = [(expr, False)]           # (node, children done)

    while stack:
        node, done = stack.pop()

        match node:
            case IntegerLiteral(value = value):
                values.append(value)

            case BinaryExpression(left = left, right = right) if not done:
                stack.append((node, True))
                stack.append((right, False))
                stack.append((left, False))

            case BinaryExpression():
                y       = values.pop()
                x       = values.pop()
                result  = apply(node, x, y)
                if isinstance(result, Error):
                    return result
                values.append(result)

            case _:
                return Error("unknown expression type", this = node)

    return values.pop()
