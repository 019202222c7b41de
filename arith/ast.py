import dataclasses as dc

from .lexer import Position, TokenKind

### AST CLASSES ###

# two expression nodes: integer literal and binary expression
# built bottom-up by the parser and never mutated afterwards
# every node keeps the position it was read at for diagnostics
# pos()     -> Position
# pprint()  -> str, fully parenthesized rendering

operators = (
    TokenKind.ADD,
    TokenKind.SUB,
    TokenKind.MUL,
    TokenKind.DIV,
)

@dc.dataclass(frozen = True)
class Expression:
    position    : Position = dc.field(kw_only = True)

    def pos(self):
        return self.position

    def pprint(self):
        return "base expression"

    def __str__(self):
        return self.pprint()

@dc.dataclass(frozen = True)
class IntegerLiteral(Expression):
    value       : int

    def pprint(self):
        return str(self.value)

@dc.dataclass(frozen = True)
class BinaryExpression(Expression):
    left        : Expression
    operator    : TokenKind
    right       : Expression

    def __post_init__(self):
        if self.operator not in operators:
            raise ValueError(f"{{{self.operator.name}}} is not a binary operator")

    def pprint(self):
        return render(self)

def render(expr):
    """
    fully parenthesized rendering, walked with an explicit stack so that
    long left-deep chains do not hit the recursion limit
    """
    parts = []
    stack = [expr]

    while stack:
        item = stack.pop()
        match item:
            case str():
                parts.append(item)
            case BinaryExpression(left = left, operator = operator, right = right):
                stack.extend((")", right, f" {operator} ", left, "("))
            case _:
                parts.append(item.pprint())

    return "".join(parts)
