import io

from .ast       import BinaryExpression, Expression, IntegerLiteral
from .lexer     import Lexer, TokenKind
from .reporter  import Reporter

class Parser:
    """
    recursive descent over the lexer's token stream

    expression  : addsub EOF
    addsub      : muldiv ( ( ADD | SUB ) muldiv )*
    muldiv      : primary ( ( MUL | DIV ) primary )*
    primary     : INT
    """
    addsub_ops  = (TokenKind.ADD, TokenKind.SUB)
    muldiv_ops  = (TokenKind.MUL, TokenKind.DIV)

    def __init__(self, reporter: Reporter):
        self.reporter   = reporter
        self.lexer      = None

    def parse(self, stream) -> Expression:
        self.lexer  = Lexer(self.reporter, stream)
        expr        = self.expression()

        tok, pos = self.lexer.next_token()
        if tok.kind != TokenKind.EOF:
            self.unexpected(tok, pos)

        return expr

    def parse_string(self, text: str) -> Expression:
        return self.parse(io.StringIO(text))

    def expression(self):
        return self.addsub()

    def addsub(self):
        return self.binary(self.muldiv, self.addsub_ops)

    def muldiv(self):
        return self.binary(self.primary, self.muldiv_ops)

    def binary(self, operand, ops):
        """
        fold `operand (op operand)*` to the left, the first token that is
        not in ops is pushed back for the caller
        """
        left = operand()

        while True:
            tok, pos = self.lexer.next_token()
            if tok.kind not in ops:
                self.lexer.unget(tok, pos)
                return left

            right   = operand()
            left    = BinaryExpression(
                left        = left,
                operator    = tok.kind,
                right       = right,
                position    = left.pos(),
            )

    def primary(self):
        tok, pos = self.lexer.next_token()

        if tok.kind != TokenKind.INT:
            self.unexpected(tok, pos)

        try:
            value = int(tok.literal)
        except ValueError as e:
            self.reporter.crash(f"integer literal at {pos}: {e}")

        return IntegerLiteral(
            value       = value,
            position    = self.lexer.position(),
        )

    def unexpected(self, tok, pos):
        self.reporter.crash(f"unexpected token: {tok.pprint()} at {pos}")
