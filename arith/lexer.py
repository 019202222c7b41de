import dataclasses as dc
import enum
import ply.lex
import re

class TokenKind(enum.Enum):
    EOF     = "EOF"
    ILLEGAL = "ILLEGAL"
    IDENT   = "IDENT"                   # reserved, never produced
    INT     = "INT"

    # Infix ops
    ADD     = "+"
    SUB     = "-"
    MUL     = "*"
    DIV     = "/"

    def __str__(self):
        return self.value

@dc.dataclass(frozen = True)
class Position:
    line        : int
    column      : int

    def __str__(self):
        return f"line {self.line}, column {self.column}"

@dc.dataclass(frozen = True)
class Token:
    kind        : TokenKind
    literal     : str = ""

    def pprint(self):
        if self.literal:
            return f"{self.kind.name} '{self.literal}'"
        return self.kind.name

class Lexer:
    """
    token stream over a text stream, read one line at a time

    next_token()    -> (Token, Position)
    unget()         -> hold back one token for the next call
    position()      -> Position of the cursor
    """
    tokens = (
        'INT'       ,               # : str, the digit run
        'ILLEGAL'   ,               # : str, the offending character

        'ADD'       ,
        'SUB'       ,
        'MUL'       ,
        'DIV'       ,
    )

    t_ADD       = re.escape('+')
    t_SUB       = re.escape('-')
    t_MUL       = re.escape('*')
    t_DIV       = re.escape('/')

    t_ignore    = ' \t\r\f\v'       # newlines are tracked by t_newline
    t_ignore_space = r'[^\S\n]+'    # any other unicode blank

    def __init__(self, reporter, stream):
        self.reporter   = reporter
        self.stream     = stream
        self.line_start = 0         # offset of the current line in the chunk
        self.exhausted  = False
        self.held       = None      # (Token, Position) | None
        self.lexer      = ply.lex.lex(module = self)
        self.lexer.input("")

    def t_newline(self, t):
        r'\n+'
        t.lexer.lineno += len(t.value)
        self.line_start = t.lexpos + len(t.value)

    def t_INT(self, t):
        r'\d+'
        return t

    def t_error(self, t):
        t.type  = 'ILLEGAL'
        t.value = t.value[0]
        t.lexer.skip(1)
        return t

    def position(self):
        consumed = min(self.lexer.lexpos, self.lexer.lexlen)
        return Position(self.lexer.lineno, consumed - self.line_start)

    def next_token(self):
        if self.held is not None:
            held, self.held = self.held, None
            return held

        while True:
            tok = self.lexer.token()

            if tok is not None:
                kind    = TokenKind[tok.type]
                literal = tok.value if kind in (TokenKind.INT, TokenKind.ILLEGAL) else ""
                start   = Position(tok.lineno, tok.lexpos - self.line_start + 1)
                return Token(kind, literal), start

            if not self.fill():
                return Token(TokenKind.EOF), self.position()

    def unget(self, token, position):
        if self.held is not None:
            self.reporter.crash(f"lexer: cannot push back {token.pprint()}, "
                                f"{self.held[0].pprint()} is already held back")
        self.held = (token, position)

    def fill(self):
        """
        feed the next line of the stream to ply, False at end of input
        """
        if self.exhausted:
            return False

        try:
            chunk = self.stream.readline()
        except (OSError, UnicodeDecodeError) as e:
            self.reporter.crash(f"lexer: cannot read input: {e}")

        if not chunk:
            self.exhausted = True
            return False

        self.line_start = 0
        self.lexer.input(chunk)
        return True
