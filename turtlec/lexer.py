"""Token source for the turtle language.

The lexical structure is declared as a Lark grammar and tokenized with
Lark's basic lexer; no Lark parser is involved. Keywords are upper-case
and reserved (Lark resolves the keyword/identifier collisions), whitespace
is skipped and ``//`` starts a comment that runs to the end of the line.

``Scanner`` adapts the Lark token stream to the pull interface the
recursive-descent parser expects: one ``Token`` per ``next_token`` call,
terminated by an explicit ``EOT`` token.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, List, Optional

from lark import Lark
from lark.exceptions import UnexpectedCharacters

from .errors import ErrorKind, TurtleSyntaxError


class TokenKind(Enum):
    IDENT = 'IDENT'
    REAL = 'REAL'
    HOME = 'HOME'
    PENUP = 'PENUP'
    PENDOWN = 'PENDOWN'
    FORWARD = 'FORWARD'
    LEFT = 'LEFT'
    RIGHT = 'RIGHT'
    PUSHSTATE = 'PUSHSTATE'
    POPSTATE = 'POPSTATE'
    WHILE = 'WHILE'
    DO = 'DO'
    OD = 'OD'
    IF = 'IF'
    THEN = 'THEN'
    ELSIF = 'ELSIF'
    ELSE = 'ELSE'
    FI = 'FI'
    AND = 'AND'
    OR = 'OR'
    NOT = 'NOT'
    PLUS = '+'
    MINUS = '-'
    TIMES = '*'
    DIVIDE = '/'
    EQ = '='
    NE = '<>'
    LT = '<'
    GT = '>'
    LE = '<='
    GE = '>='
    ASSIGN = ':='
    LPAREN = '('
    RPAREN = ')'
    EOT = 'EOT'

    def __str__(self) -> str:
        return self.value


@dataclass
class Token:
    kind: TokenKind
    attribute: Any  # identifier name, literal value, or None
    line: int


TURTLE_TOKENS = r"""
    start: (IDENT | REAL
           | HOME | PENUP | PENDOWN | FORWARD | LEFT | RIGHT | PUSHSTATE | POPSTATE
           | WHILE | DO | OD | IF | THEN | ELSIF | ELSE | FI | AND | OR | NOT
           | PLUS | MINUS | TIMES | DIVIDE
           | EQ | NE | LT | GT | LE | GE | ASSIGN | LPAREN | RPAREN)*

    // Keywords
    HOME: "HOME"
    PENUP: "PENUP"
    PENDOWN: "PENDOWN"
    FORWARD: "FORWARD"
    LEFT: "LEFT"
    RIGHT: "RIGHT"
    PUSHSTATE: "PUSHSTATE"
    POPSTATE: "POPSTATE"
    WHILE: "WHILE"
    DO: "DO"
    OD: "OD"
    IF: "IF"
    THEN: "THEN"
    ELSIF: "ELSIF"
    ELSE: "ELSE"
    FI: "FI"
    AND: "AND"
    OR: "OR"
    NOT: "NOT"

    // Operators and punctuation
    PLUS: "+"
    MINUS: "-"
    TIMES: "*"
    DIVIDE: "/"
    ASSIGN: ":="
    LE: "<="
    GE: ">="
    NE: "<>"
    EQ: "="
    LT: "<"
    GT: ">"
    LPAREN: "("
    RPAREN: ")"

    IDENT: /[A-Za-z_][A-Za-z0-9_]*/
    REAL: /(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?/

    COMMENT: /\/\/[^\n]*/
    %import common.WS
    %ignore WS
    %ignore COMMENT
"""


TURTLE_LEXER = Lark(
    TURTLE_TOKENS,
    parser='lalr',
    lexer='basic',
)


class Scanner:
    """Pull-based token source over a program text.

    ``line`` is the source line of the most recently produced token; once
    the text is exhausted it is the last line of the text.
    """
    def __init__(self, source: str):
        self._stream: Iterator = TURTLE_LEXER.lex(source)
        self._end_line = source.count('\n') + 1
        self._done = False
        self.line = 1

    def next_token(self) -> Token:
        if self._done:
            return Token(TokenKind.EOT, None, self.line)
        try:
            raw = next(self._stream, None)
        except UnexpectedCharacters as e:
            self.line = e.line
            raise TurtleSyntaxError(
                ErrorKind.BAD_CHARACTER,
                f"Unrecognized character '{e.char}'",
                found=e.char,
                line=e.line,
            ) from None
        if raw is None:
            self._done = True
            self.line = self._end_line
            return Token(TokenKind.EOT, None, self.line)
        self.line = raw.line
        kind = TokenKind[raw.type]
        attribute: Optional[Any] = None
        if kind is TokenKind.IDENT:
            attribute = str(raw)
        elif kind is TokenKind.REAL:
            attribute = float(raw)
        return Token(kind, attribute, raw.line)


def tokenize(source: str) -> List[Token]:
    """Scan the whole text, returning every token up to and including EOT."""
    scanner = Scanner(source)
    tokens: List[Token] = []
    while True:
        token = scanner.next_token()
        tokens.append(token)
        if token.kind is TokenKind.EOT:
            return tokens
