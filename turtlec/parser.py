"""Recursive-descent parser for the turtle language.

The parser pulls tokens from a ``Scanner`` one at a time and keeps a
single token of lookahead; it never backtracks. Every grammar rule is a
``parse_*`` method. ``match`` is the only method that consumes tokens;
the others inspect ``self.lookahead`` to pick a production and delegate
consumption to ``match``.

Grammar::

    program     := block* EOT
    block       := stmt+
    stmt        := IDENT ':=' expr
                 | WHILE bool DO block OD
                 | IF bool THEN block else_part
                 | action
    else_part   := ELSIF bool THEN block else_part | ELSE block FI | FI
    action      := HOME | PENUP | PENDOWN | PUSHSTATE | POPSTATE
                 | FORWARD expr | LEFT expr | RIGHT expr
    expr        := term (('+'|'-') term)*
    term        := factor (('*'|'/') factor)*
    factor      := '+' factor | '-' factor | '(' expr ')' | IDENT | REAL
    bool        := bool_term (OR bool_term)*
    bool_term   := bool_factor (AND bool_factor)*
    bool_factor := NOT bool_factor | '(' bool ')' | cmp
    cmp         := expr ('='|'<>'|'<'|'>'|'<='|'>=') expr

Syntax errors are raised as ``TurtleSyntaxError``; ``parse`` attaches the
current source line before re-raising. There is no error recovery.
"""

from __future__ import annotations

from typing import List, Optional

from .ast import (
    Program, Block, Assign, WhileStmt, IfStmt,
    HomeStmt, PenUpStmt, PenDownStmt, PushStateStmt, PopStateStmt,
    ForwardStmt, LeftStmt, RightStmt,
    Literal, Ident, UnaryOp, BinaryOp, Node,
)
from .errors import ErrorKind, TurtleSyntaxError
from .lexer import Scanner, Token, TokenKind


# Tokens that can begin a statement. The block loop and the statement
# dispatch both read this set, so they cannot drift apart.
STATEMENT_STARTERS = frozenset({
    TokenKind.IDENT, TokenKind.WHILE, TokenKind.IF,
    TokenKind.HOME, TokenKind.PENUP, TokenKind.PENDOWN,
    TokenKind.FORWARD, TokenKind.LEFT, TokenKind.RIGHT,
    TokenKind.PUSHSTATE, TokenKind.POPSTATE,
})

# Actions without operands map straight to their node class.
SIMPLE_ACTIONS = {
    TokenKind.HOME: HomeStmt,
    TokenKind.PENUP: PenUpStmt,
    TokenKind.PENDOWN: PenDownStmt,
    TokenKind.PUSHSTATE: PushStateStmt,
    TokenKind.POPSTATE: PopStateStmt,
}

OPERAND_ACTIONS = {
    TokenKind.FORWARD: ForwardStmt,
    TokenKind.LEFT: LeftStmt,
    TokenKind.RIGHT: RightStmt,
}

ADDITIVE = {TokenKind.PLUS: '+', TokenKind.MINUS: '-'}
MULTIPLICATIVE = {TokenKind.TIMES: '*', TokenKind.DIVIDE: '/'}
RELATIONAL = {
    TokenKind.EQ: '=',
    TokenKind.NE: '<>',
    TokenKind.LT: '<',
    TokenKind.GT: '>',
    TokenKind.LE: '<=',
    TokenKind.GE: '>=',
}


class Parser:
    def __init__(self, scanner: Scanner):
        self.scanner = scanner
        self.lookahead: Optional[Token] = None

    def parse(self) -> Program:
        try:
            self.lookahead = self.scanner.next_token()
            return self.parse_program()
        except TurtleSyntaxError as e:
            e.line = self.scanner.line
            raise

    def match(self, expected: TokenKind) -> Token:
        token = self.lookahead
        if token.kind is not expected:
            raise TurtleSyntaxError.mismatch(token.kind, expected)
        self.lookahead = self.scanner.next_token()
        return token

    def peek(self) -> TokenKind:
        return self.lookahead.kind

    def unrecognized(self, rule: str) -> TurtleSyntaxError:
        found = self.peek()
        return TurtleSyntaxError(
            ErrorKind.UNRECOGNIZED,
            f"Unexpected token '{found}' in {rule}",
            found=found,
        )

    def parse_program(self) -> Program:
        body: List[Node] = []
        while self.peek() in STATEMENT_STARTERS:
            body.append(self.parse_block())
        self.match(TokenKind.EOT)
        return Program(body)

    def parse_block(self) -> Block:
        statements: List[Node] = [self.parse_statement()]
        while self.peek() in STATEMENT_STARTERS:
            statements.append(self.parse_statement())
        return Block(statements)

    def parse_statement(self) -> Node:
        kind = self.peek()
        if kind is TokenKind.IDENT:
            name = self.match(TokenKind.IDENT).attribute
            return self.parse_assign(name)
        if kind is TokenKind.WHILE:
            self.match(TokenKind.WHILE)
            condition = self.parse_bool()
            self.match(TokenKind.DO)
            body = self.parse_block()
            self.match(TokenKind.OD)
            return WhileStmt(condition, body)
        if kind is TokenKind.IF:
            self.match(TokenKind.IF)
            condition = self.parse_bool()
            self.match(TokenKind.THEN)
            then_block = self.parse_block()
            return IfStmt(condition, then_block, self.parse_else_part())
        return self.parse_action()

    def parse_assign(self, name: str) -> Assign:
        self.match(TokenKind.ASSIGN)
        return Assign(name, self.parse_expr())

    def parse_else_part(self) -> Optional[Node]:
        kind = self.peek()
        if kind is TokenKind.ELSIF:
            self.match(TokenKind.ELSIF)
            condition = self.parse_bool()
            self.match(TokenKind.THEN)
            then_block = self.parse_block()
            return IfStmt(condition, then_block, self.parse_else_part())
        if kind is TokenKind.ELSE:
            self.match(TokenKind.ELSE)
            else_block = self.parse_block()
            self.match(TokenKind.FI)
            return else_block
        if kind is TokenKind.FI:
            self.match(TokenKind.FI)
            return None
        raise self.unrecognized('if statement')

    def parse_action(self) -> Node:
        kind = self.peek()
        if kind in SIMPLE_ACTIONS:
            self.match(kind)
            return SIMPLE_ACTIONS[kind]()
        if kind in OPERAND_ACTIONS:
            self.match(kind)
            return OPERAND_ACTIONS[kind](self.parse_expr())
        raise self.unrecognized('statement')

    # Arithmetic expressions

    def parse_expr(self) -> Node:
        node = self.parse_term()
        while self.peek() in ADDITIVE:
            op = ADDITIVE[self.match(self.peek()).kind]
            node = BinaryOp(op, node, self.parse_term())
        return node

    def parse_term(self) -> Node:
        node = self.parse_factor()
        while self.peek() in MULTIPLICATIVE:
            op = MULTIPLICATIVE[self.match(self.peek()).kind]
            node = BinaryOp(op, node, self.parse_factor())
        return node

    def parse_factor(self) -> Node:
        kind = self.peek()
        if kind is TokenKind.PLUS:
            self.match(TokenKind.PLUS)
            return self.parse_factor()
        if kind is TokenKind.MINUS:
            self.match(TokenKind.MINUS)
            return UnaryOp('-', self.parse_factor())
        if kind is TokenKind.LPAREN:
            self.match(TokenKind.LPAREN)
            node = self.parse_expr()
            self.match(TokenKind.RPAREN)
            return node
        if kind is TokenKind.IDENT:
            return Ident(self.match(TokenKind.IDENT).attribute)
        if kind is TokenKind.REAL:
            return Literal(self.match(TokenKind.REAL).attribute)
        raise self.unrecognized('expression')

    # Boolean expressions

    def parse_bool(self) -> Node:
        node = self.parse_bool_term()
        while self.peek() is TokenKind.OR:
            self.match(TokenKind.OR)
            node = BinaryOp('OR', node, self.parse_bool_term())
        return node

    def parse_bool_term(self) -> Node:
        node = self.parse_bool_factor()
        while self.peek() is TokenKind.AND:
            self.match(TokenKind.AND)
            node = BinaryOp('AND', node, self.parse_bool_factor())
        return node

    def parse_bool_factor(self) -> Node:
        kind = self.peek()
        if kind is TokenKind.NOT:
            self.match(TokenKind.NOT)
            return UnaryOp('NOT', self.parse_bool_factor())
        if kind is TokenKind.LPAREN:
            self.match(TokenKind.LPAREN)
            node = self.parse_bool()
            self.match(TokenKind.RPAREN)
            return node
        return self.parse_cmp()

    def parse_cmp(self) -> Node:
        left = self.parse_expr()
        kind = self.peek()
        if kind not in RELATIONAL:
            raise self.unrecognized('comparison')
        self.match(kind)
        return BinaryOp(RELATIONAL[kind], left, self.parse_expr())


def parse_program(source: str) -> Program:
    """Parse turtle source text into a Program AST."""
    return Parser(Scanner(source)).parse()
