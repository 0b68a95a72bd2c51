import pytest
from turtlec.errors import ErrorKind, TurtleSyntaxError
from turtlec.lexer import Scanner, TokenKind, tokenize


def kinds(source):
    return [t.kind for t in tokenize(source)]


def test_assignment_tokens_carry_attributes():
    tokens = tokenize('x := 3.5')
    assert [t.kind for t in tokens] == [TokenKind.IDENT, TokenKind.ASSIGN, TokenKind.REAL, TokenKind.EOT]
    assert tokens[0].attribute == 'x'
    assert tokens[1].attribute is None
    assert tokens[2].attribute == 3.5


def test_keywords_are_reserved_but_prefixes_are_identifiers():
    tokens = tokenize('HOMER HOME home')
    assert [t.kind for t in tokens[:3]] == [TokenKind.IDENT, TokenKind.HOME, TokenKind.IDENT]
    assert tokens[0].attribute == 'HOMER'
    assert tokens[2].attribute == 'home'


def test_relational_operators_prefer_longest_match():
    assert kinds('<= <> < >= > = :=') == [
        TokenKind.LE, TokenKind.NE, TokenKind.LT,
        TokenKind.GE, TokenKind.GT, TokenKind.EQ,
        TokenKind.ASSIGN, TokenKind.EOT,
    ]


def test_number_forms():
    tokens = tokenize('7 0.5 .25 1e3 2.5E-1')
    assert [t.attribute for t in tokens[:-1]] == [7.0, 0.5, 0.25, 1000.0, 0.25]


def test_comments_are_skipped_and_lines_tracked():
    tokens = tokenize('FORWARD 1 // go ahead\n\nLEFT 2')
    assert [t.kind for t in tokens] == [
        TokenKind.FORWARD, TokenKind.REAL, TokenKind.LEFT, TokenKind.REAL, TokenKind.EOT,
    ]
    assert [t.line for t in tokens] == [1, 1, 3, 3, 3]


def test_end_of_text_repeats_and_reports_last_line():
    scanner = Scanner('HOME\n')
    assert scanner.next_token().kind is TokenKind.HOME
    assert scanner.line == 1
    eot = scanner.next_token()
    assert eot.kind is TokenKind.EOT
    assert scanner.line == 2
    assert scanner.next_token().kind is TokenKind.EOT


def test_unrecognized_character():
    with pytest.raises(TurtleSyntaxError) as exc:
        tokenize('HOME\nFORWARD 1 $')
    assert exc.value.kind is ErrorKind.BAD_CHARACTER
    assert exc.value.line == 2
    assert str(exc.value) == "2: Unrecognized character '$'"
