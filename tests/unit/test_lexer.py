"""Tests for mermaid_lint.syntax.lexer."""

import pytest

from mermaid_lint.syntax.lexer import tokenize
from mermaid_lint.syntax.tokens import Token, TokenKind


def kinds(src: str) -> list[TokenKind]:
    return [t.kind for t in tokenize(src)]


# ─── Stream shape ────────────────────────────────────────────────────────────


def test_empty_input_is_single_eof():
    tokens = tokenize("")
    assert tokens == [Token(TokenKind.EOF, "", 1, 1, 0)]


@pytest.mark.parametrize(
    "src",
    ["", "   \n\n", "flowchart TD\nA --> B", "%% only a comment", '"unterminated', "%%{init: {", "😀😀", "==>>"],
)
def test_stream_ends_with_exactly_one_eof(src):
    tokens = tokenize(src)
    assert tokens[-1].kind is TokenKind.EOF
    assert sum(1 for t in tokens if t.kind is TokenKind.EOF) == 1


def test_positions_are_first_character():
    tokens = tokenize("flowchart TD\nA --> B")
    assert [(t.kind, t.text, t.line, t.column, t.offset) for t in tokens] == [
        (TokenKind.FLOWCHART, "flowchart", 1, 1, 0),
        (TokenKind.IDENTIFIER, "TD", 1, 11, 10),
        (TokenKind.IDENTIFIER, "A", 2, 1, 13),
        (TokenKind.ARROW, "-->", 2, 3, 15),
        (TokenKind.IDENTIFIER, "B", 2, 7, 19),
        (TokenKind.EOF, "", 2, 8, 20),
    ]


# ─── Keywords ────────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "src,kind",
    [
        ("graph", TokenKind.GRAPH),
        ("FlowChart", TokenKind.FLOWCHART),
        ("sequenceDiagram", TokenKind.SEQUENCE_DIAGRAM),
        ("classDiagram", TokenKind.CLASS_DIAGRAM),
        ("stateDiagram", TokenKind.STATE_DIAGRAM),
        ("stateDiagram-v2", TokenKind.STATE_DIAGRAM_V2),
        ("erDiagram", TokenKind.ER_DIAGRAM),
        ("gitGraph", TokenKind.GITGRAPH),
        ("xychart-beta", TokenKind.XYCHART_BETA),
        ("block-beta", TokenKind.BLOCK_BETA),
        ("Participant", TokenKind.PARTICIPANT),
        ("subgraph", TokenKind.SUBGRAPH),
    ],
)
def test_keywords_case_insensitive(src, kind):
    token = tokenize(src)[0]
    assert token.kind is kind
    assert token.text == src


def test_styling_words_stay_identifiers():
    assert kinds("classDef class linkStyle style click note")[:-1] == [TokenKind.IDENTIFIER] * 6


# ─── Operators ───────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "src,kind",
    [
        ("-.->", TokenKind.DOTTED_ARROW),
        ("-.->>", TokenKind.DOTTED_ARROW),
        ("-->", TokenKind.ARROW),
        ("-->>", TokenKind.ARROW),
        ("->>", TokenKind.SEQUENCE_ARROW),
        ("->", TokenKind.SEQUENCE_ARROW),
        ("==>", TokenKind.THICK_ARROW),
    ],
)
def test_arrows_longest_match(src, kind):
    tokens = tokenize(src)
    assert len(tokens) == 2
    assert tokens[0].kind is kind
    assert tokens[0].text == src


def test_double_arrowhead_thick_is_not_an_arrow():
    assert kinds("==>>")[:2] == [TokenKind.EQUALS, TokenKind.EQUALS]
    assert TokenKind.THICK_ARROW not in kinds("A ==>> B")


def test_double_parens_before_single():
    assert kinds("A((x))")[:-1] == [
        TokenKind.IDENTIFIER,
        TokenKind.DOUBLE_PAREN_OPEN,
        TokenKind.IDENTIFIER,
        TokenKind.DOUBLE_PAREN_CLOSE,
    ]
    assert kinds("A(x)")[1] is TokenKind.PAREN_OPEN


def test_punctuation():
    assert kinds("[](){}|:,;=")[:-1] == [
        TokenKind.BRACKET_OPEN,
        TokenKind.BRACKET_CLOSE,
        TokenKind.PAREN_OPEN,
        TokenKind.PAREN_CLOSE,
        TokenKind.BRACE_OPEN,
        TokenKind.BRACE_CLOSE,
        TokenKind.PIPE,
        TokenKind.COLON,
        TokenKind.COMMA,
        TokenKind.SEMICOLON,
        TokenKind.EQUALS,
    ]


# ─── Identifiers, numbers, strings ───────────────────────────────────────────


def test_identifier_hyphen_stops_before_arrow():
    tokens = tokenize("end-state-->B")
    assert [(t.kind, t.text) for t in tokens[:-1]] == [
        (TokenKind.IDENTIFIER, "end-state"),
        (TokenKind.ARROW, "-->"),
        (TokenKind.IDENTIFIER, "B"),
    ]


def test_identifier_hyphen_stops_before_sequence_arrow():
    assert [t.text for t in tokenize("A->B")[:-1]] == ["A", "->", "B"]


def test_hyphenated_words_are_one_identifier():
    assert [t.text for t in tokenize("x-axis y-axis")[:-1]] == ["x-axis", "y-axis"]


def test_number_then_identifier():
    assert [(t.kind, t.text) for t in tokenize("42abc")[:-1]] == [
        (TokenKind.NUMBER, "42"),
        (TokenKind.IDENTIFIER, "abc"),
    ]


def test_string_spans_lines():
    tokens = tokenize('"a\nb" X')
    assert tokens[0].kind is TokenKind.STRING
    assert tokens[0].text == '"a\nb"'
    assert (tokens[1].text, tokens[1].line, tokens[1].column) == ("X", 2, 4)


def test_single_quoted_string():
    token = tokenize("'hi there'")[0]
    assert token.kind is TokenKind.STRING
    assert token.unquoted() == "hi there"


def test_unterminated_string_runs_to_end():
    tokens = tokenize('"abc')
    assert tokens[0].text == '"abc'
    assert tokens[0].unquoted() == "abc"
    assert tokens[1].kind is TokenKind.EOF


def test_unknown_codepoints_are_single_identifiers():
    tokens = tokenize("😀->>B")
    assert [(t.kind, t.text) for t in tokens[:-1]] == [
        (TokenKind.IDENTIFIER, "😀"),
        (TokenKind.SEQUENCE_ARROW, "->>"),
        (TokenKind.IDENTIFIER, "B"),
    ]
    assert tokens[1].column == 2


# ─── Comments and directives ─────────────────────────────────────────────────


def test_comment_runs_to_end_of_line():
    tokens = tokenize("%% hi there\nA")
    assert (tokens[0].kind, tokens[0].text) == (TokenKind.COMMENT, "%% hi there")
    assert (tokens[1].text, tokens[1].line, tokens[1].column) == ("A", 2, 1)


def test_directive_with_nested_braces():
    src = '%%{init: {"theme": "dark"}}%%\nflowchart TD'
    tokens = tokenize(src)
    assert tokens[0].kind is TokenKind.DIRECTIVE
    assert tokens[0].text == '%%{init: {"theme": "dark"}}%%'
    assert (tokens[1].kind, tokens[1].line) == (TokenKind.FLOWCHART, 2)


def test_whitespace_and_bom_discarded():
    assert kinds("\ufeff  graph\t\r\n")[:-1] == [TokenKind.GRAPH]
