import pytest

from minicfront.lexer import LexError, Token, TokenKind, tokenize

TEST1_1 = """int main()
{
    int a;
    int b;
    int c,d;
    a = 2;
    b = 3;

    return a + b + 2;
}
"""


def kinds(source):
    return [tok.kind for tok in tokenize(source)]


def test_token_kind_numbers_match_grammar():
    toks = tokenize("int x //c")
    assert int(toks[0].kind) == 14
    assert int(toks[1].kind) == 16
    assert TokenKind.LINE_COMMENT == 22
    assert len(toks) == 3


def test_punctuation_and_operators():
    assert kinds("(){};=,+-*/%") == [
        TokenKind.T_L_PAREN,
        TokenKind.T_R_PAREN,
        TokenKind.T_L_BRACE,
        TokenKind.T_R_BRACE,
        TokenKind.T_SEMICOLON,
        TokenKind.T_ASSIGN,
        TokenKind.T_COMMA,
        TokenKind.T_ADD,
        TokenKind.T_SUB,
        TokenKind.T_MUL,
        TokenKind.T_DIV,
        TokenKind.T_MOD,
        TokenKind.EOF,
    ]


def test_keywords_versus_identifiers():
    toks = tokenize("int intx return returned void _v1")
    assert [t.kind for t in toks[:-1]] == [
        TokenKind.T_INT,
        TokenKind.T_ID,
        TokenKind.T_RETURN,
        TokenKind.T_ID,
        TokenKind.T_VOID,
        TokenKind.T_ID,
    ]
    assert [t.text for t in toks[:-1]] == ["int", "intx", "return", "returned", "void", "_v1"]


@pytest.mark.parametrize(
    "text, kind",
    [
        ("0x1F", TokenKind.T_HEX),
        ("0XabC", TokenKind.T_HEX),
        ("017", TokenKind.T_OCTAL),
        ("0", TokenKind.T_DECIMAL),
        ("123", TokenKind.T_DECIMAL),
    ],
)
def test_number_literals(text, kind):
    toks = tokenize(text)
    assert toks[0] == Token(kind, text, 1, 0)
    assert toks[1].kind == TokenKind.EOF


def test_invalid_octal_splits_into_decimals():
    toks = tokenize("09")
    assert [(t.kind, t.text) for t in toks[:-1]] == [
        (TokenKind.T_DECIMAL, "0"),
        (TokenKind.T_DECIMAL, "9"),
    ]


def test_hex_prefix_without_digits():
    toks = tokenize("0x")
    assert [(t.kind, t.text) for t in toks[:-1]] == [
        (TokenKind.T_DECIMAL, "0"),
        (TokenKind.T_ID, "x"),
    ]


def test_comments_and_whitespace_are_skipped():
    source = "a /* block\n comment */ b // line\n\tc\r\n"
    toks = tokenize(source)
    assert [t.text for t in toks[:-1]] == ["a", "b", "c"]
    assert all(t.kind == TokenKind.T_ID for t in toks[:-1])


def test_unterminated_block_comment_falls_back_to_operators():
    assert kinds("/* x") == [
        TokenKind.T_DIV,
        TokenKind.T_MUL,
        TokenKind.T_ID,
        TokenKind.EOF,
    ]


def test_line_numbers_follow_source():
    toks = tokenize(TEST1_1)
    lines = TEST1_1.split("\n")
    for tok in toks[:-1]:
        line_text = lines[tok.line - 1]
        assert line_text[tok.column : tok.column + len(tok.text)] == tok.text


def test_program_token_stream_ends_with_single_eof():
    toks = tokenize(TEST1_1)
    assert toks[-1].kind == TokenKind.EOF
    assert sum(1 for t in toks if t.kind == TokenKind.EOF) == 1
    assert [t.text for t in toks[:5]] == ["int", "main", "(", ")", "{"]


def test_unknown_character_raises():
    with pytest.raises(LexError) as info:
        tokenize("a\n  b @ c")
    assert info.value.char == "@"
    assert info.value.line == 2


def test_display_names():
    toks = tokenize("return x")
    assert toks[0].kind.display == "'return'"
    assert toks[1].kind.display == "T_ID"