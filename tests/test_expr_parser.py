import pytest

from minicfront.cst import FuncCall, IntLiteral, LVal, Negate, ParenExp
from minicfront.expr_parser import (
    EXPR_FIRST,
    ParseError,
    TokenStream,
    parse_add_exp,
    parse_expr,
    parse_lval,
    parse_mult_exp,
    parse_primary_exp,
    parse_real_param_list,
    parse_unary_exp,
)
from minicfront.lexer import TokenKind, tokenize


def test_stream_from_string_matches_tokenize():
    stream = TokenStream("a + 1")
    assert [stream.advance() for _ in range(3)] == tokenize("a + 1")[:3]
    assert stream.at_end()


def test_peek_past_end_gives_eof():
    stream = TokenStream("x")
    assert stream.peek(5).kind is TokenKind.EOF
    assert stream.peek().text == "x"


def test_advance_stays_on_eof():
    stream = TokenStream("")
    first = stream.advance()
    second = stream.advance()
    assert first.kind is TokenKind.EOF
    assert second == first
    assert stream.at_end()


def test_stream_appends_missing_eof():
    tokens = [t for t in tokenize("a") if t.kind is not TokenKind.EOF]
    stream = TokenStream(tokens)
    assert stream.advance().text == "a"
    assert stream.peek().kind is TokenKind.EOF


def test_expect_success_and_failure():
    stream = TokenStream("a ;")
    assert stream.expect(TokenKind.T_ID).text == "a"
    with pytest.raises(ParseError) as info:
        stream.expect(TokenKind.T_R_PAREN)
    assert info.value.token.kind is TokenKind.T_SEMICOLON
    assert "')'" in str(info.value)


def test_add_is_left_flat_chain():
    add = parse_add_exp(TokenStream("a + b - c"))
    assert [op.kind for op in add.operators] == [TokenKind.T_ADD, TokenKind.T_SUB]
    assert len(add.operands) == len(add.operators) + 1
    assert [m.operands[0].name.text for m in add.operands] == ["a", "b", "c"]


def test_mult_binds_tighter_than_add():
    expr = parse_expr(TokenStream("a + b * c % d"))
    assert len(expr.add_exp.operands) == 2
    right = expr.add_exp.operands[1]
    assert [op.text for op in right.operators] == ["*", "%"]
    assert [o.name.text for o in right.operands] == ["b", "c", "d"]


def test_mult_exp_stops_at_add():
    stream = TokenStream("x / y + z")
    mult = parse_mult_exp(stream)
    assert [op.kind for op in mult.operators] == [TokenKind.T_DIV]
    assert stream.peek().kind is TokenKind.T_ADD


def test_nested_negation():
    stream = TokenStream("--a")
    node = parse_unary_exp(stream)
    assert isinstance(node, Negate)
    assert isinstance(node.operand, Negate)
    assert isinstance(node.operand.operand, LVal)
    assert node.operand.operand.name.text == "a"
    assert stream.at_end()


def test_function_call_with_arguments():
    stream = TokenStream("putint(a + 2, b);")
    node = parse_unary_exp(stream)
    assert isinstance(node, FuncCall)
    assert node.name.text == "putint"
    assert len(node.args) == 2
    assert stream.peek().kind is TokenKind.T_SEMICOLON


def test_function_call_without_arguments():
    node = parse_unary_exp(TokenStream("getint()"))
    assert isinstance(node, FuncCall)
    assert node.args == []


def test_identifier_without_paren_is_lval():
    node = parse_unary_exp(TokenStream("a + 1"))
    assert isinstance(node, LVal)
    assert node.name.text == "a"


def test_parenthesised_expression():
    node = parse_primary_exp(TokenStream("(a + b)"))
    assert isinstance(node, ParenExp)
    assert len(node.expr.add_exp.operands) == 2


@pytest.mark.parametrize(
    "text, kind",
    [("0x1F", TokenKind.T_HEX), ("017", TokenKind.T_OCTAL), ("42", TokenKind.T_DECIMAL)],
)
def test_literals(text, kind):
    node = parse_primary_exp(TokenStream(text))
    assert isinstance(node, IntLiteral)
    assert node.token.kind is kind
    assert node.token.text == text


def test_hex_literal_value():
    node = parse_primary_exp(TokenStream("0x10"))
    assert node.value == 16


def test_real_param_list():
    params = parse_real_param_list(TokenStream("1, 2, 3)"))
    assert [p.add_exp.operands[0].operands[0].token.text for p in params] == ["1", "2", "3"]


def test_parse_lval_requires_identifier():
    assert parse_lval(TokenStream("b")).name.text == "b"
    with pytest.raises(ParseError):
        parse_lval(TokenStream("3"))


@pytest.mark.parametrize("text", ["(1", "+", "f(1,)", "a * ", ")"])
def test_malformed_expressions(text):
    with pytest.raises(ParseError):
        parse_expr(TokenStream(text))


def test_error_position():
    with pytest.raises(ParseError) as info:
        parse_expr(TokenStream("a +\n  ;"))
    assert info.value.line == 2
    assert info.value.column == 2


def test_expr_first_covers_expression_starts():
    for source in ["(a)", "-a", "a", "0x1", "01", "1"]:
        assert TokenStream(source).peek().kind in EXPR_FIRST
    assert TokenKind.T_SEMICOLON not in EXPR_FIRST