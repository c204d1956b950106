"""Recursive-descent parsing of MiniC expressions into concrete syntax trees."""

from __future__ import annotations

from collections.abc import Iterable

from .cst import AddExp, Expr, FuncCall, IntLiteral, LVal, MultExp, Negate, ParenExp, UnaryExp
from .lexer import Token, TokenKind, tokenize

# Token kinds that may begin an expression.
EXPR_FIRST = frozenset(
    {
        TokenKind.T_L_PAREN,
        TokenKind.T_SUB,
        TokenKind.T_ID,
        TokenKind.T_HEX,
        TokenKind.T_OCTAL,
        TokenKind.T_DECIMAL,
    }
)

_ADD_OPS = frozenset({TokenKind.T_ADD, TokenKind.T_SUB})
_MULT_OPS = frozenset({TokenKind.T_MUL, TokenKind.T_DIV, TokenKind.T_MOD})
_LITERALS = frozenset({TokenKind.T_HEX, TokenKind.T_OCTAL, TokenKind.T_DECIMAL})


class ParseError(ValueError):
    """Raised when the token sequence does not follow the grammar."""

    def __init__(self, message: str, token: Token) -> None:
        super().__init__(f"line {token.line}:{token.column} {message}")
        self.token = token
        self.line = token.line
        self.column = token.column


class TokenStream:
    """A cursor over tokens that always ends in an EOF token."""

    def __init__(self, tokens: Iterable[Token] | str) -> None:
        items = tokenize(tokens) if isinstance(tokens, str) else list(tokens)
        if not items or items[-1].kind is not TokenKind.EOF:
            last = items[-1] if items else None
            line = last.line if last else 1
            column = last.column + len(last.text) if last else 0
            items.append(Token(TokenKind.EOF, "<EOF>", line, column))
        self._tokens = items
        self._pos = 0

    def peek(self, offset: int = 0) -> Token:
        """Return the token ``offset`` places ahead; past the end gives EOF."""
        index = min(self._pos + offset, len(self._tokens) - 1)
        return self._tokens[max(index, 0)]

    def advance(self) -> Token:
        """Return the current token and move past it; EOF is never passed."""
        token = self._tokens[self._pos]
        if token.kind is not TokenKind.EOF:
            self._pos += 1
        return token

    def expect(self, kind: TokenKind) -> Token:
        """Consume and return a token of the given kind, or raise ParseError."""
        token = self.peek()
        if token.kind is not kind:
            raise ParseError(
                f"mismatched input '{token.text}' expecting {kind.display}", token
            )
        return self.advance()

    def at_end(self) -> bool:
        """True when only the EOF token is left."""
        return self.peek().kind is TokenKind.EOF


def _no_viable(stream: TokenStream) -> ParseError:
    token = stream.peek()
    return ParseError(f"no viable alternative at input '{token.text}'", token)


def parse_expr(stream: TokenStream) -> Expr:
    """expr: addExp."""
    return Expr(parse_add_exp(stream))


def parse_add_exp(stream: TokenStream) -> AddExp:
    """addExp: multExp (addOp multExp)*."""
    operands = [parse_mult_exp(stream)]
    operators: list[Token] = []
    while stream.peek().kind in _ADD_OPS:
        operators.append(stream.advance())
        operands.append(parse_mult_exp(stream))
    return AddExp(operands, operators)


def parse_mult_exp(stream: TokenStream) -> MultExp:
    """multExp: unaryExp (multOp unaryExp)*."""
    operands = [parse_unary_exp(stream)]
    operators: list[Token] = []
    while stream.peek().kind in _MULT_OPS:
        operators.append(stream.advance())
        operands.append(parse_unary_exp(stream))
    return MultExp(operands, operators)


def parse_unary_exp(stream: TokenStream) -> UnaryExp:
    """unaryExp: primaryExp | T_ID T_L_PAREN realParamList? T_R_PAREN | T_SUB unaryExp."""
    token = stream.peek()
    if token.kind is TokenKind.T_SUB:
        stream.advance()
        return Negate(parse_unary_exp(stream))
    if token.kind is TokenKind.T_ID and stream.peek(1).kind is TokenKind.T_L_PAREN:
        name = stream.advance()
        stream.advance()
        args: list[Expr] = []
        if stream.peek().kind in EXPR_FIRST:
            args = parse_real_param_list(stream)
        stream.expect(TokenKind.T_R_PAREN)
        return FuncCall(name, args)
    return parse_primary_exp(stream)


def parse_primary_exp(stream: TokenStream) -> ParenExp | IntLiteral | LVal:
    """primaryExp: T_L_PAREN expr T_R_PAREN | T_HEX | T_OCTAL | T_DECIMAL | lVal."""
    kind = stream.peek().kind
    if kind is TokenKind.T_L_PAREN:
        stream.advance()
        inner = parse_expr(stream)
        stream.expect(TokenKind.T_R_PAREN)
        return ParenExp(inner)
    if kind in _LITERALS:
        return IntLiteral(stream.advance())
    if kind is TokenKind.T_ID:
        return parse_lval(stream)
    raise _no_viable(stream)


def parse_real_param_list(stream: TokenStream) -> list[Expr]:
    """realParamList: expr (T_COMMA expr)*."""
    params = [parse_expr(stream)]
    while stream.peek().kind is TokenKind.T_COMMA:
        stream.advance()
        params.append(parse_expr(stream))
    return params


def parse_lval(stream: TokenStream) -> LVal:
    """lVal: T_ID."""
    return LVal(stream.expect(TokenKind.T_ID))