"""Recursive-descent parsing of whole MiniC programs into concrete syntax trees."""

from __future__ import annotations

from typing import Union

from .cst import (
    AssignStatement,
    BasicTypeSpec,
    Block,
    BlockStatement,
    CompileUnit,
    ExpressionStatement,
    FuncDef,
    ReturnStatement,
    VarDecl,
    VarDef,
)
from .expr_parser import EXPR_FIRST, ParseError, TokenStream, parse_expr, parse_lval
from .lexer import TokenKind

# Token kinds that may begin a statement.
_STATEMENT_FIRST = EXPR_FIRST | {
    TokenKind.T_SEMICOLON,
    TokenKind.T_L_BRACE,
    TokenKind.T_RETURN,
}

# Token kinds that may begin a block item: a statement or a declaration.
_BLOCK_ITEM_FIRST = _STATEMENT_FIRST | {TokenKind.T_INT}

Statement = Union[ReturnStatement, AssignStatement, BlockStatement, ExpressionStatement]


def _no_viable(stream: TokenStream) -> ParseError:
    token = stream.peek()
    return ParseError(f"no viable alternative at input '{token.text}'", token)


def parse_compile_unit(stream: TokenStream) -> CompileUnit:
    """compileUnit: (funcDef | varDecl)* EOF."""
    unit = CompileUnit()
    while stream.peek().kind is TokenKind.T_INT:
        is_function = (
            stream.peek(1).kind is TokenKind.T_ID
            and stream.peek(2).kind is TokenKind.T_L_PAREN
        )
        if is_function:
            unit.items.append(parse_func_def(stream))
        else:
            unit.items.append(parse_var_decl(stream))
    stream.expect(TokenKind.EOF)
    return unit


def parse_func_def(stream: TokenStream) -> FuncDef:
    """funcDef: T_INT T_ID T_L_PAREN T_R_PAREN block."""
    return_type = stream.expect(TokenKind.T_INT)
    name = stream.expect(TokenKind.T_ID)
    stream.expect(TokenKind.T_L_PAREN)
    stream.expect(TokenKind.T_R_PAREN)
    body = parse_block(stream)
    return FuncDef(return_type, name, body)


def parse_block(stream: TokenStream) -> Block:
    """block: T_L_BRACE blockItemList? T_R_BRACE."""
    stream.expect(TokenKind.T_L_BRACE)
    block = Block()
    while stream.peek().kind in _BLOCK_ITEM_FIRST:
        block.items.append(_parse_block_item(stream))
    stream.expect(TokenKind.T_R_BRACE)
    return block


def _parse_block_item(stream: TokenStream) -> Union[Statement, VarDecl]:
    """blockItem: statement | varDecl."""
    kind = stream.peek().kind
    if kind is TokenKind.T_INT:
        return parse_var_decl(stream)
    if kind in _STATEMENT_FIRST:
        return parse_statement(stream)
    raise _no_viable(stream)


def parse_var_decl(stream: TokenStream) -> VarDecl:
    """varDecl: basicType varDef (T_COMMA varDef)* T_SEMICOLON."""
    basic_type = BasicTypeSpec(stream.expect(TokenKind.T_INT))
    defs = [VarDef(stream.expect(TokenKind.T_ID))]
    while stream.peek().kind is TokenKind.T_COMMA:
        stream.advance()
        defs.append(VarDef(stream.expect(TokenKind.T_ID)))
    stream.expect(TokenKind.T_SEMICOLON)
    return VarDecl(basic_type, defs)


def parse_statement(stream: TokenStream) -> Statement:
    """statement: return, assignment, block or optional-expression statement."""
    token = stream.peek()
    if token.kind is TokenKind.T_RETURN:
        stream.advance()
        expr = parse_expr(stream)
        stream.expect(TokenKind.T_SEMICOLON)
        return ReturnStatement(expr)
    if token.kind is TokenKind.T_ID and stream.peek(1).kind is TokenKind.T_ASSIGN:
        target = parse_lval(stream)
        stream.expect(TokenKind.T_ASSIGN)
        value = parse_expr(stream)
        stream.expect(TokenKind.T_SEMICOLON)
        return AssignStatement(target, value)
    if token.kind is TokenKind.T_L_BRACE:
        return BlockStatement(parse_block(stream))
    expr = parse_expr(stream) if token.kind in EXPR_FIRST else None
    stream.expect(TokenKind.T_SEMICOLON)
    return ExpressionStatement(expr)


def parse(source: str) -> CompileUnit:
    """Tokenize and parse a whole program."""
    return parse_compile_unit(TokenStream(source))