"""Concrete syntax tree of MiniC programs and a visitor over it."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field, fields
from typing import Any, Union

from .lexer import Token, TokenKind


class _Node:
    """Common base of all concrete syntax tree nodes."""


@dataclass
class BasicTypeSpec(_Node):
    """basicType: T_INT."""

    token: Token


@dataclass
class VarDef(_Node):
    """varDef: T_ID."""

    name: Token


@dataclass
class VarDecl(_Node):
    """varDecl: basicType varDef (T_COMMA varDef)* T_SEMICOLON."""

    basic_type: BasicTypeSpec
    defs: list[VarDef]

    def __post_init__(self) -> None:
        if not self.defs:
            raise ValueError("a variable declaration needs at least one name")


@dataclass
class LVal(_Node):
    """lVal: T_ID."""

    name: Token


@dataclass
class IntLiteral(_Node):
    """A hexadecimal, octal or decimal integer literal."""

    token: Token

    @property
    def value(self) -> int:
        """The numeric value written by the literal, in its own base."""
        if self.token.kind is TokenKind.T_HEX:
            return int(self.token.text, 16)
        if self.token.kind is TokenKind.T_OCTAL:
            return int(self.token.text, 8)
        return int(self.token.text, 10)


@dataclass
class ParenExp(_Node):
    """primaryExp: T_L_PAREN expr T_R_PAREN."""

    expr: Expr


@dataclass
class FuncCall(_Node):
    """unaryExp: T_ID T_L_PAREN realParamList? T_R_PAREN."""

    name: Token
    args: list[Expr] = field(default_factory=list)


@dataclass
class Negate(_Node):
    """unaryExp: T_SUB unaryExp."""

    operand: UnaryExp


UnaryExp = Union[ParenExp, IntLiteral, LVal, FuncCall, Negate]


def _check_chain(operands: list[Any], operators: list[Token], what: str) -> None:
    if len(operands) != len(operators) + 1:
        raise ValueError(
            f"{what} needs exactly one more operand than operators, "
            f"got {len(operands)} operands and {len(operators)} operators"
        )


@dataclass
class MultExp(_Node):
    """multExp: unaryExp (multOp unaryExp)*."""

    operands: list[UnaryExp]
    operators: list[Token] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_chain(self.operands, self.operators, "multiplicative expression")


@dataclass
class AddExp(_Node):
    """addExp: multExp (addOp multExp)*."""

    operands: list[MultExp]
    operators: list[Token] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_chain(self.operands, self.operators, "additive expression")


@dataclass
class Expr(_Node):
    """expr: addExp."""

    add_exp: AddExp


@dataclass
class ReturnStatement(_Node):
    """statement: T_RETURN expr T_SEMICOLON."""

    expr: Expr


@dataclass
class AssignStatement(_Node):
    """statement: lVal T_ASSIGN expr T_SEMICOLON."""

    target: LVal
    value: Expr


@dataclass
class BlockStatement(_Node):
    """statement: block."""

    block: Block


@dataclass
class ExpressionStatement(_Node):
    """statement: expr? T_SEMICOLON; an empty statement has no expression."""

    expr: Expr | None = None


Statement = Union[ReturnStatement, AssignStatement, BlockStatement, ExpressionStatement]


@dataclass
class Block(_Node):
    """block: T_L_BRACE blockItem* T_R_BRACE."""

    items: list[Union[Statement, VarDecl]] = field(default_factory=list)


@dataclass
class FuncDef(_Node):
    """funcDef: T_INT T_ID T_L_PAREN T_R_PAREN block."""

    return_type: Token
    name: Token
    body: Block


@dataclass
class CompileUnit(_Node):
    """compileUnit: (funcDef | varDecl)* EOF, items kept in source order."""

    items: list[Union[FuncDef, VarDecl]] = field(default_factory=list)

    @property
    def func_defs(self) -> list[FuncDef]:
        """The function definitions, in source order."""
        return [item for item in self.items if isinstance(item, FuncDef)]

    @property
    def var_decls(self) -> list[VarDecl]:
        """The global variable declarations, in source order."""
        return [item for item in self.items if isinstance(item, VarDecl)]


def _child_nodes(node: _Node) -> Iterator[_Node]:
    for spec in fields(node):  # type: ignore[arg-type]
        value = getattr(node, spec.name)
        if isinstance(value, _Node):
            yield value
        elif isinstance(value, list):
            yield from (item for item in value if isinstance(item, _Node))


class CstVisitor:
    """Dispatches each node to ``visit_<ClassName>`` or to :meth:`generic_visit`."""

    def visit(self, node: Any) -> Any:
        """Visit one node and return what its handler returns."""
        handler = getattr(self, f"visit_{type(node).__name__}", None)
        if handler is None:
            return self.generic_visit(node)
        return handler(node)

    def generic_visit(self, node: Any) -> Any:
        """Visit every child node in order and return the last child's result.

        A node without child nodes gives None.
        """
        result = None
        if isinstance(node, _Node):
            for child in _child_nodes(node):
                result = self.visit(child)
        return result