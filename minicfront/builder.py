"""Turns a concrete syntax tree into the abstract syntax tree."""

from __future__ import annotations

from typing import Callable, Sequence, TypeVar

from .cst import (
    AddExp,
    AssignStatement,
    BasicTypeSpec,
    Block,
    BlockStatement,
    CompileUnit,
    CstVisitor,
    Expr,
    ExpressionStatement,
    FuncCall,
    FuncDef,
    IntLiteral,
    LVal,
    MultExp,
    Negate,
    ParenExp,
    ReturnStatement,
    VarDecl,
    VarDef,
)
from .lexer import Token, TokenKind
from .syntax_tree import (
    AstNode,
    AstOp,
    BasicType,
    make_container,
    make_func_call,
    make_func_def,
    make_identifier,
    make_int_literal,
    make_type,
)

_BINARY_OPS: dict[TokenKind, AstOp] = {
    TokenKind.T_ADD: AstOp.ADD,
    TokenKind.T_SUB: AstOp.SUB,
    TokenKind.T_MUL: AstOp.MUL,
    TokenKind.T_DIV: AstOp.DIV,
    TokenKind.T_MOD: AstOp.MOD,
}

_T = TypeVar("_T")


class AstBuilder(CstVisitor):
    """Walks a concrete syntax tree and produces abstract syntax tree nodes."""

    def run(self, root: CompileUnit) -> AstNode:
        """Build the abstract syntax tree of a whole compile unit."""
        return self.visit(root)

    def visit_CompileUnit(self, node: CompileUnit) -> AstNode:
        # Global declarations come first, then the functions.
        unit = make_container(AstOp.COMPILE_UNIT)
        for decl in node.var_decls:
            unit.add_child(self.visit(decl))
        for func in node.func_defs:
            unit.add_child(self.visit(func))
        return unit

    def visit_FuncDef(self, node: FuncDef) -> AstNode:
        body = self.visit(node.body)
        return make_func_def(BasicType.TYPE_INT, node.name.text, node.name.line, body, None)

    def visit_Block(self, node: Block) -> AstNode:
        block = make_container(AstOp.BLOCK)
        for item in node.items:
            block.add_child(self.visit(item))
        return block

    def visit_BlockStatement(self, node: BlockStatement) -> AstNode:
        return self.visit(node.block)

    def visit_ReturnStatement(self, node: ReturnStatement) -> AstNode:
        return make_container(AstOp.RETURN, self.visit(node.expr))

    def visit_AssignStatement(self, node: AssignStatement) -> AstNode:
        return make_container(AstOp.ASSIGN, self.visit(node.target), self.visit(node.value))

    def visit_ExpressionStatement(self, node: ExpressionStatement) -> AstNode | None:
        # An empty statement yields nothing and is left out of its block.
        return None if node.expr is None else self.visit(node.expr)

    def visit_Expr(self, node: Expr) -> AstNode:
        return self.visit(node.add_exp)

    def visit_AddExp(self, node: AddExp) -> AstNode:
        return self._fold(node.operands, node.operators)

    def visit_MultExp(self, node: MultExp) -> AstNode:
        return self._fold(node.operands, node.operators)

    def _fold(self, operands: Sequence[object], operators: Sequence[Token]) -> AstNode:
        left = self.visit(operands[0])
        for operator, operand in zip(operators, operands[1:]):
            left = make_container(_BINARY_OPS[operator.kind], left, self.visit(operand))
        return left

    def visit_Negate(self, node: Negate) -> AstNode:
        return make_container(AstOp.NEG, self.visit(node.operand))

    def visit_FuncCall(self, node: FuncCall) -> AstNode:
        name_node = make_identifier(node.name.text, node.name.line)
        params = None
        if node.args:
            params = make_container(
                AstOp.FUNC_REAL_PARAMS, *(self.visit(arg) for arg in node.args)
            )
        return make_func_call(name_node, params)

    def visit_ParenExp(self, node: ParenExp) -> AstNode:
        return self.visit(node.expr)

    def visit_IntLiteral(self, node: IntLiteral) -> AstNode:
        return make_int_literal(node.value, node.token.line)

    def visit_LVal(self, node: LVal) -> AstNode:
        return make_identifier(node.name.text, node.name.line)

    def visit_VarDecl(self, node: VarDecl) -> AstNode:
        stmt = make_container(AstOp.DECL_STMT)
        basic_type, line = self.visit(node.basic_type)
        for var_def in node.defs:
            stmt.add_child(
                make_container(AstOp.VAR_DECL, make_type(basic_type, line), self.visit(var_def))
            )
        return stmt

    def visit_VarDef(self, node: VarDef) -> AstNode:
        return make_identifier(node.name.text, node.name.line)

    def visit_BasicTypeSpec(self, node: BasicTypeSpec) -> tuple[BasicType, int]:
        if node.token.kind is TokenKind.T_INT:
            return BasicType.TYPE_INT, node.token.line
        return BasicType.TYPE_VOID, -1


def build_ast(root: CompileUnit) -> AstNode:
    """Build the abstract syntax tree of a parsed compile unit."""
    return AstBuilder().run(root)