"""Abstract syntax tree nodes and constructors for MiniC."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


class AstOp(Enum):
    """Kind of an abstract syntax tree node; the value is its display label."""

    COMPILE_UNIT = "compile-unit"
    FUNC_DEF = "func-def"
    FUNC_FORMAL_PARAMS = "formal-params"
    BLOCK = "block"
    DECL_STMT = "decl-stmt"
    VAR_DECL = "var-decl"
    RETURN = "return"
    ASSIGN = "="
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"
    NEG = "neg"
    FUNC_CALL = "func-call"
    FUNC_REAL_PARAMS = "real-params"
    LEAF_LITERAL_UINT = "uint"
    LEAF_VAR_ID = "id"
    LEAF_TYPE = "type"


class BasicType(Enum):
    """Basic value types of the language."""

    TYPE_VOID = "void"
    TYPE_INT = "int"


_UINT32_MASK = 0xFFFFFFFF


@dataclass
class AstNode:
    """A node of the abstract syntax tree."""

    op: AstOp
    line: int = -1
    children: list[AstNode] = field(default_factory=list)
    value: int | None = None
    name: str | None = None
    basic_type: BasicType | None = None
    parent: AstNode | None = field(default=None, compare=False, repr=False)

    def add_child(self, child: AstNode | None) -> AstNode | None:
        """Append a child and return it; None is ignored."""
        if child is None:
            return None
        child.parent = self
        self.children.append(child)
        return child

    def walk(self) -> Iterator[AstNode]:
        """Yield this node and its descendants in pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()

    @property
    def label(self) -> str:
        if self.op is AstOp.LEAF_LITERAL_UINT:
            return str(self.value)
        if self.op is AstOp.LEAF_VAR_ID:
            return str(self.name)
        if self.op is AstOp.LEAF_TYPE and self.basic_type is not None:
            return self.basic_type.value
        return self.op.value

    def render(self) -> str:
        """Return an indented text picture of the subtree, two spaces per level."""
        lines: list[str] = []
        self._render_into(lines, 0)
        return "\n".join(lines)

    def _render_into(self, lines: list[str], depth: int) -> None:
        lines.append("  " * depth + self.label)
        for child in self.children:
            child._render_into(lines, depth + 1)


def make_container(op: AstOp, *args: AstNode | None) -> AstNode:
    """Create an inner node with the given children, skipping None entries.

    The node takes the line of its first child, or -1 when it has none.
    """
    node = AstNode(op)
    for child in args:
        node.add_child(child)
    if node.children:
        node.line = node.children[0].line
    return node


def make_int_literal(value: int, line: int) -> AstNode:
    """Create an unsigned 32-bit integer literal leaf."""
    return AstNode(AstOp.LEAF_LITERAL_UINT, line=line, value=value & _UINT32_MASK)


def make_identifier(name: str, line: int) -> AstNode:
    """Create a variable or function name leaf."""
    return AstNode(AstOp.LEAF_VAR_ID, line=line, name=name)


def make_type(basic_type: BasicType, line: int) -> AstNode:
    """Create a type leaf."""
    return AstNode(AstOp.LEAF_TYPE, line=line, basic_type=basic_type)


def make_func_def(
    return_type: BasicType,
    name: str,
    line: int,
    body: AstNode | None,
    params: AstNode | None,
) -> AstNode:
    """Create a function definition: type, name, body block and formal parameters.

    A missing body becomes an empty block; missing parameters an empty list.
    """
    if body is None:
        body = make_container(AstOp.BLOCK)
    if params is None:
        params = make_container(AstOp.FUNC_FORMAL_PARAMS)
    node = make_container(
        AstOp.FUNC_DEF,
        make_type(return_type, line),
        make_identifier(name, line),
        body,
        params,
    )
    node.name = name
    return node


def make_func_call(name_node: AstNode, params: AstNode | None) -> AstNode:
    """Create a function call of the named function with its real parameters."""
    if params is None:
        params = make_container(AstOp.FUNC_REAL_PARAMS)
    node = make_container(AstOp.FUNC_CALL, name_node, params)
    node.name = name_node.name
    node.line = name_node.line
    return node