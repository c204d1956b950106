# minicfront

A front end for MiniC, a small C-like language with integer variables,
functions, blocks, assignments, returns and arithmetic expressions. It turns
MiniC source into tokens, then into a concrete syntax tree, then into an
abstract syntax tree (AST).

## Language

- Declarations: `int a, b;` at file scope or inside blocks
- Function definitions without parameters: `int name() { ... }`
- Statements: `x = expr;`, `return expr;`, `{ ... }`, `expr;` and the empty `;`
- Expressions: `+ - * / %`, unary `-`, parentheses, calls `f(a, b)`
- Integer literals: decimal (`42`), octal (`017`), hexadecimal (`0x1F`)
- Comments: `/* ... */` and `// ...`

The keyword `void` is recognised by the tokenizer, but the grammar does not
accept it anywhere.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Command line

```
minicfront program.c
minicfront program.c -o program.ast
```

This reads `program.c`, parses it and prints the AST as indented text, two
spaces per level. With `-o`/`--output` the text goes to the named file
instead of standard output. If the file cannot be opened, or holds a
lexical or syntax error, the command prints `error: ...` to standard error
and exits with status 1.

## Library use

```python
from minicfront.frontend import parse_source

ast = parse_source("int main() { return 0x10 - 3; }")
print(ast.render())
```

prints

```
compile-unit
  func-def
    int
    main
    block
      return
        -
          16
          3
    formal-params
```

You can also run each stage on its own:

```python
from minicfront.lexer import tokenize
from minicfront.parser import parse
from minicfront.builder import build_ast

source = "int main() { return 0x10 - 3; }"
tokens = tokenize(source)   # list of Token, ending with an EOF token
cst = parse(source)         # minicfront.cst.CompileUnit
ast = build_ast(cst)        # minicfront.syntax_tree.AstNode

for node in ast.walk():
    print(node.op, node.line)
```

- `minicfront.lexer.tokenize(source)` returns `Token` objects (`kind`,
  `text`, `line`, `column`), drops whitespace and comments, and raises
  `LexError` on a character no rule accepts.
- `minicfront.expr_parser.TokenStream` is the cursor used by the parsing
  functions; `parse_expr` and the other `parse_*` functions in
  `minicfront.expr_parser` and `minicfront.parser` each parse one grammar
  rule and raise `ParseError` (with `line` and `column`) on bad input.
- `minicfront.cst.CstVisitor` dispatches each concrete syntax tree node to a
  `visit_<ClassName>` method, falling back to `generic_visit`.
  `minicfront.builder.AstBuilder` is such a visitor.
- `minicfront.frontend.run(filename)` reads a file and returns its AST. It
  raises `FrontendError` when the file cannot be read or the source is not
  valid MiniC; `parse_source(source)` does the same for text.

## AST shape

Nodes are `AstNode` objects with an `op` (`AstOp`), a `line`, `children`,
and for leaves a `value`, `name` or `basic_type`.

- The root is a `COMPILE_UNIT` node. All global declarations come first,
  then all function definitions, whatever their order in the source.
- A `FUNC_DEF` has four children: the return type, the name, the body
  `BLOCK` and an empty `FUNC_FORMAL_PARAMS` node.
- A `DECL_STMT` holds one `VAR_DECL` child per declared name; each of these
  holds a type leaf and an identifier leaf.
- Binary operators are left-associative: `a + b + 2` becomes
  `ADD(ADD(a, b), 2)`. Parentheses leave no node of their own.
- A call is a `FUNC_CALL` with the function name and a `FUNC_REAL_PARAMS`
  node, which is empty when there are no arguments.
- Integer literals are kept as unsigned 32-bit values.
- Empty statements (`;`) are left out of their block.

## What it does not do

The package stops at the AST. It does no semantic checking (undeclared or
redeclared names, use of a global before its declaration), generates no
intermediate code or assembly, and does not draw the tree as an image.