"""Front end: reads MiniC source and produces its abstract syntax tree."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .builder import build_ast
from .expr_parser import ParseError
from .lexer import LexError
from .parser import parse
from .syntax_tree import AstNode


class FrontendError(Exception):
    """Raised when a source file cannot be read or analysed."""


def parse_source(source: str) -> AstNode:
    """Tokenize, parse and build the abstract syntax tree of source text."""
    try:
        cst = parse(source)
    except (LexError, ParseError) as exc:
        raise FrontendError(f"lexical or syntax error: {exc}") from exc
    return build_ast(cst)


def run(filename: str | Path) -> AstNode:
    """Read a source file and return its abstract syntax tree."""
    try:
        source = Path(filename).read_text(encoding="utf-8")
    except OSError as exc:
        raise FrontendError(f"file ({filename}) cannot be opened, it may not exist") from exc
    return parse_source(source)


def main(argv: list[str] | None = None) -> int:
    """Print the abstract syntax tree of a source file; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="minicfront", description="Show the abstract syntax tree of a MiniC file."
    )
    parser.add_argument("source", help="MiniC source file")
    parser.add_argument("-o", "--output", help="write the tree to this file")
    args = parser.parse_args(argv)
    try:
        tree = run(args.source)
    except FrontendError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    text = tree.render() + "\n"
    if args.output:
        try:
            Path(args.output).write_text(text, encoding="utf-8")
        except OSError as exc:
            print(f"error: cannot write {args.output}: {exc}", file=sys.stderr)
            return 1
    else:
        sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())