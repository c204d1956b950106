"""Tokenizer, parser and abstract syntax tree builder for the MiniC language."""

__version__ = "1.0.1"
__all__ = ["lexer", "syntax_tree", "cst", "expr_parser", "parser", "builder", "frontend"]