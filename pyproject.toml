[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "minicfront"
version = "1.0.1"
description = "Lexer, parser and abstract-syntax-tree builder for the MiniC expression language"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "frontend", "parser", "lexer", "ast", "minic"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minicfront = "minicfront.frontend:main"

[tool.setuptools.packages.find]
include = ["minicfront*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
