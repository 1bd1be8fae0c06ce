"""Lexical layer: token vocabulary and the tokenizer."""

from mermaid_lint.syntax.lexer import Lexer, tokenize
from mermaid_lint.syntax.tokens import KEYWORDS, Token, TokenKind

__all__ = ["KEYWORDS", "Lexer", "Token", "TokenKind", "tokenize"]
