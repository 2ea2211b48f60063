"""
Command language for penbot robots.

Main components:
- scanner.py: tokenization of command text
- interpreter.py: assembly of tokens into a CommandList
"""

from .interpreter import Interpreter, interpret
from .scanner import KEYWORDS, Scanner, Token, TokenKind

__all__ = [
    "Interpreter",
    "interpret",
    "Scanner",
    "Token",
    "TokenKind",
    "KEYWORDS",
]
