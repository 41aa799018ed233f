from __future__ import annotations

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .lexer import Token


class MinipasError(Exception):
    """Exception type used to report minipas parse and runtime errors."""
    def __init__(self, kind: str, message: str, lexeme: Optional[str] = None, line: Optional[int] = None):
        super().__init__(f"{kind}: {message}")
        self.kind = kind
        self.message = message
        self.lexeme = lexeme
        self.line = line


class ParseError(MinipasError):
    """Raised when the current token cannot continue the active grammar rule."""
    def __init__(self, token: 'Token', expected: Optional[str] = None,
                 message: Optional[str] = None, kind: str = 'SyntaxError'):
        if message is None:
            message = f"unexpected {token.kind.name} {token.lexeme!r} at {token.line}:{token.column}"
            if expected:
                message += f", expected {expected}"
        super().__init__(kind, message, token.lexeme, token.line)
        self.token = token


class RedeclarationError(ParseError):
    """Raised when a variable is declared twice."""
    def __init__(self, token: 'Token'):
        super().__init__(
            token,
            message=f"variable {token.lexeme} already declared at {token.line}:{token.column}",
            kind='RedeclarationError',
        )
