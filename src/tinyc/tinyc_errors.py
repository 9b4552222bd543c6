"""
Exception hierarchy for the TINYC toolchain.

Every error raised by the lexer or interpreter derives from `TinycError`, so a
caller (the CLI, the REPL or a test) can catch one type and report the
message. None of them are recoverable inside a program run: the first error
aborts execution.

Classes:
    TinycError: Base class; carries the message and optional source position.
    LexicalError: Invalid character, incomplete escape or unterminated string.
    TinycSyntaxError: The token stream does not follow the grammar.
    UnexpectedTokenError: A specific token kind (or construct) was expected.
    SemanticError: Base class for errors found while evaluating statements.
    UndefinedVariableError: An identifier was read before it held a value.
    TypeMismatchError: A value does not have the shape of its declared type.
    RedeclarationError: An identifier was re-declared under another type.
"""

from __future__ import annotations

from tinyc.tinyc_constants import TokenKind, VarType


class TinycError(Exception):
    """Base class for all TINYC diagnostics.

    Attributes:
        message (str): Human-readable description without position.
        line (int | None): 1-based line of the offending token, if known.
        col (int | None): 1-based column of the offending token, if known.
    """

    def __init__(self, message: str, line: int | None = None, col: int | None = None):
        self.message = message
        self.line = line
        self.col = col
        if line is not None:
            message += f" at line {line}, col {col}"
        super().__init__(message)


class LexicalError(TinycError):
    pass


class TinycSyntaxError(TinycError):
    pass


class UnexpectedTokenError(TinycSyntaxError):
    """Raised when the current token is not the one the grammar requires.

    Attributes:
        actual (TokenKind): Kind of the token that was found.
        text (str): Text of the token that was found.
        expected (TokenKind | str): The required kind, or a description such as
            "an expression" when several kinds would have been accepted.
    """

    def __init__(
        self,
        actual: TokenKind,
        text: str,
        expected: TokenKind | str,
        line: int | None = None,
        col: int | None = None,
    ):
        self.actual = actual
        self.text = text
        self.expected = expected
        if isinstance(expected, TokenKind):
            wanted = f"'{expected}'"
        else:
            wanted = expected
        super().__init__(
            f"Unexpected token '{text}' ({actual}), expected {wanted}", line, col
        )


class SemanticError(TinycError):
    pass


class UndefinedVariableError(SemanticError):
    def __init__(self, name: str, line: int | None = None, col: int | None = None):
        self.name = name
        super().__init__(f"Variable '{name}' is not defined", line, col)


class TypeMismatchError(SemanticError):
    """Raised when an initializer does not have the shape of the declared type."""

    _DESCRIPTIONS = {
        VarType.INT: ("non-integer", "an integer"),
        VarType.FLOAT: ("non-float", "a float"),
        VarType.BOOL: ("non-boolean", "a boolean"),
    }

    def __init__(
        self,
        var_type: VarType,
        value: str,
        line: int | None = None,
        col: int | None = None,
    ):
        self.var_type = var_type
        self.value = value
        bad, good = self._DESCRIPTIONS.get(var_type, (f"non-{var_type}", f"a {var_type}"))
        super().__init__(
            f"Cannot assign {bad} value to {good} variable", line, col
        )


class RedeclarationError(SemanticError):
    def __init__(
        self,
        name: str,
        previous: VarType,
        new: VarType,
        line: int | None = None,
        col: int | None = None,
    ):
        self.name = name
        self.previous = previous
        self.new = new
        super().__init__(
            f"Variable '{name}' is already declared as '{previous}', cannot redeclare as '{new}'",
            line,
            col,
        )


__all__ = [
    "LexicalError",
    "RedeclarationError",
    "SemanticError",
    "TinycError",
    "TinycSyntaxError",
    "TypeMismatchError",
    "UndefinedVariableError",
    "UnexpectedTokenError",
]
