"""
TINYC Parser/Evaluator

Recognizes a TINYC program token by token and executes each statement the
moment it is recognized. No syntax tree is built: `println` output is written
and declarations update the variable store during parsing itself.

Grammar
-------
    Program     := 'int' IDENTIFIER '(' ')' (Block | ';')
    Block       := '{' Statement* '}'
    Statement   := PrintlnStmt | DeclStmt
    PrintlnStmt := 'println' '(' (STRING | Expression) ')' ';'
    DeclStmt    := TypeKeyword IDENTIFIER ('=' Expression)? ';'
    Expression  := STRING | IDENTIFIER | INT-LITERAL | FLOAT-LITERAL | BOOL-LITERAL

Interpreter Behavior
--------------------
- Pulls tokens from the lexer on demand and holds exactly one token of
  lookahead (`current`).
- Values are strings. A declared type is enforced only when a value is
  assigned, by inspecting the shape of the string.
- The store remembers each variable's declared type; re-declaring a name
  under a different type is rejected.
- Fail-fast: the first error raises and aborts the run.

Entry Points
------------
- `parse()`: Run a complete program.
- `parse_statement()`: Run one statement.
- `run_statements()`: Run statements until end of input (REPL mode).

Raises
------
LexicalError, TinycSyntaxError, SemanticError
    See `tinyc.tinyc_errors`.
"""

from __future__ import annotations

import sys
from typing import NamedTuple, TextIO

from tinyc.tinyc_constants import DIGITS, TokenKind, VarType, literal_kinds
from tinyc.tinyc_errors import (
    RedeclarationError,
    TypeMismatchError,
    UndefinedVariableError,
    UnexpectedTokenError,
)
from tinyc.tinyc_lexer import CharacterStream, Lexer, Token


class Variable(NamedTuple):
    """An entry in the variable store. `value` is None until first assigned."""

    type: VarType
    value: str | None = None


def is_integer(value: str) -> bool:
    return all(c in DIGITS for c in value)


def is_float(value: str) -> bool:
    has_dot = False
    for c in value:
        if c == ".":
            if has_dot:
                return False
            has_dot = True
        elif c not in DIGITS:
            return False
    return True


def is_bool(value: str) -> bool:
    return value in ("true", "false")


def check_value(var_type: VarType, value: str) -> bool:
    """Returns True if `value` has the structural shape of `var_type`.

    The empty string passes the integer and float checks.
    """
    if var_type is VarType.INT:
        return is_integer(value)
    if var_type is VarType.FLOAT:
        return is_float(value)
    if var_type is VarType.BOOL:
        return is_bool(value)
    return True


class Interpreter:
    """
    TINYC single-pass Parser/Evaluator.

    Attributes
    ----------
    lexer : Lexer
        Token source, consumed strictly forward.
    current : Token
        The single token of lookahead.
    variables : dict[str, Variable]
        The variable store, keyed by identifier.
    stdout : TextIO
        Destination for `println` output.
    trace : TextIO | None
        When set, every matched token is reported here.
    """

    def __init__(
        self,
        source: str | Lexer,
        stdout: TextIO | None = None,
        trace: TextIO | None = None,
        variables: dict[str, Variable] | None = None,
    ) -> None:
        if isinstance(source, Lexer):
            self.lexer = source
        else:
            self.lexer = Lexer(CharacterStream(source))
        self.stdout = stdout if stdout is not None else sys.stdout
        self.trace = trace
        self.variables: dict[str, Variable] = variables if variables is not None else {}
        self.current: Token = self.lexer.next_token()

    def advance(self) -> Token:
        """Replaces the lookahead with the next token and returns the consumed one."""
        tok = self.current
        if self.trace is not None:
            print(
                f"[match] {tok.kind} {tok.text!r} (line {tok.line}, col {tok.col})",
                file=self.trace,
            )
        self.current = self.lexer.next_token()
        return tok

    def error(self, expected: TokenKind | str) -> UnexpectedTokenError:
        tok = self.current
        return UnexpectedTokenError(tok.kind, tok.text, expected, tok.line, tok.col)

    def match(self, kind: TokenKind) -> Token:
        if self.current.kind == kind:
            return self.advance()
        raise self.error(kind)

    def match_any_type(self) -> VarType:
        """Consumes a type keyword and returns the declared type it names."""
        if self.current.kind != TokenKind.TYPE:
            raise self.error("a variable type")
        return VarType(self.advance().text)

    def evaluate_expression(self) -> str:
        if self.current.kind == TokenKind.STRING_LITERAL:
            return self.advance().text
        if self.current.kind == TokenKind.IDENT or self.current.kind in literal_kinds:
            return self.evaluate_variable()
        raise self.error("an expression")

    def evaluate_variable(self) -> str:
        tok = self.current
        if tok.kind == TokenKind.IDENT:
            var = self.variables.get(tok.text)
            if var is None or var.value is None:
                raise UndefinedVariableError(tok.text, tok.line, tok.col)
            self.advance()
            return var.value
        if tok.kind in literal_kinds:
            return self.advance().text
        raise self.error("a variable or literal value")

    def assign(self, name: Token, var_type: VarType, value: str | None) -> None:
        """Stores `value` under `name` after checking it against `var_type`."""
        previous = self.variables.get(name.text)
        if previous is not None and previous.type is not var_type:
            raise RedeclarationError(
                name.text, previous.type, var_type, name.line, name.col
            )
        if value is None:
            # bare re-declaration keeps the existing value
            value = previous.value if previous is not None else None
        elif not check_value(var_type, value):
            raise TypeMismatchError(var_type, value, name.line, name.col)
        self.variables[name.text] = Variable(var_type, value)

    def parse_println(self) -> None:
        self.match(TokenKind.PRINTLN)
        self.match(TokenKind.LPAREN)
        if self.current.kind == TokenKind.STRING_LITERAL:
            value = self.advance().text
        else:
            value = self.evaluate_expression()
        print(value, file=self.stdout, flush=True)
        self.match(TokenKind.RPAREN)
        self.match(TokenKind.SEMICOLON)

    def parse_declaration(self) -> None:
        var_type = self.match_any_type()
        name = self.match(TokenKind.IDENT)
        value = None
        if self.current.kind == TokenKind.EQUAL:
            self.match(TokenKind.EQUAL)
            value = self.evaluate_expression()
        self.assign(name, var_type, value)
        self.match(TokenKind.SEMICOLON)

    def parse_statement(self) -> None:
        if self.current.kind == TokenKind.PRINTLN:
            self.parse_println()
        else:
            self.parse_declaration()

    def run_statements(self) -> None:
        """Executes statements until end of input."""
        while self.current.kind != TokenKind.EOF:
            self.parse_statement()

    def parse_header(self) -> None:
        if self.current.kind != TokenKind.TYPE or self.current.text != VarType.INT.value:
            raise self.error("'int'")
        self.advance()
        self.match(TokenKind.IDENT)
        self.match(TokenKind.LPAREN)
        self.match(TokenKind.RPAREN)

    def parse(self) -> None:
        """Runs a complete program, from the `int` header to end of input."""
        self.parse_header()
        if self.current.kind == TokenKind.LBRACE:
            self.match(TokenKind.LBRACE)
            while self.current.kind != TokenKind.RBRACE:
                self.parse_statement()
            self.match(TokenKind.RBRACE)
        else:
            self.match(TokenKind.SEMICOLON)
        self.match(TokenKind.EOF)


def run_source(source: str, stdout: TextIO | None = None) -> dict[str, Variable]:
    """Runs a complete program and returns the final variable store."""
    interpreter = Interpreter(source, stdout=stdout)
    interpreter.parse()
    return interpreter.variables


__all__ = ["Interpreter", "Variable", "check_value", "run_source"]
