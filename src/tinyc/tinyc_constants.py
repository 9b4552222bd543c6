"""
Token and type tables for the TINYC language.

Two separate enumerations are used:

    TokenKind: the lexical category of a token, as produced by the lexer.
    VarType:   a declared variable type, as named by a `TYPE` keyword token.

The grammar joins them explicitly (a `TYPE` token's text is resolved to a
`VarType` by the interpreter), so an integer literal and the `int` keyword
can never be confused.

Exports:
    - TokenKind
    - VarType
    - keyword_hashmap
    - punctuation_hashmap
    - WHITESPACE, DIGITS, LETTERS
"""

import string
from enum import Enum


class TokenKind(str, Enum):
    INT_LITERAL = "INT_LITERAL"
    FLOAT_LITERAL = "FLOAT_LITERAL"
    BOOL_LITERAL = "BOOL_LITERAL"
    STRING_LITERAL = "STRING_LITERAL"
    IDENT = "IDENT"
    TYPE = "TYPE"
    EQUAL = "EQUAL"
    SEMICOLON = "SEMICOLON"
    PRINTLN = "PRINTLN"
    LBRACE = "LBRACE"
    RBRACE = "RBRACE"
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    EOF = "EOF"

    def __str__(self) -> str:
        return self.value


class VarType(str, Enum):
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    STRING = "string"

    def __str__(self) -> str:
        return self.value


# Reserved words → token kind
keyword_hashmap: dict[str, TokenKind] = {
    "println": TokenKind.PRINTLN,
    "int": TokenKind.TYPE,
    "float": TokenKind.TYPE,
    "bool": TokenKind.TYPE,
    "string": TokenKind.TYPE,
    "true": TokenKind.BOOL_LITERAL,
    "false": TokenKind.BOOL_LITERAL,
}

# Single-character tokens
punctuation_hashmap: dict[str, TokenKind] = {
    "=": TokenKind.EQUAL,
    ";": TokenKind.SEMICOLON,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}

literal_kinds: frozenset[TokenKind] = frozenset(
    {TokenKind.INT_LITERAL, TokenKind.FLOAT_LITERAL, TokenKind.BOOL_LITERAL}
)

escape_hashmap: dict[str, str] = {"n": "\n", "t": "\t"}

WHITESPACE = " \t\r\n"
DIGITS = string.digits
LETTERS = string.ascii_letters
