"""
Lexical analyzer for the TINYC language.

This module turns raw source text into tokens, one at a time, on demand:

Classes:
    CharacterStream: Stream abstraction for reading characters with line/column tracking.
    Token: Represents a single token with kind, text, and source location.
    Lexer: Converts a CharacterStream into a forward-only sequence of tokens.

Features:
    - Skips whitespace (space, tab, newline, carriage return)
    - Recognizes:
        * Integer and float literals (digits with at most one `.`)
        * `true` / `false` boolean literals
        * String literals with `\\n` and `\\t` escapes
        * Identifiers, the `println` keyword and the type keywords
        * `=`, `;`, `{`, `}`, `(`, `)`

Raises:
    LexicalError: On an invalid character, an incomplete escape sequence
        or an unterminated string literal.

Example:
    >>> lexer = Lexer(CharacterStream("println(42);"))
    >>> lexer.next_token()
    Token(PRINTLN, println)

Exports:
    - CharacterStream
    - Token
    - Lexer
    - tokenize
"""

from collections.abc import Iterator
from typing import Any

from tinyc.tinyc_constants import (
    DIGITS,
    LETTERS,
    WHITESPACE,
    TokenKind,
    escape_hashmap,
    keyword_hashmap,
    punctuation_hashmap,
)
from tinyc.tinyc_errors import LexicalError


class CharacterStream:
    """
    A utility for reading characters from a string source with line and column tracking.

    Attributes:
        source (str): The input source string.
        position (int): Current index in the source.
        line (int): Current line number (1-indexed).
        column (int): Current column number (1-indexed).
    """

    def __init__(self, source: str, position: int = 0, line: int = 1, column: int = 1):
        self.source = source
        self.position = position
        self.line = line
        self.column = column

    def next(self) -> str:
        """
        Consumes and returns the next character in the stream.

        Raises:
            EOFError: If reading past the end of the source.
        """
        if self.position >= len(self.source):
            raise EOFError(
                f"Attempted to read past end of source at position=<{self.position}>, line=<{self.line}>"
            )
        char = self.source[self.position]
        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.position += 1
        return char

    def peek(self, offset: int = 0) -> str:
        """Returns the character at `offset` without advancing, or "" when out of bounds."""
        index = self.position + offset
        if index < 0 or index >= len(self.source):
            return ""
        return self.source[index]

    def end_of_file(self) -> bool:
        return self.position >= len(self.source)


class Token:
    """A single lexical token.

    Attributes:
        kind (TokenKind): The lexical category.
        text (str): The lexeme; for strings, the contents with escapes resolved.
        line (int): The 1-based line number where the token starts.
        col (int): The 1-based column number where the token starts.
    """

    __slots__ = ("kind", "text", "line", "col")

    def __init__(self, kind: TokenKind, text: str, line: int = 0, col: int = 0):
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "text", text)
        object.__setattr__(self, "line", line)
        object.__setattr__(self, "col", col)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Token is immutable, cannot set '{name}'")

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.text})"

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, Token)
            and self.kind == other.kind
            and self.text == other.text
            and self.line == other.line
            and self.col == other.col
        )

    def __hash__(self) -> int:
        return hash((self.kind, self.text, self.line, self.col))


class Lexer:
    """Lexical analyzer for the TINYC language.

    The lexer is a strict forward cursor: each call to `next_token` classifies
    the characters at the current position and advances past them. Nothing is
    ever pushed back. Once the input is exhausted every further call returns
    an `EOF` token.

    Iterating a Lexer yields the remaining tokens up to and including `EOF`.

    Attributes:
        stream (CharacterStream): The source stream to tokenize.
    """

    def __init__(self, stream: CharacterStream) -> None:
        self.stream = stream

    def __iter__(self) -> Iterator[Token]:
        while True:
            tok = self.next_token()
            yield tok
            if tok.kind == TokenKind.EOF:
                return

    def peek(self) -> str:
        return self.stream.peek()

    def advance(self) -> str:
        return self.stream.next()

    def skip_whitespace(self) -> None:
        while not self.stream.end_of_file() and self.peek() in WHITESPACE:
            self.advance()

    def next_token(self) -> Token:
        """Consumes and returns the next Token from the stream.

        Raises:
            LexicalError: If the current character cannot start any token, or a
                string literal is malformed.
        """
        self.skip_whitespace()

        line, col = self.stream.line, self.stream.column
        if self.stream.end_of_file():
            return Token(TokenKind.EOF, "", line, col)

        ch = self.peek()

        # 1. Number
        if ch in DIGITS or ch == ".":
            return self.read_number(line, col)

        # 2-3. `=` and punctuation
        if ch in punctuation_hashmap:
            self.advance()
            return Token(punctuation_hashmap[ch], ch, line, col)

        # 4. String
        if ch == '"':
            return self.read_string(line, col)

        # 5. Identifier or keyword
        if ch in LETTERS:
            return self.read_identifier(line, col)

        raise LexicalError(f"Invalid character '{ch}'", line, col)

    def read_number(self, line: int, col: int) -> Token:
        """Reads digits and at most one `.`; a second `.` is left in the stream."""
        num = ""
        has_dot = False
        while not self.stream.end_of_file() and (
            self.peek() in DIGITS or self.peek() == "."
        ):
            if self.peek() == ".":
                if has_dot:
                    break
                has_dot = True
            num += self.advance()
        kind = TokenKind.FLOAT_LITERAL if has_dot else TokenKind.INT_LITERAL
        return Token(kind, num, line, col)

    def read_identifier(self, line: int, col: int) -> Token:
        ident = ""
        while not self.stream.end_of_file() and (
            self.peek() in LETTERS or self.peek() in DIGITS or self.peek() == "_"
        ):
            ident += self.advance()
        kind = keyword_hashmap.get(ident, TokenKind.IDENT)
        return Token(kind, ident, line, col)

    def read_string(self, line: int, col: int) -> Token:
        self.advance()  # opening quote
        val = ""
        while not self.stream.end_of_file() and self.peek() != '"':
            ch = self.advance()
            if ch == "\\":
                if self.stream.end_of_file():
                    raise LexicalError(
                        "Incomplete escape sequence",
                        self.stream.line,
                        self.stream.column,
                    )
                escaped = self.advance()
                val += escape_hashmap.get(escaped, escaped)
            else:
                val += ch
        if self.stream.end_of_file():
            raise LexicalError("Unterminated string", line, col)
        self.advance()  # closing quote
        return Token(TokenKind.STRING_LITERAL, val, line, col)


def tokenize(source: str) -> list[Token]:
    """Tokenizes a whole source string, including the trailing EOF token."""
    return list(Lexer(CharacterStream(source)))


__all__ = ["CharacterStream", "Lexer", "Token", "tokenize"]
