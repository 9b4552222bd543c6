import pytest
from hypothesis import given
from hypothesis import strategies as st

from tinyc.tinyc_constants import TokenKind, keyword_hashmap
from tinyc.tinyc_errors import LexicalError
from tinyc.tinyc_lexer import CharacterStream, Lexer, Token, tokenize


def kinds(source: str) -> list[TokenKind]:
    return [tok.kind for tok in tokenize(source)]


def test_single_char_tokens() -> None:
    assert kinds("= ; { } ( )") == [
        TokenKind.EQUAL,
        TokenKind.SEMICOLON,
        TokenKind.LBRACE,
        TokenKind.RBRACE,
        TokenKind.LPAREN,
        TokenKind.RPAREN,
        TokenKind.EOF,
    ]


def test_string_token() -> None:
    tok = Lexer(CharacterStream('"hello world"')).next_token()
    assert tok.kind == TokenKind.STRING_LITERAL
    assert tok.text == "hello world"


def test_integer_token() -> None:
    tok = Lexer(CharacterStream("123")).next_token()
    assert tok.kind == TokenKind.INT_LITERAL
    assert tok.text == "123"


def test_float_token() -> None:
    tok = Lexer(CharacterStream("123.456")).next_token()
    assert tok.kind == TokenKind.FLOAT_LITERAL
    assert tok.text == "123.456"


def test_leading_dot_is_float() -> None:
    tok = Lexer(CharacterStream(".5")).next_token()
    assert tok.kind == TokenKind.FLOAT_LITERAL
    assert tok.text == ".5"


def test_second_dot_is_left_for_next_token() -> None:
    toks = tokenize("1.2.3")
    assert [(t.kind, t.text) for t in toks] == [
        (TokenKind.FLOAT_LITERAL, "1.2"),
        (TokenKind.FLOAT_LITERAL, ".3"),
        (TokenKind.EOF, ""),
    ]


def test_identifier_token() -> None:
    tok = Lexer(CharacterStream("my_var2")).next_token()
    assert tok.kind == TokenKind.IDENT
    assert tok.text == "my_var2"


def test_identifier_stops_at_punctuation() -> None:
    assert [t.text for t in tokenize("main()")] == ["main", "(", ")", ""]


@pytest.mark.parametrize("word", ["int", "float", "bool", "string"])  # type: ignore[misc]
def test_type_keywords(word: str) -> None:
    tok = Lexer(CharacterStream(word)).next_token()
    assert tok.kind == TokenKind.TYPE
    assert tok.text == word


def test_println_keyword() -> None:
    assert Lexer(CharacterStream("println")).next_token().kind == TokenKind.PRINTLN


@pytest.mark.parametrize("word", ["true", "false"])  # type: ignore[misc]
def test_boolean_literals(word: str) -> None:
    tok = Lexer(CharacterStream(word)).next_token()
    assert tok.kind == TokenKind.BOOL_LITERAL
    assert tok.text == word


def test_keywords_are_case_sensitive() -> None:
    assert kinds("Int TRUE Println") == [TokenKind.IDENT] * 3 + [TokenKind.EOF]


def test_keyword_prefix_is_identifier() -> None:
    tok = Lexer(CharacterStream("integer")).next_token()
    assert tok.kind == TokenKind.IDENT


def test_string_escapes() -> None:
    tok = Lexer(CharacterStream(r'"a\nb\tc\"d\\e\qf"')).next_token()
    assert tok.text == 'a\nb\tc"d\\eqf'


def test_empty_string() -> None:
    tok = Lexer(CharacterStream('""')).next_token()
    assert tok.kind == TokenKind.STRING_LITERAL
    assert tok.text == ""


def test_incomplete_escape_raises() -> None:
    lexer = Lexer(CharacterStream('"abc\\'))
    with pytest.raises(LexicalError, match="Incomplete escape sequence"):
        lexer.next_token()


def test_unterminated_string_raises() -> None:
    lexer = Lexer(CharacterStream('"abc'))
    with pytest.raises(LexicalError, match="Unterminated string at line 1, col 1"):
        lexer.next_token()


@pytest.mark.parametrize("source", ["@", "_x", "+", "#", "é"])  # type: ignore[misc]
def test_invalid_character_raises(source: str) -> None:
    with pytest.raises(LexicalError, match="Invalid character"):
        Lexer(CharacterStream(source)).next_token()


def test_invalid_character_position() -> None:
    lexer = Lexer(CharacterStream("int x\n  $"))
    lexer.next_token()
    lexer.next_token()
    with pytest.raises(LexicalError) as excinfo:
        lexer.next_token()
    assert excinfo.value.line == 2
    assert excinfo.value.col == 3
    assert str(excinfo.value) == "Invalid character '$' at line 2, col 3"


def test_whitespace_is_skipped() -> None:
    assert kinds(" \t\r\n 7 \n") == [TokenKind.INT_LITERAL, TokenKind.EOF]


def test_empty_input_returns_eof() -> None:
    tok = Lexer(CharacterStream("")).next_token()
    assert tok.kind == TokenKind.EOF
    assert tok.text == ""


def test_eof_is_repeatable() -> None:
    lexer = Lexer(CharacterStream("x"))
    lexer.next_token()
    assert lexer.next_token().kind == TokenKind.EOF
    assert lexer.next_token().kind == TokenKind.EOF


def test_iteration_stops_after_eof() -> None:
    toks = list(Lexer(CharacterStream("int main();")))
    assert toks[-1].kind == TokenKind.EOF
    assert len(toks) == 6


def test_line_and_column_tracking() -> None:
    toks = tokenize("int x;\n  println")
    assert (toks[3].line, toks[3].col) == (2, 3)


def test_character_stream_methods() -> None:
    stream = CharacterStream("abc")
    assert stream.peek() == "a"
    assert stream.next() == "a"
    assert not stream.end_of_file()
    stream.next()
    stream.next()
    assert stream.end_of_file()
    assert stream.peek(5) == ""


def test_character_stream_next_past_eof_raises() -> None:
    with pytest.raises(EOFError, match="Attempted to read past end of source"):
        CharacterStream("").next()


def test_token_repr_and_eq() -> None:
    t1 = Token(TokenKind.INT_LITERAL, "42", 1, 2)
    t2 = Token(TokenKind.INT_LITERAL, "42", 1, 2)
    t3 = Token(TokenKind.IDENT, "x")

    assert repr(t1) == "Token(INT_LITERAL, 42)"
    assert t1 == t2
    assert t1 != t3
    assert len({t1, t2, t3}) == 2


def test_token_is_immutable() -> None:
    tok = Token(TokenKind.IDENT, "x")
    with pytest.raises(AttributeError):
        tok.text = "y"  # type: ignore[misc]


identifiers = st.from_regex(r"[A-Za-z][A-Za-z0-9_]{0,10}", fullmatch=True).filter(
    lambda s: s not in keyword_hashmap
)


@given(identifiers)  # type: ignore[misc]
def test_identifiers_round_trip(name: str) -> None:
    toks = tokenize(name)
    assert toks[0].kind == TokenKind.IDENT
    assert toks[0].text == name


@given(st.from_regex(r"[0-9]+(\.[0-9]*)?", fullmatch=True))  # type: ignore[misc]
def test_numbers_are_single_tokens(num: str) -> None:
    toks = tokenize(num)
    expected = TokenKind.FLOAT_LITERAL if "." in num else TokenKind.INT_LITERAL
    assert [(t.kind, t.text) for t in toks[:-1]] == [(expected, num)]


@given(st.text(min_size=1, max_size=100))  # type: ignore[misc]
def test_lexer_does_not_crash_on_random_input(text: str) -> None:
    try:
        tokenize(text)
    except LexicalError as e:
        assert any(
            msg in str(e)
            for msg in (
                "Invalid character",
                "Incomplete escape sequence",
                "Unterminated string",
            )
        )
