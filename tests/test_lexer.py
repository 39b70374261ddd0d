"""Tests for the DSL tokenizer and keyword table."""

from e2e_dsl.dsl.keywords import ACTION_KEYWORDS, BOUNDARY_KEYWORDS, Keyword, lookup_keyword
from e2e_dsl.dsl.lexer import Token, TokenType, tokenize, tokenize_line


def _types(tokens: list[Token]) -> list[TokenType]:
    return [t.type for t in tokens]


class TestKeywordLookup:
    def test_canonical_spelling(self) -> None:
        assert lookup_keyword("continueOnFailure") is Keyword.CONTINUE_ON_FAILURE

    def test_case_insensitive(self) -> None:
        assert lookup_keyword("CONTINUEONFAILURE") is Keyword.CONTINUE_ON_FAILURE
        assert lookup_keyword("presskey") is Keyword.PRESS_KEY
        assert lookup_keyword("Scenario") is Keyword.SCENARIO

    def test_unknown_word(self) -> None:
        assert lookup_keyword("frobnicate") is None

    def test_boundary_and_action_sets_are_disjoint(self) -> None:
        assert not BOUNDARY_KEYWORDS & ACTION_KEYWORDS
        assert len(ACTION_KEYWORDS) == 14


class TestTokenizeLine:
    def test_scenario_header(self) -> None:
        tokens = tokenize_line('scenario "Login" {', 1)
        assert _types(tokens) == [TokenType.KEYWORD, TokenType.STRING, TokenType.BRACE_OPEN]
        assert [t.value for t in tokens] == ["scenario", "Login", "{"]
        assert [t.column for t in tokens] == [0, 9, 17]
        assert all(t.line == 1 for t in tokens)

    def test_target_id_keeps_digits_only(self) -> None:
        tokens = tokenize_line("    click #12", 3)
        assert tokens[1] == Token(TokenType.TARGET_ID, "12", 3, 10)

    def test_hash_without_digit_is_skipped(self) -> None:
        tokens = tokenize_line("click #abc", 1)
        assert _types(tokens) == [TokenType.KEYWORD, TokenType.KEYWORD]
        assert tokens[1].value == "abc"

    def test_numbers(self) -> None:
        tokens = tokenize_line("scroll -25 1.5", 1)
        assert [(t.type, t.value) for t in tokens[1:]] == [
            (TokenType.NUMBER, "-25"),
            (TokenType.NUMBER, "1.5"),
        ]

    def test_number_takes_one_dot(self) -> None:
        tokens = tokenize_line("1.2.3", 1)
        assert [t.value for t in tokens] == ["1.2", "3"]

    def test_string_escapes(self) -> None:
        tokens = tokenize_line(r'type #1 "say \"hi\"\n\tok\\"', 1)
        assert tokens[2].value == 'say "hi"\n\tok\\'

    def test_unterminated_string_runs_to_end_of_line(self) -> None:
        tokens = tokenize_line('expect "never closed', 1)
        assert tokens[1].type == TokenType.STRING
        assert tokens[1].value == "never closed"

    def test_array_is_copied_verbatim(self) -> None:
        tokens = tokenize_line('tags ["a", ["b"]] priority', 1)
        assert tokens[1].type == TokenType.ARRAY
        assert tokens[1].value == '["a", ["b"]]'
        assert tokens[2].value == "priority"

    def test_braces(self) -> None:
        tokens = tokenize_line("}{", 1)
        assert _types(tokens) == [TokenType.BRACE_CLOSE, TokenType.BRACE_OPEN]

    def test_stray_characters_are_ignored(self) -> None:
        tokens = tokenize_line("goBack ; @ !", 1)
        assert [t.value for t in tokens] == ["goBack"]

    def test_word_keeps_source_case(self) -> None:
        token = tokenize_line("PressKey", 1)[0]
        assert token.value == "PressKey"
        assert token.keyword is Keyword.PRESS_KEY
        assert token.is_keyword(Keyword.PRESS_KEY, Keyword.CLICK)

    def test_non_keyword_tokens_have_no_keyword(self) -> None:
        token = tokenize_line('"click"', 1)[0]
        assert token.keyword is None


class TestTokenize:
    def test_comment_and_blank_lines_are_skipped(self) -> None:
        tokens = tokenize(["// note", "", "   # heading", "refresh"])
        assert len(tokens) == 1
        assert tokens[0].line == 4

    def test_line_numbers_are_one_based(self) -> None:
        tokens = tokenize(["goBack", "goForward"])
        assert [(t.value, t.line) for t in tokens] == [("goBack", 1), ("goForward", 2)]

    def test_empty_input(self) -> None:
        assert tokenize([]) == []
