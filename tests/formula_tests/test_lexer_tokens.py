# tests/formula_tests/test_lexer_tokens.py
# This file is part of Propcalc - A Propositional Logic Evaluator
#
# Test suite for formula lexer tokenization and error handling

"""Test suite for formula lexer functionality.

This module tests the lexical analysis phase of formula parsing, verifying
correct tokenization of valid syntax, skipping of whitespace and comments,
and handling of illegal characters and unterminated comments.
"""

import pytest
from formula.lexer import PropLexer
from formula.exceptions import UnterminatedComment
from support.logger import get_logger


class TestPropLexer:
    """Test cases for formula lexer tokenization and error handling."""

    def setup_method(self):
        """Initialize lexer for each test method."""
        self.lexer = PropLexer()
        self.logger = get_logger()

    def _tokenize_to_types(self, text: str) -> list[str]:
        """Extract token types from input text.

        Args:
            text: Input string to tokenize

        Returns:
            List of token type strings
        """
        self.logger.debug(f"Tokenizing: '{text}'")
        token_types = [token.type for token in self.lexer.tokenize(text)]
        self.logger.debug(f"Token types: {token_types}")
        return token_types

    VALID_TOKENIZATION_CASES = [
        ("p", ["ID"]),
        ("a_valid_identifier", ["ID"]),
        ("x1", ["ID"]),
        ("¬ ∧ ∨ → ⇄ ( )", ["NOT", "AND", "OR", "IMPLIES", "IFF", "LPAREN", "RPAREN"]),
        ("p∧q∨¬r", ["ID", "AND", "ID", "OR", "NOT", "ID"]),
        ("(p→q)⇄r", ["LPAREN", "ID", "IMPLIES", "ID", "RPAREN", "IFF", "ID"]),
        ("()", ["LPAREN", "RPAREN"]),
        # Whitespace handling
        (" \t p \r\n ∧ q ", ["ID", "AND", "ID"]),
        # Comments are skipped
        ("p /* note */ ∧ q", ["ID", "AND", "ID"]),
        ("/* leading */p", ["ID"]),
        ("p/* trailing */", ["ID"]),
        ("p /* a * b ** c */ ∨ q", ["ID", "OR", "ID"]),
        ("p /* spans\nlines */ → q", ["ID", "IMPLIES", "ID"]),
        ("p /* one */ /* two */ q", ["ID", "ID"]),
    ]

    @pytest.mark.parametrize("input_text, expected_types", VALID_TOKENIZATION_CASES)
    def test_valid_tokenization(self, input_text, expected_types):
        """Test lexer correctly tokenizes valid formula syntax.

        Args:
            input_text: Valid formula syntax string
            expected_types: Expected sequence of token types
        """
        actual_types = self._tokenize_to_types(input_text)

        assert actual_types == expected_types, (
            f"Tokenization mismatch for '{input_text}':\n"
            f"Expected: {expected_types}\n"
            f"Actual: {actual_types}"
        )

    def test_identifier_recognition(self):
        """Test proper recognition of various identifier patterns."""
        identifier_cases = [
            "simple_id",
            "id123",
            "_underscore_start",
            "camelCaseId",
            "P",
            "_",
        ]

        for identifier in identifier_cases:
            tokens = list(self.lexer.tokenize(identifier))
            assert [t.type for t in tokens] == ["ID"]
            assert tokens[0].value == identifier

    def test_identifiers_are_case_sensitive(self):
        """Test that identifiers differing in case stay distinct tokens."""
        values = [t.value for t in self.lexer.tokenize("p P")]
        assert values == ["p", "P"]

    def test_empty_input(self):
        """Test lexer behavior with empty and comment-only input."""
        assert self._tokenize_to_types("") == []
        assert self._tokenize_to_types("  /* nothing */  ") == []

    ILLEGAL_CHARACTERS = ["@", "#", "$", "!", "&", "|", "*", "/", "~", ";", ",", "1", "-"]

    @pytest.mark.parametrize("illegal_char", ILLEGAL_CHARACTERS)
    def test_illegal_character_becomes_error_token(self, illegal_char):
        """Test illegal characters surface as single-character ERROR tokens.

        Args:
            illegal_char: Character not allowed in formula syntax
        """
        tokens = list(self.lexer.tokenize(f"p ∧ {illegal_char}"))

        assert [t.type for t in tokens] == ["ID", "AND", "ERROR"]
        assert tokens[-1].value == illegal_char
        assert tokens[-1].index == 4

    def test_lexing_continues_after_illegal_character(self):
        """Test the lexer resumes after an illegal character."""
        assert self._tokenize_to_types("1p") == ["ERROR", "ID"]
        assert self._tokenize_to_types("/* a */ */") == ["ERROR", "ERROR"]

    def test_token_offsets(self):
        """Test tokens carry their character offset into the input."""
        tokens = list(self.lexer.tokenize("(p ∧ qq)"))
        assert [t.index for t in tokens] == [0, 1, 3, 5, 7]

    def test_line_numbers_across_newlines_and_comments(self):
        """Test line tracking counts newlines inside comments too."""
        tokens = list(self.lexer.tokenize("p\n/*\n*/\nq"))
        assert [t.lineno for t in tokens] == [1, 4]

    UNTERMINATED_CASES = [
        ("/*", 0),
        ("p /* never closed", 2),
        ("p ∧ /* closed */ q /* open", 19),
        ("p /* ends with star *", 2),
    ]

    @pytest.mark.parametrize("input_text, offset", UNTERMINATED_CASES)
    def test_unterminated_comment(self, input_text, offset):
        """Test an unclosed block comment is reported where it opens.

        Args:
            input_text: Text containing an unclosed comment
            offset: Character offset of the opening '/*'
        """
        with pytest.raises(UnterminatedComment) as exc_info:
            self._tokenize_to_types(input_text)

        assert exc_info.value.position.offset == offset
