"""Unit tests for the fallback search term sanitizer."""

import pytest

from ask.domain.repository import term_prefixes
from ask.domain.service import sanitize_term


class TestSanitizeTerm:
    """Tests for sanitize_term."""

    def test_words_become_required_prefix_clauses(self):
        assert sanitize_term("postgres index") == "+postgres* +index*"

    def test_reserved_operators_are_stripped(self):
        """Operators of the boolean syntax never reach the query."""
        result = sanitize_term("data-base (sql) ~fast <slow> @me +x")

        assert result == "+database* +sql* +fast* +slow* +me* +x*"

    @pytest.mark.parametrize("term", ["", "   ", "-+<>@()~", " ( ) "])
    def test_empty_or_operator_only_input_yields_empty_string(self, term):
        assert sanitize_term(term) == ""

    def test_output_contains_no_reserved_symbol_inside_clauses(self):
        # Arrange
        hostile = "a<b>c(d)e~f@g-h"

        # Act
        result = sanitize_term(hostile)

        # Assert
        for clause in result.split():
            assert clause.startswith("+") and clause.endswith("*")
            assert not any(ch in clause[1:-1] for ch in "-+<>@()~")

    def test_whitespace_is_collapsed(self):
        assert sanitize_term("  tabs\tand\nnewlines  ") == "+tabs* +and* +newlines*"

    def test_quotes_and_asterisks_are_kept_inside_the_word(self):
        assert sanitize_term('"quoted"') == '+"quoted"*'


class TestTermPrefixes:
    """Tests for splitting a sanitized term into matchable prefixes."""

    def test_prefixes_are_lowercase_words(self):
        assert term_prefixes("+Postgres* +Index*") == ["postgres", "index"]

    def test_duplicates_are_dropped(self):
        assert term_prefixes("+sql* +SQL* +db*") == ["sql", "db"]

    def test_empty_term_has_no_prefixes(self):
        assert term_prefixes("") == []
