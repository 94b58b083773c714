#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_quote_curling.py
"""Unit tests for straight to curly quote conversion.

Tests cover:
- Character-level conversion rules for single and double quotes
- The per-run whitespace cursor
- Suppression between code block start and end events
- The disabled converter being an identity

"""

import pytest

from book2html.events import END, LEAF, START, Event, text_event
from book2html.transforms.quotes import QuoteConverter, convert_quotes_to_curly


def _code_block(info="rust"):
    return {"type": "block_code", "raw": "", "style": "fenced", "marker": "```", "attrs": {"info": info}}


@pytest.mark.unit
class TestConvertQuotesToCurly:
    """Tests for convert_quotes_to_curly."""

    def test_single_quotes(self):
        """Test single quotes open after whitespace and close otherwise."""
        assert convert_quotes_to_curly("'one', 'two'") == "‘one’, ‘two’"

    def test_double_quotes(self):
        """Test double quotes open after whitespace and close otherwise."""
        assert convert_quotes_to_curly('"one", "two"') == "“one”, “two”"

    def test_tab_counts_as_whitespace(self):
        """Test that a tab before a quote opens it."""
        assert convert_quotes_to_curly("\t'one'") == "\t‘one’"

    def test_newline_counts_as_whitespace(self):
        """Test that a newline before a quote opens it."""
        assert convert_quotes_to_curly("a\n\"b\"") == "a\n“b”"

    def test_apostrophe_inside_word_closes(self):
        """Test contractions use the closing glyph."""
        assert convert_quotes_to_curly("it's") == "it’s"

    def test_run_start_counts_as_whitespace(self):
        """Test the cursor starts as if preceded by whitespace."""
        assert convert_quotes_to_curly("'") == "‘"
        assert convert_quotes_to_curly("\"s") == "“s"

    def test_text_without_quotes_is_unchanged(self):
        """Test text with no quotes passes through."""
        text = "No quotes here, just `ticks` and (parens)."
        assert convert_quotes_to_curly(text) == text

    def test_empty_text(self):
        """Test that an empty run stays empty."""
        assert convert_quotes_to_curly("") == ""


@pytest.mark.unit
class TestQuoteConverter:
    """Tests for the QuoteConverter event stage."""

    def test_text_outside_code_is_converted(self):
        """Test text events are curled when enabled."""
        converter = QuoteConverter(enabled=True)
        event = converter.convert(text_event("'one'"))
        assert event.token["raw"] == "‘one’"

    def test_text_inside_code_block_is_left_alone(self):
        """Test conversion is suspended between code block start and end."""
        converter = QuoteConverter(enabled=True)
        block = _code_block()
        events = [
            text_event("'before'"),
            Event(START, block),
            text_event("'inside'"),
            Event(END, block),
            text_event("'after'"),
        ]
        raws = [converter.convert(event).token.get("raw") for event in events]
        assert raws[0] == "‘before’"
        assert raws[2] == "'inside'"
        assert raws[4] == "‘after’"

    def test_each_run_restarts_the_cursor(self):
        """Test that whitespace state does not carry across text runs."""
        converter = QuoteConverter(enabled=True)
        first = converter.convert(text_event("word"))
        second = converter.convert(text_event("'s"))
        assert first.token["raw"] == "word"
        assert second.token["raw"] == "‘s"

    def test_disabled_converter_is_identity(self):
        """Test a disabled converter returns the very same events."""
        converter = QuoteConverter(enabled=False)
        event = text_event("'one'")
        assert converter.convert(event) is event

    def test_leaf_events_are_never_converted(self):
        """Test inline code spans, which are leaf events, keep straight quotes."""
        converter = QuoteConverter(enabled=True)
        event = Event(LEAF, {"type": "codespan", "raw": "'three'"})
        assert converter.convert(event) is event

    def test_input_event_is_not_mutated(self):
        """Test conversion builds a new token instead of editing the old one."""
        converter = QuoteConverter(enabled=True)
        event = text_event("'one'")
        converter.convert(event)
        assert event.token["raw"] == "'one'"
