"""
Unit tests for grouping glossary lines into terms.
"""
import pytest

from src.mtg.errors import OrphanLineError
from src.mtg.parser.glossary import is_term_line, parse_glossary
from src.mtg.parser.sections import extract_glossary_section


class TestIsTermLine:
    """Test term/definition classification."""

    @pytest.mark.parametrize("line", ["Abandon", "Active Player", "Attach"])
    def test_plain_heading_is_term(self, line):
        """Short headings without terminal punctuation are terms."""
        assert is_term_line(line)

    @pytest.mark.parametrize("line", [
        "The player whose turn it is.",
        "See rule 113, “Abilities,” and section 6, “Spells, Abilities, and Effects.”",
        "See rule 701.31",
    ])
    def test_definition_lines(self, line):
        """Sentences, closing quotes and rule references are definitions."""
        assert not is_term_line(line)


class TestParseGlossary:
    """Test building glossary terms."""

    def test_continuation_lines_grouped(self):
        """Lines after a term are its meanings, in order."""
        terms = parse_glossary([
            "Ability",
            "1. Text on an object that explains what that object does or can do.",
            "2. An activated or triggered ability on the stack. See rule 113",
            "See rule 113, “Abilities,” and section 6, “Spells, Abilities, and Effects.”",
        ])
        assert len(terms) == 1
        assert terms[0].term == "Ability"
        assert terms[0].meanings == [
            "1. Text on an object that explains what that object does or can do.",
            "2. An activated or triggered ability on the stack. See rule 113",
            "See rule 113, “Abilities,” and section 6, “Spells, Abilities, and Effects.”",
        ]

    def test_unterminated_lines_join_until_sentence(self):
        """Rule references without a full stop stay with the term until the closing sentence."""
        terms = parse_glossary([
            "Attach",
            "See rule 701.3",
            "See rule 301.5, Equipment",
            "To move an Aura, Equipment, or Fortification onto another object.",
            "Attack",
        ])
        assert [t.term for t in terms] == ["Attach", "Attack"]
        assert terms[0].meanings == [
            "See rule 701.3",
            "See rule 301.5, Equipment",
            "To move an Aura, Equipment, or Fortification onto another object.",
        ]
        assert terms[1].meanings == []

    def test_term_without_definition(self):
        """A term followed directly by another term has no meanings."""
        terms = parse_glossary(["Abandon", "Ability", "Text on an object."])
        assert [t.term for t in terms] == ["Abandon", "Ability"]
        assert terms[0].meanings == []
        assert terms[1].meanings == ["Text on an object."]

    def test_blank_lines_and_whitespace(self):
        """Blank lines are skipped and lines are trimmed."""
        terms = parse_glossary(["", "  Active Player  ", "   ", "\nThe player whose turn it is.  "])
        assert terms[0].term == "Active Player"
        assert terms[0].meanings == ["The player whose turn it is."]

    def test_sample_document(self, document_lines):
        """The sample glossary yields three terms."""
        terms = parse_glossary(extract_glossary_section(document_lines))
        assert [t.term for t in terms] == ["Abandon", "Ability", "Active Player"]
        assert len(terms[1].meanings) == 3

    def test_definition_before_any_term_raises(self):
        """A definition with no term before it is rejected."""
        with pytest.raises(OrphanLineError) as exc_info:
            parse_glossary(["The player whose turn it is."])
        assert exc_info.value.expected_parent == "glossary term"
