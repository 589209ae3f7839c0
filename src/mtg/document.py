"""
Compose the parsed Comprehensive Rules document from the raw text.

Pipeline:
1. split_lines: raw download -> lines
2. extract_rules_section / extract_glossary_section: isolate each body
3. parse_rules / parse_glossary: build the trees
4. extract_effective_date: read the version date

The three extraction paths are independent of each other. A document is only
produced when the effective date is known; anchor and orphan-line errors
propagate to the caller unchanged.
"""
import logging

from src.mtg.config import DEFAULT_CONFIG, ParserConfig
from src.mtg.models.rules import Category, GlossaryTerm, RulesDocument
from src.mtg.parser import (
    extract_effective_date,
    extract_glossary_section,
    extract_rules_section,
    parse_glossary,
    parse_rules,
    split_lines,
)


def get_rules(rules_text: str, config: ParserConfig = DEFAULT_CONFIG) -> list[Category]:
    """Parse the numbered rules out of the raw text."""
    lines = split_lines(rules_text, config)
    return parse_rules(extract_rules_section(lines, config))


def get_glossary(rules_text: str, config: ParserConfig = DEFAULT_CONFIG) -> list[GlossaryTerm]:
    """Parse the glossary out of the raw text."""
    lines = split_lines(rules_text, config)
    return parse_glossary(extract_glossary_section(lines, config))


def build_rules_document(rules_text: str, config: ParserConfig = DEFAULT_CONFIG) -> RulesDocument | None:
    """Return the full document, or None when the effective date cannot be determined."""
    lines = split_lines(rules_text, config)

    rules = parse_rules(extract_rules_section(lines, config))
    glossary = parse_glossary(extract_glossary_section(lines, config))
    effective_date = extract_effective_date(lines, config)

    if effective_date is None:
        logging.warning("No effective date found; discarding %s categories and %s glossary terms",
                        len(rules), len(glossary))
        return None

    logging.info("Parsed %s categories, %s rules and %s glossary terms",
                 len(rules),
                 sum(len(sub.rules) for category in rules for sub in category.subcategories),
                 len(glossary))
    return RulesDocument(rules=rules, glossary=glossary, effective_date=effective_date)
