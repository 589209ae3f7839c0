"""
Locate the rules body and the glossary body inside the raw rules text.

The published document opens with a table of contents that repeats the
"Glossary" and "Credits" headings, so every anchor is searched for relative
to the previous one rather than from the top of the document.
"""
from __future__ import annotations

from src.mtg.config import DEFAULT_CONFIG, ParserConfig
from src.mtg.errors import BoundaryNotFoundError


def split_lines(raw_text: str, config: ParserConfig = DEFAULT_CONFIG) -> list[str]:
    """Split the raw download into lines, dropping NULs and CRLF leftovers."""
    cleaned = raw_text.replace("\u0000", "")
    return [line.lstrip("\n") for line in cleaned.split(config.line_separator)]


def _find_anchor(lines: list[str], anchor: str, start: int = 0) -> int | None:
    for index in range(start, len(lines)):
        if lines[index].strip() == anchor:
            return index
    return None


def _find_glossary_heading(lines: list[str], config: ParserConfig) -> int | None:
    # First occurrence is the table of contents entry
    in_contents = _find_anchor(lines, config.glossary_marker)
    if in_contents is None:
        return None
    return _find_anchor(lines, config.glossary_marker, in_contents + 1)


def extract_rules_section(lines: list[str], config: ParserConfig = DEFAULT_CONFIG) -> list[str]:
    """
    Return the lines of the numbered rules.

    The body starts two lines past the first "Credits" heading (the last
    table of contents entry) and runs up to the glossary heading, or to the
    end of the document when there is no glossary.
    """
    credits_index = _find_anchor(lines, config.credits_marker)
    if credits_index is None:
        raise BoundaryNotFoundError(config.credits_marker, "rules")

    start = credits_index + config.rules_start_offset
    glossary_index = _find_glossary_heading(lines, config)
    if glossary_index is None or glossary_index < start:
        return lines[start:]
    return lines[start:glossary_index]


def extract_glossary_section(lines: list[str], config: ParserConfig = DEFAULT_CONFIG) -> list[str]:
    """Return the lines between the glossary heading and the following "Credits" line."""
    glossary_index = _find_glossary_heading(lines, config)
    if glossary_index is None:
        raise BoundaryNotFoundError(config.glossary_marker, "glossary")

    credits_index = _find_anchor(lines, config.credits_marker, glossary_index + 1)
    if credits_index is None:
        raise BoundaryNotFoundError(config.credits_marker, "glossary")
    return lines[glossary_index + 1:credits_index]
