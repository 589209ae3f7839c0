from __future__ import annotations

from src.mtg.errors import OrphanLineError
from src.mtg.models.rules import GlossaryTerm

CLOSING_QUOTE = "”"
RULE_REFERENCE = "See rule"


def is_term_line(line: str) -> bool:
    """A glossary term never ends a sentence or quotation and never cites a rule."""
    return (
        not line.endswith(".")
        and not line.endswith(CLOSING_QUOTE)
        and RULE_REFERENCE not in line
    )


def parse_glossary(lines: list[str]) -> list[GlossaryTerm]:
    """Group glossary lines into terms, each followed by its definition paragraphs."""
    terms: list[GlossaryTerm] = []
    current: GlossaryTerm | None = None

    for line in lines:
        clean_line = line.strip()
        if not clean_line:
            continue

        if is_term_line(clean_line):
            terms.append(GlossaryTerm(term=clean_line))
            current = next(term for term in terms if term.term == clean_line)
        elif current is None:
            raise OrphanLineError(clean_line, "glossary term")
        else:
            current.meanings.append(clean_line)

    return terms
