from .effective_date import (
    extract_effective_date,
    parse_date_phrase,
)
from .glossary import (
    is_term_line,
    parse_glossary,
)
from .hierarchy import parse_rules
from .sections import (
    extract_glossary_section,
    extract_rules_section,
    split_lines,
)

__all__ = [
    "extract_effective_date",
    "parse_date_phrase",
    "is_term_line",
    "parse_glossary",
    "parse_rules",
    "extract_glossary_section",
    "extract_rules_section",
    "split_lines",
]
