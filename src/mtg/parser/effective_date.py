from __future__ import annotations

import re
from datetime import datetime, timezone

from src.mtg.config import DEFAULT_CONFIG, ParserConfig
from src.mtg.parser.sections import split_lines


def parse_date_phrase(phrase: str, config: ParserConfig = DEFAULT_CONFIG) -> int | None:
    """Convert e.g. "November 8, 2024" to epoch milliseconds at midnight UTC."""
    try:
        parsed = datetime.strptime(phrase.strip(), config.effective_date_format)
    except ValueError:
        return None
    return int(parsed.replace(tzinfo=timezone.utc).timestamp() * 1000)


def extract_effective_date(document: str | list[str], config: ParserConfig = DEFAULT_CONFIG) -> int | None:
    """
    Find "These rules are effective as of <date>." and return the date as epoch milliseconds.

    The sentence sits on the third line of the published file, but every line
    is scanned so that front matter changes do not break the lookup. The first
    sentence carrying a parseable date wins; None when there is none.
    """
    lines = split_lines(document, config) if isinstance(document, str) else document
    pattern = re.compile(config.effective_date_pattern)

    for line in lines:
        match = pattern.search(line)
        if not match:
            continue
        effective_date = parse_date_phrase(match.group(1), config)
        if effective_date is not None:
            return effective_date
    return None
