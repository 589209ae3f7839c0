from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ParserConfig(BaseModel):
    """Anchors and patterns of the published Comprehensive Rules text."""

    model_config = ConfigDict(frozen=True)

    # The .txt download uses bare carriage returns between lines
    line_separator: str = "\r"
    credits_marker: str = "Credits"
    glossary_marker: str = "Glossary"
    rules_start_offset: int = 2
    effective_date_pattern: str = r"These rules are effective as of (.+)\."
    effective_date_format: str = "%B %d, %Y"


DEFAULT_CONFIG = ParserConfig()
