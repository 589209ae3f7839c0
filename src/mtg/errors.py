"""
Errors raised while turning the raw rules text into structured data.

- BoundaryNotFoundError: an anchor line delimiting a section is missing
- OrphanLineError: a line needs a parent that has not been seen yet
- EffectiveDateNotFoundError: the "effective as of" sentence is missing
"""


class RulesParseError(ValueError):
    """Base class for all parsing failures."""


class BoundaryNotFoundError(RulesParseError):

    def __init__(self, anchor: str, section: str):
        self.anchor = anchor
        self.section = section
        super().__init__(f"Anchor line '{anchor}' not found; cannot locate the {section} section.")


class OrphanLineError(RulesParseError):

    def __init__(self, line: str, expected_parent: str):
        self.line = line
        self.expected_parent = expected_parent
        super().__init__(f"Line '{line}' appears before any {expected_parent} it could belong to.")


class EffectiveDateNotFoundError(RulesParseError):

    def __init__(self):
        super().__init__("Could not find the 'These rules are effective as of ...' sentence.")
