"""
Pytest configuration and shared fixtures.
"""
import pytest

DOCUMENT_LINES = [
    "Magic: The Gathering Comprehensive Rules",
    "",
    "These rules are effective as of November 8, 2024.",
    "",
    "Introduction",
    "",
    "Contents",
    "",
    "1. Game Concepts",
    "100. General",
    "101. The Magic Golden Rules",
    "2. Parts of a Card",
    "200. General",
    "Glossary",
    "Credits",
    "",
    "1. Game Concepts",
    "",
    "100. General",
    "",
    "100.1. These Magic rules apply to any Magic game with two or more players.",
    "",
    "100.1a A two-player game is a game that begins with only two players.",
    "",
    "100.1b A multiplayer game is a game that begins with more than two players.",
    "",
    "100.2. To play, each player needs their own deck of traditional Magic cards.",
    "",
    "101. The Magic Golden Rules",
    "",
    "101.1. Whenever a card's text directly contradicts these rules, the card takes precedence.",
    "",
    "2. Parts of a Card",
    "",
    "200. General",
    "",
    "200.1. The parts of a card are name, mana cost, illustration, and so on.",
    "",
    "Glossary",
    "",
    "Abandon",
    "To turn a face-up ongoing scheme card face down. See rule 701.31.",
    "",
    "Ability",
    "1. Text on an object that explains what that object does or can do.",
    "2. An activated or triggered ability on the stack. This kind of ability is an object.",
    "See rule 113, “Abilities,” and section 6, “Spells, Abilities, and Effects.”",
    "",
    "Active Player",
    "The player whose turn it is. See rule 102.1.",
    "",
    "Credits",
    "",
    "Magic: The Gathering Original Game Design: Richard Garfield",
]

EFFECTIVE_DATE_MS = 1731024000000  # 2024-11-08T00:00:00Z


@pytest.fixture
def document_lines() -> list[str]:
    return list(DOCUMENT_LINES)


@pytest.fixture
def rules_text() -> str:
    """The sample document the way it is downloaded: CRLF line endings and stray NULs."""
    return "\r\n".join(DOCUMENT_LINES).replace("Introduction", "Intro\u0000duction")


@pytest.fixture
def effective_date_ms() -> int:
    return EFFECTIVE_DATE_MS
