"""
Text normalization for charge input: whitespace collapsing and title casing.
"""

import re
from typing import Dict, Tuple

# Words kept lowercase in strict title case, unless they open the text
CONNECTOR_WORDS: Tuple[str, ...] = (
    "a", "an", "or", "in", "on", "of", "up", "at", "by", "to", "as", "so",
    "and", "the", "but", "for", "not", "yet", "out", "nor", "from", "with",
    "atop", "over", "down", "into", "near", "plus", "past", "under", "until",
)

# Acronyms always rendered uppercase in strict title case
ACRONYMS: Tuple[str, ...] = (
    "ID", "PO", "LEO", "ADW", "ATM", "LAPD", "LASD", "FBI", "DEA", "LC",
)

# A word token runs up to the next whitespace or hyphen, with its trailing spaces
WORD_TOKEN_REGEX = re.compile(r"\w+[^\s-]* *", re.ASCII)
# Multiplier annotations such as "x3" in "Robbery x3"
MULTIPLIER_REGEX = re.compile(r"\bx\d+\b", re.IGNORECASE | re.ASCII)
INLINE_WHITESPACE_REGEX = re.compile(r"[^\S\n\r]+")

_CONNECTOR_PATTERNS: Dict[str, re.Pattern] = {
    word: re.compile(rf"\b{word}\b", re.IGNORECASE | re.ASCII) for word in CONNECTOR_WORDS
}
_ACRONYM_PATTERNS: Dict[str, re.Pattern] = {
    word: re.compile(rf"\b{word}\b", re.IGNORECASE | re.ASCII) for word in ACRONYMS
}


def upper_first(text: str, lower_rest: bool = True) -> str:
    """
    Uppercase the first character of a string and, by default, lowercase the rest.

    Args:
        text: String to process
        lower_rest: Whether to lowercase everything after the first character

    Returns:
        The processed string ("1. ITEM" -> "1. item", "heLLo" -> "Hello")
    """
    if not text:
        return text
    rest = text[1:].lower() if lower_rest else text[1:]
    return text[0].upper() + rest


def collapse_whitespace(text: str) -> str:
    """
    Collapse runs of non-newline whitespace into a single space.
    """
    return INLINE_WHITESPACE_REGEX.sub(" ", text)


def title_case(text: str, strict: bool = True) -> str:
    """
    Convert a string to title case.

    Every word token is capitalized and the rest of it lowercased, except
    multiplier tokens like "x3" which are forced lowercase. In strict mode,
    connector words are then lowered (unless they are the first token of the
    text) and known acronyms are uppercased.

    Args:
        text: String to convert
        strict: Whether to apply the connector and acronym lists

    Returns:
        The title-cased string

    Example:
        >>> title_case("the officer and the po were threatened")
        'The Officer and the PO Were Threatened'
    """
    if not text:
        return ""

    def capitalize_token(match: re.Match) -> str:
        token = match.group(0)
        if MULTIPLIER_REGEX.search(token):
            return token.lower()
        return upper_first(token)

    modified = WORD_TOKEN_REGEX.sub(capitalize_token, text)
    if not strict:
        return modified

    first_token = WORD_TOKEN_REGEX.search(modified)
    first_start = first_token.start() if first_token else -1

    for word, pattern in _CONNECTOR_PATTERNS.items():
        modified = pattern.sub(
            lambda m, word=word: m.group(0) if m.start() == first_start else word,
            modified,
        )

    for word, pattern in _ACRONYM_PATTERNS.items():
        modified = pattern.sub(word, modified)

    return modified
