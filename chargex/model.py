"""
Data models for chargex.
"""

from enum import Enum
from typing import Callable, NamedTuple, Optional, Sequence, TypedDict


class CodeGroup(str, Enum):
    """
    California code groups a statute can belong to.
    """

    PC = "PC"  # Penal Code
    VC = "VC"  # Vehicle Code
    HS = "HS"  # Health & Safety Code


class Statute(NamedTuple):
    """
    A statute section (with subdivision when applicable) and its code group.
    """

    section: str  # e.g. "245(A)(1)", "69(A)/148(A)"
    code_group: CodeGroup

    def __str__(self) -> str:
        return f"§ {self.section} {self.code_group.value}"


class ChargeEntry(NamedTuple):
    """
    One charge entry after classification.
    """

    index: int  # 1-based position in the charge list
    text: str  # Entry text as segmented, e.g. "1. Battery"
    statute: Optional[Statute] = None

    def render(self) -> str:
        """
        Return the display text of the entry, with the statute line if any.
        """
        if self.statute is None:
            return self.text
        return f"{self.text}\n  - Statute: {self.statute}"


class StatuteRule(NamedTuple):
    """
    A classification rule. Its priority is its position in the rule table.
    """

    name: str
    test: Callable[[str, Sequence[str]], bool]
    resolve: Callable[[str, Sequence[str]], Statute]


class TrafficViolation(TypedDict, total=False):
    """
    A traffic violation with its vehicle code assigned.
    """

    violation: str  # Format: "{code} CVC - {violation text}"
    correctable: bool  # Whether the violation is a correctable ("fix-it") one
    type: str  # "I" (infraction) or "M" (misdemeanor)


class ChargeXError(Exception):
    """Base class for all chargex exceptions."""

    pass


class ConfigError(ChargeXError):
    """Exception raised for configuration errors."""

    pass


class OutputError(ChargeXError):
    """Exception raised for output errors."""

    pass


class MongoDBError(ChargeXError):
    """Exception raised for MongoDB errors."""

    pass


class AllocatorExhausted(ChargeXError):
    """Exception raised when no unused number could be generated."""

    pass
