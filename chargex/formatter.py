"""
Charge formatting entry points: normalize, segment, classify and assemble.
"""

from typing import List, Sequence, Tuple

from chargex.model import ChargeEntry
from chargex.normalizer import title_case
from chargex.segmenter import list_charges
from chargex.statutes import classify


def join_entries(entries: Sequence[str]) -> str:
    """
    Join formatted entries into the display string, one entry per line.
    """
    return "\n".join(entries)


def classify_charges(text: str, strict: bool = True, numbered: bool = True) -> Tuple[ChargeEntry, ...]:
    """
    Normalize, segment and classify charges text.

    Args:
        text: Raw charges text as typed by the officer
        strict: Whether to use strict title casing
        numbered: Whether to number the charges

    Returns:
        The classified entries, in input order
    """
    titled = title_case(text, strict)
    listed = list_charges(titled, ordered=numbered, as_list=True)
    return classify(listed)


def format_charges_list(text: str, strict: bool = True, numbered: bool = True) -> List[str]:
    """
    Format charges text into a list of entries with statutes.

    Args:
        text: Raw charges text as typed by the officer
        strict: Whether to use strict title casing
        numbered: Whether to number the charges

    Returns:
        List of formatted entries
    """
    return [entry.render() for entry in classify_charges(text, strict, numbered)]


def format_charges(text: str, strict: bool = True, numbered: bool = True) -> str:
    """
    Format charges text for an arrest report.

    Args:
        text: Raw charges text as typed by the officer
        strict: Whether to use strict title casing
        numbered: Whether to number the charges

    Returns:
        The numbered charges with their statutes, one entry per line

    Example:
        >>> print(format_charges("resisting a peace officer\\nevading a peace officer: disregarding safety"))
        1. Resisting a Peace Officer
          - Statute: § 69(A)/148(A) PC
        2. Evading a Peace Officer: Disregarding Safety
          - Statute: § 2800.2(A) VC
    """
    return join_entries(format_charges_list(text, strict, numbered))
