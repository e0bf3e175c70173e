"""
Charge list segmentation.

Splits free-form charges text into an ordered list of charge entries and
renumbers them. A single line such as "Speeding, Reckless Driving" is treated
as a list of charges, while "Hit and Run" stays a single charge.
"""

import re
from typing import List, Union

from chargex.log import get_logger
from chargex.normalizer import collapse_whitespace

logger = get_logger(__name__)

ENTRY_REGEX = re.compile(r"[^\n\r]+")
# ", " not followed by "and", or an "and " word not preceded by "hit "
LIST_SEPARATOR_REGEX = re.compile(
    r", *(?! *and )|(?:, *|(?<!hit)(?<!hit )\b)and ",
    re.IGNORECASE | re.ASCII,
)
HIT_AND_RUN_REGEX = re.compile(r"hit and run", re.IGNORECASE)
# Annotation lines written by a previous classification round
STATUTE_LINE_REGEX = re.compile(r"^\s*[-+=#*] Statute", re.IGNORECASE)
# Leading enumeration such as "1.", "10)", "*", "-", "#2:"
ENUMERATION_REGEX = re.compile(r"^(?:\d{1,4}\W|\*|-|#\d{1,4}:?)?\s?(.+)$", re.ASCII)


def is_inline_charge_list(entry: str) -> bool:
    """
    Check if a single entry looks like several charges written on one line.

    Args:
        entry: Entry to check

    Returns:
        True if the entry contains a list separator and is not a hit and run charge
    """
    entry = entry.strip()
    return bool(LIST_SEPARATOR_REGEX.search(entry)) and not HIT_AND_RUN_REGEX.search(entry)


def split_inline_charges(entry: str) -> List[str]:
    """
    Split a one-line list of charges on its separators.
    """
    return [part for part in LIST_SEPARATOR_REGEX.split(entry.strip()) if part.strip()]


def strip_enumeration(entry: str) -> str:
    """
    Remove a leading enumeration marker from an entry.

    Args:
        entry: Entry text

    Returns:
        The entry without its marker ("4. Evading" -> "Evading", "#2: Arson" -> "Arson")
    """
    entry = entry.strip()
    match = ENUMERATION_REGEX.match(entry)
    return match.group(1) if match else entry


def list_charges(
    text: str, ordered: bool = True, as_list: bool = True
) -> Union[List[str], str]:
    """
    Format charges text into a (numbered) list of charges.

    Args:
        text: Raw charges text, one charge per line or a single comma separated line
        ordered: Whether to number the charges ("1. ...")
        as_list: Whether to return a list of entries or a newline-joined string

    Returns:
        The list of charges, or the joined string when as_list is False
    """
    charges = [
        line for line in ENTRY_REGEX.findall(collapse_whitespace(text.strip())) if line.strip()
    ]
    if not charges:
        return [] if as_list else ""

    if len(charges) == 1 and is_inline_charge_list(charges[0]):
        charges = split_inline_charges(charges[0])
        logger.debug(f"Split single-line charges into {len(charges)} entries")

    charges = [charge for charge in charges if not STATUTE_LINE_REGEX.match(charge)]

    formatted = []
    for index, charge in enumerate(charges, 1):
        stripped = strip_enumeration(charge)
        formatted.append(f"{index}. {stripped}" if ordered else stripped)

    return formatted if as_list else "\n".join(formatted)
