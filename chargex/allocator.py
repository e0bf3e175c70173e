"""
Random citation and booking number generation.
"""

import random
import re
from functools import lru_cache
from typing import Iterable, Optional, Tuple, Union

from chargex.log import get_logger
from chargex.model import AllocatorExhausted

logger = get_logger(__name__)

CITATION_NUMBER_LENGTH = 5
BOOKING_NUMBER_LENGTH = 4
DEFAULT_MAX_ATTEMPTS = 10000

Charset = Union[str, re.Pattern]


def _compile_charset(charset: Charset) -> re.Pattern:
    if isinstance(charset, re.Pattern):
        return charset
    return re.compile(charset, re.ASCII)


@lru_cache(maxsize=None)
def _characters_matching(pattern: re.Pattern) -> Tuple[str, ...]:
    return tuple(char for char in map(chr, range(256)) if pattern.search(char))


def characters_from_set(charset: Charset) -> Tuple[str, ...]:
    """
    Get the characters (code points 0-255) matching a character set pattern.

    Args:
        charset: Pattern matching a single allowed character, e.g. r"\\d" or r"[A-Z]"

    Returns:
        The allowed characters, in code point order
    """
    return _characters_matching(_compile_charset(charset))


def random_string(length: int = 10, charset: Charset = r"\w", rng: Optional[random.Random] = None) -> str:
    """
    Generate a random string from a character set.

    Args:
        length: Length of the string; zero or negative gives ""
        charset: Pattern matching the allowed characters
        rng: Random number generator to use (module-level generator by default)

    Returns:
        The generated string
    """
    characters = characters_from_set(charset)
    if length <= 0 or not characters:
        return ""
    chooser = rng or random
    return "".join(chooser.choice(characters) for _ in range(length))


def generate_unique_number(
    length: int,
    charset: Charset,
    excluded: Iterable[str],
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Generate a random value that is not in the excluded set.

    Args:
        length: Length of the value (5 for citations, 4 for bookings)
        charset: Pattern matching the allowed characters
        excluded: Values already used in the current scope (guild)
        max_attempts: Number of draws before giving up
        rng: Random number generator to use

    Returns:
        An unused value

    Raises:
        AllocatorExhausted: If every value is taken or no free value was drawn in time
    """
    characters = characters_from_set(charset)
    taken = set(excluded)
    capacity = len(characters) ** max(length, 0)
    in_space = sum(
        1 for value in taken if len(value) == max(length, 0) and all(c in characters for c in value)
    )
    if in_space >= capacity:
        raise AllocatorExhausted(
            f"All {capacity} values of length {length} are already in use"
        )

    for attempt in range(1, max_attempts + 1):
        value = random_string(length, charset, rng)
        if value not in taken:
            logger.debug(f"Generated unused value after {attempt} attempt(s)")
            return value

    raise AllocatorExhausted(
        f"No unused value of length {length} found after {max_attempts} attempts "
        f"({in_space} of {capacity} values in use)"
    )
