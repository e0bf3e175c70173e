"""
MongoDB lookup of citation and booking numbers already in use.
"""

from typing import Optional, Set, Union

import pymongo

from chargex.allocator import generate_unique_number
from chargex.config import Config, MongoDBConfig
from chargex.log import get_logger
from chargex.model import MongoDBError

logger = get_logger(__name__)

CITATION = "citation"
BOOKING = "booking"

# Collection config attribute and number field per kind of record
NUMBER_SOURCES = {
    CITATION: ("citations_collection", "num"),
    BOOKING: ("arrests_collection", "booking_num"),
}


def pad_number(value: Union[int, str, None], length: int) -> Optional[str]:
    """
    Convert a stored number to its zero-padded string form.

    Args:
        value: Stored number (int or numeric string)
        length: Width to pad to

    Returns:
        The padded number, or None if the value is not numeric
    """
    try:
        return f"{int(value):0{length}d}"
    except (TypeError, ValueError):
        return None


def get_used_numbers(guild_id: str, kind: str, cfg: Optional[MongoDBConfig], length: int) -> Set[str]:
    """
    Get the numbers already used by a guild's records.

    Args:
        guild_id: Guild (server) identifier
        kind: "citation" or "booking"
        cfg: MongoDB configuration
        length: Number length, used for zero-padding

    Returns:
        Set of used numbers as zero-padded strings
    """
    if kind not in NUMBER_SOURCES:
        raise ValueError(f"Unknown number kind: {kind}")

    if cfg is None or not cfg.enabled:
        logger.warning("MongoDB integration is disabled in configuration; no numbers excluded")
        return set()

    collection_attr, field = NUMBER_SOURCES[kind]
    collection_name = getattr(cfg, collection_attr)
    logger.info(f"Looking up used {kind} numbers for guild {guild_id} in {collection_name}")

    try:
        with pymongo.MongoClient(cfg.uri) as client:
            collection = client[cfg.database][collection_name]
            values = collection.distinct(field, {"guild": guild_id})
    except Exception as e:
        logger.error(f"Error reading from MongoDB: {e}")
        raise MongoDBError(f"Error reading from MongoDB: {e}")

    used = set()
    for value in values:
        padded = pad_number(value, length)
        if padded is None:
            logger.debug(f"Ignoring non-numeric {field} value {value!r}")
            continue
        used.add(padded)

    logger.debug(f"Found {len(used)} used {kind} numbers")
    return used


def allocate_number(guild_id: str, kind: str, length: int, cfg: Config) -> int:
    """
    Allocate a number that no record of the guild uses yet.

    Args:
        guild_id: Guild (server) identifier
        kind: "citation" or "booking"
        length: Number length
        cfg: Application configuration

    Returns:
        The allocated number
    """
    used = get_used_numbers(guild_id, kind, cfg.mongodb, length)
    value = generate_unique_number(
        length,
        cfg.allocator.charset,
        used,
        max_attempts=cfg.allocator.max_attempts,
    )
    return int(value)


def allocate_citation_number(guild_id: str, cfg: Config) -> int:
    """
    Allocate a traffic citation number for a guild.
    """
    return allocate_number(guild_id, CITATION, cfg.allocator.citation_length, cfg)


def allocate_booking_number(guild_id: str, cfg: Config) -> int:
    """
    Allocate an arrest booking number for a guild.
    """
    return allocate_number(guild_id, BOOKING, cfg.allocator.booking_length, cfg)
