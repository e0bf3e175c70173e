"""
Output writers for classified charges.
"""

import csv
import json
import os
from typing import Dict, List, Sequence

from chargex.config import Config
from chargex.log import get_logger
from chargex.model import ChargeEntry, OutputError

logger = get_logger(__name__)

CSV_FIELDS = ["index", "text", "section", "code_group"]


def entry_to_dict(entry: ChargeEntry) -> Dict:
    """
    Convert a charge entry to a flat dictionary.

    Args:
        entry: Classified charge entry

    Returns:
        Dictionary with index, text, section and code_group (None when unmatched)
    """
    return {
        "index": entry.index,
        "text": entry.text,
        "section": entry.statute.section if entry.statute else None,
        "code_group": entry.statute.code_group.value if entry.statute else None,
    }


def write_outputs(entries: Sequence[ChargeEntry], cfg: Config) -> None:
    """
    Write entries to all configured output formats.

    Args:
        entries: Classified charge entries
        cfg: Application configuration
    """
    logger.info(f"Writing {len(entries)} entries to outputs")

    if cfg.output.json_path:
        write_json(entries, cfg.output.json_path, cfg.output.pretty_json)

    if cfg.output.csv_path:
        write_csv(entries, cfg.output.csv_path)


def write_json(entries: Sequence[ChargeEntry], path: str, pretty: bool = True) -> None:
    """
    Write entries to a JSON file.

    Args:
        entries: Classified charge entries
        path: Output file path
        pretty: Whether to pretty-print the JSON
    """
    logger.info(f"Writing JSON to {path}")

    rows: List[Dict] = [entry_to_dict(entry) for entry in entries]
    try:
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            if pretty:
                json.dump(rows, f, indent=2, ensure_ascii=False)
            else:
                json.dump(rows, f, ensure_ascii=False)

        logger.info(f"Wrote {len(rows)} entries to {path}")
    except Exception as e:
        logger.error(f"Error writing JSON to {path}: {e}")
        raise OutputError(f"Error writing JSON to {path}: {e}")


def write_csv(entries: Sequence[ChargeEntry], path: str) -> None:
    """
    Write entries to a CSV file, one row per entry.

    Args:
        entries: Classified charge entries
        path: Output file path
    """
    logger.info(f"Writing CSV to {path}")

    try:
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)

        with open(path, "w", encoding="utf-8", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=CSV_FIELDS)
            writer.writeheader()
            for entry in entries:
                row = entry_to_dict(entry)
                # Empty cells for unmatched entries
                writer.writerow({k: "" if v is None else v for k, v in row.items()})

        logger.info(f"Wrote {len(entries)} rows to {path}")
    except Exception as e:
        logger.error(f"Error writing CSV to {path}: {e}")
        raise OutputError(f"Error writing CSV to {path}: {e}")
