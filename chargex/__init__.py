"""
chargex - Charge formatting and statute classification.

Formats free-text arrest charges into a numbered list annotated with
California statutes, and generates unused citation and booking numbers.
"""

__version__ = "0.1.0"

from chargex.model import ChargeEntry, CodeGroup, Statute, TrafficViolation
from chargex.config import Config, load_config
from chargex.normalizer import title_case
from chargex.segmenter import list_charges
from chargex.statutes import add_statutes, classify
from chargex.formatter import format_charges, join_entries
from chargex.violations import format_cit_violations
from chargex.allocator import generate_unique_number, random_string
from chargex.writers import write_csv, write_json, write_outputs
from chargex.db.mongo import allocate_booking_number, allocate_citation_number

__all__ = [
    "ChargeEntry",
    "CodeGroup",
    "Statute",
    "TrafficViolation",
    "Config",
    "load_config",
    "title_case",
    "list_charges",
    "add_statutes",
    "classify",
    "format_charges",
    "join_entries",
    "format_cit_violations",
    "generate_unique_number",
    "random_string",
    "write_csv",
    "write_json",
    "write_outputs",
    "allocate_citation_number",
    "allocate_booking_number",
]
