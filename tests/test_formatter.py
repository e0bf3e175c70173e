"""
Tests for the charge formatting entry points.
"""

from chargex.formatter import classify_charges, format_charges, format_charges_list, join_entries
from chargex.model import CodeGroup, Statute


def test_format_charges():
    """Test formatting raw charges text."""
    text = "resisting a peace officer\nevading a peace officer: disregarding safety"
    assert format_charges(text) == (
        "1. Resisting a Peace Officer\n"
        "  - Statute: § 69(A)/148(A) PC\n"
        "2. Evading a Peace Officer: Disregarding Safety\n"
        "  - Statute: § 2800.2(A) VC"
    )


def test_format_charges_single_line():
    """Test a comma separated line of charges."""
    assert format_charges("speeding, resisting arrest") == (
        "1. Speeding\n"
        "  - Statute: § 23103 VC\n"
        "2. Resisting Arrest\n"
        "  - Statute: § 69(A)/148(A) PC"
    )


def test_format_charges_idempotent(sample_charges_text):
    """Test formatting the output again adds no second statute line."""
    once = format_charges(sample_charges_text)
    twice = format_charges(once)
    assert twice == once
    assert once.count("- Statute:") == 3


def test_format_charges_empty():
    """Test empty input."""
    assert format_charges("") == ""
    assert format_charges_list("   ") == []


def test_format_charges_list_unnumbered():
    """Test unnumbered output."""
    assert format_charges_list("battery", numbered=False) == ["Battery\n  - Statute: § 242 PC"]


def test_classify_charges(sample_charges_text):
    """Test classification of raw text."""
    entries = classify_charges(sample_charges_text)
    assert [entry.index for entry in entries] == [1, 2, 3, 4]
    assert entries[0].text == "1. Evading a Peace Officer"
    assert entries[0].statute == Statute("2800.2(A)", CodeGroup.VC)
    assert entries[2].statute == Statute("243(B)", CodeGroup.PC)
    assert entries[3].statute is None


def test_join_entries():
    """Test joining entries."""
    assert join_entries(["1. Arson", "2. Battery"]) == "1. Arson\n2. Battery"
    assert join_entries([]) == ""
