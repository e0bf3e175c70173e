"""
Tests for statute classification.
"""

import pytest

from chargex.model import ChargeEntry, CodeGroup, Statute
from chargex.statutes import (
    STATUTE_RULES,
    add_statutes,
    classify,
    find_statute,
    is_unsplit_charge_list,
)


def statute_of(charge, siblings=None):
    """Classify a single charge and return its statute."""
    return find_statute(charge, siblings if siblings is not None else [charge])


def test_evasion_with_reckless_sibling():
    """Test evasion next to reckless driving becomes 2800.2(A)."""
    result = add_statutes(["1. Evading a Peace Officer", "2. Reckless Driving"])
    assert result == [
        "1. Evading a Peace Officer\n  - Statute: § 2800.2(A) VC",
        "2. Reckless Driving\n  - Statute: § 23103 VC",
    ]


def test_evasion_alone():
    """Test evasion without reckless driving stays 2800."""
    assert add_statutes(["1. Evading a Peace Officer"]) == [
        "1. Evading a Peace Officer\n  - Statute: § 2800 VC"
    ]


def test_evasion_with_speeding_sibling():
    """Test speeding counts as reckless driving for evasion."""
    entries = classify(["1. Evading a Peace Officer", "2. Speeding"])
    assert entries[0].statute == Statute("2800.2(A)", CodeGroup.VC)
    assert entries[1].statute == Statute("23103", CodeGroup.VC)


def test_felony_evasion():
    """Test felony evasion."""
    assert statute_of("1. Felony Evading") == Statute("2800.2(A)", CodeGroup.VC)


def test_battery():
    """Test battery on an officer and on a civilian."""
    assert add_statutes(["1. Battery on a Police Officer"]) == [
        "1. Battery on a Police Officer\n  - Statute: § 243(B) PC"
    ]
    assert add_statutes(["1. Battery"]) == ["1. Battery\n  - Statute: § 242 PC"]


@pytest.mark.parametrize(
    "charge,section",
    [
        ("1. Assault", "240"),
        ("1. Assault on a Police Officer", "240/241(C)"),
        ("1. Assault with a Deadly Weapon", "245(B)"),
        ("1. Assault with a Deadly Weapon on a Peace Officer", "245(D)"),
        ("1. Assault with a Deadly Weapon Not a Firearm", "245(A)(1)"),
        ("1. Assault with a Deadly Weapon Not a Firearm on a Peace Officer", "245(C)"),
    ],
)
def test_assault(charge, section):
    """Test the assault subdivisions."""
    assert statute_of(charge) == Statute(section, CodeGroup.PC)


@pytest.mark.parametrize(
    "charge,expected",
    [
        ("1. Resisting Arrest", Statute("69(A)/148(A)", CodeGroup.PC)),
        ("1. Bank Robbery", Statute("487", CodeGroup.PC)),
        ("1. Store Robbery", Statute("211", CodeGroup.PC)),
        ("1. Store Robbery x3", Statute("487", CodeGroup.PC)),
        ("1. Murder", Statute("187(A)", CodeGroup.PC)),
        ("1. Attempted Murder", Statute("664/187(A)", CodeGroup.PC)),
        ("1. Attempted Murder of a Peace Officer", Statute("664(E)/187(A)", CodeGroup.PC)),
        ("1. Possession of Controlled Substances", Statute("11350(A)", CodeGroup.HS)),
        ("1. Hit and Run", Statute("20001/20002", CodeGroup.VC)),
        ("1. Giving False ID to an Officer", Statute("148.9", CodeGroup.PC)),
        ("1. Carrying a Concealed Firearm", Statute("25400(A)", CodeGroup.PC)),
        ("1. Carrying a Loaded Firearm", Statute("25850(A)", CodeGroup.PC)),
        ("1. Reckless Driving", Statute("23103", CodeGroup.VC)),
        ("1. Accessory to Murder", Statute("32", CodeGroup.PC)),
        ("1. Arson", Statute("451", CodeGroup.PC)),
        ("1. Bribery", Statute("67", CodeGroup.PC)),
        ("1. Grand Theft", Statute("487", CodeGroup.PC)),
        ("1. Driving Without a License", Statute("12500", CodeGroup.VC)),
        ("1. Possession of Burglary Tools", Statute("466", CodeGroup.PC)),
        ("1. Burglary", Statute("459/460(A)", CodeGroup.PC)),
        ("1. Possession of an Illegal Weapon", Statute("12020", CodeGroup.PC)),
        ("1. Shooting at an Occupied Vehicle", Statute("246", CodeGroup.PC)),
        ("1. Shooting at a Vehicle", Statute("247(B)", CodeGroup.PC)),
        ("1. Kidnapping", Statute("209", CodeGroup.PC)),
        ("1. False Imprisonment", Statute("210.5", CodeGroup.PC)),
        ("1. Damaging a Vehicle", Statute("10852", CodeGroup.VC)),
        ("1. Vandalism", Statute("594", CodeGroup.PC)),
        ("1. Giving Incorrect Registration to an Officer", Statute("148.9", CodeGroup.PC)),
        (
            "1. Giving Incorrect Registration to an Officer during a Traffic Stop",
            Statute("31", CodeGroup.VC),
        ),
        ("1. Trespassing", Statute("602", CodeGroup.PC)),
    ],
)
def test_find_statute(charge, expected):
    """Test statutes of single charges."""
    assert statute_of(charge) == expected


def test_unmatched_charge():
    """Test unmatched charges are left unannotated."""
    assert statute_of("1. Littering") is None
    assert add_statutes(["1. Littering"]) == ["1. Littering"]


@pytest.mark.parametrize(
    "charge,on_officer,otherwise",
    [
        ("Battery", "243(B)", "242"),
        ("Brandishing a Firearm", "417(C)", "417(A)(1)"),
        ("Threatening", "71", "422(A)"),
        ("Attempted Murder", "664(E)/187(A)", "664/187(A)"),
    ],
)
def test_officer_target_branches(charge, on_officer, otherwise):
    """Test rules with an officer-target subdivision."""
    assert statute_of(f"1. {charge} at a Police Officer") == Statute(on_officer, CodeGroup.PC)
    assert statute_of(f"1. {charge} at a Civilian") == Statute(otherwise, CodeGroup.PC)


def test_impersonation_branches():
    """Test impersonating an officer and false personation."""
    assert statute_of("1. Impersonating a Police Officer") == Statute("538(D)", CodeGroup.PC)
    assert statute_of("1. False Personation") == Statute("529(A)", CodeGroup.PC)


@pytest.mark.parametrize(
    "charge,expected",
    [
        # battery before evasion
        ("1. Battery on an Officer during Evasion", Statute("243(B)", CodeGroup.PC)),
        # evasion before resisting
        ("1. Resisting Arrest while Evading", Statute("2800", CodeGroup.VC)),
        # robbery before grand theft
        ("1. Jewelry Store Robbery", Statute("211", CodeGroup.PC)),
        # attempted murder before shooting at a vehicle
        ("1. Shooting at a Police Vehicle", Statute("664(E)/187(A)", CodeGroup.PC)),
        # murder before kidnapping
        ("1. Murder of a Kidnapping Victim", Statute("187(A)", CodeGroup.PC)),
    ],
)
def test_first_matching_rule_wins(charge, expected):
    """Test the earlier rule in the table decides when several rules match."""
    assert statute_of(charge) == expected


def test_non_ascii_word_is_not_a_word_character():
    """Test accented letters do not count as word characters in the patterns."""
    assert statute_of("1. Café Robbery") is None


def test_rule_table_order():
    """Test the rule table starts and ends with the expected rules."""
    names = [rule.name for rule in STATUTE_RULES]
    assert len(names) == 29
    assert names[:5] == ["assault", "battery", "evasion", "resisting", "reckless_driving"]
    assert names[-1] == "firearm_in_public"
    assert len(set(names)) == len(names)


def test_custom_rules():
    """Test find_statute with a custom rule table."""
    assert find_statute("1. Battery", ["1. Battery"], rules=()) is None


def test_classify():
    """Test classify returns entries in order."""
    entries = classify(["1. Battery", "2. Littering"])
    assert entries == (
        ChargeEntry(1, "1. Battery", Statute("242", CodeGroup.PC)),
        ChargeEntry(2, "2. Littering"),
    )


def test_classify_does_not_modify_input():
    """Test the input list is left untouched."""
    charges = ["1. Battery", "2. Arson"]
    add_statutes(charges)
    assert charges == ["1. Battery", "2. Arson"]


def test_unsplit_charge_list_is_not_classified():
    """Test a single entry holding several charges is returned unchanged."""
    assert is_unsplit_charge_list(["1. Speeding, Evading"])
    assert add_statutes(["1. Speeding, Evading"]) == ["1. Speeding, Evading"]
    assert add_statutes(["1. Speeding and Battery"]) == ["1. Speeding and Battery"]


def test_hit_and_run_is_not_an_unsplit_list():
    """Test hit and run is classified even though it contains "and"."""
    assert not is_unsplit_charge_list(["1. Hit and Run"])
    assert not is_unsplit_charge_list(["1. Speeding, Evading", "2. Arson"])


def test_empty():
    """Test empty input."""
    assert add_statutes([]) == []
    assert classify([]) == ()
