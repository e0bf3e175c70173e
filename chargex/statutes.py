"""
Statute classification for charge entries.

Each entry is tested against an ordered rule table; the first matching rule
assigns the statute and later rules are not consulted for that entry. Entries
that match no rule are left unannotated. Some rules look at the sibling
entries of the charge list (an evasion charge next to a reckless driving
charge becomes evasion with disregard for safety).
"""

import re
from typing import Callable, List, Optional, Sequence, Tuple

from chargex import patterns as p
from chargex.log import get_logger
from chargex.model import ChargeEntry, CodeGroup, Statute, StatuteRule

logger = get_logger(__name__)

Predicate = Callable[[str, Sequence[str]], bool]
Resolver = Callable[[str, Sequence[str]], Statute]

# Same heuristic as the segmenter, rechecked in case entries were not segmented
UNSPLIT_LIST_REGEX = re.compile(r", |\band\b", re.IGNORECASE | re.ASCII)
HIT_AND_RUN_PHRASE_REGEX = re.compile(r"hit\s+and\s+run", re.IGNORECASE)


def matches(pattern: re.Pattern) -> Predicate:
    """
    Build a predicate testing the entry itself against a pattern.
    """
    return lambda charge, siblings: bool(pattern.search(charge))


def fixed(section: str, code_group: CodeGroup = CodeGroup.PC) -> Resolver:
    """
    Build a resolver that always returns the same statute.
    """
    statute = Statute(section, code_group)
    return lambda charge, siblings: statute


def officer_target(on_officer: str, otherwise: str, code_group: CodeGroup = CodeGroup.PC) -> Resolver:
    """
    Build a resolver choosing between the officer-target and the civilian statute.
    """
    def resolve(charge: str, siblings: Sequence[str]) -> Statute:
        if p.LEO_TARGET_REGEX.search(charge):
            return Statute(on_officer, code_group)
        return Statute(otherwise, code_group)

    return resolve


def resolve_assault(charge: str, siblings: Sequence[str]) -> Statute:
    """
    Assault; the weapon used and an officer victim select the subdivision.
    """
    on_officer = bool(p.LEO_TARGET_REGEX.search(charge))
    if p.DEADLY_WEAPON_REGEX.search(charge):
        if p.NOT_A_FIREARM_REGEX.search(charge):
            return Statute("245(C)" if on_officer else "245(A)(1)", CodeGroup.PC)
        return Statute("245(D)" if on_officer else "245(B)", CodeGroup.PC)
    return Statute("240/241(C)" if on_officer else "240", CodeGroup.PC)


def resolve_evasion(charge: str, siblings: Sequence[str]) -> Statute:
    """
    Evasion; reckless driving in this or any sibling charge makes it 2800.2(A) VC.
    """
    if p.RECKLESS_DRIVING_REGEX.search(charge) or p.FELONY_REGEX.search(charge):
        return Statute("2800.2(A)", CodeGroup.VC)
    if any(p.RECKLESS_DRIVING_REGEX.search(sibling) for sibling in siblings):
        return Statute("2800.2(A)", CodeGroup.VC)
    return Statute("2800", CodeGroup.VC)


def resolve_robbery(charge: str, siblings: Sequence[str]) -> Statute:
    if (
        p.MULTIPLE_ROBBERIES_REGEX.search(charge)
        or p.BANK_OR_ATM_REGEX.search(charge)
        or p.ROBBERY_COUNT_REGEX.search(charge)
    ):
        return Statute("487", CodeGroup.PC)
    return Statute("211", CodeGroup.PC)


def resolve_shooting(charge: str, siblings: Sequence[str]) -> Statute:
    if p.OCCUPIED_REGEX.search(charge) or p.LEO_TARGET_REGEX.search(charge):
        return Statute("246", CodeGroup.PC)
    return Statute("247(B)", CodeGroup.PC)


def is_false_information(charge: str, siblings: Sequence[str]) -> bool:
    return bool(p.FALSE_INFO_IDENTITY_REGEX.search(charge) or p.FALSE_INFO_TRAFFIC_REGEX.search(charge))


def resolve_false_information(charge: str, siblings: Sequence[str]) -> Statute:
    # Only false traffic documents given during a stop fall under the vehicle code
    if p.TRAFFIC_STOP_REGEX.search(charge) and p.FALSE_INFO_TRAFFIC_REGEX.search(charge):
        return Statute("31", CodeGroup.VC)
    return Statute("148.9", CodeGroup.PC)


def resolve_firearm_in_public(charge: str, siblings: Sequence[str]) -> Statute:
    if p.CONCEALED_REGEX.search(charge) and not p.LOADED_REGEX.search(charge):
        return Statute("25400(A)", CodeGroup.PC)
    return Statute("25850(A)", CodeGroup.PC)


# Order is the tie-break policy: first matching rule wins.
STATUTE_RULES: Tuple[StatuteRule, ...] = (
    StatuteRule("assault", matches(p.ASSAULT_REGEX), resolve_assault),
    StatuteRule("battery", matches(p.BATTERY_REGEX), officer_target("243(B)", "242")),
    StatuteRule("evasion", matches(p.EVASION_REGEX), resolve_evasion),
    StatuteRule("resisting", matches(p.RESISTING_REGEX), fixed("69(A)/148(A)")),
    StatuteRule("reckless_driving", matches(p.RECKLESS_DRIVING_REGEX), fixed("23103", CodeGroup.VC)),
    StatuteRule("brandishing", matches(p.BRANDISHING_REGEX), officer_target("417(C)", "417(A)(1)")),
    StatuteRule("threatening", matches(p.THREATENING_REGEX), officer_target("71", "422(A)")),
    StatuteRule("accessory", matches(p.ACCESSORY_REGEX), fixed("32")),
    StatuteRule("arson", matches(p.ARSON_REGEX), fixed("451")),
    StatuteRule("bribery", matches(p.BRIBERY_REGEX), fixed("67")),
    StatuteRule("robbery", matches(p.ANY_ROBBERY_REGEX), resolve_robbery),
    StatuteRule("grand_theft", matches(p.GRAND_THEFT_REGEX), fixed("487")),
    StatuteRule("invalid_license", matches(p.INVALID_LICENSE_REGEX), fixed("12500", CodeGroup.VC)),
    StatuteRule("burglary_tools", matches(p.BURGLARY_TOOLS_REGEX), fixed("466")),
    StatuteRule("burglary", matches(p.BURGLARY_REGEX), fixed("459/460(A)")),
    StatuteRule("illegal_weapon", matches(p.ILLEGAL_WEAPON_REGEX), fixed("12020")),
    StatuteRule(
        "attempted_murder", matches(p.ATTEMPTED_MURDER_REGEX), officer_target("664(E)/187(A)", "664/187(A)")
    ),
    StatuteRule("shooting_at_target", matches(p.SHOOTING_AT_TARGET_REGEX), resolve_shooting),
    StatuteRule("murder", matches(p.MURDER_REGEX), fixed("187(A)")),
    StatuteRule("kidnapping", matches(p.KIDNAPPING_REGEX), fixed("209")),
    StatuteRule("false_imprisonment", matches(p.FALSE_IMPRISONMENT_REGEX), fixed("210.5")),
    StatuteRule("impersonation", matches(p.IMPERSONATION_REGEX), officer_target("538(D)", "529(A)")),
    StatuteRule(
        "controlled_substances", matches(p.CONTROLLED_SUBSTANCES_REGEX), fixed("11350(A)", CodeGroup.HS)
    ),
    StatuteRule("hit_and_run", matches(p.HIT_AND_RUN_REGEX), fixed("20001/20002", CodeGroup.VC)),
    StatuteRule("vehicle_tampering", matches(p.TAMPERING_REGEX), fixed("10852", CodeGroup.VC)),
    StatuteRule("vandalism", matches(p.VANDALISM_REGEX), fixed("594")),
    StatuteRule("false_information", is_false_information, resolve_false_information),
    StatuteRule("trespassing", matches(p.TRESPASSING_REGEX), fixed("602")),
    StatuteRule("firearm_in_public", matches(p.FIREARM_IN_PUBLIC_REGEX), resolve_firearm_in_public),
)


def find_statute(
    charge: str, siblings: Sequence[str], rules: Sequence[StatuteRule] = STATUTE_RULES
) -> Optional[Statute]:
    """
    Find the statute of a single charge.

    Args:
        charge: Charge entry text
        siblings: All entries of the charge list (including this one)
        rules: Rule table to evaluate, in priority order

    Returns:
        The statute assigned by the first matching rule, or None
    """
    for rule in rules:
        if rule.test(charge, siblings):
            logger.debug(f"Charge {charge!r} matched rule {rule.name}")
            return rule.resolve(charge, siblings)
    return None


def is_unsplit_charge_list(charges: Sequence[str]) -> bool:
    """
    Check if the input is a single entry that still holds several charges.
    """
    return (
        len(charges) == 1
        and bool(UNSPLIT_LIST_REGEX.search(charges[0]))
        and not HIT_AND_RUN_PHRASE_REGEX.search(charges[0])
    )


def classify(charges: Sequence[str]) -> Tuple[ChargeEntry, ...]:
    """
    Classify a list of charge entries.

    Args:
        charges: Charge entries, normally the output of list_charges

    Returns:
        A new tuple of ChargeEntry in the same order
    """
    siblings = tuple(charges)
    if is_unsplit_charge_list(siblings):
        logger.debug("Skipping classification of an unsplit charge list")
        return tuple(ChargeEntry(index, charge) for index, charge in enumerate(siblings, 1))

    return tuple(
        ChargeEntry(index, charge, find_statute(charge, siblings))
        for index, charge in enumerate(siblings, 1)
    )


def add_statutes(charges: Sequence[str]) -> List[str]:
    """
    Append a statute line to every charge that matches a classification rule.

    The statute line has the format "\\n  - Statute: § {section} {code group}",
    for example:

        1. Evading a Peace Officer: Disregarding Safety
          - Statute: § 2800.2(A) VC

    Args:
        charges: Charge entries

    Returns:
        The charge entries with statutes added
    """
    return [entry.render() for entry in classify(charges)]
