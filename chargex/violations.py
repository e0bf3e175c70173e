"""
Vehicle code assignment for traffic citation violations.
"""

import re
from typing import List, NamedTuple, Optional, Sequence, Union

from chargex import patterns as p
from chargex.log import get_logger
from chargex.model import TrafficViolation
from chargex.normalizer import title_case
from chargex.segmenter import list_charges

logger = get_logger(__name__)


class ViolationRule(NamedTuple):
    """
    A traffic violation rule; its priority is its position in the table.
    """

    pattern: re.Pattern
    code: str  # California Vehicle Code section
    type: str  # "I" (infraction) or "M" (misdemeanor)
    correctable: Optional[bool] = None  # None when the citation leaves it unset


VIOLATION_RULES = (
    ViolationRule(p.SPEEDING_REGEX, "2235[012]", "I", False),
    ViolationRule(p.MIN_SPEED_REGEX, "22400", "I", False),
    ViolationRule(p.RED_SIGNAL_REGEX, "21453", "I", False),
    ViolationRule(p.NO_TURN_SIGNAL_REGEX, "22108", "I"),
    ViolationRule(p.NO_HAZARD_SIGNALS_REGEX, "22109", "I"),
    ViolationRule(p.NO_HEADLIGHTS_REGEX, "24250", "I"),
    ViolationRule(p.SIDEWALK_DRIVING_REGEX, "21663", "I"),
    ViolationRule(p.UNSAFE_PASSING_REGEX, "21750-21759", "I"),
    ViolationRule(p.SPEED_CONTEST_REGEX, "23109", "M"),
    ViolationRule(p.UNSAFE_LANE_CHANGE_REGEX, "22107", "I"),
    ViolationRule(p.ILLEGAL_PARKING_REGEX, "22500", "I", True),
    ViolationRule(p.STOP_SIGN_REGEX, "22450(a)", "I", False),
    ViolationRule(p.TAILGATING_REGEX, "21703", "I", True),
    ViolationRule(p.DEFECTIVE_EQUIPMENT_REGEX, "24002", "I", True),
    ViolationRule(p.JAYWALKING_REGEX, "21955", "I", False),
    ViolationRule(p.UNLICENSED_DRIVER_REGEX, "12500(a)", "I", False),
    ViolationRule(p.FAIL_TO_PRESENT_DL_REGEX, "12951(b)", "M", True),
    ViolationRule(p.SUSPENDED_DL_REGEX, "14601.1(a)", "M", False),
    ViolationRule(p.NO_REGISTRATION_REGEX, "4000(a)", "I", True),
    ViolationRule(p.DUI_REGEX, "23152(a)", "M", False),
    ViolationRule(p.RECKLESS_DRIVING_REGEX, "23103", "M", False),
)


def add_traffic_violation_codes(violations: Sequence[str]) -> List[Union[TrafficViolation, str]]:
    """
    Assign a vehicle code to every recognized traffic violation.

    Args:
        violations: Violation texts

    Returns:
        A TrafficViolation for every recognized violation, the plain text otherwise
    """
    result: List[Union[TrafficViolation, str]] = []
    for violation in violations:
        for rule in VIOLATION_RULES:
            if rule.pattern.search(violation):
                coded: TrafficViolation = {
                    "violation": f"{rule.code} CVC - {violation}",
                    "type": rule.type,
                }
                if rule.correctable is not None:
                    coded["correctable"] = rule.correctable
                result.append(coded)
                break
        else:
            logger.debug(f"No vehicle code found for violation {violation!r}")
            result.append(violation)

    return result


def format_cit_violations(text: str) -> List[Union[TrafficViolation, str]]:
    """
    Format traffic violations text for a traffic citation.

    Args:
        text: Raw violations text

    Returns:
        The listed (unnumbered) violations with their vehicle codes
    """
    listed = list_charges(title_case(text, True), ordered=False, as_list=True)
    return add_traffic_violation_codes(listed)
