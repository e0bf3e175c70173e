"""
Regular expressions used to recognize charges and traffic violations.

All patterns are case-insensitive and compiled once at import time. Word
classes (\\w, \\b, \\d) are ASCII-only: "Café Robbery" has no word before
"Robbery".
"""

import re


def any_of(*patterns: str) -> re.Pattern:
    """
    Compile a case-insensitive, ASCII-only pattern matching any of the given patterns.

    Args:
        patterns: Pattern sources to combine as alternatives

    Returns:
        Compiled pattern
    """
    return re.compile("|".join(patterns), re.IGNORECASE | re.ASCII)


# Officer-target keywords, embedded in several charge patterns
LEO_SOURCE = r"(?:Officer|Peace Officer|\bPolice\b|\bLEO\b|\bPO\b)s?"

# --- Charge families ---
LEO_TARGET_REGEX = any_of(r"Officers?", r"Peace Officers?", r"\bPolice\b", r"\bLEO\b", r"\bPO\b")
BATTERY_REGEX = any_of(r"Batt[ea]ry")
BRIBERY_REGEX = any_of(r"Brib[eau]ry", r"Brib(?:e|ing)")
ASSAULT_REGEX = any_of(r"A[su]{1,3}[alut]{2,4}", r"Stab(?:bing|bed)", r"\bADW(?:\b|[-+:#])")
DEADLY_WEAPON_REGEX = any_of(
    r"Deadly", r"Weapon", r"Firearm", r"(?:Hand )?Gun", r"Pistol", r"Rifle", r"Bat", r"Knife", r"Hammer"
)
NOT_A_FIREARM_REGEX = any_of(r"(?:Not|Other than) (?:a )?(?:Firearm|(?:Hand )?Gun|F/ARM)")
HIT_AND_RUN_REGEX = any_of(r"Hit(?: and | ?& ?)Run")
ANY_ROBBERY_REGEX = any_of(r"(?:\w+) Robber(?:y|ies)", r"Robb(?:ing|ery) (?:of|of an?|an?) \w+")
TAMPERING_REGEX = any_of(r"(?:Damag(?:e|ing)|Tamper(?:ing)) (?:a |an |with )?(?:Car|Vehicle)s?")
VANDALISM_REGEX = any_of(
    r"Graffiti", r"Sabotage", r"Vandalism", r"Vandali[zs](?:ing|ed?|es) \w+", r"Defac(?:e|ing) \w+"
)
# The second alternative matches a literal backslash followed by "w"
THREATENING_REGEX = any_of(r"Threat[ei]n(?:ing)?", r"Threats (?:to|my|for|about) \\w+")
IMPERSONATION_REGEX = any_of(r"Impersonating", r"False Personation")
KIDNAPPING_REGEX = any_of(r"\bKidnapp?(ing)?\b", r"Abduct(?:ion|ing)")
BURGLARY_REGEX = any_of(r"Burglary", r"Breaking into (?:a |an )?(?:House|Residential)")
MURDER_REGEX = any_of(r"\bMurd[eua]r(?:ing)?\b", r"Homicide", r"Killing .+")

EVASION_REGEX = any_of(
    r"(?:Evasion|Evading|Fleeing)",
    r"Vehicle (?:Fleeing|Eluding|Evasion)",
    r"Fail(?:ing|ure|ed)? to (?:Stop|Pull|Pullover)",
    r"(?:Running from|Elud(?:e|ing)|Evade) (?:an |a )?",
)
FELONY_REGEX = any_of(r"Felony")

RESISTING_REGEX = any_of(
    r"Refus(?:ing|ed|e) \w+ Orders",
    r"Resist(?:ing|ed)? (?:an |a )?Arrest",
    r"Obstruct(?:ing|ion)(?: of)? Justice",
    r"Fail(?:ing|ure|ed)? to (?:Comply|Follow)",
    r"Not (?:Listening|Complying) (?:to|with) (?:an |a )?" + LEO_SOURCE,
    r"(?:Resist(?:ing)?|Defy(?:ing)?|Obstruct(?:ing|ion)?|Interfer(?:e|ing)? with) "
    r"(?:an |a |of \w{1,2}? ?|)?(?:" + LEO_SOURCE + r"|Investigation)",
)

ACCESSORY_REGEX = any_of(
    r"(?:Helping|Helping out|Assisting) (?:a |an )?(?:Criminal|Offender|Lawbreaker)",
    r"(?:Accessory|Involved|Conspiracy) (?:after|to|in|with) (?:the |a |an )?"
    r"(?:Fact|Murder|Homicide|Crime|Robbery|Hostage|Assault)",
)

INVALID_LICENSE_REGEX = any_of(
    r"(?:Expired|Suspended|Invalid) (?:Driving )?License",
    r"Driving (?:W/o|Without) (?:a )?(?:Driving )?License",
    r"(?:Unlawful|Illegal) to Drive (?:W/o|Without) (?:a )?(?:Driving |Valid (?:Driving )?)?License",
)

RECKLESS_DRIVING_REGEX = any_of(
    r"Speeding",
    r"Traffic Crimes",
    r"Crashing into \w+",
    r"Endangerment of \w+",
    r"Driving Reckless(?:ly)?",
    r"Dangerous(?:ly)? Driving",
    r"Reckless(?:ly)? (?:Driving|Endangerment)",
    r"(?:Public|Citizen|Resident) End[arng]+erment",
    r"R[au]n(?:ning)? (?:Multiple )?(?:Red)? Lights",
    r"(?:Disregard|Disregarding|Ignor(?:ed?|ing)?|No|W/o|Without) Safety",
)

BRANDISHING_REGEX = any_of(
    r"(?:Brandish(?:ing|e?s)?|Point(?:ing|s)?|Draw(?:ing|s)?) (?:of )?(?:a |an )?"
    r"(?:Gun|Firearm|Weapon|Pistol|Rifle)",
    r"(?:Brandish(?:ing|e?s)?|Point(?:ing|s)?|Draw(?:ing|s)?) (?:or |of )?(?:Exhibit(?:s|ing) )?"
    r"(?:a |an )?(?:\w+ )?(?:Gun|Firearm|Weapon|Pistol|Rifle)",
)

ARSON_REGEX = any_of(
    r"Ars[oe]n",
    r"Incendiarism",
    r"Raising Fire",
    r"Burn(?:ing|ed) \w+",
    r"Fire(?:-| )(?:setting|raising)",
)

MULTIPLE_ROBBERIES_REGEX = any_of(r"Robberies")
BANK_OR_ATM_REGEX = any_of(r"Bank", r"\bATM\b")
ROBBERY_COUNT_REGEX = any_of(r"x[2-9]\d?")

GRAND_THEFT_REGEX = any_of(
    r"Grand Theft",
    r"(?:Jewelry|Bank|Jewelery|jew[elar]ry|House|Residential|\bATM\b) (?:Store )?Robber(?:y|ies)",
    r"Robb(?:ing|ery) (?:of )?(?:a |an |the )?"
    r"(?:Jewelry|Bank|Jewelery|jew[elar]ry|House|Residential|\bATM\b)",
)

BURGLARY_TOOLS_REGEX = any_of(
    r"(?:Possess(?:es|ion|ing)?|Carry(?:es|ing)?) (?:of )?Burglary (?:Tools?|Instruments?)"
)

ILLEGAL_WEAPON_REGEX = any_of(
    r"(?:Unlawful |Illegal |Prohibited )?(?:Possess(?:es|ion|ing)?|Carr(?:y|ies|ying)) (?:of )?"
    r"(?:a |an )?(?:Unlawful|Illegal|Prohibited) (?:Weapon|Gun|Firearm)s?"
)

SHOOTING_AT_TARGET_REGEX = any_of(
    r"Pop(?:ping)? (?:Vehicle(?:s.|s)? |Car(?:s.|s)? )?T[iy]res?",
    r"Discharg(?:e|ing) of (?:a|an)?(?:Firearm|Gun|Weapon)",
    r"Discharg(?:e|ing) (?:a )?(?:Firearm|Gun|Weapon) (?:at|on) (?:a |an )?"
    r"(?:inhabited |Uninhabited |Unoccupied |Occupied )?"
    r"(?:Vehicle?|Car?|Building?|Bank|Store?|Dwelling)s?",
    r"(?:Shoot(?:ing)?|Fir(?:ing|e)) (?:on |at )?(?:a |an )?"
    r"(?:Inhabited |Uninhabited |Unoccupied |Occupied )?"
    r"(?:Police |PO(?:s.|s)? |LEO(?:.?s.|s)? |Officer(?:s.|s)? )?"
    r"(?:Vehicle?|Car?|Building?|Bank|Store?|Dwelling)s?",
)
OCCUPIED_REGEX = any_of(r"Occupied", r"Inhabited")

ATTEMPTED_MURDER_REGEX = any_of(
    r"(?:Trying|Attempt(?:ed|ing)?) (?:" + LEO_SOURCE + r")?(?:to )?(?:Kill|Murder|Homicide)",
    r"(?:Shoot(?:ing)?|Fir(?:ing|e)|Discharg(?:e|ing)) (?:at |on )?(?:a |an )?"
    r"(?:Officer|Peace Officer|Police|Civilian|\bLEO\b|\bPO\b)s?",
)

FALSE_IMPRISONMENT_REGEX = any_of(
    r"Hostage",
    r"Restraint of Liberty",
    r"(?:False|Unlawful) (?:Imprisonment|Confinement)",
    r"(?:Forcing|Coercing) (?:Someone|Somebody|Civilian) (?:to Stay|to Remain)",
    r"(?:Taking|Having) (?:a )?(?:Human(?:being)?|Person|Civilian|Officer|Police Officer|\bPO\b|\bLEO\b) "
    r"(?:as |as a )?(?:Human )?(?:Shield|Hostage)",
)

CONTROLLED_SUBSTANCES_REGEX = any_of(
    r"(?:Drug|Controlled Substance)s? (?:Possess(?:ion|ing)?|Carry(?:ing)?)",
    r"(?:Possess(?:es|ion|ing)?|Carry(?:es|ing)?) (?:of |of a )?(?:Controlled Substance|Drug)s?",
)

# False license/registration/insurance given to an officer. "( ?:False" requires a colon before "False".
FALSE_INFO_TRAFFIC_REGEX = any_of(
    r"(?:Giv(?:e|es|ing) |Show(?:s|ing)? )?(?:a )?( ?:False|Incorrect|Invalid) "
    r"(?:(?:Driving )?License|(?:Car |Vehicle )?Registration|(?:Car |Vehicle )?Insurance)"
    r" to (?:a |an )?" + LEO_SOURCE
)
FALSE_INFO_IDENTITY_REGEX = any_of(
    r"(?:Giv(?:e|es|ing) |Show(?:s|ing)? )?(?:a )?(?:False|Incorrect|Invalid) (?:\bID\b|Identification)",
    r" to (?:a |an )?" + LEO_SOURCE,
)
TRAFFIC_STOP_REGEX = any_of(r"Pulled Over", r"Traffic Stop")

TRESPASSING_REGEX = any_of(
    r"Trespass(?:ing|ed?)?",
    r"(?:Unauthorized Entry|Illegal Entry)",
    r"Refus(?:ing|ed?) to Leave (?:a |an |the )?(?:\w+ )?(?:Property|Building|Store|Shop)",
)

FIREARM_IN_PUBLIC_REGEX = any_of(
    r"(Conceal(?:ed|ing)?|Loaded) (?:Firearm|Weapon|Gun|Pistol|Rifle)",
    r"(?:Possess(?:es|ion|ing)?|Carry(?:es|ing)?) (?:a |of |of a )?(?:Concealed |Loaded )?"
    r"(?:Firearm|Weapon|Gun|Pistol|Rifle)",
)
CONCEALED_REGEX = any_of(r"Conceal(?:ed|ing)?", r"Hidden", r"Covered", r"Invisible")
LOADED_REGEX = any_of(r"Loaded")

# --- Traffic violations ---
DL_SOURCE = r"(?:Driv(?:ing|er|er[’']s) License|License|DL)"
UNSAFE_SOURCE = r"(?:Unsafe|Not? Safe|Dangerous|Reckless|Risky)"
FAILED_TO_USE_SOURCE = r"(?:Not Using|Fail(?:ing|ure|ed) (?:to )Use|Did(?: not|n['’]?t Use))"

DUI_REGEX = any_of(
    r"Driving Under (?:the )?Influ[eai]nce", r"\bDUI\b", r"Dr[uai]nk Driving", r"Driving (?:While )?Dr[uai]nk"
)
JAYWALKING_REGEX = any_of(r"Jaywalking", r"(?:Unlawful|Illegal) Cross")
TAILGATING_REGEX = any_of(r"Tailgating", r"Following Too Closely", r"Unsafe Following")
MIN_SPEED_REGEX = any_of(r"(?:Impeding|Clogging|Obstructing|Blocking|Slowing(?: Down)?) (?:\w+ )Traffic")
SPEED_CONTEST_REGEX = any_of(r"Speed(?:ing)? Conte[xs]t", r"(?:Car|Vehicle|Street|Drag|Illegal|Unlawful) Racing")
SIDEWALK_DRIVING_REGEX = any_of(
    r"(?:Dr[io]v(?:ed?|ing)|Operat(?:ed?|ing)) On (?:\w+ )?(?:Side?walk|Pavement|Footway)"
)
NO_HAZARD_SIGNALS_REGEX = any_of(
    FAILED_TO_USE_SOURCE + r" Hazard (?:Signal|Amber|Light)s?\b",
    r"Stop(?:ped|ping)? Sudd[eu]nly",
)
NO_TURN_SIGNAL_REGEX = any_of(
    FAILED_TO_USE_SOURCE + r" Turn(?:ing)? (?:Signal|Amber|Light)s?\b",
    r"Not Signaling\b",
)
SPEEDING_REGEX = any_of(
    r"Spee*ding",
    r"(?:Unsafe|Dangerous|Reckless|Excessive) Spee*d",
    r"Going Over (?:the )?(?:Speed|Limit)",
)
NO_REGISTRATION_REGEX = any_of(
    r"Driving (?:Without|W/o) (?:\w+ )?Registration",
    r"(?:Not Valid|Invalid|No|Not Having) Registration",
    r"Unregistered (?:Car|Vehicle|Truck|Sedan)",
)
ILLEGAL_PARKING_REGEX = any_of(
    r"\bpark(?:ing|ed)?\s*(?:illegally|unlawfully|improperly|wrongly|unauthorizedly|prohibitedly|"
    r"restrictedly|illegal|unlawful|improper|wrong|unauthorized|restricted)\b",
    r"\bpark(?:ing|ed)?\s*(?:in\s+(?:the\s+)?)?(?:middle\s+of(?:\s+(?:the|a))?\s*)?"
    r"(?:unlawful|illegal|improper)?(?:ly)?\s*road(?:way)?\b",
    r"\b(?:unlawful|illegal|improper|prohibited|wrong|unauthorized|restricted)(?:ly)?\s*park(?:ing|ed)?\b",
    r"\b(?:road|roadway)\s+(?:obstruction|blockage|congestion|misuse)\b",
    r"\b(?:blocking|obstructing)\s+(?:the\s+)?road(?:way)?\b",
    r"\bobstruction\s+(?:of\s+)?(?:the\s+)?road(?:way)?\b",
)
UNSAFE_LANE_CHANGE_REGEX = any_of(UNSAFE_SOURCE + r" Lane Change")
UNSAFE_PASSING_REGEX = any_of(UNSAFE_SOURCE + r" (?:\w+ )?(?:Pass|Overtak)(?:ed?|ing)?")
DEFECTIVE_EQUIPMENT_REGEX = any_of(
    r"Unsafe (?:Vehicle|Car)",
    r"(?:Popped|Blown|Bad|Defective|Damaged) (?:\w+ )?(?:Wheel|Tyre|Tire)",
    r"(?:Unlawfully|Unlawful|Illegal|Illegally|Broken) Equipped (?:Vehicle|Car)",
    r"(?:Broken|Faulty|Bad|Defective|Damaged) (?:\w+ )?"
    r"(?:Vehicle|Car|Equipment|Light|Tail ?light|Headlight|Brake|Break|Steering)",
)
SUSPENDED_DL_REGEX = any_of(
    r"(?:Suspended|Revoked) " + DL_SOURCE,
    DL_SOURCE + r" (?:Suspended|Revoked)",
)
STOP_SIGN_REGEX = any_of(
    r"(?:Fail(?:ed|ing|ure)|Did(?: not|n['’]?t)|Ignor(?:e|ed|ing)) (?:to )?Stop(?:ing|ped)? at (?:a |an )?Stop \w+",
    r"(?:Running|Ran|Skipped|Ignor(?:e|ed|ing)|Skipping|Not Stopping) (?:\w* )?(?:a |an )?Stop \w+",
    r"Stop (?:Sign|Signal) Violation",
)
RED_SIGNAL_REGEX = any_of(
    r"(?:Fail(?:ed|ing|ure)|Ignor(?:e|ed|ing)|Did(?:not|n['’]?t)) (?:to )?Stop(?:ing|ped)? at (?:a |an )?Red \w+",
    r"(?:Running|Ran|Skipped|Ignor(?:e|ed|ing)|Skipping|Not Stopping) (?:\w* )?(?:a |an )?Red \w+",
    r"Red (?:Light|Signal) Violation",
)
NO_HEADLIGHTS_REGEX = any_of(
    r"Dr[io]v(?:e|ing) (?:Without|W[/\\]o|With No) (?:Light|Headlight)s?",
    r"(?:Head)lights Not (?:Being )?Used",
    FAILED_TO_USE_SOURCE + r" (?:Head)?lights",
)
UNLICENSED_DRIVER_REGEX = any_of(
    r"Unlicensed Driver",
    r"(?:In|Not? )valid " + DL_SOURCE,
    r"Not having (?:a |an )?" + DL_SOURCE,
    r"(?:No|No[tn][ -]Present) " + DL_SOURCE,
    r"Fail(?:ed|ing|ure) (?:To )?Renew\w* " + DL_SOURCE,
    r"Driving (?:\w+ )?(?:Without|W/o|Wo) (?:Possessing)?(?:a |an )?" + DL_SOURCE,
)
FAIL_TO_PRESENT_DL_REGEX = any_of(
    r"(?:Refus|Fail)(?:ed|ing|ure|e|al)? (?:To )?(?:Present|Show|Display|Give) " + DL_SOURCE
)
