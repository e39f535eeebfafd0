"""Legality checks for a single ship.

Checks run in rulebook order and every breach is reported as a message:
1. Speed
2. Defense
3. Weapon composition
4. Upgrade legality
5. Upgrade slot count
6. Pilot
7. Maximum non-pilot cost

Nothing here raises for an illegal ship; callers get an empty list for a
legal one.
"""

import logging
from collections import Counter
from typing import List, Optional

from ..models.catalog import SHIP_TYPE_RULES, UPGRADES, ShipType, ShipTypeRules
from ..models.ship import Ship, SquadronTrait, Weapon, WeaponArc
from ..models.stats import Rating
from .cost import cost_without_pilot

logger = logging.getLogger(__name__)

_NUMBER_WORDS = {1: "one", 2: "two", 3: "three", 4: "four", 5: "five"}


def validate_ship(ship: Ship) -> List[str]:
    """Validate a ship against the rulebook.

    Args:
        ship: Ship to validate

    Returns:
        List of violation messages (empty if the ship is legal)
    """
    if ship.ship_type not in SHIP_TYPE_RULES:
        return [f"Unknown ship type: {ship.ship_type}"]

    rules = SHIP_TYPE_RULES[ship.ship_type]
    errors: List[str] = []

    for check in (_validate_speed, _validate_defense):
        error = check(ship, rules)
        if error:
            errors.append(error)

    errors.extend(_validate_weapons(ship))
    errors.extend(_validate_upgrades(ship))

    for check in (_validate_upgrade_count, _validate_pilot, _validate_max_cost):
        error = check(ship, rules)
        if error:
            errors.append(error)

    logger.debug(f"Validated {ship.name}: {len(errors)} violation(s)")
    return errors


def get_upgrade_count_limit(ship: Ship) -> int:
    """Calculate how many upgrade slots the ship may fill.

    Base limit comes from the ship type; Fully Loaded and the High Tech
    trait each add one.
    """
    limit = SHIP_TYPE_RULES[ship.ship_type].upgrade_slots
    if ship.has_upgrade("Fully Loaded"):
        limit += 1
    if ship.squadron_trait == SquadronTrait.HIGH_TECH:
        limit += 1
    return limit


def _validate_speed(ship: Ship, rules: ShipTypeRules) -> Optional[str]:
    low, high = rules.speed_range
    if low <= ship.speed <= high:
        return None
    return f"Speed is {ship.speed}, but must be between {low} and {high}"


def _validate_defense(ship: Ship, rules: ShipTypeRules) -> Optional[str]:
    defense = ship.defense
    actual = defense.rating if defense else None
    if actual == rules.defense:
        return None
    return (
        f"Defense is {actual}, but defense for a "
        f"{ship.ship_type.label} must be {rules.defense}"
    )


def _validate_weapons(ship: Ship) -> List[str]:
    """Check weapon count, firepower and arcs for the ship's type."""
    weapons = ship.weapons
    if ship.ship_type == ShipType.SNUBFIGHTER:
        return _validate_snubfighter_weapons(ship, weapons)

    errors = []
    count_error = _validate_weapon_count(ship, weapons)
    if count_error:
        errors.append(count_error)

    ratings = Counter(w.firepower.rating for w in weapons)
    if ship.ship_type == ShipType.GUNSHIP and ratings[Rating.D10] > 1:
        errors.append("Gunships may not carry more than one 2d10 weapon")
    if ship.ship_type == ShipType.CORVETTE and ratings[Rating.D6] > 0:
        errors.append("Corvettes may not carry 2d6 weapons")

    errors.extend(_validate_arcs(weapons))
    return errors


def _validate_snubfighter_weapons(ship: Ship, weapons: List[Weapon]) -> List[str]:
    if not weapons:
        return ["Snubfighters must carry at least one weapon"]

    count_error = _validate_weapon_count(ship, weapons)
    if count_error:
        return [count_error]

    errors = []
    ratings = Counter(w.firepower.rating for w in weapons)
    if ratings[Rating.D10] > 0:
        errors.append("Snubfighters may not carry 2d10 weapons")
    if ratings[Rating.D8] > 1:
        errors.append("Snubfighters may only carry one 2d8 weapon")

    if weapons[0].arc != WeaponArc.FRONT:
        errors.append("A Snubfighter's first weapon must fire forward")
    if any(w.arc == WeaponArc.FRONT for w in weapons[1:]):
        errors.append("A Snubfighter's secondary weapons must not fire forward")
    return errors


def _validate_weapon_count(ship: Ship, weapons: List[Weapon]) -> Optional[str]:
    limit = SHIP_TYPE_RULES[ship.ship_type].max_weapons
    label = ship.ship_type.label
    if ship.has_upgrade("Hard Point"):
        limit += 1
        subject = f"{label}s with Hard Point"
    else:
        subject = f"{label}s"

    if len(weapons) <= limit:
        return None
    return f"{subject} may not carry more than {_NUMBER_WORDS[limit]} weapons"


def _validate_arcs(weapons: List[Weapon]) -> List[str]:
    arcs = Counter(w.arc for w in weapons)
    errors = []
    if arcs[WeaponArc.FRONT] > 1:
        errors.append("Ships may not have more than one front-firing weapon")
    if arcs[WeaponArc.REAR] > 1:
        errors.append("Ships may not have more than one rear-firing weapon")
    return errors


def _validate_upgrades(ship: Ship) -> List[str]:
    """Check duplicates, ship-type restrictions and weapon-linked upgrades."""
    errors = []
    counts = Counter(ship.upgrades)

    for name, count in counts.items():
        if count > 1 and name != "Enhanced Turret":
            errors.append(f"Ships cannot have more than one copy of the {name} upgrade")

    for name in counts:
        if ship.ship_type not in UPGRADES[name].classes:
            errors.append(f"{ship.ship_type.label}s cannot have the {name} upgrade")

    arcs = Counter(w.arc for w in ship.weapons)
    if arcs[WeaponArc.REAR] > 0 and not ship.has_upgrade("Tailgunner"):
        errors.append("The ship must have a Tailgunner upgrade for its rear-facing weapon")
    if arcs[WeaponArc.ENHANCED_TURRET] > ship.upgrade_count("Enhanced Turret"):
        errors.append(
            "The ship must have an Enhanced Turret upgrade for each of its "
            "weapons with enhanced turrets"
        )
    return errors


def _validate_upgrade_count(ship: Ship, rules: ShipTypeRules) -> Optional[str]:
    limit = get_upgrade_count_limit(ship)
    used = sum(UPGRADES[name].slots for name in ship.upgrades)
    if used <= limit:
        return None

    modifiers = []
    if ship.has_upgrade("Fully Loaded"):
        modifiers.append("Fully Loaded")
    if ship.squadron_trait == SquadronTrait.HIGH_TECH:
        modifiers.append("High Tech")

    subject = f"{ship.ship_type.label}s"
    if modifiers:
        subject += " with " + " and ".join(modifiers)
    return f"{subject} may have at most {limit} upgrades"


def _validate_pilot(ship: Ship, rules: ShipTypeRules) -> Optional[str]:
    pilot = ship.pilot
    if pilot is None or pilot.rating in rules.pilot_ratings:
        return None

    allowed = [str(r) for r in rules.pilot_ratings]
    if len(allowed) > 2:
        allowed_text = ", ".join(allowed[:-1]) + f", or {allowed[-1]}"
    else:
        allowed_text = " or ".join(allowed)
    return f"The pilot stat for a {ship.ship_type.label} must be {allowed_text}"


def _validate_max_cost(ship: Ship, rules: ShipTypeRules) -> Optional[str]:
    if ship.squadron_trait == SquadronTrait.HIGH_TECH:
        return None

    cost = cost_without_pilot(ship)
    if cost <= rules.max_cost:
        return None
    return (
        f"The ship's non-pilot cost ({cost}) exceeds the maximum "
        f"for a {ship.ship_type.label} ({rules.max_cost})"
    )
