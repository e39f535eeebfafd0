"""Single-line printable form of a ship.

Format (colon separated):
    {name} ({type}) {cost} ({cost with pilot}):{speed}:{defense}:{weapons}:{pilot}:{upgrades}

Example:
    Hellhound A (snubfighter) 12 (15):2:2d6+1:2d8:2d8:Repair,Shields,Torpedoes

Parsing is tolerant: costs and defense are recomputed from the ship type
rather than read back, and modifiers on dice are ignored.
"""

import logging
import re
from typing import Optional

from ..engine.cost import cost_with_pilot, cost_without_pilot
from ..models.catalog import ShipType, defense_rating_for
from ..models.ship import Ship, Weapon, WeaponArc, WeaponBase
from ..models.stats import Rating

logger = logging.getLogger(__name__)

NO_PILOT = "none"

ARC_SUFFIXES = {
    WeaponArc.FRONT: "",
    WeaponArc.REAR: "R",
    WeaponArc.TURRET: "T",
    WeaponArc.ENHANCED_TURRET: "E",
}
_SUFFIX_ARCS = {suffix: arc for arc, suffix in ARC_SUFFIXES.items() if suffix}

_DIE_PATTERN = re.compile(r"d\s*(\d+)", re.IGNORECASE)
_NAME_TYPE_PATTERN = re.compile(r"^(?P<name>[^(]*)\((?P<type>[^)]*)\)")
_LEADING_INT = re.compile(r"\s*(-?\d+)")
_SEGMENTS = 6


def printable_version(ship: Ship) -> str:
    """Render a ship as a single printable line.

    Args:
        ship: Ship to render

    Returns:
        Colon-delimited text (see module docstring)
    """
    ship_type = ship.ship_type.value if isinstance(ship.ship_type, ShipType) else ship.ship_type
    name_block = (
        f"{ship.name} ({ship_type.lower()}) "
        f"{cost_without_pilot(ship)} ({cost_with_pilot(ship)})"
    )
    weapon_block = ",".join(format_weapon(w) for w in ship.weapons)
    pilot = ship.pilot
    pilot_block = str(pilot) if pilot else NO_PILOT
    defense_block = str(ship.defense) if ship.defense else ""
    upgrade_block = ",".join(ship.upgrades)

    return f"{name_block}:{ship.speed}:{defense_block}:{weapon_block}:{pilot_block}:{upgrade_block}"


def format_weapon(weapon: Weapon) -> str:
    """Render a weapon as its firepower plus an arc letter (e.g. "2d8+1T")."""
    return f"{weapon.firepower}{ARC_SUFFIXES[weapon.arc]}"


def parse_printable(text: str) -> Ship:
    """Parse a printable line back into a Ship.

    Args:
        text: Line produced by printable_version (or typed by hand)

    Returns:
        Ship with sorted upgrades and no squadron trait
    """
    segments = text.strip().split(":")
    segments += [""] * (_SEGMENTS - len(segments))
    name_block, speed_block, _defense, weapons_block, pilot_block, upgrades_block = segments[
        :_SEGMENTS
    ]

    name, ship_type = _parse_name_and_type(name_block)
    upgrades = [u.strip() for u in upgrades_block.split(",") if u.strip()]
    upgrades.sort()

    return Ship(
        name=name,
        ship_type=ship_type,
        speed=_parse_speed(speed_block),
        defense_base=defense_rating_for(ship_type) if isinstance(ship_type, ShipType) else None,
        weapons_base=_parse_weapons(weapons_block),
        pilot_base=_parse_pilot(pilot_block),
        upgrades=upgrades,
        squadron_trait=None,
    )


def _parse_name_and_type(block: str) -> tuple[str, ShipType | str]:
    match = _NAME_TYPE_PATTERN.match(block)
    if match is None:
        name, type_text = block.strip(), ""
    else:
        name, type_text = match.group("name").strip(), match.group("type").strip().upper()

    try:
        return name, ShipType(type_text)
    except ValueError:
        logger.warning(f"Unrecognized ship type '{type_text}' for ship '{name}'")
        return name, type_text


def _parse_speed(block: str) -> int:
    match = _LEADING_INT.match(block)
    if match is None:
        logger.debug(f"Unparseable speed '{block}', using 0")
        return 0
    return int(match.group(1))


def _extract_rating(token: str) -> Rating:
    """Die size from the first d<digits> run; unrecognized sizes are 2d10."""
    match = _DIE_PATTERN.search(token)
    size = int(match.group(1)) if match else None
    if size == 6:
        return Rating.D6
    if size == 8:
        return Rating.D8
    return Rating.D10


def _parse_weapons(block: str) -> list[WeaponBase]:
    weapons = []
    for token in block.split(","):
        token = token.strip()
        if not token:
            continue
        arc = _SUFFIX_ARCS.get(token[-1].upper(), WeaponArc.FRONT)
        weapons.append(WeaponBase(_extract_rating(token), arc))
    return weapons


def _parse_pilot(block: str) -> Optional[Rating]:
    block = block.strip()
    if not block or _DIE_PATTERN.search(block) is None:
        return None
    return _extract_rating(block)
