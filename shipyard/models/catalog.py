"""Static rulebook data: ship type parameters and the upgrade catalog.

Both tables are built once at import time and never mutated. They are
shared by reference across the cost calculator, validators and codec.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from .stats import Rating


class ShipType(Enum):
    """Closed set of ship classes."""

    SNUBFIGHTER = "SNUBFIGHTER"
    GUNSHIP = "GUNSHIP"
    CORVETTE = "CORVETTE"

    @property
    def label(self) -> str:
        """Human-readable name used in messages (e.g. "Snubfighter")."""
        return self.value.capitalize()


class Rarity(Enum):
    """Squadron-wide availability of an upgrade."""

    COMMON = "COMMON"
    UNCOMMON = "UNCOMMON"
    RARE = "RARE"


@dataclass(frozen=True)
class ShipTypeRules:
    """Per-type constants looked up by ShipType.

    Attributes:
        speed_range: Inclusive (min, max) legal speed
        defense: Fixed defense die for the type
        pilot_ratings: Legal pilot dice
        max_cost: Cap on the non-pilot cost (waived by High Tech)
        upgrade_slots: Base upgrade slot limit
        max_weapons: Weapon limit without Hard Point (Hard Point adds one)
        default_speed: Speed used by the factory when none is given
    """

    speed_range: tuple[int, int]
    defense: Rating
    pilot_ratings: tuple[Rating, ...]
    max_cost: int
    upgrade_slots: int
    max_weapons: int
    default_speed: int


SHIP_TYPE_RULES: Mapping[ShipType, ShipTypeRules] = MappingProxyType(
    {
        ShipType.SNUBFIGHTER: ShipTypeRules(
            speed_range=(2, 3),
            defense=Rating.D6,
            pilot_ratings=(Rating.D6, Rating.D8, Rating.D10),
            max_cost=14,
            upgrade_slots=3,
            max_weapons=2,
            default_speed=2,
        ),
        ShipType.GUNSHIP: ShipTypeRules(
            speed_range=(1, 2),
            defense=Rating.D8,
            pilot_ratings=(Rating.D6, Rating.D8, Rating.D10),
            max_cost=20,
            upgrade_slots=4,
            max_weapons=2,
            default_speed=1,
        ),
        ShipType.CORVETTE: ShipTypeRules(
            speed_range=(1, 1),
            defense=Rating.D10,
            pilot_ratings=(Rating.D6, Rating.D8),
            max_cost=30,
            upgrade_slots=5,
            max_weapons=3,
            default_speed=1,
        ),
    }
)


def defense_rating_for(ship_type: ShipType) -> Rating:
    """Return the fixed defense die for a ship type."""
    return SHIP_TYPE_RULES[ship_type].defense


@dataclass(frozen=True)
class Upgrade:
    """Upgrade catalog entry.

    Attributes:
        name: Unique catalog key
        classes: Ship types allowed to carry the upgrade
        rarity: Squadron-wide availability
        cost: Point cost
        slots: Weight counted against the ship's upgrade limit
    """

    name: str
    classes: frozenset[ShipType]
    rarity: Rarity
    cost: int = 1
    slots: int = 1


_ALL = frozenset(ShipType)
_SNUB_GUN = frozenset({ShipType.SNUBFIGHTER, ShipType.GUNSHIP})
_GUN_CORV = frozenset({ShipType.GUNSHIP, ShipType.CORVETTE})
_CORV = frozenset({ShipType.CORVETTE})


def _catalog(*upgrades: Upgrade) -> Mapping[str, Upgrade]:
    return MappingProxyType({u.name: u for u in upgrades})


UPGRADES: Mapping[str, Upgrade] = _catalog(
    Upgrade("Agile", _SNUB_GUN, Rarity.COMMON),
    Upgrade("Carrier", _CORV, Rarity.UNCOMMON),
    Upgrade("Death Flower", _ALL, Rarity.RARE),
    Upgrade("Decoy", _ALL, Rarity.COMMON),
    Upgrade("ECM", _ALL, Rarity.COMMON),
    Upgrade("Emergency Teleporter", _SNUB_GUN, Rarity.RARE),
    Upgrade("Enhanced Turret", _ALL, Rarity.UNCOMMON),
    Upgrade("Fast", _ALL, Rarity.COMMON),
    Upgrade("Fully Loaded", _ALL, Rarity.UNCOMMON, slots=0),
    Upgrade("Ground Support", _GUN_CORV, Rarity.COMMON),
    Upgrade("Hard Point", _ALL, Rarity.COMMON),
    Upgrade("Maneuverable", _ALL, Rarity.COMMON),
    Upgrade("Mining Charges", _GUN_CORV, Rarity.RARE),
    Upgrade("Reinforced Hull", _CORV, Rarity.COMMON),
    Upgrade("Repair", _ALL, Rarity.COMMON),
    Upgrade("Shields", _ALL, Rarity.COMMON),
    Upgrade("Stealth", _SNUB_GUN, Rarity.UNCOMMON),
    Upgrade("Tailgunner", _ALL, Rarity.COMMON),
    Upgrade("Targeting Computer", _ALL, Rarity.COMMON),
    Upgrade("Torpedoes", _ALL, Rarity.UNCOMMON),
    Upgrade("Tractor Beam", _GUN_CORV, Rarity.UNCOMMON, slots=0),
    Upgrade("Transport", _GUN_CORV, Rarity.COMMON, slots=0),
)
