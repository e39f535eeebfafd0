"""Ship aggregate and type-specific factories."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .catalog import SHIP_TYPE_RULES, ShipType, defense_rating_for
from .stats import Rating, Stat


class WeaponArc(Enum):
    """Firing direction of a weapon mount."""

    FRONT = "FRONT"
    REAR = "REAR"
    TURRET = "TURRET"
    ENHANCED_TURRET = "ENHANCED_TURRET"


class SquadronTrait(Enum):
    """Squadron-wide trait applied to every ship in the squadron."""

    RUGGED = "RUGGED"
    HOTSHOTS = "HOTSHOTS"
    HIGH_TECH = "HIGH_TECH"
    BERSERKER_INTELLIGENCE = "BERSERKER_INTELLIGENCE"


@dataclass(frozen=True)
class WeaponBase:
    """Unmodified weapon mount as stored on a ship."""

    firepower: Rating
    arc: WeaponArc = WeaponArc.FRONT


@dataclass(frozen=True)
class Weapon:
    """Weapon mount with its derived firepower."""

    firepower: Stat
    arc: WeaponArc


@dataclass
class Ship:
    """A single ship in a squadron.

    Only base values are stored. Defense, pilot and weapons are derived
    from the base values, the upgrades and the squadron trait every time
    they are read, so edits are always reflected immediately.
    """

    name: str
    ship_type: ShipType  # Unrecognized parsed types keep the raw string
    speed: int
    defense_base: Optional[Rating]  # Fixed by ship type
    weapons_base: list[WeaponBase] = field(default_factory=list)
    pilot_base: Optional[Rating] = None
    upgrades: list[str] = field(default_factory=list)  # Upgrade catalog keys
    squadron_trait: Optional[SquadronTrait] = None

    def has_upgrade(self, name: str) -> bool:
        return name in self.upgrades

    def upgrade_count(self, name: str) -> int:
        return self.upgrades.count(name)

    @property
    def defense(self) -> Optional[Stat]:
        """Defense die plus Shields and Rugged bonuses."""
        if self.defense_base is None:
            return None
        modifier = 0
        if self.has_upgrade("Shields"):
            modifier += 1
        if self.squadron_trait == SquadronTrait.RUGGED:
            modifier += 1
        return Stat(self.defense_base, modifier)

    @property
    def pilot(self) -> Optional[Stat]:
        """Pilot die plus Agile and Hotshots bonuses, or None without a pilot."""
        if self.pilot_base is None:
            return None
        modifier = 0
        if self.has_upgrade("Agile"):
            modifier += 1
        if self.squadron_trait == SquadronTrait.HOTSHOTS:
            modifier += 1
        return Stat(self.pilot_base, modifier)

    @property
    def weapons(self) -> list[Weapon]:
        """Weapons with Targeting Computer and Berserker Intelligence bonuses."""
        modifier = 0
        if self.has_upgrade("Targeting Computer"):
            modifier += 1
        if self.squadron_trait == SquadronTrait.BERSERKER_INTELLIGENCE:
            modifier += 1
        return [Weapon(Stat(w.firepower, modifier), w.arc) for w in self.weapons_base]


def _build(
    ship_type: ShipType,
    name: Optional[str],
    speed: Optional[int],
    weapons_base: Optional[list[WeaponBase]],
    pilot_base: Optional[Rating],
    upgrades: Optional[list[str]],
    squadron_trait: Optional[SquadronTrait],
) -> Ship:
    if speed is None:
        speed = SHIP_TYPE_RULES[ship_type].default_speed
    return Ship(
        name=name if name is not None else ship_type.label,
        ship_type=ship_type,
        speed=speed,
        defense_base=defense_rating_for(ship_type),
        weapons_base=list(weapons_base or []),
        pilot_base=pilot_base,
        upgrades=list(upgrades or []),
        squadron_trait=squadron_trait,
    )


def snubfighter(
    name: Optional[str] = None,
    speed: Optional[int] = None,
    weapons_base: Optional[list[WeaponBase]] = None,
    pilot_base: Optional[Rating] = None,
    upgrades: Optional[list[str]] = None,
    squadron_trait: Optional[SquadronTrait] = None,
) -> Ship:
    """Create a Snubfighter (2d6 defense, default speed 2)."""
    return _build(
        ShipType.SNUBFIGHTER, name, speed, weapons_base, pilot_base, upgrades, squadron_trait
    )


def gunship(
    name: Optional[str] = None,
    speed: Optional[int] = None,
    weapons_base: Optional[list[WeaponBase]] = None,
    pilot_base: Optional[Rating] = None,
    upgrades: Optional[list[str]] = None,
    squadron_trait: Optional[SquadronTrait] = None,
) -> Ship:
    """Create a Gunship (2d8 defense, default speed 1)."""
    return _build(
        ShipType.GUNSHIP, name, speed, weapons_base, pilot_base, upgrades, squadron_trait
    )


def corvette(
    name: Optional[str] = None,
    weapons_base: Optional[list[WeaponBase]] = None,
    pilot_base: Optional[Rating] = None,
    upgrades: Optional[list[str]] = None,
    squadron_trait: Optional[SquadronTrait] = None,
) -> Ship:
    """Create a Corvette (2d10 defense, speed fixed at 1)."""
    return _build(
        ShipType.CORVETTE, name, None, weapons_base, pilot_base, upgrades, squadron_trait
    )
