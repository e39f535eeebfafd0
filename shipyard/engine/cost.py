"""Point cost of a ship.

Costs are computed from the ship's derived stats on every call:
1. Speed, defense, weapons and upgrades make up the non-pilot cost
2. The pilot die is added on top for the full cost
"""

from typing import Optional

from ..models.catalog import UPGRADES
from ..models.ship import Ship, Weapon, WeaponArc
from ..models.stats import Rating

SPEED_COST = {1: 1, 2: 3, 3: 5}
DEFENSE_COST = {Rating.D6: 2, Rating.D8: 4, Rating.D10: 8}
WEAPON_COST = {Rating.D6: 2, Rating.D8: 4}
WEAPON_COST_DEFAULT = 6  # 2d10 and anything larger
ENHANCED_TURRET_SURCHARGE = 1
PILOT_COST = {Rating.D4: 0, Rating.D6: 1, Rating.D8: 3, Rating.D10: 5, Rating.D12: 0}


def cost_without_pilot(ship: Ship) -> int:
    """Calculate the ship's cost excluding its pilot.

    Args:
        ship: Ship to price

    Returns:
        Sum of speed, defense, weapon and upgrade costs

    Raises:
        KeyError: If an upgrade is missing from the catalog
    """
    defense = ship.defense
    return (
        _speed_cost(ship.speed)
        + _defense_cost(defense.rating if defense else None)
        + _weapons_cost(ship.weapons)
        + _upgrades_cost(ship.upgrades)
    )


def cost_with_pilot(ship: Ship) -> int:
    """Calculate the ship's full cost, pilot included."""
    pilot = ship.pilot
    pilot_cost = PILOT_COST.get(pilot.rating, 0) if pilot else 0
    return cost_without_pilot(ship) + pilot_cost


def _speed_cost(speed: int) -> int:
    return SPEED_COST.get(speed, 0)


def _defense_cost(rating: Optional[Rating]) -> int:
    return DEFENSE_COST.get(rating, 0)


def _weapons_cost(weapons: list[Weapon]) -> int:
    total = 0
    for weapon in weapons:
        total += WEAPON_COST.get(weapon.firepower.rating, WEAPON_COST_DEFAULT)
        if weapon.arc == WeaponArc.ENHANCED_TURRET:
            total += ENHANCED_TURRET_SURCHARGE
    return total


def _upgrades_cost(upgrades: list[str]) -> int:
    # Duplicates (Enhanced Turret) are each paid for
    return sum(UPGRADES[name].cost for name in upgrades)
