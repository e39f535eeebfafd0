"""Squadron-wide legality checks.

This module handles:
1. Squadron size (4 to 16 ships, an empty squadron is not flagged)
2. Composition (at least half the points in Snubfighters)
3. Upgrade rarity (Rare on one ship, Uncommon on at most three)

Individual ship rules are left to validate_ship; per-ship results here
only carry the rarity violations.
"""

import logging
from typing import Dict, List, Sequence, Tuple

from ..models.catalog import UPGRADES, Rarity, ShipType
from ..models.ship import Ship
from ..utils.constants import (
    MAX_RARE_CARRIERS,
    MAX_SQUADRON_SIZE,
    MAX_UNCOMMON_CARRIERS,
    MIN_SQUADRON_SIZE,
)
from ..utils.notation import coalesce_duplicate_upgrades, split_duplicate_upgrade
from .cost import cost_with_pilot

logger = logging.getLogger(__name__)


def validate_squadron(ships: Sequence[Ship]) -> Tuple[List[str], List[List[str]]]:
    """Validate a squadron as a whole.

    Args:
        ships: Ships in squadron order

    Returns:
        Tuple of (squadron violations, per-ship violations). The per-ship
        list is index-aligned with ships.
    """
    errors: List[str] = []
    per_ship: List[List[str]] = [[] for _ in ships]

    size_error = _validate_size(ships)
    if size_error:
        errors.append(size_error)

    if not _has_enough_snubfighters(ships):
        errors.append("A squadron must contain at least 50% snubfighters, by points")

    _validate_rarity(ships, per_ship)

    logger.debug(
        f"Validated squadron of {len(ships)} ships: {len(errors)} squadron violation(s), "
        f"{sum(len(e) for e in per_ship)} ship violation(s)"
    )
    return errors, per_ship


def _validate_size(ships: Sequence[Ship]) -> str | None:
    if not ships:
        return None  # Nothing built yet
    if len(ships) < MIN_SQUADRON_SIZE:
        return "A squadron must contain at least four ships"
    if len(ships) > MAX_SQUADRON_SIZE:
        return f"A squadron must contain at most {MAX_SQUADRON_SIZE} ships"
    return None


def _has_enough_snubfighters(ships: Sequence[Ship]) -> bool:
    total = 0
    snub = 0
    for ship in ships:
        cost = cost_with_pilot(ship)
        total += cost
        if ship.ship_type == ShipType.SNUBFIGHTER:
            snub += cost
    # Doubled comparison keeps this in integers
    return snub * 2 >= total


def _distinct_upgrades(ship: Ship) -> List[str]:
    names = []
    for entry in coalesce_duplicate_upgrades(ship.upgrades):
        name = split_duplicate_upgrade(entry).upgrade
        if name not in names:
            names.append(name)
    return names


def _validate_rarity(ships: Sequence[Ship], per_ship: List[List[str]]) -> None:
    """Append rarity violations to every ship carrying an over-used upgrade."""
    carriers: Dict[str, List[int]] = {}
    for index, ship in enumerate(ships):
        for name in _distinct_upgrades(ship):
            carriers.setdefault(name, []).append(index)

    for name, indices in carriers.items():
        rarity = UPGRADES[name].rarity
        if rarity == Rarity.RARE and len(indices) > MAX_RARE_CARRIERS:
            message = f"At most one ship can carry the {name} upgrade"
        elif rarity == Rarity.UNCOMMON and len(indices) > MAX_UNCOMMON_CARRIERS:
            message = f"At most three ships can carry the {name} upgrade"
        else:
            continue
        for index in indices:
            per_ship[index].append(message)
