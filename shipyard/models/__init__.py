"""Data models for Shipyard."""

from .catalog import (
    SHIP_TYPE_RULES,
    UPGRADES,
    Rarity,
    ShipType,
    ShipTypeRules,
    Upgrade,
    defense_rating_for,
)
from .ship import (
    Ship,
    SquadronTrait,
    Weapon,
    WeaponArc,
    WeaponBase,
    corvette,
    gunship,
    snubfighter,
)
from .stats import Rating, Stat

__all__ = [
    "Rating",
    "Stat",
    "ShipType",
    "ShipTypeRules",
    "SHIP_TYPE_RULES",
    "Rarity",
    "Upgrade",
    "UPGRADES",
    "defense_rating_for",
    "WeaponArc",
    "WeaponBase",
    "Weapon",
    "SquadronTrait",
    "Ship",
    "snubfighter",
    "gunship",
    "corvette",
]
