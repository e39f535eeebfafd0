"""Text helpers and constants for Shipyard."""

from .constants import (
    MAX_RARE_CARRIERS,
    MAX_SQUADRON_SIZE,
    MAX_UNCOMMON_CARRIERS,
    MIN_SQUADRON_SIZE,
    NBSP,
    SERVER_HOST,
    SERVER_PORT,
)
from .notation import (
    SplitUpgrade,
    coalesce_duplicate_upgrades,
    expand_duplicate_upgrades,
    format_upgrades,
    rarity_marker,
    split_duplicate_upgrade,
)
from .printable import format_weapon, parse_printable, printable_version

__all__ = [
    "MAX_RARE_CARRIERS",
    "MAX_SQUADRON_SIZE",
    "MAX_UNCOMMON_CARRIERS",
    "MIN_SQUADRON_SIZE",
    "NBSP",
    "SERVER_HOST",
    "SERVER_PORT",
    "SplitUpgrade",
    "coalesce_duplicate_upgrades",
    "expand_duplicate_upgrades",
    "format_upgrades",
    "rarity_marker",
    "split_duplicate_upgrade",
    "format_weapon",
    "parse_printable",
    "printable_version",
]
