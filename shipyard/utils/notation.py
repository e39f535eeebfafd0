"""Repeated-upgrade text notation ("Enhanced Turret x2").

These helpers work on plain upgrade names and never consult the catalog,
except for rarity_marker which is a display lookup.
"""

import re
from dataclasses import dataclass
from typing import Iterable, List

from ..models.catalog import UPGRADES, Rarity

_COUNT_PATTERN = re.compile(r"\s*(\d+)")

RARITY_MARKERS = {
    Rarity.COMMON: "C",
    Rarity.UNCOMMON: "U",
    Rarity.RARE: "R",
}


@dataclass(frozen=True)
class SplitUpgrade:
    """An upgrade name and how many copies it stands for."""

    upgrade: str
    count: int


def coalesce_duplicate_upgrades(upgrades: Iterable[str]) -> List[str]:
    """Merge consecutive repeats into "Name xN" entries.

    Args:
        upgrades: Upgrade names, duplicates adjacent to each other

    Returns:
        Names with consecutive repeats merged

    Examples:
        >>> coalesce_duplicate_upgrades(["Agile", "Enhanced Turret", "Enhanced Turret"])
        ['Agile', 'Enhanced Turret x2']
    """
    result: List[str] = []
    for name in upgrades:
        if result and result[-1].startswith(name):
            count = split_duplicate_upgrade(result[-1]).count
            result[-1] = f"{name} x{count + 1}"
        else:
            result.append(name)
    return result


def expand_duplicate_upgrades(upgrades: Iterable[str]) -> List[str]:
    """Expand "Name xN" entries back into N copies of "Name"."""
    expanded: List[str] = []
    for entry in upgrades:
        split = split_duplicate_upgrade(entry)
        expanded.extend([split.upgrade] * split.count)
    return expanded


def split_duplicate_upgrade(upgrade: str) -> SplitUpgrade:
    """Split "Name xN" into its name and count.

    The count marker is the last "x" (either case). Text without an "x",
    without any digit, or without digits after the marker counts once.

    Examples:
        >>> split_duplicate_upgrade("Enhanced Turret X3")
        SplitUpgrade(upgrade='Enhanced Turret', count=3)
        >>> split_duplicate_upgrade("Kitt 9000")
        SplitUpgrade(upgrade='Kitt 9000', count=1)
    """
    idx = upgrade.lower().rfind("x")
    if idx < 0 or not any(c.isdigit() for c in upgrade):
        return SplitUpgrade(upgrade, 1)

    match = _COUNT_PATTERN.match(upgrade, idx + 1)
    if match is None:
        return SplitUpgrade(upgrade, 1)

    # Drop the separator in front of the marker too
    return SplitUpgrade(upgrade[: max(idx - 1, 0)], int(match.group(1)))


def format_upgrades(upgrades: Iterable[str], space_replacement: str = " ") -> str:
    """Join upgrade names for display.

    Args:
        upgrades: Upgrade names (plain or coalesced)
        space_replacement: Replacement for spaces inside a name, e.g. a
            non-breaking space so card exports never wrap mid-name

    Returns:
        Comma-separated upgrade text
    """
    return ", ".join(name.replace(" ", space_replacement) for name in upgrades)


def rarity_marker(upgrade: str) -> str:
    """One-letter rarity marker for an upgrade name ("C", "U" or "R")."""
    return RARITY_MARKERS[UPGRADES[upgrade].rarity]
