"""Plain text squadron report.

This module turns validated ships into the text shown by the command line
tool: a summary table, one block per ship and the squadron-wide findings.
"""

from typing import List, Sequence

from ..engine.cost import cost_with_pilot, cost_without_pilot
from ..engine.validation import get_upgrade_count_limit
from ..models.catalog import UPGRADES, ShipType
from ..models.ship import Ship
from ..utils.constants import NBSP
from ..utils.notation import (
    coalesce_duplicate_upgrades,
    format_upgrades,
    rarity_marker,
    split_duplicate_upgrade,
)
from ..utils.printable import format_weapon

ISSUE_MARKER = "✗"


class ReportFormatter:
    """Builds report text for a squadron and its validation results."""

    def __init__(self, quiet: bool = False):
        """Initialize formatter.

        Args:
            quiet: If True, only ships with violations and the squadron
                findings are reported
        """
        self.quiet = quiet

    def format_squadron(
        self,
        ships: Sequence[Ship],
        ship_violations: Sequence[List[str]],
        squadron_violations: List[str],
    ) -> str:
        """Render the complete report.

        Args:
            ships: Ships in squadron order
            ship_violations: Violations per ship (index-aligned with ships)
            squadron_violations: Squadron-wide violations

        Returns:
            Report text
        """
        lines: List[str] = []
        if not self.quiet:
            lines.extend(self._summary_table(ships, ship_violations))
            lines.append("")

        for index, (ship, violations) in enumerate(zip(ships, ship_violations), start=1):
            if self.quiet and not violations:
                continue
            lines.extend(self.format_ship(index, ship, violations))
            lines.append("")

        lines.append("Squadron:")
        if squadron_violations:
            lines.extend(f"  {ISSUE_MARKER} {v}" for v in squadron_violations)
        else:
            lines.append("  No squadron violations")
        return "\n".join(lines)

    def format_ship(self, index: int, ship: Ship, violations: List[str]) -> List[str]:
        """Render one ship block."""
        lines = [
            f"#{index} {ship.name} ({_type_label(ship)}) - "
            f"{cost_without_pilot(ship)} pts ({cost_with_pilot(ship)} with pilot)"
        ]
        if not self.quiet:
            pilot = ship.pilot
            weapons = ", ".join(format_weapon(w) for w in ship.weapons) or "none"
            lines.append(
                f"  Speed {ship.speed} | Defense {ship.defense or 'none'} | Pilot {pilot or 'none'}"
            )
            lines.append(f"  Weapons: {weapons}")
            lines.append(f"  Upgrades{self._upgrade_usage(ship)}: {self._upgrade_text(ship)}")
        lines.extend(f"  {ISSUE_MARKER} {v}" for v in violations)
        return lines

    def _upgrade_usage(self, ship: Ship) -> str:
        if not isinstance(ship.ship_type, ShipType):
            return ""
        used = sum(UPGRADES[name].slots for name in ship.upgrades)
        return f" ({used}/{get_upgrade_count_limit(ship)})"

    def _upgrade_text(self, ship: Ship) -> str:
        if not ship.upgrades:
            return "none"
        labels = []
        for entry in coalesce_duplicate_upgrades(ship.upgrades):
            name = split_duplicate_upgrade(entry).upgrade
            labels.append(f"{entry} [{rarity_marker(name)}]")
        # Keep each label on one line when the report is wrapped
        return format_upgrades(labels, space_replacement=NBSP)

    def _summary_table(
        self, ships: Sequence[Ship], ship_violations: Sequence[List[str]]
    ) -> List[str]:
        """Summary table with one row per ship and a points total."""
        lines = [
            "┌────┬──────────────────────┬─────────────┬────────┬────────┐",
            "│  # │ Ship                 │ Type        │ Points │ Issues │",
            "├────┼──────────────────────┼─────────────┼────────┼────────┤",
        ]
        total = 0
        for index, (ship, violations) in enumerate(zip(ships, ship_violations), start=1):
            points = cost_with_pilot(ship)
            total += points
            lines.append(
                f"│{str(index).rjust(3)} │ {ship.name[:20].ljust(20)} │ "
                f"{_type_label(ship)[:11].ljust(11)} │{str(points).rjust(7)} │"
                f"{str(len(violations)).rjust(7)} │"
            )
        lines.append("├────┼──────────────────────┼─────────────┼────────┼────────┤")
        lines.append(
            f"│    │ {'TOTAL'.ljust(20)} │ {''.ljust(11)} │{str(total).rjust(7)} │"
            f"{''.rjust(7)} │"
        )
        lines.append("└────┴──────────────────────┴─────────────┴────────┴────────┘")
        return lines


def _type_label(ship: Ship) -> str:
    if isinstance(ship.ship_type, ShipType):
        return ship.ship_type.label
    return str(ship.ship_type)
