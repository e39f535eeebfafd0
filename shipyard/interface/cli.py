"""Command line squadron checker.

Reads printable ship lines (one per line, blank lines and # comments
skipped) from files or stdin, validates each ship and the squadron, and
prints a report.
"""

import argparse
import logging
import sys
from typing import Iterable, List, Optional, TextIO

from ..engine.squadron import validate_squadron
from ..engine.validation import validate_ship
from ..models.catalog import UPGRADES
from ..models.ship import Ship, SquadronTrait
from ..utils.printable import parse_printable
from .report import ReportFormatter

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_INPUT_ERROR = 2


def read_ships(lines: Iterable[str]) -> List[Ship]:
    """Parse printable lines into ships.

    Args:
        lines: Raw input lines

    Returns:
        Parsed ships in input order

    Raises:
        ValueError: If a ship carries an upgrade missing from the catalog
    """
    ships = []
    for number, line in enumerate(lines, start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        ship = parse_printable(line)
        unknown = [name for name in ship.upgrades if name not in UPGRADES]
        if unknown:
            raise ValueError(f"Line {number}: unknown upgrade(s): {', '.join(unknown)}")
        ships.append(ship)
    return ships


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shipyard",
        description="Shipyard - cost and legality checks for starship squadrons",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s squadron.txt                    # Report on a squadron file
  %(prog)s --trait high_tech squadron.txt  # Apply a squadron trait to every ship
  %(prog)s --quiet a.txt b.txt             # Only print violations
  cat squadron.txt | %(prog)s              # Read ships from stdin
        """,
    )
    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="Files with one printable ship per line (default: stdin)",
    )
    parser.add_argument(
        "--trait",
        type=str.upper,
        choices=[t.value for t in SquadronTrait],
        default=None,
        help="Squadron trait applied to every ship",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only report ships with violations and squadron findings",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None) -> int:
    """Main entry point.

    Returns:
        Exit status: 0 if everything is legal, 1 if any violation was
        found, 2 if the input could not be read
    """
    args = build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.debug else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    try:
        lines: List[str] = []
        if args.files:
            for path in args.files:
                with open(path) as f:
                    lines.extend(f.readlines())
        else:
            lines = (stdin or sys.stdin).readlines()
        ships = read_ships(lines)
    except OSError as e:
        print(f"Error reading input: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    trait = SquadronTrait(args.trait) if args.trait else None
    for ship in ships:
        ship.squadron_trait = trait

    squadron_violations, rarity_violations = validate_squadron(ships)
    ship_violations = [
        validate_ship(ship) + rarity for ship, rarity in zip(ships, rarity_violations)
    ]
    logger.debug(f"Checked {len(ships)} ships")

    formatter = ReportFormatter(quiet=args.quiet)
    print(formatter.format_squadron(ships, ship_violations, squadron_violations))

    if squadron_violations or any(ship_violations):
        return EXIT_VIOLATIONS
    return EXIT_OK
