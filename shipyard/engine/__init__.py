"""Rules engine components."""

from .cost import cost_with_pilot, cost_without_pilot
from .squadron import validate_squadron
from .validation import get_upgrade_count_limit, validate_ship

__all__ = [
    "cost_with_pilot",
    "cost_without_pilot",
    "get_upgrade_count_limit",
    "validate_ship",
    "validate_squadron",
]
