"""Text interface: squadron reports and the command line tool."""

from .cli import main, read_ships
from .report import ReportFormatter

__all__ = ["ReportFormatter", "main", "read_ships"]
