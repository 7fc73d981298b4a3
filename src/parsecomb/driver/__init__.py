"""Driver utilities: callback dispatch and position tracking.

Public API:
    matcher, Rule: Run a parser and report the outcome to callbacks
    track, Scanner, ScanPosition: Record where a parser stopped
"""

from .matcher import Callback, Rule, matcher
from .tracking import ScanPosition, Scanner, track

__all__ = ["Callback", "Rule", "ScanPosition", "Scanner", "matcher", "track"]
