"""
Conflict Detector

Pure overlap checks between a candidate interval and existing bookings.
"""

from collections.abc import Iterable

from ..value_objects.time_of_day import TimeInterval


class ConflictDetector:
    """
    Decides whether a candidate interval clashes with existing intervals.

    Uses strict half-open overlap, so back-to-back appointments are allowed.
    Callers pass only active appointments; status filtering is not done here.
    """

    def has_conflict(self, candidate: TimeInterval, existing: Iterable[TimeInterval]) -> bool:
        return any(candidate.overlaps(other) for other in existing)

    def find_conflicts(self, candidate: TimeInterval, existing: Iterable[TimeInterval]) -> list[TimeInterval]:
        return [other for other in existing if candidate.overlaps(other)]
