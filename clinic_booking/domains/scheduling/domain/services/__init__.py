"""
Scheduling Domain Services
"""

from .availability_calculator import AvailabilityCalculator
from .conflict_detector import ConflictDetector
from .status_transition_guard import StatusTransitionGuard

__all__ = ["AvailabilityCalculator", "ConflictDetector", "StatusTransitionGuard"]
