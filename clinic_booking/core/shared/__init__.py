"""
Shared utilities used across domains.
"""

from clinic_booking.core.shared.keyed_lock import KeyedLock
from clinic_booking.core.shared.logger import (
    ContextLogger,
    configure_logging,
    get_logger,
    get_use_case_logger,
)

__all__ = [
    "KeyedLock",
    "ContextLogger",
    "configure_logging",
    "get_logger",
    "get_use_case_logger",
]
