from clinic_booking.database.async_db import Database, build_engine_config
from clinic_booking.database.base import Base, TimestampMixin

__all__ = ["Base", "Database", "TimestampMixin", "build_engine_config"]
