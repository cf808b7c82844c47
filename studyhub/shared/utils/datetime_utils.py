# studyhub/shared/utils/datetime_utils.py

"""
Utilities for datetime operations.

All persisted datetimes are naive UTC; token claims carry integer UNIX
timestamps. These helpers convert between the two.
"""

from datetime import datetime, timezone
from typing import Optional


class DateTimeUtil:
    """
    Utility class for datetime operations.

    Provides static methods for:
    - Getting current UTC time (aware or naive)
    - Normalizing datetimes for storage
    - Converting token timestamps
    """

    @staticmethod
    def utcnow() -> datetime:
        """
        Get current UTC time.

        This is a replacement for datetime.utcnow() which is deprecated in Python 3.12+.
        It returns a timezone-aware datetime object in UTC.

        Returns:
            datetime: Current UTC time with timezone info
        """
        return datetime.now(timezone.utc)

    @staticmethod
    def utcnow_naive() -> datetime:
        """
        Get current UTC time as naive datetime (without timezone).

        Returns:
            datetime: Current UTC time without timezone info
        """
        return datetime.now(timezone.utc).replace(tzinfo=None)

    @staticmethod
    def for_storage(dt: Optional[datetime] = None) -> datetime:
        """
        Format a datetime for database storage.

        Converts to UTC and strips timezone info for consistent storage.
        If no datetime is provided, uses current time.

        Args:
            dt: Datetime to format (optional)

        Returns:
            datetime: UTC naive datetime ready for storage
        """
        if dt is None:
            dt = DateTimeUtil.utcnow()

        # Se tem timezone, converter para UTC
        if dt.tzinfo is not None:
            dt = dt.astimezone(timezone.utc)
        else:
            # Se não tem timezone, assumir que já é UTC
            dt = dt.replace(tzinfo=timezone.utc)

        # Remover timezone info para salvar no BD
        return dt.replace(tzinfo=None)

    @staticmethod
    def timestamp_to_datetime(timestamp: float) -> datetime:
        """
        Convert a UTC timestamp to datetime.

        Args:
            timestamp: Unix timestamp

        Returns:
            datetime: Datetime object with UTC timezone
        """
        return datetime.fromtimestamp(timestamp, tz=timezone.utc)

    @staticmethod
    def timestamp_for_storage(timestamp: float) -> datetime:
        """Convert a token `exp`/`iat` claim into a naive UTC datetime."""
        return DateTimeUtil.for_storage(DateTimeUtil.timestamp_to_datetime(timestamp))

    @staticmethod
    def is_past(dt: datetime) -> bool:
        """
        Check if datetime is in the past.

        Args:
            dt: Datetime to check

        Returns:
            bool: True if datetime is in the past
        """
        # Make sure we compare with timezone-aware now if dt is timezone-aware
        now = DateTimeUtil.utcnow() if dt.tzinfo is not None else DateTimeUtil.utcnow_naive()
        return dt < now
