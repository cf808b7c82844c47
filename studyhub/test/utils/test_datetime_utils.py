# studyhub/test/utils/test_datetime_utils.py

# Para Rodar o Script:
# pytest studyhub/test/utils/test_datetime_utils.py -v

from datetime import datetime, timedelta, timezone

from studyhub.shared.utils.datetime_utils import DateTimeUtil


class TestDateTimeUtil:
    """Test suite for DateTimeUtil class."""

    def test_utcnow(self):
        """Test utcnow() method generates timezone-aware UTC time."""
        dt = DateTimeUtil.utcnow()
        assert dt.tzinfo is not None
        assert dt.tzinfo == timezone.utc

    def test_utcnow_naive(self):
        """Test utcnow_naive() method generates timezone-naive time."""
        dt = DateTimeUtil.utcnow_naive()
        assert dt.tzinfo is None

    def test_for_storage_converts_aware_to_naive_utc(self):
        """Aware datetimes in other zones are shifted to UTC before dropping tzinfo."""
        local = datetime(2025, 1, 1, 9, 0, tzinfo=timezone(timedelta(hours=-3)))
        assert DateTimeUtil.for_storage(local) == datetime(2025, 1, 1, 12, 0)

    def test_for_storage_keeps_naive_values(self):
        naive = datetime(2025, 1, 1, 12, 0)
        assert DateTimeUtil.for_storage(naive) == naive

    def test_for_storage_defaults_to_now(self):
        stored = DateTimeUtil.for_storage()
        assert stored.tzinfo is None
        assert abs(stored - DateTimeUtil.utcnow_naive()) < timedelta(seconds=5)

    def test_timestamp_for_storage(self):
        """Token `exp` claims become naive UTC datetimes."""
        assert DateTimeUtil.timestamp_for_storage(1735732800) == datetime(2025, 1, 1, 12, 0)

    def test_timestamp_to_datetime(self):
        dt = DateTimeUtil.timestamp_to_datetime(0)
        assert dt == datetime(1970, 1, 1, tzinfo=timezone.utc)

    def test_is_past(self):
        assert DateTimeUtil.is_past(DateTimeUtil.utcnow() - timedelta(seconds=1))
        assert not DateTimeUtil.is_past(DateTimeUtil.utcnow_naive() + timedelta(minutes=1))
