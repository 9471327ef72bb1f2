from datetime import datetime, timedelta, timezone

import pytest

from gobox.models import ZERO_TIME, Package, format_time, parse_time


def test_round_trip_preserves_all_fields():
    tz = timezone(timedelta(hours=3))
    pkg = Package(
        name="github.com/spf13/cobra",
        usage_count=4,
        last_used=datetime(2024, 5, 1, 10, 20, 30, 123456, tzinfo=tz),
        installed_at=datetime(2023, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
    )
    assert Package.from_dict(pkg.to_dict()) == pkg


def test_to_dict_key_order():
    pkg = Package(name="x", usage_count=1)
    assert list(pkg.to_dict()) == ["name", "usage_count", "last_used", "installed_at"]


def test_zero_time_renders_like_go():
    assert format_time(ZERO_TIME) == "0001-01-01T00:00:00Z"


def test_parse_nanosecond_timestamp_truncates_to_microseconds():
    moment = parse_time("2024-05-01T10:20:30.123456789+03:00")
    assert moment.microsecond == 123456
    assert moment.utcoffset() == timedelta(hours=3)


def test_negative_offset_round_trip():
    text = "2022-12-31T23:59:59.5-05:30"
    assert format_time(parse_time(text)) == text


def test_missing_fields_default_to_zero_values():
    pkg = Package.from_dict({"name": "example.com/lib"})
    assert pkg.usage_count == 0
    assert pkg.last_used == ZERO_TIME
    assert pkg.installed_at == ZERO_TIME


def test_invalid_timestamp_raises():
    with pytest.raises(ValueError):
        Package.from_dict({"name": "a", "last_used": "yesterday"})


def test_non_mapping_raises():
    with pytest.raises(ValueError):
        Package.from_dict(["name"])