from datetime import datetime, timedelta, timezone

import pytest

from corbusier.clock import FixedClock
from corbusier.event import EventMetadata, VersionedEvent

INSTANT = datetime(2024, 5, 1, 12, 30, 15, 123456, tzinfo=timezone.utc)


def test_versioned_event_new():
    event = VersionedEvent.create(1, "TestEvent", {"key": "value"})
    assert event.version == 1
    assert event.event_type == "TestEvent"
    assert event.data.get("key") == "value"


def test_versioned_event_metadata_has_timestamp():
    before = datetime.now(timezone.utc)
    event = VersionedEvent.create(1, "TestEvent", {})
    after = datetime.now(timezone.utc)
    assert before <= event.metadata.occurred_at <= after


def test_default_metadata_has_timestamp():
    before = datetime.now(timezone.utc)
    event = VersionedEvent(1, "TestEvent", {})
    after = datetime.now(timezone.utc)
    assert before <= event.metadata.occurred_at <= after


def test_versioned_event_set_version():
    event = VersionedEvent.create(1, "TestEvent", {})
    event.version = 2
    assert event.version == 2


def test_versioned_event_data_mut():
    event = VersionedEvent.create(1, "TestEvent", {"count": 1})
    event.data["new_field"] = "added"
    assert event.data["new_field"] == "added"
    assert event.data["count"] == 1


def test_create_with_clock_uses_clock_time():
    event = VersionedEvent.create(1, "TestEvent", {}, FixedClock(INSTANT))
    assert event.metadata.occurred_at == INSTANT


def test_constructor_with_custom_metadata():
    metadata = EventMetadata(INSTANT).with_source("api").with_correlation_id("corr-1")
    event = VersionedEvent(3, "TestEvent", {"a": 1}, metadata)
    assert event.metadata.source == "api"
    assert event.metadata.correlation_id == "corr-1"
    assert event.metadata.occurred_at == INSTANT


def test_metadata_now_has_no_source_or_correlation():
    metadata = EventMetadata.now(FixedClock(INSTANT))
    assert metadata.source is None
    assert metadata.correlation_id is None
    assert metadata.occurred_at == INSTANT


def test_metadata_builders_return_copies():
    original = EventMetadata(INSTANT)
    changed = original.with_source("worker")
    assert original.source is None
    assert changed.source == "worker"


def test_metadata_to_dict_skips_unset_fields():
    assert EventMetadata(INSTANT).to_dict() == {"occurred_at": "2024-05-01T12:30:15.123456Z"}


def test_metadata_to_dict_includes_set_fields():
    metadata = EventMetadata(INSTANT).with_source("s").with_correlation_id("c")
    assert metadata.to_dict()["source"] == "s"
    assert metadata.to_dict()["correlation_id"] == "c"


def test_metadata_round_trip():
    metadata = EventMetadata(INSTANT).with_source("api")
    assert EventMetadata.from_dict(metadata.to_dict()) == metadata


def test_metadata_from_dict_normalises_offset():
    parsed = EventMetadata.from_dict({"occurred_at": "2024-05-01T14:30:15+02:00"})
    assert parsed.occurred_at == datetime(2024, 5, 1, 12, 30, 15, tzinfo=timezone.utc)
    assert parsed.occurred_at.utcoffset() == timedelta(0)


def test_metadata_from_dict_rejects_missing_timestamp():
    with pytest.raises(ValueError):
        EventMetadata.from_dict({"source": "api"})


def test_metadata_from_dict_rejects_bad_timestamp():
    with pytest.raises(ValueError):
        EventMetadata.from_dict({"occurred_at": "yesterday"})


def test_metadata_rejects_naive_datetime():
    with pytest.raises(ValueError):
        EventMetadata(datetime(2024, 1, 1))


def test_event_round_trip():
    event = VersionedEvent.create(2, "MessageCreated", {"id": "123", "content": []}, FixedClock(INSTANT))
    restored = VersionedEvent.from_dict(event.to_dict())
    assert restored == event


def test_event_to_dict_shape():
    event = VersionedEvent.create(1, "TestEvent", {"k": "v"}, FixedClock(INSTANT))
    assert event.to_dict() == {
        "version": 1,
        "event_type": "TestEvent",
        "data": {"k": "v"},
        "metadata": {"occurred_at": "2024-05-01T12:30:15.123456Z"},
    }


def test_event_from_dict_missing_field():
    with pytest.raises(ValueError):
        VersionedEvent.from_dict({"version": 1, "event_type": "X", "data": {}})


def test_event_from_dict_bad_version():
    with pytest.raises(ValueError):
        VersionedEvent.from_dict(
            {"version": "1", "event_type": "X", "data": {}, "metadata": {"occurred_at": "2024-05-01T12:30:15Z"}}
        )


@pytest.mark.parametrize("version", [-1, 2**32])
def test_event_version_out_of_range(version):
    with pytest.raises(ValueError):
        VersionedEvent(version, "X", {})