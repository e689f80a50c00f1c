import pytest

from corbusier.errors import MalformedDataError, UnknownEventTypeError, UnsupportedVersionError
from corbusier.event import VersionedEvent
from corbusier.upgrader import MessageCreatedUpgrader, UpgraderRegistry


def test_message_created_upgrader_v1_to_v2():
    event = VersionedEvent.create(1, "MessageCreated", {"id": "123", "content": []})
    result = MessageCreatedUpgrader().upgrade(event)
    assert result.version == 2
    assert "metadata" in result.data


def test_message_created_upgrader_v2_unchanged():
    event = VersionedEvent.create(
        2, "MessageCreated", {"id": "123", "content": [], "metadata": {"key": "value"}}
    )
    result = MessageCreatedUpgrader().upgrade(event)
    assert result.version == 2
    assert result.data["metadata"] == {"key": "value"}


@pytest.mark.parametrize("version,expected", [(0, False), (1, True), (2, True), (3, False)])
def test_upgrader_version_support(version, expected):
    upgrader = MessageCreatedUpgrader()
    assert upgrader.supports_version(version) is expected
    assert upgrader.current_version() == 2


def test_upgrade_v1_to_v2_adds_metadata():
    event = VersionedEvent.create(
        1, "MessageCreated", {"id": "msg-123", "content": [{"type": "text", "text": "Hello"}]}
    )
    upgraded = MessageCreatedUpgrader().upgrade(event)
    assert upgraded.version == 2
    assert upgraded.data["metadata"] == {}
    assert upgraded.data["id"] == "msg-123"


def test_upgrade_v1_preserves_existing_metadata():
    event = VersionedEvent.create(1, "MessageCreated", {"id": "msg-123", "metadata": {"agent": "test"}})
    upgraded = MessageCreatedUpgrader().upgrade(event)
    assert upgraded.version == 2
    assert upgraded.data["metadata"] == {"agent": "test"}


def test_upgrade_preserves_event_metadata():
    event = VersionedEvent.create(1, "MessageCreated", {"id": "x"})
    upgraded = MessageCreatedUpgrader().upgrade(event)
    assert upgraded.metadata == event.metadata
    assert upgraded.event_type == "MessageCreated"


def test_upgrade_v2_unchanged():
    event = VersionedEvent.create(2, "MessageCreated", {"id": "msg-123", "metadata": {"key": "value"}})
    upgraded = MessageCreatedUpgrader().upgrade(event)
    assert upgraded.version == 2
    assert upgraded.data["metadata"] == {"key": "value"}


def test_upgrade_unsupported_version_fails():
    event = VersionedEvent.create(99, "MessageCreated", {})
    with pytest.raises(UnsupportedVersionError) as info:
        MessageCreatedUpgrader().upgrade(event)
    assert info.value.version == 99


def test_upgrade_malformed_data_fails():
    event = VersionedEvent.create(1, "MessageCreated", ["not", "an", "object"])
    with pytest.raises(MalformedDataError):
        MessageCreatedUpgrader().upgrade(event)


def test_registry_new_has_default_upgraders():
    assert UpgraderRegistry.with_defaults().has_upgrader("MessageCreated") is True


def test_registry_empty_has_no_upgraders():
    assert UpgraderRegistry().has_upgrader("MessageCreated") is False


def test_registry_register_custom_upgrader():
    registry = UpgraderRegistry()
    registry.register("CustomEvent", MessageCreatedUpgrader())
    assert registry.has_upgrader("CustomEvent") is True


def test_registry_upgrade_dispatches_correctly():
    registry = UpgraderRegistry.with_defaults()
    upgraded = registry.upgrade(VersionedEvent.create(1, "MessageCreated", {"id": "test"}))
    assert upgraded.version == 2


def test_registry_dispatches_to_correct_upgrader():
    registry = UpgraderRegistry.with_defaults()
    upgraded = registry.upgrade(VersionedEvent.create(1, "MessageCreated", {"id": "123"}))
    assert upgraded.version == 2


def test_registry_upgrade_unknown_type_fails():
    registry = UpgraderRegistry.with_defaults()
    with pytest.raises(UnknownEventTypeError) as info:
        registry.upgrade(VersionedEvent.create(1, "UnknownEventType", {}))
    assert info.value.event_type == "UnknownEventType"


def test_registry_returns_error_for_unknown_type():
    registry = UpgraderRegistry.with_defaults()
    with pytest.raises(UnknownEventTypeError) as info:
        registry.upgrade(VersionedEvent.create(1, "UnknownEvent", {}))
    assert info.value.event_type == "UnknownEvent"


def test_registry_upgrade_propagates_unsupported_version():
    registry = UpgraderRegistry.with_defaults()
    with pytest.raises(UnsupportedVersionError):
        registry.upgrade(VersionedEvent.create(7, "MessageCreated", {}))


def test_registry_current_version():
    registry = UpgraderRegistry.with_defaults()
    assert registry.current_version("MessageCreated") == 2
    assert registry.current_version("Unknown") is None