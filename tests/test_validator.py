import pytest

from corbusier.validator import MessageValidator, ValidationConfig


def test_default_config_values():
    config = ValidationConfig()
    assert config.max_message_size_bytes == 1024 * 1024
    assert config.max_content_parts == 100
    assert config.max_text_length == 100_000
    assert config.allow_empty_text is False


def test_lenient_config_allows_empty_text():
    config = ValidationConfig.lenient()
    assert config.allow_empty_text is True


def test_lenient_config_keeps_default_limits():
    lenient = ValidationConfig.lenient()
    default = ValidationConfig()
    assert lenient.max_message_size_bytes == default.max_message_size_bytes
    assert lenient.max_content_parts == default.max_content_parts
    assert lenient.max_text_length == default.max_text_length


def test_strict_config_has_reduced_limits():
    config = ValidationConfig.strict()
    assert config.max_message_size_bytes == 256 * 1024
    assert config.max_content_parts == 20
    assert config.max_text_length == 10_000
    assert config.allow_empty_text is False


def test_config_override_keeps_other_defaults():
    config = ValidationConfig(max_message_size_bytes=100)
    assert config.max_message_size_bytes == 100
    assert config.max_content_parts == ValidationConfig().max_content_parts


def test_message_validator_is_abstract():
    with pytest.raises(TypeError):
        MessageValidator()