import json

import pytest

from corbusier.role import Role


@pytest.mark.parametrize(
    ("role", "can_call_tools", "is_human", "is_system", "is_tool"),
    [
        (Role.USER, False, True, False, False),
        (Role.ASSISTANT, True, False, False, False),
        (Role.TOOL, False, False, False, True),
        (Role.SYSTEM, False, False, True, False),
    ],
)
def test_role_capabilities(role, can_call_tools, is_human, is_system, is_tool):
    assert role.can_call_tools() == can_call_tools
    assert role.is_human() == is_human
    assert role.is_system() == is_system
    assert role.is_tool() == is_tool


@pytest.mark.parametrize(
    ("role", "expected"),
    [
        (Role.USER, "user"),
        (Role.ASSISTANT, "assistant"),
        (Role.TOOL, "tool"),
        (Role.SYSTEM, "system"),
    ],
)
def test_role_display(role, expected):
    assert str(role) == expected


@pytest.mark.parametrize("role", list(Role))
def test_role_serialization_round_trip(role):
    encoded = json.dumps(role.value)
    assert Role(json.loads(encoded)) is role


def test_unknown_role_is_rejected():
    with pytest.raises(ValueError):
        Role("moderator")