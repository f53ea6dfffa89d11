"""Tests for the validated value records.

These tests verify that UserProfile, Request and Response accept valid
input, reject invalid input with ValidationError, and cannot be mutated.
"""

from datetime import datetime

import pytest

from agent.models import (
    CommandType,
    Request,
    Response,
    UserProfile,
    ValidationError,
    generate_response,
)

NOW = datetime(2024, 5, 1, 9, 30, 0)


# ── UserProfile ──────────────────────────────────────────────────────────────


@pytest.mark.parametrize("name, age", [("John", 18), ("Becky", 22), ("A", 1), ("Old", 120)])
def test_user_profile_accepts_valid_fields(name, age):
    """Valid name/age pairs construct and read back unchanged."""
    user = UserProfile(name=name, age=age, preferences={"mood": "sad"}, is_premium=True)

    assert user.name == name
    assert user.age == age
    assert user.preferences == {"mood": "sad"}
    assert user.is_premium is True


@pytest.mark.parametrize("age", [0, -1, -30])
def test_user_profile_rejects_non_positive_age(age):
    """Age must be strictly positive."""
    with pytest.raises(ValidationError):
        UserProfile(name="John", age=age)


def test_user_profile_rejects_empty_name():
    """An empty name is rejected."""
    with pytest.raises(ValidationError):
        UserProfile(name="", age=18)


def test_user_profile_rejects_missing_name():
    """A missing name is rejected."""
    with pytest.raises(ValidationError):
        UserProfile(name=None, age=18)


def test_validation_error_is_descriptive():
    """The raised error names the offending field."""
    with pytest.raises(ValidationError) as exc_info:
        UserProfile(name="John", age=0)
    assert "age" in str(exc_info.value)


def test_validation_error_is_a_value_error():
    """Callers can catch validation failures as ValueError."""
    with pytest.raises(ValueError):
        UserProfile(name="", age=18)


def test_preferences_default_to_empty():
    """Omitted or None preferences become an empty mapping."""
    assert dict(UserProfile(name="John", age=18).preferences) == {}
    assert dict(UserProfile(name="John", age=18, preferences=None).preferences) == {}


def test_preference_lookup_with_default():
    """preference() returns the stored value, or the caller's default."""
    user = UserProfile(name="John", age=18, preferences={"mood": "sad"})

    assert user.preference("mood", "average") == "sad"
    assert user.preference("goal", "general fitness") == "general fitness"


def test_preferences_are_read_only():
    """The preferences mapping cannot be modified after construction."""
    user = UserProfile(name="John", age=18, preferences={"mood": "sad"})

    with pytest.raises(TypeError):
        user.preferences["mood"] = "happy"


def test_preferences_are_copied_from_input():
    """Mutating the caller's dict does not leak into the profile."""
    prefs = {"mood": "sad"}
    user = UserProfile(name="John", age=18, preferences=prefs)
    prefs["mood"] = "happy"

    assert user.preference("mood", "average") == "sad"


def test_user_profile_is_frozen():
    """Fields cannot be reassigned."""
    user = UserProfile(name="John", age=18)

    with pytest.raises(ValidationError):
        user.name = "Jane"


@pytest.mark.parametrize("age", [True, "18", 18.0])
def test_user_profile_rejects_non_integer_age(age):
    """Age must be a real int; bools, strings and floats are not coerced."""
    with pytest.raises(ValidationError):
        UserProfile(name="John", age=age)


def test_user_profile_is_hashable():
    """Equal profiles hash equally and can be used as set members."""
    first = UserProfile(name="John", age=18, preferences={"mood": "sad", "goal": "strength"})
    second = UserProfile(name="John", age=18, preferences={"goal": "strength", "mood": "sad"})

    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1


def test_user_profile_model_dump_uses_plain_dict():
    """model_dump returns preferences as a plain dict without warnings."""
    import warnings

    user = UserProfile(name="John", age=18, preferences={"mood": "sad"}, is_premium=True)

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        dumped = user.model_dump()
        dumped_json = user.model_dump_json()

    assert dumped == {
        "name": "John",
        "age": 18,
        "preferences": {"mood": "sad"},
        "is_premium": True,
    }
    assert type(dumped["preferences"]) is dict
    assert '"preferences":{"mood":"sad"}' in dumped_json


def test_membership_label():
    """Premium users are labelled as premium members."""
    assert UserProfile(name="John", age=18, is_premium=True).membership_label == "Premium Member"
    assert UserProfile(name="Becky", age=22).membership_label == "Standard Member"


# ── Request ──────────────────────────────────────────────────────────────────


@pytest.mark.parametrize("command_type", list(CommandType))
def test_request_accepts_valid_fields(command_type):
    """A request with all fields present constructs."""
    request = Request(input_text="Play some music", timestamp=NOW, command_type=command_type)

    assert request.input_text == "Play some music"
    assert request.timestamp == NOW
    assert request.command_type is command_type


@pytest.mark.parametrize(
    "missing",
    [
        {"input_text": ""},
        {"input_text": None},
        {"timestamp": None},
        {"command_type": None},
    ],
)
def test_request_rejects_missing_field(missing):
    """Omitting any one field fails."""
    fields = {"input_text": "Play some music", "timestamp": NOW, "command_type": CommandType.MUSIC}
    fields.update(missing)

    with pytest.raises(ValidationError):
        Request(**fields)


def test_request_create_uses_injected_clock():
    """Request.create stamps the request with the clock's time."""
    request = Request.create("Suggest a workout", CommandType.FITNESS, clock=lambda: NOW)

    assert request.timestamp == NOW
    assert request.command_type is CommandType.FITNESS


def test_request_create_rejects_missing_command_type():
    """Request.create still validates its fields."""
    with pytest.raises(ValidationError):
        Request.create("Suggest a workout", None, clock=lambda: NOW)


def test_command_type_parses_from_text():
    """Command types can be looked up by their lower-case value."""
    assert CommandType("music") is CommandType.MUSIC
    assert CommandType("fitness") is CommandType.FITNESS


# ── Response ─────────────────────────────────────────────────────────────────


@pytest.mark.parametrize("confidence", [0.0, 0.1, 0.88, 1.0])
def test_response_accepts_confidence_in_range(confidence):
    """Confidence values within [0, 1], boundaries included, are accepted."""
    response = Response(message="ok", confidence=confidence, action_performed=True)
    assert response.confidence == confidence


@pytest.mark.parametrize("confidence", [-0.01, -1.0, 1.01, 88.0])
def test_response_rejects_confidence_out_of_range(confidence):
    """Confidence values outside [0, 1] are rejected."""
    with pytest.raises(ValidationError):
        Response(message="ok", confidence=confidence, action_performed=True)


def test_response_rejects_empty_message():
    """An empty message is rejected."""
    with pytest.raises(ValidationError):
        Response(message="", confidence=0.5, action_performed=False)


def test_generate_response_builds_response():
    """generate_response is a thin validated factory."""
    response = generate_response("hello", 0.5, True)

    assert response == Response(message="hello", confidence=0.5, action_performed=True)
    with pytest.raises(ValidationError):
        generate_response("hello", 2.0, True)
