"""Validated value records exchanged between the driver and the assistants.

Every record is a frozen pydantic model. Invalid input never produces an
object: the constructor raises :class:`ValidationError` describing the
offending field.
"""

from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_serializer,
    field_validator,
)

__all__ = [
    "CommandType",
    "Request",
    "Response",
    "UserProfile",
    "ValidationError",
    "generate_response",
]


class CommandType(str, Enum):
    """Domain of a user request."""

    MUSIC = "music"
    FITNESS = "fitness"


class UserProfile(BaseModel):
    """A user and their free-form preferences.

    Attributes:
        name: Display name, never empty.
        age: Age in years, strictly positive.
        preferences: Read-only mapping of preference key to value.
        is_premium: Whether the user holds a premium membership.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    age: int = Field(gt=0, strict=True)
    preferences: Mapping[str, str] = Field(default_factory=dict)
    is_premium: bool = False

    @field_validator("preferences", mode="before")
    @classmethod
    def _none_means_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("preferences", mode="after")
    @classmethod
    def _freeze_preferences(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @field_serializer("preferences")
    def _dump_preferences(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)

    def __hash__(self) -> int:
        return hash(
            (self.name, self.age, tuple(sorted(self.preferences.items())), self.is_premium)
        )

    def preference(self, key: str, default: str) -> str:
        """Return the preference stored under *key*, or *default*."""
        return self.preferences.get(key, default)

    @property
    def membership_label(self) -> str:
        return "Premium Member" if self.is_premium else "Standard Member"


class Request(BaseModel):
    """One user utterance tagged with the domain it belongs to."""

    model_config = ConfigDict(frozen=True)

    input_text: str = Field(min_length=1)
    timestamp: datetime
    command_type: CommandType

    @classmethod
    def create(
        cls,
        input_text: str,
        command_type: Optional[CommandType],
        clock: Callable[[], datetime] = datetime.now,
    ) -> "Request":
        """Build a request stamped with the current time of *clock*."""
        return cls(input_text=input_text, timestamp=clock(), command_type=command_type)


class Response(BaseModel):
    """An assistant's reply."""

    model_config = ConfigDict(frozen=True)

    message: str = Field(min_length=1)
    confidence: float = Field(ge=0.0, le=1.0)
    action_performed: bool


def generate_response(message: str, confidence: float, action_performed: bool) -> Response:
    return Response(
        message=message,
        confidence=confidence,
        action_performed=action_performed,
    )
