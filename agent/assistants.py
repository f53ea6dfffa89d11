"""Assistant variants.

Each assistant is a closed tag (:class:`AssistantKind`) plus a display
name. The command type an assistant understands is fixed by its kind;
requests of any other type are answered by the generic fallback.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from agent import config
from agent.models import CommandType, UserProfile


class AssistantKind(str, Enum):
    GENERIC = "generic"
    MUSIC = "music"
    FITNESS = "fitness"


# Command type served by each kind. GENERIC serves none.
HANDLED_COMMANDS: dict[AssistantKind, Optional[CommandType]] = {
    AssistantKind.GENERIC: None,
    AssistantKind.MUSIC: CommandType.MUSIC,
    AssistantKind.FITNESS: CommandType.FITNESS,
}

DEFAULT_NAMES: dict[AssistantKind, str] = {
    AssistantKind.GENERIC: "AIAssistant",
    AssistantKind.MUSIC: "MusicAssistantAI",
    AssistantKind.FITNESS: "FitnessAssistantAI",
}


class Assistant(BaseModel):
    """An assistant variant and the name it reports itself by."""

    model_config = ConfigDict(frozen=True)

    kind: AssistantKind
    name: str = Field(min_length=1)

    @classmethod
    def of(cls, kind: AssistantKind) -> "Assistant":
        """Build an assistant of *kind* with its default name."""
        return cls(kind=kind, name=DEFAULT_NAMES[kind])

    @property
    def handled_command(self) -> Optional[CommandType]:
        return HANDLED_COMMANDS[self.kind]

    def handles(self, command_type: CommandType) -> bool:
        return self.handled_command is command_type


def greet(user: UserProfile) -> str:
    """Return the welcome line shared by every assistant."""
    return config.GREETING_TEMPLATE.format(name=user.name)


generic_assistant = Assistant.of(AssistantKind.GENERIC)
music_assistant = Assistant.of(AssistantKind.MUSIC)
fitness_assistant = Assistant.of(AssistantKind.FITNESS)
