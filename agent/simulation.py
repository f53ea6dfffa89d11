"""Simulation driver.

Builds the fixed sample of users and requests, pairs each one with an
assistant, dispatches it and prints a short report per request.
"""

import sys
from datetime import datetime
from typing import Callable, NamedTuple, Optional, TextIO

from agent.assistants import Assistant, fitness_assistant, greet, music_assistant
from agent.graph import handle_request
from agent.models import CommandType, Request, Response, UserProfile, ValidationError


class Scenario(NamedTuple):
    assistant: Assistant
    user: UserProfile
    request: Request


def build_scenarios(clock: Callable[[], datetime] = datetime.now) -> list[Scenario]:
    """Return the sample (assistant, user, request) triples.

    Raises:
        ValidationError: If any sample record is invalid.
    """
    john = UserProfile(name="John", age=18, preferences={"mood": "sad"}, is_premium=True)
    becky = UserProfile(
        name="Becky", age=22, preferences={"goal": "weight loss"}, is_premium=False
    )

    play_music = Request.create("Play some music", CommandType.MUSIC, clock=clock)
    suggest_workout = Request.create("Suggest a workout", CommandType.FITNESS, clock=clock)

    return [
        Scenario(music_assistant, john, play_music),
        Scenario(fitness_assistant, becky, suggest_workout),
    ]


def format_report(
    assistant: Assistant,
    user: UserProfile,
    request: Request,
    response: Response,
) -> list[str]:
    """Lines printed for one handled request, blank separator included."""
    return [
        assistant.name,
        greet(user),
        f"Response: {response.message}",
        f"Confidence Percentage: {response.confidence}%",
        f"Action Performed: {response.action_performed}",
        f"User Premium Status: {user.membership_label}",
        f"Request Timestamp: {request.timestamp.isoformat()}",
        "",
    ]


def run(out: Optional[TextIO] = None, clock: Callable[[], datetime] = datetime.now) -> None:
    """Dispatch every sample scenario and print its report to *out* (stdout by default)."""
    for assistant, user, request in build_scenarios(clock):
        response = handle_request(assistant, user, request)
        for line in format_report(assistant, user, request, response):
            print(line, file=out)


def main() -> None:
    """Console entry point."""
    try:
        run()
    except ValidationError as exc:
        sys.exit(f"Invalid sample data: {exc}")


if __name__ == "__main__":
    main()
