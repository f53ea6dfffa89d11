"""Graph node functions.

Each function takes the current DispatchState and returns a partial state
update. LangGraph merges the returned dict into the shared state
automatically. Specialised nodes share their name with the tool they run.
"""

from agent import config
from agent.models import generate_response
from tools import get_tool


def _run_tool(name: str, **tool_args: str) -> dict:
    message = get_tool(name).invoke(tool_args)
    return {
        "response": generate_response(message, config.MATCH_CONFIDENCE, True),
        "handler": name,
    }


def recommend_playlist_node(state: dict) -> dict:
    """Answer a music request using the user's ``mood`` preference."""
    mood = state["user"].preference("mood", config.DEFAULT_MOOD)
    return _run_tool("recommend_playlist", mood=mood)


def suggest_workout_node(state: dict) -> dict:
    """Answer a fitness request using the user's ``goal`` preference."""
    goal = state["user"].preference("goal", config.DEFAULT_GOAL)
    return _run_tool("suggest_workout", goal=goal)


def fallback_node(state: dict) -> dict:
    """Low-confidence reply for requests the assistant does not recognise."""
    return {
        "response": generate_response(
            config.FALLBACK_MESSAGE, config.FALLBACK_CONFIDENCE, False
        ),
        "handler": "fallback",
    }
