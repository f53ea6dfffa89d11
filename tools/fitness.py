"""Fitness tool — suggests a workout for a training goal."""

from langchain_core.tools import tool


@tool
def suggest_workout(goal: str) -> str:
    """Suggest a workout tailored to a fitness goal.

    Use this when the user asks for exercise or training advice.

    Args:
        goal: The user's training goal, e.g. 'weight loss', 'general fitness'.
    """
    return f"OK based on the goal you entered of {goal} , here is your recommended workout."
