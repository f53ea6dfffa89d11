"""Music tool — builds a playlist recommendation for a mood."""

from langchain_core.tools import tool


@tool
def recommend_playlist(mood: str) -> str:
    """Recommend a playlist that fits the listener's mood.

    Use this when the user asks for music to be played or suggested.

    Args:
        mood: The listener's current mood, e.g. 'sad', 'happy', 'average'.
    """
    return f"OK, generating a playlist based on a {mood} mood."
