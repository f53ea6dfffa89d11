"""Centralized assistant configuration.

Reads from environment variables with sensible defaults so that the
simulation works out of the box while remaining customizable.
"""

import os

from dotenv import load_dotenv

load_dotenv()


# ── Response confidence ───────────────────────────────────────────────────────
MATCH_CONFIDENCE: float = float(os.getenv("ASSISTANT_MATCH_CONFIDENCE", "0.88"))
FALLBACK_CONFIDENCE: float = float(os.getenv("ASSISTANT_FALLBACK_CONFIDENCE", "0.1"))

# ── Fallback reply ────────────────────────────────────────────────────────────
FALLBACK_MESSAGE: str = os.getenv(
    "ASSISTANT_FALLBACK_MESSAGE", "I'm not to sure what you're asking."
)

# ── Preference defaults ───────────────────────────────────────────────────────
DEFAULT_MOOD: str = os.getenv("ASSISTANT_DEFAULT_MOOD", "average")
DEFAULT_GOAL: str = os.getenv("ASSISTANT_DEFAULT_GOAL", "general fitness")

# ── Dispatch trace ────────────────────────────────────────────────────────────
DISPATCH_LOG_ENABLED: bool = os.getenv("ASSISTANT_DISPATCH_LOG", "").lower() in (
    "1",
    "true",
    "yes",
)

# ── Greeting ──────────────────────────────────────────────────────────────────
GREETING_TEMPLATE: str = "Welcome {name}! How can I be of service today?"
