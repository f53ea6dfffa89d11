"""JSON-lines trace of every dispatch.

Entries go to a text stream (stderr by default) and only when
``ASSISTANT_DISPATCH_LOG`` is enabled. Nothing is written to disk.
"""

import json
import sys
import time
from typing import Optional, TextIO

from agent import config


class DispatchLogger:
    """Append-only JSON-lines logger for every handled request."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        enabled: bool = config.DISPATCH_LOG_ENABLED,
    ):
        self._stream = stream
        self.enabled = enabled

    def log(
        self,
        assistant_name: str,
        command: str,
        handler: str,
        confidence: float,
    ) -> None:
        """Write a single log entry."""
        if not self.enabled:
            return
        entry = {
            "ts": time.strftime("%Y-%m-%dT%H:%M:%S%z"),
            "assistant": assistant_name,
            "command": command,
            "handler": handler,
            "confidence": confidence,
        }
        stream = self._stream if self._stream is not None else sys.stderr
        stream.write(json.dumps(entry) + "\n")


# Shared singleton
dispatch_logger = DispatchLogger()
