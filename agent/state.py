"""Dispatch state definition.

The state is the data structure that flows through the dispatch graph for
a single request. Nothing is carried over between requests.
"""

from typing import Optional, TypedDict

from agent.assistants import Assistant
from agent.models import Request, Response, UserProfile


class DispatchState(TypedDict, total=False):
    """State for one pass through the dispatch graph.

    Attributes:
        assistant: The assistant variant asked to handle the request.
        user: Profile of the user making the request (read-only).
        request: The request being answered.
        response: Reply produced by whichever handler node ran.
        handler: Name of the handler node that produced the response.
    """

    assistant: Assistant
    user: UserProfile
    request: Request
    response: Optional[Response]
    handler: str
