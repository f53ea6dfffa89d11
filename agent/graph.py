"""LangGraph graph construction.

Builds a single-step dispatch graph. The entry router picks exactly one
handler node from the assistant variant and the request's command type:

    _route_request ─┬─ music assistant, MUSIC ─────▶ [recommend_playlist] ──▶ END
                    ├─ fitness assistant, FITNESS ─▶ [suggest_workout] ─────▶ END
                    └─ anything else ──────────────▶ [fallback] ────────────▶ END

The graph is compiled without a checkpointer: every request is handled
independently.
"""

from langgraph.graph import END, StateGraph

from agent.assistants import Assistant
from agent.dispatch_log import dispatch_logger
from agent.models import CommandType, Request, Response, UserProfile
from agent.nodes import fallback_node, recommend_playlist_node, suggest_workout_node
from agent.state import DispatchState

# Handler node for each command type an assistant can recognise.
COMMAND_HANDLERS: dict[CommandType, str] = {
    CommandType.MUSIC: "recommend_playlist",
    CommandType.FITNESS: "suggest_workout",
}


def _route_request(state: dict) -> str:
    """Route to the specialised handler, or to the fallback."""
    assistant: Assistant = state["assistant"]
    command_type = state["request"].command_type

    if assistant.handles(command_type):
        return COMMAND_HANDLERS[command_type]
    return "fallback"


def build_graph():
    """Construct and compile the dispatch graph."""
    workflow = StateGraph(DispatchState)

    # ── Nodes ──────────────────────────────────────────────────────────────
    workflow.add_node("recommend_playlist", recommend_playlist_node)
    workflow.add_node("suggest_workout", suggest_workout_node)
    workflow.add_node("fallback", fallback_node)

    # ── Edges ──────────────────────────────────────────────────────────────
    workflow.set_conditional_entry_point(
        _route_request,
        {
            "recommend_playlist": "recommend_playlist",
            "suggest_workout": "suggest_workout",
            "fallback": "fallback",
        },
    )

    workflow.add_edge("recommend_playlist", END)
    workflow.add_edge("suggest_workout", END)
    workflow.add_edge("fallback", END)

    return workflow.compile()


# Pre-built graph instance ready to use
graph = build_graph()


def handle_request(assistant: Assistant, user: UserProfile, request: Request) -> Response:
    """Dispatch *request* to *assistant* on behalf of *user*."""
    result = graph.invoke({"assistant": assistant, "user": user, "request": request})
    response = result["response"]
    dispatch_logger.log(
        assistant_name=assistant.name,
        command=request.command_type.value,
        handler=result["handler"],
        confidence=response.confidence,
    )
    return response
