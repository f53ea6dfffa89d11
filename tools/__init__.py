"""Recommendation tool lookup.

Any public module in this package may define `@tool`-decorated functions.
Handler nodes resolve tools by name, so a new recommendation behaviour only
needs a module here and a node that names its tool.
"""

import importlib
import pkgutil
from functools import lru_cache

from langchain_core.tools import BaseTool


@lru_cache(maxsize=None)
def _tools_by_name() -> dict[str, BaseTool]:
    found: dict[str, BaseTool] = {}
    for module_info in pkgutil.iter_modules(__path__):
        if module_info.name.startswith("_"):
            continue
        module = importlib.import_module(f"{__name__}.{module_info.name}")
        for value in vars(module).values():
            if isinstance(value, BaseTool):
                found[value.name] = value
    return found


def get_all_tools() -> list[BaseTool]:
    return list(_tools_by_name().values())


def get_tool(name: str) -> BaseTool:
    """Return the tool registered as *name*.

    Raises:
        KeyError: If no module in this package defines a tool by that name.
    """
    tools = _tools_by_name()
    if name not in tools:
        raise KeyError(f"Unknown tool '{name}'. Available: {', '.join(sorted(tools))}")
    return tools[name]
