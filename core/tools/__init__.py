"""Tools package exposing the thought ledger to LangChain/LangGraph agents.

`build_thinking_tools(system)` returns `@tool`-decorated callables bound to a
shared `DeliberateThinking` instance.
"""

from .thinking_tools import build_thinking_tools

__all__ = ["build_thinking_tools"]
