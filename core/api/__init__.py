"""
Core API for the Deliberate Thinking System.

This package provides a clean, interface-agnostic API that can be used
by the MCP server, the HTTP server, the CLI or any other interface.
"""
from .deliberate_thinking import DeliberateThinking, TOOL_DESCRIPTION, TOOL_NAME

__all__ = ["DeliberateThinking", "TOOL_DESCRIPTION", "TOOL_NAME"]
