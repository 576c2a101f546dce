"""
Core Module - Deliberate Thinking Ledger

This is a pure library module with NO CLI or server code.
Import this in your CLI, server, or any other application.

Usage:
    from core import DeliberateThinking

    # submit() is async
    # await system.submit(request)
"""

from core.api import DeliberateThinking

__version__ = "0.1.0"

__all__ = ["DeliberateThinking", "__version__"]
