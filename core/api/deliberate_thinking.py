"""
Core API for the Deliberate Thinking system

This is the interface-agnostic entry point used by the MCP server, the HTTP
server, the CLI and the LangChain tool adapter.
"""
import asyncio
import logging
from typing import Any, Dict, List, Optional

from core.errors import SerializationError
from core.ledger import ThoughtLedger, validate_request
from core.models import Thought, ThoughtRequest, ThoughtResponse
from core.utils.response_formatter import log_thought, serialize_response

logger = logging.getLogger(__name__)

TOOL_NAME = "deliberatethinking"

TOOL_DESCRIPTION = """A detailed tool for dynamic and reflective problem-solving through thoughts.
This tool helps analyze problems through a flexible thinking process that can adapt and evolve.
Each thought can build on, question, or revise previous insights as understanding deepens.

When to use this tool:
- Breaking down complex problems into steps
- Planning and design with room for revision
- Analysis that might need course correction
- Problems where the full scope might not be clear initially
- Problems that require a multi-step solution
- Tasks that need to maintain context over multiple steps
- Situations where irrelevant information needs to be filtered out

Key features:
- You can adjust totalThoughts up or down as you progress
- You can question or revise previous thoughts
- You can add more thoughts even after reaching what seemed like the end
- You can express uncertainty and explore alternative approaches
- Not every thought needs to build linearly - you can branch or backtrack
- Generates a solution hypothesis
- Verifies the hypothesis based on the Chain of Thought steps
- Repeats the process until satisfied
- Provides a correct answer"""


class DeliberateThinking:
    """
    Shared thought ledger behind a single lock.

    Each submission runs validate, dispatch, mutate and response projection
    as one critical section, so a response always reflects exactly the state
    its own mutation produced.

    Usage:
        system = DeliberateThinking()
        response = await system.submit(ThoughtRequest(
            thought="Look at the failing test first",
            thoughtNumber=1,
            totalThoughts=3,
            nextThoughtNeeded=True,
        ))
    """

    def __init__(self, ledger: Optional[ThoughtLedger] = None):
        self.ledger = ledger if ledger is not None else ThoughtLedger()
        self._lock = asyncio.Lock()

    async def submit(self, request: ThoughtRequest) -> ThoughtResponse:
        """
        Record one thinking step.

        Args:
            request: The step and its sequence metadata

        Returns:
            Echoed step fields plus the known branches and the active timeline length

        Raises:
            InvalidParameterError: If a numeric field is below 1 (nothing is recorded)
        """
        async with self._lock:
            validate_request(request)
            kind = self.ledger.submit(Thought.from_request(request))
            response = ThoughtResponse(
                thought_number=request.thought_number,
                total_thoughts=request.total_thoughts,
                next_thought_needed=request.next_thought_needed,
                branches=self.ledger.branch_names(),
                thought_history_length=self.ledger.history_length(),
            )

        logger.debug("Applied %s submission", kind.value)
        log_thought(request)
        return response

    async def submit_json(self, request: ThoughtRequest) -> str:
        """
        Record one thinking step and return the response as JSON text.

        Raises:
            InvalidParameterError: If a numeric field is below 1
            SerializationError: If encoding fails; the step has already been recorded
        """
        response = await self.submit(request)
        try:
            return serialize_response(response)
        except ValueError as e:
            logger.error("Failed to serialize response: %s", e)
            raise SerializationError(f"Failed to serialize response: {e}") from e

    async def get_history(self) -> List[Dict[str, Any]]:
        """Return the active timeline in wire format."""
        async with self._lock:
            return [t.to_serializable() for t in self.ledger.current_timeline()]

    async def list_branches(self) -> List[str]:
        async with self._lock:
            return self.ledger.branch_names()

    async def get_status(self) -> Dict[str, Any]:
        """Snapshot of the ledger shape for inspection surfaces."""
        async with self._lock:
            return {
                "active_branch": self.ledger.active_branch,
                "branch_count": len(self.ledger.branch_names()),
                "main_length": len(self.ledger.main_timeline()),
                "history_length": self.ledger.history_length(),
            }
