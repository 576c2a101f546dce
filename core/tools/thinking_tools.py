import asyncio
import concurrent.futures
import logging
from typing import Any, Coroutine, List, Optional
from langchain_core.tools import BaseTool, StructuredTool

from core.api import DeliberateThinking
from core.errors import DeliberateThinkingError
from core.models import ThoughtRequest

logger = logging.getLogger(__name__)


def _run_async(coro: Coroutine[Any, Any, str]) -> str:
    """Run a coroutine from sync code, in a worker thread if a loop is already running."""
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)
    with concurrent.futures.ThreadPoolExecutor(max_workers=1) as pool:
        return pool.submit(asyncio.run, coro).result()


def build_thinking_tools(system: DeliberateThinking) -> List[BaseTool]:
    def deliberate_thinking(
        thought: str,
        next_thought_needed: bool,
        thought_number: int,
        total_thoughts: int,
        is_revision: Optional[bool] = None,
        revises_thought: Optional[int] = None,
        branch_from_thought: Optional[int] = None,
        branch_id: Optional[str] = None,
        needs_more_thoughts: Optional[bool] = None,
    ) -> str:
        """Record one step of step-by-step reasoning. Steps can be revised (revises_thought) or branched into an alternate line (branch_from_thought + branch_id). Returns JSON with the step numbers, known branches and history length."""
        return _run_async(adeliberate_thinking(**locals()))

    async def adeliberate_thinking(
        thought: str,
        next_thought_needed: bool,
        thought_number: int,
        total_thoughts: int,
        is_revision: Optional[bool] = None,
        revises_thought: Optional[int] = None,
        branch_from_thought: Optional[int] = None,
        branch_id: Optional[str] = None,
        needs_more_thoughts: Optional[bool] = None,
    ) -> str:
        logger.info("🧠 Tool 'deliberatethinking' called for step %d/%d", thought_number, total_thoughts)
        request = ThoughtRequest(
            thought=thought,
            next_thought_needed=next_thought_needed,
            thought_number=thought_number,
            total_thoughts=total_thoughts,
            is_revision=is_revision,
            revises_thought=revises_thought,
            branch_from_thought=branch_from_thought,
            branch_id=branch_id,
            needs_more_thoughts=needs_more_thoughts,
        )
        try:
            return await system.submit_json(request)
        except DeliberateThinkingError as e:
            logger.warning("Tool 'deliberatethinking' rejected step: %s", e.message)
            return f"❌ {e.message}"

    tool = StructuredTool.from_function(
        func=deliberate_thinking,
        coroutine=adeliberate_thinking,
        name="deliberatethinking",
    )
    return [tool]
