"""
CLI Application Logic

Provides an interactive command-line interface for recording thoughts in the
Deliberate Thinking ledger.
"""
import logging
from typing import Optional
from core import DeliberateThinking
from core.errors import DeliberateThinkingError
from core.models import ThoughtRequest

logger = logging.getLogger(__name__)


def _optional_int(prompt: str) -> Optional[int]:
    raw = input(prompt).strip()
    return int(raw) if raw else None


def _yes(prompt: str, default: bool = True) -> bool:
    raw = input(prompt).strip().lower()
    if not raw:
        return default
    return raw in ("y", "yes", "true", "1")


def prompt_thought() -> Optional[ThoughtRequest]:
    """Ask for the fields of one thought. Returns None if the thought text is empty."""
    thought = input("\n💭 Thought: ").strip()
    if not thought:
        return None
    thought_number = int(input("🔢 Thought number: ").strip())
    total_thoughts = int(input("🧮 Total thoughts: ").strip())
    next_thought_needed = _yes("➡️  Next thought needed? [Y/n]: ")
    revises_thought = _optional_int("🔄 Revises thought (Enter to skip): ")
    branch_from_thought = _optional_int("🌿 Branch from thought (Enter to skip): ")
    branch_id = (input("🏷️  Branch ID (Enter to skip): ").strip() or None) if branch_from_thought else None
    return ThoughtRequest(
        thought=thought,
        thought_number=thought_number,
        total_thoughts=total_thoughts,
        next_thought_needed=next_thought_needed,
        is_revision=True if revises_thought is not None else None,
        revises_thought=revises_thought,
        branch_from_thought=branch_from_thought,
        branch_id=branch_id,
    )


async def interactive_session(system: DeliberateThinking) -> None:
    """
    Run an interactive session against a thought ledger.

    Args:
        system: DeliberateThinking instance to record into
    """
    logger.info("\n%s", "=" * 70)
    logger.info("🧠 INTERACTIVE DELIBERATE THINKING")
    logger.info("%s", "=" * 70)
    logger.info("Commands: 'think' to add a thought, 'exit' to quit\n")

    while True:
        try:
            step = input("🔄 Step (💭 think, 📝 history, 🌿 branches, 🔍 status, 👋 exit): ").strip().lower()

            if step == "think":
                request = prompt_thought()
                if request is None:
                    continue
                try:
                    result = await system.submit_json(request)
                except DeliberateThinkingError as e:
                    logger.error("❌ %s", e.message)
                    continue
                logger.info("\n✅ %s", result)
                continue

            if step == "exit":
                logger.info("\n👋 Goodbye!")
                break

            if step == "history":
                history = await system.get_history()
                logger.info("\n📝 Thought History:\n%s", history)
                continue

            if step == "branches":
                branches = await system.list_branches()
                logger.info("\n🌿 Branches:\n%s", branches)
                continue

            if step == "status":
                status = await system.get_status()
                logger.info("\n🔍 Status:\n%s", status)
                continue

            logger.warning("❓ Unknown command: %s", step)
        except (KeyboardInterrupt, EOFError):
            logger.info("\n👋 Goodbye!")
            break
        except ValueError as e:
            logger.error("❌ Invalid input: %s", e)


async def run_cli(interactive: bool = True) -> DeliberateThinking:
    """
    Run the CLI application.

    Args:
        interactive: Whether to start interactive session

    Returns:
        The DeliberateThinking instance used by the session
    """
    logger.info("=" * 70)
    logger.info("🚀 DELIBERATE THINKING CLI")
    logger.info("=" * 70)

    system = DeliberateThinking()

    if interactive:
        await interactive_session(system)

    return system


async def main() -> None:
    """Default CLI entry point with standard configuration."""
    await run_cli(interactive=True)
