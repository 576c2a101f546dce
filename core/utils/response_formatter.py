"""Utilities for turning ledger results into wire text and log lines."""

from __future__ import annotations
from typing import List
import logging

from core.models import ThoughtRequest, ThoughtResponse

logger = logging.getLogger(__name__)


def serialize_response(response: ThoughtResponse) -> str:
    """Encode a response as compact JSON using the wire field names.

    Raises whatever pydantic raises on failure (a ValueError subclass); the
    caller decides how to surface it.
    """
    return response.model_dump_json(by_alias=True)


def format_thought_log(request: ThoughtRequest) -> List[str]:
    """Build the informational lines logged for one submission."""
    lines = [
        f"Deliberate Thinking Step {request.thought_number}/{request.total_thoughts}: {request.thought}"
    ]
    if request.branch_id is not None:
        lines.append(f"  Branch: {request.branch_id}")
    if request.is_revision and request.revises_thought is not None:
        lines.append(f"  Revision of thought {request.revises_thought}")
    return lines


def log_thought(request: ThoughtRequest) -> None:
    for line in format_thought_log(request):
        logger.info(line)
