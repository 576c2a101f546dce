from typing import Optional

from core.errors import InvalidParameterError
from core.models import ThoughtRequest

MIN_THOUGHT_NUMBER = 1


def validate_min_value(field: str, value: Optional[int], minimum: int = MIN_THOUGHT_NUMBER) -> None:
    """Raise InvalidParameterError if `value` is set and below `minimum`."""
    if value is not None and value < minimum:
        raise InvalidParameterError(field, minimum)


def validate_request(request: ThoughtRequest) -> None:
    """Check range rules on a request. Unknown revision or branch targets are not errors."""
    validate_min_value("thoughtNumber", request.thought_number)
    validate_min_value("totalThoughts", request.total_thoughts)
    validate_min_value("revisesThought", request.revises_thought)
    validate_min_value("branchFromThought", request.branch_from_thought)
