from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, StrictInt


class ThoughtRequest(BaseModel):
    """Parameters for a single deliberate thinking step.

    Integer fields are strict: booleans, floats and numeric strings are
    rejected. Their minimums are advertised in the JSON schema only; the core
    validator is what rejects out-of-range values.
    """

    model_config = ConfigDict(populate_by_name=True)

    thought: str = Field(..., description="Current thinking step")
    next_thought_needed: bool = Field(
        ..., alias="nextThoughtNeeded", description="Whether another thought step is needed"
    )
    thought_number: StrictInt = Field(
        ...,
        alias="thoughtNumber",
        description="Current thought number (minimum 1)",
        json_schema_extra={"minimum": 1},
    )
    total_thoughts: StrictInt = Field(
        ...,
        alias="totalThoughts",
        description="Estimated total thoughts needed (minimum 1)",
        json_schema_extra={"minimum": 1},
    )
    is_revision: Optional[bool] = Field(
        None, alias="isRevision", description="Whether this revises previous thinking"
    )
    revises_thought: Optional[StrictInt] = Field(
        None,
        alias="revisesThought",
        description="Which thought number is being reconsidered",
        json_schema_extra={"minimum": 1},
    )
    branch_from_thought: Optional[StrictInt] = Field(
        None,
        alias="branchFromThought",
        description="Branching point thought number",
        json_schema_extra={"minimum": 1},
    )
    branch_id: Optional[str] = Field(None, alias="branchId", description="Branch identifier")
    needs_more_thoughts: Optional[bool] = Field(
        None, alias="needsMoreThoughts", description="If more thoughts are needed"
    )


class ThoughtResponse(BaseModel):
    """Progress report returned after every submission."""

    model_config = ConfigDict(populate_by_name=True)

    thought_number: int = Field(..., alias="thoughtNumber")
    total_thoughts: int = Field(..., alias="totalThoughts")
    next_thought_needed: bool = Field(..., alias="nextThoughtNeeded")
    branches: List[str] = Field(default_factory=list)
    thought_history_length: int = Field(..., alias="thoughtHistoryLength")


@dataclass
class Thought:
    thought: str
    thought_number: int
    total_thoughts: int
    next_thought_needed: bool
    is_revision: Optional[bool] = None
    revises_thought: Optional[int] = None
    branch_from_thought: Optional[int] = None
    branch_id: Optional[str] = None
    needs_more_thoughts: Optional[bool] = None

    @classmethod
    def from_request(cls, request: ThoughtRequest) -> "Thought":
        return cls(
            thought=request.thought,
            thought_number=request.thought_number,
            total_thoughts=request.total_thoughts,
            next_thought_needed=request.next_thought_needed,
            is_revision=request.is_revision,
            revises_thought=request.revises_thought,
            branch_from_thought=request.branch_from_thought,
            branch_id=request.branch_id,
            needs_more_thoughts=request.needs_more_thoughts,
        )

    def to_serializable(self) -> Dict[str, Any]:
        """Wire-format dict; unset optional fields are left out."""
        payload: Dict[str, Any] = {
            "thought": self.thought,
            "thoughtNumber": self.thought_number,
            "totalThoughts": self.total_thoughts,
            "nextThoughtNeeded": self.next_thought_needed,
        }
        optional = {
            "isRevision": self.is_revision,
            "revisesThought": self.revises_thought,
            "branchFromThought": self.branch_from_thought,
            "branchId": self.branch_id,
            "needsMoreThoughts": self.needs_more_thoughts,
        }
        payload.update({key: value for key, value in optional.items() if value is not None})
        return payload


# An ordered run of thoughts: the main line or one named branch
Timeline = List[Thought]
