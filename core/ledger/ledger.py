from enum import Enum
from typing import Dict, List, Optional

from core.models import Thought, Timeline


class SubmissionKind(Enum):
    BRANCH = "branch"
    REVISION = "revision"
    PLAIN = "plain"


def classify(thought: Thought) -> SubmissionKind:
    """Pick the mutation for a submission. Branch wins over revision."""
    if thought.branch_from_thought is not None and thought.branch_id is not None:
        return SubmissionKind.BRANCH
    if thought.revises_thought is not None:
        return SubmissionKind.REVISION
    return SubmissionKind.PLAIN


class ThoughtLedger:
    """
    In-memory history of thoughts: a main timeline plus named branches.

    Plain and revision submissions go to the active timeline. A branch
    submission switches the active pointer to that branch and it stays
    there; there is no way back to the main timeline. Nothing is ever
    removed.

    Not thread-safe on its own; callers serialize access (see
    `core.api.DeliberateThinking`).
    """

    def __init__(self) -> None:
        self._main: Timeline = []
        self._branches: Dict[str, Timeline] = {}
        self._active_branch: Optional[str] = None

    @property
    def active_branch(self) -> Optional[str]:
        return self._active_branch

    def submit(self, thought: Thought) -> SubmissionKind:
        """Apply `thought` with the mutation chosen by `classify`."""
        kind = classify(thought)
        if kind is SubmissionKind.BRANCH:
            # classify() guarantees both branch fields are set
            self.submit_branch(thought.branch_from_thought, thought.branch_id, thought)  # type: ignore[arg-type]
        elif kind is SubmissionKind.REVISION:
            self.submit_revision(thought.revises_thought, thought)  # type: ignore[arg-type]
        else:
            self.submit_plain(thought)
        return kind

    def submit_plain(self, thought: Thought) -> None:
        """Append to the active timeline. Sequence numbers are not checked."""
        self.current_timeline().append(thought)

    def submit_revision(self, revises: int, thought: Thought) -> None:
        """Replace the step numbered `revises` in place, or append if there is none."""
        timeline = self.current_timeline()
        for index, existing in enumerate(timeline):
            if existing.thought_number == revises:
                timeline[index] = thought
                return
        timeline.append(thought)

    def submit_branch(self, branch_from: int, branch_id: str, thought: Thought) -> None:
        """Add `thought` to branch `branch_id`, creating it from main if needed, and activate it."""
        if branch_id not in self._branches:
            base: Timeline = []
            for existing in self._main:
                if existing.thought_number > branch_from:
                    break
                base.append(existing)
            self._branches[branch_id] = base

        self._branches[branch_id].append(thought)
        self._active_branch = branch_id

    def current_timeline(self) -> Timeline:
        """Active branch if there is one, otherwise main."""
        if self._active_branch is not None:
            branch = self._branches.get(self._active_branch)
            if branch is not None:
                return branch
        return self._main

    def history_length(self) -> int:
        return len(self.current_timeline())

    def branch_names(self) -> List[str]:
        return list(self._branches)

    def main_timeline(self) -> Timeline:
        return list(self._main)

    def branch_timeline(self, branch_id: str) -> Optional[Timeline]:
        branch = self._branches.get(branch_id)
        return list(branch) if branch is not None else None
