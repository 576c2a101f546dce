"""Thought history state: ledger, dispatch and request validation"""
from .ledger import SubmissionKind, ThoughtLedger, classify
from .validator import validate_request

__all__ = ["SubmissionKind", "ThoughtLedger", "classify", "validate_request"]
