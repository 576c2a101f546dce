"""Data models and schemas"""
from .models import Thought, ThoughtRequest, ThoughtResponse, Timeline

__all__ = ["Thought", "ThoughtRequest", "ThoughtResponse", "Timeline"]
