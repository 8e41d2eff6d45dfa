"""Adapters between typed messages and provider SDK objects."""

from .openai import OpenAIMessageAdapter

__all__ = [
    "OpenAIMessageAdapter",
]
