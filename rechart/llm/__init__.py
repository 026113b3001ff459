"""LLM integration: completion client, response parsing and fallback."""

from rechart.llm.client import CompletionClient, CompletionError, LLMConfig
from rechart.llm.fallback import FallbackProcessor
from rechart.llm.parser import ResponseParseError
from rechart.llm.reconciler import PayloadSource, ReconcileResult, ReconcileState, Reconciler

__all__ = [
    "CompletionClient",
    "CompletionError",
    "LLMConfig",
    "FallbackProcessor",
    "ResponseParseError",
    "PayloadSource",
    "ReconcileResult",
    "ReconcileState",
    "Reconciler",
]
