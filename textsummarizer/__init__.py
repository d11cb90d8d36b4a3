"""Text summarization client backed by a hosted inference endpoint.

Architectural role:
    Exposes `summarize`, the single async entry point used by the HTTP and CLI
    adapters. Everything below it is stateless and request-scoped.

Package split:
    - `llm`: endpoint resolution, request construction, transport, service entry.
    - `core`: outcome data model and response interpretation.
    - `api`: FastAPI adapter (including the development proxy) and terminal CLI.
"""

from textsummarizer.core.outcome_types import (
    ErrorKind,
    SummarizationOutcome,
    SummarizationRequest,
    SummaryFailure,
    SummarySuccess,
)
from textsummarizer.llm.provider_config import Mode, SummarizerConfig, resolve_endpoint
from textsummarizer.llm.service import summarize, summarize_sync

__all__ = [
    "ErrorKind",
    "Mode",
    "SummarizationOutcome",
    "SummarizationRequest",
    "SummarizerConfig",
    "SummaryFailure",
    "SummarySuccess",
    "resolve_endpoint",
    "summarize",
    "summarize_sync",
]
