"""Text-to-summary entry point.

Architectural role:
    Provides the canonical `summarize` coroutine used by the HTTP and CLI
    adapters. Bridges validation and transport (`textsummarizer.llm.client`) to
    outcome classification (`textsummarizer.core.interpreter`).

Call flow:
    text -> validate -> resolve endpoint -> build -> send -> interpret.

Determinism:
    Endpoint choice and request construction are deterministic for fixed input and
    config. Summary content is non-deterministic because inference runs remotely.

Failure scenarios:
    All failures are returned as `SummaryFailure` values; nothing is raised to the
    caller.
"""

import asyncio
import logging

import httpx

from textsummarizer.core.interpreter import interpret_response, interpret_transport_error
from textsummarizer.core.outcome_types import (
    ErrorKind,
    SummarizationOutcome,
    SummarizationRequest,
    SummaryFailure,
)
from textsummarizer.llm.client import build_request, send_request, validate_request
from textsummarizer.llm.provider_config import SummarizerConfig


logger = logging.getLogger(__name__)


async def summarize(
    input_text: str,
    config: SummarizerConfig | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> SummarizationOutcome:
    """Summarize `input_text` with the configured inference endpoint.

    Args:
        input_text: Raw user text.
        config: Endpoint/credential settings; read from the environment when `None`.
        transport: Optional httpx transport, used to substitute the network.

    Returns:
        `SummarySuccess` or `SummaryFailure`.

    Edge cases:
        - Blank text -> `InvalidInput` without any network call.
        - Missing credential -> `MissingCredential` without any network call.
        - Unusable environment configuration -> `ConfigurationError`.
        - Unexpected exceptions are logged and classified as `NetworkError`.
    """
    if config is None:
        try:
            config = SummarizerConfig.from_env()
        except ValueError as exc:
            logger.error("Invalid summarizer configuration: %s", exc)
            return SummaryFailure(
                ErrorKind.CONFIGURATION_ERROR,
                f"Invalid summarizer configuration: {exc}",
            )

    request = SummarizationRequest(input_text=input_text, credential=config.credential)

    failure = validate_request(request)
    if failure is not None:
        logger.info("Rejected summarization request: %s", failure.kind.value)
        return failure

    url = config.endpoint()
    prepared = build_request(request.input_text, request.credential, url)

    try:
        response = await send_request(prepared, config, transport=transport)
    except httpx.RequestError as exc:
        return interpret_transport_error(exc)
    except Exception:
        logger.exception("Summarization request to %s failed", url)
        return SummaryFailure(
            ErrorKind.NETWORK_ERROR,
            "An unexpected error occurred while contacting the API. Please try again.",
        )

    return interpret_response(response, url, config.model_id)


def summarize_sync(
    input_text: str,
    config: SummarizerConfig | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> SummarizationOutcome:
    """Blocking wrapper around `summarize` for callers without an event loop."""
    return asyncio.run(summarize(input_text, config, transport=transport))
