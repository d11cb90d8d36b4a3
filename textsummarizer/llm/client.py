"""Request construction and transport for the inference endpoint.

Architectural role:
    Validates a `SummarizationRequest`, builds the POST request, and sends it
    with `httpx.AsyncClient`. Response classification is delegated to
    `textsummarizer.core.interpreter`.

Model invocation flow:
    `service.summarize` -> `validate_request` -> `build_request(text, key, url)`
    -> `send_request(prepared, config)` -> `httpx.Response`.

Retry behavior:
    No retry loop is implemented. Each call is attempted once, bounded by the
    configured timeout.

Failure handling model:
    Validation failures are returned as `SummaryFailure` values and never reach
    the network. Transport failures propagate as `httpx.RequestError` so the
    service can classify them.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from textsummarizer.core.outcome_types import ErrorKind, SummarizationRequest, SummaryFailure
from textsummarizer.llm.provider_config import Mode, SummarizerConfig


logger = logging.getLogger(__name__)

EMPTY_INPUT_MESSAGE = "Please enter some text to summarize."
MISSING_CREDENTIAL_MESSAGE = (
    "API key is missing. Please set HF_TOKEN in your environment or .env file."
)


@dataclass(frozen=True)
class PreparedRequest:
    """Fully built request, ready for transport."""

    url: str
    method: str = "POST"
    headers: dict[str, str] = field(default_factory=dict)
    body: dict[str, Any] = field(default_factory=dict)

    def content(self) -> str:
        """JSON-encoded request body."""
        return json.dumps(self.body)


def validate_request(request: SummarizationRequest) -> SummaryFailure | None:
    """Return a local failure for invalid input, else `None`.

    Empty text is checked before the credential so a blank submission reports
    `InvalidInput` even when no key is configured.
    """
    if not request.input_text or not request.input_text.strip():
        return SummaryFailure(ErrorKind.INVALID_INPUT, EMPTY_INPUT_MESSAGE)
    if not request.credential:
        return SummaryFailure(ErrorKind.MISSING_CREDENTIAL, MISSING_CREDENTIAL_MESSAGE)
    return None


def build_request(input_text: str, credential: str, url: str) -> PreparedRequest:
    """Build the POST request for one summarization call.

    Raises:
        ValueError: When `input_text` is blank or `credential` is missing.
            Callers are expected to run `validate_request` first.
    """
    failure = validate_request(SummarizationRequest(input_text, credential))
    if failure is not None:
        raise ValueError(failure.message)

    return PreparedRequest(
        url=url,
        method="POST",
        headers={
            "Authorization": f"Bearer {credential}",
            "Content-Type": "application/json",
        },
        body={"inputs": input_text},
    )


async def send_request(
    prepared: PreparedRequest,
    config: SummarizerConfig,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.Response:
    """Send `prepared` once and return the raw response.

    In development mode the relative proxy path is resolved against
    `config.proxy_origin`.

    Raises:
        httpx.RequestError: On connection, DNS, timeout, or other transport failures.
    """
    base_url = config.proxy_origin if config.mode is Mode.DEVELOPMENT else ""

    logger.debug("Making request to: %s (mode=%s)", prepared.url, config.mode.value)
    logger.debug("Credential present: %s", "Authorization" in prepared.headers)

    async with httpx.AsyncClient(
        base_url=base_url,
        timeout=config.timeout_seconds,
        follow_redirects=True,
        transport=transport,
    ) as client:
        response = await client.request(
            prepared.method,
            prepared.url,
            headers=prepared.headers,
            content=prepared.content(),
        )

    logger.debug("Response status: %s %s", response.status_code, response.reason_phrase)
    return response
