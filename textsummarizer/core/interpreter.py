"""Response interpretation for inference endpoint calls.

Architectural role:
    Converts the raw network outcome (a transport exception or an HTTP response)
    into a terminal `SummarizationOutcome`. The service never sees a raw
    response body.

Classification model:
    1. Transport failure -> `NetworkError`, identical in every mode.
    2. Non-2xx response:
       - 503 is always `ModelLoading` (upstream detail appended when present).
       - JSON body with an `error` field -> `UpstreamError`, message verbatim.
       - Otherwise status mapping (401/429/404/410, else `HttpError`).
    3. 2xx response: ordered shape matchers over the decoded JSON body; the
       first match wins, no match is `MalformedResponse`.

Determinism:
    Deterministic for a fixed response. Summary text is returned unchanged.

Failure handling:
    No function in this module raises; every branch returns an outcome.
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any

import httpx

from textsummarizer.core.outcome_types import (
    ErrorKind,
    SummarizationOutcome,
    SummaryFailure,
    SummarySuccess,
)


logger = logging.getLogger(__name__)

SUMMARY_FIELD = "summary_text"
ERROR_FIELD = "error"

NETWORK_ERROR_MESSAGE = (
    "Network error: Unable to connect to the summarization API. This might be due "
    "to network connectivity issues, proxy problems, or the API service being "
    "temporarily unavailable. Please check your internet connection and try again."
)
TIMEOUT_ERROR_MESSAGE = (
    "Network error: The summarization API did not respond in time. "
    "Please check your internet connection and try again."
)
MODEL_LOADING_MESSAGE = "Model is loading. Please wait a moment and try again."
AUTH_ERROR_MESSAGE = "Invalid API key. Please check your HF_TOKEN."
RATE_LIMITED_MESSAGE = "Rate limit exceeded. Please try again later."
ENDPOINT_GONE_MESSAGE = (
    "API endpoint is no longer available (410 Gone). The endpoint may have been "
    "deprecated or moved. Please check the inference provider documentation for "
    "the current API format."
)
MALFORMED_RESPONSE_MESSAGE = "API did not return a valid summary format."

_NO_BODY = object()


# =========================================================
# TRANSPORT FAILURES
# =========================================================

def interpret_transport_error(exc: BaseException) -> SummaryFailure:
    """Classify a transport-level exception as `NetworkError`."""
    logger.warning("Transport failure: %s: %s", type(exc).__name__, exc)
    message = (
        TIMEOUT_ERROR_MESSAGE
        if isinstance(exc, httpx.TimeoutException)
        else NETWORK_ERROR_MESSAGE
    )
    return SummaryFailure(ErrorKind.NETWORK_ERROR, message)


# =========================================================
# SUCCESS BODY SHAPES
# =========================================================
# Each matcher returns the summary string or None. Order is priority.

def _match_list_of_summaries(data: Any) -> str | None:
    if isinstance(data, list) and data and isinstance(data[0], Mapping):
        return _summary_field(data[0])
    return None


def _match_summary_object(data: Any) -> str | None:
    if isinstance(data, Mapping):
        return _summary_field(data)
    return None


def _match_plain_string(data: Any) -> str | None:
    if isinstance(data, str):
        return data
    return None


def _summary_field(item: Mapping) -> str | None:
    value = item.get(SUMMARY_FIELD)
    if isinstance(value, str) and value:
        return value
    return None


SHAPE_MATCHERS: tuple[Callable[[Any], str | None], ...] = (
    _match_list_of_summaries,
    _match_summary_object,
    _match_plain_string,
)


def extract_summary(data: Any) -> str | None:
    """Run `SHAPE_MATCHERS` in order and return the first match."""
    for matcher in SHAPE_MATCHERS:
        summary = matcher(data)
        if summary is not None:
            return summary
    return None


# =========================================================
# ERROR BODIES
# =========================================================

def _decode_json(response: httpx.Response) -> Any:
    """Decode the body as JSON, returning `_NO_BODY` when that is not possible."""
    try:
        return response.json()
    except ValueError:
        return _NO_BODY


def _upstream_error_text(data: Any) -> str | None:
    """Return the explicit `error` field of an error body, if any."""
    if not isinstance(data, Mapping):
        return None
    error = data.get(ERROR_FIELD)
    if isinstance(error, str) and error.strip():
        return error
    if isinstance(error, list):
        parts = [str(part) for part in error if str(part).strip()]
        if parts:
            return "; ".join(parts)
    return None


def _model_loading_message(data: Any) -> str:
    message = MODEL_LOADING_MESSAGE
    if not isinstance(data, Mapping):
        return message
    detail = _upstream_error_text(data)
    if detail:
        message = f"{message} ({detail})"
    estimated = data.get("estimated_time")
    if isinstance(estimated, (int, float)) and not isinstance(estimated, bool):
        message = f"{message} Estimated wait: {round(estimated)}s."
    return message


def _status_failure(status: int, reason: str, url: str, model_id: str) -> SummaryFailure:
    """Map a status code to its canned failure."""
    if status == 401:
        return SummaryFailure(ErrorKind.AUTH_ERROR, AUTH_ERROR_MESSAGE, status)
    if status == 429:
        return SummaryFailure(ErrorKind.RATE_LIMITED, RATE_LIMITED_MESSAGE, status)
    if status == 404:
        return SummaryFailure(
            ErrorKind.ENDPOINT_NOT_FOUND,
            f"API endpoint not found (404). The model '{model_id}' may not be "
            f"available or the endpoint URL is incorrect. URL: {url or 'unknown'}",
            status,
        )
    if status == 410:
        return SummaryFailure(ErrorKind.ENDPOINT_GONE, ENDPOINT_GONE_MESSAGE, status)
    message = f"HTTP {status}: {reason}" if reason else f"HTTP {status}"
    return SummaryFailure(ErrorKind.HTTP_ERROR, message, status)


def interpret_error_response(
    response: httpx.Response,
    url: str,
    model_id: str,
) -> SummaryFailure:
    """Classify a non-2xx response."""
    status = response.status_code
    data = _decode_json(response)

    if data is _NO_BODY:
        logger.warning("Non-JSON error response: status=%s body=%r", status, response.text[:200])
    else:
        logger.warning("API error response: status=%s body=%r", status, data)

    if status == 503:
        return SummaryFailure(ErrorKind.MODEL_LOADING, _model_loading_message(data), status)

    upstream_text = _upstream_error_text(data)
    if upstream_text:
        return SummaryFailure(ErrorKind.UPSTREAM_ERROR, upstream_text, status)

    return _status_failure(status, response.reason_phrase, url, model_id)


# =========================================================
# ENTRYPOINT
# =========================================================

def interpret_response(
    response: httpx.Response,
    url: str,
    model_id: str,
) -> SummarizationOutcome:
    """Convert an HTTP response into a terminal outcome.

    Args:
        response: Response with a fully read body.
        url: Endpoint that was called, used in `EndpointNotFound` messages.
        model_id: Model identifier, used in `EndpointNotFound` messages.

    Returns:
        `SummarySuccess` with the unmodified summary, or `SummaryFailure`.
    """
    if not response.is_success:
        return interpret_error_response(response, url, model_id)

    data = _decode_json(response)
    summary = None if data is _NO_BODY else extract_summary(data)

    if summary is None:
        logger.warning("Unrecognized success payload from %s: %r", url, response.text[:200])
        return SummaryFailure(
            ErrorKind.MALFORMED_RESPONSE,
            MALFORMED_RESPONSE_MESSAGE,
            response.status_code,
        )

    return SummarySuccess(summary)
