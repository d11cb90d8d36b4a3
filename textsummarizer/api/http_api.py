"""
HTTP API adapter for the summarization client.

Architectural role:
- Expose a JSON summarize endpoint over `textsummarizer.llm.service.summarize`.
- Serve the same-origin development proxy path that forwards to the upstream
  inference endpoint.
- Render outcomes to JSON; no summarization logic lives here.

Endpoint responsibilities:
- `GET /health`: report mode and resolved endpoint.
- `POST /v1/summarize`: accept `{"text": ...}`, return the outcome envelope.
- `POST /api/<proxy-prefix>/models/{model_id}`: relay the request upstream and
  return the upstream status, body, and content type unchanged.

Response status mapping (`/v1/summarize`):
- Success -> 200.
- `InvalidInput` -> 400.
- `MissingCredential`, `ConfigurationError` -> 500.
- Every network/upstream kind -> 502.

Error handling strategy:
- Summarize never raises; the outcome carries the failure.
- Proxy transport failures return 502 with a plain-text body.
- Unusable environment configuration returns the JSON failure envelope with 500.

Side effects:
- Emits debug prints only when `DEBUG == "true"`.
- Loads environment variables at import time via `load_dotenv()`.
"""

from dotenv import load_dotenv

load_dotenv()

import logging
import os

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from textsummarizer.core.outcome_types import ErrorKind, SummaryFailure
from textsummarizer.llm.provider_config import DEFAULT_PROXY_PREFIX, SummarizerConfig
from textsummarizer.llm.service import summarize


logger = logging.getLogger(__name__)

app = FastAPI(title="textsummarizer")
# Sensitive request/response debug output is opt-in.
DEBUG = os.getenv("DEBUG") == "true"
PROXY_PREFIX = os.getenv("SUMMARIZER_PROXY_PREFIX", DEFAULT_PROXY_PREFIX).strip().strip("/")

# Headers forwarded by the development proxy.
FORWARDED_HEADERS = ("authorization", "content-type", "accept")

_UPSTREAM_TRANSPORT: httpx.AsyncBaseTransport | None = None


def set_upstream_transport(transport: httpx.AsyncBaseTransport | None) -> None:
    """Override or clear the httpx transport used for outbound calls."""
    global _UPSTREAM_TRANSPORT
    _UPSTREAM_TRANSPORT = transport


def status_for_kind(kind: ErrorKind) -> int:
    """HTTP status used to report a failure of `kind` to API clients."""
    if kind is ErrorKind.INVALID_INPUT:
        return 400
    if kind in (ErrorKind.MISSING_CREDENTIAL, ErrorKind.CONFIGURATION_ERROR):
        return 500
    return 502


def configuration_error_response(exc: ValueError) -> JSONResponse:
    """JSON 500 envelope for an unusable environment configuration."""
    logger.error("Invalid summarizer configuration: %s", exc)
    failure = SummaryFailure(
        ErrorKind.CONFIGURATION_ERROR,
        f"Invalid summarizer configuration: {exc}",
    )
    return JSONResponse(status_code=500, content=failure.to_dict())


# ============================================================
# Request Schema
# ============================================================

class SummarizeBody(BaseModel):
    """Payload accepted by `POST /v1/summarize`."""
    text: str = ""


# ============================================================
# Health
# ============================================================

@app.get("/health")
def health():
    try:
        config = SummarizerConfig.from_env()
    except ValueError as exc:
        return configuration_error_response(exc)
    return {
        "status": "ok",
        "mode": config.mode.value,
        "model": config.model_id,
        "endpoint": config.endpoint(),
        "credential_present": bool(config.credential),
    }


# ============================================================
# Summarize
# ============================================================

@app.post("/v1/summarize")
async def summarize_text(body: SummarizeBody):
    """
    Summarize `body.text` and return the outcome envelope.

    Response formatting:
    - Success: `{"ok": true, "summary": "..."}`
    - Failure: `{"ok": false, "error": {"kind", "message", "status_code"}}`
    """
    if DEBUG:
        print("\n==== API DEBUG START ====")
        print("Input length:", len(body.text))

    outcome = await summarize(body.text, transport=_UPSTREAM_TRANSPORT)

    if DEBUG:
        print("Outcome:", repr(outcome))
        print("==== API DEBUG END ====\n")

    if outcome.ok:
        return outcome.to_dict()
    return JSONResponse(status_code=status_for_kind(outcome.kind), content=outcome.to_dict())


# ============================================================
# Development Proxy
# ============================================================

@app.post(f"/api/{PROXY_PREFIX}/models/{{model_id:path}}")
async def proxy_inference(model_id: str, request: Request):
    """
    Forward a development-mode request to the upstream inference endpoint.

    The body and whitelisted headers are relayed verbatim. Upstream status,
    body, and content type are returned unchanged so the client-side
    interpreter sees exactly what the upstream sent.
    """
    try:
        config = SummarizerConfig.from_env()
    except ValueError as exc:
        return configuration_error_response(exc)
    target = config.upstream_url(model_id)
    body = await request.body()
    headers = {
        name: value
        for name, value in request.headers.items()
        if name.lower() in FORWARDED_HEADERS
    }

    if DEBUG:
        print("Proxy target:", target)
        print("Authorization forwarded:", "authorization" in headers)

    try:
        async with httpx.AsyncClient(
            timeout=config.timeout_seconds,
            follow_redirects=True,
            transport=_UPSTREAM_TRANSPORT,
        ) as client:
            upstream = await client.post(target, content=body, headers=headers)
    except httpx.RequestError as exc:
        logger.warning("Proxy could not reach %s: %s", target, exc)
        return Response(status_code=502, content="Bad Gateway", media_type="text/plain")

    return Response(
        status_code=upstream.status_code,
        content=upstream.content,
        media_type=upstream.headers.get("content-type"),
    )
