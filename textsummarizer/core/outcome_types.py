"""Request and outcome data contracts for the summarization pipeline.

Architectural role:
    Defines the transient objects passed between the service entry point, the
    request builder, and the response interpreter. Nothing here is persisted.

Outcome model:
    Every call terminates in exactly one of two variants:
    `SummarySuccess` (summary text) or `SummaryFailure` (kind + message).
    Adapters branch on `outcome.ok` and render `outcome.to_dict()`.

Determinism:
    Pure data containers; no I/O and no global state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Fixed failure taxonomy.

    Local, pre-flight: `INVALID_INPUT`, `MISSING_CREDENTIAL`.
    Transport: `NETWORK_ERROR`.
    Upstream-reported: `AUTH_ERROR`, `RATE_LIMITED`, `MODEL_LOADING`,
    `ENDPOINT_NOT_FOUND`, `ENDPOINT_GONE`, `UPSTREAM_ERROR`, `HTTP_ERROR`.
    Contract violation on a 2xx body: `MALFORMED_RESPONSE`.
    Unusable environment configuration: `CONFIGURATION_ERROR`.
    """

    INVALID_INPUT = "InvalidInput"
    MISSING_CREDENTIAL = "MissingCredential"
    NETWORK_ERROR = "NetworkError"
    AUTH_ERROR = "AuthError"
    RATE_LIMITED = "RateLimited"
    MODEL_LOADING = "ModelLoading"
    ENDPOINT_NOT_FOUND = "EndpointNotFound"
    ENDPOINT_GONE = "EndpointGone"
    UPSTREAM_ERROR = "UpstreamError"
    HTTP_ERROR = "HttpError"
    MALFORMED_RESPONSE = "MalformedResponse"
    CONFIGURATION_ERROR = "ConfigurationError"

    @property
    def is_local(self) -> bool:
        """True for validation failures that never reach the network."""
        return self in (
            ErrorKind.INVALID_INPUT,
            ErrorKind.MISSING_CREDENTIAL,
            ErrorKind.CONFIGURATION_ERROR,
        )


@dataclass(frozen=True)
class SummarizationRequest:
    """One user action: the text to summarize and the bearer credential.

    Attributes:
        input_text: Raw caller text, forwarded untrimmed when valid.
        credential: Opaque bearer token, `None` when not provisioned.
    """

    input_text: str
    credential: str | None = None


@dataclass(frozen=True)
class SummarySuccess:
    """Successful outcome carrying the upstream summary unchanged."""

    summary_text: str

    @property
    def ok(self) -> bool:
        return True

    def to_dict(self) -> dict[str, Any]:
        return {"ok": True, "summary": self.summary_text}


@dataclass(frozen=True)
class SummaryFailure:
    """Terminal failure outcome.

    Attributes:
        kind: Classified failure kind.
        message: Human-readable text suitable for direct display.
        status_code: HTTP status when a response was received, else `None`.
    """

    kind: ErrorKind
    message: str
    status_code: int | None = None

    @property
    def ok(self) -> bool:
        return False

    def to_dict(self) -> dict[str, Any]:
        return {
            "ok": False,
            "error": {
                "kind": self.kind.value,
                "message": self.message,
                "status_code": self.status_code,
            },
        }


SummarizationOutcome = SummarySuccess | SummaryFailure
