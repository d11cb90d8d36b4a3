"""Endpoint and credential configuration for the summarization client.

Architectural role:
    Centralizes mode selection, model/endpoint settings, and credential lookup
    for `textsummarizer.llm.client` and `textsummarizer.llm.service`.

Endpoint resolution:
    `resolve_endpoint` is a pure function of an explicit `Mode`:
    - development -> same-origin proxy path (`/api/<prefix>/models/<model>`),
      served by `textsummarizer.api.http_api`.
    - production -> upstream inference URL (`<inference_url>/models/<model>`).
    The two never mix within one call.

Determinism:
    Deterministic for a fixed process environment and key files. `SummarizerConfig`
    defaults are read from the environment when the instance is created.

Failure behavior:
    Missing credential material is represented as `None`; the service turns it
    into a `MissingCredential` outcome. Unknown mode strings raise `ValueError`.
"""

import os
from dataclasses import dataclass, field, replace
from enum import Enum

from dotenv import load_dotenv

load_dotenv()


DEFAULT_MODEL_ID = "facebook/bart-large-cnn"
DEFAULT_INFERENCE_URL = "https://router.huggingface.co/hf-inference"
DEFAULT_PROXY_PREFIX = "huggingface"
DEFAULT_PROXY_ORIGIN = "http://127.0.0.1:8000"
DEFAULT_TIMEOUT_SECONDS = 120.0
DEFAULT_KEY_FILE = "config/huggingface.key"

# Checked in order before falling back to the key file.
CREDENTIAL_ENV_VARS = ("HF_TOKEN", "HUGGING_FACE_TOKEN", "VITE_HUGGING_FACE_TOKEN")


class Mode(str, Enum):
    """Build/runtime mode controlling endpoint selection."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"

    @classmethod
    def parse(cls, value: "str | Mode") -> "Mode":
        """Parse `dev`/`development`/`prod`/`production` (case-insensitive).

        Raises:
            ValueError: For any other value.
        """
        if isinstance(value, Mode):
            return value
        normalized = str(value or "").strip().lower()
        if normalized in ("dev", "development"):
            return cls.DEVELOPMENT
        if normalized in ("prod", "production"):
            return cls.PRODUCTION
        raise ValueError(f"Unknown summarizer mode: {value!r}")


def resolve_endpoint(
    mode: Mode,
    model_id: str = DEFAULT_MODEL_ID,
    inference_url: str = DEFAULT_INFERENCE_URL,
    proxy_prefix: str = DEFAULT_PROXY_PREFIX,
) -> str:
    """Return the endpoint to POST to for `mode`.

    Args:
        mode: Explicit runtime mode.
        model_id: Model identifier, for example `facebook/bart-large-cnn`.
        inference_url: Upstream base URL used in production.
        proxy_prefix: Proxy route segment used in development.

    Returns:
        A relative proxy path in development, an absolute URL in production.
    """
    model_id = model_id.strip("/")
    if Mode.parse(mode) is Mode.DEVELOPMENT:
        return f"/api/{proxy_prefix.strip('/')}/models/{model_id}"
    return f"{inference_url.rstrip('/')}/models/{model_id}"


def load_key(path: str | None = DEFAULT_KEY_FILE) -> str | None:
    """Load the bearer credential from the environment or a key file.

    Resolution order:
        1. First non-empty variable in `CREDENTIAL_ENV_VARS`.
        2. Stripped contents of the file at `path`.

    Edge cases:
        - Missing file or `None` path returns `None`.
        - Empty file content returns `None`.
    """
    for name in CREDENTIAL_ENV_VARS:
        env_value = os.getenv(name, "").strip()
        if env_value:
            return env_value
    if not path or not os.path.exists(path):
        return None
    with open(path, "r") as f:
        return f.read().strip() or None


@dataclass(frozen=True)
class SummarizerConfig:
    """Runtime configuration for one summarization call.

    Relevant environment variables:
        - `SUMMARIZER_MODE` (`development` | `production`)
        - `SUMMARIZER_MODEL`
        - `HF_INFERENCE_URL`
        - `SUMMARIZER_PROXY_PREFIX`
        - `SUMMARIZER_PROXY_ORIGIN`
        - `SUMMARIZER_TIMEOUT_SECONDS`
        - `HF_TOKEN` (or the key file `config/huggingface.key`)
    """

    mode: Mode = field(
        default_factory=lambda: Mode.parse(os.getenv("SUMMARIZER_MODE", "production"))
    )
    model_id: str = field(
        default_factory=lambda: os.getenv("SUMMARIZER_MODEL", DEFAULT_MODEL_ID).strip()
    )
    inference_url: str = field(
        default_factory=lambda: os.getenv("HF_INFERENCE_URL", DEFAULT_INFERENCE_URL).strip()
    )
    proxy_prefix: str = field(
        default_factory=lambda: os.getenv("SUMMARIZER_PROXY_PREFIX", DEFAULT_PROXY_PREFIX).strip()
    )
    proxy_origin: str = field(
        default_factory=lambda: os.getenv("SUMMARIZER_PROXY_ORIGIN", DEFAULT_PROXY_ORIGIN).strip()
    )
    credential: str | None = field(default_factory=load_key)
    timeout_seconds: float = field(
        default_factory=lambda: float(
            os.getenv("SUMMARIZER_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))
        )
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "mode", Mode.parse(self.mode))

    @classmethod
    def from_env(cls) -> "SummarizerConfig":
        """Build a config from the current process environment."""
        return cls()

    def with_mode(self, mode: "str | Mode") -> "SummarizerConfig":
        """Return a copy targeting `mode`."""
        return replace(self, mode=Mode.parse(mode))

    def endpoint(self) -> str:
        """Endpoint for this config's mode (see `resolve_endpoint`)."""
        return resolve_endpoint(
            self.mode,
            model_id=self.model_id,
            inference_url=self.inference_url,
            proxy_prefix=self.proxy_prefix,
        )

    def upstream_url(self, model_id: str | None = None) -> str:
        """Direct upstream URL, used by the development proxy to forward."""
        return resolve_endpoint(
            Mode.PRODUCTION,
            model_id=model_id or self.model_id,
            inference_url=self.inference_url,
        )
