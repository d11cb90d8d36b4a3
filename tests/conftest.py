import pytest

from textsummarizer.llm.provider_config import CREDENTIAL_ENV_VARS


ENV_VARS = CREDENTIAL_ENV_VARS + (
    "SUMMARIZER_MODE",
    "SUMMARIZER_MODEL",
    "HF_INFERENCE_URL",
    "SUMMARIZER_PROXY_PREFIX",
    "SUMMARIZER_PROXY_ORIGIN",
    "SUMMARIZER_TIMEOUT_SECONDS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Keeps a stray config/huggingface.key in the checkout out of the tests.
    monkeypatch.chdir(tmp_path)
