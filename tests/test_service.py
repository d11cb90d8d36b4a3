import asyncio

import httpx
import pytest

from textsummarizer.core.outcome_types import ErrorKind, SummaryFailure, SummarySuccess
from textsummarizer.llm.provider_config import Mode
from textsummarizer.llm.service import summarize, summarize_sync

from tests.helpers import RecordingTransport, json_response, make_config, request_json, text_response


def run(text, config, transport):
    return asyncio.run(summarize(text, config, transport=transport))


def test_success_end_to_end():
    transport = RecordingTransport(json_response(200, [{"summary_text": "hello"}]))

    outcome = run("A long article about many things.", make_config(), transport)

    assert outcome == SummarySuccess("hello")
    assert request_json(transport.requests[0]) == {"inputs": "A long article about many things."}


@pytest.mark.parametrize("text", ["", "   ", "\n"])
def test_blank_input_makes_no_network_call(text):
    transport = RecordingTransport(json_response(200, [{"summary_text": "never"}]))

    outcome = run(text, make_config(), transport)

    assert outcome.kind is ErrorKind.INVALID_INPUT
    assert transport.requests == []


def test_missing_credential_makes_no_network_call():
    transport = RecordingTransport(json_response(200, [{"summary_text": "never"}]))

    outcome = run("text", make_config(credential=None), transport)

    assert outcome.kind is ErrorKind.MISSING_CREDENTIAL
    assert transport.requests == []


@pytest.mark.parametrize("mode", [Mode.DEVELOPMENT, Mode.PRODUCTION])
@pytest.mark.parametrize("error_cls", [httpx.ConnectError, httpx.ConnectTimeout, httpx.ReadError])
def test_transport_failure_is_network_error_in_every_mode(mode, error_cls):
    def fail(request):
        raise error_cls("transport failure", request=request)

    outcome = run("text", make_config(mode), httpx.MockTransport(fail))

    assert isinstance(outcome, SummaryFailure)
    assert outcome.kind is ErrorKind.NETWORK_ERROR


def test_unexpected_exception_is_contained():
    def explode(request):
        raise RuntimeError("transport bug")

    outcome = run("text", make_config(), httpx.MockTransport(explode))

    assert outcome.kind is ErrorKind.NETWORK_ERROR


def test_development_targets_proxy_path():
    transport = RecordingTransport(json_response(200, {"summary_text": "hi"}))

    outcome = run("text", make_config(Mode.DEVELOPMENT), transport)

    assert outcome == SummarySuccess("hi")
    url = transport.requests[0].url
    assert url.host == "127.0.0.1"
    assert url.path == "/api/huggingface/models/facebook/bart-large-cnn"


def test_production_targets_upstream():
    transport = RecordingTransport(json_response(200, "plain string"))

    outcome = run("text", make_config(Mode.PRODUCTION), transport)

    assert outcome == SummarySuccess("plain string")
    url = transport.requests[0].url
    assert url.host == "router.huggingface.co"
    assert url.path == "/hf-inference/models/facebook/bart-large-cnn"


def test_404_reports_model_identifier():
    config = make_config(model_id="acme/missing-model")

    outcome = run("text", config, RecordingTransport(text_response(404, "Not Found")))

    assert outcome.kind is ErrorKind.ENDPOINT_NOT_FOUND
    assert "acme/missing-model" in outcome.message


def test_503_reports_model_loading():
    transport = RecordingTransport(json_response(503, {"error": "Model is currently loading"}))

    outcome = run("text", make_config(), transport)

    assert outcome.kind is ErrorKind.MODEL_LOADING
    assert "loading" in outcome.message.lower()


def test_malformed_success_body():
    outcome = run("text", make_config(), RecordingTransport(json_response(200, {})))

    assert outcome.kind is ErrorKind.MALFORMED_RESPONSE


def test_failure_does_not_block_next_call():
    responses = iter([
        httpx.Response(429, json={}),
        httpx.Response(200, json=[{"summary_text": "second time lucky"}]),
    ])
    transport = RecordingTransport(lambda request: next(responses))
    config = make_config()

    first = run("text", config, transport)
    second = run("text", config, transport)

    assert first.kind is ErrorKind.RATE_LIMITED
    assert second == SummarySuccess("second time lucky")


def test_reads_config_from_environment(monkeypatch):
    monkeypatch.setenv("HF_TOKEN", "hf_env_token")
    monkeypatch.setenv("SUMMARIZER_MODE", "production")
    transport = RecordingTransport(json_response(200, [{"summary_text": "env"}]))

    outcome = asyncio.run(summarize("text", transport=transport))

    assert outcome == SummarySuccess("env")
    assert transport.requests[0].headers["authorization"] == "Bearer hf_env_token"


def test_summarize_sync_wraps_coroutine():
    transport = RecordingTransport(json_response(200, [{"summary_text": "sync"}]))

    outcome = summarize_sync("text", make_config(), transport=transport)

    assert outcome == SummarySuccess("sync")


@pytest.mark.parametrize(
    "name, value",
    [("SUMMARIZER_TIMEOUT_SECONDS", "abc"), ("SUMMARIZER_MODE", "staging")],
)
def test_bad_environment_config_is_a_failure_outcome(monkeypatch, name, value):
    monkeypatch.setenv("HF_TOKEN", "hf_env_token")
    monkeypatch.setenv(name, value)
    transport = RecordingTransport(json_response(200, [{"summary_text": "never"}]))

    outcome = asyncio.run(summarize("text", transport=transport))

    assert outcome.kind is ErrorKind.CONFIGURATION_ERROR
    assert outcome.kind.is_local
    assert transport.requests == []


def test_redirects_are_followed():
    def handler(request):
        if request.url.path.endswith("/moved"):
            return httpx.Response(200, json=[{"summary_text": "after redirect"}])
        return httpx.Response(307, headers={"Location": f"{request.url}/moved"})

    transport = RecordingTransport(handler)

    outcome = run("text", make_config(), transport)

    assert outcome == SummarySuccess("after redirect")
    assert len(transport.requests) == 2
    assert request_json(transport.requests[1]) == {"inputs": "text"}
