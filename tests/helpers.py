import json

import httpx

from textsummarizer.llm.provider_config import Mode, SummarizerConfig


def make_config(mode=Mode.PRODUCTION, credential="hf_test_token", **overrides):
    return SummarizerConfig(mode=mode, credential=credential, **overrides)


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler):
        self.requests = []

        def recording_handler(request):
            self.requests.append(request)
            return handler(request)

        super().__init__(recording_handler)


def json_response(status_code, payload):
    return lambda request: httpx.Response(status_code, json=payload)


def text_response(status_code, text):
    return lambda request: httpx.Response(status_code, text=text)


def request_json(request):
    return json.loads(request.content)
