"""Inference endpoint access package.

Architectural role:
    Provides endpoint/credential configuration, request construction, and the
    async transport used to reach the summarization model.

Module split:
    - `provider_config`: mode-driven endpoint resolution and env configuration.
    - `client`: request validation, request building, and HTTP transport.
    - `service`: canonical text-to-outcome entry point.
"""
