"""Adapter package for HTTP and terminal interfaces.

Scope:
- Input collection and outcome rendering only.
- The development proxy route lives in `http_api`.
- No summarization logic is implemented in this package.
"""
