"""
Result envelopes returned by every tool call.

A success envelope is ``{"content": [<text block>]}``. A failure envelope
additionally carries ``isError: True`` and an ``errorCode``.
"""

import json
from typing import Any, Dict

ToolResponse = Dict[str, Any]


def text_response(text: str) -> ToolResponse:
    """Success envelope with a single text block."""
    return {"content": [{"type": "text", "text": text}]}


def json_response(payload: Any) -> ToolResponse:
    """Success envelope holding ``payload`` as 2-space indented JSON."""
    return text_response(json.dumps(payload, indent=2, ensure_ascii=False))


def error_response(code: int, message: str) -> ToolResponse:
    """Failure envelope for a protocol error code and message."""
    response = text_response(message)
    response["isError"] = True
    response["errorCode"] = int(code)
    return response
