"""
Error codes, structured errors and remote error normalization.

This module provides functionality to:
- Name the protocol error codes used on the wire
- Build structured errors (``McpError``) that the executor passes through
- Turn any failure raised by the Slides API into a structured error
- Extract a readable message from startup failures
"""

import json
import logging
from collections.abc import Mapping
from enum import IntEnum
from typing import Any, Callable, List, Optional

from googleapiclient.errors import HttpError
from mcp.shared.exceptions import McpError
from mcp.types import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    ErrorData,
)

logger = logging.getLogger(__name__)

UNKNOWN_REMOTE_ERROR = "Unknown Remote API error"
UNKNOWN_ERROR = "Unknown error"


class ErrorCode(IntEnum):
    """JSON-RPC error codes reported in ``errorCode``."""

    InvalidRequest = INVALID_REQUEST
    MethodNotFound = METHOD_NOT_FOUND
    InvalidParams = INVALID_PARAMS
    InternalError = INTERNAL_ERROR


class ConfigError(Exception):
    """Required server configuration is missing or invalid."""


def structured_error(code: int, message: str) -> McpError:
    """Create an ``McpError`` carrying a protocol code and message."""
    return McpError(ErrorData(code=int(code), message=message))


def _dig(value: Any, *keys: str) -> Any:
    """Follow keys through attributes or mapping items, None when a step is missing."""
    for key in keys:
        if value is None:
            return None
        if isinstance(value, Mapping):
            value = value.get(key)
        else:
            value = getattr(value, key, None)
    return value


def _http_error_detail(error: Any) -> Optional[str]:
    """Detail from a googleapiclient ``HttpError``."""
    if not isinstance(error, HttpError):
        return None

    content = error.content
    if isinstance(content, bytes):
        content = content.decode("utf-8", errors="replace")
    try:
        body = json.loads(content) if content else None
    except ValueError:
        body = None

    message = _dig(body, "error", "message")
    if isinstance(message, str) and message:
        return message
    reason = getattr(error, "reason", None)
    if isinstance(reason, str) and reason:
        return reason
    return None


def _response_payload_detail(error: Any) -> Optional[str]:
    """Detail from a nested ``response.data.error.message`` field."""
    message = _dig(error, "response", "data", "error", "message")
    if isinstance(message, str) and message:
        return message
    return None


def _exception_detail(error: Any) -> Optional[str]:
    # An exception raised without a message falls through to the default.
    if isinstance(error, BaseException):
        return str(error) or None
    return None


def _string_detail(error: Any) -> Optional[str]:
    if isinstance(error, str):
        return error
    return None


# Tried in order; the first non-None detail wins.
REMOTE_DETAIL_EXTRACTORS: List[Callable[[Any], Optional[str]]] = [
    _http_error_detail,
    _response_payload_detail,
    _exception_detail,
    _string_detail,
]

FAILURE_DETAIL_EXTRACTORS: List[Callable[[Any], Optional[str]]] = [
    _exception_detail,
    _string_detail,
]


def extract_detail(
    error: Any,
    extractors: List[Callable[[Any], Optional[str]]],
    default: str,
) -> str:
    """Run extractors in priority order and fall back to ``default``."""
    for extractor in extractors:
        detail = extractor(error)
        if detail is not None:
            return detail
    return default


def handle_remote_api_error(error: Any, operation: str) -> McpError:
    """Normalize a failed Slides API call into a structured error.

    Args:
        error: Whatever the remote call raised
        operation: Tool name the call was made for

    Returns:
        ``McpError`` with code InternalError and message
        ``Remote API Error in <operation>: <detail>``
    """
    logger.error("Remote API Error (%s): %r", operation, error)
    detail = extract_detail(error, REMOTE_DETAIL_EXTRACTORS, UNKNOWN_REMOTE_ERROR)
    return structured_error(
        ErrorCode.InternalError,
        f"Remote API Error in {operation}: {detail}",
    )


def failure_message(error: Any) -> str:
    """Best-effort message for an unclassified failure."""
    return extract_detail(error, FAILURE_DETAIL_EXTRACTORS, UNKNOWN_ERROR)


def startup_error_message(error: Any) -> str:
    """Message reported when the server fails to start."""
    return failure_message(error)
