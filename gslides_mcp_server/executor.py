"""
Tool execution pipeline.

``execute_tool`` validates raw arguments, runs the tool function and maps
every failure onto a failure envelope. It never raises.
"""

import logging
from typing import Any, Awaitable, Callable, Type, TypeVar

from mcp.shared.exceptions import McpError
from pydantic import BaseModel

from .client import SlidesClient
from .errors import ErrorCode, failure_message
from .responses import ToolResponse, error_response
from .schemas import format_violations, validate_arguments

logger = logging.getLogger(__name__)

ArgsT = TypeVar("ArgsT", bound=BaseModel)
ToolFunction = Callable[[SlidesClient, ArgsT], Awaitable[ToolResponse]]


async def execute_tool(
    slides: SlidesClient,
    tool_name: str,
    raw_args: Any,
    schema: Type[ArgsT],
    tool_fn: ToolFunction,
) -> ToolResponse:
    """Run one tool call and return its envelope.

    Args:
        slides: Capability handle passed through to the tool function
        tool_name: Name of the tool, used in messages and diagnostics
        raw_args: Arguments as received; None means they were absent
        schema: Pydantic model the arguments must satisfy
        tool_fn: Coroutine implementing the tool

    Returns:
        The tool's own envelope on success, otherwise a failure envelope
    """
    if raw_args is None:
        message = f'Missing arguments for tool "{tool_name}".'
        logger.error('Error executing tool "%s": %s', tool_name, message)
        return error_response(ErrorCode.InvalidParams, message)

    result = validate_arguments(schema, raw_args)
    if not result.ok:
        logger.error('Error executing tool "%s": %r', tool_name, result.violations)
        return error_response(
            ErrorCode.InvalidParams,
            f'Invalid arguments for tool "{tool_name}": {format_violations(result.violations)}',
        )

    try:
        return await tool_fn(slides, result.value)
    except McpError as e:
        logger.error('Error executing tool "%s": %r', tool_name, e)
        return error_response(e.error.code, e.error.message)
    except Exception as e:
        logger.error('Error executing tool "%s": %r', tool_name, e)
        return error_response(
            ErrorCode.InternalError,
            f'Failed to execute tool "{tool_name}": {failure_message(e)}',
        )
