"""
Google Slides MCP Server - Main server implementation.
"""

import asyncio
import logging
import sys
from dataclasses import dataclass
from typing import Any, Dict, List, Type

import mcp.types as types
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool
from pydantic import BaseModel

from .client import SlidesClient
from .config import build_slides_client, load_config
from .errors import ErrorCode, startup_error_message
from .executor import ToolFunction, execute_tool
from .responses import ToolResponse, error_response
from .schemas import (
    BatchUpdatePresentationArgs,
    CreatePresentationArgs,
    GetPageArgs,
    GetPresentationArgs,
    SummarizePresentationArgs,
)
from .tools.page import get_page
from .tools.presentation import (
    batch_update_presentation,
    create_presentation,
    get_presentation,
)
from .tools.summarize import summarize_presentation

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SERVER_NAME = "google-slides-mcp"


@dataclass(frozen=True)
class RegisteredTool:
    """A tool's listing entry together with its schema and implementation."""

    tool: Tool
    schema: Type[BaseModel]
    handler: ToolFunction


def _registered_tools() -> List[RegisteredTool]:
    return [
        RegisteredTool(
            tool=Tool(
                name="create_presentation",
                description="Create a new Google Slides presentation",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "title": {
                            "type": "string",
                            "description": "The title of the presentation.",
                        },
                    },
                    "required": ["title"],
                },
            ),
            schema=CreatePresentationArgs,
            handler=create_presentation,
        ),
        RegisteredTool(
            tool=Tool(
                name="get_presentation",
                description="Get details about a Google Slides presentation",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "presentationId": {
                            "type": "string",
                            "description": "The ID of the presentation to retrieve.",
                        },
                        "fields": {
                            "type": "string",
                            "description": (
                                "Optional. A mask specifying which fields to include in the "
                                'response (e.g., "slides,pageSize").'
                            ),
                        },
                    },
                    "required": ["presentationId"],
                },
            ),
            schema=GetPresentationArgs,
            handler=get_presentation,
        ),
        RegisteredTool(
            tool=Tool(
                name="batch_update_presentation",
                description="Apply a batch of updates to a Google Slides presentation",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "presentationId": {
                            "type": "string",
                            "description": "The ID of the presentation to update.",
                        },
                        "requests": {
                            "type": "array",
                            "description": (
                                "A list of update requests to apply. See the Google Slides API "
                                "documentation for request structures."
                            ),
                            "items": {"type": "object"},
                        },
                        "writeControl": {
                            "type": "object",
                            "description": (
                                "Optional. Provides control over how write requests are executed."
                            ),
                            "properties": {
                                "requiredRevisionId": {"type": "string"},
                                "targetRevisionId": {"type": "string"},
                            },
                        },
                    },
                    "required": ["presentationId", "requests"],
                },
            ),
            schema=BatchUpdatePresentationArgs,
            handler=batch_update_presentation,
        ),
        RegisteredTool(
            tool=Tool(
                name="get_page",
                description="Get details about a specific page (slide) in a presentation",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "presentationId": {
                            "type": "string",
                            "description": "The ID of the presentation.",
                        },
                        "pageObjectId": {
                            "type": "string",
                            "description": "The object ID of the page (slide) to retrieve.",
                        },
                    },
                    "required": ["presentationId", "pageObjectId"],
                },
            ),
            schema=GetPageArgs,
            handler=get_page,
        ),
        RegisteredTool(
            tool=Tool(
                name="summarize_presentation",
                description=(
                    "Extract text content from all slides in a presentation "
                    "for summarization purposes"
                ),
                inputSchema={
                    "type": "object",
                    "properties": {
                        "presentationId": {
                            "type": "string",
                            "description": "The ID of the presentation to summarize.",
                        },
                        "include_notes": {
                            "type": "boolean",
                            "description": (
                                "Optional. Whether to include speaker notes in the summary "
                                "(default: false)."
                            ),
                        },
                    },
                    "required": ["presentationId"],
                },
            ),
            schema=SummarizePresentationArgs,
            handler=summarize_presentation,
        ),
    ]


TOOLS: Dict[str, RegisteredTool] = {entry.tool.name: entry for entry in _registered_tools()}


def list_tool_definitions() -> List[Tool]:
    """Listing entries for every registered tool, in registration order."""
    return [entry.tool for entry in TOOLS.values()]


async def dispatch_tool(slides: SlidesClient, name: str, arguments: Any) -> ToolResponse:
    """Route a tool call to the executor; unknown names yield MethodNotFound."""
    entry = TOOLS.get(name)
    if entry is None:
        message = f"Unknown tool requested: {name}"
        logger.error('Error executing tool "%s": %s', name, message)
        return error_response(ErrorCode.MethodNotFound, message)
    return await execute_tool(slides, name, arguments, entry.schema, entry.handler)


def create_server(slides: SlidesClient) -> Server:
    """Build an MCP server whose tools all use ``slides``."""
    server = Server(SERVER_NAME)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """List all available tools."""
        return list_tool_definitions()

    async def call_tool(req: types.CallToolRequest) -> types.ServerResult:
        """Handle tool calls."""
        response = await dispatch_tool(slides, req.params.name, req.params.arguments)
        return types.ServerResult(types.CallToolResult.model_validate(response))

    # Registered directly so absent arguments reach the executor as None.
    server.request_handlers[types.CallToolRequest] = call_tool

    return server


def main():
    """Main entry point."""
    try:
        slides = build_slides_client(load_config())
        asyncio.run(run_server(slides))
    except KeyboardInterrupt:
        logger.info("Received interrupt, shutting down server...")
    except Exception as e:
        logger.error(
            "Failed to start Google Slides MCP server: %s",
            startup_error_message(e),
            exc_info=e,
        )
        sys.exit(1)


async def run_server(slides: SlidesClient):
    """Run the MCP server."""
    server = create_server(slides)
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Google Slides MCP server running and connected via stdio.")
        await server.run(read_stream, write_stream, server.create_initialization_options())


if __name__ == "__main__":
    main()
