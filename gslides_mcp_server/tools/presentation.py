"""
Presentation-level tools: create, fetch and batch update.

Each tool makes exactly one Slides API call and returns the response
payload as pretty-printed JSON.
"""

from ..client import SlidesClient
from ..errors import handle_remote_api_error
from ..responses import ToolResponse, json_response
from ..schemas import (
    BatchUpdatePresentationArgs,
    CreatePresentationArgs,
    GetPresentationArgs,
)


async def create_presentation(slides: SlidesClient, args: CreatePresentationArgs) -> ToolResponse:
    """Create a new, empty presentation with the given title."""
    try:
        payload = await slides.create_presentation(args.title)
    except Exception as e:
        raise handle_remote_api_error(e, "create_presentation") from e
    return json_response(payload)


async def get_presentation(slides: SlidesClient, args: GetPresentationArgs) -> ToolResponse:
    """Fetch a presentation, optionally limited by a field mask."""
    try:
        payload = await slides.get_presentation(args.presentationId, fields=args.fields)
    except Exception as e:
        raise handle_remote_api_error(e, "get_presentation") from e
    return json_response(payload)


async def batch_update_presentation(
    slides: SlidesClient, args: BatchUpdatePresentationArgs
) -> ToolResponse:
    """Apply a list of update requests in a single batchUpdate call."""
    try:
        payload = await slides.batch_update(
            args.presentationId,
            args.requests,
            write_control=args.writeControl,
        )
    except Exception as e:
        raise handle_remote_api_error(e, "batch_update_presentation") from e
    return json_response(payload)
