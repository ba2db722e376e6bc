"""
Fetch a single page (slide, layout, master or notes page).
"""

from ..client import SlidesClient
from ..errors import handle_remote_api_error
from ..responses import ToolResponse, json_response
from ..schemas import GetPageArgs


async def get_page(slides: SlidesClient, args: GetPageArgs) -> ToolResponse:
    """Return the page identified by ``pageObjectId`` as JSON."""
    try:
        payload = await slides.get_page(args.presentationId, args.pageObjectId)
    except Exception as e:
        raise handle_remote_api_error(e, "get_page") from e
    return json_response(payload)
