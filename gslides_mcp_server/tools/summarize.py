"""
Summarize a presentation as per-slide text for downstream summarization.
"""

from typing import Any, Dict, List

from ..client import SlidesClient
from ..errors import handle_remote_api_error
from ..responses import ToolResponse, json_response
from ..schemas import SummarizePresentationArgs
from .extract import Slide, notes_text, slide_text

UNTITLED = "Untitled Presentation"
NO_SLIDES_MESSAGE = "This presentation contains no slides."

SummaryDict = Dict[str, Any]


def summarize_slide(slide: Slide, slide_number: int, include_notes: bool) -> SummaryDict:
    """Build the summary entry for one slide (``slide_number`` is 1-based)."""
    entry: SummaryDict = {
        "slideNumber": slide_number,
        "slideId": slide.get("objectId") or f"slide_{slide_number}",
        "content": slide_text(slide),
    }
    if include_notes:
        notes = notes_text(slide)
        if notes:
            entry["notes"] = notes
    return entry


def build_summary(presentation: Dict[str, Any], include_notes: bool = False) -> SummaryDict:
    """Summarize a ``presentations.get`` payload.

    A presentation without slides yields ``title``, ``slideCount`` and a
    ``summary`` message instead of the per-slide list.
    """
    title = presentation.get("title") or UNTITLED
    slides = presentation.get("slides") or []

    if not slides:
        return {
            "title": title,
            "slideCount": 0,
            "summary": NO_SLIDES_MESSAGE,
        }

    slide_summaries: List[SummaryDict] = [
        summarize_slide(slide, index, include_notes)
        for index, slide in enumerate(slides, start=1)
    ]
    revision_id = presentation.get("revisionId")

    return {
        "title": title,
        "slideCount": len(slide_summaries),
        "lastModified": f"Revision {revision_id}" if revision_id else "Unknown",
        "slides": slide_summaries,
    }


async def summarize_presentation(
    slides: SlidesClient, args: SummarizePresentationArgs
) -> ToolResponse:
    """Fetch a presentation and return its text content per slide."""
    try:
        presentation = await slides.get_presentation(args.presentationId)
    except Exception as e:
        raise handle_remote_api_error(e, "summarize_presentation") from e
    return json_response(build_summary(presentation, include_notes=args.include_notes is True))
