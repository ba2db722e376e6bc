"""
Google Slides MCP Server Tools.
"""

from .extract import notes_text, slide_text
from .page import get_page
from .presentation import batch_update_presentation, create_presentation, get_presentation
from .summarize import build_summary, summarize_presentation

__all__ = [
    "create_presentation",
    "get_presentation",
    "batch_update_presentation",
    "get_page",
    "summarize_presentation",
    "build_summary",
    "slide_text",
    "notes_text",
]
