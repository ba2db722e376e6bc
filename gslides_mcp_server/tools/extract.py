"""
Extract visible text and speaker notes from a Slides API presentation.

This module provides functionality to:
- Collect text runs from shapes, in document order
- Flatten tables row by row, cell by cell
- Collect speaker notes from a slide's notes page (shapes only)

The input is the JSON payload returned by ``presentations.get``; nothing
here mutates it.
"""

from typing import Any, Dict, Iterator, List, Optional

# Type aliases
PageElement = Dict[str, Any]
Slide = Dict[str, Any]


def _text_runs(text: Optional[Dict[str, Any]]) -> Iterator[str]:
    """Yield the trimmed content of each text run that has content."""
    if not text:
        return
    for text_element in text.get("textElements") or []:
        content = (text_element.get("textRun") or {}).get("content")
        if content:
            yield content.strip()


def shape_text(element: PageElement) -> Iterator[str]:
    """Yield text runs of a shape element; nothing for other kinds."""
    shape = element.get("shape")
    if shape:
        yield from _text_runs(shape.get("text"))


def table_text(element: PageElement) -> Iterator[str]:
    """Yield text runs of every cell of a table element."""
    table = element.get("table")
    if not table:
        return
    for row in table.get("tableRows") or []:
        for cell in row.get("tableCells") or []:
            yield from _text_runs(cell.get("text"))


def slide_text(slide: Slide) -> str:
    """Space-joined text of all shapes and tables on a slide.

    Runs that are empty after trimming are dropped.
    """
    candidates: List[str] = []
    for element in slide.get("pageElements") or []:
        candidates.extend(shape_text(element))
        candidates.extend(table_text(element))
    return " ".join(text for text in candidates if text)


def _notes_elements(slide: Slide) -> List[PageElement]:
    notes_page = (slide.get("slideProperties") or {}).get("notesPage") or {}
    return notes_page.get("pageElements") or []


def notes_text(slide: Slide) -> str:
    """Speaker notes of a slide, trimmed. Tables on the notes page are skipped."""
    notes = ""
    for element in _notes_elements(slide):
        for text in shape_text(element):
            notes += text + " "
    return notes.strip()
