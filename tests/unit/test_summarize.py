"""Tests for the summarize_presentation tool."""

from __future__ import annotations

import json
from typing import Any

import pytest

from gslides_mcp_server.errors import ErrorCode
from gslides_mcp_server.executor import execute_tool
from gslides_mcp_server.schemas import SummarizePresentationArgs
from gslides_mcp_server.tools.summarize import build_summary, summarize_presentation


async def _summarize(slides: Any, args: Any) -> dict[str, Any]:
    return await execute_tool(
        slides, "summarize_presentation", args, SummarizePresentationArgs, summarize_presentation
    )


def _summary(result: dict[str, Any]) -> dict[str, Any]:
    assert "isError" not in result
    return json.loads(result["content"][0]["text"])


@pytest.fixture
def notes_page(shape_element: Any) -> Any:
    def _make(*runs: str) -> dict[str, Any]:
        return {"notesPage": {"pageElements": [shape_element(*runs, object_id="notes")]}}

    return _make


# ── Successful summaries ────────────────────────────────────────


class TestSummarizePresentation:
    async def test_text_without_notes(self, slides: Any, shape_element: Any) -> None:
        slides.get_presentation.return_value = {
            "presentationId": "p1",
            "title": "Test Presentation",
            "revisionId": "rev123",
            "slides": [
                {
                    "objectId": "slide1",
                    "pageElements": [
                        shape_element("Slide 1 Title\n"),
                        shape_element("Slide 1 content"),
                    ],
                },
                {"objectId": "slide2", "pageElements": [shape_element("Slide 2 Title")]},
            ],
        }

        result = await _summarize(slides, {"presentationId": "p1"})

        slides.get_presentation.assert_awaited_once_with("p1")
        assert _summary(result) == {
            "title": "Test Presentation",
            "slideCount": 2,
            "lastModified": "Revision rev123",
            "slides": [
                {"slideNumber": 1, "slideId": "slide1", "content": "Slide 1 Title Slide 1 content"},
                {"slideNumber": 2, "slideId": "slide2", "content": "Slide 2 Title"},
            ],
        }

    async def test_key_order_is_stable(self, slides: Any, shape_element: Any) -> None:
        slides.get_presentation.return_value = {
            "title": "T",
            "slides": [{"objectId": "s", "pageElements": [shape_element("x")]}],
        }

        result = await _summarize(slides, {"presentationId": "p1"})

        summary = _summary(result)
        assert list(summary) == ["title", "slideCount", "lastModified", "slides"]
        assert list(summary["slides"][0]) == ["slideNumber", "slideId", "content"]

    async def test_includes_notes(
        self, slides: Any, shape_element: Any, notes_page: Any
    ) -> None:
        slides.get_presentation.return_value = {
            "title": "With Notes",
            "slides": [
                {
                    "objectId": "s1",
                    "pageElements": [shape_element("Intro")],
                    "slideProperties": notes_page("Remember to smile\n", " and breathe "),
                }
            ],
        }

        result = await _summarize(slides, {"presentationId": "p1", "include_notes": True})

        slide = _summary(result)["slides"][0]
        assert slide["notes"] == "Remember to smile and breathe"
        assert list(slide) == ["slideNumber", "slideId", "content", "notes"]

    @pytest.mark.parametrize("args", [{"include_notes": False}, {}])
    async def test_notes_omitted_unless_requested(
        self, slides: Any, shape_element: Any, notes_page: Any, args: dict[str, Any]
    ) -> None:
        slides.get_presentation.return_value = {
            "title": "T",
            "slides": [
                {
                    "objectId": "s1",
                    "pageElements": [shape_element("Body")],
                    "slideProperties": notes_page("Secret notes"),
                }
            ],
        }

        result = await _summarize(slides, {"presentationId": "p1", **args})

        assert "notes" not in _summary(result)["slides"][0]

    async def test_blank_notes_omitted(
        self, slides: Any, shape_element: Any, notes_page: Any
    ) -> None:
        slides.get_presentation.return_value = {
            "title": "T",
            "slides": [
                {
                    "objectId": "s1",
                    "pageElements": [shape_element("Body")],
                    "slideProperties": notes_page("", "   "),
                }
            ],
        }

        result = await _summarize(slides, {"presentationId": "p1", "include_notes": True})

        assert "notes" not in _summary(result)["slides"][0]

    async def test_table_text(self, slides: Any, shape_element: Any, table_element: Any) -> None:
        slides.get_presentation.return_value = {
            "title": "Tables",
            "slides": [
                {
                    "objectId": "s1",
                    "pageElements": [
                        shape_element("Results"),
                        table_element([["Header 1", "Header 2"], ["Cell 1", "Cell 2"]]),
                    ],
                }
            ],
        }

        result = await _summarize(slides, {"presentationId": "p1"})

        assert _summary(result)["slides"][0]["content"] == (
            "Results Header 1 Header 2 Cell 1 Cell 2"
        )

    async def test_empty_presentation(self, slides: Any) -> None:
        slides.get_presentation.return_value = {"title": "Empty Presentation", "slides": []}

        result = await _summarize(slides, {"presentationId": "p1"})

        assert _summary(result) == {
            "title": "Empty Presentation",
            "slideCount": 0,
            "summary": "This presentation contains no slides.",
        }

    async def test_missing_slides_key(self, slides: Any) -> None:
        slides.get_presentation.return_value = {"presentationId": "p1"}

        result = await _summarize(slides, {"presentationId": "p1"})

        summary = _summary(result)
        assert summary["title"] == "Untitled Presentation"
        assert summary["slideCount"] == 0
        assert "slides" not in summary

    async def test_untitled_and_unknown_revision(self, slides: Any, shape_element: Any) -> None:
        slides.get_presentation.return_value = {
            "slides": [{"objectId": "s1", "pageElements": [shape_element("Hi")]}],
        }

        result = await _summarize(slides, {"presentationId": "p1"})

        summary = _summary(result)
        assert summary["title"] == "Untitled Presentation"
        assert summary["lastModified"] == "Unknown"

    async def test_filters_empty_text(self, slides: Any, shape_element: Any) -> None:
        slides.get_presentation.return_value = {
            "title": "T",
            "slides": [
                {
                    "objectId": "s1",
                    "pageElements": [shape_element("Real Content", "   ", "", None)],
                }
            ],
        }

        result = await _summarize(slides, {"presentationId": "p1"})

        assert _summary(result)["slides"][0]["content"] == "Real Content"

    async def test_slide_without_elements_or_id(self, slides: Any) -> None:
        slides.get_presentation.return_value = {"title": "T", "slides": [{}, {"objectId": "s2"}]}

        result = await _summarize(slides, {"presentationId": "p1"})

        assert _summary(result)["slides"] == [
            {"slideNumber": 1, "slideId": "slide_1", "content": ""},
            {"slideNumber": 2, "slideId": "s2", "content": ""},
        ]


# ── Failures ────────────────────────────────────────────────────


class TestSummarizeFailures:
    async def test_missing_presentation_id(self, slides: Any) -> None:
        result = await _summarize(slides, {"include_notes": True})

        slides.get_presentation.assert_not_called()
        assert result["errorCode"] == ErrorCode.InvalidParams
        assert "presentationId: Required" in result["content"][0]["text"]

    async def test_api_failure(self, slides: Any) -> None:
        slides.get_presentation.side_effect = PermissionError("The caller does not have permission")

        result = await _summarize(slides, {"presentationId": "p1"})

        assert result["isError"] is True
        assert result["errorCode"] == ErrorCode.InternalError
        assert result["content"][0]["text"] == (
            "Remote API Error in summarize_presentation: The caller does not have permission"
        )


class TestBuildSummary:
    def test_does_not_mutate_input(self, shape_element: Any) -> None:
        presentation = {"title": "T", "slides": [{"pageElements": [shape_element(" a ")]}]}
        snapshot = json.dumps(presentation, sort_keys=True)

        build_summary(presentation, include_notes=True)

        assert json.dumps(presentation, sort_keys=True) == snapshot
