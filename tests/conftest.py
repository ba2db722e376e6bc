"""Shared test fixtures for gslides_mcp_server."""

from __future__ import annotations

from typing import Any
from unittest.mock import create_autospec

import pytest

from gslides_mcp_server.client import SlidesClient


@pytest.fixture
def slides() -> Any:
    """SlidesClient double whose API coroutines are AsyncMocks."""
    return create_autospec(SlidesClient, instance=True)


@pytest.fixture
def text_element() -> Any:
    """Factory for a textElements entry holding one text run."""

    def _make(content: str | None) -> dict[str, Any]:
        if content is None:
            return {"paragraphMarker": {}}
        return {"textRun": {"content": content}}

    return _make


@pytest.fixture
def shape_element(text_element: Any) -> Any:
    """Factory for a shape page element with the given text runs."""

    def _make(*runs: str | None, object_id: str = "shape") -> dict[str, Any]:
        return {
            "objectId": object_id,
            "shape": {"text": {"textElements": [text_element(run) for run in runs]}},
        }

    return _make


@pytest.fixture
def table_element(text_element: Any) -> Any:
    """Factory for a table page element; ``rows`` is a list of lists of cell texts."""

    def _make(rows: list[list[str]]) -> dict[str, Any]:
        return {
            "objectId": "table",
            "table": {
                "tableRows": [
                    {
                        "tableCells": [
                            {"text": {"textElements": [text_element(cell)]}} for cell in row
                        ]
                    }
                    for row in rows
                ]
            },
        }

    return _make

