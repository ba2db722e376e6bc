"""
Async access to the Google Slides v1 API.

``SlidesClient`` is the capability handle passed to every tool. It wraps a
``googleapiclient`` discovery resource and runs each blocking request on a
worker thread, one request per call.
"""

import asyncio
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional

if TYPE_CHECKING:
    from googleapiclient.discovery import Resource

Payload = Dict[str, Any]


class SlidesClient:
    """Authenticated Google Slides client."""

    def __init__(self, service: "Resource", http_factory: Optional[Callable[[], Any]] = None):
        self._service = service
        self._http_factory = http_factory

    @property
    def service(self) -> "Resource":
        return self._service

    def new_http(self) -> Any:
        """Fresh HTTP transport for one request, or None to use the service's own."""
        if self._http_factory is None:
            return None
        return self._http_factory()

    async def _execute(self, request: Any) -> Payload:
        # httplib2 transports are not thread-safe; every request gets its own.
        http = self.new_http()
        if http is None:
            return await asyncio.to_thread(request.execute)
        return await asyncio.to_thread(request.execute, http=http)

    async def create_presentation(self, title: str) -> Payload:
        request = self._service.presentations().create(body={"title": title})
        return await self._execute(request)

    async def get_presentation(self, presentation_id: str, fields: Optional[str] = None) -> Payload:
        # The discovery client drops parameters whose value is None.
        request = self._service.presentations().get(
            presentationId=presentation_id,
            fields=fields,
        )
        return await self._execute(request)

    async def batch_update(
        self,
        presentation_id: str,
        requests: List[Any],
        write_control: Optional[Any] = None,
    ) -> Payload:
        body: Payload = {"requests": requests}
        if write_control is not None:
            body["writeControl"] = write_control
        request = self._service.presentations().batchUpdate(
            presentationId=presentation_id,
            body=body,
        )
        return await self._execute(request)

    async def get_page(self, presentation_id: str, page_object_id: str) -> Payload:
        request = self._service.presentations().pages().get(
            presentationId=presentation_id,
            pageObjectId=page_object_id,
        )
        return await self._execute(request)
