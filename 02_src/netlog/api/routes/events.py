"""Event log API routes."""

from fastapi import APIRouter, HTTPException, Query
from fastapi import Request as HTTPRequest
from fastapi.responses import StreamingResponse

from ...app import IApplication
from ...errors import AlreadyTerminal, NotFound
from ...logging_config import get_logger
from ...models import Event, Request, Response
from ...query import filter_events
from ..schemas import (
    EventResponse,
    FailRequest,
    RequestModel,
    ResponseModel,
    StatusResponse,
    event_to_dict,
)
from ..streaming import CONNECTED_FRAME, NoticeStream

logger = get_logger(__name__)


def create_events_router(app: IApplication) -> APIRouter:
    """Create events router."""
    router = APIRouter(prefix="/api", tags=["events"])

    @router.get("/events", response_model=list[EventResponse])
    async def list_events(
        q: str = Query("", description="Case-insensitive URI substring"),
    ) -> list[dict]:
        """Get logged events, optionally filtered by URI."""
        events = filter_events(app.event_log.current_events(), q)
        return [event_to_dict(e) for e in events]

    @router.get("/events/stream")
    async def stream_events(request: HTTPRequest) -> StreamingResponse:
        """Push every log change as a server-sent event."""

        async def frames():
            async with NoticeStream(app.event_log) as stream:
                yield CONNECTED_FRAME
                while not await request.is_disconnected():
                    yield await stream.next_frame()

        return StreamingResponse(
            frames(),
            media_type="text/event-stream",
            headers={"Cache-Control": "no-cache"},
        )

    @router.get("/events/{event_id}", response_model=EventResponse)
    async def get_event(event_id: str) -> dict:
        """Get a single event."""
        try:
            return event_to_dict(app.event_log.get(event_id))
        except NotFound as e:
            raise HTTPException(status_code=404, detail=str(e))

    @router.post("/events", response_model=EventResponse, status_code=201)
    async def ingest_request(body: RequestModel) -> dict:
        """Record a new pending request."""
        event = Event(
            request=Request(
                method=body.method,
                uri=body.uri,
                headers=body.headers,
                body=body.body,
            )
        )
        try:
            app.event_log.append(event)
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))
        logger.info("Request ingested: %s %s", body.method, body.uri)
        return event_to_dict(event)

    @router.post("/events/{event_id}/response", response_model=EventResponse)
    async def complete_event(event_id: str, body: ResponseModel) -> dict:
        """Attach the response to a pending event."""
        response = Response(
            status_code=body.status_code,
            status_message=body.status_message,
            headers=body.headers,
            body=body.body,
        )
        try:
            event = app.event_log.get(event_id).with_response(response)
            app.event_log.update(event)
            return event_to_dict(event)
        except NotFound as e:
            raise HTTPException(status_code=404, detail=str(e))
        except AlreadyTerminal as e:
            raise HTTPException(status_code=409, detail=str(e))

    @router.post("/events/{event_id}/error", response_model=EventResponse)
    async def fail_event(event_id: str, body: FailRequest) -> dict:
        """Attach an error to a pending event."""
        try:
            event = app.event_log.get(event_id).with_error(body.error)
            app.event_log.update(event)
            return event_to_dict(event)
        except NotFound as e:
            raise HTTPException(status_code=404, detail=str(e))
        except AlreadyTerminal as e:
            raise HTTPException(status_code=409, detail=str(e))

    @router.delete("/events", response_model=StatusResponse)
    async def clear_events() -> dict:
        """Drop all logged events."""
        app.event_log.clear()
        return {"status": "ok"}

    return router
