"""API request/response models and converters."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from ..models import ChangeNotice, Event, EventStatus
from ..presentation import ActivityIcon
from ..viewer import ViewerSnapshot


class RequestModel(BaseModel):
    """Request part of an event."""

    method: str
    uri: str
    headers: dict[str, str] = Field(default_factory=dict)
    body: Any = None


class ResponseModel(BaseModel):
    """Response part of an event."""

    status_code: int
    status_message: str = ""
    headers: dict[str, str] = Field(default_factory=dict)
    body: Any = None


class EventResponse(BaseModel):
    """Response model for a traffic event."""

    id: str
    timestamp: datetime
    status: EventStatus
    request: RequestModel | None = None
    response: ResponseModel | None = None
    error: str | None = None


class FailRequest(BaseModel):
    """Request model for recording a failed exchange."""

    error: str


class EventRowResponse(BaseModel):
    """Response model for one viewer row."""

    id: str
    method: str
    uri: str
    status: EventStatus
    elapsed: str


class ViewerResponse(BaseModel):
    """Response model for the viewer snapshot."""

    query: str
    rows: list[EventRowResponse]
    result_count: int
    total_count: int
    activity: ActivityIcon


class QueryRequest(BaseModel):
    """Request model for changing the viewer query."""

    query: str = ""


class StatusResponse(BaseModel):
    """Response model for status."""

    status: str


def event_to_dict(event: Event) -> dict:
    """Convert an Event to a JSON-ready dict."""
    request = event.request
    response = event.response
    return {
        "id": event.id,
        "timestamp": event.timestamp.isoformat(),
        "status": event.status.value,
        "request": (
            {
                "method": request.method,
                "uri": request.uri,
                "headers": dict(request.headers),
                "body": request.body,
            }
            if request is not None
            else None
        ),
        "response": (
            {
                "status_code": response.status_code,
                "status_message": response.status_message,
                "headers": dict(response.headers),
                "body": response.body,
            }
            if response is not None
            else None
        ),
        "error": None if event.error is None else str(event.error),
    }


def notice_to_dict(notice: ChangeNotice) -> dict:
    """Convert a ChangeNotice to a JSON-ready dict."""
    return {
        "kind": notice.kind.value,
        "event": event_to_dict(notice.event) if notice.event is not None else None,
    }


def snapshot_to_dict(snapshot: ViewerSnapshot) -> dict:
    """Convert a ViewerSnapshot to a JSON-ready dict."""
    return {
        "query": snapshot.query,
        "rows": [
            {
                "id": row.id,
                "method": row.method,
                "uri": row.uri,
                "status": row.status.value,
                "elapsed": row.elapsed,
            }
            for row in snapshot.rows
        ],
        "result_count": snapshot.result_count,
        "total_count": snapshot.total_count,
        "activity": snapshot.activity.value,
    }
