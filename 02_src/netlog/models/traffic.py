"""Request and response data models."""

from dataclasses import dataclass, field
from typing import Any

# None, a string, or a JSON-like value (dict, list, scalar)
Body = Any


@dataclass(frozen=True)
class Request:
    """An outbound HTTP request as seen by the instrumented client."""

    method: str
    uri: str
    headers: dict[str, str] = field(default_factory=dict)
    body: Body = None


@dataclass(frozen=True)
class Response:
    """The response received for a Request."""

    status_code: int
    status_message: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    body: Body = None
