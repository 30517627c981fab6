"""SIM implementation - hardcoded traffic scenario for demos."""

import asyncio
import random
from typing import Protocol

import httpx

from netlog.logging_config import get_logger

logger = get_logger(__name__)


# (method, uri, status_code, status_message); status 0 means a transport error
SCENARIO: list[tuple[str, str, int, str]] = [
    ("GET", "https://api.example.com/v1/users?page=1", 200, "OK"),
    ("POST", "https://api.example.com/v1/sessions", 201, "Created"),
    ("GET", "https://cdn.example.com/assets/logo.png", 304, "Not Modified"),
    ("PUT", "https://api.example.com/v1/users/42", 422, "Unprocessable Entity"),
    ("GET", "https://status.example.org/health", 0, "Connection refused"),
    ("DELETE", "https://api.example.com/v1/sessions/current", 204, "No Content"),
]


class ISim(Protocol):
    """Generate demo traffic through the ingest API."""

    async def start(self) -> None:
        """Start hardcoded scenario."""
        ...

    async def stop(self) -> None:
        """Stop scenario."""
        ...


class TrafficSim:
    """SIM that replays a hardcoded list of HTTP exchanges."""

    def __init__(
        self,
        api_url: str = "http://localhost:8000",
        client: httpx.AsyncClient | None = None,
        rounds: int = 3,
    ):
        self._api_url = api_url
        self._client = client
        self._owns_client = client is None
        self._rounds = rounds
        self._running = False
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._running

    async def start(self) -> None:
        """Start hardcoded scenario."""
        if self._running:
            return

        self._running = True
        if self._client is None:
            self._client = httpx.AsyncClient()

        self._task = asyncio.create_task(self._run_scenario())

    async def stop(self) -> None:
        """Stop scenario."""
        self._running = False

        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

        if self._client and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def _run_scenario(self) -> None:
        """Run hardcoded scenario."""
        try:
            logger.info("SIM started: %s exchanges x %s rounds", len(SCENARIO), self._rounds)
            for _ in range(self._rounds):
                for method, uri, status_code, status_message in SCENARIO:
                    if not self._running:
                        return
                    await self.send_exchange(
                        method,
                        uri,
                        status_code,
                        status_message,
                        delay=random.uniform(0.2, 1.5),
                    )
                    await asyncio.sleep(random.uniform(1, 3))
        except asyncio.CancelledError:
            pass
        except Exception as e:
            logger.error("SIM scenario error: %s", e)
        finally:
            self._running = False
            logger.info("SIM completed")

    async def send_exchange(
        self,
        method: str,
        uri: str,
        status_code: int,
        status_message: str = "",
        delay: float = 0.0,
    ) -> str | None:
        """Ingest one request, then its response (or error) after ``delay``.

        Returns the event id, or None if the request could not be ingested.
        """
        if not self._client:
            return None

        try:
            response = await self._client.post(
                f"{self._api_url}/api/events",
                json={
                    "method": method,
                    "uri": uri,
                    "headers": {"user-agent": "netlog-sim/0.1"},
                    "body": {"sim": True} if method in ("POST", "PUT") else None,
                },
                timeout=10.0,
            )
            if response.status_code != 201:
                logger.error("SIM: Error ingesting request: %s", response.status_code)
                return None
            event_id = response.json()["id"]

            if delay:
                await asyncio.sleep(delay)

            if status_code:
                outcome = await self._client.post(
                    f"{self._api_url}/api/events/{event_id}/response",
                    json={"status_code": status_code, "status_message": status_message},
                    timeout=10.0,
                )
            else:
                outcome = await self._client.post(
                    f"{self._api_url}/api/events/{event_id}/error",
                    json={"error": status_message},
                    timeout=10.0,
                )

            if outcome.status_code != 200:
                logger.error("SIM: Error recording outcome: %s", outcome.status_code)
            else:
                logger.info("SIM: %s %s -> %s", method, uri, status_code or status_message)
            return event_id

        except httpx.HTTPError as e:
            logger.error("SIM: Failed to send exchange: %s", e)
            return None
