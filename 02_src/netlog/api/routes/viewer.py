"""Viewer API routes."""

from fastapi import APIRouter

from ...app import IApplication
from ..schemas import QueryRequest, ViewerResponse, snapshot_to_dict


def create_viewer_router(app: IApplication) -> APIRouter:
    """Create viewer router."""
    router = APIRouter(prefix="/api", tags=["viewer"])

    @router.get("/viewer", response_model=ViewerResponse)
    async def get_viewer() -> dict:
        """Get the application viewer's latest snapshot."""
        return snapshot_to_dict(app.viewer.snapshot)

    @router.put("/viewer/query", response_model=ViewerResponse)
    async def set_query(body: QueryRequest) -> dict:
        """Change the viewer's search query."""
        app.viewer.set_query(body.query)
        return snapshot_to_dict(app.viewer.snapshot)

    return router
