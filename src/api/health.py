"""Health check endpoint."""

from fastapi import APIRouter, Request

from src.api.schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health_check(request: Request) -> HealthResponse:
    """Return application status and the number of loaded catalog items."""
    store = getattr(request.app.state, "catalog_store", None)
    if store is None:
        return HealthResponse(status="starting")
    return HealthResponse(status="ok", catalog_items=store.count())
