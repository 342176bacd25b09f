"""Health check endpoints."""

from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
@router.get("/_health", include_in_schema=False)
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
