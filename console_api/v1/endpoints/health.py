"""Health check endpoint."""

from typing import Dict

from fastapi import APIRouter

from storefront import __version__

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check() -> Dict[str, str]:
    """Health check endpoint.

    Returns:
        Health status
    """
    return {"status": "healthy", "version": __version__}
