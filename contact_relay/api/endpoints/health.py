from fastapi import APIRouter

from contact_relay import __version__
from contact_relay.core.utils import iso_timestamp

router = APIRouter(tags=["Health"])

# Only mounted for the long-running server; load balancers poll it
health_router = APIRouter(tags=["Health"])


@router.get("/")
async def root():
    """Service info, also used as a liveness probe"""
    return {
        "message": "Contact API Server is running!",
        "timestamp": iso_timestamp(),
        "version": __version__,
    }


@health_router.get("/health")
async def health_check():
    return {"status": "healthy"}
