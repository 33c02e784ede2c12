from fastapi import APIRouter
from fastapi.responses import Response

from core.database import get_stats

router = APIRouter()


@router.get("/")
def index():
    return {"status": "ok", "service": "job-board"}


@router.get("/health")
def health():
    """
    Basic health check, including store counts when the database is reachable.
    """
    try:
        stats = get_stats()
        return {
            "status": "ok",
            "stats": stats,
        }
    except Exception as e:
        return {
            "status": "error",
            "detail": str(e),
        }


@router.get("/favicon.ico")
def favicon():
    # Return empty 204 to avoid log noise for missing favicon
    return Response(status_code=204)
