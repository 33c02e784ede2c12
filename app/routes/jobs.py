import logging
from typing import Optional

from fastapi import APIRouter, HTTPException

from app.schemas import JobFeed, JobFeedItem
from core.database import get_active_postings
from core.feed import build_feed
from core.models import Coordinate

router = APIRouter()
log = logging.getLogger(__name__)


def _requester(lat: Optional[float], lon: Optional[float]) -> Optional[Coordinate]:
    """Both coordinates, or neither (device location unavailable)."""
    if lat is None and lon is None:
        return None
    if lat is None or lon is None:
        raise HTTPException(status_code=422, detail="lat and lon must be supplied together")
    return Coordinate(lat=lat, lon=lon)


@router.get("/api/jobs", response_model=JobFeed)
def list_jobs(lat: Optional[float] = None, lon: Optional[float] = None):
    requester = _requester(lat, lon)
    postings = get_active_postings()
    ranked = build_feed(postings, requester)

    log.info("Feed built", extra={"postings": len(ranked), "ranked": requester is not None})
    return JobFeed(
        jobs=[JobFeedItem.from_ranked(r) for r in ranked],
        ranked=requester is not None,
    )
