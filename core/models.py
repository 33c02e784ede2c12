"""
Domain records for postings, applications and the lookups behind notifications.

Rows come back from the store as dicts; these dataclasses give the feed and the
notification router explicit optional fields instead of falsy-string checks.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

ACTIVE_STATUS = "active"
PENDING_STATUS = "pending"


def _clean(value) -> Optional[str]:
    """Return the stripped string, or None when absent or blank."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _as_float(value) -> Optional[float]:
    if value is None:
        return None
    return float(value)


@dataclass(frozen=True)
class Coordinate:
    lat: float
    lon: float


@dataclass
class JobPosting:
    id: str
    title: str
    description: str
    company: str
    status: str = ACTIVE_STATUS
    location: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    salary: Optional[str] = None
    requirements: List[str] = field(default_factory=list)
    image_url: Optional[str] = None
    created_at: Optional[str] = None

    @classmethod
    def from_row(cls, row: Dict) -> "JobPosting":
        return cls(
            id=str(row["id"]),
            title=row.get("title") or "",
            description=row.get("description") or "",
            company=row.get("company") or "",
            status=row.get("status") or "",
            location=_clean(row.get("location")),
            latitude=_as_float(row.get("latitude")),
            longitude=_as_float(row.get("longitude")),
            salary=_clean(row.get("salary")),
            requirements=list(row.get("requirements") or []),
            image_url=_clean(row.get("image_url")),
            created_at=row.get("created_at"),
        )

    @property
    def coordinate(self) -> Optional[Coordinate]:
        if self.latitude is None or self.longitude is None:
            return None
        return Coordinate(self.latitude, self.longitude)


@dataclass
class RankedJobPosting:
    posting: JobPosting
    # None when no requester coordinate was supplied.
    distance_miles: Optional[float] = None


@dataclass
class Application:
    email: str
    phone: str
    full_name: str
    birth_date: str
    address: str
    has_transport: str
    has_documents: str
    has_experience: str
    english_level: str
    job_id: Optional[str]
    job_title: Optional[str] = None
    experience_details: Optional[str] = None
    work_experience: List[str] = field(default_factory=list)
    experience_location: Optional[str] = None
    experience_period: Optional[str] = None
    additional_notes: Optional[str] = None
    status: str = PENDING_STATUS
    created_at: Optional[str] = None
    id: Optional[str] = None

    @classmethod
    def from_row(cls, row: Dict) -> "Application":
        return cls(
            id=_clean(row.get("id")),
            email=row.get("email") or "",
            phone=row.get("phone") or "",
            full_name=row.get("full_name") or "",
            birth_date=row.get("birth_date") or "",
            address=row.get("address") or "",
            has_transport=row.get("has_transport") or "",
            has_documents=row.get("has_documents") or "",
            has_experience=row.get("has_experience") or "",
            english_level=row.get("english_level") or "",
            job_id=_clean(row.get("job_id")),
            job_title=_clean(row.get("job_title")),
            experience_details=_clean(row.get("experience_details")),
            work_experience=list(row.get("work_experience") or []),
            experience_location=_clean(row.get("experience_location")),
            experience_period=_clean(row.get("experience_period")),
            additional_notes=_clean(row.get("additional_notes")),
            status=row.get("status") or PENDING_STATUS,
            created_at=row.get("created_at"),
        )


@dataclass
class JobRecord:
    """Administrative view of a job: who answers for its applicants."""

    id: str
    account_manager: Optional[str] = None
    created_by: Optional[str] = None
    title: Optional[str] = None

    @classmethod
    def from_row(cls, row: Dict) -> "JobRecord":
        return cls(
            id=str(row["id"]),
            account_manager=_clean(row.get("account_manager")),
            created_by=_clean(row.get("created_by")),
            title=_clean(row.get("title")),
        )


@dataclass
class UserRecord:
    id: str
    email: Optional[str] = None
    display_name: Optional[str] = None

    @classmethod
    def from_row(cls, row: Dict) -> "UserRecord":
        return cls(
            id=str(row["id"]),
            email=_clean(row.get("email")),
            display_name=_clean(row.get("display_name")),
        )


__all__ = [
    "ACTIVE_STATUS",
    "PENDING_STATUS",
    "Coordinate",
    "JobPosting",
    "RankedJobPosting",
    "Application",
    "JobRecord",
    "UserRecord",
]
