"""
Job posting storage helpers.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from core.db.base import get_conn, new_record_id, utc_now
from core.models import ACTIVE_STATUS, JobPosting, JobRecord

_POSTING_COLUMNS = """
    id, title, description, company, status, location, latitude, longitude,
    salary, requirements, image_url, created_at
"""


def get_active_postings(limit: Optional[int] = None) -> List[JobPosting]:
    """Return active postings, newest first."""
    conn = get_conn()
    cur = conn.cursor()

    sql = f"""
        SELECT {_POSTING_COLUMNS}
        FROM jobs
        WHERE status = ?
        ORDER BY created_at DESC, id DESC
    """
    if limit is not None:
        sql += " LIMIT ?"
        cur.execute(sql, (ACTIVE_STATUS, limit))
    else:
        cur.execute(sql, (ACTIVE_STATUS,))

    rows = cur.fetchall()
    conn.close()
    return [JobPosting.from_row(row) for row in rows]


def get_posting(job_id: str) -> Optional[JobPosting]:
    conn = get_conn()
    cur = conn.cursor()
    cur.execute(f"SELECT {_POSTING_COLUMNS} FROM jobs WHERE id = ?", (job_id,))
    row = cur.fetchone()
    conn.close()
    return JobPosting.from_row(row) if row else None


def get_job_record(job_id: str) -> Optional[JobRecord]:
    """Point read used by the notification router."""
    conn = get_conn()
    cur = conn.cursor()
    cur.execute(
        "SELECT id, title, account_manager, created_by FROM jobs WHERE id = ?",
        (job_id,),
    )
    row = cur.fetchone()
    conn.close()
    return JobRecord.from_row(row) if row else None


def create_job_posting(
    *,
    title: str,
    description: str = "",
    company: str = "",
    status: str = ACTIVE_STATUS,
    location: Optional[str] = None,
    latitude: Optional[float] = None,
    longitude: Optional[float] = None,
    salary: Optional[str] = None,
    requirements: Iterable[str] = (),
    image_url: Optional[str] = None,
    account_manager: Optional[str] = None,
    created_by: Optional[str] = None,
    created_at: Optional[str] = None,
    job_id: Optional[str] = None,
) -> str:
    """Insert a posting and return its id. Used by seed scripts and tests."""
    job_id = job_id or new_record_id()
    conn = get_conn()
    cur = conn.cursor()
    cur.execute(
        """
        INSERT INTO jobs (
            id, title, description, company, status, location, latitude, longitude,
            salary, requirements, image_url, account_manager, created_by, created_at
        )
        VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
        """,
        (
            job_id,
            title,
            description,
            company,
            status,
            location,
            latitude,
            longitude,
            salary,
            list(requirements),
            image_url,
            account_manager,
            created_by,
            created_at or utc_now(),
        ),
    )
    conn.commit()
    conn.close()
    return job_id


def set_job_status(job_id: str, status: str) -> bool:
    conn = get_conn()
    cur = conn.cursor()
    cur.execute("UPDATE jobs SET status = ? WHERE id = ?", (status, job_id))
    updated = cur.rowcount > 0
    conn.commit()
    conn.close()
    return updated


def get_stats() -> Dict:
    """Return simple counts for the ops scripts."""
    conn = get_conn()
    cur = conn.cursor()

    cur.execute("SELECT COUNT(*) AS count FROM jobs WHERE status = ?", (ACTIVE_STATUS,))
    jobs_row = cur.fetchone()
    active_jobs = jobs_row["count"] if jobs_row else 0

    cur.execute(
        """
        SELECT notify_status, COUNT(*) AS count
        FROM applications
        GROUP BY notify_status
        """
    )
    by_status = {row["notify_status"]: row["count"] for row in cur.fetchall()}
    conn.close()

    return {
        "active_jobs": active_jobs,
        "applications": by_status,
    }


__all__ = [
    "get_active_postings",
    "get_posting",
    "get_job_record",
    "create_job_posting",
    "set_job_status",
    "get_stats",
]
