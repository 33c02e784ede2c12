"""
Application storage.

Each row also records its notification state, which the worker uses so a
processed application is not routed again:

  queued  -> waiting for the worker (also after a failed delivery, until attempts run out)
  sent    -> both emails went out
  skipped -> a job/user/email reference could not be resolved; never retried
  failed  -> delivery kept failing and the attempt budget is exhausted
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from core.db.base import get_conn, new_record_id, utc_now
from core.models import PENDING_STATUS, Application

NOTIFY_QUEUED = "queued"
NOTIFY_SENT = "sent"
NOTIFY_SKIPPED = "skipped"
NOTIFY_FAILED = "failed"

_APPLICATION_COLUMNS = """
    id, job_id, job_title, email, phone, full_name, birth_date, address,
    has_transport, has_documents, has_experience, english_level,
    experience_details, work_experience, experience_location, experience_period,
    additional_notes, status, created_at
"""


def create_application(
    *,
    job_id: str,
    job_title: Optional[str],
    email: str,
    phone: str,
    full_name: str,
    birth_date: str,
    address: str,
    has_transport: str,
    has_documents: str,
    has_experience: str,
    english_level: str,
    experience_details: Optional[str] = None,
    work_experience: Iterable[str] = (),
    experience_location: Optional[str] = None,
    experience_period: Optional[str] = None,
    additional_notes: Optional[str] = None,
) -> str:
    """Insert a new application (status pending, queued for notification) and return its id."""
    application_id = new_record_id()
    conn = get_conn()
    cur = conn.cursor()
    cur.execute(
        """
        INSERT INTO applications (
            id, job_id, job_title, email, phone, full_name, birth_date, address,
            has_transport, has_documents, has_experience, english_level,
            experience_details, work_experience, experience_location, experience_period,
            additional_notes, status, created_at, notify_status
        )
        VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
        """,
        (
            application_id,
            job_id,
            job_title,
            email.strip().lower(),
            phone,
            full_name,
            birth_date,
            address,
            has_transport,
            has_documents,
            has_experience,
            english_level,
            experience_details,
            list(work_experience),
            experience_location,
            experience_period,
            additional_notes,
            PENDING_STATUS,
            utc_now(),
            NOTIFY_QUEUED,
        ),
    )
    conn.commit()
    conn.close()
    return application_id


def get_application(application_id: str) -> Optional[Dict]:
    """Return the raw row (including notification state) or None."""
    conn = get_conn()
    cur = conn.cursor()
    cur.execute(
        f"""
        SELECT {_APPLICATION_COLUMNS},
               notify_status, notify_attempts, notify_error, notified_at
        FROM applications
        WHERE id = ?
        """,
        (application_id,),
    )
    row = cur.fetchone()
    conn.close()
    return dict(row) if row else None


def get_applications_to_notify(limit: int = 50) -> List[Application]:
    """Queued applications, oldest first."""
    conn = get_conn()
    cur = conn.cursor()
    cur.execute(
        f"""
        SELECT {_APPLICATION_COLUMNS}
        FROM applications
        WHERE notify_status = ?
        ORDER BY created_at ASC, id ASC
        LIMIT ?
        """,
        (NOTIFY_QUEUED, limit),
    )
    rows = cur.fetchall()
    conn.close()
    return [Application.from_row(row) for row in rows]


def mark_application_notified(application_id: str) -> None:
    conn = get_conn()
    cur = conn.cursor()
    cur.execute(
        """
        UPDATE applications
        SET notify_status = ?, notified_at = ?, notify_error = NULL
        WHERE id = ?
        """,
        (NOTIFY_SENT, utc_now(), application_id),
    )
    conn.commit()
    conn.close()


def mark_application_skipped(application_id: str, reason: str) -> None:
    conn = get_conn()
    cur = conn.cursor()
    cur.execute(
        """
        UPDATE applications
        SET notify_status = ?, notify_error = ?
        WHERE id = ?
        """,
        (NOTIFY_SKIPPED, reason, application_id),
    )
    conn.commit()
    conn.close()


def mark_application_failed(application_id: str, error: str, max_attempts: int) -> str:
    """
    Record a failed delivery attempt.

    The row stays queued until max_attempts is reached. Returns the resulting notify_status.
    """
    conn = get_conn()
    cur = conn.cursor()
    cur.execute(
        """
        UPDATE applications
        SET notify_attempts = notify_attempts + 1,
            notify_error = ?,
            notify_status = CASE WHEN notify_attempts + 1 >= ? THEN ? ELSE ? END
        WHERE id = ?
        RETURNING notify_status
        """,
        (error, max_attempts, NOTIFY_FAILED, NOTIFY_QUEUED, application_id),
    )
    row = cur.fetchone()
    conn.commit()
    conn.close()
    return row["notify_status"] if row else NOTIFY_FAILED


__all__ = [
    "NOTIFY_QUEUED",
    "NOTIFY_SENT",
    "NOTIFY_SKIPPED",
    "NOTIFY_FAILED",
    "create_application",
    "get_application",
    "get_applications_to_notify",
    "mark_application_notified",
    "mark_application_skipped",
    "mark_application_failed",
]
