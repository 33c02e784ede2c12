"""
Schema helpers for Postgres.

Job postings and users are written by the administrative system; this service
only reads them, apart from the seed helpers used for local runs.
"""
from __future__ import annotations

from core.db.base import get_conn


def init_db() -> None:
    """Create the users, jobs and applications tables if they don't exist."""
    conn = get_conn()
    cur = conn.cursor()

    cur.execute(
        """
        CREATE TABLE IF NOT EXISTS users(
            id TEXT PRIMARY KEY,
            email TEXT,
            display_name TEXT,
            created_at TEXT
        )
        """
    )
    # account_manager / created_by reference users.id without a foreign key:
    # the administrative system can leave them dangling.
    cur.execute(
        """
        CREATE TABLE IF NOT EXISTS jobs(
            id TEXT PRIMARY KEY,
            title TEXT NOT NULL,
            description TEXT NOT NULL DEFAULT '',
            company TEXT NOT NULL DEFAULT '',
            status TEXT NOT NULL DEFAULT 'active',
            location TEXT,
            latitude DOUBLE PRECISION,
            longitude DOUBLE PRECISION,
            salary TEXT,
            requirements TEXT[] NOT NULL DEFAULT '{}',
            image_url TEXT,
            account_manager TEXT,
            created_by TEXT,
            created_at TEXT NOT NULL
        )
        """
    )
    cur.execute(
        """
        CREATE INDEX IF NOT EXISTS jobs_status_created_idx
        ON jobs (status, created_at DESC)
        """
    )
    cur.execute(
        """
        CREATE TABLE IF NOT EXISTS applications(
            id TEXT PRIMARY KEY,
            job_id TEXT,
            job_title TEXT,
            email TEXT NOT NULL,
            phone TEXT NOT NULL,
            full_name TEXT NOT NULL,
            birth_date TEXT NOT NULL,
            address TEXT NOT NULL,
            has_transport TEXT NOT NULL,
            has_documents TEXT NOT NULL,
            has_experience TEXT NOT NULL,
            english_level TEXT NOT NULL,
            experience_details TEXT,
            work_experience TEXT[] NOT NULL DEFAULT '{}',
            experience_location TEXT,
            experience_period TEXT,
            additional_notes TEXT,
            status TEXT NOT NULL DEFAULT 'pending',
            created_at TEXT NOT NULL,
            notify_status TEXT NOT NULL DEFAULT 'queued',
            notify_attempts INTEGER NOT NULL DEFAULT 0,
            notify_error TEXT,
            notified_at TEXT
        )
        """
    )
    cur.execute(
        """
        CREATE INDEX IF NOT EXISTS applications_notify_idx
        ON applications (notify_status, created_at)
        """
    )

    conn.commit()
    conn.close()


__all__ = [
    "init_db",
]
