"""
User records referenced by jobs (account managers and creators).
"""
from __future__ import annotations

from typing import Dict, Optional

from core.db.base import get_conn, new_record_id, utc_now
from core.models import UserRecord


def create_user(
    email: Optional[str],
    display_name: Optional[str] = None,
    user_id: Optional[str] = None,
) -> str:
    user_id = user_id or new_record_id()
    conn = get_conn()
    cur = conn.cursor()
    cur.execute(
        """
        INSERT INTO users (id, email, display_name, created_at)
        VALUES (?, ?, ?, ?)
        """,
        (user_id, email.strip().lower() if email else None, display_name, utc_now()),
    )
    conn.commit()
    conn.close()
    return user_id


def get_user_record(user_id: str) -> Optional[UserRecord]:
    """Point read used by the notification router."""
    conn = get_conn()
    cur = conn.cursor()
    cur.execute(
        "SELECT id, email, display_name FROM users WHERE id = ?",
        (user_id,),
    )
    row = cur.fetchone()
    conn.close()
    return UserRecord.from_row(row) if row else None


def get_user_by_email(email: str) -> Dict | None:
    conn = get_conn()
    cur = conn.cursor()
    cur.execute(
        """
        SELECT id, email, display_name, created_at
        FROM users
        WHERE email = ?
        """,
        (email.strip().lower(),),
    )
    row = cur.fetchone()
    conn.close()
    return dict(row) if row else None


__all__ = [
    "create_user",
    "get_user_record",
    "get_user_by_email",
]
