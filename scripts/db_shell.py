"""
Quick helper to run a query against Postgres (DATABASE_URL required).

Usage:
  DATABASE_URL=... python scripts/db_shell.py                          # queued applications
  DATABASE_URL=... python scripts/db_shell.py "SELECT * FROM jobs"     # run a custom query
"""
from __future__ import annotations

import sys

import psycopg
from psycopg.rows import dict_row

from core.db.base import resolve_database_url

DEFAULT_QUERY = (
    "SELECT id, job_id, email, created_at, notify_status, notify_attempts, notify_error "
    "FROM applications WHERE notify_status <> 'sent' "
    "ORDER BY created_at DESC LIMIT 20"
)


def main() -> None:
    try:
        database_url = resolve_database_url()
    except RuntimeError as exc:
        raise SystemExit(str(exc)) from exc

    query = " ".join(sys.argv[1:]).strip() or DEFAULT_QUERY

    try:
        with psycopg.connect(database_url, row_factory=dict_row) as conn:
            cur = conn.cursor()
            cur.execute(query)
            if cur.description is not None:
                for row in cur.fetchall():
                    print(dict(row))
            else:
                conn.commit()
                print(f"OK ({cur.rowcount} row(s) affected)")
    except Exception as exc:
        raise SystemExit(f"Error running query: {exc}") from exc


if __name__ == "__main__":
    main()
