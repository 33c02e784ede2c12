"""
Seed a few demo postings (and the users they point at) for local runs.

Usage:
  DATABASE_URL=... python -m scripts.seed_jobs
  DATABASE_URL=... python -m scripts.seed_jobs --manager-email ops@yourdomain.com
"""
from __future__ import annotations

import argparse

from core.database import create_job_posting, create_user, get_user_by_email, init_db

DEMO_POSTINGS = [
    {
        "title": "Housekeeping Attendant",
        "company": "Harbor View Resort",
        "description": "Room turnover and laundry support for a 200-room resort.",
        "location": "Miami Beach, FL",
        "latitude": 25.7907,
        "longitude": -80.1300,
        "salary": "$16/hr",
        "requirements": ["Housekeeping", "Weekend availability"],
    },
    {
        "title": "Forklift Operator",
        "company": "Gulf Logistics",
        "description": "Loading and unloading at a regional distribution center.",
        "location": "Doral, FL",
        "latitude": 25.8195,
        "longitude": -80.3553,
        "salary": "$19/hr",
        "requirements": ["Forklift certification", "Work documents"],
    },
    {
        "title": "Golf Course Maintenance",
        "company": "Palm Links Club",
        "description": "Mowing, irrigation checks and bunker upkeep.",
        "location": None,
        "latitude": None,
        "longitude": None,
        "salary": None,
        "requirements": ["Outdoor work"],
    },
]


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--manager-email", default="manager@lcs-staffing.com")
    parser.add_argument("--creator-email", default="admin@lcs-staffing.com")
    args = parser.parse_args()

    init_db()

    manager = get_user_by_email(args.manager_email)
    manager_id = manager["id"] if manager else create_user(args.manager_email, "Account manager")
    creator = get_user_by_email(args.creator_email)
    creator_id = creator["id"] if creator else create_user(args.creator_email, "Admin")

    for index, posting in enumerate(DEMO_POSTINGS):
        # Alternate: some postings only carry the legacy created_by reference.
        job_id = create_job_posting(
            account_manager=manager_id if index % 2 == 0 else None,
            created_by=creator_id,
            **posting,
        )
        print(f"[seed] job id={job_id} title={posting['title']}")

    print(f"[seed] {len(DEMO_POSTINGS)} postings created (manager={manager_id}, creator={creator_id})")


if __name__ == "__main__":
    main()
