"""
Job posting storage re-exports.
"""
from core.db.jobs.jobs_store import (
    get_active_postings,
    get_posting,
    get_job_record,
    create_job_posting,
    set_job_status,
    get_stats,
)

__all__ = [
    "get_active_postings",
    "get_posting",
    "get_job_record",
    "create_job_posting",
    "set_job_status",
    "get_stats",
]
