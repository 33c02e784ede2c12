"""
Single import point for storage helpers used by the API, worker and scripts.
"""
from core.db.base import get_conn
from core.db.schema import init_db
from core.db.jobs import (
    get_active_postings,
    get_posting,
    get_job_record,
    create_job_posting,
    set_job_status,
    get_stats,
)
from core.db.users import (
    create_user,
    get_user_record,
    get_user_by_email,
)
from core.db.applications import (
    NOTIFY_QUEUED,
    NOTIFY_SENT,
    NOTIFY_SKIPPED,
    NOTIFY_FAILED,
    create_application,
    get_application,
    get_applications_to_notify,
    mark_application_notified,
    mark_application_skipped,
    mark_application_failed,
)

__all__ = [
    "get_conn",
    "init_db",
    "get_active_postings",
    "get_posting",
    "get_job_record",
    "create_job_posting",
    "set_job_status",
    "get_stats",
    "create_user",
    "get_user_record",
    "get_user_by_email",
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
