"""
Candidate applications and their notification state.
"""
from core.db.applications.applications_store import (
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
