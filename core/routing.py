"""
Resolve who hears about a new application and what gets sent.

Planning is kept free of I/O beyond the two injected lookups so it can be unit
tested with plain functions; worker.notify executes the resulting plan.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Callable, List, Optional

from core.models import Application, JobRecord, UserRecord
from core.templates import (
    confirmation_subject,
    recipient_subject,
    render_candidate_confirmation,
    render_recipient_notification,
)

log = logging.getLogger(__name__)

JobLookup = Callable[[str], Optional[JobRecord]]
UserLookup = Callable[[str], Optional[UserRecord]]

# Evaluated in order; the first non-empty identifier wins.
RECIPIENT_KEY_EXTRACTORS: List[Callable[[JobRecord], Optional[str]]] = [
    lambda job: job.account_manager,
    lambda job: job.created_by,
]

RECIPIENT = "recipient"
CANDIDATE = "candidate"


@dataclass
class OutgoingEmail:
    kind: str
    to: str
    subject: str
    html: str


@dataclass
class NotificationPlan:
    application_id: Optional[str]
    messages: List[OutgoingEmail] = field(default_factory=list)
    skipped_reason: Optional[str] = None
    recipient_id: Optional[str] = None

    @property
    def skipped(self) -> bool:
        return self.skipped_reason is not None


def resolve_recipient_key(job: JobRecord) -> Optional[str]:
    for extract in RECIPIENT_KEY_EXTRACTORS:
        key = extract(job)
        if key:
            return key
    return None


def _skip(application: Application, reason: str, **context) -> NotificationPlan:
    log.warning(
        "Notification skipped: %s",
        reason,
        extra={"application_id": application.id, **context},
    )
    return NotificationPlan(application_id=application.id, skipped_reason=reason)


def plan_notifications(
    application: Application,
    *,
    get_job_record: JobLookup,
    get_user_record: UserLookup,
    today: Optional[date] = None,
) -> NotificationPlan:
    """
    Walk application -> job -> user and build the two outgoing emails.

    Any missing link short-circuits into a skipped plan (logged, never raised):
    retrying an unresolvable reference cannot succeed until the data is fixed.
    """
    job_id = application.job_id
    if not job_id:
        return _skip(application, "application has no job id")

    job = get_job_record(job_id)
    if job is None:
        return _skip(application, f"job {job_id} not found", job_id=job_id)

    recipient_id = resolve_recipient_key(job)
    if recipient_id is None:
        return _skip(application, f"job {job_id} has no account manager or creator", job_id=job_id)

    user = get_user_record(recipient_id)
    if user is None:
        return _skip(application, f"user {recipient_id} not found", job_id=job_id, recipient_id=recipient_id)

    if not user.email:
        return _skip(application, f"user {recipient_id} has no email", job_id=job_id, recipient_id=recipient_id)

    today = today or datetime.now(timezone.utc).date()
    messages = [
        OutgoingEmail(
            kind=RECIPIENT,
            to=user.email,
            subject=recipient_subject(application),
            html=render_recipient_notification(application),
        ),
        OutgoingEmail(
            kind=CANDIDATE,
            to=application.email,
            subject=confirmation_subject(application),
            html=render_candidate_confirmation(application, today),
        ),
    ]
    return NotificationPlan(application_id=application.id, messages=messages, recipient_id=recipient_id)


__all__ = [
    "RECIPIENT_KEY_EXTRACTORS",
    "RECIPIENT",
    "CANDIDATE",
    "OutgoingEmail",
    "NotificationPlan",
    "resolve_recipient_key",
    "plan_notifications",
]
