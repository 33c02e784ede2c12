"""
Execute the notification plan for one newly created application.
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Callable, List, Optional

from app.email_utils import send_html_email, sender_identity
from core.database import get_job_record, get_user_record
from core.models import Application
from core.routing import JobLookup, NotificationPlan, OutgoingEmail, UserLookup, plan_notifications

log = logging.getLogger("worker.notify")

EmailSender = Callable[[str, str, str, str], None]


def route(
    application: Application,
    *,
    job_lookup: Optional[JobLookup] = None,
    user_lookup: Optional[UserLookup] = None,
    send: Optional[EmailSender] = None,
    today: Optional[date] = None,
) -> NotificationPlan:
    """
    Resolve the recipient for an application and send both emails.

    A plan that was skipped sends nothing and returns normally. Once the plan is
    resolved both messages are attempted, even if the first one fails; the first
    delivery error is then re-raised so the caller's redelivery policy applies.
    """
    plan = plan_notifications(
        application,
        get_job_record=job_lookup or get_job_record,
        get_user_record=user_lookup or get_user_record,
        today=today,
    )
    if plan.skipped:
        return plan

    send = send or send_html_email
    from_email = sender_identity()
    errors: List[Exception] = []

    for message in plan.messages:
        try:
            _deliver(send, message, from_email)
        except Exception as exc:
            log.error(
                "Failed to send %s email to %s: %s",
                message.kind,
                message.to,
                exc,
                extra={"application_id": application.id, "to": message.to, "error": str(exc)},
            )
            errors.append(exc)

    if errors:
        raise errors[0]

    log.info(
        "Application notifications sent",
        extra={"application_id": application.id, "recipient_id": plan.recipient_id},
    )
    return plan


def _deliver(send: EmailSender, message: OutgoingEmail, from_email: str) -> None:
    send(message.to, message.subject, message.html, from_email)
