"""
HTML bodies for the two application emails.
"""
from __future__ import annotations

import html
from datetime import date
from typing import List, Optional, Tuple

from core.models import Application

YES_NO_LABELS = {"si": "Yes", "no": "No"}
ENGLISH_LEVEL_LABELS = {"Bajo": "Basic", "Medio": "Intermediate", "Alto": "Advanced"}

_WRAPPER = (
    '<div style="font-family:-apple-system,BlinkMacSystemFont,\'Segoe UI\',Roboto,sans-serif;'
    'max-width:640px;margin:0 auto;padding:16px;color:#333">{body}</div>'
)


def _yes_no(token: str) -> str:
    return YES_NO_LABELS.get(token, token)


def _row(label: str, value: str) -> str:
    return f"<p><strong>{html.escape(label)}:</strong> {html.escape(value)}</p>"


def _one_line(text: str) -> str:
    # Subjects become mail headers; embedded line breaks are not allowed there.
    return " ".join(text.split())


def _summary_rows(application: Application) -> List[Tuple[str, Optional[str]]]:
    """(label, value) pairs in display order; None values are left out of the email."""
    return [
        ("Job", application.job_title),
        ("Job ID", application.job_id),
        ("Candidate", application.full_name),
        ("Email", application.email),
        ("Phone", application.phone),
        ("Date of birth", application.birth_date),
        ("Address", application.address),
        ("Own transport", _yes_no(application.has_transport)),
        ("Work documents", _yes_no(application.has_documents)),
        ("English level", ENGLISH_LEVEL_LABELS.get(application.english_level, application.english_level)),
        ("Previous experience", _yes_no(application.has_experience)),
        ("Experience details", application.experience_details),
        ("Experience areas", ", ".join(application.work_experience) if application.work_experience else None),
        ("Where", application.experience_location),
        ("When", application.experience_period),
        ("Notes", application.additional_notes),
        ("Status", application.status),
        ("Submitted", application.created_at),
    ]


def recipient_subject(application: Application) -> str:
    return _one_line(f"New application: {application.job_title or application.job_id}")


def render_recipient_notification(application: Application) -> str:
    rows = "\n".join(_row(label, value) for label, value in _summary_rows(application) if value is not None)
    body = f"<h2>New application received</h2>\n{rows}"
    return _WRAPPER.format(body=body)


def confirmation_subject(application: Application) -> str:
    return _one_line(f"We received your application: {application.job_title or 'your application'}")


def render_candidate_confirmation(application: Application, today: date) -> str:
    name = html.escape(application.full_name)
    title = html.escape(application.job_title or "the position you selected")
    body = (
        f"<h2>Thank you, {name}</h2>"
        f"<p>We received your application for <strong>{title}</strong> on {today.strftime('%d/%m/%Y')}.</p>"
        "<p>Our team will review it and contact you if your profile matches the position.</p>"
        '<p style="font-size:11px;color:#999">This is an automated message, please do not reply.</p>'
    )
    return _WRAPPER.format(body=body)


__all__ = [
    "recipient_subject",
    "render_recipient_notification",
    "confirmation_subject",
    "render_candidate_confirmation",
]
