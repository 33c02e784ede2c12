"""
Small SMTP helpers shared by routes and workers.
"""
from __future__ import annotations

import logging
import os
import smtplib
from email.errors import MessageError
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

log = logging.getLogger(__name__)

DEFAULT_FROM = "noreply@lcs-staffing.com"


class EmailDeliveryError(RuntimeError):
    """The SMTP server rejected the message or could not be reached."""

    def __init__(self, recipient: str, detail: str):
        super().__init__(f"Failed to deliver email to {recipient}: {detail}")
        self.recipient = recipient
        self.detail = detail


def _effective_from(email_from: str | None, email_user: str | None, smtp_server: str) -> str:
    if "gmail" in (smtp_server or "").lower() and email_user:
        return email_user
    return email_from or email_user or DEFAULT_FROM


def sender_identity() -> str:
    """The fixed From address every notification uses."""
    return _effective_from(
        os.getenv("EMAIL_FROM"),
        os.getenv("EMAIL_USER"),
        os.getenv("SMTP_SERVER", "smtp.gmail.com"),
    )


def _smtp_detail(exc: Exception) -> str:
    code = getattr(exc, "smtp_code", None)
    error = getattr(exc, "smtp_error", None)
    if isinstance(error, bytes):
        error = error.decode("utf-8", "replace")
    if code is not None:
        return f"{code} {error or ''}".strip()
    return str(exc) or exc.__class__.__name__


def send_html_email(to_email: str, subject: str, html_body: str, from_email: str | None = None) -> None:
    email_user = os.getenv("EMAIL_USER")
    email_password = os.getenv("EMAIL_PASSWORD")
    smtp_server = os.getenv("SMTP_SERVER", "smtp.gmail.com")
    smtp_port = int(os.getenv("SMTP_PORT", "587"))

    if not (email_user and email_password):
        raise RuntimeError("Email credentials not configured. Set EMAIL_USER and EMAIL_PASSWORD.")

    # Header problems (embedded line breaks, bad encodings) surface here, before connecting.
    try:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = from_email or sender_identity()
        msg["To"] = to_email
        msg.attach(MIMEText(html_body, "html", "utf-8"))
        payload = msg.as_string()
    except (MessageError, ValueError) as exc:
        raise EmailDeliveryError(to_email, f"invalid message: {exc}") from exc

    try:
        with smtplib.SMTP(smtp_server, smtp_port) as server:
            server.starttls()
            server.login(email_user, email_password)
            server.sendmail(msg["From"], [to_email], payload)
    except (smtplib.SMTPException, OSError) as exc:
        raise EmailDeliveryError(to_email, _smtp_detail(exc)) from exc

    log.info("Email sent", extra={"to": to_email, "from": msg["From"]})
