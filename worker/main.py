import asyncio
import logging
import os

from dotenv import load_dotenv

from core.database import (
    NOTIFY_FAILED,
    NOTIFY_QUEUED,
    NOTIFY_SENT,
    NOTIFY_SKIPPED,
    get_applications_to_notify,
    init_db,
    mark_application_failed,
    mark_application_notified,
    mark_application_skipped,
)
from app.email_utils import EmailDeliveryError
from worker.notify import route

# Load `.env` for local/dev runs (override=True so updates take effect after restart).
load_dotenv(override=True)

# -------- CONFIG --------
CHECK_INTERVAL = int(os.getenv("CHECK_INTERVAL", "30"))  # seconds between checks
NOTIFY_BATCH_SIZE = int(os.getenv("NOTIFY_BATCH_SIZE", "50"))
NOTIFY_MAX_ATTEMPTS = int(os.getenv("NOTIFY_MAX_ATTEMPTS", "5"))
RUN_ONCE = os.getenv("RUN_ONCE", "false").lower() == "true"
# ------------------------

logging.basicConfig(
    level=getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
log = logging.getLogger("worker")


def process_application(application) -> str:
    """
    Route one application and write the outcome back to its record.

    Returns the resulting notify status.
    """
    try:
        plan = route(application)
    except EmailDeliveryError as e:
        log.warning(
            "Notification attempt failed for %s: %s",
            application.id,
            e,
            extra={"application_id": application.id, "to": e.recipient, "error": e.detail},
        )
        status = mark_application_failed(application.id, str(e), NOTIFY_MAX_ATTEMPTS)
        if status == NOTIFY_FAILED:
            log.error(
                "Giving up on application notifications for %s",
                application.id,
                extra={"application_id": application.id},
            )
        return status
    except Exception as e:
        # Configuration or store problem, not a delivery failure: leave the attempt budget alone.
        log.error(
            "Could not route application %s, leaving it queued: %s",
            application.id,
            e,
            extra={"application_id": application.id, "error": str(e)},
        )
        return NOTIFY_QUEUED

    if plan.skipped:
        mark_application_skipped(application.id, plan.skipped_reason)
        return NOTIFY_SKIPPED

    mark_application_notified(application.id)
    return NOTIFY_SENT


async def run_once() -> int:
    """Process one batch of queued applications; returns how many were fully notified."""
    applications = get_applications_to_notify(limit=NOTIFY_BATCH_SIZE)
    if not applications:
        log.info("No new applications.")
        return 0

    sent_count = 0
    skipped_count = 0
    for application in applications:
        status = process_application(application)
        if status == NOTIFY_SENT:
            sent_count += 1
        elif status == NOTIFY_SKIPPED:
            skipped_count += 1

    log.info(
        "Cycle complete",
        extra={"applications": len(applications), "notified": sent_count, "skipped": skipped_count},
    )
    return sent_count


async def main():
    init_db()

    while True:
        try:
            await run_once()
        except Exception as e:
            log.exception("Error during run", extra={"error": str(e)})

        if RUN_ONCE:
            break

        log.info("Sleeping", extra={"seconds": CHECK_INTERVAL})
        await asyncio.sleep(CHECK_INTERVAL)


if __name__ == "__main__":
    asyncio.run(main())
