import logging

from fastapi import APIRouter, HTTPException, Request

from app.schemas import ApplicationCreated, ApplicationSubmission
from app.security import allow_request
from core.database import create_application, get_application, get_posting
from core.models import ACTIVE_STATUS, PENDING_STATUS

router = APIRouter()
log = logging.getLogger(__name__)

# Per client host: 5 submissions per minute.
SUBMIT_LIMIT = 5
SUBMIT_WINDOW_SECONDS = 60


@router.post("/api/applications", status_code=201, response_model=ApplicationCreated)
def submit_application(submission: ApplicationSubmission, request: Request):
    ip = request.client.host if request.client else "unknown"
    if not allow_request(f"apply:{ip}", limit=SUBMIT_LIMIT, window_seconds=SUBMIT_WINDOW_SECONDS):
        raise HTTPException(status_code=429, detail="Too many submissions. Please try again later.")

    posting = get_posting(submission.job_id)
    if posting is None or posting.status != ACTIVE_STATUS:
        raise HTTPException(status_code=404, detail="Job not found")

    fields = submission.model_dump()
    # The stored posting is the source of truth for the title shown in both emails.
    fields["job_title"] = posting.title
    application_id = create_application(**fields)

    log.info("Application received", extra={"application_id": application_id, "job_id": posting.id})
    return ApplicationCreated(id=application_id, status=PENDING_STATUS)


@router.get("/api/applications/{application_id}")
def read_application(application_id: str):
    row = get_application(application_id)
    if row is None:
        raise HTTPException(status_code=404, detail="Application not found")
    return row
