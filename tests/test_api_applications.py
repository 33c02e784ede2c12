import pytest
from fastapi.testclient import TestClient

import app.api as api_module
import app.routes.applications as applications_route
from core.models import JobPosting


def _payload(**overrides):
    payload = {
        "email": "maria.lopez@mail.com",
        "phone": "3055550123",
        "fullName": "Maria Lopez",
        "birthDate": "14/02/1990",
        "address": "120 Ocean Dr, Miami Beach",
        "hasTransport": "si",
        "hasDocuments": "si",
        "hasExperience": "no",
        "englishLevel": "Medio",
        "workExperience": ["Housekeeping"],
        "jobId": "job-1",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def created(monkeypatch):
    postings = {
        "job-1": JobPosting(id="job-1", title="Housekeeping Attendant", description="", company="Resort"),
        "closed": JobPosting(id="closed", title="Old job", description="", company="Resort", status="closed"),
    }
    rows = []

    def _create_application(**fields):
        rows.append(fields)
        return f"app-{len(rows)}"

    monkeypatch.setattr(applications_route, "get_posting", lambda job_id: postings.get(job_id))
    monkeypatch.setattr(applications_route, "create_application", _create_application)
    return rows


def test_submit_creates_pending_application(created):
    client = TestClient(api_module.app)
    resp = client.post("/api/applications", json=_payload())

    assert resp.status_code == 201
    assert resp.json() == {"id": "app-1", "status": "pending"}
    assert len(created) == 1
    row = created[0]
    assert row["job_id"] == "job-1"
    # Title comes from the posting when the client omits it.
    assert row["job_title"] == "Housekeeping Attendant"
    assert row["full_name"] == "Maria Lopez"
    assert row["work_experience"] == ["Housekeeping"]
    assert row["additional_notes"] is None


def test_submit_invalid_payload_is_422(created):
    client = TestClient(api_module.app)
    resp = client.post("/api/applications", json=_payload(phone="12ab"))

    assert resp.status_code == 422
    assert created == []


@pytest.mark.parametrize("job_id", ["unknown", "closed"])
def test_submit_for_missing_or_inactive_job_is_404(created, job_id):
    client = TestClient(api_module.app)
    resp = client.post("/api/applications", json=_payload(jobId=job_id))

    assert resp.status_code == 404
    assert created == []


def test_submit_is_rate_limited(created):
    client = TestClient(api_module.app)
    statuses = [client.post("/api/applications", json=_payload()).status_code for _ in range(6)]

    assert statuses[:5] == [201] * 5
    assert statuses[5] == 429
    assert len(created) == 5


def test_read_application(monkeypatch):
    row = {"id": "app-9", "job_id": "job-1", "notify_status": "sent"}
    monkeypatch.setattr(applications_route, "get_application", lambda app_id: row if app_id == "app-9" else None)
    client = TestClient(api_module.app)

    assert client.get("/api/applications/app-9").json() == row
    assert client.get("/api/applications/nope").status_code == 404


def test_saved_title_comes_from_the_posting(created):
    client = TestClient(api_module.app)
    resp = client.post("/api/applications", json=_payload(jobTitle="Resort General Manager"))

    assert resp.status_code == 201
    assert created[0]["job_title"] == "Housekeeping Attendant"


@pytest.mark.parametrize(
    "field,value",
    [
        ("jobTitle", "Cook\r\nBcc: someone@else.co"),
        ("fullName", "Maria\nLopez"),
        ("address", "120 Ocean Dr\r\nMiami Beach"),
    ],
)
def test_line_breaks_in_single_line_fields_are_422(created, field, value):
    client = TestClient(api_module.app)
    resp = client.post("/api/applications", json=_payload(**{field: value}))

    assert resp.status_code == 422
    assert created == []
