import os

import pytest

from core.db.applications import applications_store
from core.db.base import get_conn
from core.db.jobs import jobs_store
from core.db.schema import init_db
from core.db.users import user_store

pytestmark = pytest.mark.skipif(
    not os.getenv("DATABASE_URL"),
    reason="DATABASE_URL must be set for Postgres-only tests.",
)

_TABLES = ["applications", "jobs", "users"]


def _truncate_all():
    conn = get_conn()
    cur = conn.cursor()
    cur.execute("TRUNCATE " + ", ".join(_TABLES))
    conn.commit()
    conn.close()


@pytest.fixture(autouse=True)
def _clean_db():
    init_db()
    _truncate_all()
    yield
    _truncate_all()


def _application(**overrides):
    fields = {
        "job_id": "job-1",
        "job_title": "Cook",
        "email": " Maria.Lopez@Mail.com ",
        "phone": "3055550123",
        "full_name": "Maria Lopez",
        "birth_date": "14/02/1990",
        "address": "120 Ocean Dr",
        "has_transport": "si",
        "has_documents": "si",
        "has_experience": "no",
        "english_level": "Medio",
        "work_experience": ["Cook", "Dishwasher"],
    }
    fields.update(overrides)
    return applications_store.create_application(**fields)


def test_active_postings_are_newest_first_and_filtered():
    jobs_store.create_job_posting(title="Old", job_id="a", created_at="2026-01-01T00:00:00+00:00")
    jobs_store.create_job_posting(title="New", job_id="b", created_at="2026-03-01T00:00:00+00:00")
    jobs_store.create_job_posting(
        title="Closed", job_id="c", status="closed", created_at="2026-04-01T00:00:00+00:00"
    )

    postings = jobs_store.get_active_postings()
    assert [p.id for p in postings] == ["b", "a"]
    assert [p.id for p in jobs_store.get_active_postings(limit=1)] == ["b"]


def test_posting_round_trips_coordinates_and_requirements():
    jobs_store.create_job_posting(
        title="Packer",
        job_id="p1",
        latitude=25.7617,
        longitude=-80.1918,
        requirements=["Packing", "Lumper"],
        salary=" ",
    )

    posting = jobs_store.get_posting("p1")
    assert posting.coordinate.lat == pytest.approx(25.7617)
    assert posting.requirements == ["Packing", "Lumper"]
    assert posting.salary is None
    assert jobs_store.get_posting("missing") is None


def test_job_record_exposes_owner_keys():
    jobs_store.create_job_posting(title="Cook", job_id="j1", account_manager="u-am", created_by="u-cb")
    jobs_store.create_job_posting(title="Dishwasher", job_id="j2", created_by="u-cb")

    first = jobs_store.get_job_record("j1")
    second = jobs_store.get_job_record("j2")
    assert (first.account_manager, first.created_by) == ("u-am", "u-cb")
    assert second.account_manager is None
    assert jobs_store.get_job_record("nope") is None


def test_set_job_status_hides_posting_from_feed():
    jobs_store.create_job_posting(title="Cook", job_id="j1")
    assert jobs_store.set_job_status("j1", "closed") is True
    assert jobs_store.get_active_postings() == []
    assert jobs_store.set_job_status("nope", "closed") is False


def test_user_records():
    user_id = user_store.create_user(" Manager@Staffing.co ", "Ana", user_id="u1")
    user_store.create_user(None, user_id="u2")

    record = user_store.get_user_record(user_id)
    assert record.email == "manager@staffing.co"
    assert user_store.get_user_record("u2").email is None
    assert user_store.get_user_record("nope") is None
    assert user_store.get_user_by_email("MANAGER@staffing.co")["id"] == "u1"


def test_created_application_is_pending_and_queued():
    app_id = _application()

    row = applications_store.get_application(app_id)
    assert row["status"] == "pending"
    assert row["email"] == "maria.lopez@mail.com"
    assert row["work_experience"] == ["Cook", "Dishwasher"]
    assert row["notify_status"] == applications_store.NOTIFY_QUEUED
    assert row["notify_attempts"] == 0

    queued = applications_store.get_applications_to_notify()
    assert [a.id for a in queued] == [app_id]
    assert queued[0].english_level == "Medio"


def test_sent_and_skipped_leave_the_queue():
    sent_id = _application()
    skipped_id = _application(job_id="gone")

    applications_store.mark_application_notified(sent_id)
    applications_store.mark_application_skipped(skipped_id, "job gone not found")

    assert applications_store.get_applications_to_notify() == []
    sent = applications_store.get_application(sent_id)
    skipped = applications_store.get_application(skipped_id)
    assert sent["notify_status"] == applications_store.NOTIFY_SENT
    assert sent["notified_at"]
    assert skipped["notify_status"] == applications_store.NOTIFY_SKIPPED
    assert skipped["notify_error"] == "job gone not found"


def test_failed_delivery_stays_queued_until_attempts_run_out():
    app_id = _application()

    assert applications_store.mark_application_failed(app_id, "421 try later", 2) == applications_store.NOTIFY_QUEUED
    assert len(applications_store.get_applications_to_notify()) == 1

    assert applications_store.mark_application_failed(app_id, "421 try later", 2) == applications_store.NOTIFY_FAILED
    row = applications_store.get_application(app_id)
    assert row["notify_attempts"] == 2
    assert row["notify_error"] == "421 try later"
    assert applications_store.get_applications_to_notify() == []


def test_stats_count_by_notify_status():
    jobs_store.create_job_posting(title="Cook", job_id="j1")
    _application()
    skipped_id = _application()
    applications_store.mark_application_skipped(skipped_id, "no owner")

    stats = jobs_store.get_stats()
    assert stats["active_jobs"] == 1
    assert stats["applications"] == {"queued": 1, "skipped": 1}
