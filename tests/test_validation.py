import pytest
from pydantic import ValidationError

from app.schemas import ApplicationSubmission


def _payload(**overrides):
    payload = {
        "email": "maria.lopez@mail.com",
        "phone": "3055550123",
        "fullName": "Maria Lopez",
        "birthDate": "14/02/1990",
        "address": "120 Ocean Dr, Miami Beach",
        "hasTransport": "si",
        "hasDocuments": "no",
        "hasExperience": "si",
        "englishLevel": "Alto",
        "experienceDetails": "",
        "workExperience": ["Cook", "Dishwasher", "Cook"],
        "additionalNotes": "   ",
        "jobId": "job-1",
        "jobTitle": "Line Cook",
    }
    payload.update(overrides)
    return payload


def test_valid_submission_normalises_optional_fields():
    submission = ApplicationSubmission.model_validate(_payload())

    assert submission.full_name == "Maria Lopez"
    assert submission.experience_details is None
    assert submission.additional_notes is None
    assert submission.work_experience == ["Cook", "Dishwasher"]
    assert submission.english_level == "Alto"


def test_snake_case_keys_are_accepted():
    submission = ApplicationSubmission.model_validate(
        {
            "email": "jose@mail.com",
            "phone": "3055550123",
            "full_name": "Jose Perez",
            "birth_date": "1/9/1985",
            "address": "55 Palm Ave",
            "has_transport": "no",
            "has_documents": "si",
            "has_experience": "no",
            "english_level": "Bajo",
            "job_id": "job-2",
        }
    )
    assert submission.job_title is None
    assert submission.work_experience == []


@pytest.mark.parametrize(
    "email,expected",
    [
        ("user@mail.com", True),
        ("first.last_1@staffing.co", True),
        ("bademail", False),
        ("", False),
        ("user@no-tld", False),
        ("user @mail.com", False),
        ("@gmail.com", False),
        ("user+tag@mail.com", False),  # '+' is outside the accepted character set
    ],
)
def test_email_rules(email: str, expected: bool):
    if expected:
        ApplicationSubmission.model_validate(_payload(email=email))
    else:
        with pytest.raises(ValidationError):
            ApplicationSubmission.model_validate(_payload(email=email))


@pytest.mark.parametrize(
    "phone,expected",
    [
        ("3055550123", True),       # 10 digits
        ("123456789012345", True),  # 15 digits
        ("305555012", False),       # too short
        ("1234567890123456", False),  # too long
        ("305-555-0123", False),
        ("+13055550123", False),
        ("", False),
    ],
)
def test_phone_rules(phone: str, expected: bool):
    if expected:
        ApplicationSubmission.model_validate(_payload(phone=phone))
    else:
        with pytest.raises(ValidationError):
            ApplicationSubmission.model_validate(_payload(phone=phone))


@pytest.mark.parametrize(
    "field,value",
    [
        ("fullName", "Al"),
        ("address", "Mia"),
        ("birthDate", ""),
        ("birthDate", "1990-02-14"),
        ("hasTransport", "yes"),
        ("hasDocuments", None),
        ("englishLevel", "Fluent"),
        ("englishLevel", ["Bajo", "Medio"]),
        ("workExperience", ["Astronaut"]),
        ("jobId", ""),
    ],
)
def test_invalid_fields_are_rejected(field, value):
    with pytest.raises(ValidationError):
        ApplicationSubmission.model_validate(_payload(**{field: value}))


def test_missing_required_field_is_rejected():
    payload = _payload()
    del payload["hasExperience"]
    with pytest.raises(ValidationError):
        ApplicationSubmission.model_validate(payload)


def test_line_breaks_allowed_in_free_text():
    submission = ApplicationSubmission.model_validate(
        _payload(additionalNotes="Available weekends.\nNo night shifts.")
    )
    assert submission.additional_notes == "Available weekends.\nNo night shifts."
