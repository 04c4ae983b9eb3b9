import pytest

from enums import ApplicationStatus, JobType, UserRole
from schemas import (
    INSERT_SHAPES, ApplicationIn, ApplicationReview, InvalidEnumValue, JobIn,
    NotificationUpdate, UserIn, ValidationError, validate, validate_insert,
)


def test_every_table_has_an_insert_shape():
    assert set(INSERT_SHAPES) == {"users", "jobs", "applications", "resumes", "saved_jobs", "notifications"}


def test_valid_user_is_accepted_and_normalized(user_payload):
    user = validate_insert("users", user_payload)

    assert isinstance(user, UserIn)
    assert user.first_name == "Asha"
    assert user.roll_number == "CS21B042"
    assert user.role is UserRole.student
    assert user.skills == ["python", "sql"]


def test_only_server_generated_fields_are_stripped(user_payload):
    payload = dict(user_payload, id=99, createdAt="2026-01-01T00:00:00")

    user = validate_insert("users", payload)
    dumped = user.model_dump(exclude_unset=True, by_alias=True)

    assert set(dumped) == set(user_payload)
    assert "id" not in user.model_dump()
    assert "created_at" not in user.model_dump()


def test_snake_case_keys_are_accepted(user_payload):
    payload = {k: v for k, v in user_payload.items() if k not in ("firstName", "lastName")}
    payload.update(first_name="Asha", last_name="Rao")

    user = validate_insert("users", payload)

    assert (user.first_name, user.last_name) == ("Asha", "Rao")


def test_valid_job_defaults_and_omitted_fields(job_payload):
    job = validate_insert("jobs", dict(job_payload, postedBy=3, createdAt="2026-01-01T00:00:00"))

    assert isinstance(job, JobIn)
    assert job.type is JobType.internship
    assert job.is_active is True
    assert job.deadline.year == 2026
    assert "posted_by" not in job.model_dump()


def test_application_insert_drops_status_but_keeps_rejection_reason():
    app = validate_insert("applications", {
        "studentId": 1,
        "jobId": 2,
        "resumeId": 5,
        "coverLetter": "Dear team",
        "status": "accepted",
        "rejectionReason": None,
    })

    assert isinstance(app, ApplicationIn)
    assert app.resume_id == 5
    assert "status" not in app.model_dump()
    assert "rejection_reason" in app.model_dump(exclude_unset=True)


def test_resume_saved_job_and_notification_inserts():
    resume = validate_insert("resumes", {"studentId": 1, "fileName": "cv.pdf", "filePath": "uploads/1/cv.pdf"})
    saved = validate_insert("saved_jobs", {"studentId": 1, "jobId": 7, "savedAt": "2026-01-01T00:00:00"})
    note = validate_insert("notifications", {
        "userId": 1, "title": "Shortlisted", "message": "You made the list", "type": "application_update",
    })

    assert resume.is_default is False
    assert saved.model_dump() == {"student_id": 1, "job_id": 7}
    assert note.is_read is False


def test_missing_required_field_is_reported(job_payload):
    del job_payload["title"]

    with pytest.raises(ValidationError) as excinfo:
        validate_insert("jobs", job_payload)

    assert "title" in excinfo.value.fields
    assert not isinstance(excinfo.value, InvalidEnumValue)


def test_all_offending_fields_are_collected():
    with pytest.raises(ValidationError) as excinfo:
        validate_insert("jobs", {"salary": "n/a"})

    assert set(excinfo.value.fields) == {"title", "company", "location", "type", "description", "deadline"}


def test_null_in_required_field_is_rejected(job_payload):
    job_payload["description"] = None

    with pytest.raises(ValidationError) as excinfo:
        validate_insert("jobs", job_payload)

    assert excinfo.value.fields == ["description"]


def test_wrong_types_are_reported_by_python_field_name():
    with pytest.raises(ValidationError) as excinfo:
        validate_insert("applications", {"studentId": "abc", "jobId": 2})

    [error] = excinfo.value.errors
    assert error.field == "student_id"
    assert error.kind == "int_parsing"


def test_list_items_are_checked(user_payload):
    user_payload["skills"] = ["python", {"name": "sql"}]

    with pytest.raises(ValidationError) as excinfo:
        validate_insert("users", user_payload)

    assert excinfo.value.fields == ["skills"]
    assert excinfo.value.errors[0].loc == ("skills", 1)


@pytest.mark.parametrize("email", ["placement.cell@college.local", "admin@localhost", "tpo@portal.test"])
def test_intranet_emails_are_accepted(email, user_payload):
    user = validate_insert("users", dict(user_payload, email=email))

    assert user.email == email


def test_missing_or_null_email_is_rejected(user_payload):
    user_payload["email"] = None

    with pytest.raises(ValidationError) as excinfo:
        validate_insert("users", user_payload)

    assert excinfo.value.fields == ["email"]


@pytest.mark.parametrize("entity, field, bad", [
    ("users", "role", "superuser"),
    ("jobs", "type", "contract"),
    ("notifications", "type", "spam"),
])
def test_unknown_enum_values_raise_invalid_enum_value(entity, field, bad, user_payload, job_payload):
    payloads = {
        "users": user_payload,
        "jobs": job_payload,
        "notifications": {"userId": 1, "title": "t", "message": "m", "type": "general"},
    }
    payload = dict(payloads[entity], **{field: bad})

    with pytest.raises(InvalidEnumValue) as excinfo:
        validate_insert(entity, payload)

    assert excinfo.value.enum_fields == [field]


def test_archived_is_not_an_application_status():
    with pytest.raises(InvalidEnumValue) as excinfo:
        validate(ApplicationReview, {"status": "archived"})

    assert excinfo.value.enum_fields == ["status"]
    assert isinstance(excinfo.value, ValidationError)


def test_enum_error_keeps_the_other_failures(job_payload):
    del job_payload["title"]
    job_payload["type"] = "contract"

    with pytest.raises(InvalidEnumValue) as excinfo:
        validate_insert("jobs", job_payload)

    assert set(excinfo.value.fields) == {"title", "type"}
    assert excinfo.value.enum_fields == ["type"]


def test_review_and_read_receipt_shapes():
    review = validate(ApplicationReview, {"status": "rejected", "rejectionReason": "Position filled"})
    receipt = validate(NotificationUpdate, {"isRead": True})

    assert review.status is ApplicationStatus.rejected
    assert review.rejection_reason == "Position filled"
    assert receipt.is_read is True


def test_error_report_for_field_level_display():
    with pytest.raises(ValidationError) as excinfo:
        validate_insert("saved_jobs", {"studentId": 1})

    report = excinfo.value.to_dict()
    assert report["detail"][0]["field"] == "job_id"
    assert report["detail"][0]["type"] == "missing"
    assert "job_id" in str(excinfo.value)


def test_unknown_entity():
    with pytest.raises(KeyError):
        validate_insert("interviews", {})
