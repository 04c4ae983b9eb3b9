from datetime import datetime

import pytest

from create_tables import init_db
from db import SessionLocal, make_engine
import models


@pytest.fixture
def engine():
    engine = make_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = SessionLocal(bind=engine)
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def user_payload():
    return {
        "email": "asha.rao@campus.edu",
        "password": "$2b$12$opaquehashvalue",
        "firstName": "Asha",
        "lastName": "Rao",
        "phone": "+91 98450 00000",
        "role": "student",
        "department": "CSE",
        "rollNumber": "CS21B042",
        "cgpa": "8.7",
        "skills": ["python", "sql"],
    }


@pytest.fixture
def job_payload():
    return {
        "title": "Backend Intern",
        "company": "Acme Labs",
        "location": "Bengaluru",
        "type": "internship",
        "salary": "40k/month",
        "description": "Work on the placement portal APIs.",
        "requirements": ["3rd year or above"],
        "skills": ["python", "postgres"],
        "eligibility": "CGPA >= 7",
        "deadline": "2026-12-01T17:00:00",
    }


@pytest.fixture
def student(db, user_payload):
    user = models.User(
        email=user_payload["email"],
        password=user_payload["password"],
        first_name="Asha",
        last_name="Rao",
        role="student",
        skills=["python", "sql"],
    )
    db.add(user)
    db.commit()
    return user


@pytest.fixture
def faculty(db):
    user = models.User(
        email="k.menon@campus.edu",
        password="$2b$12$anotherhash",
        first_name="Kiran",
        last_name="Menon",
        role="faculty",
    )
    db.add(user)
    db.commit()
    return user


@pytest.fixture
def job(db, faculty):
    job = models.Job(
        title="Backend Intern",
        company="Acme Labs",
        location="Bengaluru",
        type="internship",
        description="Work on the placement portal APIs.",
        deadline=datetime(2026, 12, 1, 17, 0),
        posted_by=faculty.id,
    )
    db.add(job)
    db.commit()
    return job
