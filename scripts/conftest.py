"""Shared fixtures: in-memory SQLite per test, API client bound to it."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from jobnest.api.app import app
from jobnest.api.limiter import limiter
from jobnest.db import Base, get_db
from jobnest.db.base import create_db_engine
from jobnest.security import create_access_token
from jobnest.services import jobs, users


@pytest.fixture
def db():
    engine = create_db_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    limiter.enabled = False
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
        limiter.enabled = True


@pytest.fixture
def make_user(db):
    counter = {"n": 0}

    def _make(role: str = "seeker", name: str | None = None, **fields):
        counter["n"] += 1
        n = counter["n"]
        return users.register(
            db,
            name=name or f"{role.capitalize()} {n}",
            email=fields.pop("email", f"{role}{n}@x.com"),
            password=fields.pop("password", "secret123"),
            role=role,
            **fields,
        )

    return _make


@pytest.fixture
def seeker(make_user):
    return make_user("seeker", name="Alice", email="a@x.com")


@pytest.fixture
def recruiter(make_user):
    return make_user("recruiter", name="Rita", company="Acme")


@pytest.fixture
def make_job(db, recruiter):
    def _make(owner=None, **overrides):
        data = {
            "title": "Python Developer",
            "description": "Build and maintain backend services.",
            "company": "Acme",
            "location": "Berlin",
            "type": "Full-time",
            "salary_min": 60000,
            "salary_max": 80000,
        }
        data.update(overrides)
        return jobs.create_job(db, (owner or recruiter).id, data)

    return _make


@pytest.fixture
def job(make_job):
    return make_job()


def auth_headers(user) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}
