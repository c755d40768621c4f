"""Tests for registration, login and profiles."""

import logging

import pytest

from conftest import auth_headers
from jobnest.api.app import check_jwt_secret
from jobnest.config import DEFAULT_JWT_SECRET, Settings
from jobnest.errors import ConflictError, ValidationError
from jobnest.security import create_access_token, decode_access_token
from jobnest.services import users


def test_register_keeps_role_specific_fields(db):
    seeker = users.register(
        db, name="Sam", email="Sam@X.com", password="secret123", role="seeker",
        skills="python, sql ,", company="Ignored Inc",
    )
    assert seeker.email == "sam@x.com"
    assert seeker.skills == ["python", "sql"]
    assert seeker.company is None

    recruiter = users.register(
        db, name="Rita", email="rita@acme.io", password="secret123", role="recruiter",
        company="Acme", website="https://acme.io", skills=["ignored"],
    )
    assert recruiter.company == "Acme"
    assert recruiter.skills == []


def test_duplicate_email_is_conflict(db, seeker):
    with pytest.raises(ConflictError):
        users.register(db, name="Alice Two", email="A@x.com", password="secret123", role="seeker")


def test_unknown_role_is_rejected(db):
    with pytest.raises(ValidationError):
        users.register(db, name="Root", email="root@x.com", password="secret123", role="superuser")


def test_verify_credentials(db, seeker):
    assert users.verify_credentials(db, "a@x.com", "secret123").id == seeker.id
    assert users.verify_credentials(db, "a@x.com", "wrong") is None
    assert users.verify_credentials(db, "nobody@x.com", "secret123") is None
    assert seeker.password != "secret123"


def test_profile_fields_can_be_cleared(db, make_user):
    rita = make_user("recruiter", name="Rita", company="Acme", website="https://acme.test", bio="Hiring")
    users.update_profile(db, rita, {"bio": "", "website": "", "location": None})
    assert rita.bio == ""
    assert rita.website == ""
    assert rita.company == "Acme"
    assert rita.name == "Rita"


def test_default_jwt_secret_is_reported(caplog):
    with caplog.at_level(logging.WARNING, logger="jobnest.api.app"):
        assert check_jwt_secret(Settings(jwt_secret=DEFAULT_JWT_SECRET)) is False
    assert "JWT_SECRET not configured" in caplog.text
    assert check_jwt_secret(Settings(jwt_secret="s3cret-for-tests")) is True


def test_token_round_trip():
    assert decode_access_token(create_access_token(42)) == 42
    assert decode_access_token(create_access_token(42, expires_minutes=-1)) is None
    assert decode_access_token("garbage") is None


def test_api_register_login_and_profile(client):
    registered = client.post(
        "/auth/register",
        json={"name": "Rita", "email": "rita@acme.io", "password": "secret123", "role": "recruiter", "company": "Acme"},
    )
    assert registered.status_code == 201, registered.text
    assert "password" not in registered.json()["user"]

    duplicate = client.post(
        "/auth/register",
        json={"name": "Rita", "email": "rita@acme.io", "password": "secret123", "role": "recruiter"},
    )
    assert duplicate.status_code == 400

    assert client.post("/auth/login", json={"email": "rita@acme.io", "password": "nope"}).status_code == 400
    login = client.post("/auth/login", json={"email": "rita@acme.io", "password": "secret123"})
    assert login.status_code == 200
    headers = {"Authorization": f"Bearer {login.json()['token']}"}

    me = client.get("/users/me", headers=headers).json()
    assert me["company"] == "Acme"

    updated = client.put("/users/profile", json={"bio": "Hiring engineers", "skills": ["x"]}, headers=headers).json()
    assert updated["bio"] == "Hiring engineers"
    assert updated["skills"] == []

    assert client.get(f"/users/{me['id']}", headers=headers).json()["name"] == "Rita"
    assert client.get("/users/9999", headers=headers).status_code == 404


def test_api_register_validation_is_400(client):
    resp = client.post("/auth/register", json={"name": "X", "email": "bad", "password": "1", "role": "seeker"})
    assert resp.status_code == 400


def test_health(client, seeker):
    assert client.get("/health").json() == {"status": "healthy"}
    assert client.get("/users/me", headers=auth_headers(seeker)).json()["email"] == "a@x.com"
