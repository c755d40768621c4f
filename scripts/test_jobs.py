"""Tests for job postings: salary validation, ownership and search."""

import pytest

from conftest import auth_headers
from jobnest.db import Application, Job, Message, SavedJob
from jobnest.errors import ForbiddenError, NotFoundError, ValidationError
from jobnest.services import applications, jobs, messages, saved_jobs


def test_salary_min_above_max_creates_nothing(db, recruiter, make_job):
    with pytest.raises(ValidationError):
        make_job(salary_min=80000, salary_max=60000)
    assert db.query(Job).count() == 0


def test_job_type_aliases(make_job):
    assert make_job(type="part-time").type == "Part-time"
    assert make_job(type="contract").type == "Remote"
    with pytest.raises(ValidationError):
        make_job(type="Gig")


def test_experience_level_and_type_become_tags(make_job):
    job = make_job(experience_level="Senior", type="part-time", tags=["python"])
    assert job.tags == ["Senior", "Part-time", "python"]
    assert make_job(tags=["python"]).tags == ["Full-time", "python"]


def test_update_merges_only_provided_fields(db, recruiter, job):
    updated = jobs.update_job(db, recruiter.id, job.id, {"title": "Senior Python Developer", "location": None})
    assert updated.title == "Senior Python Developer"
    assert updated.location == "Berlin"
    assert updated.salary_min == 60000


def test_update_checks_merged_salary_range(db, recruiter, job):
    with pytest.raises(ValidationError):
        jobs.update_job(db, recruiter.id, job.id, {"salary_min": 90000})

    db.refresh(job)
    assert job.salary_min == 60000

    updated = jobs.update_job(db, recruiter.id, job.id, {"salary_min": 90000, "salary_max": 120000})
    assert (updated.salary_min, updated.salary_max) == (90000, 120000)


def test_update_and_delete_require_owner(db, make_user, job):
    other = make_user("recruiter")
    with pytest.raises(ForbiddenError):
        jobs.update_job(db, other.id, job.id, {"title": "Hijacked title"})
    with pytest.raises(ForbiddenError):
        jobs.delete_job(db, other.id, job.id)
    assert db.get(Job, job.id).title == "Python Developer"


def test_delete_cascades_and_clears_message_context(db, seeker, recruiter, job):
    applications.apply(
        db, seeker.id, job.id, {"resume_url": "https://x/r.pdf", "cover_letter": "Ten chars or more."}
    )
    saved_jobs.save_job(db, seeker.id, job.id)
    message = messages.send(db, seeker.id, recruiter.id, "About the role", job.id)

    jobs.delete_job(db, recruiter.id, job.id)

    assert db.query(Application).count() == 0
    assert db.query(SavedJob).count() == 0
    assert db.get(Message, message.id).job_id is None
    with pytest.raises(NotFoundError):
        jobs.get_job(db, job.id)


def test_list_jobs_filters_and_pagination(db, make_job):
    make_job(title="Python Developer", location="Berlin", salary_min=50000, salary_max=70000, tags=["python"])
    make_job(title="Go Engineer", location="Munich", type="Remote", salary_min=70000, salary_max=90000, tags=["go"])
    make_job(title="Data Analyst", company="Numbers GmbH", location="Berlin", salary_min=40000, salary_max=55000)
    make_job(title="Closed Python Role", is_active=False)

    result = jobs.list_jobs(db)
    assert result["total_jobs"] == 3

    assert [j.title for j in jobs.list_jobs(db, search="python")["jobs"]] == ["Python Developer"]
    assert [j.title for j in jobs.list_jobs(db, search="numbers")["jobs"]] == ["Data Analyst"]
    assert jobs.list_jobs(db, location="berlin")["total_jobs"] == 2
    assert [j.title for j in jobs.list_jobs(db, job_type="Remote")["jobs"]] == ["Go Engineer"]
    assert jobs.list_jobs(db, min_salary=50000)["total_jobs"] == 2
    assert jobs.list_jobs(db, max_salary=70000)["total_jobs"] == 2
    assert [j.title for j in jobs.list_jobs(db, tags=["go"])["jobs"]] == ["Go Engineer"]

    page = jobs.list_jobs(db, page=2, limit=2)
    assert page["total_pages"] == 2
    assert page["current_page"] == 2
    # Newest first, so the oldest active job lands on the last page
    assert [j.title for j in page["jobs"]] == ["Python Developer"]


def test_tag_filter_matches_whole_tags_only(db, make_job):
    make_job(title="Barista Lead", tags=["Café"])
    make_job(title="Go Engineer", tags=["go"])
    make_job(title="Growth Hacker", tags=["100%"])

    assert [j.title for j in jobs.list_jobs(db, tags=["Café"])["jobs"]] == ["Barista Lead"]
    assert [j.title for j in jobs.list_jobs(db, tags=["café"])["jobs"]] == ["Barista Lead"]
    assert jobs.list_jobs(db, tags=["g_"])["total_jobs"] == 0
    assert jobs.list_jobs(db, tags=["%"])["total_jobs"] == 0
    assert [j.title for j in jobs.list_jobs(db, tags=["100%"])["jobs"]] == ["Growth Hacker"]


def test_api_job_listing_hides_recruiter_email(client, recruiter, job):
    listed = client.get("/jobs").json()["jobs"][0]["recruiter"]
    assert listed["name"] == "Rita"
    assert listed["company"] == "Acme"
    assert "email" not in listed
    assert "email" not in client.get(f"/jobs/{job.id}").json()["recruiter"]


def test_api_job_lifecycle(client, seeker, recruiter):
    payload = {
        "title": "Backend Engineer",
        "description": "Design and run our APIs.",
        "company": "Acme",
        "location": "Remote",
        "type": "full-time",
        "salary_range": {"min": 70000, "max": 95000},
    }
    assert client.post("/jobs", json=payload, headers=auth_headers(seeker)).status_code == 403

    created = client.post("/jobs", json=payload, headers=auth_headers(recruiter))
    assert created.status_code == 201, created.text
    job = created.json()
    assert job["type"] == "Full-time"
    assert job["salary_range"] == {"min": 70000, "max": 95000}
    assert job["recruiter"]["name"] == "Rita"

    bad = client.put(f"/jobs/{job['id']}", json={"salary_max": 1000}, headers=auth_headers(recruiter))
    assert bad.status_code == 400

    listing = client.get("/jobs", params={"search": "backend"})
    assert listing.json()["total_jobs"] == 1

    detail = client.get(f"/jobs/{job['id']}")
    assert detail.json()["application_count"] == 0

    mine = client.get("/jobs/recruiter/my-jobs", headers=auth_headers(recruiter))
    assert [j["id"] for j in mine.json()] == [job["id"]]

    assert client.delete(f"/jobs/{job['id']}", headers=auth_headers(recruiter)).status_code == 200
    assert client.get(f"/jobs/{job['id']}").status_code == 404
