"""Tests for saved jobs."""

import pytest

from conftest import auth_headers
from jobnest.errors import ConflictError, NotFoundError
from jobnest.services import saved_jobs


def test_save_list_unsave_round_trip(db, seeker, job):
    assert not saved_jobs.is_saved(db, seeker.id, job.id)

    saved = saved_jobs.save_job(db, seeker.id, job.id)
    assert saved.job.title == "Python Developer"
    assert saved_jobs.is_saved(db, seeker.id, job.id)
    assert [s.job_id for s in saved_jobs.get_saved_jobs(db, seeker.id)] == [job.id]

    saved_jobs.unsave_job(db, seeker.id, job.id)
    assert not saved_jobs.is_saved(db, seeker.id, job.id)
    assert saved_jobs.get_saved_jobs(db, seeker.id) == []


def test_save_twice_is_conflict(db, seeker, job):
    saved_jobs.save_job(db, seeker.id, job.id)
    with pytest.raises(ConflictError):
        saved_jobs.save_job(db, seeker.id, job.id)
    assert len(saved_jobs.get_saved_jobs(db, seeker.id)) == 1


def test_save_missing_job_and_unsave_unknown(db, seeker, job):
    with pytest.raises(NotFoundError):
        saved_jobs.save_job(db, seeker.id, 9999)
    with pytest.raises(NotFoundError):
        saved_jobs.unsave_job(db, seeker.id, job.id)


def test_saved_jobs_are_per_seeker(db, make_user, seeker, job):
    other = make_user("seeker")
    saved_jobs.save_job(db, seeker.id, job.id)
    saved_jobs.save_job(db, other.id, job.id)

    saved_jobs.unsave_job(db, other.id, job.id)
    assert saved_jobs.is_saved(db, seeker.id, job.id)


def test_api_saved_jobs(client, seeker, recruiter, job):
    headers = auth_headers(seeker)

    assert client.post("/saved-jobs", json={"job_id": job.id}, headers=headers).status_code == 201
    assert client.post("/saved-jobs", json={"job_id": job.id}, headers=headers).status_code == 400
    assert client.get(f"/saved-jobs/check/{job.id}", headers=headers).json() == {"is_saved": True}
    assert [s["job"]["id"] for s in client.get("/saved-jobs", headers=headers).json()] == [job.id]

    assert client.delete(f"/saved-jobs/{job.id}", headers=headers).status_code == 200
    assert client.get(f"/saved-jobs/check/{job.id}", headers=headers).json() == {"is_saved": False}
    assert client.delete(f"/saved-jobs/{job.id}", headers=headers).status_code == 404

    assert client.post("/saved-jobs", json={"job_id": job.id}, headers=auth_headers(recruiter)).status_code == 403
