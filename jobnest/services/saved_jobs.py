"""Saved jobs: seeker bookmarks, at most one per (seeker, job)."""

import logging

from sqlalchemy.orm import Session, selectinload

from jobnest.db import Job, SavedJob
from jobnest.errors import NotFoundError
from jobnest.services.common import commit_unique, get_or_raise

logger = logging.getLogger(__name__)


def _find(db: Session, seeker_id: int, job_id: int) -> SavedJob | None:
    return (
        db.query(SavedJob)
        .filter(SavedJob.seeker_id == seeker_id, SavedJob.job_id == job_id)
        .first()
    )


def save_job(db: Session, seeker_id: int, job_id: int) -> SavedJob:
    get_or_raise(db, Job, job_id, "Job")

    saved = SavedJob(seeker_id=seeker_id, job_id=job_id)
    db.add(saved)
    commit_unique(db, "Job already saved")

    logger.info(f"Seeker {seeker_id} saved job {job_id}")
    return (
        db.query(SavedJob)
        .options(selectinload(SavedJob.job))
        .filter(SavedJob.id == saved.id)
        .one()
    )


def unsave_job(db: Session, seeker_id: int, job_id: int) -> None:
    saved = _find(db, seeker_id, job_id)
    if not saved:
        raise NotFoundError("Saved job not found")

    db.delete(saved)
    db.commit()
    logger.info(f"Seeker {seeker_id} unsaved job {job_id}")


def is_saved(db: Session, seeker_id: int, job_id: int) -> bool:
    return _find(db, seeker_id, job_id) is not None


def get_saved_jobs(db: Session, seeker_id: int) -> list[SavedJob]:
    """Bookmarks for a seeker, most recently saved first."""
    return (
        db.query(SavedJob)
        .options(selectinload(SavedJob.job))
        .filter(SavedJob.seeker_id == seeker_id)
        .order_by(SavedJob.created_at.desc(), SavedJob.id.desc())
        .all()
    )
