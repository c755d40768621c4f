"""Saved job endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jobnest.api.deps import require_role
from jobnest.api.schemas import SavedJobCheckResponse, SavedJobCreate, SavedJobResponse
from jobnest.db import User, get_db
from jobnest.services import saved_jobs

router = APIRouter()


@router.post("", response_model=SavedJobResponse, status_code=201)
def save_job(
    data: SavedJobCreate,
    current_user: User = Depends(require_role("seeker")),
    db: Session = Depends(get_db),
):
    """Bookmark a job."""
    return SavedJobResponse.model_validate(saved_jobs.save_job(db, current_user.id, data.job_id))


@router.get("", response_model=list[SavedJobResponse])
def get_saved_jobs(
    current_user: User = Depends(require_role("seeker")),
    db: Session = Depends(get_db),
):
    """List the caller's bookmarks, most recent first."""
    return [SavedJobResponse.model_validate(s) for s in saved_jobs.get_saved_jobs(db, current_user.id)]


@router.get("/check/{job_id}", response_model=SavedJobCheckResponse)
def check_if_saved(
    job_id: int,
    current_user: User = Depends(require_role("seeker")),
    db: Session = Depends(get_db),
):
    """Check whether a job is bookmarked."""
    return SavedJobCheckResponse(is_saved=saved_jobs.is_saved(db, current_user.id, job_id))


@router.delete("/{job_id}")
def unsave_job(
    job_id: int,
    current_user: User = Depends(require_role("seeker")),
    db: Session = Depends(get_db),
):
    """Remove a bookmark."""
    saved_jobs.unsave_job(db, current_user.id, job_id)
    return {"message": "Job removed from saved jobs"}
