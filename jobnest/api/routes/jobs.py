"""Job posting endpoints."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from jobnest.api.deps import require_role
from jobnest.api.schemas import JobCreate, JobListResponse, JobResponse, JobUpdate, SalaryRange
from jobnest.config import settings
from jobnest.db import Job, User, get_db
from jobnest.services import jobs

router = APIRouter()


def _job_response(job: Job, with_count: bool = False) -> JobResponse:
    response = JobResponse.model_validate(job)
    response.salary_range = SalaryRange(min=job.salary_min, max=job.salary_max)
    if with_count:
        response.application_count = len(job.applications)
    return response


def _job_fields(data: JobCreate | JobUpdate) -> dict:
    """Flatten the request, letting salary_range override salary_min/salary_max."""
    fields = data.model_dump(exclude_unset=True, exclude={"salary_range"})
    if data.salary_range is not None:
        fields["salary_min"] = data.salary_range.min
        fields["salary_max"] = data.salary_range.max
    return fields


@router.get("", response_model=JobListResponse)
def list_jobs(
    search: str | None = None,
    location: str | None = None,
    type: str | None = None,
    min_salary: float | None = None,
    max_salary: float | None = None,
    tags: list[str] | None = Query(default=None),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=settings.default_page_size, ge=1, le=settings.max_page_size),
    db: Session = Depends(get_db),
):
    """Search active jobs with filters and pagination."""
    result = jobs.list_jobs(
        db,
        search=search,
        location=location,
        job_type=type,
        min_salary=min_salary,
        max_salary=max_salary,
        tags=tags,
        page=page,
        limit=limit,
    )
    return JobListResponse(
        jobs=[_job_response(j) for j in result["jobs"]],
        current_page=result["current_page"],
        total_pages=result["total_pages"],
        total_jobs=result["total_jobs"],
    )


@router.get("/recruiter/my-jobs", response_model=list[JobResponse])
def get_recruiter_jobs(
    current_user: User = Depends(require_role("recruiter")),
    db: Session = Depends(get_db),
):
    """List jobs posted by the calling recruiter, newest first."""
    return [_job_response(j) for j in jobs.get_recruiter_jobs(db, current_user.id)]


@router.get("/{job_id}", response_model=JobResponse)
def get_job(job_id: int, db: Session = Depends(get_db)):
    """Get a single job with its recruiter."""
    return _job_response(jobs.get_job(db, job_id), with_count=True)


@router.post("", response_model=JobResponse, status_code=201)
def create_job(
    data: JobCreate,
    current_user: User = Depends(require_role("recruiter")),
    db: Session = Depends(get_db),
):
    """Post a new job."""
    job = jobs.create_job(db, current_user.id, _job_fields(data))
    return _job_response(job)


@router.put("/{job_id}", response_model=JobResponse)
def update_job(
    job_id: int,
    data: JobUpdate,
    current_user: User = Depends(require_role("recruiter")),
    db: Session = Depends(get_db),
):
    """Update a job the caller owns. Only provided fields change."""
    job = jobs.update_job(db, current_user.id, job_id, _job_fields(data))
    return _job_response(job)


@router.delete("/{job_id}")
def delete_job(
    job_id: int,
    current_user: User = Depends(require_role("recruiter")),
    db: Session = Depends(get_db),
):
    """Delete a job the caller owns."""
    jobs.delete_job(db, current_user.id, job_id)
    return {"message": "Job deleted successfully"}
