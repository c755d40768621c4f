"""Job postings: ownership-checked writes and filtered search."""

import json
import logging
import math

from sqlalchemy import String, cast, or_
from sqlalchemy.orm import Session, selectinload

from jobnest.db import JOB_TYPES, Job
from jobnest.errors import ForbiddenError, NotFoundError, ValidationError
from jobnest.services.common import get_or_raise

logger = logging.getLogger(__name__)

# Lower-case job types accepted from clients
JOB_TYPE_ALIASES = {
    "full-time": "Full-time",
    "part-time": "Part-time",
    "remote": "Remote",
    "contract": "Remote",
    "internship": "Remote",
    "freelance": "Remote",
}

UPDATABLE_FIELDS = (
    "title",
    "description",
    "requirements",
    "company",
    "location",
    "type",
    "salary_min",
    "salary_max",
    "tags",
    "is_active",
    "custom_questions",
)


def normalize_job_type(value: str | None) -> str:
    """Map a client job type onto Full-time/Part-time/Remote."""
    if not value:
        return "Full-time"
    if value in JOB_TYPES:
        return value
    normalized = JOB_TYPE_ALIASES.get(value.strip().lower())
    if normalized is None:
        raise ValidationError(f"Invalid job type: {value}")
    return normalized


def _validate_salary(salary_min, salary_max) -> None:
    if salary_min is None or salary_max is None:
        raise ValidationError("Salary range is required")
    if salary_min < 0 or salary_max < 0:
        raise ValidationError("Salary cannot be negative")
    if salary_min > salary_max:
        raise ValidationError("Minimum salary cannot be greater than maximum salary")


def _validate_text(values: dict) -> None:
    title = values.get("title")
    if title is not None and not 3 <= len(title.strip()) <= 255:
        raise ValidationError("Title must be between 3 and 255 characters")
    description = values.get("description")
    if description is not None and not 10 <= len(description.strip()) <= 10000:
        raise ValidationError("Description must be between 10 and 10000 characters")
    for key in ("company", "location"):
        if key in values and not (values[key] or "").strip():
            raise ValidationError(f"{key.capitalize()} is required")


def _tags_for(data: dict, job_type: str | None) -> list[str]:
    """Experience level and job type lead the tag list, followed by the client tags."""
    lead = [t for t in (data.get("experience_level"), job_type) if t]
    rest = [t for t in data.get("tags") or [] if t not in lead and t not in JOB_TYPES]
    return lead + rest


def _tag_clause(tag: str):
    # Tags are stored as a JSON array; match the quoted element as json.dumps writes it
    encoded = json.dumps(tag).replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return cast(Job.tags, String).ilike(f"%{encoded}%", escape="\\")


def _require_owner(job: Job, actor_id: int) -> None:
    if job.recruiter_id != actor_id:
        logger.warning(f"User {actor_id} denied access to job {job.id}")
        raise ForbiddenError("Not authorized")


def create_job(db: Session, actor_id: int, data: dict) -> Job:
    """Create a job owned by actor_id. Nothing is written if validation fails."""
    for key in ("title", "description", "company", "location"):
        if not data.get(key):
            raise ValidationError("All required fields must be provided")
    _validate_text(data)
    _validate_salary(data.get("salary_min"), data.get("salary_max"))

    job_type = normalize_job_type(data.get("type"))
    job = Job(
        title=data["title"],
        description=data["description"],
        requirements=data.get("requirements") or "",
        company=data["company"],
        recruiter_id=actor_id,
        location=data["location"],
        type=job_type,
        salary_min=data["salary_min"],
        salary_max=data["salary_max"],
        tags=_tags_for(data, job_type),
        is_active=data.get("is_active", True),
        custom_questions=data.get("custom_questions") or [],
    )
    db.add(job)
    db.commit()
    db.refresh(job)

    logger.info(f"Recruiter {actor_id} created job {job.id}")
    return job


def update_job(db: Session, actor_id: int, job_id: int, data: dict) -> Job:
    """Merge the provided fields into a job the actor owns.

    Fields that are missing or None keep their stored value. The merged
    salary range must still satisfy min <= max.
    """
    job = get_or_raise(db, Job, job_id, "Job")
    _require_owner(job, actor_id)

    changes = {k: data[k] for k in UPDATABLE_FIELDS if data.get(k) is not None}
    if "type" in changes:
        changes["type"] = normalize_job_type(changes["type"])
    if data.get("experience_level"):
        changes["tags"] = _tags_for(
            {**data, "tags": changes.get("tags", job.tags)}, changes.get("type", job.type)
        )

    _validate_text(changes)
    _validate_salary(
        changes.get("salary_min", job.salary_min),
        changes.get("salary_max", job.salary_max),
    )

    for key, value in changes.items():
        setattr(job, key, value)
    db.commit()
    db.refresh(job)

    logger.info(f"Recruiter {actor_id} updated job {job_id}: {sorted(changes)}")
    return job


def delete_job(db: Session, actor_id: int, job_id: int) -> None:
    """Delete a job the actor owns, with its applications and bookmarks."""
    job = get_or_raise(db, Job, job_id, "Job")
    _require_owner(job, actor_id)

    db.delete(job)
    db.commit()
    logger.info(f"Recruiter {actor_id} deleted job {job_id}")


def get_job(db: Session, job_id: int) -> Job:
    job = (
        db.query(Job)
        .options(selectinload(Job.recruiter), selectinload(Job.applications))
        .filter(Job.id == job_id)
        .first()
    )
    if not job:
        raise NotFoundError("Job not found")
    return job


def get_recruiter_jobs(db: Session, recruiter_id: int) -> list[Job]:
    return (
        db.query(Job)
        .options(selectinload(Job.recruiter))
        .filter(Job.recruiter_id == recruiter_id)
        .order_by(Job.created_at.desc(), Job.id.desc())
        .all()
    )


def list_jobs(
    db: Session,
    search: str | None = None,
    location: str | None = None,
    job_type: str | None = None,
    min_salary: float | None = None,
    max_salary: float | None = None,
    tags: list[str] | None = None,
    page: int = 1,
    limit: int = 10,
) -> dict:
    """Search active jobs, newest first, one page at a time."""
    page = max(page, 1)
    limit = max(limit, 1)

    query = db.query(Job).filter(Job.is_active.is_(True))

    if search:
        pattern = f"%{search}%"
        query = query.filter(
            or_(Job.title.ilike(pattern), Job.description.ilike(pattern), Job.company.ilike(pattern))
        )
    if location:
        query = query.filter(Job.location.ilike(f"%{location}%"))
    if job_type:
        query = query.filter(Job.type == normalize_job_type(job_type))
    if min_salary is not None:
        query = query.filter(Job.salary_min >= min_salary)
    if max_salary is not None:
        query = query.filter(Job.salary_max <= max_salary)
    if tags:
        query = query.filter(or_(*[_tag_clause(tag) for tag in tags]))

    total = query.count()
    jobs = (
        query.options(selectinload(Job.recruiter))
        .order_by(Job.created_at.desc(), Job.id.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )

    return {
        "jobs": jobs,
        "current_page": page,
        "total_pages": math.ceil(total / limit),
        "total_jobs": total,
    }
