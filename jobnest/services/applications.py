"""Applications: one per (seeker, job), owned by the seeker, status set by the job's recruiter."""

import logging

from sqlalchemy.orm import Session, selectinload

from jobnest.db import APPLICATION_STATUSES, Application, Job, User
from jobnest.errors import ForbiddenError, NotFoundError, ValidationError
from jobnest.services.common import commit_unique, get_or_raise

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("name", "email", "resume_url", "cover_letter", "custom_answers")


def _validate_content(fields: dict) -> None:
    name = fields.get("name")
    if name is not None and not 2 <= len(name.strip()) <= 100:
        raise ValidationError("Name must be between 2 and 100 characters")
    email = fields.get("email")
    if email is not None and "@" not in email:
        raise ValidationError("Must be a valid email address")
    resume_url = fields.get("resume_url")
    if resume_url is not None and not resume_url.strip():
        raise ValidationError("Resume URL is required")
    cover_letter = fields.get("cover_letter")
    if cover_letter is not None and not 10 <= len(cover_letter.strip()) <= 5000:
        raise ValidationError("Cover letter must be between 10 and 5000 characters")
    answers = fields.get("custom_answers")
    if answers is not None and not isinstance(answers, dict):
        raise ValidationError("Custom answers must be a mapping of question to answer")


def _load(db: Session, application_id: int) -> Application:
    application = (
        db.query(Application)
        .options(selectinload(Application.job), selectinload(Application.seeker))
        .filter(Application.id == application_id)
        .first()
    )
    if not application:
        raise NotFoundError("Application not found")
    return application


def _require_seeker(application: Application, actor_id: int) -> None:
    if application.seeker_id != actor_id:
        logger.warning(f"User {actor_id} denied access to application {application.id}")
        raise ForbiddenError("Not authorized")


def apply(db: Session, seeker_id: int, job_id: int, details: dict) -> Application:
    """Create an Applied application for (seeker, job).

    Name and email default to the seeker's account values. A second
    application for the same pair is rejected by the unique constraint.
    """
    job = get_or_raise(db, Job, job_id, "Job")
    seeker = get_or_raise(db, User, seeker_id, "User")

    fields = {
        "name": details.get("name") or seeker.name,
        "email": details.get("email") or seeker.email,
        "resume_url": details.get("resume_url"),
        "cover_letter": details.get("cover_letter"),
        "custom_answers": details.get("custom_answers") or {},
    }
    if not fields["resume_url"] or not fields["cover_letter"]:
        raise ValidationError("Resume and cover letter are required")
    _validate_content(fields)

    application = Application(seeker_id=seeker_id, job_id=job.id, status="Applied", **fields)
    db.add(application)
    commit_unique(db, "You have already applied for this job")

    logger.info(f"Seeker {seeker_id} applied to job {job_id} (application {application.id})")
    return _load(db, application.id)


def set_application_status(db: Session, actor_id: int, application_id: int, new_status: str) -> Application:
    """Overwrite the status. Only the job's recruiter may do this; any status may follow any other."""
    application = _load(db, application_id)
    if application.job.recruiter_id != actor_id:
        logger.warning(f"User {actor_id} denied status change on application {application_id}")
        raise ForbiddenError("Not authorized")
    if new_status not in APPLICATION_STATUSES:
        raise ValidationError(f"Invalid status: {new_status}")

    previous = application.status
    application.status = new_status
    db.commit()

    logger.info(f"Application {application_id} status {previous} -> {new_status}")
    return _load(db, application_id)


def edit_application(db: Session, actor_id: int, application_id: int, fields: dict) -> Application:
    """Seeker edits the content of their application. Status is never touched here."""
    application = _load(db, application_id)
    _require_seeker(application, actor_id)

    changes = {k: fields[k] for k in EDITABLE_FIELDS if fields.get(k) is not None}
    _validate_content(changes)

    for key, value in changes.items():
        setattr(application, key, value)
    db.commit()

    return _load(db, application_id)


def withdraw(db: Session, actor_id: int, application_id: int) -> None:
    application = get_or_raise(db, Application, application_id, "Application")
    _require_seeker(application, actor_id)

    db.delete(application)
    db.commit()
    logger.info(f"Seeker {actor_id} withdrew application {application_id}")


def get_job_applications(db: Session, actor_id: int, job_id: int) -> list[Application]:
    """All applications for a job, newest first. Recruiter-owner only."""
    job = get_or_raise(db, Job, job_id, "Job")
    if job.recruiter_id != actor_id:
        raise ForbiddenError("Not authorized")

    return (
        db.query(Application)
        .options(selectinload(Application.seeker), selectinload(Application.job))
        .filter(Application.job_id == job_id)
        .order_by(Application.created_at.desc(), Application.id.desc())
        .all()
    )


def get_my_applications(db: Session, seeker_id: int) -> list[Application]:
    return (
        db.query(Application)
        .options(selectinload(Application.job).selectinload(Job.recruiter))
        .filter(Application.seeker_id == seeker_id)
        .order_by(Application.created_at.desc(), Application.id.desc())
        .all()
    )
