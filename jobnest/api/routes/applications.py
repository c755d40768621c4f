"""Application endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jobnest.api.deps import get_current_user, require_role
from jobnest.api.schemas import ApplicationCreate, ApplicationResponse, ApplicationStatusUpdate, ApplicationUpdate
from jobnest.db import User, get_db
from jobnest.services import applications

router = APIRouter()


@router.post("", response_model=ApplicationResponse, status_code=201)
def apply_for_job(
    data: ApplicationCreate,
    current_user: User = Depends(require_role("seeker")),
    db: Session = Depends(get_db),
):
    """Apply to a job. Name and email default to the account's."""
    details = data.model_dump(exclude={"job_id"})
    application = applications.apply(db, current_user.id, data.job_id, details)
    return ApplicationResponse.model_validate(application)


@router.get("/my-applications", response_model=list[ApplicationResponse])
def get_my_applications(
    current_user: User = Depends(require_role("seeker")),
    db: Session = Depends(get_db),
):
    """List the caller's applications, newest first."""
    return [ApplicationResponse.model_validate(a) for a in applications.get_my_applications(db, current_user.id)]


@router.get("/job/{job_id}", response_model=list[ApplicationResponse])
def get_job_applications(
    job_id: int,
    current_user: User = Depends(require_role("recruiter")),
    db: Session = Depends(get_db),
):
    """List applications for a job the caller posted."""
    return [
        ApplicationResponse.model_validate(a)
        for a in applications.get_job_applications(db, current_user.id, job_id)
    ]


@router.put("/{application_id}/status", response_model=ApplicationResponse)
def update_application_status(
    application_id: int,
    data: ApplicationStatusUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Set an application's status. Only the job's recruiter may do this."""
    application = applications.set_application_status(db, current_user.id, application_id, data.status)
    return ApplicationResponse.model_validate(application)


@router.put("/{application_id}", response_model=ApplicationResponse)
def update_application(
    application_id: int,
    data: ApplicationUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Edit an application's content. Only the applicant may do this."""
    application = applications.edit_application(
        db, current_user.id, application_id, data.model_dump(exclude_unset=True)
    )
    return ApplicationResponse.model_validate(application)


@router.delete("/{application_id}")
def withdraw_application(
    application_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Withdraw (delete) the caller's application."""
    applications.withdraw(db, current_user.id, application_id)
    return {"message": "Application withdrawn"}
