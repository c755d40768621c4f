"""API request/response schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, EmailStr, Field


# User schemas
class RegisterRequest(BaseModel):
    name: str = Field(min_length=2, max_length=100)
    email: EmailStr
    password: str = Field(min_length=6, max_length=255)
    role: Literal["seeker", "recruiter", "admin"]
    company: str | None = None
    website: str | None = None
    skills: list[str] | str | None = None
    location: str = ""
    bio: str = ""


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class ProfileUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=2, max_length=100)
    avatar: str | None = None
    location: str | None = None
    bio: str | None = None
    skills: list[str] | str | None = None
    company: str | None = None
    website: str | None = None


class UserResponse(BaseModel):
    id: int
    name: str
    email: str
    role: str
    avatar: str
    location: str
    bio: str
    skills: list[str]
    company: str | None
    website: str | None

    class Config:
        from_attributes = True


class UserSummary(BaseModel):
    id: int
    name: str
    email: str | None = None
    company: str | None = None

    class Config:
        from_attributes = True


class RecruiterSummary(BaseModel):
    """Public view of a job's recruiter; contact details stay private."""

    id: int
    name: str
    company: str | None = None
    website: str | None = None

    class Config:
        from_attributes = True


class AuthResponse(BaseModel):
    message: str
    token: str
    user: UserResponse


# Job schemas
class SalaryRange(BaseModel):
    min: float
    max: float


class JobCreate(BaseModel):
    title: str
    description: str
    requirements: str = ""
    company: str
    location: str
    type: str = Field(default="Full-time", description="Full-time/Part-time/Remote or full-time/part-time/contract/...")
    experience_level: str | None = None
    salary_min: float | None = None
    salary_max: float | None = None
    salary_range: SalaryRange | None = None
    tags: list[str] = []
    is_active: bool = True
    custom_questions: list = []


class JobUpdate(BaseModel):
    title: str | None = None
    description: str | None = None
    requirements: str | None = None
    company: str | None = None
    location: str | None = None
    type: str | None = None
    experience_level: str | None = None
    salary_min: float | None = None
    salary_max: float | None = None
    salary_range: SalaryRange | None = None
    tags: list[str] | None = None
    is_active: bool | None = None
    custom_questions: list | None = None


class JobResponse(BaseModel):
    id: int
    title: str
    description: str
    requirements: str
    company: str
    recruiter_id: int
    location: str
    type: str
    salary_min: float
    salary_max: float
    salary_range: SalaryRange | None = None
    tags: list[str]
    is_active: bool
    custom_questions: list
    created_at: datetime
    updated_at: datetime
    recruiter: RecruiterSummary | None = None
    application_count: int | None = None

    class Config:
        from_attributes = True


class JobListResponse(BaseModel):
    jobs: list[JobResponse]
    current_page: int
    total_pages: int
    total_jobs: int


class JobSummary(BaseModel):
    id: int
    title: str
    company: str
    location: str
    type: str
    salary_min: float
    salary_max: float
    recruiter_id: int
    created_at: datetime

    class Config:
        from_attributes = True


# Application schemas
class ApplicationCreate(BaseModel):
    job_id: int
    name: str | None = None
    email: EmailStr | None = None
    resume_url: str
    cover_letter: str
    custom_answers: dict = {}


class ApplicationUpdate(BaseModel):
    name: str | None = None
    email: EmailStr | None = None
    resume_url: str | None = None
    cover_letter: str | None = None
    custom_answers: dict | None = None


class ApplicationStatusUpdate(BaseModel):
    status: str = Field(description="Applied/Viewed/Interview/Shortlisted/Rejected/Hired/Reviewed")


class ApplicationResponse(BaseModel):
    id: int
    seeker_id: int
    job_id: int
    name: str
    email: str
    resume_url: str
    cover_letter: str
    custom_answers: dict
    status: str
    created_at: datetime
    updated_at: datetime
    job: JobSummary | None = None
    seeker: UserSummary | None = None

    class Config:
        from_attributes = True


# Saved job schemas
class SavedJobCreate(BaseModel):
    job_id: int


class SavedJobResponse(BaseModel):
    id: int
    seeker_id: int
    job_id: int
    created_at: datetime
    job: JobSummary | None = None

    class Config:
        from_attributes = True


class SavedJobCheckResponse(BaseModel):
    is_saved: bool


# Message schemas
class MessageCreate(BaseModel):
    receiver_id: int
    message: str
    job_id: int | None = None


class MarkReadRequest(BaseModel):
    job_id: int | None = None


class MessageResponse(BaseModel):
    id: int
    sender_id: int
    receiver_id: int
    message: str
    job_id: int | None
    status: str
    timestamp: datetime

    class Config:
        from_attributes = True


class MarkReadResponse(BaseModel):
    success: bool
    updated: int


class ConversationSummary(BaseModel):
    user_id: int
    user_name: str
    job_id: int | None
    last_message: MessageResponse
    unread_count: int


class ConversationListResponse(BaseModel):
    conversations: list[ConversationSummary]
