"""Database table models."""

from datetime import UTC, datetime

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Index, Integer, Numeric, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from jobnest.db.base import Base

USER_ROLES = ("seeker", "recruiter", "admin")
JOB_TYPES = ("Full-time", "Part-time", "Remote")
APPLICATION_STATUSES = ("Applied", "Viewed", "Interview", "Shortlisted", "Rejected", "Hired", "Reviewed")
MESSAGE_STATUSES = ("sent", "delivered", "read")


def utcnow() -> datetime:
    return datetime.now(UTC)


class User(Base):
    """User account (seeker, recruiter or admin)."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100))
    email: Mapped[str] = mapped_column(String(255), unique=True)
    password: Mapped[str] = mapped_column(String(255))  # argon2 hash
    role: Mapped[str] = mapped_column(String(20), index=True)
    avatar: Mapped[str] = mapped_column(String(500), default="")
    location: Mapped[str] = mapped_column(String(255), default="")
    bio: Mapped[str] = mapped_column(Text, default="")
    skills: Mapped[list] = mapped_column(JSON, default=list)  # seekers only
    company: Mapped[str | None] = mapped_column(String(255), default=None)  # recruiters only
    website: Mapped[str | None] = mapped_column(String(500), default=None)  # recruiters only
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, onupdate=utcnow)

    jobs: Mapped[list["Job"]] = relationship(back_populates="recruiter", passive_deletes=True)
    applications: Mapped[list["Application"]] = relationship(back_populates="seeker", passive_deletes=True)
    saved_jobs: Mapped[list["SavedJob"]] = relationship(back_populates="seeker", passive_deletes=True)


class Job(Base):
    """A job posting owned by a recruiter."""

    __tablename__ = "jobs"
    __table_args__ = (Index("idx_salary", "salary_min", "salary_max"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255))
    description: Mapped[str] = mapped_column(Text)
    requirements: Mapped[str] = mapped_column(Text, default="")
    company: Mapped[str] = mapped_column(String(255), index=True)
    recruiter_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    location: Mapped[str] = mapped_column(String(255), index=True)
    type: Mapped[str] = mapped_column(String(20), index=True)
    salary_min: Mapped[float] = mapped_column(Numeric(12, 2, asdecimal=False))
    salary_max: Mapped[float] = mapped_column(Numeric(12, 2, asdecimal=False))
    tags: Mapped[list] = mapped_column(JSON, default=list)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, index=True)
    custom_questions: Mapped[list] = mapped_column(JSON, default=list)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, index=True)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, onupdate=utcnow)

    recruiter: Mapped["User"] = relationship(back_populates="jobs")
    applications: Mapped[list["Application"]] = relationship(
        back_populates="job", cascade="all, delete-orphan", passive_deletes=True
    )
    saved_by: Mapped[list["SavedJob"]] = relationship(
        back_populates="job", cascade="all, delete-orphan", passive_deletes=True
    )
    messages: Mapped[list["Message"]] = relationship(back_populates="job", passive_deletes=True)


class Application(Base):
    """A seeker's application to a job. One per (seeker, job)."""

    __tablename__ = "applications"
    __table_args__ = (UniqueConstraint("seeker_id", "job_id", name="unique_seeker_job"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    seeker_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    job_id: Mapped[int] = mapped_column(ForeignKey("jobs.id", ondelete="CASCADE"), index=True)
    name: Mapped[str] = mapped_column(String(100))
    email: Mapped[str] = mapped_column(String(255))
    resume_url: Mapped[str] = mapped_column(String(500))
    cover_letter: Mapped[str] = mapped_column(Text)
    custom_answers: Mapped[dict] = mapped_column(JSON, default=dict)
    status: Mapped[str] = mapped_column(String(20), default="Applied", index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, index=True)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, onupdate=utcnow)

    seeker: Mapped["User"] = relationship(back_populates="applications")
    job: Mapped["Job"] = relationship(back_populates="applications")


class SavedJob(Base):
    """A seeker's bookmark on a job. One per (seeker, job)."""

    __tablename__ = "saved_jobs"
    __table_args__ = (UniqueConstraint("seeker_id", "job_id", name="unique_saved_job"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    seeker_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    job_id: Mapped[int] = mapped_column(ForeignKey("jobs.id", ondelete="CASCADE"), index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, index=True)

    seeker: Mapped["User"] = relationship(back_populates="saved_jobs")
    job: Mapped["Job"] = relationship(back_populates="saved_by")


class Message(Base):
    """A direct message between two users, optionally about a job."""

    __tablename__ = "messages"
    __table_args__ = (Index("idx_conversation", "sender_id", "receiver_id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    sender_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    receiver_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    message: Mapped[str] = mapped_column(Text)
    job_id: Mapped[int | None] = mapped_column(ForeignKey("jobs.id", ondelete="SET NULL"), index=True, default=None)
    status: Mapped[str] = mapped_column(String(20), default="sent", index=True)  # sent, delivered, read
    timestamp: Mapped[datetime] = mapped_column(DateTime, default=utcnow, index=True)

    sender: Mapped["User"] = relationship(foreign_keys=[sender_id])
    receiver: Mapped["User"] = relationship(foreign_keys=[receiver_id])
    job: Mapped["Job | None"] = relationship(back_populates="messages")
