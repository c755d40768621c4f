"""Identity store: user registration, lookup and profile updates."""

import logging

from sqlalchemy.orm import Session

from jobnest.db import USER_ROLES, User
from jobnest.errors import ValidationError
from jobnest.security import get_password_hash, verify_password
from jobnest.services.common import commit_unique, get_or_raise

logger = logging.getLogger(__name__)


def _split_skills(skills) -> list[str]:
    """Accept skills as a list or a comma-separated string."""
    if not skills:
        return []
    if isinstance(skills, str):
        skills = skills.split(",")
    return [s.strip() for s in skills if s and s.strip()]


def register(
    db: Session,
    name: str,
    email: str,
    password: str,
    role: str,
    company: str | None = None,
    website: str | None = None,
    skills=None,
    location: str = "",
    bio: str = "",
) -> User:
    """Create a user. Email must be unique; recruiter/seeker fields are kept per role."""
    if role not in USER_ROLES:
        raise ValidationError(f"Invalid role: {role}")

    user = User(
        name=name,
        email=email.lower(),
        password=get_password_hash(password),
        role=role,
        company=company if role == "recruiter" else None,
        website=website if role == "recruiter" else None,
        skills=_split_skills(skills) if role == "seeker" else [],
        location=location or "",
        bio=bio or "",
    )
    db.add(user)
    commit_unique(db, "User already exists")
    db.refresh(user)

    logger.info(f"Registered {role} user {user.id}")
    return user


def find_by_id(db: Session, user_id: int) -> User | None:
    return db.get(User, user_id)


def find_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email.lower()).first()


def verify_credentials(db: Session, email: str, password: str) -> User | None:
    """Return the user if the email/password pair matches, else None."""
    user = find_by_email(db, email)
    if user is None or not verify_password(password, user.password):
        logger.warning("Rejected login attempt")
        return None
    return user


def get_user(db: Session, user_id: int) -> User:
    return get_or_raise(db, User, user_id, "User")


def update_profile(db: Session, user: User, fields: dict) -> User:
    """Partially update a user's profile. Role-specific fields only apply to that role."""
    if fields.get("name"):
        user.name = fields["name"]
    keys = ["location", "bio", "avatar"]
    if user.role == "recruiter":
        keys += ["company", "website"]
    for key in keys:
        if fields.get(key) is not None:
            setattr(user, key, fields[key])

    if user.role == "seeker" and fields.get("skills") is not None:
        user.skills = _split_skills(fields["skills"])

    db.commit()
    db.refresh(user)
    return user
