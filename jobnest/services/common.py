"""Helpers shared by the services."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobnest.errors import ConflictError, NotFoundError


def get_or_raise(db: Session, model, entity_id: int, label: str):
    """Load a row by primary key or raise NotFoundError."""
    row = db.get(model, entity_id)
    if row is None:
        raise NotFoundError(f"{label} not found")
    return row


def commit_unique(db: Session, conflict_detail: str) -> None:
    """Commit, reporting a unique constraint violation as ConflictError.

    The store's unique constraints are the only duplicate guard, so two
    concurrent inserts for the same key cannot both succeed.
    """
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError(conflict_detail) from e
