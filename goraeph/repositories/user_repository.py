# File: goraeph/repositories/user_repository.py

"""
Data access for users.

``UserRepository`` is the contract the service depends on.
``SqlAlchemyUserRepository`` implements it over a request-scoped
SQLAlchemy session; database faults come out as ``StoreError`` and
unique-constraint violations as the matching duplicate error.
"""

import logging
import re
from typing import Any, List, Optional, Protocol

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from goraeph.core.exceptions import (
    DuplicateEmailError,
    DuplicateUsernameError,
    StoreError,
)
from goraeph.models.user import User

logger = logging.getLogger(__name__)


_UNIQUE_COLUMNS = ("username", "email")


def _unique_violation_column(exc: IntegrityError) -> Optional[str]:
    """
    Name of the unique users column behind ``exc``, or None.

    Only constraint and column identifiers are inspected, never the
    driver message as a whole, since that can echo the rejected value.
    """
    # psycopg: diag.constraint_name is the unique index, e.g. ix_users_email
    diag = getattr(exc.orig, "diag", None)
    constraint = getattr(diag, "constraint_name", None)
    if constraint:
        for column in _UNIQUE_COLUMNS:
            if constraint in (f"ix_users_{column}", f"users_{column}_key"):
                return column
        return None

    # sqlite: "UNIQUE constraint failed: users.email"
    match = re.search(r"UNIQUE constraint failed: ([\w.]+)", str(exc.orig))
    if match:
        for column in _UNIQUE_COLUMNS:
            if match.group(1) == f"users.{column}":
                return column
    return None


class UserRepository(Protocol):
    def find(self) -> List[User]: ...

    def find_one_by(self, **criteria: Any) -> Optional[User]: ...

    def create(self, **fields: Any) -> User: ...

    def save(self, user: User) -> User: ...

    def remove(self, user: User) -> None: ...


class SqlAlchemyUserRepository:
    def __init__(self, db: Session):
        self.db = db

    def find(self) -> List[User]:
        try:
            return list(self.db.scalars(select(User).order_by(User.id)))
        except SQLAlchemyError as exc:
            raise StoreError("Failed to fetch users") from exc

    def find_one_by(self, **criteria: Any) -> Optional[User]:
        try:
            return self.db.scalars(select(User).filter_by(**criteria)).first()
        except SQLAlchemyError as exc:
            raise StoreError("Failed to fetch user") from exc

    def create(self, **fields: Any) -> User:
        """Build an unsaved ``User``; the store assigns id and timestamps on save."""
        return User(**fields)

    def save(self, user: User) -> User:
        # rollback expires persistent instances, so read these up front
        username, email = user.username, user.email
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
        except IntegrityError as exc:
            self.db.rollback()
            column = _unique_violation_column(exc)
            if column == "username":
                raise DuplicateUsernameError(username) from exc
            if column == "email":
                raise DuplicateEmailError(email) from exc
            raise StoreError("Failed to save user") from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("Saving user %s failed: %s", username, exc)
            raise StoreError("Failed to save user") from exc
        return user

    def remove(self, user: User) -> None:
        user_id = user.id
        try:
            self.db.delete(user)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("Removing user %s failed: %s", user_id, exc)
            raise StoreError("Failed to remove user") from exc
