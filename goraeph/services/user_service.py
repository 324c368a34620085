# File: goraeph/services/user_service.py

"""
User account use cases.

Every write is preceded by the username/email duplicate checks, and a
failing check stops the call before the repository is asked to persist
anything. Repository errors are never caught here.
"""

import logging
from typing import List, Optional

from goraeph.core.exceptions import (
    DuplicateEmailError,
    DuplicateUsernameError,
    UserNotFoundError,
)
from goraeph.models.user import User
from goraeph.repositories.user_repository import UserRepository
from goraeph.schemas.user import UserCreate, UserUpdate

logger = logging.getLogger(__name__)


class UsersService:
    def __init__(self, repository: UserRepository):
        self.repository = repository

    def find_all(self) -> List[User]:
        return self.repository.find()

    def find_by_id(self, user_id: int) -> Optional[User]:
        return self.repository.find_one_by(id=user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        return self.repository.find_one_by(email=email)

    def validate_email_duplicate(self, email: str) -> Optional[User]:
        """
        Return the user already holding ``email``, or None if it is free.
        """
        return self.repository.find_one_by(email=email)

    def validate_username_duplicate(self, username: str) -> Optional[User]:
        """
        Return the user already holding ``username``, or None if it is free.
        """
        return self.repository.find_one_by(username=username)

    def create(self, data: UserCreate) -> User:
        if self.validate_username_duplicate(data.username):
            logger.warning("Rejected new user: username %s taken", data.username)
            raise DuplicateUsernameError(data.username)
        if self.validate_email_duplicate(data.email):
            logger.warning("Rejected new user: email %s taken", data.email)
            raise DuplicateEmailError(data.email)

        user = self.repository.create(**data.model_dump())
        saved = self.repository.save(user)
        logger.info("Created user %s (id=%s)", saved.username, saved.id)
        return saved

    def update(self, user_id: int, data: UserUpdate) -> User:
        """
        Apply the fields set on ``data`` to user ``user_id``.

        A new username/email is checked against every *other* user;
        keeping one's own value is not a conflict.
        """
        user = self.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        changes = data.model_dump(exclude_unset=True)

        username = changes.get("username")
        if username is not None and username != user.username:
            holder = self.validate_username_duplicate(username)
            if holder and holder.id != user.id:
                logger.warning("Rejected update of user %s: username %s taken", user_id, username)
                raise DuplicateUsernameError(username)

        email = changes.get("email")
        if email is not None and email != user.email:
            holder = self.validate_email_duplicate(email)
            if holder and holder.id != user.id:
                logger.warning("Rejected update of user %s: email %s taken", user_id, email)
                raise DuplicateEmailError(email)

        for field, value in changes.items():
            setattr(user, field, value)

        saved = self.repository.save(user)
        logger.info("Updated user %s fields=%s", user_id, sorted(changes))
        return saved

    def delete(self, user_id: int) -> None:
        user = self.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        self.repository.remove(user)
        logger.info("Deleted user %s", user_id)
