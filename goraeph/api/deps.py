# File: goraeph/api/deps.py

from collections.abc import Generator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from goraeph.db.session import SessionLocal
from goraeph.repositories.user_repository import SqlAlchemyUserRepository
from goraeph.services.user_service import UsersService


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a SQLAlchemy session.

    Usage in route functions:
        db: Session = Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_users_service(db: Session = Depends(get_db)) -> UsersService:
    """
    Build a UsersService over a request-scoped repository.
    """
    return UsersService(SqlAlchemyUserRepository(db))


UsersServiceDep = Annotated[UsersService, Depends(get_users_service)]
