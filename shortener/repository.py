"""
Auth Service — user store.

Wraps a SQLAlchemy session so the flows never see driver exceptions:
unique-constraint violations come out as ``DuplicateUserError``, anything
else the database raises comes out as ``StoreError``.
"""

import uuid
from typing import Optional

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from .database import DBUser
from .exceptions import DuplicateUserError, StoreError


class UserStore:
    def __init__(self, db: Session):
        self.db = db

    def exists(self, email: str, user_name: Optional[str] = None) -> bool:
        """True if a user holds this email (or this user name, when given)."""
        clauses = [DBUser.email == email]
        if user_name is not None:
            clauses.append(DBUser.user_name == user_name)
        try:
            return self.db.query(DBUser.id).filter(or_(*clauses)).first() is not None
        except SQLAlchemyError as exc:
            raise StoreError(str(exc)) from exc

    def find_by_email(self, email: str) -> Optional[DBUser]:
        try:
            return self.db.query(DBUser).filter(DBUser.email == email).first()
        except SQLAlchemyError as exc:
            raise StoreError(str(exc)) from exc

    def create(self, user_name: str, email: str, password_hash: str) -> DBUser:
        user = DBUser(
            id=str(uuid.uuid4()),
            user_name=user_name,
            email=email,
            password_hash=password_hash,
        )
        try:
            self.db.add(user)
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise DuplicateUserError(str(exc)) from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StoreError(str(exc)) from exc
        return user
