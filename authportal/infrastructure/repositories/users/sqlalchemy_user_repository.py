# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from authportal.domain.users.entities import User as DomainUser
from authportal.domain.users.exceptions import UserAlreadyExistsError
from authportal.domain.users.repositories import UserRepository
from authportal.infrastructure.db.models import User
from authportal.infrastructure.db.session import session_scope
from authportal.shared.errors.base import StoreError
from authportal.shared.logging import logger


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        email=row.email,
        password_hash=row.password_hash,
        created_at=row.created_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def find_by_email_or_username(self, email: str, username: str) -> DomainUser | None:
        try:
            with session_scope() as session:
                row = (
                    session.query(User)
                    .filter(or_(User.email == email, User.username == username))
                    .first()
                )
                return _to_domain(row) if row else None
        except SQLAlchemyError as exc:
            logger.error(f"users.find_by_email_or_username: {type(exc).__name__}")
            raise StoreError("find_by_email_or_username") from exc

    def find_by_email(self, email: str) -> DomainUser | None:
        try:
            with session_scope() as session:
                row = session.query(User).filter(User.email == email).first()
                return _to_domain(row) if row else None
        except SQLAlchemyError as exc:
            logger.error(f"users.find_by_email: {type(exc).__name__}")
            raise StoreError("find_by_email") from exc

    def add(self, username: str, email: str, password_hash: str) -> DomainUser:
        try:
            with session_scope() as session:
                row = User(username=username, email=email, password_hash=password_hash)
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except IntegrityError as exc:
            logger.info("users.add: unique constraint violated")
            raise UserAlreadyExistsError() from exc
        except SQLAlchemyError as exc:
            logger.error(f"users.add: {type(exc).__name__}")
            raise StoreError("add") from exc
