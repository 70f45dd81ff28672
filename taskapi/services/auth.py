# taskapi/services/auth.py
"""Registration, login and email verification.

A user moves ``unregistered -> registered (unverified) -> registered (verified)``.
Sessions are not part of that state: a fresh session token and refresh token
are issued on every successful registration or login.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Dict, Optional

from fastapi import BackgroundTasks
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from taskapi.core.errors import EmailAlreadyRegistered, InvalidCredentials, UserNotFound
from taskapi.core.security import verify_password
from taskapi.core.tokens import issue_tokens_for
from taskapi.crud.user import user_crud
from taskapi.models.user import User
from taskapi.schemas.user import RegisterIn
from taskapi.services import mailer
from taskapi.services.verification import build_verification_link, validate_verification_link

logger = logging.getLogger(__name__)

VERIFICATION_SUBJECT = "Email Verification"


def register(db: Session, payload: RegisterIn) -> Dict[str, str]:
    """Create the user in one transaction, then issue its tokens.

    Email uniqueness is left to the ``users.email`` constraint; a violation
    is reported as ``EmailAlreadyRegistered``. Any other failure rolls the
    insert back and propagates.
    """
    user = user_crud.build(payload)
    try:
        user_crud.save(db, user)
    except IntegrityError as exc:
        db.rollback()
        logger.info("registration rejected, email already taken: %s", payload.email)
        raise EmailAlreadyRegistered() from exc
    except Exception:
        db.rollback()
        raise

    logger.info("user registered id=%s", user.id)
    return issue_tokens_for(db, user)


def login(db: Session, email: str, password: str) -> Dict[str, str]:
    user = user_crud.get_by_email(db, email)
    if not user or not verify_password(password, user.password):
        logger.warning("failed login for %s", email)
        raise InvalidCredentials()
    return issue_tokens_for(db, user)


def _deliver_verification(email: str, url: str) -> None:
    text, html = mailer.render_verification_mail(url)
    mailer.send_mail(email, VERIFICATION_SUBJECT, text, html)


def request_verification(db: Session, email: str, background: Optional[BackgroundTasks] = None) -> str:
    """Queue a verification link for an unverified user and return it.

    Already verified users are indistinguishable from unknown ones.
    """
    user = user_crud.get_unverified_by_email(db, email)
    if not user:
        raise UserNotFound()

    url = build_verification_link(user.email)
    if background is not None:
        background.add_task(_deliver_verification, user.email, url)
    else:
        _deliver_verification(user.email, url)
    logger.info("verification link queued for user id=%s", user.id)
    return url


def verify_email(
    db: Session,
    email: str,
    request_at: str,
    signature: str,
    now: Optional[datetime] = None,
) -> User:
    validate_verification_link(email, request_at, signature, now=now)

    user = user_crud.get_by_email(db, email)
    if not user:
        raise UserNotFound()

    # reexecutar com link ainda válido só atualiza o horário
    user.email_verified_at = now or datetime.now(timezone.utc)
    user_crud.save(db, user)
    logger.info("email verified for user id=%s", user.id)
    return user
