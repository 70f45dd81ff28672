"""Application exception hierarchy.

Every error raised by the auth flow and the task routes derives from
``AppError``; ``taskapi.main`` turns it into a JSON response using
``status_code`` and ``to_dict()``.
"""
from __future__ import annotations

from typing import Any, Dict


class AppError(Exception):
    status_code: int = 500
    code: str = "INTERNAL_ERROR"
    message: str = "Internal error"

    def __init__(self, message: str | None = None, *, status_code: int | None = None):
        self.message = message or self.message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, "code": self.code}


# ---------- validation ----------
class ValidationFailed(AppError):
    status_code = 400
    code = "VALIDATION_ERROR"
    message = "Validation failed"


class EmailAlreadyRegistered(ValidationFailed):
    code = "EMAIL_TAKEN"
    message = "Email already exists!"


# ---------- authentication ----------
class AuthenticationError(AppError):
    status_code = 401
    code = "AUTH_ERROR"
    message = "Unauthorized"


class InvalidCredentials(AuthenticationError):
    # login falho é erro do cliente, sem distinguir e-mail de senha
    status_code = 400
    code = "AUTH_INVALID_CREDENTIALS"
    message = "Invalid email or password"


class TokenExpired(AuthenticationError):
    code = "AUTH_TOKEN_EXPIRED"
    message = "Token expired"


class TokenInvalid(AuthenticationError):
    code = "AUTH_TOKEN_INVALID"
    message = "Invalid token"


class SigningError(AppError):
    code = "SIGNING_ERROR"
    message = "Could not sign token"


# ---------- email verification ----------
class VerificationError(AppError):
    status_code = 400
    code = "VERIFICATION_ERROR"
    message = "Verification failed"


class InvalidSignature(VerificationError):
    code = "INVALID_SIGNATURE"
    message = "Invalid signature"


class LinkExpired(VerificationError):
    code = "LINK_EXPIRED"
    message = "Request expired"


class UserNotFound(VerificationError):
    status_code = 404
    code = "USER_NOT_FOUND"
    message = "User not found"


# ---------- resources ----------
class NotFoundError(AppError):
    status_code = 404
    code = "NOT_FOUND"
    message = "Resource not found"


class TaskNotFound(NotFoundError):
    message = "Task not found"
