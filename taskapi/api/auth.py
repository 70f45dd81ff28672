# taskapi/api/auth.py
from fastapi import APIRouter, BackgroundTasks, Depends, Query
from sqlalchemy.orm import Session

from taskapi.api.deps import get_db
from taskapi.schemas.token import AuthResponse, StatusResponse, TokenPair
from taskapi.schemas.user import LoginIn, RegisterIn, VerificationRequestIn
from taskapi.services import auth as auth_service

router = APIRouter()


@router.post("/register", response_model=AuthResponse)
def register(body: RegisterIn, db: Session = Depends(get_db)):
    tokens = auth_service.register(db, body)
    return AuthResponse(message="Successfully registration user", data=TokenPair(**tokens))


@router.post("/login", response_model=AuthResponse)
def login(body: LoginIn, db: Session = Depends(get_db)):
    tokens = auth_service.login(db, body.email, body.password)
    return AuthResponse(message="Successfully logged in", data=TokenPair(**tokens))


@router.post("/request-verification", response_model=StatusResponse)
def request_verification(
    body: VerificationRequestIn,
    background: BackgroundTasks,
    db: Session = Depends(get_db),
):
    auth_service.request_verification(db, body.email, background)
    return StatusResponse()


@router.get("/verify", response_model=StatusResponse)
def verify(
    email: str = Query(default=""),
    request_at: str = Query(default=""),
    signature: str = Query(default=""),
    db: Session = Depends(get_db),
):
    auth_service.verify_email(db, email, request_at, signature)
    return StatusResponse()
