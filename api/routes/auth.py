# api/routes/auth.py

from typing import Optional
from fastapi import APIRouter, Depends

from api.dependencies import AuthContext, get_auth_context, get_auth_service
from api.schemas.responses import MessageResponse, UserResponse
from core.models import Credentials
from core.services import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])

_errors = {400: {"model": MessageResponse}}

@router.post("/register", response_model=UserResponse, responses=_errors)
def register(
    credentials: Optional[Credentials] = None,
    service: AuthService = Depends(get_auth_service)
):
    """
    Register a new user and return it with a token.
    """
    credentials = credentials or Credentials()
    return UserResponse(user=service.register(credentials.username, credentials.password))

@router.post("/login", response_model=UserResponse, responses=_errors)
def login(
    credentials: Optional[Credentials] = None,
    service: AuthService = Depends(get_auth_service)
):
    credentials = credentials or Credentials()
    return UserResponse(user=service.login(credentials.username, credentials.password))

@router.get("/me", response_model=UserResponse)
def me(
    context: AuthContext = Depends(get_auth_context),
    service: AuthService = Depends(get_auth_service)
):
    """
    Get the authenticated user, carrying the token the request was made with.
    """
    return UserResponse(user=service.me(context.user, context.token))
