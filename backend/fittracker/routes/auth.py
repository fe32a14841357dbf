"""Authentication routes."""
from fastapi import APIRouter, Depends, status

from fittracker.repositories import DataStore, Record, get_store
from fittracker.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from fittracker.schemas.user import UserResponse
from fittracker.services.auth_service import AuthService
from fittracker.utils.auth import get_auth_service

router = APIRouter(prefix="/auth", tags=["Authentication"])


def _auth_response(auth_service: AuthService, user: Record) -> AuthResponse:
    token = auth_service.create_access_token(user["id"], user["email"])
    return AuthResponse(token=token, user=UserResponse.model_validate(user))


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    store: DataStore = Depends(get_store),
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Log in with email and password.

    Returns a bearer token and the user's profile.
    """
    user = await auth_service.authenticate(store.users, request)
    return _auth_response(auth_service, user)


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterRequest,
    store: DataStore = Depends(get_store),
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Create an account and log it in.

    Fails with 400 when the email is already registered.
    """
    user = await auth_service.register(store.users, request)
    return _auth_response(auth_service, user)
