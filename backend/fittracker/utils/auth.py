"""Authentication utilities."""
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from fittracker.errors import AuthMissing
from fittracker.schemas.auth import TokenPayload
from fittracker.services.auth_service import AuthService

# Bearer token security scheme
bearer_scheme = HTTPBearer(auto_error=False)


def get_auth_service(request: Request) -> AuthService:
    """Dependency to get the application's auth service."""
    return request.app.state.auth_service


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth_service: AuthService = Depends(get_auth_service),
) -> TokenPayload:
    """
    Dependency to get the identity of the authenticated caller.

    Validates the JWT token from the Authorization header. The user record is
    not loaded here; handlers that need it look it up themselves.

    Raises:
        AuthMissing: If no bearer token was sent.
        AuthInvalid: If the token does not verify.
    """
    if not credentials:
        raise AuthMissing()

    return auth_service.verify_token(credentials.credentials)
