"""Bearer-token handling.

Sign-in itself belongs to the identity provider; the gateway only receives
the provider's session token and forwards it to the REST API.
"""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# auto_error=False so a missing header reaches our own sign-in response
bearer_scheme = HTTPBearer(auto_error=False)


class SignInRequired(Exception):
    """Raised when an operation needs a token the caller does not have."""

    def __init__(self, message: str = "Sign in required") -> None:
        super().__init__(message)
        self.message = message


async def get_optional_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str | None:
    """Return the caller's bearer token, or None when signed out."""
    if credentials is None or not credentials.credentials:
        return None
    return credentials.credentials


async def get_token(token: str | None = Depends(get_optional_token)) -> str:
    """FastAPI dependency for routes that need a signed-in caller.

    A missing or malformed ``Authorization`` header produces the sign-in
    prompt (401) immediately.
    """
    if token is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Sign in required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return token
