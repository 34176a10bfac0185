"""FastAPI authentication dependencies for route protection."""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from frontdesk.models.user import User
from frontdesk.services.front_desk import FrontDesk, get_front_desk

# Strict bearer, raises 403 automatically if no token provided
_bearer_scheme = HTTPBearer()


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(_bearer_scheme),
    desk: FrontDesk = Depends(get_front_desk),
) -> User:
    """Return the operator behind the Bearer token.

    Raises:
        HTTPException 401: If the token is invalid, expired, revoked, or the user is unknown.
    """
    user = desk.sessions.current_user(credentials.credentials)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


async def require_admin(user: User = Depends(get_current_user)) -> User:
    """Allow only admin operators.

    Raises:
        HTTPException 403: If the operator is not an admin.
    """
    if user.role != "admin":
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin role required",
        )
    return user
