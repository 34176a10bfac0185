"""Auth API router: login, current user, logout."""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from frontdesk.api.deps import FrontDesk, get_current_user, get_front_desk
from frontdesk.models.user import User
from frontdesk.schemas.auth import (
    AuthResponse,
    LoginRequest,
    MessageResponse,
    TokenResponse,
    UserResponse,
)

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])

_bearer_scheme = HTTPBearer()


@router.post("/login", response_model=AuthResponse)
async def login(body: LoginRequest, desk: FrontDesk = Depends(get_front_desk)) -> AuthResponse:
    """Authenticate with username and password."""
    session = desk.sessions.login(body.username, body.password)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    user, token = session
    return AuthResponse(
        user=UserResponse.model_validate(user),
        tokens=TokenResponse(access_token=token),
    )


@router.get("/me", response_model=UserResponse)
async def me(current_user: User = Depends(get_current_user)) -> User:
    """Return the operator behind the current token."""
    return current_user


@router.post("/logout", response_model=MessageResponse)
async def logout(
    credentials: HTTPAuthorizationCredentials = Depends(_bearer_scheme),
    desk: FrontDesk = Depends(get_front_desk),
    current_user: User = Depends(get_current_user),
) -> dict:
    """Revoke the current token."""
    desk.sessions.logout(credentials.credentials)
    return {"message": "Logged out"}
