"""
Authentication dependencies for FastAPI routes.
Provides dependency injection for admin-only endpoints.
"""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from wte_backend.domain.services.security import verify_token


@dataclass(frozen=True)
class AuthContext:
    """
    Identity resolved from a verified bearer token.

    Passed to route handlers as a parameter; nothing is stored on the request.

    Usage:
        @router.get("/protected")
        def protected_route(auth: AuthContext = Depends(get_auth_context)):
            return {"user_id": auth.user_id}
    """
    user_id: int
    issued_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None


# HTTP Bearer token security scheme
security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_auth_context(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> AuthContext:
    """
    Dependency admitting only requests with a valid bearer token.
    Raises 401 if the header is missing, or the token is invalid or expired.
    """
    if not credentials:
        raise _unauthorized("Not authenticated")

    payload = verify_token(credentials.credentials, token_type="access")

    if not payload:
        raise _unauthorized("Invalid or expired token")

    iat = payload.get("iat")
    return AuthContext(
        user_id=int(payload["sub"]),
        issued_at=datetime.fromtimestamp(iat, timezone.utc) if isinstance(iat, (int, float)) else None,
        expires_at=datetime.fromtimestamp(payload["exp"], timezone.utc),
    )
