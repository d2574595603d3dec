"""
Authentication API endpoints for WTE admins.
Handles email/password registration and login.
"""
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from wte_backend.infrastructure.database import get_db
from wte_backend.domain.errors import ValidationError
from wte_backend.domain.services.auth_service import auth_service
from wte_backend.core.config import settings


router = APIRouter()


# =============================================================================
# Request/Response Models
# =============================================================================

class AdminCredentials(BaseModel):
    """Email/password pair for registration and login"""
    email: str = Field(..., min_length=1, max_length=255, description="Admin email address")
    password: str = Field(..., min_length=1, max_length=128, description="Password")


class AdminResponse(BaseModel):
    """Registered admin (no password hash)"""
    id: int
    email: str

    model_config = ConfigDict(from_attributes=True)


class TokenResponse(BaseModel):
    """Bearer token for admin-only endpoints"""
    token: str
    token_type: str = "bearer"
    expires_in: int  # seconds

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Email/Password Authentication Endpoints
# =============================================================================

@router.post("/register", response_model=AdminResponse)
def register(
    request: AdminCredentials,
    db: Session = Depends(get_db)
):
    """
    Register an admin with email and password.

    The email is stored exactly as given. Registering an email that is
    already in use fails with 409.
    """
    email = request.email.strip()
    if '@' not in email or '.' not in email.split('@')[-1]:
        raise ValidationError("Invalid email format")

    return auth_service.register_admin(email=email, password=request.password, db=db)


@router.post("/login", response_model=TokenResponse)
def login(
    request: AdminCredentials,
    db: Session = Depends(get_db)
):
    """
    Exchange email/password credentials for a bearer token.

    Unknown email and wrong password produce the same 401 response.
    """
    token = auth_service.login(email=request.email.strip(), password=request.password, db=db)

    return TokenResponse(
        token=token,
        expires_in=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )
