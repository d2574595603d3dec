"""
Authentication Service for WTE admins.
Handles registration, credential checks, and token issuance.
"""
import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from wte_backend.infrastructure.models import AdminUser
from wte_backend.domain.errors import AuthenticationError, ConflictError
from .security import create_access_token, hash_password, verify_password

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


class AuthService:
    """Service for admin credential and token operations"""

    def __init__(self):
        self._dummy_hash: Optional[str] = None

    def _timing_hash(self) -> str:
        # Checked against when the email is unknown so both failures cost one bcrypt round
        if self._dummy_hash is None:
            self._dummy_hash = hash_password("wte-timing-equalizer")
        return self._dummy_hash

    def get_admin_by_email(self, email: str, db: Session) -> Optional[AdminUser]:
        return db.query(AdminUser).filter(AdminUser.email == email).first()

    def register_admin(self, email: str, password: str, db: Session) -> AdminUser:
        """
        Register a new admin with email and password.

        Args:
            email: Admin email address, stored as given
            password: Plaintext password (will be hashed)
            db: Database session

        Returns:
            Created AdminUser instance

        Raises:
            ConflictError: If email is already registered
        """
        if self.get_admin_by_email(email, db):
            raise ConflictError("Email already used")

        admin = AdminUser(
            email=email,
            password_hash=hash_password(password),
        )
        db.add(admin)
        try:
            db.commit()
        except IntegrityError:
            # Lost a race with a concurrent registration of the same email
            db.rollback()
            raise ConflictError("Email already used")
        db.refresh(admin)

        logger.info(f"Registered admin user {admin.id}")
        return admin

    def authenticate_admin(self, email: str, password: str, db: Session) -> AdminUser:
        """
        Authenticate an admin by email and password.

        Unknown email and wrong password raise the same error so callers
        cannot tell which one failed.

        Raises:
            AuthenticationError: On any credential mismatch
        """
        admin = self.get_admin_by_email(email, db)

        if admin is None:
            verify_password(password, self._timing_hash())
            logger.info("Login rejected: invalid credentials")
            raise AuthenticationError(INVALID_CREDENTIALS)

        if not verify_password(password, admin.password_hash):
            logger.info("Login rejected: invalid credentials")
            raise AuthenticationError(INVALID_CREDENTIALS)

        return admin

    def login(self, email: str, password: str, db: Session) -> str:
        """Authenticate and return a signed access token."""
        admin = self.authenticate_admin(email, password, db)
        return create_access_token(admin.id)


# Singleton instance
auth_service = AuthService()
