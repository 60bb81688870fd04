from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from typing import Optional

from ..core.config import settings
from ..core.database import get_db
from ..core.exceptions import UnauthorizedError
from ..core.security import decode_access_token, security, UserRole
from ..models.doctor import Doctor
from ..services.auth_service import AuthService

async def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> str:
    """Extract the bearer token from the Authorization header."""
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Not authenticated")
    return credentials.credentials

def get_current_doctor(
    token: str = Depends(get_bearer_token),
    db: Session = Depends(get_db)
) -> Doctor:
    """Get the doctor the bearer token was issued to."""
    return AuthService(db).get_doctor_from_token(token)

async def enforce_auth(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> None:
    """Token check for data routes, active only when REQUIRE_AUTH is set.

    Routes are open by default; the login token is not otherwise verified.
    """
    if not settings.REQUIRE_AUTH:
        return None

    if credentials is None:
        raise UnauthorizedError("Invalid or expired token")

    payload = decode_access_token(credentials.credentials)
    if not payload or not payload.sub:
        raise UnauthorizedError("Invalid or expired token")

    if payload.role != UserRole.DOCTOR.value:
        raise UnauthorizedError("Invalid token role")
