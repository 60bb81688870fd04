from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi.security import HTTPBearer
from pydantic import BaseModel
from enum import Enum

from .config import settings

# Password hashing with a fixed work factor
pwd_context = CryptContext(
    schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=10
)

# Bearer credentials are optional so each caller decides how to fail
security = HTTPBearer(auto_error=False)

class UserRole(str, Enum):
    DOCTOR = "doctor"

class TokenPayload(BaseModel):
    sub: Optional[str] = None
    role: Optional[str] = None
    iat: Optional[int] = None
    exp: Optional[int] = None

# Password utilities
def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password: str) -> str:
    """Generate password hash."""
    return pwd_context.hash(password)

# JWT utilities
def create_access_token(
    subject: str,
    role: UserRole = UserRole.DOCTOR,
    expires_delta: Optional[timedelta] = None
) -> str:
    """Create a signed access token for the given subject."""
    issued_at = datetime.now(timezone.utc).replace(microsecond=0)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode = {
        "sub": subject,
        "role": role.value,
        "iat": issued_at,
        "exp": issued_at + expires_delta,
    }

    return jwt.encode(
        to_encode,
        settings.JWT_SECRET,
        algorithm=settings.ALGORITHM
    )

def decode_access_token(token: str) -> Optional[TokenPayload]:
    """Verify and decode JWT token."""
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.ALGORITHM]
        )
        return TokenPayload(**payload)

    except JWTError:
        return None
