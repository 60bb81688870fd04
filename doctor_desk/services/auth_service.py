from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import logging

from ..core.exceptions import InternalError, NotFoundError, UnauthorizedError
from ..core.security import (
    create_access_token, decode_access_token, verify_password, UserRole
)
from ..models.doctor import Doctor
from ..schemas.auth import LoginRequest, LoginResponse
from ..schemas.doctor import DoctorPublic

logger = logging.getLogger(__name__)

class AuthService:
    def __init__(self, db: Session):
        self.db = db

    def authenticate_doctor(self, login_data: LoginRequest) -> LoginResponse:
        """Check a doctor's credentials and issue an access token."""
        try:
            doctor = self.db.query(Doctor).filter(
                Doctor.email == login_data.email
            ).first()
        except SQLAlchemyError:
            logger.exception("Login lookup failed")
            raise InternalError("Login failed")

        if not doctor:
            raise NotFoundError("Doctor not found")

        if not self._password_matches(login_data.password, doctor.password):
            raise UnauthorizedError("Invalid password")

        token = create_access_token(doctor.id, UserRole.DOCTOR)
        logger.info("Doctor %s logged in", doctor.id)

        return LoginResponse(
            token=token,
            doctor=DoctorPublic.model_validate(doctor)
        )

    def get_doctor_from_token(self, token: str) -> Doctor:
        """Resolve the doctor a bearer token was issued to."""
        payload = decode_access_token(token)
        if not payload or not payload.sub:
            raise UnauthorizedError("Invalid or expired token")

        if payload.role != UserRole.DOCTOR.value:
            raise UnauthorizedError("Invalid token role")

        doctor = self.db.get(Doctor, payload.sub)
        if not doctor:
            raise NotFoundError("Doctor not found")
        return doctor

    @staticmethod
    def _password_matches(plain_password: str, password_hash) -> bool:
        if not password_hash:
            return False
        try:
            return verify_password(plain_password, password_hash)
        except ValueError:
            # Stored value is not a recognisable hash
            logger.warning("Unverifiable password hash on doctor record")
            return False
