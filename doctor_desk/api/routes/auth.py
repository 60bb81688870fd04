from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...api.deps import get_current_doctor
from ...models.doctor import Doctor
from ...schemas.auth import CurrentDoctorResponse, LoginRequest, LoginResponse
from ...schemas.doctor import DoctorPublic
from ...services.auth_service import AuthService

router = APIRouter(tags=["Authentication"])

@router.post("/login", response_model=LoginResponse)
def login(
    login_data: LoginRequest,
    db: Session = Depends(get_db)
):
    """Authenticate a doctor and return an access token."""
    return AuthService(db).authenticate_doctor(login_data)

@router.get("/me", response_model=CurrentDoctorResponse)
def get_current_doctor_info(
    current_doctor: Doctor = Depends(get_current_doctor)
):
    """Get the doctor identified by the bearer token."""
    return CurrentDoctorResponse(doctor=DoctorPublic.model_validate(current_doctor))
