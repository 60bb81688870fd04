from pydantic import BaseModel

from .doctor import DoctorPublic


class LoginRequest(BaseModel):
    email: str
    password: str


class LoginResponse(BaseModel):
    status: str = "ok"
    token: str
    doctor: DoctorPublic


class CurrentDoctorResponse(BaseModel):
    status: str = "ok"
    doctor: DoctorPublic
