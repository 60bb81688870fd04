from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from .common import CamelModel
from .doctor import DoctorSummary


class AppointmentCreate(CamelModel):
    """Booking request. Presence is checked by the service so that a missing
    field produces a 400 rather than a validation error."""

    doctor_id: Optional[str] = None
    patient_name: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    reason: Optional[str] = None


class AppointmentUpdate(CamelModel):
    date: Optional[str] = None
    time: Optional[str] = None
    status: Optional[str] = None
    reason: Optional[str] = None


class AppointmentBase(CamelModel):
    id: str
    patient_name: Optional[str] = None
    date_time: Optional[datetime] = None
    reason: Optional[str] = None
    status: Optional[str] = None


class AppointmentOut(AppointmentBase):
    doctor: Optional[str] = None


class AppointmentWithDoctor(AppointmentBase):
    doctor: Optional[DoctorSummary] = None


class AppointmentResponse(BaseModel):
    status: str = "ok"
    appointment: AppointmentOut


class AppointmentListResponse(BaseModel):
    status: str = "ok"
    appointments: List[AppointmentWithDoctor]
