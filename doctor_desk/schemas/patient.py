from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from .common import CamelModel
from .doctor import DoctorPublic


class PatientBase(CamelModel):
    id: str
    name: Optional[str] = None
    age: Optional[int] = None
    condition: Optional[str] = None
    ongoing_treatment: Optional[str] = None
    last_visit: Optional[datetime] = None
    status: Optional[str] = None


class PatientOut(PatientBase):
    user_id: Optional[str] = None


class PatientWithDoctor(PatientBase):
    # Resolved reference; None when unset or dangling
    user_id: Optional[DoctorPublic] = None


class PatientListResponse(BaseModel):
    status: str = "ok"
    patients: List[PatientWithDoctor]


class RecentPatientListResponse(BaseModel):
    status: str = "ok"
    patients: List[PatientOut]
