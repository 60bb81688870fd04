from typing import Optional

from .common import CamelModel


class DoctorSummary(CamelModel):
    """Doctor fields joined onto appointments."""

    id: str
    name: Optional[str] = None
    email: Optional[str] = None


class DoctorPublic(DoctorSummary):
    """Everything stored for a doctor except the password hash."""

    specialization: Optional[str] = None
    phone: Optional[str] = None
