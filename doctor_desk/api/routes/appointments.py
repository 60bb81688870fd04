from fastapi import APIRouter, Depends
from typing import Optional
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...api.deps import enforce_auth
from ...schemas.appointment import (
    AppointmentCreate, AppointmentListResponse, AppointmentResponse,
    AppointmentUpdate
)
from ...schemas.common import MessageResponse
from ...services.appointment_service import AppointmentService

router = APIRouter(
    prefix="/appointments",
    tags=["Appointments"],
    dependencies=[Depends(enforce_auth)]
)

@router.post("", response_model=AppointmentResponse)
def book_appointment(
    appointment_data: Optional[AppointmentCreate] = None,
    db: Session = Depends(get_db)
):
    """Book an appointment from a date and an HH:MM time."""
    appointment = AppointmentService(db).book(
        appointment_data or AppointmentCreate()
    )
    return AppointmentResponse(appointment=appointment)

@router.get("", response_model=AppointmentListResponse)
def list_appointments(db: Session = Depends(get_db)):
    return AppointmentListResponse(
        appointments=AppointmentService(db).list_appointments()
    )

@router.get("/today", response_model=AppointmentListResponse)
def list_today_appointments(db: Session = Depends(get_db)):
    return AppointmentListResponse(
        appointments=AppointmentService(db).list_today()
    )

@router.get("/upcoming", response_model=AppointmentListResponse)
def list_upcoming_appointments(db: Session = Depends(get_db)):
    """Up to ten future appointments, soonest first."""
    return AppointmentListResponse(
        appointments=AppointmentService(db).list_upcoming()
    )

@router.put("/{appointment_id}", response_model=AppointmentResponse)
def update_appointment(
    appointment_id: str,
    update_data: Optional[AppointmentUpdate] = None,
    db: Session = Depends(get_db)
):
    """Change the status, reason or date and time of an appointment."""
    appointment = AppointmentService(db).update(
        appointment_id, update_data or AppointmentUpdate()
    )
    return AppointmentResponse(appointment=appointment)

@router.delete("/{appointment_id}", response_model=MessageResponse)
def cancel_appointment(
    appointment_id: str,
    db: Session = Depends(get_db)
):
    """Cancel (delete) an appointment."""
    AppointmentService(db).cancel(appointment_id)
    return MessageResponse(message="Appointment cancelled")
