from datetime import datetime
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import logging

from ..core.exceptions import BadRequestError, InternalError, NotFoundError
from ..models.appointment import Appointment
from ..schemas.appointment import (
    AppointmentCreate, AppointmentOut, AppointmentUpdate, AppointmentWithDoctor
)
from ..utils.datetime_utils import combine_date_time, day_bounds
from .references import resolve_doctors

logger = logging.getLogger(__name__)

UPCOMING_APPOINTMENTS_LIMIT = 10

class AppointmentService:
    def __init__(self, db: Session):
        self.db = db

    def book(self, data: AppointmentCreate) -> AppointmentOut:
        """Book an appointment.

        No check is made that the doctor exists or that the slot is free;
        overlapping bookings for the same doctor are accepted.
        """
        if not (data.doctor_id and data.patient_name and data.date and data.time):
            raise BadRequestError("Missing required fields")

        date_time = self._combine(data.date, data.time)

        appointment = Appointment(
            doctor_id=data.doctor_id,
            patient_name=data.patient_name,
            date_time=date_time,
            reason=data.reason,
        )
        try:
            self.db.add(appointment)
            self.db.commit()
            self.db.refresh(appointment)
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Appointment booking failed")
            raise InternalError("Could not book appointment")

        logger.info(
            "Booked appointment %s for doctor %s at %s",
            appointment.id, appointment.doctor_id, appointment.date_time
        )
        return self._to_out(appointment)

    def list_appointments(self) -> List[AppointmentWithDoctor]:
        try:
            appointments = self.db.query(Appointment).all()
            return self._with_doctors(appointments)
        except SQLAlchemyError:
            logger.exception("Appointment listing failed")
            raise InternalError("Could not fetch appointments")

    def list_today(self, now: Optional[datetime] = None) -> List[AppointmentWithDoctor]:
        """Appointments falling anywhere on the server's current local day."""
        start, end = day_bounds(now or datetime.now())
        try:
            appointments = (
                self.db.query(Appointment)
                .filter(Appointment.date_time >= start, Appointment.date_time <= end)
                .all()
            )
            return self._with_doctors(appointments)
        except SQLAlchemyError:
            logger.exception("Today's appointments query failed")
            raise InternalError("Could not fetch today's appointments")

    def list_upcoming(self, now: Optional[datetime] = None) -> List[AppointmentWithDoctor]:
        """The next appointments strictly after now, soonest first."""
        now = now or datetime.now()
        try:
            appointments = (
                self.db.query(Appointment)
                .filter(Appointment.date_time > now)
                .order_by(Appointment.date_time.asc())
                .limit(UPCOMING_APPOINTMENTS_LIMIT)
                .all()
            )
            return self._with_doctors(appointments)
        except SQLAlchemyError:
            logger.exception("Upcoming appointments query failed")
            raise InternalError("Could not fetch upcoming appointments")

    def update(self, appointment_id: str, data: AppointmentUpdate) -> AppointmentOut:
        """Partially update an appointment.

        Only supplied fields are written. The timestamp is recomputed when
        both ``date`` and ``time`` are given.
        """
        changes = {}
        if data.status is not None:
            changes["status"] = data.status
        if data.reason is not None:
            changes["reason"] = data.reason
        if data.date and data.time:
            changes["date_time"] = self._combine(data.date, data.time)

        try:
            appointment = self.db.get(Appointment, appointment_id)
            if not appointment:
                raise NotFoundError("Appointment not found")

            for field, value in changes.items():
                setattr(appointment, field, value)
            self.db.commit()
            self.db.refresh(appointment)
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Appointment update failed")
            raise InternalError("Could not update appointment")

        return self._to_out(appointment)

    def cancel(self, appointment_id: str) -> None:
        """Delete an appointment outright."""
        try:
            appointment = self.db.get(Appointment, appointment_id)
            if not appointment:
                raise NotFoundError("Appointment not found")

            self.db.delete(appointment)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Appointment cancellation failed")
            raise InternalError("Could not cancel appointment")

        logger.info("Cancelled appointment %s", appointment_id)

    @staticmethod
    def _combine(date: str, time: str) -> datetime:
        try:
            return combine_date_time(date, time)
        except ValueError:
            raise BadRequestError("Invalid date or time")

    def _with_doctors(self, appointments) -> List[AppointmentWithDoctor]:
        doctors = resolve_doctors(
            self.db, (appointment.doctor_id for appointment in appointments)
        )
        return [
            AppointmentWithDoctor(
                id=appointment.id,
                doctor=doctors.get(appointment.doctor_id),
                patient_name=appointment.patient_name,
                date_time=appointment.date_time,
                reason=appointment.reason,
                status=appointment.status,
            )
            for appointment in appointments
        ]

    @staticmethod
    def _to_out(appointment: Appointment) -> AppointmentOut:
        return AppointmentOut(
            id=appointment.id,
            doctor=appointment.doctor_id,
            patient_name=appointment.patient_name,
            date_time=appointment.date_time,
            reason=appointment.reason,
            status=appointment.status,
        )
