from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import logging

from ..core.exceptions import InternalError
from ..models.patient import Patient
from ..schemas.patient import PatientOut, PatientWithDoctor
from .references import resolve_doctor_profiles

logger = logging.getLogger(__name__)

RECENT_PATIENTS_LIMIT = 5

class PatientService:
    def __init__(self, db: Session):
        self.db = db

    def list_patients(self) -> List[PatientWithDoctor]:
        """All patients with their doctor reference resolved."""
        try:
            patients = (
                self.db.query(Patient)
                .order_by(Patient.created_at.asc(), Patient.id.asc())
                .all()
            )
            doctors = resolve_doctor_profiles(
                self.db, (patient.user_id for patient in patients)
            )
        except SQLAlchemyError:
            logger.exception("Patient listing failed")
            raise InternalError("Could not fetch patients")

        return [
            PatientWithDoctor(
                id=patient.id,
                user_id=doctors.get(patient.user_id),
                name=patient.name,
                age=patient.age,
                condition=patient.condition,
                ongoing_treatment=patient.ongoing_treatment,
                last_visit=patient.last_visit,
                status=patient.status,
            )
            for patient in patients
        ]

    def list_recent_patients(self) -> List[PatientOut]:
        """The most recently visited patients, newest first."""
        try:
            patients = (
                self.db.query(Patient)
                .order_by(
                    Patient.last_visit.desc().nulls_last(),
                    Patient.created_at.asc(),
                    Patient.id.asc(),
                )
                .limit(RECENT_PATIENTS_LIMIT)
                .all()
            )
        except SQLAlchemyError:
            logger.exception("Recent patients query failed")
            raise InternalError("Could not fetch recent patients")

        return [PatientOut.model_validate(patient) for patient in patients]
