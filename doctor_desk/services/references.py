"""Resolution of id references into joined doctor data.

Each resolution is a single lookup-by-ids query with an explicit column
projection. Ids that match no doctor resolve to ``None``.
"""
from typing import Dict, Iterable, Optional, Type

from sqlalchemy.orm import Session

from ..models.doctor import Doctor
from ..schemas.doctor import DoctorPublic, DoctorSummary

SUMMARY_COLUMNS = (Doctor.id, Doctor.name, Doctor.email)
PUBLIC_COLUMNS = SUMMARY_COLUMNS + (Doctor.specialization, Doctor.phone)


def resolve_doctors(
    db: Session,
    doctor_ids: Iterable[Optional[str]],
    columns=SUMMARY_COLUMNS,
    schema: Type[DoctorSummary] = DoctorSummary,
) -> Dict[str, DoctorSummary]:
    """Fetch the referenced doctors, keyed by id."""
    wanted = {doctor_id for doctor_id in doctor_ids if doctor_id}
    if not wanted:
        return {}

    rows = db.query(*columns).filter(Doctor.id.in_(wanted)).all()
    return {row.id: schema.model_validate(row) for row in rows}


def resolve_doctor_profiles(
    db: Session, doctor_ids: Iterable[Optional[str]]
) -> Dict[str, DoctorPublic]:
    """Like ``resolve_doctors`` but with every field except the password."""
    return resolve_doctors(db, doctor_ids, PUBLIC_COLUMNS, DoctorPublic)
