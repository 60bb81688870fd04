from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...api.deps import enforce_auth
from ...schemas.patient import PatientListResponse, RecentPatientListResponse
from ...services.patient_service import PatientService

router = APIRouter(tags=["Patients"], dependencies=[Depends(enforce_auth)])

@router.get("/patients", response_model=PatientListResponse)
def list_patients(db: Session = Depends(get_db)):
    """List every patient with their doctor attached."""
    return PatientListResponse(patients=PatientService(db).list_patients())

@router.get("/api/patients/recent", response_model=RecentPatientListResponse)
def list_recent_patients(db: Session = Depends(get_db)):
    """The five most recently visited patients."""
    return RecentPatientListResponse(
        patients=PatientService(db).list_recent_patients()
    )
