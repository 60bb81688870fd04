from sqlalchemy import Column, String, DateTime, Text
import enum

from ..core.database import Base, generate_id

class AppointmentStatus(str, enum.Enum):
    SCHEDULED = "scheduled"

class Appointment(Base):
    __tablename__ = "appointments"

    id = Column(String(24), primary_key=True, default=generate_id)

    # Reference to doctors.id; not a foreign key, dangling ids are allowed
    doctor_id = Column(String(24), nullable=True, index=True)

    # Appointment details
    patient_name = Column(String(255), nullable=True)
    date_time = Column(DateTime, nullable=True, index=True)
    reason = Column(Text, nullable=True)
    # Free text; callers may set any value through an update
    status = Column(String(50), default=AppointmentStatus.SCHEDULED.value)

    def __repr__(self):
        return f"<Appointment(id={self.id}, doctor_id={self.doctor_id}, date='{self.date_time}')>"
