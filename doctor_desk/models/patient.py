from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Text
from sqlalchemy.sql import func

from ..core.database import Base, generate_id

class Patient(Base):
    __tablename__ = "patients"

    id = Column(String(24), primary_key=True, default=generate_id)

    # Reference to doctors.id; not a foreign key, dangling ids are allowed
    user_id = Column(String(24), nullable=True, index=True)

    # Clinical summary
    name = Column(String(255), nullable=True)
    age = Column(Integer, nullable=True)
    condition = Column(String(255), nullable=True)
    ongoing_treatment = Column(Text, nullable=True)
    last_visit = Column(DateTime, nullable=True, index=True)
    status = Column(String(50), nullable=True)

    # Insertion time; orders rows that tie on last_visit
    created_at = Column(DateTime, default=datetime.now, server_default=func.now())

    def __repr__(self):
        return f"<Patient(id={self.id}, name='{self.name}')>"
