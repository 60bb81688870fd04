from sqlalchemy import Column, String

from ..core.database import Base, generate_id

class Doctor(Base):
    __tablename__ = "doctors"

    id = Column(String(24), primary_key=True, default=generate_id)

    # Profile
    name = Column(String(255), nullable=True)
    email = Column(String(255), unique=True, index=True, nullable=True)
    password = Column(String(255), nullable=True)  # bcrypt hash
    specialization = Column(String(100), nullable=True)
    phone = Column(String(20), nullable=True)

    def __repr__(self):
        return f"<Doctor(id={self.id}, name='{self.name}', email='{self.email}')>"
