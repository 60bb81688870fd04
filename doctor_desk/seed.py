"""
Doctor Seeding Script
Inserts a single doctor with a hashed password so that someone can log in.

Usage:
    python -m doctor_desk.seed --email dr.div@example.com --password div1

Exits with status 0 when the doctor was stored and 1 on any failure,
including an email that is already registered.
"""

import argparse
import logging
import sys
from typing import List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from .core.database import SessionLocal, init_db
from .core.security import get_password_hash
from .models.doctor import Doctor

logger = logging.getLogger(__name__)

DEFAULT_DOCTOR = {
    "name": "Dr. Div Raj",
    "email": "dr.div@example.com",
    "password": "div1",
    "specialization": "Cardiology",
    "phone": "9876543210",
}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Add a doctor account")
    for field, default in DEFAULT_DOCTOR.items():
        parser.add_argument(f"--{field}", default=default)
    return parser.parse_args(argv)


def add_doctor(session_factory, **fields) -> Doctor:
    """Store one doctor, hashing the plain password first."""
    db = session_factory()
    try:
        doctor = Doctor(
            name=fields["name"],
            email=fields["email"],
            password=get_password_hash(fields["password"]),
            specialization=fields["specialization"],
            phone=fields["phone"],
        )
        db.add(doctor)
        db.commit()
        db.refresh(doctor)
        return doctor
    except SQLAlchemyError:
        db.rollback()
        raise
    finally:
        db.close()


def main(argv: Optional[List[str]] = None, session_factory=SessionLocal, bind=None) -> int:
    args = parse_args(argv)
    try:
        init_db(bind)
        doctor = add_doctor(session_factory, **vars(args))
    except IntegrityError:
        logger.error(f"Error adding doctor: {args.email} is already registered")
        return 1
    except Exception as e:
        logger.error(f"Error adding doctor: {str(e)}")
        return 1

    logger.info(f"Doctor added: {doctor!r}")
    return 0


def run():
    logging.basicConfig(level=logging.INFO)
    sys.exit(main())


if __name__ == "__main__":
    run()
