import logging
from datetime import date
from typing import List
from app.core.database import SessionLocal
from app.models.student import Student
from app.repositories.student import SqlAlchemyStudentRepository, StudentRepository

logger = logging.getLogger(__name__)


def initial_students() -> List[Student]:
    return [
        Student(
            name="Mariam",
            email="mariam.jamal@gmail.com",
            dob=date(2000, 1, 5)
        ),
        Student(
            name="Alex",
            email="alex.jamal@gmail.com",
            dob=date(2004, 1, 5)
        ),
    ]


def seed_students(repository: StudentRepository) -> List[Student]:
    """
    Insert the initial students.

    There is no "already seeded" check: each call adds the rows again,
    so a persistent database collects duplicates across restarts unless
    DB_RESET_ON_STARTUP is set.
    """
    logger.info("Seeding data...")
    students = repository.save_all(initial_students())
    logger.info(f"Seeded {len(students)} students")
    return students


def seed_data() -> List[Student]:
    """
    Seed the database in a session of its own.
    Rolls back and re-raises on failure so startup stops.
    """
    db = SessionLocal()
    try:
        return seed_students(SqlAlchemyStudentRepository(db))
    except Exception as e:
        logger.error(f"Error seeding data: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    from app.core.config import settings
    from app.core.database import create_database_tables
    from app.core.logging import setup_logging

    setup_logging(settings.LOG_LEVEL)
    create_database_tables()
    seed_data()
