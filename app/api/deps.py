from typing import Generator
from fastapi import Depends
from sqlalchemy.orm import Session
from app.core.database import SessionLocal
from app.repositories.student import SqlAlchemyStudentRepository, StudentRepository
from app.services.student.student import StudentService


def get_db() -> Generator:
    """
    Dependency that provides a database session.
    The session is closed automatically once the request completes.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_student_repository(db: Session = Depends(get_db)) -> StudentRepository:
    return SqlAlchemyStudentRepository(db)


def get_student_service(
    repository: StudentRepository = Depends(get_student_repository)
) -> StudentService:
    return StudentService(repository)
