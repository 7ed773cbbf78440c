import os

# Must be set before anything imports app.core.config
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["DB_RESET_ON_STARTUP"] = "true"
os.environ["SEED_ON_STARTUP"] = "true"

from itertools import count
from typing import Iterable, List

import pytest
from fastapi.testclient import TestClient

from app.core.database import SessionLocal, create_database_tables, drop_database_tables
from app.main import app
from app.models.student import Student
from app.repositories.student import StudentRepository


class InMemoryStudentRepository(StudentRepository):
    """Dict-backed repository with its own id sequence."""
    def __init__(self):
        self.rows = {}
        self._ids = count(1)

    def find_all(self) -> List[Student]:
        return list(self.rows.values())

    def save(self, student: Student) -> Student:
        if student.id is None:
            student.id = next(self._ids)
        self.rows[student.id] = student
        return student

    def save_all(self, students: Iterable[Student]) -> List[Student]:
        return [self.save(s) for s in students]

    def exists_by_id(self, student_id: int) -> bool:
        return student_id in self.rows

    def delete_by_id(self, student_id: int) -> None:
        del self.rows[student_id]


@pytest.fixture
def fake_repository():
    return InMemoryStudentRepository()


@pytest.fixture
def db_session():
    """A session on freshly created, empty tables."""
    drop_database_tables()
    create_database_tables()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    # Entering the context runs startup: tables are reset and seeded
    with TestClient(app) as c:
        yield c
