"""Persistence operations for `Student` records.

`StudentRepository` is the port the service layer depends on; the
SQLAlchemy adapter below is the implementation wired in by the API.
Anything that implements the five methods (an in-memory fake in tests,
for instance) can stand in for it.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List
from sqlalchemy.orm import Session
from app.models.student import Student


class StudentRepository(ABC):
    @abstractmethod
    def find_all(self) -> List[Student]:
        """Return every stored student."""

    @abstractmethod
    def save(self, student: Student) -> Student:
        """Insert `student`; the store assigns its id."""

    @abstractmethod
    def save_all(self, students: Iterable[Student]) -> List[Student]:
        """Insert several students at once."""

    @abstractmethod
    def exists_by_id(self, student_id: int) -> bool:
        ...

    @abstractmethod
    def delete_by_id(self, student_id: int) -> None:
        ...


class SqlAlchemyStudentRepository(StudentRepository):
    """`StudentRepository` backed by a SQLAlchemy session. Every write commits."""
    def __init__(self, session: Session):
        self.session = session

    def find_all(self) -> List[Student]:
        return self.session.query(Student).order_by(Student.id).all()

    def save(self, student: Student) -> Student:
        self.session.add(student)
        self.session.commit()
        self.session.refresh(student)
        return student

    def save_all(self, students: Iterable[Student]) -> List[Student]:
        students = list(students)
        self.session.add_all(students)
        self.session.commit()
        for s in students:
            self.session.refresh(s)
        return students

    def exists_by_id(self, student_id: int) -> bool:
        return self.session.query(Student.id).filter(Student.id == student_id).first() is not None

    def delete_by_id(self, student_id: int) -> None:
        self.session.query(Student).filter(Student.id == student_id).delete()
        self.session.commit()
