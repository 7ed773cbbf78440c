import logging
from typing import List
from app.core.exceptions import IllegalStateException
from app.models.student import Student
from app.repositories.student import StudentRepository
from app.schemas.student import StudentCreate

logger = logging.getLogger(__name__)


class StudentService:
    """Student use cases on top of a `StudentRepository`."""
    def __init__(self, repository: StudentRepository):
        self.repository = repository

    def get_students(self) -> List[Student]:
        """List all students"""
        return self.repository.find_all()

    def add_new_student(self, student: StudentCreate) -> Student:
        """Create a new student; the id is assigned by the store"""
        db_student = Student(
            name=student.name,
            email=student.email,
            dob=student.dob
        )
        saved = self.repository.save(db_student)
        logger.info(f"Created student id={saved.id}")
        return saved

    def delete_student(self, student_id: int) -> None:
        """
        Delete a student by id.

        Raises IllegalStateException when no student has that id; the
        store is not touched in that case.
        """
        if not self.repository.exists_by_id(student_id):
            raise IllegalStateException(
                f"student with id {student_id} does not exist",
                details={"student_id": student_id}
            )
        self.repository.delete_by_id(student_id)
        logger.info(f"Deleted student id={student_id}")
