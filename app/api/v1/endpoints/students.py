from fastapi import APIRouter, Depends, Path, Response, status
from typing import List
from app.api.deps import get_student_service
from app.services.student.student import StudentService
from app.schemas.student import Student, StudentCreate

router = APIRouter()

# Largest id a 64-bit integer column can hold
MAX_STUDENT_ID = 2**63 - 1


@router.get("/", response_model=List[Student])
def get_students(service: StudentService = Depends(get_student_service)):
    """
    List all students.

    `age` is computed from `dob` at response time.
    """
    return service.get_students()


@router.post("/", status_code=status.HTTP_200_OK, response_class=Response)
def register_new_student(
    student: StudentCreate,
    service: StudentService = Depends(get_student_service)
):
    """
    Create a new student

    Body:
    - **name**: student name
    - **email**: email address
    - **dob**: date of birth (YYYY-MM-DD)

    The id is assigned by the database; the response has no body.
    """
    service.add_new_student(student)
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{student_id}", status_code=status.HTTP_200_OK, response_class=Response)
def delete_student(
    student_id: int = Path(..., le=MAX_STUDENT_ID),
    service: StudentService = Depends(get_student_service)
):
    """
    Delete a student.

    Deleting an id that does not exist fails with a server error
    (`ILLEGAL_STATE`).
    """
    service.delete_student(student_id)
    return Response(status_code=status.HTTP_200_OK)
