from datetime import date
from pydantic import BaseModel, ConfigDict


class StudentBase(BaseModel):
    name: str
    email: str
    dob: date


class StudentCreate(StudentBase):
    """Request body for a new student; an `id` sent by the client is ignored."""
    pass


class Student(StudentBase):
    id: int
    age: int

    model_config = ConfigDict(from_attributes=True)
