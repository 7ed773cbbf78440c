from datetime import date
from typing import Optional
from sqlalchemy import Column, Date, Integer, Sequence, String
from app.core.database import Base


def calculate_age(date_of_birth: date, today: Optional[date] = None) -> int:
    """Whole years between date_of_birth and today (defaults to the current date)."""
    today = today or date.today()
    years = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        years -= 1
    return years


class Student(Base):
    __tablename__ = "students"
    # SQLite reuses the highest rowid after a delete unless AUTOINCREMENT is on
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(
        Integer,
        Sequence("student_sequence", start=1, increment=1),
        primary_key=True,
        index=True
    )
    name = Column(String)
    email = Column(String)
    dob = Column(Date)

    @property
    def age(self) -> int:
        """Derived from dob on every read, never stored."""
        return calculate_age(self.dob)

    def __repr__(self) -> str:
        return f"<Student id={self.id} name={self.name!r} email={self.email!r} dob={self.dob}>"
