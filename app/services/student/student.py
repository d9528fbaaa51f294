import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.database import is_storable_id
from app.core.exceptions import DatabaseError
from app.models.student import Student
from app.schemas.student import StudentCreate, StudentUpdate

logger = logging.getLogger(__name__)

DEMO_STUDENT_NAME = "Test Student"
DEMO_STUDENT_EMAIL = "test@example.com"


def get_student(db: Session, student_id: int) -> Optional[Student]:
    """Fetch one student by ID"""
    if not is_storable_id(student_id):
        return None
    return db.query(Student).filter(Student.id == student_id).first()


def get_students(db: Session) -> List[Student]:
    """Fetch every student"""
    try:
        students = db.query(Student).all()
    except SQLAlchemyError as e:
        logger.error(f"Database error while listing students: {e}")
        raise DatabaseError("Database error") from e
    logger.info(f"Found {len(students)} students")
    return students


def create_student(db: Session, student: StudentCreate) -> Student:
    """Create a student and return it with its assigned id"""
    db_student = Student(name=student.name, email=student.email)
    try:
        db.add(db_student)
        db.commit()
        db.refresh(db_student)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error adding student: {e}")
        raise DatabaseError("Failed to add student") from e
    logger.info(f"Created student {db_student.id}")
    return db_student


def update_student(db: Session, student_id: int, student: StudentUpdate) -> int:
    """
    Replace name and email of a student.

    A missing id is not an error: the update simply touches no rows.
    Returns the number of rows updated.
    """
    if not is_storable_id(student_id):
        return 0
    try:
        updated = (
            db.query(Student)
            .filter(Student.id == student_id)
            .update(
                {Student.name: student.name, Student.email: student.email},
                synchronize_session=False
            )
        )
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error updating student {student_id}: {e}")
        raise DatabaseError("Failed to update student") from e
    logger.info(f"Updated student {student_id} ({updated} row(s))")
    return updated


def delete_student(db: Session, student_id: int) -> int:
    """
    Delete a student. Its grades go with it through ON DELETE CASCADE.

    A missing id is not an error. Returns the number of rows deleted.
    """
    if not is_storable_id(student_id):
        return 0
    try:
        deleted = (
            db.query(Student)
            .filter(Student.id == student_id)
            .delete(synchronize_session=False)
        )
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error deleting student {student_id}: {e}")
        raise DatabaseError("Failed to delete student") from e
    logger.info(f"Deleted student {student_id} ({deleted} row(s))")
    return deleted


def seed_demo_student(db: Session) -> bool:
    """Insert the demo student when the table is empty. Returns True if a row was added."""
    if db.query(Student).first():
        logger.info("Students table already contains data. Skipping seed.")
        return False

    db.add(Student(name=DEMO_STUDENT_NAME, email=DEMO_STUDENT_EMAIL))
    db.commit()
    logger.info("Demo student seeded")
    return True
