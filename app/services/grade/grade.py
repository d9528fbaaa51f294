import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.database import is_storable_id
from app.core.exceptions import BadRequestException, DatabaseError, NotFoundException
from app.models.grade import Grade
from app.models.student import Student
from app.schemas.grade import GradeCreate, GradeUpdate, GradeUpdated, GradeWithStudent
from app.services.student.student import get_student

logger = logging.getLogger(__name__)


def get_grades_for_student(db: Session, student_id: int) -> List[GradeWithStudent]:
    """
    Fetch a student's grades joined with the student's name.
    An unknown student or one without grades yields an empty list.
    """
    logger.info(f"Fetching grades for student: {student_id}")
    if not is_storable_id(student_id):
        return []
    try:
        rows = (
            db.query(Grade, Student.name)
            .join(Student, Grade.student_id == Student.id)
            .filter(Grade.student_id == student_id)
            .order_by(Grade.id)
            .all()
        )
    except SQLAlchemyError as e:
        logger.error(f"Database error while fetching grades: {e}")
        raise DatabaseError("Failed to fetch grades") from e

    logger.info(f"Found {len(rows)} grades")
    return [
        GradeWithStudent(
            id=grade.id,
            student_id=grade.student_id,
            subject=grade.subject,
            activity_score=grade.activity_score,
            quiz_score=grade.quiz_score,
            exam_score=grade.exam_score,
            student_name=student_name,
        )
        for grade, student_name in rows
    ]


def create_grade(db: Session, grade: GradeCreate) -> Grade:
    """Add a grade for an existing student"""
    logger.info(f"Adding grade: {grade.model_dump()}")
    try:
        student = get_student(db, grade.student_id)
    except SQLAlchemyError as e:
        logger.error(f"Error adding grade: {e}")
        raise DatabaseError("Failed to add grade") from e

    if student is None:
        raise BadRequestException(
            f"Student {grade.student_id} does not exist",
            details={"student_id": grade.student_id}
        )

    db_grade = Grade(
        student_id=grade.student_id,
        subject=grade.subject,
        activity_score=grade.activity_score,
        quiz_score=grade.quiz_score,
        exam_score=grade.exam_score,
    )
    try:
        db.add(db_grade)
        db.commit()
        db.refresh(db_grade)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error adding grade: {e}")
        raise DatabaseError("Failed to add grade") from e
    return db_grade


def update_grade(db: Session, grade_id: int, grade: GradeUpdate) -> GradeUpdated:
    """
    Replace subject and all three scores of a grade.
    Like student updates, a missing id touches no rows and is not an error.
    """
    if not is_storable_id(grade_id):
        return GradeUpdated(id=grade_id, **grade.model_dump())

    try:
        updated = (
            db.query(Grade)
            .filter(Grade.id == grade_id)
            .update(
                {
                    Grade.subject: grade.subject,
                    Grade.activity_score: grade.activity_score,
                    Grade.quiz_score: grade.quiz_score,
                    Grade.exam_score: grade.exam_score,
                },
                synchronize_session=False
            )
        )
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Update error: {e}")
        raise DatabaseError("Failed to update grade") from e

    logger.info(f"Updated grade {grade_id} ({updated} row(s))")
    return GradeUpdated(id=grade_id, **grade.model_dump())


def delete_grade(db: Session, grade_id: int) -> None:
    """Delete exactly one grade; zero affected rows means it did not exist."""
    logger.info(f"Attempting to delete grade: {grade_id}")
    if not is_storable_id(grade_id):
        raise NotFoundException("Grade not found")
    try:
        deleted = (
            db.query(Grade)
            .filter(Grade.id == grade_id)
            .delete(synchronize_session=False)
        )
        if deleted == 0:
            db.rollback()
            raise NotFoundException("Grade not found")
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Delete error: {e}")
        raise DatabaseError("Failed to delete grade") from e
    logger.info("Grade deleted successfully")
