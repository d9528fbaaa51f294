"""CSV export of a student's grades."""
import csv
import io
import logging
from typing import Iterable, List, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.database import is_storable_id
from app.core.exceptions import DatabaseError, NotFoundException
from app.models.grade import Grade
from app.models.student import Student
from app.services.grade.average import format_average

logger = logging.getLogger(__name__)

CSV_HEADER = ["Student", "Subject", "Activity Score", "Quiz Score", "Exam Score", "Average"]

# (student_name, subject, activity_score, quiz_score, exam_score)
ExportRow = Tuple[str, str, int, int, int]


def fetch_export_rows(db: Session, student_id: int) -> List[ExportRow]:
    if not is_storable_id(student_id):
        return []
    try:
        rows = (
            db.query(
                Student.name,
                Grade.subject,
                Grade.activity_score,
                Grade.quiz_score,
                Grade.exam_score,
            )
            .join(Student, Grade.student_id == Student.id)
            .filter(Grade.student_id == student_id)
            .order_by(Grade.id)
            .all()
        )
    except SQLAlchemyError as e:
        logger.error(f"Export error: {e}")
        raise DatabaseError("Failed to export grades") from e
    return [tuple(row) for row in rows]


def build_grades_csv(rows: Iterable[ExportRow]) -> str:
    """
    Render the header plus one line per grade.

    Fields containing a comma, quote or line break are quoted,
    so names like "Doe, Jane" survive a round trip.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for student_name, subject, activity, quiz, exam in rows:
        writer.writerow([
            student_name,
            subject,
            activity,
            quiz,
            exam,
            format_average(activity, quiz, exam),
        ])
    # Lines are joined, not terminated: N grades give N + 1 lines
    return buffer.getvalue().rstrip("\n")


def export_grades_csv(db: Session, student_id: int) -> str:
    rows = fetch_export_rows(db, student_id)
    if not rows:
        raise NotFoundException("No grades found")
    logger.info(f"Exporting {len(rows)} grades for student {student_id}")
    return build_grades_csv(rows)


def export_filename(student_id: int) -> str:
    return f"student_{student_id}_grades.csv"
