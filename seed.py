import logging

from sqlalchemy.exc import SQLAlchemyError

from app.core.database import SessionLocal, init_db
from app.models.grade import Grade
from app.models.student import Student

# Setup logging to see output
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def seed_data():
    """
    Seed a few students with grades for local development.
    """
    init_db()
    db = SessionLocal()
    try:
        # Skip when data already exists to avoid duplicates
        if db.query(Student).first():
            logger.info("Database already contains data. Skipping seed.")
            return

        logger.info("Seeding data...")

        students = [
            Student(name="Jane Doe", email="jane@example.com", grades=[
                Grade(subject="Math", activity_score=80, quiz_score=90, exam_score=70),
                Grade(subject="Science", activity_score=95, quiz_score=88, exam_score=91),
            ]),
            Student(name="John Smith", email="john@example.com", grades=[
                Grade(subject="Math", activity_score=72, quiz_score=65, exam_score=80),
            ]),
            Student(name="Test Student", email="test@example.com"),
        ]

        db.add_all(students)
        db.commit()

        logger.info("Data seeded successfully!")

    except SQLAlchemyError as e:
        logger.error(f"Error seeding data: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_data()
