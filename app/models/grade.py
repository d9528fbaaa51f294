from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from app.core.database import Base


class Grade(Base):
    __tablename__ = "grades"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    student_id = Column(
        Integer,
        ForeignKey("students.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    subject = Column(String, nullable=False)
    activity_score = Column(Integer, nullable=False)
    quiz_score = Column(Integer, nullable=False)
    exam_score = Column(Integer, nullable=False)

    student = relationship("Student", back_populates="grades")
