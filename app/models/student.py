from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from app.core.database import Base


class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)

    # Grade rows are removed by the store's ON DELETE CASCADE, not by the ORM
    grades = relationship(
        "Grade",
        back_populates="student",
        passive_deletes=True
    )
