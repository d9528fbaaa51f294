from typing import Annotated
from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from app.services.grade.average import average_score

# Presence is enforced by the field being required, type by strict mode
# (no bools or numeric strings), range by the bounds. A score of 0 is valid.
Score = Annotated[int, Field(strict=True, ge=0, le=100)]
StudentId = Annotated[int, Field(strict=True)]


class GradeBase(BaseModel):
    subject: str
    activity_score: Score
    quiz_score: Score
    exam_score: Score

    @field_validator("subject")
    @classmethod
    def subject_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Subject is required")
        return v


class GradeCreate(GradeBase):
    student_id: StudentId


class GradeUpdate(GradeBase):
    pass


class Grade(BaseModel):
    id: int
    student_id: int
    subject: str
    activity_score: int
    quiz_score: int
    exam_score: int

    model_config = ConfigDict(from_attributes=True)

    @computed_field
    @property
    def average(self) -> float:
        return average_score(self.activity_score, self.quiz_score, self.exam_score)


class GradeWithStudent(Grade):
    student_name: str


class GradeUpdated(BaseModel):
    id: int
    subject: str
    activity_score: int
    quiz_score: int
    exam_score: int
    message: str = "Grade updated successfully"
