from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from app.api.deps import get_db
from app.services.grade import grade as crud_grade
from app.schemas.grade import Grade, GradeCreate, GradeUpdate, GradeUpdated, GradeWithStudent
from app.schemas.common import MessageResponse

router = APIRouter()


@router.get("/{student_id}", response_model=List[GradeWithStudent])
def get_grades(student_id: int, db: Session = Depends(get_db)):
    """
    List a student's grades, each with the student's name and the derived average
    """
    return crud_grade.get_grades_for_student(db, student_id=student_id)


@router.post("", response_model=Grade)
def create_grade(grade: GradeCreate, db: Session = Depends(get_db)):
    """
    Add a grade

    - **student_id**: an existing student
    - **subject**: free-text label
    - **activity_score**, **quiz_score**, **exam_score**: integers in [0, 100]
    """
    return crud_grade.create_grade(db=db, grade=grade)


@router.put("/{grade_id}", response_model=GradeUpdated)
def update_grade(grade_id: int, grade: GradeUpdate, db: Session = Depends(get_db)):
    """
    Replace the subject and all three scores of a grade
    """
    return crud_grade.update_grade(db=db, grade_id=grade_id, grade=grade)


@router.delete("/{grade_id}", response_model=MessageResponse)
def delete_grade(grade_id: int, db: Session = Depends(get_db)):
    """
    Delete a grade; 404 when no grade has this id
    """
    crud_grade.delete_grade(db=db, grade_id=grade_id)
    return MessageResponse(message="Grade deleted successfully")
