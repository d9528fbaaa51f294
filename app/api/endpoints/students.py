from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from app.api.deps import get_db
from app.services.student import student as crud_student
from app.schemas.common import MessageResponse
from app.schemas.student import Student, StudentCreate, StudentUpdate

router = APIRouter()


@router.get("", response_model=List[Student])
def get_students(db: Session = Depends(get_db)):
    """
    List every student
    """
    return crud_student.get_students(db)


@router.post("", response_model=Student)
def create_student(
    student: StudentCreate,
    db: Session = Depends(get_db)
):
    """
    Create a student

    - **name**: student name (required, non-empty)
    - **email**: email address (required, must contain "@")
    """
    return crud_student.create_student(db=db, student=student)


@router.put("/{student_id}", response_model=MessageResponse)
def update_student(
    student_id: int,
    student: StudentUpdate,
    db: Session = Depends(get_db)
):
    """
    Replace a student's name and email. Unknown ids are a no-op.
    """
    crud_student.update_student(db=db, student_id=student_id, student=student)
    return MessageResponse(message="Student updated")


@router.delete("/{student_id}", response_model=MessageResponse)
def delete_student(
    student_id: int,
    db: Session = Depends(get_db)
):
    """
    Delete a student together with all of their grades. Unknown ids are a no-op.
    """
    crud_student.delete_student(db=db, student_id=student_id)
    return MessageResponse(message="Student deleted")
