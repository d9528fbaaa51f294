from fastapi import APIRouter, Depends
from fastapi.responses import Response
from sqlalchemy.orm import Session

from app.api.deps import get_db
from app.services.export import csv_export

router = APIRouter()


@router.get("/grades/{student_id}", summary="Export a student's grades as CSV")
def export_grades(student_id: int, db: Session = Depends(get_db)):
    """
    Download a CSV attachment; 404 when the student has no grades.
    """
    content = csv_export.export_grades_csv(db, student_id=student_id)
    return Response(
        content=content,
        media_type="text/csv",
        headers={
            "Content-Disposition": f"attachment; filename={csv_export.export_filename(student_id)}",
            "Cache-Control": "no-cache",
        },
    )
