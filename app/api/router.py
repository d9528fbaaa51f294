from fastapi import APIRouter
from app.api.endpoints import students
from app.api.endpoints import grades
from app.api.endpoints import export

api_router = APIRouter()

api_router.include_router(
    students.router,
    prefix="/students",
    tags=["students"]
)

api_router.include_router(
    grades.router,
    prefix="/grades",
    tags=["grades"]
)

api_router.include_router(
    export.router,
    prefix="/export",
    tags=["export"]
)
