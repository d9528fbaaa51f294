"""
View state for the records client.

Every mutation is followed by a refetch of the affected list, so the state
always mirrors the store after an action completes.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple, TypeVar

from app.client.api_client import ClientError, StudentRecordsClient

logger = logging.getLogger(__name__)

T = TypeVar("T")

STUDENTS_VIEW = "students"
DASHBOARD_VIEW = "dashboard"

NO_STUDENT_SELECTED = "Please select a student first"


@dataclass
class ViewState:
    view: str = STUDENTS_VIEW
    students: List[Dict[str, Any]] = field(default_factory=list)
    selected_student_id: Optional[int] = None
    grades: List[Dict[str, Any]] = field(default_factory=list)
    editing_grade: Optional[Dict[str, Any]] = None
    search_term: str = ""
    subject_filter: str = ""
    loading: bool = False
    error: Optional[str] = None


@dataclass
class DashboardSummary:
    total_students: int
    average_grade: float
    subject_count: int


def grade_average(grade: Dict[str, Any]) -> float:
    return (grade["activity_score"] + grade["quiz_score"] + grade["exam_score"]) / 3


def calculate_average(grades: List[Dict[str, Any]]) -> float:
    """Mean of the per-grade averages; 0 for an empty list."""
    if not grades:
        return 0
    return sum(grade_average(g) for g in grades) / len(grades)


class StudentRecordsController:
    def __init__(self, client: StudentRecordsClient, state: Optional[ViewState] = None):
        self.client = client
        self.state = state or ViewState()

    # ------------------------------------------------------------------
    # plumbing
    # ------------------------------------------------------------------

    def _run(self, action: Callable[[], T], failure_message: Optional[str] = None) -> Optional[T]:
        """
        Run one API call with the loading flag raised.
        On failure the error is stored for display and None is returned.
        """
        self.state.loading = True
        try:
            result = action()
            self.state.error = None
            return result
        except ClientError as e:
            logger.error(f"API Error: {e.message}")
            self.state.error = failure_message or e.message
            return None
        finally:
            self.state.loading = False

    def dismiss_error(self):
        self.state.error = None

    def show(self, view: str):
        if view not in (STUDENTS_VIEW, DASHBOARD_VIEW):
            raise ValueError(f"Unknown view: {view}")
        self.state.view = view

    # ------------------------------------------------------------------
    # students
    # ------------------------------------------------------------------

    def fetch_students(self) -> bool:
        def action():
            self.client.health()
            return self.client.list_students()

        students = self._run(action)
        if students is None:
            return False
        self.state.students = students
        return True

    def add_student(self, name: str, email: str) -> bool:
        if self._run(lambda: self.client.create_student(name, email)) is None:
            return False
        return self.fetch_students()

    def update_student(self, student_id: int, name: str, email: str) -> bool:
        if self._run(lambda: self.client.update_student(student_id, name, email)) is None:
            return False
        return self.fetch_students()

    def delete_student(self, student_id: int) -> bool:
        if self._run(lambda: self.client.delete_student(student_id)) is None:
            return False
        if self.state.selected_student_id == student_id:
            self.state.selected_student_id = None
            self.state.grades = []
            self.state.editing_grade = None
        return self.fetch_students()

    def select_student(self, student_id: int) -> bool:
        self.state.selected_student_id = student_id
        self.state.editing_grade = None
        return self.fetch_grades(student_id)

    # ------------------------------------------------------------------
    # grades
    # ------------------------------------------------------------------

    def fetch_grades(self, student_id: Optional[int] = None) -> bool:
        student_id = student_id if student_id is not None else self.state.selected_student_id
        if student_id is None:
            return False

        grades = self._run(
            lambda: self.client.list_grades(student_id),
            "Unable to fetch grades. Please try again.",
        )
        if grades is None:
            self.state.grades = []
            return False
        self.state.grades = grades
        return True

    def add_grade(self, subject: str, activity_score: int, quiz_score: int, exam_score: int) -> bool:
        student_id = self.state.selected_student_id
        if student_id is None:
            self.state.error = NO_STUDENT_SELECTED
            return False

        created = self._run(
            lambda: self.client.create_grade(student_id, subject, activity_score, quiz_score, exam_score)
        )
        if created is None:
            return False
        return self.fetch_grades(student_id)

    def start_editing(self, grade: Dict[str, Any]):
        self.state.editing_grade = grade

    def cancel_editing(self):
        self.state.editing_grade = None

    def update_grade(self, subject: str, activity_score: int, quiz_score: int, exam_score: int) -> bool:
        grade = self.state.editing_grade
        student_id = self.state.selected_student_id
        if grade is None or student_id is None:
            return False

        updated = self._run(
            lambda: self.client.update_grade(grade["id"], subject.strip(), activity_score, quiz_score, exam_score),
            "Failed to update grade",
        )
        if updated is None:
            return False
        self.state.editing_grade = None
        return self.fetch_grades(student_id)

    def delete_grade(self, grade_id: int) -> bool:
        deleted = self._run(
            lambda: self.client.delete_grade(grade_id),
            "Failed to delete grade. Please try again.",
        )
        if deleted is None:
            return False
        if self.state.selected_student_id is not None:
            return self.fetch_grades()
        return True

    def export_grades(self) -> Optional[Tuple[str, bytes]]:
        """Return ``(filename, csv_bytes)`` for the selected student."""
        student_id = self.state.selected_student_id
        if student_id is None:
            self.state.error = NO_STUDENT_SELECTED
            return None

        content = self._run(lambda: self.client.export_grades(student_id), "Failed to export grades")
        if content is None:
            return None
        return f"grades_{student_id}.csv", content

    # ------------------------------------------------------------------
    # derived values
    # ------------------------------------------------------------------

    def filtered_students(self) -> List[Dict[str, Any]]:
        term = self.state.search_term.lower()
        return [
            s for s in self.state.students
            if term in s["name"].lower() or term in s["email"].lower()
        ]

    def filtered_grades(self) -> List[Dict[str, Any]]:
        term = self.state.subject_filter.lower()
        return [g for g in self.state.grades if term in g["subject"].lower()]

    def dashboard(self) -> DashboardSummary:
        # Scoped to the grades currently loaded, i.e. the selected student
        grades = self.state.grades
        return DashboardSummary(
            total_students=len(self.state.students),
            average_grade=calculate_average(grades),
            subject_count=len({g["subject"] for g in grades}),
        )
