# tests/test_client.py
import httpx
import pytest

from app.client.api_client import ClientError, StudentRecordsClient
from app.client.controller import (
    DASHBOARD_VIEW,
    NO_STUDENT_SELECTED,
    StudentRecordsController,
    calculate_average,
)


@pytest.fixture
def controller(client):
    return StudentRecordsController(StudentRecordsClient(http=client))


@pytest.fixture
def broken_controller(broken_client):
    return StudentRecordsController(StudentRecordsClient(http=broken_client))


def test_client_raises_server_message(client):
    api = StudentRecordsClient(http=client)
    with pytest.raises(ClientError) as excinfo:
        api.delete_grade(42)
    assert excinfo.value.status_code == 404
    assert excinfo.value.message == "Grade not found"


def test_client_network_failure():
    def refuse(request):
        raise httpx.ConnectError("Connection refused", request=request)

    http = httpx.Client(base_url="http://records.test", transport=httpx.MockTransport(refuse))
    with StudentRecordsClient(http=http) as api:
        with pytest.raises(ClientError) as excinfo:
            api.list_students()
    assert excinfo.value.status_code is None
    assert "Connection refused" in excinfo.value.message


def test_fetch_and_add_students(controller):
    assert controller.fetch_students()
    assert controller.state.students == []

    assert controller.add_student("Jane", "jane@x.com")
    assert [s["name"] for s in controller.state.students] == ["Jane"]
    assert controller.state.loading is False
    assert controller.state.error is None


def test_add_student_failure_sets_error(controller):
    assert not controller.add_student("Jane", "no-at-sign")
    assert controller.state.error == "Input validation failed"
    controller.dismiss_error()
    assert controller.state.error is None


def test_select_student_loads_grades(controller):
    controller.add_student("Jane", "jane@x.com")
    jane_id = controller.state.students[0]["id"]

    assert controller.select_student(jane_id)
    assert controller.state.grades == []

    assert controller.add_grade("Math", 80, 90, 70)
    assert controller.add_grade("Science", 60, 70, 80)
    assert [g["subject"] for g in controller.state.grades] == ["Math", "Science"]


def test_add_grade_requires_selection(controller):
    assert not controller.add_grade("Math", 80, 90, 70)
    assert controller.state.error == NO_STUDENT_SELECTED


def test_add_grade_out_of_range_keeps_server_message(controller):
    controller.add_student("Jane", "jane@x.com")
    controller.select_student(controller.state.students[0]["id"])

    assert not controller.add_grade("Math", 101, 90, 70)
    assert controller.state.error == "Input validation failed"
    assert controller.state.grades == []


def test_edit_and_delete_grade(controller):
    controller.add_student("Jane", "jane@x.com")
    controller.select_student(controller.state.students[0]["id"])
    controller.add_grade("Math", 80, 90, 70)

    controller.start_editing(controller.state.grades[0])
    assert controller.update_grade(" Algebra ", 0, 0, 0)
    assert controller.state.editing_grade is None
    assert controller.state.grades[0]["subject"] == "Algebra"
    assert controller.state.grades[0]["average"] == 0.0

    assert controller.delete_grade(controller.state.grades[0]["id"])
    assert controller.state.grades == []


def test_delete_missing_grade_sets_error(controller):
    assert not controller.delete_grade(999)
    assert controller.state.error == "Failed to delete grade. Please try again."


def test_delete_selected_student_clears_selection(controller):
    controller.add_student("Jane", "jane@x.com")
    jane_id = controller.state.students[0]["id"]
    controller.select_student(jane_id)
    controller.add_grade("Math", 80, 90, 70)

    assert controller.delete_student(jane_id)
    assert controller.state.selected_student_id is None
    assert controller.state.grades == []
    assert controller.state.students == []


def test_update_student_refetches(controller):
    controller.add_student("Jane", "jane@x.com")
    jane_id = controller.state.students[0]["id"]

    assert controller.update_student(jane_id, "Janet", "janet@x.com")
    assert controller.state.students[0]["name"] == "Janet"


def test_export_grades(controller):
    assert controller.export_grades() is None
    assert controller.state.error == NO_STUDENT_SELECTED

    controller.add_student("Jane", "jane@x.com")
    jane_id = controller.state.students[0]["id"]
    controller.select_student(jane_id)

    assert controller.export_grades() is None
    assert controller.state.error == "Failed to export grades"

    controller.add_grade("Math", 80, 90, 70)
    filename, content = controller.export_grades()
    assert filename == f"grades_{jane_id}.csv"
    assert content.decode().endswith("Jane,Math,80,90,70,80.00")


def test_filters(controller):
    controller.add_student("Jane Doe", "jane@x.com")
    controller.add_student("Bob", "bob@school.org")
    controller.select_student(controller.state.students[0]["id"])
    controller.add_grade("Math", 80, 90, 70)
    controller.add_grade("Applied Mathematics", 60, 60, 60)
    controller.add_grade("History", 50, 50, 50)

    controller.state.search_term = "SCHOOL"
    assert [s["name"] for s in controller.filtered_students()] == ["Bob"]
    controller.state.search_term = "jane"
    assert [s["name"] for s in controller.filtered_students()] == ["Jane Doe"]
    controller.state.search_term = ""
    assert len(controller.filtered_students()) == 2

    controller.state.subject_filter = "math"
    assert [g["subject"] for g in controller.filtered_grades()] == ["Math", "Applied Mathematics"]


def test_dashboard_uses_loaded_grades(controller):
    controller.add_student("Jane", "jane@x.com")
    controller.add_student("Bob", "bob@x.com")
    jane_id, bob_id = (s["id"] for s in controller.state.students)

    controller.select_student(bob_id)
    controller.add_grade("Art", 10, 10, 10)

    controller.select_student(jane_id)
    controller.add_grade("Math", 80, 90, 70)
    controller.add_grade("Math", 60, 60, 60)
    controller.show(DASHBOARD_VIEW)

    summary = controller.dashboard()
    assert controller.state.view == DASHBOARD_VIEW
    assert summary.total_students == 2
    assert summary.average_grade == pytest.approx(70.0)
    assert summary.subject_count == 1


def test_unknown_view(controller):
    with pytest.raises(ValueError):
        controller.show("reports")


def test_calculate_average_empty():
    assert calculate_average([]) == 0


def test_fetch_failure_sets_error(broken_controller):
    assert not broken_controller.fetch_students()
    assert broken_controller.state.error == "Database error"
    assert broken_controller.state.loading is False


def test_fetch_grades_failure_clears_list(broken_controller):
    assert not broken_controller.select_student(1)
    assert broken_controller.state.grades == []
    assert broken_controller.state.error == "Unable to fetch grades. Please try again."
