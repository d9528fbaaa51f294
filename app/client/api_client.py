import logging
from typing import Any, Dict, List, Optional

import httpx

from app.core.config import settings

logger = logging.getLogger(__name__)


class ClientError(Exception):
    """A request failed; ``message`` is what the user should see."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class StudentRecordsClient:
    """
    Thin wrapper over the records API.

    Any ``httpx.Client`` with a base URL can be passed in (a FastAPI
    ``TestClient`` works too); otherwise one is created for ``base_url``.
    No timeouts or retries: a failure surfaces immediately as ``ClientError``.
    """

    def __init__(self, base_url: Optional[str] = None, http: Optional[httpx.Client] = None):
        self.base_url = (base_url or settings.CLIENT_API_URL).rstrip("/")
        self._http = http or httpx.Client(base_url=self.base_url, timeout=None)

    def close(self):
        self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    # ------------------------------------------------------------------
    # transport
    # ------------------------------------------------------------------

    def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            response = self._http.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"API Error: {method} {path}: {e}")
            raise ClientError(str(e)) from e

        if response.is_error:
            raise ClientError(self._error_message(response), response.status_code)
        return response

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text or f"HTTP {response.status_code}"
        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict):
            return error.get("message") or f"HTTP {response.status_code}"
        if isinstance(error, str):
            return error
        return f"HTTP {response.status_code}"

    # ------------------------------------------------------------------
    # endpoints
    # ------------------------------------------------------------------

    def health(self) -> Dict[str, Any]:
        return self._request("GET", "/").json()

    def list_students(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/students").json()

    def create_student(self, name: str, email: str) -> Dict[str, Any]:
        return self._request("POST", "/api/students", json={"name": name, "email": email}).json()

    def update_student(self, student_id: int, name: str, email: str) -> Dict[str, Any]:
        return self._request(
            "PUT", f"/api/students/{student_id}", json={"name": name, "email": email}
        ).json()

    def delete_student(self, student_id: int) -> Dict[str, Any]:
        return self._request("DELETE", f"/api/students/{student_id}").json()

    def list_grades(self, student_id: int) -> List[Dict[str, Any]]:
        return self._request("GET", f"/api/grades/{student_id}").json()

    def create_grade(
        self,
        student_id: int,
        subject: str,
        activity_score: int,
        quiz_score: int,
        exam_score: int,
    ) -> Dict[str, Any]:
        payload = {
            "student_id": student_id,
            "subject": subject,
            "activity_score": activity_score,
            "quiz_score": quiz_score,
            "exam_score": exam_score,
        }
        return self._request("POST", "/api/grades", json=payload).json()

    def update_grade(
        self,
        grade_id: int,
        subject: str,
        activity_score: int,
        quiz_score: int,
        exam_score: int,
    ) -> Dict[str, Any]:
        payload = {
            "subject": subject,
            "activity_score": activity_score,
            "quiz_score": quiz_score,
            "exam_score": exam_score,
        }
        return self._request("PUT", f"/api/grades/{grade_id}", json=payload).json()

    def delete_grade(self, grade_id: int) -> Dict[str, Any]:
        return self._request("DELETE", f"/api/grades/{grade_id}").json()

    def export_grades(self, student_id: int) -> bytes:
        return self._request("GET", f"/api/export/grades/{student_id}").content
