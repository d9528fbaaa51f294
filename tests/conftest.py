# tests/conftest.py
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from app.api.deps import get_db
from app.core.database import build_engine, create_database_tables, drop_database_tables
from app.main import app


@pytest.fixture
def engine():
    """Fresh in-memory database with the full schema."""
    test_engine = build_engine("sqlite://")
    create_database_tables(test_engine)
    yield test_engine
    drop_database_tables(test_engine)
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


def _override_db(factory):
    def override():
        session = factory()
        try:
            yield session
        finally:
            session.close()
    return override


@pytest.fixture
def client(session_factory):
    """API client backed by the in-memory database."""
    app.dependency_overrides[get_db] = _override_db(session_factory)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def broken_client():
    """API client whose database has no tables, so every statement fails."""
    bare_engine = build_engine("sqlite://")
    factory = sessionmaker(bind=bare_engine)
    app.dependency_overrides[get_db] = _override_db(factory)
    yield TestClient(app)
    app.dependency_overrides.clear()
    bare_engine.dispose()


@pytest.fixture
def jane(client):
    """A created student, as returned by the API."""
    response = client.post("/api/students", json={"name": "Jane", "email": "jane@x.com"})
    assert response.status_code == 200
    return response.json()


@pytest.fixture
def grade_payload():
    """Builds a create-grade body; defaults to Math 80/90/70."""
    def build(student_id, subject="Math", activity=80, quiz=90, exam=70):
        return {
            "student_id": student_id,
            "subject": subject,
            "activity_score": activity,
            "quiz_score": quiz,
            "exam_score": exam,
        }
    return build
