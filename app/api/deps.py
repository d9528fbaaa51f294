from typing import Generator

from sqlalchemy.orm import Session

from app.core.database import SessionLocal


def get_db() -> Generator[Session, None, None]:
    """
    Dependency that provides a database session.
    The session is closed automatically once the request completes.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
