"""Database initialization script."""

from todo_directory.app.core.services.database.db_manage import DbManageService
from todo_directory.app.core.services.database.db_session import DbSessionService


def init_db() -> None:
    """Create all database tables."""
    db_session_service = DbSessionService()
    try:
        DbManageService(db_session_service.engine).create_all()
    finally:
        db_session_service.dispose()


if __name__ == "__main__":
    init_db()
