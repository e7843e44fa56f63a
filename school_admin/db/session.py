"""Database session management."""
from typing import Any, Dict, Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from school_admin.config.settings import settings


def _engine_options() -> Dict[str, Any]:
    options: Dict[str, Any] = {
        "pool_pre_ping": True,
        "echo": settings.DB_ECHO or settings.LOG_SQL_QUERIES,
    }
    connect_args = dict(settings.DB_CONNECT_ARGS)
    if settings.is_sqlite():
        # SQLite connections are shared across the threadpool FastAPI runs sync endpoints in
        connect_args.setdefault("check_same_thread", False)
    else:
        options["pool_size"] = settings.DB_POOL_SIZE
        options["max_overflow"] = settings.DB_POOL_OVERFLOW
    options["connect_args"] = connect_args
    return options


# Create database engine using the get_database_url method
engine = create_engine(settings.get_database_url(), **_engine_options())

# Create SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency function that yields a database session.

    Usage in FastAPI endpoints:
        @router.get("/items")
        def read_items(db: Session = Depends(get_db)):
            ...
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
