from datetime import datetime, timezone
from typing import Any, Dict, Iterator, Optional
from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

Base = declarative_base()

def utcnow() -> datetime:
    return datetime.now(timezone.utc)

class Database:
    """Owns the engine and session factory for one running application"""

    def __init__(self, database_url: str, engine_options: Optional[Dict[str, Any]] = None):
        self.engine: Engine = create_engine(database_url, **(engine_options or {}))
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def create_all(self) -> None:
        """Create all tables (idempotent)"""
        from cinecircle import models  # noqa: F401  ensure models are registered
        Base.metadata.create_all(bind=self.engine)

    def drop_all(self) -> None:
        Base.metadata.drop_all(bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def dispose(self) -> None:
        self.engine.dispose()

def get_db(request: Request) -> Iterator[Session]:
    """Dependency to get database session"""
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
