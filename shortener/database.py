"""Auth Service — database setup."""

import logging
from datetime import datetime, timezone

from sqlalchemy import Column, String, create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from . import config

logger = logging.getLogger(__name__)

DATABASE_URL = config.DATABASE_URL

connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(DATABASE_URL, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


class DBUser(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True, index=True)
    user_name = Column(String(255), unique=True, nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    created_at = Column(String, default=lambda: datetime.now(timezone.utc).isoformat())


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_session() -> Session:
    """Returns a direct session for code running outside a request (startup, tests)."""
    return SessionLocal()


def init_db():
    Base.metadata.create_all(bind=engine)
    logger.info("[auth-service] Database initialized (%s)", engine.url.render_as_string(hide_password=True))


def close_db():
    engine.dispose()
    logger.info("[auth-service] Database connections closed")
