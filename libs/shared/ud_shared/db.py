"""
ud_shared.db
------------
SQLAlchemy Engine / Session helpers.
Synopsis: created by emeday 2025
"""
from contextlib import contextmanager
from typing import Iterator
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from .config import Settings

def build_engine(settings: Settings) -> Engine:
    """Crea un Engine de SQLAlchemy desde Settings"""
    url = settings.DATABASE_URL
    if url.startswith("sqlite"):
        # sqlite: FastAPI atiende endpoints sync en un threadpool
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(url, pool_pre_ping=True, pool_recycle=300)

def make_session_factory(engine: Engine) -> sessionmaker:
    """Crea un sessionmaker desde un Engine"""
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)

@contextmanager
def session_scope(session_factory: sessionmaker) -> Iterator[Session]:
    """
    Context manager para sesiones de SQLAlchemy.
    Recibe el sessionmaker del contenedor para reutilizar el pool del Engine.

    Uso:
        with session_scope(factory) as session:
            result = session.execute(...)
    """
    session = session_factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
