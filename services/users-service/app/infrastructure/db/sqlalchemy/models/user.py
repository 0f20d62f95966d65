# services/users-service/app/infrastructure/db/sqlalchemy/models/user.py
from __future__ import annotations
from datetime import datetime
from typing import Optional
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy import String, DateTime, UniqueConstraint
from sqlalchemy.engine import Engine

class Base(DeclarativeBase):
    pass

class UserRow(Base):
    __tablename__ = "users"
    # la unicidad real del email la garantiza la DB, no el chequeo previo
    __table_args__ = (UniqueConstraint("email", name="uq_users_email"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    first_name: Mapped[str] = mapped_column(String(120), nullable=False)
    last_name: Mapped[str] = mapped_column(String(120), nullable=False)
    mobile_number: Mapped[str] = mapped_column(String(40), nullable=False)
    email: Mapped[str] = mapped_column(String(200), nullable=False)
    image: Mapped[str] = mapped_column(String(500), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    updated_at: Mapped[Optional[datetime]] = mapped_column(DateTime)

def create_schema(engine: Engine) -> None:
    """Crea las tablas del servicio si no existen."""
    Base.metadata.create_all(engine)
