# repositories: SQL crudo con text() + session_scope, como el resto de servicios
from datetime import datetime, timezone
from typing import Any, List, Mapping, Optional
from sqlalchemy import text, bindparam, String, DateTime
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError
from ud_shared.config import Settings
from ud_shared.db import build_engine, make_session_factory, session_scope
from app.domain.errors import ConflictError
from app.domain.models import User
from app.domain.ports import UserRepository

_COLUMNS = dict(
    id=String, first_name=String, last_name=String, mobile_number=String,
    email=String, image=String, password_hash=String,
    created_at=DateTime, updated_at=DateTime,
)
_SELECT = """
    SELECT id, first_name, last_name, mobile_number, email, image,
           password_hash, created_at, updated_at
      FROM users
"""

SQL_LIST = text(_SELECT + " ORDER BY created_at, id").columns(**_COLUMNS)
SQL_BY_ID = text(_SELECT + " WHERE id = :id").columns(**_COLUMNS)
SQL_BY_EMAIL = text(_SELECT + " WHERE email = :email").columns(**_COLUMNS)
SQL_INSERT = text("""
    INSERT INTO users
        (id, first_name, last_name, mobile_number, email, image,
         password_hash, created_at, updated_at)
    VALUES (:id, :first_name, :last_name, :mobile_number, :email, :image,
            :password_hash, :created_at, :updated_at)
""").bindparams(bindparam("created_at", type_=DateTime), bindparam("updated_at", type_=DateTime))
SQL_UPDATE = text("""
    UPDATE users
       SET first_name = :first_name,
           last_name = :last_name,
           mobile_number = :mobile_number,
           email = :email,
           image = :image,
           password_hash = :password_hash,
           updated_at = :updated_at
     WHERE id = :id
""").bindparams(bindparam("updated_at", type_=DateTime))
SQL_DELETE = text("DELETE FROM users WHERE id = :id")

def _utcnow() -> datetime:
    # columnas DateTime sin zona: se guarda UTC naive
    return datetime.now(timezone.utc).replace(tzinfo=None)

def _to_user(row: Mapping[str, Any]) -> User:
    return User(
        id=str(row["id"]),
        first_name=row["first_name"],
        last_name=row["last_name"],
        mobile_number=row["mobile_number"],
        email=row["email"],
        image=row["image"],
        password_hash=row["password_hash"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )

def _params(user: User) -> dict:
    return {
        "id": user.id,
        "first_name": user.first_name,
        "last_name": user.last_name,
        "mobile_number": user.mobile_number,
        "email": user.email,
        "image": user.image,
        "password_hash": user.password_hash,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }

class SqlUserRepository(UserRepository):
    def __init__(self, settings: Settings, engine: Optional[Engine] = None):
        self.settings = settings
        self.engine = engine or build_engine(settings)
        self._sessions = make_session_factory(self.engine)

    def list_all(self) -> List[User]:
        with session_scope(self._sessions) as s:
            rows = s.execute(SQL_LIST).mappings().all()
        return [_to_user(r) for r in rows]

    def find_by_id(self, user_id: str) -> Optional[User]:
        with session_scope(self._sessions) as s:
            row = s.execute(SQL_BY_ID, {"id": user_id}).mappings().first()
        return _to_user(row) if row else None

    def find_by_email(self, email: str) -> Optional[User]:
        with session_scope(self._sessions) as s:
            row = s.execute(SQL_BY_EMAIL, {"email": email}).mappings().first()
        return _to_user(row) if row else None

    def insert(self, user: User) -> Optional[User]:
        now = _utcnow()
        user.created_at = user.created_at or now
        user.updated_at = user.updated_at or now
        try:
            with session_scope(self._sessions) as s:
                s.execute(SQL_INSERT, _params(user))
        except IntegrityError:
            # otra request insertó el mismo email entre el chequeo y el INSERT
            raise ConflictError("Duplicate user")
        return self.find_by_id(user.id)

    def save(self, user: User) -> User:
        user.updated_at = _utcnow()
        params = _params(user)
        params.pop("created_at")
        try:
            with session_scope(self._sessions) as s:
                s.execute(SQL_UPDATE, params)
        except IntegrityError:
            raise ConflictError("Duplicate user")
        return user

    def delete(self, user_id: str) -> bool:
        with session_scope(self._sessions) as s:
            res = s.execute(SQL_DELETE, {"id": user_id})
            deleted = res.rowcount > 0
        return deleted
