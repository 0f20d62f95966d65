# created by emeday 2025 - hex ports del servicio de usuarios
from abc import ABC, abstractmethod
from typing import List, Optional
from app.domain.models import User

class UserRepository(ABC):
    @abstractmethod
    def list_all(self) -> List[User]:
        raise NotImplementedError()

    @abstractmethod
    def find_by_id(self, user_id: str) -> Optional[User]:
        raise NotImplementedError()

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError()

    @abstractmethod
    def insert(self, user: User) -> Optional[User]:
        """Persiste un usuario nuevo y devuelve el registro guardado."""
        raise NotImplementedError()

    @abstractmethod
    def save(self, user: User) -> User:
        raise NotImplementedError()

    @abstractmethod
    def delete(self, user_id: str) -> bool:
        raise NotImplementedError()

class PasswordHasher(ABC):
    @abstractmethod
    def hash(self, plain: str) -> str:
        raise NotImplementedError()

    @abstractmethod
    def verify(self, plain: str, hashed: str) -> bool:
        raise NotImplementedError()
