# created by emeday 2025
"""
Application Layer - Use Cases
Users Service
Arquitectura Hexagonal - Application Layer

Cada caso de uso recibe un comando explícito, valida presencia de campos,
consulta el repositorio (puerto) y devuelve entidades de dominio.
Los errores de negocio salen como app.domain.errors.*
"""
import uuid
from dataclasses import dataclass
from typing import List, Optional
from ud_shared.logger import get_logger
from app.domain.errors import ValidationError, ConflictError, NotFoundError, PersistenceError
from app.domain.models import User
from app.domain.ports import UserRepository, PasswordHasher

log = get_logger(__name__, service_name="users-service")

def _missing(*values: Optional[str]) -> bool:
    # None, "" y "   " cuentan como ausentes
    return any(v is None or not str(v).strip() for v in values)

@dataclass
class CreateUserCommand:
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    mobile_number: Optional[str] = None
    email: Optional[str] = None
    image: Optional[str] = None
    password: Optional[str] = None

@dataclass
class UpdateUserCommand:
    # requeridos: id + todo menos password
    id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    mobile_number: Optional[str] = None
    email: Optional[str] = None
    image: Optional[str] = None
    # opcional: solo se re-hashea si viene
    password: Optional[str] = None

@dataclass
class DeleteUserCommand:
    id: Optional[str] = None

class ListUsers:
    def __init__(self, repo: UserRepository):
        self.repo = repo

    def execute(self) -> List[User]:
        users = self.repo.list_all()
        if not users:
            raise NotFoundError("No users found")
        return users

class CreateUser:
    def __init__(self, repo: UserRepository, hasher: PasswordHasher):
        self.repo = repo
        self.hasher = hasher

    def execute(self, cmd: CreateUserCommand) -> User:
        if _missing(cmd.first_name, cmd.last_name, cmd.mobile_number, cmd.email, cmd.image, cmd.password):
            raise ValidationError("All fields are required")

        if self.repo.find_by_email(cmd.email):
            log.warning("Create rejected: duplicate email")
            raise ConflictError("Duplicate user")

        user = User(
            id=str(uuid.uuid4()),
            first_name=cmd.first_name,
            last_name=cmd.last_name,
            mobile_number=cmd.mobile_number,
            email=cmd.email,
            image=cmd.image,
            password_hash=self.hasher.hash(cmd.password),
        )
        created = self.repo.insert(user)
        if not created:
            raise PersistenceError("Invalid user data received")

        log.info("User %s created", created.id)
        return created

class UpdateUser:
    """
    Orden estricto: buscar -> validar existencia -> validar email único ->
    aplicar cambios -> re-hash condicional -> persistir.
    """
    def __init__(self, repo: UserRepository, hasher: PasswordHasher):
        self.repo = repo
        self.hasher = hasher

    def execute(self, cmd: UpdateUserCommand) -> User:
        if _missing(cmd.id, cmd.first_name, cmd.last_name, cmd.mobile_number, cmd.email, cmd.image):
            raise ValidationError("All fields except password are required")

        user = self.repo.find_by_id(cmd.id)
        if not user:
            raise NotFoundError("User not found")

        duplicate = self.repo.find_by_email(cmd.email)
        # se permite conservar el propio email
        if duplicate and duplicate.id != user.id:
            log.warning("Update of %s rejected: duplicate email", user.id)
            raise ConflictError("Duplicate user")

        user.first_name = cmd.first_name
        user.last_name = cmd.last_name
        user.mobile_number = cmd.mobile_number
        user.email = cmd.email
        user.image = cmd.image

        if not _missing(cmd.password):
            user.password_hash = self.hasher.hash(cmd.password)

        updated = self.repo.save(user)
        log.info("User %s updated", updated.id)
        return updated

class DeleteUser:
    def __init__(self, repo: UserRepository):
        self.repo = repo

    def execute(self, cmd: DeleteUserCommand) -> User:
        if _missing(cmd.id):
            raise ValidationError("User ID Required")

        user = self.repo.find_by_id(cmd.id)
        if not user:
            raise NotFoundError("User not found")

        if not self.repo.delete(user.id):
            # borrado concurrente entre el find y el delete
            raise NotFoundError("User not found")

        log.info("User %s deleted", user.id)
        return user
