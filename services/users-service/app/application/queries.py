# service container: arma repos/adaptadores concretos para los casos de uso
from dataclasses import dataclass
from sqlalchemy.engine import Engine
from ud_shared.config import Settings
from ud_shared.db import build_engine
from app.domain.ports import UserRepository, PasswordHasher
from app.infrastructure.db.sqlalchemy.repositories import SqlUserRepository
from app.infrastructure.security.password_adapter import BcryptPasswordHasher
from app.application.use_cases import ListUsers, CreateUser, UpdateUser, DeleteUser

@dataclass
class ServiceContainer:
    settings: Settings
    engine: Engine
    repo: UserRepository
    hasher: PasswordHasher

    def list_users(self) -> ListUsers:
        return ListUsers(self.repo)

    def create_user(self) -> CreateUser:
        return CreateUser(self.repo, self.hasher)

    def update_user(self) -> UpdateUser:
        return UpdateUser(self.repo, self.hasher)

    def delete_user(self) -> DeleteUser:
        return DeleteUser(self.repo)

def get_container(settings: Settings) -> ServiceContainer:
    engine = build_engine(settings)
    return ServiceContainer(
        settings=settings,
        engine=engine,
        repo=SqlUserRepository(settings, engine=engine),
        hasher=BcryptPasswordHasher(rounds=settings.BCRYPT_ROUNDS),
    )
