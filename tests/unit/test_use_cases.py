"""Unit tests for the users use cases, run against an in-memory repository."""

from typing import Dict, List, Optional
from unittest.mock import Mock

import pytest

from app.application.use_cases import (
    CreateUser,
    CreateUserCommand,
    DeleteUser,
    DeleteUserCommand,
    ListUsers,
    UpdateUser,
    UpdateUserCommand,
)
from app.domain.errors import ConflictError, NotFoundError, PersistenceError, ValidationError
from app.domain.models import User
from app.domain.ports import PasswordHasher, UserRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self):
        self.rows: Dict[str, User] = {}

    def list_all(self) -> List[User]:
        return list(self.rows.values())

    def find_by_id(self, user_id: str) -> Optional[User]:
        return self.rows.get(user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self.rows.values() if u.email == email), None)

    def insert(self, user: User) -> Optional[User]:
        self.rows[user.id] = user
        return user

    def save(self, user: User) -> User:
        self.rows[user.id] = user
        return user

    def delete(self, user_id: str) -> bool:
        return self.rows.pop(user_id, None) is not None


class PrefixHasher(PasswordHasher):
    def hash(self, plain: str) -> str:
        return f"hashed:{plain}"

    def verify(self, plain: str, hashed: str) -> bool:
        return hashed == f"hashed:{plain}"


@pytest.fixture
def memory_repo():
    return InMemoryUserRepository()


@pytest.fixture
def hasher():
    return PrefixHasher()


def _create_cmd(**overrides) -> CreateUserCommand:
    data = dict(
        first_name="A",
        last_name="B",
        mobile_number="555",
        email="a@x.com",
        image="img1",
        password="pw",
    )
    data.update(overrides)
    return CreateUserCommand(**data)


def _update_cmd(user_id: str, **overrides) -> UpdateUserCommand:
    data = dict(
        id=user_id,
        first_name="Ann",
        last_name="Bee",
        mobile_number="777",
        email="ann@x.com",
        image="img2",
    )
    data.update(overrides)
    return UpdateUserCommand(**data)


class TestListUsers:
    def test_empty_raises_not_found(self, memory_repo):
        with pytest.raises(NotFoundError, match="No users found"):
            ListUsers(memory_repo).execute()

    def test_returns_all(self, memory_repo, hasher):
        CreateUser(memory_repo, hasher).execute(_create_cmd())
        CreateUser(memory_repo, hasher).execute(_create_cmd(email="c@x.com"))
        assert len(ListUsers(memory_repo).execute()) == 2


class TestCreateUser:
    def test_creates_with_hashed_password(self, memory_repo, hasher):
        user = CreateUser(memory_repo, hasher).execute(_create_cmd())

        assert user.id
        assert user.password_hash == "hashed:pw"
        assert memory_repo.find_by_id(user.id) is user

    def test_generates_distinct_ids(self, memory_repo, hasher):
        a = CreateUser(memory_repo, hasher).execute(_create_cmd())
        b = CreateUser(memory_repo, hasher).execute(_create_cmd(email="b@x.com"))
        assert a.id != b.id

    @pytest.mark.parametrize(
        "field", ["first_name", "last_name", "mobile_number", "email", "image", "password"]
    )
    @pytest.mark.parametrize("value", [None, ""])
    def test_missing_field(self, memory_repo, hasher, field, value):
        with pytest.raises(ValidationError, match="All fields are required"):
            CreateUser(memory_repo, hasher).execute(_create_cmd(**{field: value}))
        assert memory_repo.rows == {}

    def test_duplicate_email_does_not_hash(self, memory_repo):
        CreateUser(memory_repo, PrefixHasher()).execute(_create_cmd())
        spy = Mock(spec=PasswordHasher)

        with pytest.raises(ConflictError, match="Duplicate user"):
            CreateUser(memory_repo, spy).execute(_create_cmd(first_name="Other"))

        spy.hash.assert_not_called()
        assert len(memory_repo.rows) == 1

    def test_insert_returning_none_is_persistence_error(self, hasher):
        repo = Mock(spec=UserRepository)
        repo.find_by_email.return_value = None
        repo.insert.return_value = None

        with pytest.raises(PersistenceError, match="Invalid user data received"):
            CreateUser(repo, hasher).execute(_create_cmd())


class TestUpdateUser:
    @pytest.fixture
    def existing(self, memory_repo, hasher):
        return CreateUser(memory_repo, hasher).execute(_create_cmd())

    def test_overwrites_fields_keeps_password(self, memory_repo, hasher, existing):
        updated = UpdateUser(memory_repo, hasher).execute(_update_cmd(existing.id))

        assert updated.first_name == "Ann"
        assert updated.last_name == "Bee"
        assert updated.mobile_number == "777"
        assert updated.email == "ann@x.com"
        assert updated.image == "img2"
        assert updated.password_hash == "hashed:pw"

    def test_rehashes_when_password_given(self, memory_repo, hasher, existing):
        updated = UpdateUser(memory_repo, hasher).execute(_update_cmd(existing.id, password="new"))
        assert updated.password_hash == "hashed:new"

    def test_empty_password_is_ignored(self, memory_repo, hasher, existing):
        updated = UpdateUser(memory_repo, hasher).execute(_update_cmd(existing.id, password=""))
        assert updated.password_hash == "hashed:pw"

    def test_whitespace_password_is_ignored(self, memory_repo, existing):
        spy = Mock(spec=PasswordHasher)

        updated = UpdateUser(memory_repo, spy).execute(_update_cmd(existing.id, password="   "))

        spy.hash.assert_not_called()
        assert updated.password_hash == "hashed:pw"

    def test_unknown_id_checks_existence_before_hashing(self, memory_repo, existing):
        spy = Mock(spec=PasswordHasher)

        with pytest.raises(NotFoundError, match="User not found"):
            UpdateUser(memory_repo, spy).execute(_update_cmd("missing", password="new"))

        spy.hash.assert_not_called()
        assert memory_repo.find_by_id(existing.id).first_name == "A"

    def test_duplicate_email_checked_before_hashing(self, memory_repo, hasher, existing):
        CreateUser(memory_repo, hasher).execute(_create_cmd(email="taken@x.com"))
        spy = Mock(spec=PasswordHasher)

        with pytest.raises(ConflictError):
            UpdateUser(memory_repo, spy).execute(
                _update_cmd(existing.id, email="taken@x.com", password="new")
            )

        spy.hash.assert_not_called()
        assert memory_repo.find_by_id(existing.id).email == "a@x.com"

    def test_own_email_is_allowed(self, memory_repo, hasher, existing):
        updated = UpdateUser(memory_repo, hasher).execute(_update_cmd(existing.id, email="a@x.com"))
        assert updated.email == "a@x.com"

    @pytest.mark.parametrize(
        "field", ["id", "first_name", "last_name", "mobile_number", "email", "image"]
    )
    def test_missing_required_field(self, memory_repo, hasher, existing, field):
        with pytest.raises(ValidationError, match="All fields except password are required"):
            UpdateUser(memory_repo, hasher).execute(_update_cmd(existing.id, **{field: None}))


class TestDeleteUser:
    def test_deletes_only_target(self, memory_repo, hasher):
        a = CreateUser(memory_repo, hasher).execute(_create_cmd())
        b = CreateUser(memory_repo, hasher).execute(_create_cmd(email="b@x.com"))

        deleted = DeleteUser(memory_repo).execute(DeleteUserCommand(id=a.id))

        assert deleted.id == a.id
        assert list(memory_repo.rows) == [b.id]

    def test_missing_id(self, memory_repo):
        with pytest.raises(ValidationError, match="User ID Required"):
            DeleteUser(memory_repo).execute(DeleteUserCommand())

    def test_unknown_id(self, memory_repo, hasher):
        CreateUser(memory_repo, hasher).execute(_create_cmd())

        with pytest.raises(NotFoundError, match="User not found"):
            DeleteUser(memory_repo).execute(DeleteUserCommand(id="missing"))

        assert len(memory_repo.rows) == 1

    def test_concurrent_delete_is_not_found(self, hasher):
        repo = Mock(spec=UserRepository)
        repo.find_by_id.return_value = User(
            id="1", first_name="A", last_name="B", mobile_number="5",
            email="a@x.com", image="i", password_hash="h",
        )
        repo.delete.return_value = False

        with pytest.raises(NotFoundError):
            DeleteUser(repo).execute(DeleteUserCommand(id="1"))
