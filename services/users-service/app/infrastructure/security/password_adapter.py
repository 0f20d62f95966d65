# Created by emeday, 2025
# Thin adapter the users service injects into its use cases, keeping the hexagonal boundaries.
# It delegates to the shared library so we have a single password policy.

from ud_shared.security.passwords import hash_password, verify_password, DEFAULT_ROUNDS
from app.domain.ports import PasswordHasher

class BcryptPasswordHasher(PasswordHasher):
    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        self.rounds = rounds

    def hash(self, plain: str) -> str:
        return hash_password(plain, rounds=self.rounds)

    def verify(self, plain: str, hashed: str) -> bool:
        return verify_password(plain, hashed)
