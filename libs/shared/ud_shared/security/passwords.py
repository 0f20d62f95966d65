
"""
ud_shared.security.passwords
----------------------------
Hash y verificación de contraseñas usando bcrypt_sha256.
- Permite contraseñas largas (evita límite 72 bytes de bcrypt puro)
- Verifica también hashes legacy bcrypt ($2a/$2b/$2y$)
- El costo (rounds) es configurable; 10 por defecto
Synopsis: created by emeday 2025
"""
from typing import Optional
from passlib.hash import bcrypt_sha256, bcrypt

DEFAULT_ROUNDS = 10

def is_bcrypt(hash_: str) -> bool:
    return hash_.startswith("$2a$") or hash_.startswith("$2b$") or hash_.startswith("$2y$")

def is_bcrypt_sha256(hash_: str) -> bool:
    return hash_.startswith("$bcrypt-sha256$")

def identify_scheme(hash_: str) -> Optional[str]:
    if not hash_:
        return None
    if is_bcrypt_sha256(hash_):
        return "bcrypt_sha256"
    if is_bcrypt(hash_):
        return "bcrypt"
    return None

def hash_password(plain: str, rounds: int = DEFAULT_ROUNDS) -> str:
    return bcrypt_sha256.using(rounds=rounds).hash(plain)

def verify_password(plain: str, stored_hash: str) -> bool:
    scheme = identify_scheme(stored_hash)
    if scheme == "bcrypt_sha256":
        return bcrypt_sha256.verify(plain, stored_hash)
    if scheme == "bcrypt":
        return bcrypt.verify(plain, stored_hash)
    # formato no soportado
    return False
