
"""
tools/hash_password.py
----------------------
CLI para generar hashes bcrypt_sha256 con el costo configurado (BCRYPT_ROUNDS).
Usage:
    python tools/hash_password.py "MiClave"
Synopsis: created by emeday 2025
"""
import sys
from ud_shared.config import load_settings
from ud_shared.security.passwords import hash_password

def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) < 1:
        print("Uso: python tools/hash_password.py <password>")
        return 1
    settings = load_settings()
    print(hash_password(argv[0], rounds=settings.BCRYPT_ROUNDS))
    return 0

if __name__ == "__main__":
    sys.exit(main())
