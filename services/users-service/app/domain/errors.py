# created by emeday 2025
"""
Errores de dominio del servicio de usuarios.
El router los traduce a HTTPException (status + mensaje).
"""

class UserError(Exception):
    """Base de errores de negocio; `message` es legible por el cliente."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

class ValidationError(UserError):
    """Falta un campo requerido."""

class ConflictError(UserError):
    """Otro usuario ya tiene el email."""

class NotFoundError(UserError):
    """No existe usuario para el id."""

class PersistenceError(UserError):
    """El store no devolvió el registro esperado."""
