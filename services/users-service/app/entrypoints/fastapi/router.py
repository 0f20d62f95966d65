# router.py — Users Service (Hexagonal)
# Rutas: GET/POST/PATCH/DELETE /users, /health
# Los casos de uso levantan app.domain.errors.*; aquí se traducen a HTTPException.
from fastapi import APIRouter, HTTPException, Body, status
from typing import Dict, List, NoReturn, Optional, Type

from app.application.queries import ServiceContainer
from app.application.use_cases import CreateUserCommand, UpdateUserCommand, DeleteUserCommand
from app.domain.errors import UserError, ValidationError, ConflictError, NotFoundError, PersistenceError
from app.domain.models import User

from .schemas import (
    Health,
    CreateUserRequest,
    UpdateUserRequest,
    DeleteUserRequest,
    UserOut,
    MessageOut,
    ErrorOut,
)

# "not found" se responde como 400, igual que el contrato existente
ERROR_STATUS: Dict[Type[UserError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_400_BAD_REQUEST,
    PersistenceError: status.HTTP_400_BAD_REQUEST,
    ConflictError: status.HTTP_409_CONFLICT,
}

# errores: {"detail": msg}; respuestas OK: {"message": msg}
ERROR_DOC = {"model": ErrorOut, "description": "Error de negocio; el mensaje va en `detail`"}

def _raise_http(err: UserError) -> NoReturn:
    code = ERROR_STATUS.get(type(err), status.HTTP_400_BAD_REQUEST)
    raise HTTPException(status_code=code, detail=err.message)

def _to_out(u: User) -> UserOut:
    return UserOut(
        id=u.id,
        first_name=u.first_name,
        last_name=u.last_name,
        mobile_number=u.mobile_number,
        email=u.email,
        image=u.image,
        created_at=u.created_at,
        updated_at=u.updated_at,
    )

# ---------- Router ----------
def build_api_router(container: ServiceContainer) -> APIRouter:
    r = APIRouter(tags=["users"])

    @r.get("/health", response_model=Health, operation_id="users_health")
    def health():
        return {"status": "ok"}

    @r.get("", response_model=List[UserOut], operation_id="users_list", responses={400: ERROR_DOC})
    def list_users():
        """
        Lista todos los usuarios (sin hash de password).
        - 400 si la colección está vacía.
        """
        try:
            users = container.list_users().execute()
        except UserError as e:
            _raise_http(e)
        return [_to_out(u) for u in users]

    @r.post("", response_model=MessageOut, status_code=status.HTTP_201_CREATED, operation_id="users_create",
           responses={400: ERROR_DOC, 409: ERROR_DOC})
    def create_user(data: Optional[CreateUserRequest] = Body(default=None)):
        """
        Crea usuario con password hasheado (bcrypt_sha256).
        - 400 si falta algún campo, 409 si el email ya existe.
        """
        data = data or CreateUserRequest()
        cmd = CreateUserCommand(
            first_name=data.first_name,
            last_name=data.last_name,
            mobile_number=data.mobile_number,
            email=data.email,
            image=data.image,
            password=data.password,
        )
        try:
            user = container.create_user().execute(cmd)
        except UserError as e:
            _raise_http(e)
        return {"message": f"New user {user.first_name} created"}

    @r.patch("", response_model=MessageOut, operation_id="users_update", responses={400: ERROR_DOC, 409: ERROR_DOC})
    def update_user(data: Optional[UpdateUserRequest] = Body(default=None)):
        """
        Actualiza todos los campos salvo password; password solo si viene.
        """
        data = data or UpdateUserRequest()
        cmd = UpdateUserCommand(
            id=data.id,
            first_name=data.first_name,
            last_name=data.last_name,
            mobile_number=data.mobile_number,
            email=data.email,
            image=data.image,
            password=data.password,
        )
        try:
            user = container.update_user().execute(cmd)
        except UserError as e:
            _raise_http(e)
        return {"message": f"{user.first_name} updated"}

    @r.delete("", response_model=str, operation_id="users_delete", responses={400: ERROR_DOC})
    def delete_user(data: Optional[DeleteUserRequest] = Body(default=None)):
        cmd = DeleteUserCommand(id=data.id if data else None)
        try:
            user = container.delete_user().execute(cmd)
        except UserError as e:
            _raise_http(e)
        return f"Username {user.first_name} with ID {user.id} deleted"

    return r
