from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

class Health(BaseModel):
    status: str = "ok"

# -------------------------------------------------
# NOTA:
# - El contrato HTTP usa camelCase (firstName, mobileNumber, ...).
#   Cada campo declara su alias y populate_by_name=True permite
#   construir los modelos también con snake_case.
# - Todos los campos de entrada son Optional: la presencia la valida
#   el caso de uso (400 con mensaje propio, no 422 de FastAPI).
# -------------------------------------------------

class CreateUserRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    mobile_number: Optional[str] = Field(default=None, alias="mobileNumber")
    email: Optional[str] = None
    image: Optional[str] = None
    password: Optional[str] = None

class UpdateUserRequest(CreateUserRequest):
    id: Optional[str] = None

class DeleteUserRequest(BaseModel):
    id: Optional[str] = None

class UserOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    id: str
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    mobile_number: str = Field(alias="mobileNumber")
    email: str
    image: str
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

class MessageOut(BaseModel):
    message: str

class ErrorOut(BaseModel):
    # forma de HTTPException: los errores usan `detail`, no `message`
    detail: str
