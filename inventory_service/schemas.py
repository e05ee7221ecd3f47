# inventory_service/schemas.py

"""
Pydantic schemas for the Inventory Service API.
These define the data structures for incoming requests and outgoing responses.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


# Representation of a product in API responses.
# Field names follow the JSON contract; values are read from the ORM attributes.
class ProductResponse(BaseModel):
    id: int
    nome: str
    categoria: str
    quantidade: int
    urlImagem: str = Field(..., validation_alias="url_imagem")
    data: datetime
    createdAt: datetime = Field(..., validation_alias="created_at")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class DeleteResponse(BaseModel):
    success: bool = True


class Identity(BaseModel):
    """The signed-in actor, as carried by a session token."""

    id: str
    name: str
    email: str


class LoginRequest(BaseModel):
    username: str
    password: str


class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: Identity


class SessionResponse(BaseModel):
    user: Identity
