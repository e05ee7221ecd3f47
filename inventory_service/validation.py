# inventory_service/validation.py

"""
Product payload validation.

`validate_product` turns an arbitrary decoded request body into either a
`ProductPayload` that is safe to persist as-is, or a mapping of field name to
a human-readable message. Malformed input is a normal result, never an
exception, and every failing field is reported, not just the first one.
"""

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from .models import INT_MAX

IMAGE_URL_PATTERN = re.compile(r"^https?://.+")

BODY_NOT_OBJECT = "Corpo da requisição deve ser um objeto JSON"


def _required_text(value: Any, message: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise PydanticCustomError("required", message)
    return value


class ProductPayload(BaseModel):
    # Defaults are validated so that a missing field gets the same message as an empty one.
    nome: Optional[str] = Field(None, validate_default=True)
    categoria: Optional[str] = Field(None, validate_default=True)
    quantidade: Optional[int] = Field(None, validate_default=True)
    urlImagem: Optional[str] = Field(None, validate_default=True)
    data: Optional[datetime] = None

    @field_validator("nome", mode="before")
    @classmethod
    def check_nome(cls, value):
        return _required_text(value, "Nome é obrigatório")

    @field_validator("categoria", mode="before")
    @classmethod
    def check_categoria(cls, value):
        return _required_text(value, "Categoria é obrigatória")

    @field_validator("quantidade", mode="before")
    @classmethod
    def check_quantidade(cls, value):
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        # bool is an int subclass; JSON true/false is not a quantity
        if isinstance(value, bool) or not isinstance(value, int):
            raise PydanticCustomError(
                "not_integer", "Quantidade deve ser um número inteiro"
            )
        if value < 0:
            raise PydanticCustomError(
                "negative", "Quantidade deve ser um número positivo"
            )
        if value > INT_MAX:
            raise PydanticCustomError(
                "too_large", "Quantidade excede o máximo permitido"
            )
        return value

    @field_validator("urlImagem", mode="before")
    @classmethod
    def check_url_imagem(cls, value):
        if not isinstance(value, str) or not value.strip():
            raise PydanticCustomError("required", "URL da imagem é obrigatória")
        if not IMAGE_URL_PATTERN.match(value):
            raise PydanticCustomError("invalid_url", "URL da imagem inválida")
        return value

    @field_validator("data", mode="before")
    @classmethod
    def check_data(cls, value):
        if value is None:
            return value
        if isinstance(value, str):
            try:
                value = datetime.fromisoformat(value.strip())
            except ValueError:
                pass
        if not isinstance(value, datetime):
            raise PydanticCustomError("invalid_date", "Data inválida")
        # Stored as UTC; SQLite keeps no offset. Naive values are taken as UTC.
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


@dataclass
class ValidationResult:
    payload: Optional[ProductPayload] = None
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.payload is not None


def validate_product(raw: Any) -> ValidationResult:
    """
    Validates a raw product record.

    Returns a result holding the normalized payload on success, or the
    field-keyed error messages on failure.
    """
    if not isinstance(raw, dict):
        return ValidationResult(errors={"body": BODY_NOT_OBJECT})

    try:
        payload = ProductPayload.model_validate(raw)
    except ValidationError as exc:
        errors: Dict[str, str] = {}
        for error in exc.errors():
            name = str(error["loc"][0]) if error["loc"] else "body"
            errors.setdefault(name, error["msg"])
        return ValidationResult(errors=errors)
    return ValidationResult(payload=payload)
