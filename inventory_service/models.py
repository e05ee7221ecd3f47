# inventory_service/models.py

"""
SQLAlchemy database models for the Inventory Service.
"""
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, Text

from .db import Base

# Range of the Integer (int4) columns on PostgreSQL
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _utcnow():
    return datetime.now(timezone.utc)


class Product(Base):
    """
    SQLAlchemy model for the 'Product' table.
    A single inventory record with its stock quantity and image.
    """

    __tablename__ = "Product"

    # Primary Key: auto-incrementing, never reassigned.
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    nome = Column(Text, nullable=False)
    categoria = Column(Text, nullable=False)

    # Never negative; enforced by the validator before any write.
    quantidade = Column(Integer, nullable=False, default=0)

    url_imagem = Column("urlImagem", Text, nullable=False)

    # Business date of the record, supplied by the caller or defaulted at creation.
    data = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    # Set in Python rather than by the server so sub-second ordering survives on SQLite.
    created_at = Column(
        "createdAt", DateTime(timezone=True), nullable=False, default=_utcnow, index=True
    )

    def __repr__(self):
        return f"<Product(id={self.id}, nome='{self.nome}', quantidade={self.quantidade})>"
