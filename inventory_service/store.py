# inventory_service/store.py

"""
Thin data-store client over the `Product` table.
One instance wraps one request-scoped SQLAlchemy session.
"""
from datetime import datetime
from typing import List, Optional

from fastapi import Depends
from sqlalchemy.orm import Session

from .db import get_db
from .models import Product
from .validation import ProductPayload


class ProductStore:
    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> List[Product]:
        """All products, newest first."""
        return (
            self.db.query(Product)
            .order_by(Product.created_at.desc(), Product.id.desc())
            .all()
        )

    def get(self, product_id: int) -> Optional[Product]:
        return self.db.query(Product).filter(Product.id == product_id).first()

    def create(self, payload: ProductPayload, data: datetime) -> Product:
        product = Product(
            nome=payload.nome,
            categoria=payload.categoria,
            quantidade=payload.quantidade,
            url_imagem=payload.urlImagem,
            data=data,
        )
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def update(self, product: Product, payload: ProductPayload, data: datetime) -> Product:
        # id and created_at are never touched
        product.nome = payload.nome
        product.categoria = payload.categoria
        product.quantidade = payload.quantidade
        product.url_imagem = payload.urlImagem
        product.data = data
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def delete(self, product: Product) -> None:
        self.db.delete(product)
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()


def get_store(db: Session = Depends(get_db)) -> ProductStore:
    """Dependency providing the product store for the current request."""
    return ProductStore(db)
