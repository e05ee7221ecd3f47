# inventory_service/service.py

"""
Product operations: session check, id parsing, existence check and
validation, in that order, in front of the data store.

Every store call is wrapped so that a database failure reaches the caller
as an opaque `InternalError`; the underlying exception is only logged.
"""
import logging
import re
from datetime import datetime, timezone
from typing import Any, List, Optional

from .exceptions import BadRequestError, InternalError, NotFoundError, UnauthorizedError
from .models import INT_MAX, INT_MIN, Product
from .schemas import Identity
from .store import ProductStore
from .validation import ProductPayload, validate_product

logger = logging.getLogger(__name__)

_ID_PATTERN = re.compile(r"^\s*[+-]?\d+\s*$")


def parse_product_id(raw_id: Any) -> int:
    """Parses a path id; anything but a plain decimal integer is a bad request."""
    if isinstance(raw_id, int) and not isinstance(raw_id, bool):
        return raw_id
    if isinstance(raw_id, str) and _ID_PATTERN.match(raw_id):
        return int(raw_id)
    raise BadRequestError("invalid id")


class ProductService:
    def __init__(self, store: ProductStore):
        self.store = store

    # -----------------------------
    # Guards
    # -----------------------------

    @staticmethod
    def _require_identity(identity: Optional[Identity], action: str) -> Identity:
        if identity is None:
            logger.warning(f"Unauthenticated attempt to {action} a product.")
            raise UnauthorizedError()
        return identity

    def _existing(self, product_id: int, action: str) -> Product:
        # No row can carry an id the primary key column cannot hold
        if not INT_MIN <= product_id <= INT_MAX:
            logger.warning(f"Product with ID: {product_id} is out of range for {action}.")
            raise NotFoundError()
        try:
            product = self.store.get(product_id)
        except Exception as e:
            logger.error(f"Error loading product {product_id}: {e}", exc_info=True)
            raise InternalError(f"Could not {action} product.")
        if product is None:
            logger.warning(f"Product with ID: {product_id} not found for {action}.")
            raise NotFoundError()
        return product

    @staticmethod
    def _validated(body: Any) -> ProductPayload:
        result = validate_product(body)
        if not result.ok:
            logger.warning(f"Product validation failed: {result.errors}")
            raise BadRequestError(result.errors)
        return result.payload

    # -----------------------------
    # Operations
    # -----------------------------

    def list_products(self) -> List[Product]:
        try:
            products = self.store.list_all()
        except Exception as e:
            logger.error(f"Error listing products: {e}", exc_info=True)
            raise InternalError("Could not list products.")
        logger.info(f"Retrieved {len(products)} products.")
        return products

    def get_product(self, raw_id: Any) -> Product:
        product_id = parse_product_id(raw_id)
        product = self._existing(product_id, "retrieve")
        logger.info(f"Product '{product.nome}' (ID: {product_id}) retrieved.")
        return product

    def create_product(self, identity: Optional[Identity], body: Any) -> Product:
        self._require_identity(identity, "create")
        payload = self._validated(body)
        data = payload.data or datetime.now(timezone.utc)
        try:
            product = self.store.create(payload, data)
        except Exception as e:
            self.store.rollback()
            logger.error(f"Error creating product: {e}", exc_info=True)
            raise InternalError("Could not create product.")
        logger.info(f"Product '{product.nome}' (ID: {product.id}) created successfully.")
        return product

    def update_product(self, identity: Optional[Identity], raw_id: Any, body: Any) -> Product:
        self._require_identity(identity, "update")
        product_id = parse_product_id(raw_id)
        product = self._existing(product_id, "update")
        payload = self._validated(body)
        # An omitted date keeps the stored one
        data = payload.data or product.data
        try:
            product = self.store.update(product, payload, data)
        except Exception as e:
            self.store.rollback()
            logger.error(f"Error updating product {product_id}: {e}", exc_info=True)
            raise InternalError("Could not update product.")
        logger.info(f"Product '{product.nome}' (ID: {product_id}) updated successfully.")
        return product

    def delete_product(self, identity: Optional[Identity], raw_id: Any) -> None:
        self._require_identity(identity, "delete")
        product_id = parse_product_id(raw_id)
        product = self._existing(product_id, "delete")
        try:
            self.store.delete(product)
        except Exception as e:
            self.store.rollback()
            logger.error(f"Error deleting product {product_id}: {e}", exc_info=True)
            raise InternalError("Could not delete product.")
        logger.info(f"Product (ID: {product_id}) deleted successfully.")
