# inventory_service/routers/products.py

"""
HTTP routes for products.

Ids and bodies are taken raw and handed to `ProductService`, so the order of
checks (session, id, existence, validation) is decided there and not by
FastAPI's request parsing.
"""
from typing import Any, List, Optional

from fastapi import APIRouter, Depends, status

from ..schemas import DeleteResponse, Identity, ProductResponse
from ..security import authenticated
from ..service import ProductService
from ..store import ProductStore, get_store
from .common import read_json_body

router = APIRouter(prefix="/products", tags=["products"])


def get_product_service(store: ProductStore = Depends(get_store)) -> ProductService:
    return ProductService(store)


@router.get("", response_model=List[ProductResponse], summary="List all products")
def list_products(service: ProductService = Depends(get_product_service)):
    """
    Returns every product, newest first.
    """
    return service.list_products()


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new product",
)
def create_product(
    body: Any = Depends(read_json_body),
    identity: Optional[Identity] = Depends(authenticated),
    service: ProductService = Depends(get_product_service),
):
    """
    Creates a product. Requires a session.

    - `data` defaults to the current time when omitted.
    - Returns 400 with a field -> message map when validation fails.
    """
    return service.create_product(identity, body)


@router.get("/{product_id}", response_model=ProductResponse, summary="Retrieve a product by ID")
def get_product(product_id: str, service: ProductService = Depends(get_product_service)):
    return service.get_product(product_id)


@router.put("/{product_id}", response_model=ProductResponse, summary="Update an existing product")
def update_product(
    product_id: str,
    body: Any = Depends(read_json_body),
    identity: Optional[Identity] = Depends(authenticated),
    service: ProductService = Depends(get_product_service),
):
    """
    Replaces a product's fields. Requires a session.
    `id` and `createdAt` never change; an omitted `data` keeps its stored value.
    """
    return service.update_product(identity, product_id, body)


@router.delete("/{product_id}", response_model=DeleteResponse, summary="Delete a product by ID")
def delete_product(
    product_id: str,
    identity: Optional[Identity] = Depends(authenticated),
    service: ProductService = Depends(get_product_service),
):
    service.delete_product(identity, product_id)
    return DeleteResponse(success=True)
