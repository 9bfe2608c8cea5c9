"""
Product API endpoints.

Provides CRUD operations for products within enterprise context.
"""

from typing import Annotated, List

from fastapi import APIRouter, Path, Response, status

from bilemo.core.dependencies import DBSession
from bilemo.schemas.base import MAX_ID
from bilemo.schemas.product import ProductCreate, ProductUpdate, ProductResponse
from bilemo.services.product_service import ProductService

router = APIRouter()

EnterpriseUUID = Annotated[str, Path(description="The UUID of the enterprise.")]
ProductID = Annotated[int, Path(ge=1, le=MAX_ID, description="The ID of the product.")]


@router.get(
    "/products/{uuid}",
    response_model=List[ProductResponse],
    summary="List Products",
    description="Retrieve every product of an enterprise.",
    responses={404: {"description": "Enterprise not found"}},
)
async def list_products(
    uuid: EnterpriseUUID,
    session: DBSession,
) -> List[ProductResponse]:
    service = ProductService(session)
    products = await service.list(uuid)
    return [ProductResponse.model_validate(p) for p in products]


@router.get(
    "/product/{uuid}/{product_id}",
    response_model=ProductResponse,
    summary="Get Product",
    description="Retrieve a specific product for a given enterprise UUID and product ID.",
    responses={404: {"description": "Enterprise or product not found"}},
)
async def get_product(
    uuid: EnterpriseUUID,
    product_id: ProductID,
    session: DBSession,
) -> ProductResponse:
    service = ProductService(session)
    product = await service.get(uuid, product_id)
    return ProductResponse.model_validate(product)


@router.post(
    "/products",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Product",
    description="Create a new product in the enterprise named by `uuid`.",
    responses={
        400: {"description": "Invalid product"},
        404: {"description": "Enterprise not found"},
    },
)
async def create_product(
    data: ProductCreate,
    session: DBSession,
) -> ProductResponse:
    service = ProductService(session)
    product = await service.create(data)
    return ProductResponse.model_validate(product)


@router.put(
    "/product/{uuid}/{product_id}",
    response_model=ProductResponse,
    summary="Update Product",
    description="Update product details. Only provided fields are updated.",
    responses={404: {"description": "Enterprise or product not found"}},
)
async def update_product(
    uuid: EnterpriseUUID,
    product_id: ProductID,
    data: ProductUpdate,
    session: DBSession,
) -> ProductResponse:
    service = ProductService(session)
    product = await service.update(uuid, product_id, data)
    return ProductResponse.model_validate(product)


@router.delete(
    "/product/{uuid}/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete Product",
    description="Delete a product permanently.",
    responses={404: {"description": "Enterprise or product not found"}},
)
async def delete_product(
    uuid: EnterpriseUUID,
    product_id: ProductID,
    session: DBSession,
) -> Response:
    service = ProductService(session)
    await service.delete(uuid, product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
