"""
Enterprise API endpoints.

Enterprises are the tenants; they are addressed by UUID.
"""

from typing import Annotated

from fastapi import APIRouter, Path, Response, status

from bilemo.core.dependencies import DBSession
from bilemo.schemas.enterprise import EnterpriseCreate, EnterpriseResponse
from bilemo.services.enterprise_service import EnterpriseService

router = APIRouter()


@router.get(
    "/enterprise/{uuid}",
    response_model=EnterpriseResponse,
    summary="Get Enterprise",
    description="Retrieve an enterprise by its uuid.",
    responses={404: {"description": "Enterprise not found"}},
)
async def get_enterprise(
    uuid: Annotated[str, Path(description="Enterprise UUID")],
    session: DBSession,
) -> EnterpriseResponse:
    service = EnterpriseService(session)
    enterprise = await service.get(uuid)
    return EnterpriseResponse.model_validate(enterprise)


@router.post(
    "/enterprise",
    response_model=EnterpriseResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Enterprise",
    description="Create a new enterprise. A fresh UUID is assigned.",
    responses={400: {"description": "Missing required field: name"}},
)
async def create_enterprise(
    data: EnterpriseCreate,
    session: DBSession,
) -> EnterpriseResponse:
    service = EnterpriseService(session)
    enterprise = await service.create(data)
    return EnterpriseResponse.model_validate(enterprise)


@router.delete(
    "/enterprise/{uuid}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete Enterprise",
    description="Delete an enterprise and all of its users and products.",
    responses={404: {"description": "Enterprise not found"}},
)
async def delete_enterprise(
    uuid: Annotated[str, Path(description="Enterprise UUID")],
    session: DBSession,
) -> Response:
    """
    Delete an enterprise.

    WARNING: This deletes every user and product of the enterprise.
    """
    service = EnterpriseService(session)
    await service.delete(uuid)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
