"""
Request and database helpers shared by the API tests.
"""

from typing import Any, Type

from httpx import AsyncClient
from sqlalchemy import func, select

from bilemo.models import Base


async def count_rows(session_factory, model: Type[Base], **filters: Any) -> int:
    """Count rows in a fresh session so no request state leaks in."""
    async with session_factory() as session:
        query = select(func.count()).select_from(model)
        for name, value in filters.items():
            query = query.where(getattr(model, name) == value)
        result = await session.execute(query)
        return result.scalar() or 0


async def create_enterprise(client: AsyncClient, name: str = "Acme") -> dict:
    response = await client.post("/api/enterprise", json={"name": name})
    assert response.status_code == 201, response.text
    return response.json()


async def create_user(client: AsyncClient, enterprise_uuid: str, **fields: Any) -> dict:
    payload = {
        "uuid": enterprise_uuid,
        "firstname": "Ada",
        "lastname": "Lovelace",
        "email": "ada@bilemo.com",
        "password": "s3cret-pass",
        "available": True,
    }
    payload.update(fields)
    response = await client.post("/api/users", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


async def create_product(client: AsyncClient, enterprise_uuid: str, **fields: Any) -> dict:
    payload = {"uuid": enterprise_uuid, "name": "Widget", "price": 9.99}
    payload.update(fields)
    response = await client.post("/api/products", json=payload)
    assert response.status_code == 201, response.text
    return response.json()
