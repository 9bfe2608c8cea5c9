"""
Seed data for local development.

Enterprises are loaded first, then users and products, each attached to a
randomly chosen enterprise.

Usage:
    python -m bilemo.fixtures
"""

import asyncio
import random
from uuid import uuid4

from sqlalchemy.ext.asyncio import AsyncSession

from bilemo.core.logging import configure_logging, get_logger
from bilemo.core.security import PasswordHasher, get_password_hasher
from bilemo.models import Base, Enterprise, Product, User, ROLE_USER
from bilemo.models.base import utcnow

logger = get_logger(__name__)

FIXTURE_PASSWORD = "password"


async def load_fixtures(
    session: AsyncSession,
    hasher: PasswordHasher,
    enterprises: int = 10,
    users: int = 30,
    products: int = 30,
    rng: random.Random | None = None,
) -> list[Enterprise]:
    """
    Persist a fixed-size data set and commit it.

    Args:
        session: Async database session
        hasher: Hasher for the shared fixture password
        enterprises: Number of enterprises to create
        users: Number of users spread over the enterprises
        products: Number of products spread over the enterprises
        rng: Random source picking the owner of each child

    Returns:
        The created enterprises
    """
    if enterprises < 1 and (users or products):
        raise ValueError("Users and products need at least one enterprise")

    rng = rng or random.Random()

    created = [
        Enterprise(name=f"Enterprise {i}", uuid=uuid4(), created_at=utcnow())
        for i in range(enterprises)
    ]
    session.add_all(created)
    await session.flush()

    # Hash once, bcrypt is slow on purpose
    password = hasher.hash(FIXTURE_PASSWORD)

    session.add_all(
        User(
            firstname=f"firstname {i}",
            lastname=f"lastname {i}",
            email=f"user{i}@bilemo.com",
            password=password,
            roles=[ROLE_USER],
            available=True,
            date_of_birth=utcnow(),
            enterprise_id=rng.choice(created).id,
        )
        for i in range(users)
    )

    now = utcnow()
    session.add_all(
        Product(
            name=f"Product {i}",
            description=f"Description {i}",
            created_at=now,
            updated_at=now,
            available=True,
            enterprise_id=rng.choice(created).id,
        )
        for i in range(products)
    )

    await session.commit()

    logger.info(
        "Fixtures loaded",
        enterprises=enterprises,
        users=users,
        products=products,
    )
    return created


async def main() -> None:
    from bilemo.database import engine, AsyncSessionLocal

    configure_logging()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with AsyncSessionLocal() as session:
        await load_fixtures(session, get_password_hasher())

    await engine.dispose()


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
