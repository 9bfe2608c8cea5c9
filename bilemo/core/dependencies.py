"""
FastAPI dependencies for dependency injection
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bilemo.database import get_db_session
from bilemo.core.security import PasswordHasher, get_password_hasher


# Type alias for database session dependency
DBSession = Annotated[AsyncSession, Depends(get_db_session)]

# Type alias for the credential hasher
Hasher = Annotated[PasswordHasher, Depends(get_password_hasher)]
