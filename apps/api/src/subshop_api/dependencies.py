"""FastAPI dependency injection providers."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from subshop_api.config import settings
from subshop_db.database import get_db as _db_dependency

# Re-export the DB dependency unchanged.
get_db = _db_dependency

DbDep = Annotated[AsyncSession, Depends(get_db)]

# Paging parameters keep the public camelCase names used in validation messages.
PageNumber = Annotated[int, Query(alias="pageNumber")]
PageSize = Annotated[int, Query(alias="pageSize")]

DEFAULT_PAGE_SIZE = settings.default_page_size
