"""Shared FastAPI dependencies."""
from datetime import date
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from fairwork.database import get_db
from fairwork.services.store import ProjectStore, SqlProjectStore


async def get_store(db: Annotated[AsyncSession, Depends(get_db)]) -> ProjectStore:
    return SqlProjectStore(db)


def get_reference_date() -> date:
    """Day whose ISO week counts as "this week" for streaks and reminders."""
    return date.today()
