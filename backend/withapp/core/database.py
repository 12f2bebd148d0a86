# backend/withapp/core/database.py
"""
Moteur async + fabrique de sessions.

expire_on_commit=False : les objets restent lisibles après commit
sans lazy-load (interdit hors greenlet en async).
"""
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import declarative_base

from withapp.core.config import settings

engine = create_async_engine(settings.DATABASE_URL, echo=settings.DEBUG, pool_pre_ping=True)

SessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

Base = declarative_base()


async def get_db() -> AsyncIterator[AsyncSession]:
    """Dépendance FastAPI, une session par requête."""
    async with SessionLocal() as db:
        yield db

