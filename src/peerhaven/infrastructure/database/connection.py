"""
Database Connection Management

Async connection to the managed marketplace database with:
- Connection pooling
- Health checks
- Graceful shutdown

SECURITY: Connection strings contain credentials and must
never be logged.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from peerhaven.config.logging_config import get_logger
from peerhaven.config.settings import DatabaseSettings

logger = get_logger(__name__)


class Base(DeclarativeBase):
    """
    SQLAlchemy declarative base for all ORM models.
    
    All database models should inherit from this base.
    """
    pass


class DatabaseManager:
    """
    Manages database connections and sessions.
    
    The marketplace tables are owned by the managed database;
    this service only reads them.
    
    Usage:
        db = DatabaseManager(settings.database)
        await db.initialize()
        async with db.session() as session:
            # use session
        await db.close()
    """
    
    def __init__(
        self,
        settings: DatabaseSettings,
        engine: Optional[AsyncEngine] = None,
    ) -> None:
        """
        Initialize database manager (connection not established).
        
        Args:
            settings: Database settings
            engine: Pre-built engine (tests); created from settings otherwise
        """
        self._settings = settings
        self._engine: AsyncEngine | None = engine
        self._session_factory: async_sessionmaker[AsyncSession] | None = None
        self._initialized = False
    
    async def initialize(self) -> None:
        """
        Initialize database engine and session factory.
        
        Should be called once during application startup.
        """
        if self._initialized:
            logger.warning("Database already initialized")
            return
        
        if self._engine is None:
            url = make_url(self._settings.url.get_secret_value())
            engine_kwargs: dict = {"pool_pre_ping": True}
            if not url.get_backend_name().startswith("sqlite"):
                engine_kwargs.update(
                    pool_size=self._settings.pool_size,
                    max_overflow=self._settings.max_overflow,
                    pool_recycle=3600,
                )
            self._engine = create_async_engine(url, **engine_kwargs)
        
        self._session_factory = async_sessionmaker(
            bind=self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
        
        self._initialized = True
        logger.info("Database connection pool initialized")
    
    async def close(self) -> None:
        """
        Close database connections.
        
        Should be called during application shutdown.
        """
        if self._engine:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
            self._initialized = False
            logger.info("Database connections closed")
    
    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Get a read session with automatic cleanup.
        
        Yields:
            AsyncSession: Database session
        """
        if not self._session_factory:
            raise RuntimeError("Database not initialized. Call initialize() first.")
        
        session = self._session_factory()
        try:
            yield session
        finally:
            await session.close()
    
    async def health_check(self) -> bool:
        """
        Check database connectivity.
        
        Returns:
            True if database is reachable, False otherwise
        """
        if not self._engine:
            return False
        
        try:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error("Database health check failed", error=str(e))
            return False
    
    @property
    def engine(self) -> AsyncEngine | None:
        """Get the SQLAlchemy async engine."""
        return self._engine
    
    @property
    def is_initialized(self) -> bool:
        """Check if database is initialized."""
        return self._initialized
