import logging

from sqlalchemy import text
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker

from cafe_backoffice.config import settings
from cafe_backoffice.db.base import Base

logger = logging.getLogger(__name__)

# Асинхронный движок
engine = create_async_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO, future=True)

# Фабрика сессий
AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def init_db(create_tables: bool = True) -> None:
    """
    Проверяет соединение с БД при старте.
    Ошибка не перехватывается: без хранилища приложение не запускается.
    """
    import cafe_backoffice.models  # noqa: F401  регистрирует таблицы в Base.metadata

    async with engine.begin() as conn:
        await conn.execute(text("SELECT 1"))
        if create_tables:
            await conn.run_sync(Base.metadata.create_all)
    logger.info("Connected to database %s", engine.url.render_as_string(hide_password=True))


async def close_db() -> None:
    await engine.dispose()
