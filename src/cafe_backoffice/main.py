import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api import health, pages
from .api.routes import auth, catalog, data, employees, menu, orders, products, reservations, work
from .config import settings
from .db.session import close_db, init_db
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        await init_db(create_tables=settings.CREATE_TABLES)
    except Exception:
        # без БД не работаем: uvicorn завершит процесс
        logger.critical("Database is unreachable, shutting down", exc_info=True)
        raise
    logger.info("🚀 Application started")
    yield
    await close_db()
    logger.info("🛑 Application stopped")


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"message": "Validation error", "errors": jsonable_encoder(exc.errors())},
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"message": "Internal server error", "detail": str(exc)},
    )


def create_app() -> FastAPI:
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(title="Cafe Back-Office", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Подключаем роуты
    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(employees.router)
    app.include_router(products.router)
    app.include_router(orders.router)
    app.include_router(reservations.router)
    app.include_router(work.router)
    app.include_router(menu.router)
    app.include_router(catalog.router)
    app.include_router(data.router)
    app.include_router(pages.router)
    return app


app = create_app()


def run() -> None:
    uvicorn.run("cafe_backoffice.main:app", host=settings.HOST, port=settings.PORT)
