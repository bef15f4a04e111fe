from __future__ import annotations

from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from peoplebook.common.logging import get_logger
from peoplebook.common.settings import get_settings
from peoplebook.database.core.main import get_sessionmaker
from peoplebook.database.core.transaction import transactional
from peoplebook.database.seed.loader import load_seed_data
from peoplebook.services.api.routers import health, people
from peoplebook.domain.errors import EntityValidationError
from peoplebook.services.people.errors import PersonServiceError

cfg = get_settings()
dev = cfg.app_env.lower() == "development"
log = get_logger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    if cfg.seed_on_startup:
        with get_sessionmaker()() as session, transactional(session):
            load_seed_data(session)
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Peoplebook API",
        version="0.1.0",
        docs_url=f"{cfg.api.prefix}/docs",
        openapi_url=f"{cfg.api.prefix}/openapi.json",
        lifespan=_lifespan,
    )

    allow_origins = ["*"] if dev else cfg.api.cors_allow_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_methods=cfg.api.cors_allow_methods,
        allow_headers=cfg.api.cors_allow_headers,
        allow_credentials=cfg.api.cors_allow_credentials,
    )

    @app.exception_handler(PersonServiceError)
    async def _person_service_error(request: Request, exc: PersonServiceError) -> JSONResponse:
        log.warning("%s %s -> %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=HTTPStatus.BAD_REQUEST, content={"detail": str(exc)})

    @app.exception_handler(EntityValidationError)
    async def _entity_validation_error(request: Request, exc: EntityValidationError) -> JSONResponse:
        return JSONResponse(status_code=HTTPStatus.UNPROCESSABLE_ENTITY, content={"detail": str(exc)})

    # Routers
    app.include_router(health.router)
    app.include_router(people.router)
    return app


app = create_app()
