
"""
Users FastAPI main
------------------
- Carga Settings (.env)
- Arma el contenedor (repo SQL + hasher bcrypt)
- Registra router de API y de debug bajo /users
Synopsis: created by emeday 2025
"""
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from ud_shared import Settings, load_settings, get_logger
from ud_shared.http_debug import build_debug_router
from app.application.queries import ServiceContainer, get_container
from app.infrastructure.db.sqlalchemy.models.user import create_schema
from .router import build_api_router

def create_app(settings: Optional[Settings] = None, container: Optional[ServiceContainer] = None) -> FastAPI:
    settings = settings or load_settings(service_name="users-service")
    container = container or get_container(settings)
    log = get_logger(__name__, service_name=settings.SERVICE_NAME, level=settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.DB_AUTO_CREATE:
            create_schema(container.engine)
        log.info("Starting %s on %s:%s", settings.SERVICE_NAME, settings.APP_HOST, settings.APP_PORT)
        yield
        container.engine.dispose()

    app = FastAPI(title="Users Service", version="0.1.0", docs_url="/docs", redoc_url="/redoc", lifespan=lifespan)
    app.state.settings = settings
    app.state.container = container

    # Routers (primary + debug)
    app.include_router(build_api_router(container), prefix="/users")
    app.include_router(build_debug_router(settings, container.engine), prefix="/users")

    @app.exception_handler(SQLAlchemyError)
    async def on_db_error(request: Request, exc: SQLAlchemyError):
        log.error("Database error on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": "Database error"})

    return app

app = create_app()

def run() -> None:
    import uvicorn
    s = app.state.settings
    uvicorn.run(app, host=s.APP_HOST, port=s.APP_PORT)

if __name__ == "__main__":
    run()
