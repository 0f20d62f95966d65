
"""
ud_shared.http_debug
--------------------
Router de endpoints de debug comunes.
Synopsis: created by emeday 2025
"""
from fastapi import APIRouter
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from .config import Settings

def build_debug_router(settings: Settings, engine: Engine) -> APIRouter:
    router = APIRouter(tags=["_debug"])

    @router.get("/_debug/env")
    def debug_env():
        # Cuidado de no exponer secretos completos
        return {
            "service": settings.SERVICE_NAME,
            "db_dialect": engine.dialect.name,
            "db_name": engine.url.database,
            "app_host": settings.APP_HOST,
            "app_port": settings.APP_PORT,
        }

    @router.get("/_debug/probe")
    def probe():
        return {"ok": True, "service": settings.SERVICE_NAME}

    @router.get("/_debug/db")
    def debug_db():
        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return {"ok": True}
        except SQLAlchemyError as e:
            return {"ok": False, "error": str(e)}
    return router
