
"""
tools/init_db.py
----------------
Crea la tabla `users` en la base configurada (.env / DB_URL).
Usage:
    python tools/init_db.py
Synopsis: created by emeday 2025
"""
import sys
from ud_shared import load_settings, build_engine, get_logger
from app.infrastructure.db.sqlalchemy.models.user import create_schema

def main() -> int:
    settings = load_settings(service_name="users-service")
    log = get_logger(__name__, service_name=settings.SERVICE_NAME)
    engine = build_engine(settings)
    try:
        create_schema(engine)
    finally:
        engine.dispose()
    log.info("Database initialized with tables (%s)", engine.url.render_as_string(hide_password=True))
    return 0

if __name__ == "__main__":
    sys.exit(main())
