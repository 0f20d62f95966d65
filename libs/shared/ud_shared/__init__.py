
# ud_shared package re-exports
from .config import Settings, load_settings
from .logger import get_logger
from .db import build_engine, make_session_factory, session_scope
