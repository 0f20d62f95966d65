
"""
ud_shared.logger
----------------
Logger simple con prefijo de servicio.
Synopsis: created by emeday 2025
"""
import logging, os, sys

def get_logger(name: str, service_name: str|None=None, level: str|None=None) -> logging.Logger:
    """
    Devuelve un logger configurado (un solo handler a stdout).
    El nivel sale de `level` o de LOG_LEVEL (INFO por defecto).
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        fmt = '%(asctime)s [%(levelname)s] [{}] %(name)s: %(message)s'.format(service_name or 'service')
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel((level or os.getenv("LOG_LEVEL", "INFO")).upper())
    return logger
