"""
Logging centralizado.

Todos os módulos pedem o logger por aqui para manter um formato único
no stdout (é o que o Streamlit Cloud e containers coletam).
"""

import logging
import sys

_LOG_FORMAT = '[%(asctime)s] %(levelname)s in %(module)s: %(message)s'

_level = logging.INFO


def get_logger(name: str) -> logging.Logger:
    """
    Retorna um logger configurado com o formato padrão da aplicação.

    Args:
        name (str): Nome do módulo chamador (normalmente __name__).

    Returns:
        logging.Logger: Logger pronto para uso.
    """
    logger = logging.getLogger(name)

    # Evita handlers duplicados a cada rerun do Streamlit
    if not logger.handlers:
        logger.setLevel(_level)
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    return logger


def set_log_level(level: str) -> None:
    """Ajusta o nível de todos os loggers da aplicação já criados e futuros."""
    global _level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Nível de log inválido: {level}")

    _level = resolved
    for name, logger in logging.Logger.manager.loggerDict.items():
        if name.startswith('galeria') and isinstance(logger, logging.Logger):
            logger.setLevel(resolved)
