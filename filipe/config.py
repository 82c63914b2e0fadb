from __future__ import annotations
import logging
import os
from typing import Optional


def int_from_env(var: str, default: Optional[int] = None) -> Optional[int]:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return int(raw.strip())


def get_random_seed() -> Optional[int]:
    """Seed for the `random` builtin; None leaves it nondeterministic."""
    return int_from_env('FILIPE_SEED')


def get_recursion_limit() -> int:
    """Host recursion limit to run programs under; deep Filipe calls need many frames."""
    return int_from_env('FILIPE_RECURSION_LIMIT', 12000)


def get_log_level() -> int:
    name = os.environ.get('FILIPE_LOG_LEVEL', 'WARNING').strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(level: Optional[int] = None) -> None:
    """Attach a stderr handler to the `filipe` logger at the configured level."""
    logger = logging.getLogger('filipe')
    logger.setLevel(level if level is not None else get_log_level())
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter('%(name)s: %(levelname)s: %(message)s'))
        logger.addHandler(handler)
