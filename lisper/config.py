from __future__ import annotations
import os


# Defaults
DEFAULT_MAX_DEPTH = 1024
DEFAULT_LOG_LEVEL = 'WARNING'
DEFAULT_REPL_HOST = '127.0.0.1'
DEFAULT_REPL_PORT = 8765


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def str_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    return raw.strip()


def get_max_recursion_depth() -> int:
    return int_from_env('LISPER_MAX_DEPTH', DEFAULT_MAX_DEPTH)


def get_log_level() -> str:
    return str_from_env('LISPER_LOG_LEVEL', DEFAULT_LOG_LEVEL).upper()


def get_repl_address() -> tuple[str, int]:
    return (
        str_from_env('LISPER_REPL_HOST', DEFAULT_REPL_HOST),
        int_from_env('LISPER_REPL_PORT', DEFAULT_REPL_PORT),
    )
