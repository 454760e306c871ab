from __future__ import annotations
import os

from .errors import ConfigError

START_OF_PACKET = 4
START_OF_MESSAGE = 14

DEFAULT_WINDOW = START_OF_PACKET
DEFAULT_THRESHOLD = 100_000
DEFAULT_CAPACITY = 70_000_000
DEFAULT_REQUIRED = 30_000_000

# same toggle the puzzle runner uses to swap input.txt for demo-input.txt
MODE_ENV = "ADVENTATLAS_MODE"
DEMO_MODE = "TEST"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


def threshold() -> int:
    return _env_int("ADVENTATLAS_THRESHOLD", DEFAULT_THRESHOLD)


def capacity() -> int:
    return _env_int("ADVENTATLAS_CAPACITY", DEFAULT_CAPACITY)


def required() -> int:
    return _env_int("ADVENTATLAS_REQUIRED", DEFAULT_REQUIRED)


def demo_mode_from_env() -> bool:
    return os.getenv(MODE_ENV, "").strip().upper() == DEMO_MODE
