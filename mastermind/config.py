"""
Single place to:
- Load env vars from a local .env if present
- Turn MASTERMIND_* variables into a frozen Settings object

Nothing is required; every setting has a default that reproduces the
classic game (6 attempts, secret shown at start, bad input ends the game).
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from .types import MAX_ATTEMPTS

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


@dataclass(frozen=True)
class Settings:
    max_attempts: int = MAX_ATTEMPTS
    show_secret: bool = True
    retry_invalid_input: bool = False
    seed: Optional[int] = None
    log_level: str = "WARNING"


def _get_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise RuntimeError(f"{name} must be a boolean (true/false), got {raw!r}.")


def _get_int(env: Mapping[str, str], name: str) -> Optional[int]:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}.") from None


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Read settings from `env`, or from os.environ (after loading .env) when not given.
    """
    if env is None:
        # dev convenience; a shell export always wins over .env
        load_dotenv()
        env = os.environ

    max_attempts = _get_int(env, "MASTERMIND_MAX_ATTEMPTS")
    if max_attempts is None:
        max_attempts = MAX_ATTEMPTS
    elif max_attempts < 1:
        raise RuntimeError("MASTERMIND_MAX_ATTEMPTS must be at least 1.")

    log_level = env.get("MASTERMIND_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"

    return Settings(
        max_attempts=max_attempts,
        show_secret=_get_bool(env, "MASTERMIND_SHOW_SECRET", True),
        retry_invalid_input=_get_bool(env, "MASTERMIND_RETRY_INVALID", False),
        seed=_get_int(env, "MASTERMIND_SEED"),
        log_level=log_level,
    )
