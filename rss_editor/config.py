from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from .exceptions import ConfigError
from .fetcher import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from .serializer import DEFAULT_LANGUAGE


@dataclass(frozen=True)
class EditorConfig:
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    language: str = DEFAULT_LANGUAGE
    log_level: str = "INFO"


def _float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from e
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {raw!r}")
    return value


def load_config(env: Optional[Mapping[str, str]] = None, *, dotenv: bool = True) -> EditorConfig:
    """
    Read settings from the environment (and a .env file when `dotenv` is set).

    RSS_EDITOR_TIMEOUT, RSS_EDITOR_USER_AGENT, RSS_EDITOR_LANGUAGE, RSS_EDITOR_LOG_LEVEL
    """
    if env is None:
        if dotenv:
            load_dotenv()
        env = os.environ
    return EditorConfig(
        timeout=_float(env, "RSS_EDITOR_TIMEOUT", DEFAULT_TIMEOUT),
        user_agent=env.get("RSS_EDITOR_USER_AGENT") or DEFAULT_USER_AGENT,
        language=env.get("RSS_EDITOR_LANGUAGE") or DEFAULT_LANGUAGE,
        log_level=(env.get("RSS_EDITOR_LOG_LEVEL") or "INFO").upper(),
    )
