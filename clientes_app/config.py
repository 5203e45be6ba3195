"""
Design (config.py)
- Purpose: Centralize constants and the startup settings (Supabase endpoint + key).
- Inputs: Environment variables, optionally seeded from .env.local / .env.
- Outputs: Constants; Settings via load_settings().
- Side effects: load_settings() may read dotenv files into os.environ (never overriding).
- Thread-safety: Call load_settings() once from the main thread at startup.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

# Remote table and the columns this UI reads/writes
TABLE_NAME = "clientes"
SELECT_COLUMNS = "id, nome, email"
EDITABLE_FIELDS = ("nome", "email")

# Feedback banner lifetime (ms); re-armed whenever a new banner is set
FEEDBACK_CLEAR_MS = 4000

# maximum number of log lines kept in the Logs panel (oldest trimmed)
LOG_MAX_LINES = 1000

LOAD_ERROR_MESSAGE = "Nao foi possivel carregar os clientes. Tente novamente."
SAVE_SUCCESS_MESSAGE = "Cliente atualizado com sucesso."
SAVE_ERROR_PREFIX = "Erro ao atualizar cliente: "

WINDOW_TITLE = "Lista de Clientes"

# Env names; the VITE_ names are what the web build used, accepted as fallbacks
URL_ENV_NAMES = ("SUPABASE_URL", "VITE_SUPABASE_URL")
KEY_ENV_NAMES = ("SUPABASE_ANON_KEY", "VITE_SUPABASE_ANON_KEY")
DOTENV_FILES = (".env.local", ".env")

MISSING_SETTINGS_MESSAGE = "Defina SUPABASE_URL e SUPABASE_ANON_KEY no ambiente ou no arquivo .env.local"


class ConfigError(Exception):
    """Raised when a required startup setting is missing."""


@dataclass(frozen=True)
class Settings:
    supabase_url: str
    supabase_key: str
    log_level: str = "INFO"


def _first(environ: Mapping[str, str], names: tuple[str, ...]) -> str:
    for name in names:
        value = (environ.get(name) or "").strip()
        if value:
            return value
    return ""


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Purpose: Build Settings, failing fast when the URL or the key is absent.
    Inputs: environ mapping (defaults to os.environ after loading dotenv files).
    Outputs: Settings
    Side effects: When environ is None, .env.local and .env in the cwd are loaded
                  without overriding variables that are already set.
    """
    if environ is None:
        for filename in DOTENV_FILES:
            load_dotenv(filename, override=False)
        environ = os.environ

    url = _first(environ, URL_ENV_NAMES)
    key = _first(environ, KEY_ENV_NAMES)
    if not url or not key:
        raise ConfigError(MISSING_SETTINGS_MESSAGE)

    log_level = (environ.get("LOG_LEVEL") or "INFO").strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"LOG_LEVEL invalido: {log_level!r}")

    return Settings(supabase_url=url, supabase_key=key, log_level=log_level)
