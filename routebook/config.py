"""Configurazione centrale per routebook.

Qui centralizziamo i parametri modificabili del compilatore (area di partenza,
labirinto, cartella del mondo, logging, modalità strict). Tutti i valori hanno
un default sensato e possono essere sovrascritti via variabili d'ambiente,
lette dai getter al momento della chiamata.
"""
from __future__ import annotations
import logging
import os
from pathlib import Path


def _get_str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    val = raw.strip()
    return val or default


def _get_bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    val = raw.strip().lower()
    return val in {"1", "true", "yes", "on"}


# ---------------- Route state seeds ----------------
DEFAULT_START_AREA_ID: str = "1_1_1"
DEFAULT_START_TOWN_ID: str = "1_1_town"
ENV_START_AREA = "RB_START_AREA"
ENV_START_TOWN = "RB_START_TOWN"


def get_start_area_id() -> str:
    """Area the player stands in when a run begins. Var: RB_START_AREA."""
    return _get_str_env(ENV_START_AREA, DEFAULT_START_AREA_ID)


def get_start_town_id() -> str:
    """Town a fresh run returns to before any town was entered. Var: RB_START_TOWN."""
    return _get_str_env(ENV_START_TOWN, DEFAULT_START_TOWN_ID)


# ---------------- Labyrinth ----------------
DEFAULT_LABYRINTH_AREA_ID: str = "Labyrinth_Airlock"
ENV_LABYRINTH_AREA = "RB_LABYRINTH_AREA"


def get_labyrinth_area_id() -> str:
    """Area where {ascend} is legal. Var: RB_LABYRINTH_AREA."""
    return _get_str_env(ENV_LABYRINTH_AREA, DEFAULT_LABYRINTH_AREA_ID)


# ---------------- World data ----------------
PACKAGED_WORLD_DIR: Path = Path(__file__).resolve().parent / "assets" / "world"
ENV_WORLD_DIR = "RB_WORLD_DIR"


def get_world_dir() -> Path:
    """Directory holding areas.json, kill_waypoints.json and quests.json.

    Precedence:
    1. Environment variable RB_WORLD_DIR
    2. PACKAGED_WORLD_DIR
    """
    raw = os.getenv(ENV_WORLD_DIR)
    if raw is None or not raw.strip():
        return PACKAGED_WORLD_DIR
    return Path(raw.strip()).expanduser()


# ---------------- Logging ----------------
DEFAULT_LOG_LEVEL: str = "WARNING"
ENV_LOG_LEVEL = "RB_LOG_LEVEL"


def get_log_level() -> int:
    """Level for the CLI root logger. Var: RB_LOG_LEVEL (name or number)."""
    raw = _get_str_env(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    if isinstance(level, int):
        return level
    # fallback silenzioso al default
    return logging.WARNING


# ---------------- CLI ----------------
DEFAULT_STRICT: bool = False
ENV_STRICT = "RB_STRICT"


def get_strict_default() -> bool:
    """Se True la CLI esce con 1 quando ci sono diagnostiche, anche senza --strict. Var: RB_STRICT."""
    return _get_bool_env(ENV_STRICT, DEFAULT_STRICT)


__all__ = [
    # State seeds
    "DEFAULT_START_AREA_ID", "DEFAULT_START_TOWN_ID", "get_start_area_id", "get_start_town_id",
    # Labyrinth
    "DEFAULT_LABYRINTH_AREA_ID", "get_labyrinth_area_id",
    # World data
    "PACKAGED_WORLD_DIR", "get_world_dir",
    # Logging / CLI
    "DEFAULT_LOG_LEVEL", "get_log_level", "DEFAULT_STRICT", "get_strict_default",
]
