"""Runtime settings read from the environment.

Command-line options in cli.py take precedence; click fills them from the
same variables when they are not given.
"""
from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Mapping, Optional

FRONTENDS = ("qt", "terminal")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _truthy_env(value: Optional[str], default: bool = True) -> bool:
    if value is None:
        return default
    return value.strip().lower() not in {"0", "false", "no", "off", ""}


@dataclass
class Settings:
    frontend: str = "qt"
    log_level: str = "WARNING"
    log_file: Optional[str] = None
    # Alt screen default ON; disable with KANBAN_ALT_SCREEN=0 (or false/no/off)
    alt_screen: bool = True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        frontend = env.get("KANBAN_FRONTEND", "qt").strip().lower()
        level = env.get("KANBAN_LOG_LEVEL", "WARNING").strip().upper()
        return cls(
            frontend=frontend if frontend in FRONTENDS else "qt",
            log_level=level if level in LOG_LEVELS else "WARNING",
            log_file=env.get("KANBAN_LOG_FILE") or None,
            alt_screen=_truthy_env(env.get("KANBAN_ALT_SCREEN"), True),
        )
