"""
utils/config.py

🔧 Centralized configuration for the Focusify web shell.

Includes:
- Server port (via environment / .env)
- Desktop vs web application mode
"""

import os
from dataclasses import dataclass

# ========== Defaults ==========
DEFAULT_PORT = "3000"  # Used when PORT is unset or empty


# ========== Settings Object ==========

@dataclass(frozen=True)
class Config:
    """
    Immutable application settings, created once at startup.

    Attributes:
        port (str): Port the HTTP server binds to. Not validated here.
        is_desktop_app (bool): Whether the app runs as a desktop shell.
    """
    port: str
    is_desktop_app: bool


def load_config(is_desktop_app: bool = False) -> Config:
    """
    Build the application settings from the process environment.

    Args:
        is_desktop_app (bool): Mode flag chosen by the launcher.

    Returns:
        Config: Settings with PORT taken verbatim, or DEFAULT_PORT when empty.
    """
    port = os.getenv("PORT") or DEFAULT_PORT

    return Config(port=port, is_desktop_app=is_desktop_app)
