from __future__ import annotations

from .cli import main
from .env import settings_from_env
from ..settings import CodecSettings

__all__ = ["CodecSettings", "settings_from_env", "main"]
