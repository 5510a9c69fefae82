# Auto-generated __init__.py

from . import settings
from .settings import DEFAULT_SETTINGS
from .settings import load_settings
from . import sri
from .sri import main

__all__ = [
    "settings",
    "sri",
    "DEFAULT_SETTINGS",
    "load_settings",
    "main",
]
