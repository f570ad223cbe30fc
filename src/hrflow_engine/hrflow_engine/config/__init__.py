import importlib
import os
from types import ModuleType

from dotenv import load_dotenv


def get_settings_module() -> str:
    # Environment from APP_ENV, 'development' by default
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return f"{__name__}.production"

    if env in {"test", "testing"}:
        return f"{__name__}.testing"

    return f"{__name__}.development"


def load_settings() -> ModuleType:
    """Load .env (without overriding the real environment) and import the settings module."""
    load_dotenv(override=False)
    return importlib.import_module(get_settings_module())
