"""Lazy settings for camrig.

Settings are uppercase module attributes layered in this order:

1. ``camrig.conf.global_settings`` (defaults)
2. the module named by the ``CAMRIG_SETTINGS_MODULE`` environment variable
   (``settings`` when unset)
3. ``settings.configure(**options)`` calls

A game's settings module only lists what it changes::

    # settings.py
    SCREEN_WIDTH = 1920
    SCREEN_HEIGHT = 1080
    CAMERA_PAN_SPEED = 6.0
    BOSS_ARENA_SHAKE = 800.0  # custom settings are kept too

and camera code reads them through the shared proxy::

    from camrig.conf import settings

    shake.add_trauma("boss", settings.BOSS_ARENA_SHAKE)

Nothing is imported until the first setting is read. A settings module that
does not exist is skipped; one that exists but fails to import raises.
"""

from __future__ import annotations

import importlib
import logging
import os
from typing import TYPE_CHECKING, Any

from camrig.conf import global_settings

if TYPE_CHECKING:
    from types import ModuleType

logger = logging.getLogger(__name__)

SETTINGS_MODULE_ENV = "CAMRIG_SETTINGS_MODULE"
"""Environment variable naming the user settings module."""

DEFAULT_SETTINGS_MODULE = "settings"


def _names_module(missing: str | None, module_path: str) -> bool:
    """Whether a missing module name is the settings module or one of its packages."""
    if not missing:
        return False
    return module_path == missing or module_path.startswith(f"{missing}.")


def _import_settings_module(module_path: str, *, explicit: bool) -> ModuleType | None:
    try:
        return importlib.import_module(module_path)
    except ModuleNotFoundError as exc:
        if not _names_module(exc.name, module_path):
            raise
    if explicit:
        logger.warning("Settings module '%s' not found, using camrig defaults", module_path)
    else:
        logger.debug("No '%s' module, using camrig defaults", module_path)
    return None


class Settings:
    """Attribute container filled from the uppercase names of each source in turn."""

    def __init__(self, *sources: ModuleType) -> None:
        for source in (global_settings, *sources):
            for name in dir(source):
                if name.isupper():
                    setattr(self, name, getattr(source, name))


class LazySettings:
    """Proxy that builds its Settings on first access.

    Attribute reads and writes go to the wrapped Settings. Setting
    ``_wrapped`` back to None makes the next access reload everything,
    which is how the test suite resets between tests.
    """

    def __init__(self) -> None:
        self._wrapped: Settings | None = None

    def _setup(self) -> None:
        module_path = os.environ.get(SETTINGS_MODULE_ENV)
        explicit = module_path is not None
        module = _import_settings_module(module_path or DEFAULT_SETTINGS_MODULE, explicit=explicit)
        self._wrapped = Settings() if module is None else Settings(module)
        if module is not None:
            logger.debug("Loaded settings from '%s'", module.__name__)

    def _settings(self) -> Settings:
        if self._wrapped is None:
            self._setup()
        return self._wrapped

    def __getattr__(self, name: str) -> Any:  # noqa: ANN401
        return getattr(self._settings(), name)

    def __setattr__(self, name: str, value: Any) -> None:  # noqa: ANN401
        if name == "_wrapped":
            self.__dict__["_wrapped"] = value
        else:
            setattr(self._settings(), name, value)

    def configure(self, **options: Any) -> None:  # noqa: ANN401
        """Override settings in code, skipping the user settings module.

        Example:
            settings.configure(SHAKE_MAX_TRAUMA=500.0, CAMERA_PAN_SPEED=8.0)
        """
        if self._wrapped is None:
            self._wrapped = Settings()
        for name, value in options.items():
            setattr(self._wrapped, name, value)

    def is_configured(self) -> bool:
        """Whether settings have been loaded or configured."""
        return self._wrapped is not None


settings = LazySettings()

__all__ = ["LazySettings", "Settings", "global_settings", "settings"]
