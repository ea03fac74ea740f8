from typing import Any, Dict, Optional

import yaml

from stackerrors import error
from stackerrors.logging import logger

DEFAULT_MAX_STACK_DEPTH = 50


class Settings:
    def __init__(self, max_stack_depth: int) -> None:
        self._max_stack_depth = max_stack_depth

    def max_stack_depth(self) -> int:
        """
        The maximum number of frames recorded for any annotated error. Deeper
        stacks are truncated.
        """
        return self._max_stack_depth


class SettingsBuilder:
    def __init__(self) -> None:
        self._max_stack_depth = DEFAULT_MAX_STACK_DEPTH

    def use_max_stack_depth(self, depth: int) -> "SettingsBuilder":
        if type(depth) != int or depth < 1:
            raise error.StackErrorsError(
                f"max_stack_depth must be a positive integer, got {depth!r}"
            )

        self._max_stack_depth = depth
        return self

    def load_file(self, path: str) -> "SettingsBuilder":
        with open(path, "r", encoding="utf-8") as file:
            loaded = yaml.load(file.read(), yaml.SafeLoader)

        if loaded is None:
            return self
        if type(loaded) != dict:
            raise error.StackErrorsError(f"Settings file '{path}' must contain a mapping")

        options: Dict[str, Any] = loaded
        for key, value in options.items():
            if key == "max_stack_depth":
                self.use_max_stack_depth(value)
            else:
                raise error.StackErrorsError(f"Unknown setting '{key}' in '{path}'")

        return self

    def _build(self) -> Settings:
        return Settings(self._max_stack_depth)


_settings_builder = SettingsBuilder()
_settings: Optional[Settings] = None


def setup() -> SettingsBuilder:
    return _settings_builder


def commit() -> Settings:
    global _settings

    if _settings is not None:
        logger.warn("Settings were already in use, replacing them")

    _settings = _settings_builder._build()
    return _settings


def settings() -> Settings:
    if _settings is None:
        return commit()

    return _settings
