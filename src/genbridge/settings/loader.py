"""Settings loading from YAML with environment interpolation."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from genbridge.settings.errors import SettingsValidationError
from genbridge.settings.models import Settings

logger = logging.getLogger(__name__)


class SettingsLoader:
    """Load and validate a settings YAML file into :class:`Settings`."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def load(self) -> Settings:
        """Read YAML, interpolate env vars, and validate.

        Environment variables in the form ``${VAR}`` or ``$VAR`` are expanded
        using :func:`os.path.expandvars` before YAML parsing. An empty file
        yields the defaults.

        Raises:
            SettingsValidationError: On I/O, YAML parse, or schema validation failures.
        """
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise SettingsValidationError(f"Cannot read {self._path}: {exc}") from exc

        expanded = os.path.expandvars(raw)

        try:
            data: Any = yaml.safe_load(expanded)
        except yaml.YAMLError as exc:
            raise SettingsValidationError(f"YAML parse error: {exc}") from exc

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise SettingsValidationError("Settings YAML must be a mapping")

        try:
            settings = Settings.model_validate(data)
        except ValidationError as exc:
            raise SettingsValidationError(str(exc)) from exc
        logger.debug("Loaded settings from %s", self._path)
        return settings


def load_settings(path: str | Path | None = None) -> Settings:
    """Load settings from *path*, or return the defaults when it is ``None``."""
    if path is None:
        return Settings()
    return SettingsLoader(Path(path)).load()
