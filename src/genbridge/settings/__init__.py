"""Settings: YAML-backed model, agent, and telemetry configuration."""

from genbridge.core.interface.config import ModelConfig
from genbridge.settings.errors import SettingsValidationError
from genbridge.settings.loader import SettingsLoader, load_settings
from genbridge.settings.models import AgentSettings, Settings, TelemetrySettings

__all__ = [
    "AgentSettings",
    "ModelConfig",
    "Settings",
    "SettingsLoader",
    "SettingsValidationError",
    "TelemetrySettings",
    "load_settings",
]
