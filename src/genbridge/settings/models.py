"""Pydantic models for the settings YAML consumed by the ``genbridge`` CLI."""

from __future__ import annotations

from pydantic import BaseModel, Field

from genbridge.core.agent.memory import DEFAULT_MAX_MESSAGES
from genbridge.core.interface.config import ModelConfig


class TelemetrySettings(BaseModel):
    """Optional telemetry configuration."""

    enabled: bool = False
    otlp_endpoint: str | None = None


class AgentSettings(BaseModel):
    """Agent loop and chat memory configuration."""

    system_prompt: str | None = None
    max_messages: int = Field(default=DEFAULT_MAX_MESSAGES, ge=1)
    max_iterations: int = Field(default=10, ge=1)


class Settings(BaseModel):
    """Top-level settings parsed from YAML.

    Example::

        model:
          chat_model: gemini-2.0-flash
          api_key: ${GEMINI_API_KEY}
        agent:
          system_prompt: You are a helpful assistant.
        telemetry:
          enabled: true
    """

    model: ModelConfig = Field(default_factory=ModelConfig)
    agent: AgentSettings = Field(default_factory=AgentSettings)
    telemetry: TelemetrySettings = Field(default_factory=TelemetrySettings)
