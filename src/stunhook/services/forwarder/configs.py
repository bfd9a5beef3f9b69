"""Forwarder configuration model.

Values come from an optional YAML file and are then overridden by CLI flags.

Examples:
    ```yaml
    timeout: 15
    max_size: 1048576
    json_logs: false
    ```

See Also:
    [Forwarder][stunhook.services.forwarder.Forwarder]: The service that
        consumes this configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Self

import yaml
from pydantic import BaseModel, ConfigDict, Field

from stunhook.core.exceptions import ConfigurationError
from stunhook.core.yaml import load_yaml


DEFAULT_MAX_SIZE = 10 * 1024 * 1024


class ForwarderConfig(BaseModel):
    """Tunables for a forwarding run.

    Attributes:
        timeout: Total timeout per request in seconds. ``None`` waits
            indefinitely.
        max_size: Largest node list body accepted, in bytes.
        json_logs: Emit log lines as JSON objects.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    timeout: float | None = Field(
        default=None, gt=0.0, description="Per-request timeout in seconds (None = no timeout)"
    )
    max_size: int = Field(
        default=DEFAULT_MAX_SIZE, ge=1, description="Maximum node list body size in bytes"
    )
    json_logs: bool = Field(default=False, description="Emit JSON log lines")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Validate a mapping, raising ``ConfigurationError`` on bad values."""
        # ValidationError subclasses ValueError
        try:
            return cls.model_validate(data)
        except ValueError as e:
            raise ConfigurationError(f"invalid configuration: {e}") from e

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> Self:
        """Load and validate a YAML config file.

        Raises:
            ConfigurationError: If the file is missing, unparsable, or holds
                invalid values.
        """
        try:
            data = load_yaml(config_path)
        except (OSError, yaml.YAMLError, ValueError) as e:
            raise ConfigurationError(f"cannot load config {config_path}: {e}") from e
        return cls.from_dict(data)

    def with_overrides(self, **overrides: Any) -> Self:
        """Return a copy with every non-``None`` override applied and re-validated."""
        updates = {k: v for k, v in overrides.items() if v is not None}
        if not updates:
            return self
        return type(self).from_dict({**self.model_dump(), **updates})
