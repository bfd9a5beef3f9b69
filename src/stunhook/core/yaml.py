"""YAML configuration loading.

Uses ``yaml.safe_load`` so only plain YAML types (strings, numbers, lists,
mappings) are ever constructed from a config file.

Examples:
    ```python
    from stunhook.core.yaml import load_yaml

    config = load_yaml("stunhook.yaml")
    ```

See Also:
    [ForwarderConfig.from_yaml()][stunhook.services.forwarder.configs.ForwarderConfig.from_yaml]:
        The consumer that validates the returned mapping.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def load_yaml(config_path: str | Path) -> dict[str, Any]:
    """Load and parse a YAML configuration file.

    Args:
        config_path: Path to the YAML file (absolute or relative).

    Returns:
        Parsed configuration mapping. An empty file yields an empty dict.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the file contains invalid YAML syntax.
        ValueError: If the document is not a mapping at the top level.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping, got {type(data).__name__}")
    return data
