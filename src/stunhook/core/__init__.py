"""Core layer: logging, exceptions, and config file loading.

Sits at the bottom of the dependency graph. It imports nothing else from
``stunhook`` so ``models``, ``utils`` and ``services`` can all raise its
exceptions and use its logger.

Attributes:
    Logger: Structured logger supporting key=value and JSON output modes.
        See [Logger][stunhook.core.logger.Logger].
    StunhookError: Base of the flat exception hierarchy.
        See [stunhook.core.exceptions][stunhook.core.exceptions].
    load_yaml: Safe YAML loading.
        See [load_yaml()][stunhook.core.yaml.load_yaml].
"""

from .exceptions import (
    AddressParseError,
    ConfigurationError,
    DecodeError,
    DispatchError,
    FetchListError,
    NodeNotFoundError,
    StunhookError,
    URLComposeError,
    UsageError,
)
from .logger import Logger, StructuredFormatter, format_kv_pairs
from .yaml import load_yaml


__all__ = [
    "AddressParseError",
    "ConfigurationError",
    "DecodeError",
    "DispatchError",
    "FetchListError",
    "Logger",
    "NodeNotFoundError",
    "StructuredFormatter",
    "StunhookError",
    "URLComposeError",
    "UsageError",
    "format_kv_pairs",
    "load_yaml",
]
