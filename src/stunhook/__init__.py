r"""stunhook -- republish a STUN port-forward node's public port.

Fetches a node list from a STUN port-forwarding API, finds a node by name,
takes the port from its public address and requests a URL built from a
template with that port.

Imports flow strictly downward:

```text
              services         Orchestration (Forwarder)
             /        \
         utils       models    Address/URL/HTTP helpers, API documents
             \        /
               core            Logger, exceptions, YAML loading
```

Note:
    Top-level imports (``from stunhook import Forwarder``) use lazy loading
    and resolve on first access.
"""

import importlib
from importlib.metadata import version as _get_version


__version__ = _get_version("stunhook")

__all__ = [
    "ForwardRequest",
    "ForwardResult",
    "Forwarder",
    "ForwarderConfig",
    "Logger",
    "NodeListDocument",
    "StunNode",
    "StunhookError",
    "build_target_url",
    "extract_port",
    "find_node",
]

_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "Logger": ("stunhook.core", "Logger"),
    "StunhookError": ("stunhook.core", "StunhookError"),
    "ForwardRequest": ("stunhook.models", "ForwardRequest"),
    "ForwardResult": ("stunhook.models", "ForwardResult"),
    "NodeListDocument": ("stunhook.models", "NodeListDocument"),
    "StunNode": ("stunhook.models", "StunNode"),
    "find_node": ("stunhook.models", "find_node"),
    "build_target_url": ("stunhook.utils", "build_target_url"),
    "extract_port": ("stunhook.utils", "extract_port"),
    "Forwarder": ("stunhook.services", "Forwarder"),
    "ForwarderConfig": ("stunhook.services", "ForwarderConfig"),
}


def __getattr__(name: str) -> object:
    if name in _LAZY_IMPORTS:
        module_path, attr_name = _LAZY_IMPORTS[name]
        module = importlib.import_module(module_path)
        value = getattr(module, attr_name)
        globals()[name] = value  # Cache for subsequent access
        return value
    raise AttributeError(f"module 'stunhook' has no attribute {name!r}")


def __dir__() -> list[str]:
    return __all__
