"""Forwarder service package.

Re-exports the public symbols::

    from stunhook.services.forwarder import Forwarder, ForwarderConfig
"""

from .configs import DEFAULT_MAX_SIZE, ForwarderConfig
from .service import Forwarder


__all__ = ["DEFAULT_MAX_SIZE", "Forwarder", "ForwarderConfig"]
