"""Service layer: orchestration on top of ``models``, ``utils`` and ``core``.

Attributes:
    Forwarder: Fetches the node list, resolves a node's port and calls the
        composed target URL. See [Forwarder][stunhook.services.forwarder.Forwarder].
    ForwarderConfig: Timeout, body size limit and log format for a run.
"""

from .forwarder import Forwarder, ForwarderConfig


__all__ = ["Forwarder", "ForwarderConfig"]
