"""Node list API models and run records. Zero I/O.

Attributes:
    NodeListDocument: Decoded node list response, with
        [find_node()][stunhook.models.node_list.find_node] lookup.
    StunNode: One port-forward node (name, public address, pass-through
        options and webhook state).
    ForwardRequest: Explicit input of a forwarding run.
    ForwardResult: Output of a successful forwarding run.
"""

from .forward import ForwardRequest, ForwardResult
from .node import AddrRecord, NodeOptions, NodeStatistics, StunNode
from .node_list import NodeListDocument, find_node


__all__ = [
    "AddrRecord",
    "ForwardRequest",
    "ForwardResult",
    "NodeListDocument",
    "NodeOptions",
    "NodeStatistics",
    "StunNode",
    "find_node",
]
