"""
Input and output records of a single forwarding run.

Both are frozen dataclasses. The CLI builds a
[ForwardRequest][stunhook.models.forward.ForwardRequest] from its arguments
and hands it to the forwarder, so nothing below the CLI reads process state.
"""

from __future__ import annotations

from dataclasses import dataclass

from .node import StunNode


@dataclass(frozen=True, slots=True)
class ForwardRequest:
    """What to forward.

    Attributes:
        name: Display name of the node to look up.
        list_url: URL of the node list API.
        template: Target URL template. Every ``port`` substring is replaced
            with the node's port.
    """

    name: str
    list_url: str
    template: str


@dataclass(frozen=True, slots=True)
class ForwardResult:
    """What a successful run produced.

    Attributes:
        node: The matched node.
        port: Port token taken from the node's public address.
        target_url: Normalized URL the second request was sent to.
        status: HTTP status of the second request, whatever its value.
    """

    node: StunNode
    port: str
    target_url: str
    status: int
