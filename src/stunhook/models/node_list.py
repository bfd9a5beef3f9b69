"""
Node list document and name lookup.

[NodeListDocument][stunhook.models.node_list.NodeListDocument] is the body of
the node list API response. [find_node][stunhook.models.node_list.find_node]
selects a node by display name.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Self

from pydantic import Field, StrictBool, StrictInt

from stunhook.core.exceptions import DecodeError

from .base import BaseDocument
from .node import NodeStatistics, StunNode


if TYPE_CHECKING:
    from collections.abc import Iterable


def find_node(nodes: Iterable[StunNode], name: str) -> StunNode | None:
    """Return the first node whose name equals *name*, or ``None``.

    Names are compared exactly: case-sensitive, no trimming. Names are not
    unique in the API, so document order decides between duplicates.
    """
    for node in nodes:
        if node.name == name:
            return node
    return None


class NodeListDocument(BaseDocument):
    """Decoded node list response.

    Attributes:
        module_enable: Whether the STUN forwarding module is enabled.
        nodes: Nodes in document order (the ``list`` key).
        ret: API result code.
        statistics: Per-node counters keyed by node key.
    """

    module_enable: StrictBool = Field(default=False, alias="ModuleEnable")
    nodes: list[StunNode] = Field(default_factory=list, alias="list")
    ret: StrictInt = Field(default=0, alias="ret")
    statistics: dict[str, NodeStatistics] = Field(default_factory=dict, alias="statistics")

    @classmethod
    def from_json(cls, body: bytes | str) -> Self:
        """Decode a raw response body.

        Args:
            body: The response body as received.

        Returns:
            The decoded document.

        Raises:
            DecodeError: If the body is not JSON, is not an object at the
                top level, or a known field has the wrong type.
        """
        try:
            data = json.loads(body)
        except ValueError as e:
            raise DecodeError(f"invalid JSON in node list: {e}") from e

        # ValidationError subclasses ValueError
        try:
            return cls.model_validate(data)
        except ValueError as e:
            raise DecodeError(f"node list does not match expected shape: {e}") from e

    def find_node(self, name: str) -> StunNode | None:
        """Shorthand for ``find_node(self.nodes, name)``."""
        return find_node(self.nodes, name)
