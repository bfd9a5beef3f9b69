"""Forwarder service: republish a STUN node's public port to a target URL.

A run is five sequential steps with no retries:

1. **Fetch** the node list (``GET list_url``). Anything other than HTTP 200
   fails the run.
2. **Decode** the body into a
   [NodeListDocument][stunhook.models.node_list.NodeListDocument].
3. **Look up** the first node whose name equals the requested name.
4. **Compose** the target URL from the node's port and the template.
5. **Dispatch** ``GET target_url``. Any status code is a success; only a
   transport failure fails the run.

Each step raises its own [StunhookError][stunhook.core.exceptions.StunhookError]
subclass, so the caller can report the failing step without inspecting
messages.

Examples:
    ```python
    from stunhook.models import ForwardRequest
    from stunhook.services.forwarder import Forwarder

    request = ForwardRequest(
        name="node-a",
        list_url="http://lucky.lan:16601/api/stunrulelist",
        template="http://backend:port/health",
    )
    result = await Forwarder().run(request)
    result.status  # 200
    ```
"""

from __future__ import annotations

from http import HTTPStatus
from typing import TYPE_CHECKING

import aiohttp

from stunhook.core.exceptions import DispatchError, FetchListError, NodeNotFoundError
from stunhook.core.logger import Logger
from stunhook.models import ForwardRequest, ForwardResult, NodeListDocument, StunNode
from stunhook.utils.address import extract_port
from stunhook.utils.http import read_bounded
from stunhook.utils.url import build_target_url

from .configs import ForwarderConfig


if TYPE_CHECKING:
    from collections.abc import Callable


_TRANSPORT_ERRORS = (OSError, TimeoutError, aiohttp.ClientError, ValueError)


def _describe(error: BaseException) -> str:
    return str(error) or type(error).__name__


class Forwarder:
    """Run the fetch, decode, lookup, compose, dispatch sequence.

    A single ``aiohttp.ClientSession`` serves both requests and is closed
    when the run ends, successfully or not. Every response is consumed inside
    ``async with`` so its connection is released on every path.
    """

    SERVICE_NAME = "forwarder"

    def __init__(self, config: ForwarderConfig | None = None) -> None:
        self._config = config if config is not None else ForwarderConfig()
        self._logger = Logger(self.SERVICE_NAME, json_output=self._config.json_logs)

    @property
    def config(self) -> ForwarderConfig:
        """The forwarder configuration (read-only)."""
        return self._config

    async def run(
        self,
        request: ForwardRequest,
        *,
        on_port: Callable[[str], None] | None = None,
        on_target: Callable[[str], None] | None = None,
    ) -> ForwardResult:
        """Execute one forwarding run.

        Args:
            request: Node name, list URL and target template.
            on_port: Called with the port as soon as it is extracted.
            on_target: Called with the target URL before it is requested.

        Raises:
            FetchListError: Node list request failed, was not 200, or its
                body exceeded ``max_size``.
            DecodeError: Node list body is not a valid document.
            NodeNotFoundError: No node has the requested name.
            AddressParseError: The node's public address has no colon.
            URLComposeError: The substituted template is not a valid URL.
            DispatchError: The target request failed at the transport level.
        """
        timeout = aiohttp.ClientTimeout(total=self._config.timeout)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            body = await self._fetch_list(session, request.list_url)
            document = NodeListDocument.from_json(body)
            self._logger.debug(
                "list_decoded",
                nodes=len(document.nodes),
                ret=document.ret,
                module_enable=document.module_enable,
            )

            node = self._lookup(document, request.name)
            port = extract_port(node.public_addr)
            if on_port is not None:
                on_port(port)

            target_url = build_target_url(request.template, port)
            self._logger.info("target_composed", port=port, url=target_url)
            if on_target is not None:
                on_target(target_url)

            status = await self._dispatch(session, target_url)

        return ForwardResult(node=node, port=port, target_url=target_url, status=status)

    async def _fetch_list(self, session: aiohttp.ClientSession, url: str) -> bytes:
        try:
            async with session.get(url) as resp:
                if resp.status != HTTPStatus.OK:
                    raise FetchListError(
                        f"first request to {url} failed with status code: {resp.status}"
                    )
                body = await read_bounded(resp, self._config.max_size)
        except _TRANSPORT_ERRORS as e:
            raise FetchListError(
                f"failed to send first request to {url}: {_describe(e)}"
            ) from e

        self._logger.info("list_fetched", url=url, size=len(body))
        return body

    def _lookup(self, document: NodeListDocument, name: str) -> StunNode:
        node = document.find_node(name)
        if node is None:
            raise NodeNotFoundError(f"no node found with Name {name!r} in first response")

        duplicates = sum(1 for n in document.nodes if n.name == name)
        if duplicates > 1:
            self._logger.warning("duplicate_node_name", name=name, count=duplicates)

        self._logger.info("node_found", name=name, public_addr=node.public_addr)
        return node

    async def _dispatch(self, session: aiohttp.ClientSession, url: str) -> int:
        try:
            async with session.get(url) as resp:
                status = resp.status
        except _TRANSPORT_ERRORS as e:
            raise DispatchError(f"failed to send third request to {url}: {_describe(e)}") from e

        self._logger.info("target_dispatched", url=url, status=status)
        return status
