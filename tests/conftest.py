"""
Pytest configuration and shared fixtures for stunhook tests.

Provides:
- Sample node list payloads shaped like the real API
- Mock aiohttp response and session factories
"""

from __future__ import annotations

import json
import logging
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest


# ============================================================================
# Logging Configuration
# ============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Configure logging for tests."""
    logging.basicConfig(level=logging.DEBUG)


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def node_a_dict() -> dict[str, Any]:
    """A fully populated node as the API reports it."""
    return {
        "Key": "k1",
        "Name": "node-a",
        "StunType": "tcp",
        "Enable": True,
        "DisablePortForward": False,
        "LastLogs": "",
        "StunLocalAddr": "0.0.0.0:6000",
        "TargetAddrList": ["192.168.1.10:80"],
        "PublicAddr": "203.0.113.5:51413",
        "PublicAddrInfo": "ok",
        "PublicAddrHistroy": [
            {"AddrRecord": "203.0.113.5:50000", "UpdateTime": "2024-01-01 00:00:00"},
        ],
        "WebhookEnable": True,
        "WebhookProxy": "",
        "WebhookCallTime": "2024-01-01 00:00:01",
        "WebhookCallResult": True,
        "WebhookCallErrorMsg": "",
        "WebhookCallHistroy": ["called"],
        "GlobalWebhook": False,
        "GlobalWebhookCallTime": "",
        "GlobalWebhookCallResult": False,
        "GlobalWebhookCallErrorMsg": "",
        "GlobalWebhookCallHistroy": [],
        "Options": {
            "SingleProxyMaxTCPConnections": 256,
            "SingleProxyMaxUDPReadTargetDatagoroutineCount": 4,
            "UDPSessionTimeout": 60000,
            "SafeMode": "blacklist",
            "TCPListenTLS": False,
            "TCPRelayTLS": True,
            "TCPRelayTLSServerName": "backend.lan",
            "TCPRelayTLSInsecureSkipVerify": False,
            "TCPStreamEncryptionSource": False,
            "TCPStreamEncryptionAccept": False,
            "TCPStreamEncryptionKey": "",
            "SinglePortSpeedLimit": False,
            "SinglePortSendSpeedLimit": 0,
            "SinglePortReceSpeedLimit": 0,
            "RuleSpeedLimit": True,
            "RuleSendSpeedLimit": 1024,
            "RuleReceSpeedLimit": 2048,
            "UDPPacketSize": 1500,
            "UDPPacketSourceEncryption": False,
            "UDPPacketAcceptEncryption": False,
            "UDPPacketEncryptionKey": "",
        },
    }


@pytest.fixture
def node_list_dict(node_a_dict: dict[str, Any]) -> dict[str, Any]:
    """A node list document with two nodes and statistics."""
    return {
        "ModuleEnable": True,
        "list": [
            node_a_dict,
            {"Key": "k2", "Name": "node-b", "PublicAddr": "2001:db8::1:9999"},
        ],
        "ret": 0,
        "statistics": {
            "k1": {
                "TrafficIn": 100,
                "TrafficOut": 200,
                "TCPCurrentConnections": 3,
                "UDPCurrentConnections": 0,
            },
        },
        "webhookHistory": ["ignored"],
    }


@pytest.fixture
def node_list_body(node_list_dict: dict[str, Any]) -> bytes:
    """The node list document encoded as a response body."""
    return json.dumps(node_list_dict).encode()


# ============================================================================
# aiohttp Mock Factories
# ============================================================================


def make_response(status: int = 200, body: bytes = b"") -> MagicMock:
    """Build a mock aiohttp response usable with ``async with``.

    ``content.read()`` yields *body* once, then EOF.
    """
    response = MagicMock()
    response.status = status
    response.content.read = AsyncMock(side_effect=[body, b""] if body else [b""])
    response.__aenter__ = AsyncMock(return_value=response)
    response.__aexit__ = AsyncMock(return_value=None)
    return response


def make_session(*responses: Any) -> MagicMock:
    """Build a mock aiohttp session whose ``get()`` returns *responses* in order.

    An exception instance in *responses* is raised by the matching ``get()``.
    """
    session = MagicMock()
    session.get = MagicMock(side_effect=list(responses))
    session.__aenter__ = AsyncMock(return_value=session)
    session.__aexit__ = AsyncMock(return_value=None)
    return session


@pytest.fixture
def response_factory():
    """Factory for mock aiohttp responses."""
    return make_response


@pytest.fixture
def session_factory():
    """Factory for mock aiohttp sessions."""
    return make_session
