"""Unit tests for utils.http.read_bounded().

Tests:
- Single-read responses (fits in one read)
- Chunked responses (multiple reads required)
- Size enforcement across chunks
- Transport errors raised mid-body
"""

from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from stunhook.utils.http import read_bounded


def _mock_response(*chunks: bytes) -> MagicMock:
    """Build a mock aiohttp.ClientResponse that yields chunks then EOF."""
    resp = MagicMock()
    resp.content.read = AsyncMock(side_effect=[*chunks, b""])
    return resp


# =============================================================================
# Single Read
# =============================================================================


class TestReadBoundedSingleRead:
    """Bodies that fit in one read."""

    async def test_returns_full_body(self) -> None:
        resp = _mock_response(b'{"list": []}')

        assert await read_bounded(resp, max_size=1024) == b'{"list": []}'

    async def test_accepts_body_at_exact_limit(self) -> None:
        body = b"x" * 100
        resp = _mock_response(body)

        assert await read_bounded(resp, max_size=100) == body

    async def test_rejects_one_byte_over_limit(self) -> None:
        resp = _mock_response(b"x" * 101)

        with pytest.raises(ValueError, match="Response body too large"):
            await read_bounded(resp, max_size=100)

    async def test_returns_empty_body(self) -> None:
        resp = _mock_response()

        assert await read_bounded(resp, max_size=1024) == b""

    async def test_requests_one_byte_past_limit(self) -> None:
        """The first read asks for max_size + 1 so oversize is detectable."""
        resp = _mock_response(b"abc")

        await read_bounded(resp, max_size=10)

        resp.content.read.assert_any_await(11)


# =============================================================================
# Chunked Reads
# =============================================================================


class TestReadBoundedChunked:
    """Bodies delivered over several reads."""

    async def test_joins_chunks(self) -> None:
        resp = _mock_response(b'{"li', b'st": ', b"[]}")

        assert await read_bounded(resp, max_size=1024) == b'{"list": []}'

    async def test_limit_applies_across_chunks(self) -> None:
        resp = _mock_response(b"x" * 60, b"x" * 60)

        with pytest.raises(ValueError, match="Response body too large"):
            await read_bounded(resp, max_size=100)

    async def test_shrinks_request_size(self) -> None:
        """Later reads only ask for what is left of the budget."""
        resp = _mock_response(b"x" * 40, b"y" * 10)

        await read_bounded(resp, max_size=100)

        sizes = [c.args[0] for c in resp.content.read.await_args_list]
        assert sizes == [101, 61, 51]


class TestReadBoundedErrors:
    """Transport failures propagate unchanged."""

    async def test_client_error_propagates(self) -> None:
        resp = MagicMock()
        resp.content.read = AsyncMock(side_effect=aiohttp.ClientPayloadError("truncated"))

        with pytest.raises(aiohttp.ClientPayloadError):
            await read_bounded(resp, max_size=100)
