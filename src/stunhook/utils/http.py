"""HTTP helpers.

Provides bounded reading of ``aiohttp`` response bodies so an oversized node
list cannot exhaust memory.

See Also:
    [Forwarder][stunhook.services.forwarder.service.Forwarder]: Reads the node
        list body with [read_bounded][stunhook.utils.http.read_bounded].
"""

from __future__ import annotations

import aiohttp


async def read_bounded(response: aiohttp.ClientResponse, max_size: int) -> bytes:
    """Read an entire response body with size enforcement.

    Accumulates chunks from the response stream until EOF or the size limit
    is exceeded. A single ``content.read(n)`` may return fewer bytes than
    requested under chunked transfer-encoding, hence the loop.

    Args:
        response: An aiohttp response whose body has not yet been consumed.
        max_size: Maximum allowed response body size in bytes.

    Returns:
        The complete response body.

    Raises:
        ValueError: If the response body exceeds *max_size*.
        aiohttp.ClientError: If the connection fails mid-body.
    """
    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await response.content.read(max_size + 1 - total)
        if not chunk:
            break
        total += len(chunk)
        if total > max_size:
            raise ValueError(f"Response body too large: >{max_size} bytes")
        chunks.append(chunk)
    return b"".join(chunks)
