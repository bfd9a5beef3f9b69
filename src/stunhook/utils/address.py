"""Public address parsing."""

from __future__ import annotations

from stunhook.core.exceptions import AddressParseError


def extract_port(address: str) -> str:
    """Return the text after the last ``:`` in *address*.

    Addresses may carry more than one colon (IPv6 hosts, annotations), so the
    last segment is taken rather than the second. The token is not checked to
    be numeric.

    Raises:
        AddressParseError: If *address* contains no colon.
    """
    parts = address.split(":")
    if len(parts) < 2:  # noqa: PLR2004 - host and port
        raise AddressParseError(f"invalid PublicAddr format: {address!r}")
    return parts[-1]
