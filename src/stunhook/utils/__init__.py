"""Address parsing, URL composition and HTTP body helpers.

Attributes:
    extract_port: Port token from a ``host:port`` public address.
        See [extract_port()][stunhook.utils.address.extract_port].
    build_target_url: Port substitution plus ``rfc3986`` validation.
        See [build_target_url()][stunhook.utils.url.build_target_url].
    read_bounded: Size-limited ``aiohttp`` body read.
        See [read_bounded()][stunhook.utils.http.read_bounded].
"""

from .address import extract_port
from .http import read_bounded
from .url import PORT_TOKEN, build_target_url


__all__ = ["PORT_TOKEN", "build_target_url", "extract_port", "read_bounded"]
