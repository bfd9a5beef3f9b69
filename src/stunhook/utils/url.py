"""Target URL composition.

Builds the URL of the second request by substituting a port token into a
template and validating the result with ``rfc3986``.

Warning:
    Substitution is textual. *Every* ``port`` substring in the template is
    replaced, including ones inside hostnames or path segments:
    ``http://portal.example.com:port/`` with port ``80`` becomes
    ``http://80al.example.com:80/``.
"""

from __future__ import annotations

from rfc3986 import uri_reference
from rfc3986.exceptions import RFC3986Exception
from rfc3986.validators import Validator

from stunhook.core.exceptions import URLComposeError


PORT_TOKEN = "port"

_VALIDATOR = (
    Validator()
    .allow_use_of_password()
    .require_presence_of("scheme", "host")
    .check_validity_of("scheme", "userinfo", "host", "port", "path", "query", "fragment")
)


def build_target_url(template: str, port: str) -> str:
    """Substitute *port* into *template* and return the normalized URL.

    Args:
        template: URL template containing the literal token ``port``.
        port: Port token, used verbatim.

    Returns:
        The normalized URL string. Scheme and host are lower-cased and
        percent escapes upper-cased by ``rfc3986``.

    Raises:
        URLComposeError: If the substituted string lacks a scheme or host, or
            any component is malformed.
    """
    candidate = template.replace(PORT_TOKEN, port)
    uri = uri_reference(candidate)

    # Validate before normalizing: normalize() silently drops an unparsable authority
    try:
        _VALIDATOR.validate(uri)
    except RFC3986Exception as e:
        raise URLComposeError(f"invalid target URL {candidate!r}: {e}") from e

    return uri.normalize().unsplit()
