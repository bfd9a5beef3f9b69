"""stunhook exception hierarchy.

Every failure of a forwarding run maps to exactly one exception kind. Kinds
are flat: each concrete class derives directly from the base and carries a
``kind`` label used when the failure is reported.

```text
StunhookError (base -- never raised directly)
├── UsageError          -- wrong command-line arguments
├── ConfigurationError  -- bad YAML or config values
├── FetchListError      -- node list request failed or was not 200
├── DecodeError         -- node list body is not a valid document
├── NodeNotFoundError   -- no node with the requested name
├── AddressParseError   -- public address has no colon
├── URLComposeError     -- substituted template is not a valid URL
└── DispatchError       -- target request failed at the transport level
```

Every kind is terminal. Callers chain the underlying error with
``raise ... from`` so the transport or parser message survives.
"""

from __future__ import annotations

from typing import ClassVar


class StunhookError(Exception):
    """Base exception for all stunhook errors.

    Never raised directly -- always use a specific subclass.
    """

    kind: ClassVar[str] = "StunhookError"


class UsageError(StunhookError):
    """Wrong number or shape of command-line arguments."""

    kind = "UsageError"


class ConfigurationError(StunhookError):
    """Invalid or missing configuration (YAML file or CLI flags)."""

    kind = "ConfigurationError"


class FetchListError(StunhookError):
    """The node list request failed, returned a non-200 status, or was oversized."""

    kind = "FetchListError"


class DecodeError(StunhookError):
    """The node list body is not JSON or does not match the document shape."""

    kind = "DecodeError"


class NodeNotFoundError(StunhookError):
    """No node in the decoded list carries the requested name."""

    kind = "NodeNotFound"


class AddressParseError(StunhookError):
    """A node's public address has fewer than two colon-delimited segments."""

    kind = "MalformedAddress"


class URLComposeError(StunhookError):
    """The template, after port substitution, is not a well-formed URL."""

    kind = "InvalidTargetURL"


class DispatchError(StunhookError):
    """The request to the composed URL failed before a status was received.

    A non-200 status on this request is not an error.
    """

    kind = "DispatchError"
