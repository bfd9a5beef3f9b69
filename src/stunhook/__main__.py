"""CLI entry point for stunhook.

Looks up a STUN port-forward node by name, takes the port from its public
address, substitutes it into a URL template and requests that URL.

Examples:
    ```bash
    stunhook node-a http://lucky.lan:16601/api/stunrulelist "http://backend:port/health"
    python -m stunhook node-a http://lucky.lan:16601/api/stunrulelist \\
        "http://backend:port/health" --timeout 10 --log-level INFO
    ```

Exit status is 0 when the target request got any response, 1 on every
failure (including wrong arguments) and 130 on keyboard interrupt.
"""

from __future__ import annotations

import argparse
import asyncio
import functools
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, NoReturn

from stunhook import __version__
from stunhook.core.exceptions import ConfigurationError, StunhookError, UsageError
from stunhook.core.logger import Logger, StructuredFormatter
from stunhook.models import ForwardRequest, ForwardResult
from stunhook.services.forwarder import Forwarder, ForwarderConfig


if TYPE_CHECKING:
    from collections.abc import Sequence


EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

_EPILOG = (
    'Every occurrence of the text "port" in the template is replaced, '
    'including inside host names or paths (e.g. "portal" becomes "<port>al"). '
    'Put "--" before the positionals to pass a node name starting with "-", '
    'e.g. "stunhook -- -node http://api/list http://backend:port/".'
)


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises ``UsageError`` instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = _ArgumentParser(
        prog="stunhook",
        description="Forward a STUN node's public port to a templated URL",
        epilog=_EPILOG,
    )

    parser.add_argument("name", metavar="Name", help="Node name to look up (exact match)")
    parser.add_argument("list_url", metavar="FirstURL", help="Node list API URL")
    parser.add_argument(
        "template",
        metavar="ThirdURLTemplate",
        help='Target URL template; "port" is replaced with the node port',
    )

    parser.add_argument("--config", type=Path, help="Optional YAML config file")
    parser.add_argument(
        "--timeout",
        type=float,
        help="Per-request timeout in seconds (default: no timeout)",
    )
    parser.add_argument("--max-size", type=int, help="Maximum node list body size in bytes")
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=None,
        help="Emit log lines as JSON objects",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Log level (default: WARNING)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Raises:
        UsageError: On a missing, extra, or malformed argument.
    """
    return build_parser().parse_args(argv)


def setup_logging(level: str) -> None:
    """Install a ``StructuredFormatter`` handler on the root logger (stderr)."""
    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level))


def load_config(args: argparse.Namespace) -> ForwarderConfig:
    """Build the run configuration: YAML file first, then CLI flags on top.

    Raises:
        ConfigurationError: If the file or any value is invalid.
    """
    config = ForwarderConfig.from_yaml(args.config) if args.config else ForwarderConfig()
    return config.with_overrides(
        timeout=args.timeout,
        max_size=args.max_size,
        json_logs=args.json_logs,
    )


def report_port(name: str, port: str) -> None:
    print(f"Port from PublicAddr ({name}): {port}", flush=True)


def report_target(url: str) -> None:
    print(f"Generated third URL: {url}", flush=True)


def report_status(result: ForwardResult) -> None:
    print(f"Third request status code: {result.status}", flush=True)


async def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run the forwarder, and return the exit status."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        parser.print_usage(sys.stdout)
        print(f"{parser.prog}: error: {e}")
        return EXIT_FAILURE

    setup_logging(args.log_level)

    try:
        config = load_config(args)
    except ConfigurationError as e:
        Logger("cli").error("config_failed", kind=e.kind, error=str(e))
        return EXIT_FAILURE

    logger = Logger("cli", json_output=config.json_logs)
    request = ForwardRequest(name=args.name, list_url=args.list_url, template=args.template)

    # Port and URL lines print as each step completes; the status line only on success
    try:
        result = await Forwarder(config).run(
            request,
            on_port=functools.partial(report_port, request.name),
            on_target=report_target,
        )
    except StunhookError as e:
        logger.error("forward_failed", kind=e.kind, error=str(e))
        return EXIT_FAILURE
    except Exception as e:  # CLI error boundary for unexpected failures
        logger.exception("forward_failed", kind=type(e).__name__, error=str(e))
        return EXIT_FAILURE

    report_status(result)
    return EXIT_OK


def cli() -> None:
    """Synchronous entry point for console_scripts."""
    try:
        code = asyncio.run(main())
    except KeyboardInterrupt:
        code = EXIT_INTERRUPTED
    sys.exit(code)


if __name__ == "__main__":
    cli()
