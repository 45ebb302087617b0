"""
Process-wide SDK state: API key, TLS mode, logger and transport options.

Writers build a new immutable ``StateSnapshot`` and swap it in under a lock.
Each API call reads one snapshot up front, so a concurrent setter is either
fully visible to that call or not at all.

Author: Yobie Benjamin
Date: 2026-10-18
"""

from dataclasses import dataclass, field, replace
from threading import Lock
from types import MappingProxyType
from typing import Any, Mapping, Optional

from loguru import logger

from konduto.client.exceptions import ConfigurationError
from konduto.utils.logging import Logger, NullLogger, SafeLogger

# First character of sandbox (test) API keys
SANDBOX_KEY_PREFIX = "T"

# Keyword arguments accepted by requests.Session.request that callers may tune
ALLOWED_TRANSPORT_OPTIONS = frozenset(
    {"timeout", "proxies", "cert", "allow_redirects", "stream"}
)


@dataclass(frozen=True)
class StateSnapshot:
    """Immutable view of the configuration used by a single API call."""

    api_key: str = ""
    use_tls: bool = True
    logger: SafeLogger = field(default_factory=lambda: SafeLogger(NullLogger()))
    transport_options: Mapping[str, Any] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)


class ConfigState:
    """Guarded holder of the current StateSnapshot."""

    def __init__(self):
        self._lock = Lock()
        self._snapshot = StateSnapshot()

    def snapshot(self) -> StateSnapshot:
        """Return the current configuration."""
        return self._snapshot

    def set_api_key(self, api_key: str) -> bool:
        """
        Use ``api_key`` for every subsequent request.

        Keys starting with ``T`` are sandbox keys and switch TLS mode off.

        Raises:
            ConfigurationError: If the key is empty or not a string
        """
        if not isinstance(api_key, str) or not api_key:
            raise ConfigurationError("API key must be a non-empty string")

        use_tls = not api_key.startswith(SANDBOX_KEY_PREFIX)
        with self._lock:
            self._snapshot = replace(self._snapshot, api_key=api_key, use_tls=use_tls)

        logger.debug(f"Konduto API key set (tls={use_tls})")
        return True

    def set_logger(self, sink: Optional[Logger]) -> None:
        """Replace the request logger; None disables logging."""
        wrapped = SafeLogger(sink if sink is not None else NullLogger())
        with self._lock:
            self._snapshot = replace(self._snapshot, logger=wrapped)

    def set_transport_options(self, options: Mapping[str, Any]) -> None:
        """
        Replace the extra options passed to the transport on every request.

        Raises:
            ConfigurationError: If an option is not supported by the transport
        """
        unknown = set(options) - ALLOWED_TRANSPORT_OPTIONS
        if unknown:
            raise ConfigurationError(
                f"Unsupported transport options: {', '.join(sorted(unknown))}",
                details={"allowed": sorted(ALLOWED_TRANSPORT_OPTIONS)}
            )

        frozen = MappingProxyType(dict(options))
        with self._lock:
            self._snapshot = replace(self._snapshot, transport_options=frozen)

    def reset(self) -> None:
        """Drop all configuration (useful for testing)."""
        with self._lock:
            self._snapshot = StateSnapshot()


STATE = ConfigState()
