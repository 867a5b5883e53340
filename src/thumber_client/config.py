"""
Client configuration.

A ClientConfig is built once at startup and never mutated afterwards; the
client and signer only read from it, so it can be shared freely between
threads. Use ``replace()`` to derive a modified copy.

Environment Variable Mapping (``ClientConfig.from_env``):
    THUMBER_UID       -> uid
    THUMBER_SECRET    -> secret
    THUMBER_CALLBACK  -> callback
    THUMBER_ENDPOINT  -> endpoint
    THUMBER_TIMEOUT   -> timeout
    THUMBER_DEBUG     -> debug
"""

from __future__ import annotations
import dataclasses
import os
import platform
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional

from . import __version__

DEFAULT_ENDPOINT = "http://api.thumber.co"


def default_user_agent() -> str:
    return (
        f"thumber-client-python/{__version__} "
        f"(Python {platform.python_version()}; {platform.platform()})"
    )


@dataclass(frozen=True)
class ClientConfig:
    """Configuration for the Thumber client."""

    uid: str
    secret: str = field(repr=False)
    callback: str = ""
    endpoint: str = DEFAULT_ENDPOINT
    timeout: float = 30.0
    verify_ssl: bool = True
    debug: bool = False
    user_agent: str = field(default_factory=default_user_agent)
    response_handler: Optional[Callable[[Any], Any]] = field(default=None, compare=False)

    def __post_init__(self):
        if not self.uid:
            raise ValueError("uid is required")
        if not self.secret:
            raise ValueError("secret is required")
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> ClientConfig:
        """
        Build a configuration from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``
            **overrides: Values taking precedence over the environment

        Returns:
            ClientConfig instance
        """
        env = os.environ if environ is None else environ
        values = {
            "uid": env.get("THUMBER_UID", ""),
            "secret": env.get("THUMBER_SECRET", ""),
            "callback": env.get("THUMBER_CALLBACK", ""),
            "endpoint": env.get("THUMBER_ENDPOINT", DEFAULT_ENDPOINT),
        }
        if "THUMBER_TIMEOUT" in env:
            values["timeout"] = float(env["THUMBER_TIMEOUT"])
        if "THUMBER_DEBUG" in env:
            values["debug"] = env["THUMBER_DEBUG"].strip().lower() in ("1", "true", "yes", "on")
        values.update(overrides)
        return cls(**values)

    def replace(self, **changes) -> ClientConfig:
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)
