"""Options used when initializing the middleware."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from rmwcore.discovery_options import (
    DiscoveryOptions,
    zero_initialized_discovery_options,
)


class LocalhostOnly(IntEnum):
    """Whether communication is restricted to the local host."""

    DEFAULT = 0
    ENABLED = 1
    DISABLED = 2


@dataclass
class InitOptions:
    """Settings handed to middleware initialization.

    ``domain_id`` of ``None`` means the default domain is used.
    """

    instance_id: int = 0
    implementation_identifier: str | None = None
    domain_id: int | None = None
    security_options: Any = None
    localhost_only: LocalhostOnly = LocalhostOnly.DEFAULT
    discovery_options: DiscoveryOptions = field(
        default_factory=zero_initialized_discovery_options
    )
    enclave: str | None = None
    allocator: Any = None
    impl: Any = None

    def is_zero_initialized(self) -> bool:
        """Return True if no implementation has set these options up yet."""
        return (
            self.instance_id == 0
            and self.implementation_identifier is None
            and self.impl is None
            and self.enclave is None
        )


def zero_initialized_init_options() -> InitOptions:
    """Return init options holding only default values."""
    return InitOptions()