"""Options controlling how peers are discovered."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from rmwcore.ret import InvalidArgumentError

STATIC_PEERS_MAX_LENGTH = 256


class AutomaticDiscoveryRange(IntEnum):
    """How far automatic discovery reaches."""

    NOT_SET = 0
    OFF = 1
    LOCALHOST = 2
    SUBNET = 3
    SYSTEM_DEFAULT = 4


@dataclass(eq=False)
class DiscoveryOptions:
    """Discovery range plus a list of statically configured peer addresses."""

    automatic_discovery_range: AutomaticDiscoveryRange = AutomaticDiscoveryRange.NOT_SET
    static_peers: list[str] = field(default_factory=list)

    @property
    def static_peers_count(self) -> int:
        return len(self.static_peers)

    def init(self, size: int) -> None:
        """Prepare ``size`` empty peer slots; the options must be zero initialized."""
        if size < 0:
            raise InvalidArgumentError("size must not be negative")
        if self.static_peers:
            raise InvalidArgumentError("discovery_options must be zero initialized")
        if self.automatic_discovery_range is AutomaticDiscoveryRange.NOT_SET:
            self.automatic_discovery_range = AutomaticDiscoveryRange.LOCALHOST
        self.static_peers = [""] * size

    def copy(self) -> DiscoveryOptions:
        """Return an independent copy, truncating overlong peer addresses."""
        duplicate = DiscoveryOptions()
        duplicate.init(self.static_peers_count)
        duplicate.automatic_discovery_range = self.automatic_discovery_range
        duplicate.static_peers = [
            peer[: STATIC_PEERS_MAX_LENGTH - 1] for peer in self.static_peers
        ]
        return duplicate

    def fini(self) -> None:
        """Release the peers and return to the zero-initialized state."""
        self.automatic_discovery_range = AutomaticDiscoveryRange.NOT_SET
        self.static_peers = []

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DiscoveryOptions):
            return NotImplemented
        if self.automatic_discovery_range != other.automatic_discovery_range:
            return False
        if self.static_peers_count != other.static_peers_count:
            return False
        return all(
            left[:STATIC_PEERS_MAX_LENGTH] == right[:STATIC_PEERS_MAX_LENGTH]
            for left, right in zip(self.static_peers, other.static_peers)
        )

    __hash__ = None  # type: ignore[assignment]


def zero_initialized_discovery_options() -> DiscoveryOptions:
    """Return options with no range set and no peers."""
    return DiscoveryOptions()