"""Quality-of-service policies and the predefined profiles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class HistoryPolicy(IntEnum):
    SYSTEM_DEFAULT = 0
    KEEP_LAST = 1
    KEEP_ALL = 2
    UNKNOWN = 3


class ReliabilityPolicy(IntEnum):
    SYSTEM_DEFAULT = 0
    RELIABLE = 1
    BEST_EFFORT = 2
    UNKNOWN = 3
    BEST_AVAILABLE = 4


class DurabilityPolicy(IntEnum):
    SYSTEM_DEFAULT = 0
    TRANSIENT_LOCAL = 1
    VOLATILE = 2
    UNKNOWN = 3
    BEST_AVAILABLE = 4


class LivelinessPolicy(IntEnum):
    SYSTEM_DEFAULT = 0
    AUTOMATIC = 1
    MANUAL_BY_NODE = 2
    MANUAL_BY_TOPIC = 3
    UNKNOWN = 4
    BEST_AVAILABLE = 5


class QoSCompatibility(IntEnum):
    """Outcome of checking a publisher profile against a subscription profile."""

    OK = 0
    WARNING = 1
    ERROR = 2


@dataclass(frozen=True)
class QoSDuration:
    """A duration split into seconds and nanoseconds."""

    sec: int = 0
    nsec: int = 0


DURATION_UNSPECIFIED = QoSDuration(0, 0)
DURATION_INFINITE = QoSDuration(9223372036, 854775807)
DURATION_BEST_AVAILABLE = QoSDuration(9223372036, 854775806)

DEADLINE_DEFAULT = DURATION_UNSPECIFIED
DEADLINE_BEST_AVAILABLE = DURATION_BEST_AVAILABLE
LIFESPAN_DEFAULT = DURATION_UNSPECIFIED
LIVELINESS_LEASE_DURATION_DEFAULT = DURATION_UNSPECIFIED
LIVELINESS_LEASE_DURATION_BEST_AVAILABLE = DURATION_BEST_AVAILABLE

DEPTH_SYSTEM_DEFAULT = 0


@dataclass(frozen=True)
class QoSProfile:
    """A complete set of QoS policies."""

    history: HistoryPolicy = HistoryPolicy.KEEP_LAST
    depth: int = 10
    reliability: ReliabilityPolicy = ReliabilityPolicy.RELIABLE
    durability: DurabilityPolicy = DurabilityPolicy.VOLATILE
    deadline: QoSDuration = DEADLINE_DEFAULT
    lifespan: QoSDuration = LIFESPAN_DEFAULT
    liveliness: LivelinessPolicy = LivelinessPolicy.SYSTEM_DEFAULT
    liveliness_lease_duration: QoSDuration = LIVELINESS_LEASE_DURATION_DEFAULT
    avoid_ros_namespace_conventions: bool = False


SENSOR_DATA = QoSProfile(
    history=HistoryPolicy.KEEP_LAST,
    depth=5,
    reliability=ReliabilityPolicy.BEST_EFFORT,
    durability=DurabilityPolicy.VOLATILE,
)

PARAMETERS = QoSProfile(
    history=HistoryPolicy.KEEP_LAST,
    depth=1000,
    reliability=ReliabilityPolicy.RELIABLE,
    durability=DurabilityPolicy.VOLATILE,
)

DEFAULT = QoSProfile(
    history=HistoryPolicy.KEEP_LAST,
    depth=10,
    reliability=ReliabilityPolicy.RELIABLE,
    durability=DurabilityPolicy.VOLATILE,
)

SERVICES_DEFAULT = QoSProfile(
    history=HistoryPolicy.KEEP_LAST,
    depth=10,
    reliability=ReliabilityPolicy.RELIABLE,
    durability=DurabilityPolicy.VOLATILE,
)

PARAMETER_EVENTS = QoSProfile(
    history=HistoryPolicy.KEEP_LAST,
    depth=1000,
    reliability=ReliabilityPolicy.RELIABLE,
    durability=DurabilityPolicy.VOLATILE,
)

SYSTEM_DEFAULT = QoSProfile(
    history=HistoryPolicy.SYSTEM_DEFAULT,
    depth=DEPTH_SYSTEM_DEFAULT,
    reliability=ReliabilityPolicy.SYSTEM_DEFAULT,
    durability=DurabilityPolicy.SYSTEM_DEFAULT,
)

# Policies are settled when the endpoint is created, matching the majority of
# endpoints discovered at that time while keeping the highest level of service.
BEST_AVAILABLE = QoSProfile(
    history=HistoryPolicy.KEEP_LAST,
    depth=10,
    reliability=ReliabilityPolicy.BEST_AVAILABLE,
    durability=DurabilityPolicy.BEST_AVAILABLE,
    deadline=DEADLINE_BEST_AVAILABLE,
    liveliness=LivelinessPolicy.BEST_AVAILABLE,
    liveliness_lease_duration=LIVELINESS_LEASE_DURATION_BEST_AVAILABLE,
)

UNKNOWN = QoSProfile(
    history=HistoryPolicy.UNKNOWN,
    depth=DEPTH_SYSTEM_DEFAULT,
    reliability=ReliabilityPolicy.UNKNOWN,
    durability=DurabilityPolicy.UNKNOWN,
    liveliness=LivelinessPolicy.UNKNOWN,
)