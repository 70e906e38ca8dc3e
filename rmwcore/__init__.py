"""Return codes, QoS profiles, events, sequences, discovery and init options, and namespace validation."""

__version__ = "0.1.0"

__all__ = [
    "context",
    "discovery_options",
    "event",
    "init_options",
    "message_sequence",
    "qos",
    "ret",
    "validate_namespace",
]