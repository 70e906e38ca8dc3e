"""The middleware context created by initialization."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from rmwcore.init_options import InitOptions, zero_initialized_init_options


@dataclass
class Context:
    """State of one init/shutdown cycle."""

    instance_id: int = 0
    implementation_identifier: str | None = None
    options: InitOptions = field(default_factory=zero_initialized_init_options)
    actual_domain_id: int = 0
    impl: Any = None


def zero_initialized_context() -> Context:
    """Return a context that has not been initialized."""
    return Context()