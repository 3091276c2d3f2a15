"""Transport URL resources for the message bus."""

from __future__ import annotations

from dataclasses import dataclass, field

from infranet.meta import TRANSPORT_URL_READY_CONDITION, Conditions, ObjectMeta


@dataclass
class TransportURLSpec:
    """Desired state of a TransportURL."""

    rabbitmq_cluster_name: str


@dataclass
class TransportURLStatus:
    """Observed state of a TransportURL."""

    conditions: Conditions = field(default_factory=Conditions)
    secret_name: str = ""
    observed_generation: int = 0


@dataclass
class TransportURL:
    """A transport URL for a message bus cluster."""

    spec: TransportURLSpec
    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    status: TransportURLStatus = field(default_factory=TransportURLStatus)

    def is_ready(self) -> bool:
        """True when the transport URL is configured and operational."""
        return self.status.conditions.is_true(TRANSPORT_URL_READY_CONDITION)