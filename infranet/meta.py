"""API group/version identifiers, object metadata and status conditions."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, Iterator


@dataclass(frozen=True)
class GroupVersionKind:
    """A fully qualified API kind."""

    group: str
    version: str
    kind: str

    @property
    def group_kind(self) -> str:
        """The kind qualified by its group, as in ``Kind.group``."""
        return f"{self.kind}.{self.group}" if self.group else self.kind


@dataclass(frozen=True)
class GroupVersion:
    """An API group together with one of its versions."""

    group: str
    version: str

    def with_kind(self, kind: str) -> GroupVersionKind:
        """Return the kind ``kind`` within this group and version."""
        return GroupVersionKind(self.group, self.version, kind)

    def __str__(self) -> str:
        return f"{self.group}/{self.version}" if self.group else self.version


NETWORK_GROUP_VERSION = GroupVersion(group="network.openstack.org", version="v1beta1")
RABBITMQ_GROUP_VERSION = GroupVersion(group="rabbitmq.openstack.org", version="v1beta1")


@dataclass
class ObjectMeta:
    """Identity and bookkeeping fields shared by all API objects."""

    name: str = ""
    namespace: str = ""
    generation: int = 0
    uid: str = ""
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)
    finalizers: list[str] = field(default_factory=list)
    deletion_timestamp: datetime | None = None

    def is_being_deleted(self) -> bool:
        """True once a deletion timestamp has been set on the object."""
        return self.deletion_timestamp is not None


class ConditionStatus(str, enum.Enum):
    """Status value of a condition."""

    TRUE = "True"
    FALSE = "False"
    UNKNOWN = "Unknown"


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Condition:
    """A single observed condition of an object."""

    type: str
    status: ConditionStatus = ConditionStatus.UNKNOWN
    reason: str = ""
    severity: str = ""
    message: str = ""
    last_transition_time: datetime = field(default_factory=_now)


class Conditions:
    """An ordered collection of conditions, at most one per type."""

    def __init__(self, conditions: Iterable[Condition] = ()) -> None:
        self._items: list[Condition] = []
        for condition in conditions:
            self.set(condition)

    def set(self, condition: Condition) -> None:
        """Add ``condition`` or replace the one of the same type.

        The transition time of the existing condition is kept when the
        status does not change.
        """
        for position, existing in enumerate(self._items):
            if existing.type == condition.type:
                if existing.status == condition.status:
                    condition.last_transition_time = existing.last_transition_time
                self._items[position] = condition
                return
        self._items.append(condition)

    def get(self, condition_type: str) -> Condition | None:
        """Return the condition of the given type, or None."""
        return next((c for c in self._items if c.type == condition_type), None)

    def is_true(self, condition_type: str) -> bool:
        """True if the condition of the given type exists and is True."""
        condition = self.get(condition_type)
        return condition is not None and condition.status is ConditionStatus.TRUE

    def __iter__(self) -> Iterator[Condition]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Conditions):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"Conditions({self._items!r})"


# Condition types
READY_CONDITION = "Ready"
RESERVATION_READY_CONDITION = "ReservationReady"
TRANSPORT_URL_READY_CONDITION = "TransportURLReady"

# Network condition messages
NET_CONFIG_ERROR_MESSAGE = "NetConfig error occured %s"
NET_CONFIG_MISSING_MESSAGE = "NetConfig missing in namespace %s"
RESERVATION_LIST_ERROR_MESSAGE = "Getting Reservations error occured %s"
RESERVATION_INIT_MESSAGE = "Reservation create not started"
RESERVATION_ERROR_MESSAGE = "Reservation error occured %s"
RESERVATION_MISMATCH_ERROR_MESSAGE = "Reservation reservations (%d) do not match requested (%d)"
RESERVATION_READY_MESSAGE = "Reservation successful"

# TransportURL condition messages
TRANSPORT_URL_READY_ERROR_MESSAGE = "TransportURL error occured %s"
TRANSPORT_URL_READY_INIT_MESSAGE = "TransportURL not configured"
TRANSPORT_URL_READY_MESSAGE = "TransportURL completed"
TRANSPORT_URL_IN_PROGRESS_MESSAGE = "TransportURL in progress"