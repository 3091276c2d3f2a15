"""DNS data and dnsmasq resources with their admission defaults."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any

from infranet.meta import READY_CONDITION, Condition, Conditions, ObjectMeta

log = logging.getLogger(__name__)

ANNOTATION_HOSTNAME_KEY = "dnsmasq.network.openstack.org/hostname"
DNS_DATA_LABEL_SELECTOR_KEY = "dnsmasqhosts"
DNSMASQ_CONTAINER_IMAGE = (
    "quay.io/podified-antelope-centos9/openstack-neutron-server:current-podified"
)
_IMAGE_ENV_VAR = "RELATED_IMAGE_INFRA_DNSMASQ_IMAGE_URL_DEFAULT"

DNSMASQ_OPTION_KEYS = frozenset(
    {
        "server",
        "rev-server",
        "srv-host",
        "txt-record",
        "ptr-record",
        "rebind-domain-ok",
        "naptr-record",
        "cname",
        "host-record",
        "caa-record",
        "dns-rr",
        "auth-zone",
        "synth-domain",
        "no-negcache",
        "local",
    }
)


@dataclass
class DNSHost:
    """An address and the host names that resolve to it."""

    ip: str
    hostnames: list[str] = field(default_factory=list)


@dataclass
class DNSDataSpec:
    """Desired state of DNSData."""

    hosts: list[DNSHost] = field(default_factory=list)
    dns_data_label_selector_value: str = "dnsdata"


@dataclass
class DNSDataStatus:
    """Observed state of DNSData."""

    conditions: Conditions = field(default_factory=Conditions)
    hash: str = ""
    observed_generation: int = 0


@dataclass
class DNSData:
    """Host entries to be served by dnsmasq."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: DNSDataSpec = field(default_factory=DNSDataSpec)
    status: DNSDataStatus = field(default_factory=DNSDataStatus)

    def is_ready(self) -> bool:
        """True when the Ready condition is set."""
        return self.status.conditions.is_true(READY_CONDITION)


@dataclass
class DNSMasqOption:
    """A dnsmasq option and its values."""

    key: str
    values: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.key not in DNSMASQ_OPTION_KEYS:
            raise ValueError(f"unsupported dnsmasq option: {self.key}")


@dataclass
class DNSMasqDefaults:
    """Defaults applied to DNSMasq specs."""

    container_image_url: str = ""


_defaults = DNSMasqDefaults()


def setup_dnsmasq_defaults(defaults: DNSMasqDefaults) -> None:
    """Install the defaults used when defaulting DNSMasq specs."""
    global _defaults
    _defaults = defaults
    log.info("DNSMasq defaults initialized: %s", defaults)


def setup_defaults() -> None:
    """Initialise DNSMasq defaults from the environment."""
    setup_dnsmasq_defaults(
        DNSMasqDefaults(
            container_image_url=os.environ.get(_IMAGE_ENV_VAR, DNSMASQ_CONTAINER_IMAGE)
        )
    )


@dataclass
class DNSMasqSpec:
    """Desired state of a DNSMasq instance."""

    container_image: str = ""
    replicas: int | None = 1
    options: list[DNSMasqOption] = field(default_factory=list)
    node_selector: dict[str, str] = field(default_factory=dict)
    dns_data_label_selector_value: str = "dnsdata"
    override: dict[str, Any] = field(default_factory=dict)

    def default(self) -> None:
        """Fill in the container image from the installed defaults when unset."""
        if not self.container_image:
            self.container_image = _defaults.container_image_url


@dataclass
class DNSMasqStatus:
    """Observed state of a DNSMasq instance."""

    conditions: Conditions = field(default_factory=Conditions)
    hash: dict[str, str] = field(default_factory=dict)
    ready_count: int = 0
    dns_addresses: list[str] = field(default_factory=list)
    dns_cluster_addresses: list[str] = field(default_factory=list)
    observed_generation: int = 0


@dataclass
class DNSMasq:
    """A dnsmasq DNS service."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: DNSMasqSpec = field(default_factory=DNSMasqSpec)
    status: DNSMasqStatus = field(default_factory=DNSMasqStatus)

    def is_ready(self) -> bool:
        """True when the Ready condition is set."""
        return self.status.conditions.is_true(READY_CONDITION)

    def rbac_conditions_set(self, condition: Condition) -> None:
        """Record a condition reported by the RBAC setup."""
        self.status.conditions.set(condition)

    def rbac_namespace(self) -> str:
        """Namespace for the RBAC objects."""
        return self.metadata.namespace

    def rbac_resource_name(self) -> str:
        """Name for the service account, role and role binding."""
        return "dnsmasq-" + self.metadata.name

    def default(self) -> None:
        """Apply defaults to the spec."""
        log.info("default name=%s", self.metadata.name)
        self.spec.default()

    def validate_create(self) -> list[str]:
        """Accept creation; returns admission warnings."""
        log.info("validate create name=%s", self.metadata.name)
        return []

    def validate_update(self, old: DNSMasq) -> list[str]:
        """Accept any update; returns admission warnings."""
        log.info("validate update name=%s", self.metadata.name)
        return []

    def validate_delete(self) -> list[str]:
        """Accept deletion; returns admission warnings."""
        log.info("validate delete name=%s", self.metadata.name)
        return []