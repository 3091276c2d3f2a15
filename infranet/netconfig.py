"""Network configuration, IP set and reservation resources."""

from __future__ import annotations

from dataclasses import dataclass, field

from infranet.meta import Conditions, ObjectMeta

NetName = str


@dataclass
class AllocationRange:
    """An inclusive range of addresses available for assignment."""

    start: str
    end: str


@dataclass
class Route:
    """A destination network reached through a next hop."""

    destination: str
    nexthop: str


@dataclass
class Subnet:
    """A subnet of a network."""

    name: NetName
    cidr: str
    allocation_ranges: list[AllocationRange] = field(default_factory=list)
    dns_domain: str | None = None
    vlan: int | None = None
    exclude_addresses: list[str] = field(default_factory=list)
    gateway: str | None = None
    routes: list[Route] = field(default_factory=list)


@dataclass
class Network:
    """A network of the deployment with its subnets."""

    name: NetName
    dns_domain: str
    subnets: list[Subnet] = field(default_factory=list)
    mtu: int = 1500


@dataclass
class NetConfigSpec:
    """Desired state of a NetConfig: all networks of the deployment."""

    networks: list[Network] = field(default_factory=list)


@dataclass
class NetConfig:
    """The network configuration of a namespace."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: NetConfigSpec = field(default_factory=NetConfigSpec)

    def get_net(self, name: NetName) -> Network:
        """Return the network called ``name``, compared case-insensitively."""
        wanted = name.casefold()
        for network in self.spec.networks:
            if network.name.casefold() == wanted:
                return network
        raise LookupError(f"no network with name: {name}")

    def get_net_and_subnet(self, name: NetName, subnet_name: NetName) -> tuple[Network, Subnet]:
        """Return the network ``name`` and its subnet ``subnet_name``."""
        network = self.get_net(name)
        wanted = subnet_name.casefold()
        for subnet in network.subnets:
            if subnet.name.casefold() == wanted:
                return network, subnet
        raise LookupError(f"no subnet found with name: {subnet_name} in network: {name}")


@dataclass
class IPSetNetwork:
    """A request for an address on one subnet of a network."""

    name: NetName
    subnet_name: NetName
    fixed_ip: str | None = None
    default_route: bool | None = None


@dataclass
class IPSetSpec:
    """Desired state of an IPSet."""

    networks: list[IPSetNetwork] = field(default_factory=list)
    immutable: bool = False


@dataclass
class IPSetReservation:
    """Reservation details for one requested network."""

    network: NetName
    subnet: NetName
    address: str
    dns_domain: str = ""
    mtu: int = 0
    cidr: str = ""
    vlan: int | None = None
    gateway: str | None = None
    routes: list[Route] = field(default_factory=list)


@dataclass
class IPSetStatus:
    """Observed state of an IPSet."""

    reservations: list[IPSetReservation] = field(default_factory=list)
    conditions: Conditions = field(default_factory=Conditions)
    observed_generation: int = 0


@dataclass
class IPSet:
    """A set of addresses requested on several networks."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: IPSetSpec = field(default_factory=IPSetSpec)
    status: IPSetStatus = field(default_factory=IPSetStatus)


@dataclass
class ObjectReference:
    """A reference to another API object."""

    kind: str = ""
    namespace: str = ""
    name: str = ""
    uid: str = ""
    api_version: str = ""
    resource_version: str = ""
    field_path: str = ""


@dataclass
class IPAddress:
    """An address reserved on a subnet of a network."""

    network: NetName
    subnet: NetName
    address: str


@dataclass
class ReservationSpec:
    """Desired state of a Reservation, keyed by network name."""

    ipset_ref: ObjectReference = field(default_factory=ObjectReference)
    reservation: dict[str, IPAddress] = field(default_factory=dict)


@dataclass
class Reservation:
    """The addresses reserved for an IPSet."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: ReservationSpec = field(default_factory=ReservationSpec)