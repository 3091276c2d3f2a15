# infranet

Plain Python resource models for describing a deployment's networking:
networks and subnets (`NetConfig`), per-host IP requests (`IPSet`), IP
reservations (`Reservation`), DNS host data (`DNSData`), dnsmasq instances
(`DNSMasq`) and message-bus transport URLs (`TransportURL`), together with
the object metadata and status conditions they share.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `infranet.meta` – `GroupVersion` and `GroupVersionKind` (with
  `NETWORK_GROUP_VERSION` and `RABBITMQ_GROUP_VERSION`), `ObjectMeta`,
  `ConditionStatus`, `Condition` and `Conditions`, plus the condition type
  names and message templates such as `READY_CONDITION` and
  `RESERVATION_READY_CONDITION`.
- `infranet.netconfig` – `NetConfig`, `Network`, `Subnet`, `AllocationRange`,
  `Route`, `IPSet` with its spec, status and reservations, and `Reservation`
  with `IPAddress` and `ObjectReference`.
- `infranet.dns` – `DNSData`, `DNSHost`, `DNSMasq`, `DNSMasqSpec`,
  `DNSMasqOption` and the defaulting helpers `setup_dnsmasq_defaults` and
  `setup_defaults`.
- `infranet.transport` – `TransportURL`, `TransportURLSpec` and
  `TransportURLStatus`.

## Usage

Looking up networks and subnets by name (case-insensitive; a missing name
raises `LookupError`):

```python
from infranet.netconfig import AllocationRange, NetConfig, NetConfigSpec, Network, Subnet

subnet = Subnet(
    name="subnet1",
    cidr="172.17.0.0/24",
    gateway="172.17.0.1",
    allocation_ranges=[AllocationRange(start="172.17.0.10", end="172.17.0.20")],
)
netcfg = NetConfig(spec=NetConfigSpec(networks=[
    Network(name="internalapi", dns_domain="internalapi.example.com", subnets=[subnet]),
]))

network, found = netcfg.get_net_and_subnet("InternalApi", "SUBNET1")
```

Tracking readiness with conditions. `Conditions.set` replaces a condition of
the same type and keeps its transition time when the status is unchanged:

```python
from infranet.meta import READY_CONDITION, Condition, ConditionStatus
from infranet.dns import DNSMasq

dnsmasq = DNSMasq()
dnsmasq.rbac_conditions_set(Condition(type=READY_CONDITION, status=ConditionStatus.TRUE))
assert dnsmasq.is_ready()
```

Defaulting a dnsmasq spec. `setup_defaults()` takes the container image from
the `RELATED_IMAGE_INFRA_DNSMASQ_IMAGE_URL_DEFAULT` environment variable,
falling back to `DNSMASQ_CONTAINER_IMAGE`; `DNSMasq.default()` then fills in
the image when the spec leaves it empty:

```python
from infranet.dns import DNSMasq, setup_defaults

setup_defaults()
dnsmasq = DNSMasq()
dnsmasq.default()
print(dnsmasq.spec.container_image)
```

`DNSMasqOption` accepts only the dnsmasq option keys listed in
`DNSMASQ_OPTION_KEYS` and raises `ValueError` for any other.
`DNSMasq.validate_create`, `validate_update` and `validate_delete` accept
every request and return an empty list of warnings.

## What this package does not do

It holds the resources and their small helpers only. It does not check a
network configuration or an IP set for correctness: CIDRs, gateways,
allocation ranges, duplicate names or domains, and changes between versions
are not validated. It has no API client, no storage, no controllers and no
webhook server, and it does not reserve addresses or write dnsmasq
configuration.