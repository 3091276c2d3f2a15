import pytest

from infranet.dns import (
    DNSMASQ_CONTAINER_IMAGE,
    DNSData,
    DNSDataSpec,
    DNSHost,
    DNSMasq,
    DNSMasqDefaults,
    DNSMasqOption,
    DNSMasqSpec,
    setup_defaults,
    setup_dnsmasq_defaults,
)
from infranet.meta import Condition, ConditionStatus, Conditions, ObjectMeta

ENV = "RELATED_IMAGE_INFRA_DNSMASQ_IMAGE_URL_DEFAULT"


@pytest.fixture(autouse=True)
def reset_defaults():
    yield
    setup_dnsmasq_defaults(DNSMasqDefaults())


def test_spec_defaults():
    spec = DNSMasqSpec()
    assert spec.replicas == 1
    assert spec.dns_data_label_selector_value == "dnsdata"
    assert DNSDataSpec().dns_data_label_selector_value == "dnsdata"


def test_default_fills_container_image():
    setup_dnsmasq_defaults(DNSMasqDefaults(container_image_url="registry.example.com/dnsmasq:1"))
    dnsmasq = DNSMasq(metadata=ObjectMeta(name="dns"))
    dnsmasq.default()
    assert dnsmasq.spec.container_image == "registry.example.com/dnsmasq:1"


def test_default_keeps_explicit_image():
    setup_dnsmasq_defaults(DNSMasqDefaults(container_image_url="registry.example.com/dnsmasq:1"))
    dnsmasq = DNSMasq(spec=DNSMasqSpec(container_image="mine"))
    dnsmasq.default()
    assert dnsmasq.spec.container_image == "mine"


def test_setup_defaults_falls_back_to_builtin_image(monkeypatch):
    monkeypatch.delenv(ENV, raising=False)
    setup_defaults()
    spec = DNSMasqSpec()
    spec.default()
    assert spec.container_image == DNSMASQ_CONTAINER_IMAGE


def test_setup_defaults_reads_environment(monkeypatch):
    monkeypatch.setenv(ENV, "registry.example.com/other:2")
    setup_defaults()
    spec = DNSMasqSpec()
    spec.default()
    assert spec.container_image == "registry.example.com/other:2"


def test_rbac_names():
    dnsmasq = DNSMasq(metadata=ObjectMeta(name="dns", namespace="openstack"))
    assert dnsmasq.rbac_resource_name() == "dnsmasq-dns"
    assert dnsmasq.rbac_namespace() == "openstack"


def test_rbac_conditions_set_and_ready():
    dnsmasq = DNSMasq()
    assert dnsmasq.is_ready() is False
    dnsmasq.rbac_conditions_set(Condition(type="Ready", status=ConditionStatus.TRUE))
    assert dnsmasq.is_ready() is True
    dnsmasq.rbac_conditions_set(Condition(type="Ready", status=ConditionStatus.FALSE))
    assert dnsmasq.is_ready() is False


def test_dnsdata_is_ready():
    data = DNSData(spec=DNSDataSpec(hosts=[DNSHost(ip="10.0.0.1", hostnames=["a"])]))
    assert data.is_ready() is False
    data.status.conditions = Conditions([Condition(type="Ready", status=ConditionStatus.TRUE)])
    assert data.is_ready() is True


def test_validation_accepts_everything():
    dnsmasq = DNSMasq(metadata=ObjectMeta(name="dns"))
    assert dnsmasq.validate_create() == []
    assert dnsmasq.validate_update(DNSMasq()) == []
    assert dnsmasq.validate_delete() == []


def test_option_key_is_checked():
    option = DNSMasqOption(key="server", values=["1.1.1.1"])
    assert option.values == ["1.1.1.1"]
    with pytest.raises(ValueError):
        DNSMasqOption(key="bogus-option")